import sys
import os
from tempfile import TemporaryDirectory
import pytest
from lxml import etree
# Ensure the project root is on sys.path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wsdl_model import Definitions

WSDL_DIR = os.path.join(os.path.dirname(__file__), "wsdl")

_WRAPPER = """<wsdl:definitions targetNamespace="http://example.com/test"
    xmlns:tns="http://example.com/test"
    xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
    xmlns:xsd="http://www.w3.org/2001/XMLSchema"
    xmlns:soap="http://schemas.xmlsoap.org/wsdl/soap/"
    xmlns:soap12="http://schemas.xmlsoap.org/wsdl/soap12/"
    xmlns:http="http://schemas.xmlsoap.org/wsdl/http/">{body}</wsdl:definitions>"""


@pytest.fixture
def weather_path():
    return os.path.join(WSDL_DIR, "weather.wsdl")


@pytest.fixture
def weather_tree(weather_path):
    return etree.parse(weather_path)


@pytest.fixture
def weather(weather_tree):
    """Definitions of the sample weather service."""
    return Definitions.from_document(weather_tree)


@pytest.fixture
def make_definitions():
    """Wrap a WSDL fragment in a definitions element declaring the usual prefixes."""
    def _make(body: str) -> Definitions:
        return Definitions.from_node(etree.fromstring(_WRAPPER.format(body=body)))
    return _make


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with TemporaryDirectory() as dir_path:
        yield dir_path
