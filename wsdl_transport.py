"""
wsdl_transport.py
Classification of a binding operation's (or service port's) wire protocol by the namespace of its
nested ``operation`` (or ``address``) extension element.

The set of protocols is closed: SOAP 1.1, SOAP 1.2 and HTTP. Supporting another one means adding a
variant here and a branch in every consumer.
"""
import logging
from dataclasses import dataclass
from typing import Union

from lxml import etree

from wsdl_errors import WsdlError
from wsdl_namespaces import ADDRESS, NS_WSDL_HTTP, NS_WSDL_SOAP, NS_WSDL_SOAP12, OPERATION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Soap:
    action: str
    protocol = "soap"

    @property
    def value(self) -> str:
        return self.action


@dataclass(frozen=True)
class Soap12:
    action: str
    protocol = "soap12"

    @property
    def value(self) -> str:
        return self.action


@dataclass(frozen=True)
class Http:
    location: str
    protocol = "http"

    @property
    def value(self) -> str:
        return self.location


TransportOperation = Union[Soap, Soap12, Http]


@dataclass(frozen=True)
class SoapAddress:
    location: str
    protocol = "soap"


@dataclass(frozen=True)
class Soap12Address:
    location: str
    protocol = "soap12"


@dataclass(frozen=True)
class HttpAddress:
    location: str
    protocol = "http"


TransportAddress = Union[SoapAddress, Soap12Address, HttpAddress]

# namespace -> (variant, mandatory attribute)
_OPERATION_VARIANTS = {
    NS_WSDL_SOAP: (Soap, "soapAction"),
    NS_WSDL_SOAP12: (Soap12, "soapAction"),
    NS_WSDL_HTTP: (Http, "location"),
}

_ADDRESS_VARIANTS = {
    NS_WSDL_SOAP: SoapAddress,
    NS_WSDL_SOAP12: Soap12Address,
    NS_WSDL_HTTP: HttpAddress,
}


def _find_extension_element(node, local_name: str):
    """Return the first child of ``node`` with the given local name in any namespace, or None."""
    for child in node.iterchildren():
        if not isinstance(child.tag, str):
            continue
        if etree.QName(child).localname == local_name:
            return child
    return None


def _extension_namespace(node, local_name: str):
    element = _find_extension_element(node, local_name)
    if element is None:
        raise WsdlError.missing_element(node, local_name)
    namespace = etree.QName(element).namespace
    if namespace is None:
        raise WsdlError.missing_namespace(element)
    return element, namespace


def classify_transport_operation(node) -> TransportOperation:
    """
    Classify the transport details of a ``wsdl:binding/wsdl:operation`` element.

    Raises:
        WsdlError: MISSING_ELEMENT('operation') if there is no nested operation element,
            MISSING_NAMESPACE if it has no namespace, INVALID_NAMESPACE for an unknown
            namespace, MISSING_ATTRIBUTE for a missing soapAction/location
    """
    element, namespace = _extension_namespace(node, OPERATION)
    try:
        variant, attribute = _OPERATION_VARIANTS[namespace]
    except KeyError:
        raise WsdlError.invalid_namespace(element, namespace) from None
    value = element.get(attribute)
    if value is None:
        raise WsdlError.missing_attribute(element, attribute)
    logger.debug("Classified transport operation as %s (%s)", variant.protocol, value)
    return variant(value)


def classify_transport_address(node) -> TransportAddress:
    """Classify the ``address`` extension element of a ``wsdl:service/wsdl:port`` element."""
    element, namespace = _extension_namespace(node, ADDRESS)
    try:
        variant = _ADDRESS_VARIANTS[namespace]
    except KeyError:
        raise WsdlError.invalid_namespace(element, namespace) from None
    location = element.get("location")
    if location is None:
        raise WsdlError.missing_attribute(element, "location")
    return variant(location)


def describe_transport(transport) -> str:
    """Render a transport variant as '<protocol> <value>'."""
    if isinstance(transport, (Soap, Soap12)):
        return f"{transport.protocol} {transport.action}"
    if isinstance(transport, Http):
        return f"http {transport.location}"
    if isinstance(transport, (SoapAddress, Soap12Address, HttpAddress)):
        return f"{transport.protocol} {transport.location}"
    raise TypeError(f"Unknown transport variant: {transport!r}")
