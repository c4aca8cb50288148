import pytest

from wsdl_errors import WsdlError, WsdlErrorKind
from wsdl_model import ServicePort
from wsdl_transport import HttpAddress, Soap12Address, SoapAddress


def test_service_ports(weather):
    service = weather.service("WeatherService")
    ports = list(service.ports())
    assert all(isinstance(p, ServicePort) for p in ports)
    assert [p.name() for p in ports] == ["WeatherSoapPort", "WeatherSoap12Port", "WeatherHttpPort"]
    assert ports[0].service() == service


def test_service_port_binding(weather):
    port = weather.service("WeatherService").port("WeatherSoap12Port")
    assert port.binding() == weather.binding("WeatherSoap12Binding")


def test_service_port_addresses(weather):
    service = weather.service("WeatherService")
    assert service.port("WeatherSoapPort").address() == SoapAddress("http://example.com/weather/soap")
    assert service.port("WeatherSoap12Port").address() == Soap12Address("http://example.com/weather/soap12")
    assert service.port("WeatherHttpPort").address() == HttpAddress("http://example.com/weather/http")


def test_service_port_unknown_binding(make_definitions):
    definitions = make_definitions('<wsdl:service name="S"><wsdl:port name="P" binding="tns:Nope"/></wsdl:service>')
    port = definitions.service("S").port("P")
    with pytest.raises(WsdlError) as excinfo:
        port.binding()
    assert excinfo.value.kind == WsdlErrorKind.INVALID_REFERENCE
    assert excinfo.value.detail == "Nope"
    assert excinfo.value.node is port.node


def test_service_port_missing_binding(make_definitions):
    definitions = make_definitions('<wsdl:service name="S"><wsdl:port name="P"/></wsdl:service>')
    with pytest.raises(WsdlError) as excinfo:
        definitions.service("S").port("P").binding()
    assert excinfo.value.kind == WsdlErrorKind.MISSING_ATTRIBUTE
    assert excinfo.value.detail == "binding"


def test_service_port_missing_address(make_definitions):
    definitions = make_definitions('<wsdl:service name="S"><wsdl:port name="P" binding="tns:B"/></wsdl:service>')
    with pytest.raises(WsdlError) as excinfo:
        definitions.service("S").port("P").address()
    assert excinfo.value.kind == WsdlErrorKind.MISSING_ELEMENT
    assert excinfo.value.detail == "address"


def test_service_port_address_missing_location(make_definitions):
    definitions = make_definitions(
        '<wsdl:service name="S"><wsdl:port name="P" binding="tns:B"><soap:address/></wsdl:port></wsdl:service>'
    )
    with pytest.raises(WsdlError) as excinfo:
        definitions.service("S").port("P").address()
    assert excinfo.value.kind == WsdlErrorKind.MISSING_ATTRIBUTE
    assert excinfo.value.detail == "location"
