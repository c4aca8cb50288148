import pytest

from wsdl_debug import format_definitions
from wsdl_errors import WsdlError, WsdlErrorKind

EXPECTED_SERVICES = [
    "Service: WeatherService",
    "  Port: WeatherSoapPort -> WeatherSoapBinding @ soap http://example.com/weather/soap",
    "  Port: WeatherSoap12Port -> WeatherSoap12Binding @ soap12 http://example.com/weather/soap12",
    "  Port: WeatherHttpPort -> WeatherHttpBinding @ http http://example.com/weather/http",
]

EXPECTED_BINDINGS = [
    "Binding: WeatherSoapBinding -> WeatherPortType",
    "  GetWeather: soap urn:GetWeather",
    "  Ping: soap urn:Ping",
    "Binding: WeatherSoap12Binding -> WeatherPortType",
    "  GetWeather: soap12 urn:GetWeather12",
    "Binding: WeatherHttpBinding -> WeatherPortType",
    "  GetWeather: http /weather",
]

EXPECTED_PORT_TYPES = [
    "Port: WeatherPortType",
    "  GetWeather(ZIP: string) -> Forecast",
    "  Ping() -> ()",
]


def test_full_listing(weather):
    assert format_definitions(weather) == EXPECTED_SERVICES + EXPECTED_BINDINGS + EXPECTED_PORT_TYPES


def test_sections_keep_fixed_order(weather):
    assert format_definitions(weather, ["port-types", "services"]) == EXPECTED_SERVICES + EXPECTED_PORT_TYPES


def test_unknown_section(weather):
    with pytest.raises(ValueError):
        format_definitions(weather, ["operations"])


def test_several_outputs(make_definitions):
    definitions = make_definitions(
        '<wsdl:message name="In"><wsdl:part name="a" type="xsd:int"/><wsdl:part name="b" type="xsd:string"/></wsdl:message>'
        '<wsdl:message name="Ok"><wsdl:part name="r" type="xsd:boolean"/></wsdl:message>'
        '<wsdl:message name="Empty"/>'
        '<wsdl:portType name="P"><wsdl:operation name="Op">'
        '<wsdl:input message="tns:In"/><wsdl:output message="tns:Ok"/><wsdl:output message="tns:Empty"/>'
        '</wsdl:operation></wsdl:portType>'
    )
    assert format_definitions(definitions, ["port-types"]) == [
        "Port: P",
        "  Op(a: int, b: string) -> boolean | ()",
    ]


def test_errors_propagate(make_definitions):
    definitions = make_definitions('<wsdl:binding name="B" type="tns:Missing"/>')
    with pytest.raises(WsdlError) as excinfo:
        format_definitions(definitions, ["bindings"])
    assert excinfo.value.kind == WsdlErrorKind.INVALID_REFERENCE
