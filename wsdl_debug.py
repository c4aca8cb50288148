"""
wsdl_debug.py
Human-readable listings of the services, bindings and port types of a WSDL document.
"""
from typing import Iterable, List, Optional

from wsdl_model import Definitions, Message, PortOperation
from wsdl_transport import describe_transport

SECTIONS = ("services", "bindings", "port-types")


def _format_parameters(message: Optional[Message]) -> str:
    if message is None:
        return ""
    return ", ".join(f"{part.name()}: {part.typename().local}" for part in message.parts())


def _format_result(operation: PortOperation) -> str:
    results = []
    for message in operation.outputs():
        part = next(message.parts(), None)
        results.append(part.typename().local if part is not None else "()")
    if not results:
        return "()"
    return " | ".join(results)


def _print_services(definitions: Definitions, add_line):
    for service in definitions.services():
        add_line(f"Service: {service.name()}")
        for port in service.ports():
            add_line(f"  Port: {port.name()} -> {port.binding().name()} @ {describe_transport(port.address())}")


def _print_bindings(definitions: Definitions, add_line):
    for binding in definitions.bindings():
        add_line(f"Binding: {binding.name()} -> {binding.port_type().name()}")
        for operation in binding.operations():
            add_line(f"  {operation.name()}: {describe_transport(operation.transport_operation())}")


def _print_port_types(definitions: Definitions, add_line):
    for port_type in definitions.port_types():
        add_line(f"Port: {port_type.name()}")
        for operation in port_type.operations():
            add_line(f"  {operation.name()}({_format_parameters(operation.input())}) -> {_format_result(operation)}")


_PRINTERS = {
    "services": _print_services,
    "bindings": _print_bindings,
    "port-types": _print_port_types,
}


def format_definitions(definitions: Definitions, sections: Iterable[str] = SECTIONS) -> List[str]:
    """
    Build the listing of the requested sections, in the order services, bindings, port types.
    Any WsdlError raised while resolving references propagates to the caller.
    """
    wanted = set(sections)
    unknown = wanted - set(SECTIONS)
    if unknown:
        raise ValueError(f"Unknown section(s): {', '.join(sorted(unknown))}")
    lines: List[str] = []
    for section in SECTIONS:
        if section in wanted:
            _PRINTERS[section](definitions, lines.append)
    return lines
