"""
wsdl_errors.py
The single error type raised while navigating a WSDL document, and the kinds of fault it can carry.
"""
from enum import Enum
from typing import Any, Optional


class WsdlErrorKind(Enum):
    MISSING_ATTRIBUTE = "missing_attribute"
    MISSING_ELEMENT = "missing_element"
    MISSING_NAMESPACE = "missing_namespace"
    INVALID_REFERENCE = "invalid_reference"
    INVALID_NAMESPACE = "invalid_namespace"
    AMBIGUOUS_REFERENCE = "ambiguous_reference"
    NO_PARENT_NODE = "no_parent_node"


_MALFORMED_KINDS = (WsdlErrorKind.MISSING_ATTRIBUTE, WsdlErrorKind.MISSING_ELEMENT)

_MESSAGES = {
    WsdlErrorKind.MISSING_ATTRIBUTE: 'The input WSDL document was malformed: missing attribute "{detail}"',
    WsdlErrorKind.MISSING_ELEMENT: 'The input WSDL document was malformed: missing element "{detail}"',
    WsdlErrorKind.MISSING_NAMESPACE: "Element unexpectedly has no namespace",
    WsdlErrorKind.INVALID_REFERENCE: "Attempt to refer to unknown element {detail}",
    WsdlErrorKind.INVALID_NAMESPACE: "Unrecognised namespace {detail}",
    WsdlErrorKind.AMBIGUOUS_REFERENCE: "More than one match found for {detail}",
    WsdlErrorKind.NO_PARENT_NODE: "Node unexpectedly did not have a parent node",
}


class WsdlError(Exception):
    """
    Raised when a WSDL construct cannot be located or resolved.

    Attributes:
        node: The element where the fault was detected
        kind: The WsdlErrorKind describing the fault
        detail: The attribute name, element name, reference token or namespace involved
    """

    def __init__(self, node: Any, kind: WsdlErrorKind, detail: Optional[str] = None):
        self.node = node
        self.kind = kind
        self.detail = detail
        super().__init__(_MESSAGES[kind].format(detail=detail))

    @classmethod
    def missing_attribute(cls, node, name: str) -> "WsdlError":
        return cls(node, WsdlErrorKind.MISSING_ATTRIBUTE, name)

    @classmethod
    def missing_element(cls, node, name: str) -> "WsdlError":
        return cls(node, WsdlErrorKind.MISSING_ELEMENT, name)

    @classmethod
    def missing_namespace(cls, node) -> "WsdlError":
        return cls(node, WsdlErrorKind.MISSING_NAMESPACE)

    @classmethod
    def invalid_reference(cls, node, token: str) -> "WsdlError":
        return cls(node, WsdlErrorKind.INVALID_REFERENCE, token)

    @classmethod
    def invalid_namespace(cls, node, uri: str) -> "WsdlError":
        return cls(node, WsdlErrorKind.INVALID_NAMESPACE, uri)

    @classmethod
    def ambiguous_reference(cls, node, name: str) -> "WsdlError":
        return cls(node, WsdlErrorKind.AMBIGUOUS_REFERENCE, name)

    @classmethod
    def no_parent_node(cls, node) -> "WsdlError":
        return cls(node, WsdlErrorKind.NO_PARENT_NODE)

    @property
    def is_malformed(self) -> bool:
        """True for faults that mean the document itself is missing a mandatory attribute or element."""
        return self.kind in _MALFORMED_KINDS

    @property
    def location(self) -> str:
        """
        Describe where in the document the fault was detected, as an XPath plus source line.
        Returns '?' when the node is not attached to an lxml tree.
        """
        node = self.node
        try:
            path = node.getroottree().getpath(node)
        except (AttributeError, TypeError, ValueError):
            return "?"
        line = getattr(node, "sourceline", None)
        if line is None:
            return path
        return f"{path} (line {line})"

    def __repr__(self):
        return f"WsdlError(kind={self.kind.name}, detail={self.detail!r}, location={self.location!r})"
