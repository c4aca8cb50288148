"""
namespace_resolver.py
Qualified-name and targetNamespace resolution for WSDL reference attributes, following the lexical
namespace scope of the referencing element.

Unprefixed references take the default namespace in scope at the referencing element
(``xmlns="..."``), or no namespace when none is declared. They never inherit the targetNamespace.
"""
import logging
from typing import NamedTuple, Optional, Tuple

from qname_parser import QNameSyntaxError, parse_qualified_name
from wsdl_errors import WsdlError
from wsdl_namespaces import NS_XML, clark

logger = logging.getLogger(__name__)


class QualifiedName(NamedTuple):
    namespace: Optional[str]
    local: str

    @property
    def text(self) -> str:
        return clark(self.namespace, self.local)

    def __str__(self):
        return self.text


def split_qualified(node, qualified_name: str) -> Tuple[Optional[str], str]:
    """
    Split a reference token into (prefix, local) without consulting any namespace scope.
    Used where matching by the ``name`` attribute alone is enough.
    Raises WsdlError (INVALID_REFERENCE) on a malformed token, tied to ``node``.
    """
    try:
        return parse_qualified_name(qualified_name)
    except QNameSyntaxError:
        raise WsdlError.invalid_reference(node, qualified_name) from None


def lookup_namespace_uri(node, prefix: Optional[str]) -> Optional[str]:
    """Return the namespace URI bound to ``prefix`` (None for the default namespace) at ``node``."""
    if prefix == "xml":
        return NS_XML
    return node.nsmap.get(prefix)


def resolve_qualified(node, qualified_name: str) -> QualifiedName:
    """
    Resolve a reference token to its (namespace URI, local name) pair using the namespace
    declarations in scope at ``node``.

    Args:
        node: The element carrying the reference attribute
        qualified_name: The raw attribute value, e.g. 'tns:GetWeatherRequest'

    Returns:
        QualifiedName for the reference

    Raises:
        WsdlError: INVALID_REFERENCE if the token is malformed or its prefix is not bound at ``node``
    """
    prefix, local = split_qualified(node, qualified_name)
    if prefix is None:
        namespace = lookup_namespace_uri(node, None)
        logger.debug("Resolved unprefixed reference '%s' with default namespace %r", qualified_name, namespace)
        return QualifiedName(namespace, local)
    namespace = lookup_namespace_uri(node, prefix)
    if namespace is None:
        logger.debug("Prefix '%s' of reference '%s' is not bound", prefix, qualified_name)
        raise WsdlError.invalid_reference(node, qualified_name)
    logger.debug("Resolved reference '%s' to {%s}%s", qualified_name, namespace, local)
    return QualifiedName(namespace, local)


def find_ancestor_attribute(node, name: str, include_self: bool = False) -> Optional[str]:
    """
    Walk up from ``node`` and return the first value of attribute ``name`` found, or None
    once the root has been passed.
    """
    current = node if include_self else node.getparent()
    while current is not None:
        value = current.get(name)
        if value is not None:
            return value
        current = current.getparent()
    return None


def target_namespace(node) -> str:
    """
    Return the targetNamespace declared by the nearest ancestor of ``node``.
    Raises WsdlError (MISSING_ATTRIBUTE) tied to ``node`` itself when no ancestor declares one.
    """
    namespace = find_ancestor_attribute(node, "targetNamespace")
    if namespace is None:
        raise WsdlError.missing_attribute(node, "targetNamespace")
    return namespace
