"""
wsdl_model.py
Typed, read-only views over the elements of a parsed WSDL 1.1 document.

Every entity wraps one lxml element and recomputes its answers from the tree on each call;
nothing is cached. Cross references (an operation's messages, a binding's port type, a service
port's binding) are resolved by name from the enclosing ``wsdl:definitions`` element.
"""
import logging
from typing import Iterator, Optional

from namespace_resolver import (
    QualifiedName,
    find_ancestor_attribute,
    resolve_qualified,
    split_qualified,
    target_namespace,
)
from wsdl_errors import WsdlError
from wsdl_namespaces import (
    BINDING,
    DEFINITIONS,
    DOCUMENTATION,
    FAULT,
    INPUT,
    MESSAGE,
    NS_XSD,
    OPERATION,
    OUTPUT,
    PART,
    PORT,
    PORT_TYPE,
    SCHEMA,
    SERVICE,
    TYPES,
    clark,
    wsdl_tag,
)
from wsdl_transport import TransportAddress, TransportOperation, classify_transport_address, classify_transport_operation

logger = logging.getLogger(__name__)


class WsdlEntity:
    """Base class for all WSDL entity views. Two views are equal when they wrap the same element."""

    def __init__(self, node):
        self._node = node

    @property
    def node(self):
        """Return the XML element this entity is associated with."""
        return self._node

    def _required_attribute(self, name: str) -> str:
        value = self._node.get(name)
        if value is None:
            raise WsdlError.missing_attribute(self._node, name)
        return value

    def _children(self, local_name: str, namespace: Optional[str] = None):
        tag = wsdl_tag(local_name) if namespace is None else clark(namespace, local_name)
        return self._node.iterchildren(tag)

    def _parent(self):
        parent = self._node.getparent()
        if parent is None:
            raise WsdlError.no_parent_node(self._node)
        return parent

    def documentation(self) -> Optional[str]:
        """Return the text of the wsdl:documentation child, or None if there is none."""
        for doc in self._children(DOCUMENTATION):
            return "".join(doc.itertext())
        return None

    def __eq__(self, other):
        return type(self) is type(other) and self._node == other._node

    def __hash__(self):
        return hash((type(self), self._node))

    def __repr__(self):
        return f"{type(self).__name__}(name={self._node.get('name')!r})"


class NamedWsdlEntity(WsdlEntity):
    def name(self) -> str:
        """Return the ``name`` attribute verbatim."""
        return self._required_attribute("name")


class Definitions(WsdlEntity):
    """The ``wsdl:definitions`` root of a WSDL document."""

    @classmethod
    def from_node(cls, node) -> "Definitions":
        if node.tag != wsdl_tag(DEFINITIONS):
            raise WsdlError.missing_element(node, DEFINITIONS)
        return cls(node)

    @classmethod
    def from_document(cls, document) -> "Definitions":
        """Wrap the root of a parsed document. Accepts an ElementTree or its root element."""
        root = document.getroot() if hasattr(document, "getroot") else document
        return cls.from_node(root)

    @classmethod
    def find_parent(cls, node) -> "Definitions":
        """Find the definitions block by climbing the ancestors of ``node``."""
        while True:
            parent = node.getparent()
            if parent is None:
                raise WsdlError.no_parent_node(node)
            node = parent
            if node.tag == wsdl_tag(DEFINITIONS):
                return cls(node)

    def name(self) -> Optional[str]:
        """The ``name`` attribute is optional on definitions."""
        return self._node.get("name")

    def target_namespace(self) -> str:
        namespace = find_ancestor_attribute(self._node, "targetNamespace", include_self=True)
        if namespace is None:
            raise WsdlError.missing_attribute(self._node, "targetNamespace")
        return namespace

    def types(self) -> Iterator["Types"]:
        # WSDL 1.1 allows at most one types element; all are returned
        return (Types(n) for n in self._children(TYPES))

    def messages(self) -> Iterator["Message"]:
        return (Message(n) for n in self._children(MESSAGE))

    def port_types(self) -> Iterator["PortType"]:
        return (PortType(n) for n in self._children(PORT_TYPE))

    def bindings(self) -> Iterator["Binding"]:
        return (Binding(n) for n in self._children(BINDING))

    def services(self) -> Iterator["Service"]:
        return (Service(n) for n in self._children(SERVICE))

    def message(self, name: str) -> Optional["Message"]:
        return _find_by_name(self.messages(), name)

    def port_type(self, name: str) -> Optional["PortType"]:
        return _find_by_name(self.port_types(), name)

    def binding(self, name: str) -> Optional["Binding"]:
        return _find_by_name(self.bindings(), name)

    def service(self, name: str) -> Optional["Service"]:
        return _find_by_name(self.services(), name)


def _find_by_name(entities, name):
    """Return the first entity whose ``name`` attribute equals ``name``, in document order."""
    for entity in entities:
        if entity.node.get("name") == name:
            return entity
    return None


class Types(WsdlEntity):
    def schemas(self):
        """
        Return the XML Schema elements contained within. These are defined by the XML Schema
        specification and are handed back as raw elements, uninterpreted.
        """
        return self._children(SCHEMA, NS_XSD)


class Message(NamedWsdlEntity):
    """A WSDL ``message``: a named list of parameters."""

    def parts(self) -> Iterator["MessagePart"]:
        return (MessagePart(n) for n in self._children(PART))

    def part(self, name: str) -> Optional["MessagePart"]:
        return _find_by_name(self.parts(), name)


class MessagePart(NamedWsdlEntity):
    """One parameter of a WSDL message."""

    def reference_kind(self) -> str:
        """Return 'element' or 'type', whichever attribute this part declares its data with."""
        if self._node.get("element") is not None:
            return "element"
        if self._node.get("type") is not None:
            return "type"
        raise WsdlError.missing_attribute(self._node, "type")

    def typename(self) -> QualifiedName:
        """
        Resolve the ``element`` (or, failing that, ``type``) reference of this part. It refers to
        a declaration under ``wsdl:types`` or to a built-in XML Schema type.
        """
        return resolve_qualified(self._node, self._node.get(self.reference_kind()))


class PortType(NamedWsdlEntity):
    """A WSDL ``portType``: a group of abstract operations."""

    def target_namespace(self) -> str:
        return target_namespace(self._node)

    def operations(self) -> Iterator["PortOperation"]:
        return (PortOperation(n) for n in self._children(OPERATION))

    def operation(self, name: str) -> Optional["PortOperation"]:
        return _find_by_name(self.operations(), name)


class PortOperation(NamedWsdlEntity):
    """
    An operation of a WSDL ``portType``, otherwise describable as a function signature.

    An operation has at most one input, but may declare several output and fault branches.
    The plural accessors are the primary API; the singular ones raise AMBIGUOUS_REFERENCE
    instead of silently picking one of several messages.
    """

    def port_type(self) -> PortType:
        return PortType(self._parent())

    def _resolve_message(self, element, definitions: Definitions) -> Message:
        message_ref = element.get("message")
        if message_ref is None:
            raise WsdlError.missing_attribute(element, "message")
        _prefix, message_name = split_qualified(element, message_ref)
        message = definitions.message(message_name)
        if message is None:
            raise WsdlError.invalid_reference(element, message_name)
        logger.debug("Resolved %s message '%s' of operation '%s'",
                     element.tag, message_name, self._node.get("name"))
        return message

    def _messages(self, local_name: str) -> Iterator[Message]:
        definitions = Definitions.find_parent(self._node)
        return (self._resolve_message(n, definitions) for n in self._children(local_name))

    def _single_message(self, local_name: str) -> Optional[Message]:
        elements = list(self._children(local_name))
        if not elements:
            return None
        if len(elements) > 1:
            raise WsdlError.ambiguous_reference(self._node, local_name)
        return self._resolve_message(elements[0], Definitions.find_parent(self._node))

    def inputs(self) -> Iterator[Message]:
        return self._messages(INPUT)

    def outputs(self) -> Iterator[Message]:
        return self._messages(OUTPUT)

    def faults(self) -> Iterator[Message]:
        return self._messages(FAULT)

    def input(self) -> Optional[Message]:
        """Retrieve the input message, or None if the operation declares no input."""
        return self._single_message(INPUT)

    def output(self) -> Optional[Message]:
        return self._single_message(OUTPUT)

    def fault(self) -> Optional[Message]:
        return self._single_message(FAULT)


class Binding(NamedWsdlEntity):
    """A WSDL binding, describing how the operations of a port type go to and from the wire."""

    def target_namespace(self) -> str:
        return target_namespace(self._node)

    def port_type(self) -> PortType:
        port_typename = self._required_attribute("type")
        _prefix, port_name = split_qualified(self._node, port_typename)
        port_type = Definitions.find_parent(self._node).port_type(port_name)
        if port_type is None:
            raise WsdlError.invalid_reference(self._node, port_name)
        return port_type

    def operations(self) -> Iterator["BindingOperation"]:
        return (BindingOperation(n) for n in self._children(OPERATION))

    def operation(self, name: str) -> Optional["BindingOperation"]:
        return _find_by_name(self.operations(), name)


class BindingOperation(NamedWsdlEntity):
    """The wire details of one operation within a binding."""

    def binding(self) -> Binding:
        return Binding(self._parent())

    def port_operation(self) -> PortOperation:
        """Retrieve the port type operation this binding operation implements."""
        name = self.name()
        operation = self.binding().port_type().operation(name)
        if operation is None:
            raise WsdlError.missing_element(self._node, name)
        return operation

    def transport_operation(self) -> TransportOperation:
        return classify_transport_operation(self._node)


class Service(NamedWsdlEntity):
    """A WSDL service, a group of endpoints serving messages bound with a Binding."""

    def ports(self) -> Iterator["ServicePort"]:
        return (ServicePort(n) for n in self._children(PORT))

    def port(self, name: str) -> Optional["ServicePort"]:
        return _find_by_name(self.ports(), name)


class ServicePort(NamedWsdlEntity):
    def service(self) -> Service:
        return Service(self._parent())

    def binding(self) -> Binding:
        """Fetch the binding associated with this service port."""
        binding_typename = self._required_attribute("binding")
        _prefix, binding_name = split_qualified(self._node, binding_typename)
        binding = Definitions.find_parent(self._node).binding(binding_name)
        if binding is None:
            raise WsdlError.invalid_reference(self._node, binding_name)
        return binding

    def address(self) -> TransportAddress:
        return classify_transport_address(self._node)
