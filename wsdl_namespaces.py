"""
wsdl_namespaces.py
Namespace URIs and element names of the WSDL 1.1 vocabulary recognised by WsdlWrangler.
"""

NS_XML = "http://www.w3.org/XML/1998/namespace"
NS_XSD = "http://www.w3.org/2001/XMLSchema"

NS_WSDL = "http://schemas.xmlsoap.org/wsdl/"
NS_WSDL_SOAP = "http://schemas.xmlsoap.org/wsdl/soap/"
NS_WSDL_SOAP12 = "http://schemas.xmlsoap.org/wsdl/soap12/"
NS_WSDL_HTTP = "http://schemas.xmlsoap.org/wsdl/http/"

# WSDL element local names
DEFINITIONS = "definitions"
DOCUMENTATION = "documentation"
TYPES = "types"
MESSAGE = "message"
PART = "part"
PORT_TYPE = "portType"
OPERATION = "operation"
INPUT = "input"
OUTPUT = "output"
FAULT = "fault"
BINDING = "binding"
SERVICE = "service"
PORT = "port"

# Binding extension and schema container local names
ADDRESS = "address"
SCHEMA = "schema"


def clark(namespace, local):
    """Build a Clark-notation tag ``{namespace}local`` (``local`` alone for no namespace)."""
    if namespace is None:
        return local
    return "{%s}%s" % (namespace, local)


def wsdl_tag(local):
    return clark(NS_WSDL, local)
