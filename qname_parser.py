"""
qname_parser.py
Lark grammar for the qualified-name tokens used by WSDL reference attributes
(``message="tns:GetWeatherRequest"``, ``type="xsd:string"``, ``binding="WeatherBinding"``).
"""
from typing import Optional, Tuple

from lark import Lark, Transformer
from lark.exceptions import LarkError


# QName: (prefix ":")? local, both parts NCNames
grammar = r"""
    qname: NCNAME (":" NCNAME)?

    NCNAME: /[^\W\d][\w.\-]*/
"""

parser = Lark(
    grammar,
    start='qname',
    parser='lalr'
)


class QNameSyntaxError(ValueError):
    """Raised when a reference token is not a well-formed qualified name."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Malformed qualified name {token!r}")


class QNameTransformer(Transformer):
    def qname(self, items):
        if len(items) == 2:
            return str(items[0]), str(items[1])
        return None, str(items[0])


def parse_qualified_name(text: str) -> Tuple[Optional[str], str]:
    """
    Split a qualified name into its prefix and local part.

    Leading and trailing whitespace is ignored, as XML collapses it for QName-typed attributes.
    Returns (None, local) for an unprefixed name.
    Raises QNameSyntaxError for empty tokens, empty prefixes or local parts, extra colons
    and characters that cannot appear in a name.
    """
    if text is None:
        raise QNameSyntaxError("")
    try:
        tree = parser.parse(text.strip())
    except LarkError as e:
        raise QNameSyntaxError(text) from e
    return QNameTransformer().transform(tree)
