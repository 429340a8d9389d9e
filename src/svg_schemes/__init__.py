"""svg-schemes: read and write 8-color schemes embedded in SVG documents."""

from .color import Color, decode_literal
from .errors import (
    DocumentMalformed,
    MalformedLiteral,
    MalformedVersion,
    PropertyMalformed,
    PropertyNotFound,
    SchemeError,
)
from .parser import read_scheme
from .render import render_scheme
from .scheme import Scheme
from .theme import CURRENT_VERSION, DEFAULT_TITLE, ROLES

__all__ = [
    "Color",
    "decode_literal",
    "read_scheme",
    "render_scheme",
    "Scheme",
    "DocumentMalformed",
    "MalformedLiteral",
    "MalformedVersion",
    "PropertyMalformed",
    "PropertyNotFound",
    "SchemeError",
    "CURRENT_VERSION",
    "DEFAULT_TITLE",
    "ROLES",
]
