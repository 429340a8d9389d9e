"""Serialize a Scheme into the SVG scheme document."""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

from .theme import ROLES, RULE_TEMPLATE, SCHEME_TEMPLATE

if TYPE_CHECKING:
    from .scheme import Scheme


def render_rules(scheme: Scheme) -> str:
    """The eight `#cN { fill: ...; }` lines of the style block."""
    return "\n".join(
        RULE_TEMPLATE.substitute(slot=slot, fill=color.hex(), label=label)
        for slot, ((_, label), color) in enumerate(zip(ROLES, scheme.palette()))
    )


def render_scheme(scheme: Scheme) -> str:
    return SCHEME_TEMPLATE.substitute(
        title=escape(scheme.title),
        version=int(scheme.version),
        rules=render_rules(scheme),
    )
