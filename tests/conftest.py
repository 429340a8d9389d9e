"""Shared fixtures: reference scheme documents and sample Scheme values."""

import matplotlib
import pytest

from svg_schemes import Color, Scheme

matplotlib.use("Agg")

REFERENCE_RULES = [
    "#c0 { fill: #161820; } <!-- Background -->",
    "#c1 { fill: #C6C8D0; } <!-- Foreground, Operators -->",
    "#c2 { fill: #89B8C2; } <!-- Types -->",
    "#c3 { fill: #84A0C6; } <!-- Procedures, Keywords -->",
    "#c4 { fill: #84A0C6; } <!-- Constants, Strings -->",
    "#c5 { fill: #B4BE82; } <!-- Pre-Processor, Special -->",
    "#c6 { fill: #D47D7A; } <!-- Errors -->",
    "#c7 { fill: #6B7082; } <!-- Comments -->",
]

REFERENCE_HEX = [
    "#161820", "#C6C8D0", "#89B8C2", "#84A0C6",
    "#84A0C6", "#B4BE82", "#D47D7A", "#6B7082",
]


def make_document(rules, title="Color Scheme by Person", version="2", sep="\n"):
    """Build a scheme document; pass None for title/version to omit them."""
    parts = ['<svg width="288px" height="140px" xmlns="http://www.w3.org/2000/svg">']
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if version is not None:
        parts.append(f"<version>{version}</version>")
    parts.append("<style>")
    parts.extend(rules)
    parts.append("</style>")
    parts.append('<rect width="288px" height="140px" rx="10px" id="c0"></rect>')
    parts.append("</svg>")
    return sep.join(parts)


@pytest.fixture
def reference_source() -> bytes:
    """The reference document, minified onto a single line."""
    return make_document(REFERENCE_RULES, sep="").encode()


@pytest.fixture
def sample_scheme() -> Scheme:
    return Scheme.from_palette(
        [Color(3 * i + 1, 3 * i + 2, 3 * i + 3) for i in range(8)],
        title="Test",
        version=2,
    )
