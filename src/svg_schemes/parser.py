"""Read SVG scheme documents.

Only three children of the root element matter: <title>, <version> and
<style>. The style block is scanned for rules of the form

    #c<N> { fill: <literal>; }

one per slot N in 0..7. Rules for other selectors are skipped so that newer
documents with extra selectors still load.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Iterator, NamedTuple

from .color import Color, decode_literal
from .errors import (
    DocumentMalformed,
    MalformedVersion,
    PropertyMalformed,
    PropertyNotFound,
)
from .scheme import Scheme
from .theme import CURRENT_VERSION, DEFAULT_TITLE, ROLE_NAMES, SLOT_COUNT

logger = logging.getLogger(__name__)

# A "#c" right after a colon is a hex literal (e.g. fill: #c0c0c0), not a selector
_SELECTOR_RE = re.compile(r"(:\s*)?#c")
_SELECTOR_ID_RE = re.compile(r"[^\s{]*")
_VERSION_RE = re.compile(r"[+-]?[0-9]{1,9}")

_SLOT_IDS = {str(slot): slot for slot in range(SLOT_COUNT)}


class StyleRule(NamedTuple):
    selector: str
    slot: int
    literal: str


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _find_texts(root: ET.Element, *names: str) -> dict[str, str | None]:
    """Text of the first direct child named after each of `names`."""
    found: dict[str, str | None] = dict.fromkeys(names)
    for child in root:
        if not isinstance(child.tag, str):
            continue
        name = _local_name(child.tag)
        if name in found and found[name] is None:
            found[name] = "".join(child.itertext())
    return found


def split_rules(style: str) -> Iterator[str]:
    """Yield the text following each '#c' selector, up to the next one."""
    starts = [m.end() for m in _SELECTOR_RE.finditer(style) if m.group(1) is None]
    for start, end in zip(starts, starts[1:] + [None]):
        if end is not None:
            end -= 2
        yield style[start:end]


def iter_rules(style: str) -> Iterator[StyleRule]:
    """Tokenize a style block into (selector, slot, literal) triples."""
    for fragment in split_rules(style):
        fragment = fragment.strip()
        if not fragment:
            continue

        # Only the first character picks the slot, so #c10 lands in slot 1
        selector = _SELECTOR_ID_RE.match(fragment).group()
        slot = _SLOT_IDS.get(fragment[0])
        if slot is None:
            logger.debug("Skipping unknown selector #c%s", selector)
            continue

        _, found, rest = fragment[1:].partition("fill")
        if not found:
            raise PropertyNotFound(slot)

        _, found, rest = rest.partition(":")
        if not found:
            raise PropertyMalformed(fragment)

        literal, found, _ = rest.partition(";")
        if not found:
            raise PropertyMalformed(fragment)

        yield StyleRule(selector, slot, literal.strip())


def parse_version(text: str) -> int:
    value = text.strip()
    if not _VERSION_RE.fullmatch(value):
        raise MalformedVersion(f"version is not an integer: {text!r}")
    return int(value)


def read_scheme(source: bytes | str) -> Scheme:
    """Parse SVG scheme source into a Scheme.

    Raises a SchemeError subclass on the first problem found.
    """
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise DocumentMalformed(f"unable to parse document: {e}") from e

    texts = _find_texts(root, "title", "version", "style")

    title = texts["title"] or DEFAULT_TITLE
    version = parse_version(texts["version"]) if texts["version"] else CURRENT_VERSION

    colors = [Color()] * SLOT_COUNT
    for rule in iter_rules(texts["style"] or ""):
        color = decode_literal(rule.literal)
        if color is None:
            logger.debug(
                "Leaving #c%s (%s) unset: unrecognized literal %r",
                rule.selector, ROLE_NAMES[rule.slot], rule.literal,
            )
            continue
        colors[rule.slot] = color

    return Scheme.from_palette(colors, title=title, version=version)
