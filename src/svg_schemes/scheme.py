"""The Scheme value: a title, a format version and eight role colors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .color import Color
from .render import render_scheme
from .theme import CURRENT_VERSION, DEFAULT_TITLE, ROLE_NAMES, SLOT_COUNT


@dataclass
class Scheme:
    """An 8-color scheme. Field order after `version` matches slot order."""

    title: str = DEFAULT_TITLE
    version: int = CURRENT_VERSION
    background: Color = field(default_factory=Color)
    foreground: Color = field(default_factory=Color)
    types: Color = field(default_factory=Color)
    keywords: Color = field(default_factory=Color)
    strings: Color = field(default_factory=Color)
    special: Color = field(default_factory=Color)
    errors: Color = field(default_factory=Color)
    comments: Color = field(default_factory=Color)

    @classmethod
    def from_palette(
        cls,
        colors: Iterable[Color],
        *,
        title: str = DEFAULT_TITLE,
        version: int = CURRENT_VERSION,
    ) -> Scheme:
        """Build a scheme from eight colors given in slot order."""
        colors = list(colors)
        if len(colors) != SLOT_COUNT:
            raise ValueError(f"expected {SLOT_COUNT} colors, got {len(colors)}")
        return cls(title=title, version=version, **dict(zip(ROLE_NAMES, colors)))

    def palette(self) -> tuple[Color, ...]:
        """Colors in slot order, background first and comments last."""
        return tuple(getattr(self, name) for name in ROLE_NAMES)

    def roles(self) -> Iterator[tuple[str, Color]]:
        return zip(ROLE_NAMES, self.palette())

    def __str__(self) -> str:
        return render_scheme(self)
