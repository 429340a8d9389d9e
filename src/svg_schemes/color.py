"""Color value type and the hex / rgb() / hsv() literal codec."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np

from .errors import MalformedLiteral

logger = logging.getLogger(__name__)

_NUMBER = r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)\s*"
_INT_RE = re.compile(r"[+-]?[0-9]{1,3}")

_HEX_RE = re.compile(r"#([0-9A-Fa-f]{6})")
_RGB_RE = re.compile(r"rgb\(\s*([^,()]*?)\s*,\s*([^,()]*?)\s*,\s*([^,()]*?)\s*\)")
_HSV_RE = re.compile(rf"hsv\({_NUMBER},{_NUMBER},{_NUMBER}\)")

# Channel phase offsets for the hue "kink" function, in R, G, B order
_HUE_OFFSETS = np.array([1.0, 2 / 3.0, 1 / 3.0])


@dataclass(frozen=True)
class Color:
    """An sRGB color with three 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range [0, 255]: {value}")
            object.__setattr__(self, name, int(value))

    def values(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgb(self) -> int:
        """Pack the channels into a 24-bit integer, red in the high byte."""
        return (self.r << 16) | (self.g << 8) | self.b

    def hex(self) -> str:
        return f"#{self.rgb():06X}"

    def __str__(self) -> str:
        return self.hex()

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Decode '#RRGGBB'."""
        literal = text.strip()
        m = _HEX_RE.fullmatch(literal)
        if not m:
            raise MalformedLiteral(text, "expected '#' followed by 6 hex digits")
        r, g, b = bytes.fromhex(m.group(1))
        return cls(r, g, b)

    @classmethod
    def from_rgb(cls, text: str) -> Color:
        """Decode 'rgb(R, G, B)' with decimal channels in [0, 255]."""
        m = _RGB_RE.match(text.strip())
        if not m:
            raise MalformedLiteral(text, "expected rgb(R,G,B)")
        channels = []
        for token in m.groups():
            if not _INT_RE.fullmatch(token):
                raise MalformedLiteral(text, f"channel {token!r} is not a decimal byte")
            value = int(token)
            if not 0 <= value <= 255:
                raise MalformedLiteral(text, f"channel {value} out of range [0, 255]")
            channels.append(value)
        return cls(*channels)

    @classmethod
    def from_hsv(cls, text: str) -> Color:
        """Decode 'hsv(H, S, V)': H in degrees, S and V in percent.

        Out-of-range components are clamped rather than rejected. The
        conversion uses the branchless hue kink formulation:

            p = clamp(|fract(h + offset) * 6 - 3| - 1, 0, 1)
            channel = ceil(lerp(1, p, s) * v * 255)
        """
        m = _HSV_RE.match(text.strip())
        if not m:
            raise MalformedLiteral(text, "expected hsv(H,S,V)")
        hue, sat, val = (float(token) for token in m.groups())

        hue = np.clip(hue, 0.0, 360.0) / 360.0
        sat = np.clip(sat, 0.0, 100.0) / 100.0
        val = np.clip(val, 0.0, 100.0) / 100.0

        shifted = hue + _HUE_OFFSETS
        kink = np.clip(np.abs((shifted - np.floor(shifted)) * 6 - 3) - 1, 0.0, 1.0)
        channels = val * (1.0 + (kink - 1.0) * sat)

        scaled = np.clip(np.ceil(channels * 255), 0, 255).astype(np.uint8)
        return cls(*(int(c) for c in scaled))


def decode_literal(literal: str) -> Color | None:
    """Decode a fill literal by sniffing its notation.

    Returns None when the notation is not one of hex, rgb() or hsv().
    """
    literal = literal.strip()
    if "rgb" in literal:
        return Color.from_rgb(literal)
    if "hsv" in literal:
        return Color.from_hsv(literal)
    if literal.startswith("#"):
        return Color.from_hex(literal)
    logger.debug("Unrecognized color notation %r", literal)
    return None
