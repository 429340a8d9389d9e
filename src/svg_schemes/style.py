"""Translate a Scheme into matplotlib rcParams."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt

from .scheme import Scheme
from .theme import FONTS, LAYOUT


def build_style(scheme: Scheme) -> dict:
    """rcParams that draw a chart in the scheme's own colors."""
    bg = scheme.background.hex()
    fg = scheme.foreground.hex()
    cycle = [color.hex() for color in scheme.palette()[2:]]

    return {
        # Figure
        "figure.figsize": LAYOUT["figsize"],
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": bg,
        "figure.edgecolor": "none",
        "savefig.dpi": LAYOUT["dpi"],
        "savefig.facecolor": bg,
        "savefig.edgecolor": "none",
        "savefig.bbox": "tight",
        "savefig.pad_inches": 0.3,

        # Axes
        "axes.facecolor": bg,
        "axes.edgecolor": fg,
        "axes.linewidth": LAYOUT["spine_width"],
        "axes.titlesize": LAYOUT["title_size"],
        "axes.titleweight": "bold",
        "axes.titlecolor": fg,
        "axes.labelsize": LAYOUT["label_size"],
        "axes.labelcolor": fg,
        "axes.prop_cycle": mpl.cycler(color=cycle),
        "axes.spines.top": False,
        "axes.spines.right": False,

        # Grid
        "grid.color": scheme.comments.hex(),
        "grid.linewidth": 0.5,

        # Ticks
        "xtick.color": fg,
        "ytick.color": fg,
        "xtick.labelcolor": fg,
        "ytick.labelcolor": fg,

        # Text
        "text.color": fg,
        "font.family": "monospace",
        "font.monospace": FONTS["mono"],
        "font.size": LAYOUT["label_size"],
    }


def apply(scheme: Scheme) -> None:
    """Apply the scheme's style to matplotlib globally."""
    plt.rcParams.update(build_style(scheme))
