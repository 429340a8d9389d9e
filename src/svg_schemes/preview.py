"""Palette preview charts: figure(), swatches(), save()."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from . import config
from .scheme import Scheme
from .style import apply
from .theme import LAYOUT, ROLE_NAMES

# ITU-R BT.601 luma weights
_LUMA = np.array([0.299, 0.587, 0.114])

logger = logging.getLogger(__name__)


def figure(
    scheme: Scheme,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """A single-axes figure in the scheme's colors, titled after it."""
    apply(scheme)
    fig = plt.figure(figsize=figsize or LAYOUT["figsize"])
    ax = fig.add_subplot()
    ax.set_title(f"{scheme.title} (v{scheme.version})")
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Write `fig` under `output_dir` (default: config.OUTPUT_DIR) and close it.

    A file name without a suffix is saved as PNG.
    """
    path = Path(output_dir or config.OUTPUT_DIR) / filename
    if not path.suffix:
        path = path.with_suffix(".png")
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(path, format=path.suffix[1:].lower())
    finally:
        plt.close(fig)
    logger.debug("Saved preview %s", path)
    return path


def label_colors(scheme: Scheme) -> list[str]:
    """Black or white per swatch, whichever reads better on it."""
    luma = np.array([color.values() for color in scheme.palette()]) @ _LUMA
    return ["#000000" if y > 127.5 else "#FFFFFF" for y in luma]


def swatches(
    scheme: Scheme,
    *,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """One bar per role, filled with its color and labelled with its hex code."""
    fig, ax = figure(scheme, figsize=figsize)

    palette = scheme.palette()
    x = np.arange(len(palette))
    ax.bar(
        x,
        np.full(len(palette), LAYOUT["swatch_height"]),
        width=LAYOUT["swatch_width"],
        color=[color.hex() for color in palette],
        edgecolor=scheme.foreground.hex(),
        linewidth=LAYOUT["spine_width"],
    )

    for xi, color, text_color in zip(x, palette, label_colors(scheme)):
        ax.text(
            xi, LAYOUT["swatch_height"] / 2, color.hex(),
            ha="center", va="center", rotation=90, color=text_color,
        )

    ax.set_xticks(x)
    ax.set_xticklabels(ROLE_NAMES, rotation=30, ha="right")
    ax.set_yticks([])
    ax.spines["left"].set_visible(False)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax
