import matplotlib.pyplot as plt

from svg_schemes import Color, Scheme
from svg_schemes.preview import figure, label_colors, save, swatches
from svg_schemes.style import build_style


def test_style_uses_scheme_colors(sample_scheme: Scheme) -> None:
    style = build_style(sample_scheme)

    assert style["figure.facecolor"] == "#010203"
    assert style["axes.facecolor"] == "#010203"
    assert style["text.color"] == "#040506"
    assert style["axes.labelcolor"] == "#040506"
    assert style["grid.color"] == "#161718"
    cycle = [entry["color"] for entry in style["axes.prop_cycle"]]
    assert cycle == [c.hex() for c in sample_scheme.palette()[2:]]


def test_figure_applies_style(sample_scheme: Scheme) -> None:
    fig, ax = figure(sample_scheme)
    try:
        assert plt.rcParams["axes.facecolor"] == "#010203"
    finally:
        plt.close(fig)


def test_label_colors_contrast() -> None:
    scheme = Scheme(background=Color(255, 255, 255), foreground=Color(0, 0, 0))

    labels = label_colors(scheme)

    assert labels[0] == "#000000"
    assert labels[1] == "#FFFFFF"
    assert len(labels) == 8


def test_swatches_draws_one_bar_per_role(sample_scheme: Scheme) -> None:
    fig, ax = swatches(sample_scheme)
    try:
        assert len(ax.patches) == 8
        assert [t.get_text() for t in ax.texts] == [c.hex() for c in sample_scheme.palette()]
        assert ax.get_title() == "Test (v2)"
    finally:
        plt.close(fig)


def test_swatches_saves_file(sample_scheme: Scheme, tmp_path) -> None:
    swatches(sample_scheme, filename="sample.png", output_dir=tmp_path / "out")

    path = tmp_path / "out" / "sample.png"
    assert path.exists()
    assert path.stat().st_size > 0


def test_save_returns_path(sample_scheme: Scheme, tmp_path) -> None:
    fig, _ = figure(sample_scheme)

    path = save(fig, "empty.svg", tmp_path)

    assert path == tmp_path / "empty.svg"
    assert path.read_text().lstrip().startswith("<?xml")


def test_save_defaults_to_png(sample_scheme: Scheme, tmp_path) -> None:
    fig, _ = figure(sample_scheme)

    path = save(fig, "nested/plain", tmp_path)

    assert path == tmp_path / "nested" / "plain.png"
    assert path.read_bytes().startswith(b"\x89PNG")
    assert not plt.fignum_exists(fig.number)
