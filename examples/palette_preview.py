"""Example: load a scheme, tweak one role and draw its swatch chart."""

from pathlib import Path

import svg_schemes as ss
from svg_schemes.preview import swatches

here = Path(__file__).parent
scheme = ss.read_scheme((here / "night.svg").read_bytes())

scheme.errors = ss.Color.from_hsv("hsv(2, 43, 83)")

swatches(scheme, filename="night-harbor.png", output_dir=here)
(here / "night-harbor.svg").write_text(ss.render_scheme(scheme))
