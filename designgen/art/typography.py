"""Font family and type scale selection.

Not conditioned on the profile: one family serves headings and body, and
each step of the scale is a base size plus a bounded random offset.
"""

from __future__ import annotations

from designgen.rng import SeededRandom
from designgen.template.model import TypeScale, TypographyConfig

FONT_FAMILIES = (
    "Inter", "Poppins", "Roboto", "Open Sans", "Lato",
    "Montserrat", "Nunito", "Source Sans Pro", "Raleway", "Ubuntu",
)

# step -> (base rem, max offset rem)
TYPE_SCALE_BOUNDS = (
    ("h1", 3.0, 2.0),
    ("h2", 2.0, 1.5),
    ("h3", 1.5, 1.0),
    ("body", 0.875, 0.25),
    ("small", 0.75, 0.125),
)


def rem(value: float) -> str:
    return f"{round(value, 3):g}rem"


def synthesize_typography(rng: SeededRandom, fonts=FONT_FAMILIES) -> TypographyConfig:
    family = rng.choice(fonts)
    sizes = {step: rem(base + rng.next() * spread)
             for step, base, spread in TYPE_SCALE_BOUNDS}
    return TypographyConfig(
        font_family=family,
        heading_font=family,
        body_font=family,
        sizes=TypeScale(**sizes),
    )
