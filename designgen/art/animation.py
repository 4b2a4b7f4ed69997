"""Animation style, timing and easing."""

from __future__ import annotations

from types import MappingProxyType

from designgen.rng import SeededRandom
from designgen.template.model import AnimationConfig

ANIMATION_STYLES = ("fade", "slide", "zoom", "rotate", "bounce", "elastic", "back")

# Coarse preference words a profile may carry instead of a concrete style.
STYLE_ALIASES = MappingProxyType({
    "subtle": "fade",
    "minimal": "fade",
    "dynamic": "bounce",
})

_OVERSHOOT = "cubic-bezier(0.68, -0.55, 0.265, 1.55)"
_BACK_OUT = "cubic-bezier(0.175, 0.885, 0.32, 1.275)"
_STANDARD = "cubic-bezier(0.4, 0, 0.2, 1)"

# style -> (min ms, spread ms)
DURATION_RANGES = MappingProxyType({
    "fade": (300, 500),
    "slide": (400, 600),
    "zoom": (200, 400),
    "rotate": (500, 1000),
    "bounce": (600, 800),
    "elastic": (800, 1200),
    "back": (400, 600),
})

EASINGS = MappingProxyType({
    "fade": ("ease-in-out", "ease-out", "ease-in"),
    "slide": ("ease-out", "ease-in-out", _STANDARD),
    "zoom": ("ease-out", "ease-in-out", _BACK_OUT),
    "rotate": ("ease-in-out", "linear", _OVERSHOOT),
    "bounce": (_OVERSHOOT, "ease-out"),
    "elastic": (_OVERSHOOT, _BACK_OUT),
    "back": (_OVERSHOOT, "ease-out"),
})

DEFAULT_DURATION = 500
DEFAULT_EASINGS = ("ease-in-out",)


def resolve_style(preferred: str | None, rng: SeededRandom, styles=ANIMATION_STYLES) -> str:
    """Preference wins outright; otherwise one draw picks a style."""
    if preferred:
        return STYLE_ALIASES.get(preferred, preferred)
    return rng.choice(styles)


def synthesize_animation(preferred: str | None, randomize: bool, rng: SeededRandom,
                         reduced_motion: bool | None = None,
                         styles=ANIMATION_STYLES) -> AnimationConfig:
    style = resolve_style(preferred, rng, styles)
    enabled = rng.chance(0.3) if randomize else True

    if style in DURATION_RANGES:
        lo, spread = DURATION_RANGES[style]
        duration = int(round(lo + rng.next() * spread))
    else:
        duration = DEFAULT_DURATION
    easing = rng.choice(EASINGS.get(style, DEFAULT_EASINGS))

    return AnimationConfig(
        enabled=enabled,
        style=style,
        duration=duration,
        easing=easing,
        stagger=rng.chance(0.5),
        # No preference means the renderer still has to honour the
        # visitor's prefers-reduced-motion setting.
        reduced_motion=True if reduced_motion is None else reduced_motion,
    )
