"""Taste-category color schemes and palette synthesis.

Base schemes hold three brand colors (primary, secondary, accent) as
'#RRGGBB' strings.  Synthesis either pairs a base scheme with the fixed
dark-mode neutrals, or jitters the three brand colors in HSL space and
draws the neutrals from small fixed sets.
"""

from __future__ import annotations

import re
from types import MappingProxyType

import numpy as np

from designgen.rng import SeededRandom
from designgen.template.model import ColorPalette

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")

TASTE_CATEGORIES = ("professional", "creative", "corporate")
FALLBACK_TASTE = "corporate"


class InvalidPaletteError(ValueError):
    """A synthesized palette contains a malformed color.

    Only a broken base-scheme constant can cause this, so it is a
    configuration defect and is never retried.
    """


def _scheme(primary: str, secondary: str, accent: str) -> MappingProxyType:
    return MappingProxyType({"primary": primary, "secondary": secondary, "accent": accent})


# --- Base schemes per taste category ---
COLOR_SCHEMES = MappingProxyType({
    "professional": (
        _scheme("#1E40AF", "#3B82F6", "#8B5CF6"),
        _scheme("#059669", "#10B981", "#34D399"),
        _scheme("#DC2626", "#EF4444", "#F87171"),
        _scheme("#7C3AED", "#A855F7", "#C084FC"),
        _scheme("#EA580C", "#F97316", "#FB923C"),
    ),
    "creative": (
        _scheme("#F59E0B", "#EF4444", "#10B981"),
        _scheme("#8B5CF6", "#EC4899", "#F59E0B"),
        _scheme("#06B6D4", "#3B82F6", "#8B5CF6"),
        _scheme("#F97316", "#EF4444", "#EC4899"),
        _scheme("#10B981", "#059669", "#34D399"),
    ),
    "corporate": (
        _scheme("#374151", "#6B7280", "#1F2937"),
        _scheme("#1E40AF", "#3B82F6", "#60A5FA"),
        _scheme("#059669", "#10B981", "#34D399"),
        _scheme("#7C3AED", "#A855F7", "#C084FC"),
        _scheme("#DC2626", "#EF4444", "#F87171"),
    ),
})

# Checked in order; the first category with a matching keyword wins.
TASTE_KEYWORDS = MappingProxyType({
    "professional": ("technology", "software", "startup", "tech", "engineering", "saas", "fintech"),
    "creative": ("design", "art", "creative", "marketing", "media", "fashion", "photography", "music"),
    "corporate": ("finance", "banking", "consulting", "legal", "insurance", "healthcare", "government"),
})

DARK_NEUTRALS = MappingProxyType({
    "background": "#0F172A",
    "surface": "#1E293B",
    "text": "#FFFFFF",
    "text_muted": "#94A3B8",
})

STATUS_COLORS = MappingProxyType({
    "success": "#10B981",
    "warning": "#F59E0B",
    "error": "#EF4444",
})

NEUTRAL_OPTIONS = MappingProxyType({
    "background": ("#0F172A", "#1E293B", "#FFFFFF", "#F8FAFC", "#000000"),
    "surface": ("#1E293B", "#374151", "#F1F5F9", "#E2E8F0", "#1F2937"),
    "text": ("#FFFFFF", "#1F2937", "#000000", "#374151", "#F8FAFC"),
    "text_muted": ("#94A3B8", "#6B7280", "#9CA3AF", "#64748B", "#A1A1AA"),
})


# ------------------------------------------------------------------
# Color space conversion
# ------------------------------------------------------------------

def hex_to_rgb(h: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' to (r, g, b) ints in [0, 255]."""
    if not HEX_COLOR.match(h):
        raise ValueError(f"not a #RRGGBB color: {h!r}")
    h = h.lstrip("#")
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    channels = [max(0, min(255, int(round(c)))) for c in (r, g, b)]
    return "#{:02X}{:02X}{:02X}".format(*channels)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """(r, g, b) in [0, 255] to (h, s, l) with every component in [0, 1]."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    hi = max(r, g, b)
    lo = min(r, g, b)
    l = (hi + lo) / 2
    if hi == lo:
        return 0.0, 0.0, l

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Inverse of rgb_to_hsl; channels come back unrounded in [0, 255]."""
    h = h % 1.0
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h * 6) % 2 - 1))
    m = l - c / 2

    sector = int(h * 6)
    r, g, b = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[min(sector, 5)]
    return (r + m) * 255, (g + m) * 255, (b + m) * 255


def jitter_color(base: str, rng: SeededRandom) -> str:
    """Nudge hue, saturation and lightness of *base*; draws three values."""
    h, s, l = rgb_to_hsl(*hex_to_rgb(base))
    h = (h + (rng.next() - 0.5) * 0.2) % 1.0
    s = max(0.3, min(0.8, s + (rng.next() - 0.5) * 0.2))
    l = max(0.2, min(0.8, l + (rng.next() - 0.5) * 0.1))
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# ------------------------------------------------------------------
# Taste classification
# ------------------------------------------------------------------

def classify_taste(industry: str, keywords=TASTE_KEYWORDS) -> str:
    """Map free-text industry to a taste category.

    Total: every input lands in exactly one category, ``corporate`` when
    nothing matches (including the empty string).
    """
    text = (industry or "").lower()
    for category, words in keywords.items():
        if any(w in text for w in words):
            return category
    return FALLBACK_TASTE


# ------------------------------------------------------------------
# Synthesis
# ------------------------------------------------------------------

def synthesize_palette(category: str, randomize: bool, rng: SeededRandom,
                       schemes=COLOR_SCHEMES) -> ColorPalette:
    options = schemes.get(category) or schemes[FALLBACK_TASTE]
    base = options[rng.index(len(options))]

    if not randomize:
        return ColorPalette(
            primary=base["primary"],
            secondary=base["secondary"],
            accent=base["accent"],
            **DARK_NEUTRALS,
            **STATUS_COLORS,
        )

    try:
        primary = jitter_color(base["primary"], rng)
        secondary = jitter_color(base["secondary"], rng)
        accent = jitter_color(base["accent"], rng)
    except ValueError as exc:
        raise InvalidPaletteError(f"invalid generated palette: {exc}") from exc
    neutrals = {role: rng.choice(NEUTRAL_OPTIONS[role])
                for role in ("background", "surface", "text", "text_muted")}

    return ColorPalette(
        primary=primary,
        secondary=secondary,
        accent=accent,
        **neutrals,
        **STATUS_COLORS,
    )


def validate_palette(palette: ColorPalette) -> ColorPalette:
    bad = [(name, value) for name, value in palette.items()
           if not isinstance(value, str) or not HEX_COLOR.match(value)]
    if bad:
        details = ", ".join(f"{name}={value!r}" for name, value in bad)
        raise InvalidPaletteError(f"invalid generated palette: {details}")
    return palette


def get_palette_array(palette: ColorPalette) -> np.ndarray:
    """Return palette as (10, 3) float array in [0, 1], canonical order."""
    return np.array([hex_to_rgb(v) for _, v in palette.items()], dtype=np.float64) / 255.0
