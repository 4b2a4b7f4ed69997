"""Page skeleton: container, per-section layout, spacing rhythm.

Each layout archetype has its own shortlist of containers, spacing
categories and alignments.  An archetype that is not in the tables
falls back to a single-option shortlist instead of failing.
"""

from __future__ import annotations

from types import MappingProxyType

from designgen.art.typography import rem
from designgen.rng import SeededRandom
from designgen.template.model import LayoutConfig, SectionLayout, SpacingConfig

LAYOUT_STYLES = ("minimal", "modern", "creative", "corporate", "grid", "masonry", "timeline")

CONTAINERS = MappingProxyType({
    "minimal": ("centered", "full-width"),
    "modern": ("centered", "grid"),
    "creative": ("full-width", "grid"),
    "corporate": ("centered", "sidebar"),
    "grid": ("grid", "full-width"),
    "masonry": ("grid", "full-width"),
    "timeline": ("centered", "sidebar"),
})

SPACINGS = MappingProxyType({
    "minimal": ("tight", "normal"),
    "modern": ("normal", "loose"),
    "creative": ("loose", "custom"),
    "corporate": ("normal", "tight"),
    "grid": ("normal", "tight"),
    "masonry": ("tight", "normal"),
    "timeline": ("normal", "loose"),
})

ALIGNMENTS = MappingProxyType({
    "minimal": ("center", "left"),
    "modern": ("center", "left"),
    "creative": ("center", "justify"),
    "corporate": ("left", "center"),
    "grid": ("center", "left"),
    "masonry": ("center", "justify"),
    "timeline": ("left", "center"),
})

FALLBACK_CONTAINER = ("centered",)
FALLBACK_SPACING = ("normal",)
FALLBACK_ALIGNMENT = ("center",)

SECTION_WIDTHS = ("full", "half", "third")
SECTION_ALIGNMENTS = ("left", "center", "right")

# Unperturbed skeleton used when layout randomization is off.
BASE_SECTIONS = (
    SectionLayout("hero", "hero", 1, "full", "center", "6rem", "0"),
    SectionLayout("about", "about", 2, "full", "left", "4rem", "2rem 0"),
    SectionLayout("projects", "projects", 3, "full", "center", "4rem", "2rem 0"),
    SectionLayout("skills", "skills", 4, "full", "center", "3rem", "1rem 0"),
    SectionLayout("contact", "contact", 5, "full", "center", "4rem", "2rem 0"),
)


def _pick(options: tuple, rng: SeededRandom, randomize: bool):
    return rng.choice(options) if randomize else options[0]


def _jitter_sections(rng: SeededRandom) -> tuple[SectionLayout, ...]:
    sections = []
    for base in BASE_SECTIONS:
        width = rng.choice(SECTION_WIDTHS)
        alignment = rng.choice(SECTION_ALIGNMENTS)
        padding = rem(2 + rng.next() * 4)
        margin = f"{rem(rng.next() * 2)} 0"
        sections.append(SectionLayout(
            id=base.id, type=base.type, order=base.order,
            width=width, alignment=alignment,
            padding=padding, margin=margin,
        ))
    return tuple(sections)


def synthesize_layout(preferred: str | None, randomize: bool, rng: SeededRandom,
                      styles=LAYOUT_STYLES) -> LayoutConfig:
    style = preferred or rng.choice(styles)

    container = _pick(CONTAINERS.get(style, FALLBACK_CONTAINER), rng, randomize)
    sections = _jitter_sections(rng) if randomize else BASE_SECTIONS
    spacing = _pick(SPACINGS.get(style, FALLBACK_SPACING), rng, randomize)
    alignment = _pick(ALIGNMENTS.get(style, FALLBACK_ALIGNMENT), rng, randomize)

    return LayoutConfig(
        style=style,
        container=container,
        sections=sections,
        spacing=spacing,
        alignment=alignment,
    )


def synthesize_spacing(rng: SeededRandom) -> SpacingConfig:
    """Spacing rhythm derived from one 1-3rem base unit."""
    base = 1 + rng.next() * 2
    return SpacingConfig(
        section=rem(base * 4),
        component=rem(base * 2),
        element=rem(base),
        custom={
            "hero": rem(base * 6),
            "footer": rem(base * 3),
            "sidebar": rem(base * 2),
        },
    )
