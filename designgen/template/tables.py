"""Read-only design tables handed to the generator.

Built once at startup and passed by reference; nothing in here is ever
mutated, so concurrent generations can share one instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping

from designgen.art.animation import ANIMATION_STYLES
from designgen.art.palettes import COLOR_SCHEMES, TASTE_KEYWORDS
from designgen.art.typography import FONT_FAMILIES
from designgen.layout.catalog import Catalog, default_catalog
from designgen.layout.synth import LAYOUT_STYLES


@dataclass(frozen=True)
class DesignTables:
    catalog: Catalog
    color_schemes: Mapping[str, tuple] = field(default_factory=lambda: COLOR_SCHEMES)
    taste_keywords: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: TASTE_KEYWORDS)
    fonts: tuple[str, ...] = FONT_FAMILIES
    layout_styles: tuple[str, ...] = LAYOUT_STYLES
    animation_styles: tuple[str, ...] = ANIMATION_STYLES

    def with_catalog(self, catalog: Catalog) -> DesignTables:
        return DesignTables(
            catalog=catalog,
            color_schemes=self.color_schemes,
            taste_keywords=self.taste_keywords,
            fonts=self.fonts,
            layout_styles=self.layout_styles,
            animation_styles=self.animation_styles,
        )


@lru_cache(maxsize=1)
def default_tables() -> DesignTables:
    return DesignTables(catalog=default_catalog())
