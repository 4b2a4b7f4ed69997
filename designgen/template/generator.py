"""Template generation: one seed in, one complete design out.

``TemplateGenerator`` owns the random stream for a call.  The stream is
created inside ``_synthesize`` and handed to each synthesizer in a
fixed order:

    palette -> layout -> typography -> animation -> components
    (section plan, then organism assignment) -> spacing -> name

Every synthesizer draws a data-dependent but seed-determined number of
values, so changing this order changes every template produced from an
existing seed.  Append new steps at the end.
"""

from __future__ import annotations

import hashlib
import logging
import uuid
from dataclasses import asdict
from datetime import datetime, timezone

from designgen.art.animation import synthesize_animation
from designgen.art.palettes import classify_taste, synthesize_palette, validate_palette
from designgen.art.typography import synthesize_typography
from designgen.layout.composer import compose
from designgen.layout.synth import synthesize_layout, synthesize_spacing
from designgen.rng import SeededRandom
from designgen.template.model import (
    Customization,
    GeneratedTemplate,
    GenerationOptions,
    TemplateMetadata,
    UserProfile,
)
from designgen.template.scoring import canonical, performance_score, uniqueness_score
from designgen.template.tables import DesignTables, default_tables

logger = logging.getLogger(__name__)

NAME_ADJECTIVES = (
    "Dynamic", "Modern", "Creative", "Professional",
    "Innovative", "Elegant", "Bold", "Minimal",
)
NAME_NOUNS = (
    "Portfolio", "Showcase", "Profile", "Presence",
    "Hub", "Space", "Studio", "Works",
)


def new_seed() -> str:
    return uuid.uuid4().hex


def unique_id_for(seed: str, base_template: str, profile: UserProfile,
                  options: GenerationOptions) -> str:
    """12 hex digits over every generation input: seed, base, profile, options."""
    payload = canonical({
        "seed": seed,
        "baseTemplate": base_template,
        "profile": asdict(profile),
        "options": asdict(options),
    })
    return hashlib.sha1(payload.encode("utf-8", "surrogatepass")).hexdigest()[:12]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TemplateGenerator:
    def __init__(self, tables: DesignTables | None = None, config: dict | None = None):
        cfg = config or {}
        self.tables: DesignTables = tables or default_tables()
        self.gate_optional_sections: bool = cfg.get("gate_optional_sections", True)
        self.default_base_template: str = cfg.get("default_base_template", "modern")
        self.clock = cfg.get("clock", _utc_now)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, base_template: str | None, profile: UserProfile,
                 options: GenerationOptions | None = None,
                 seed: str | None = None) -> GeneratedTemplate:
        options = options or GenerationOptions()
        base_template = base_template or self.default_base_template
        if seed is None:
            seed = new_seed()

        customization, name = self._synthesize(profile, options, seed)

        metadata = TemplateMetadata(
            seed=seed,
            ai_enhanced=options.ai_enhancement,
            uniqueness_score=uniqueness_score(
                customization.colors, customization.layout, customization.animations,
            ),
            performance_score=performance_score(
                customization.layout, customization.animations,
                len(customization.components),
            ),
        )

        unique_id = unique_id_for(seed, base_template, profile, options)
        template = GeneratedTemplate(
            id=f"{base_template}-{unique_id}",
            name=f"{name} {unique_id}",
            base_template=base_template,
            unique_id=unique_id,
            generated_at=self.clock().isoformat(),
            customization=customization,
            metadata=metadata,
        )
        logger.info(
            "Generated template %s (seed=%r, uniqueness=%.2f, performance=%d)",
            template.id, seed, metadata.uniqueness_score, metadata.performance_score,
        )
        return template

    def regenerate(self, template: GeneratedTemplate, profile: UserProfile,
                   options: GenerationOptions | None = None) -> GeneratedTemplate:
        """Rebuild *template* from its recorded seed."""
        return self.generate(template.base_template, profile, options,
                             seed=template.metadata.seed)

    # ------------------------------------------------------------------
    # Synthesis
    # ------------------------------------------------------------------

    def _taste_category(self, profile: UserProfile) -> str:
        hint = profile.preferences.color_scheme
        if hint and hint.lower() in self.tables.color_schemes:
            return hint.lower()
        return classify_taste(profile.industry, self.tables.taste_keywords)

    def _synthesize(self, profile: UserProfile, options: GenerationOptions,
                    seed: str) -> tuple[Customization, str]:
        rng = SeededRandom(seed)
        prefs = profile.preferences
        tables = self.tables

        category = self._taste_category(profile)
        colors = synthesize_palette(category, options.randomize_colors, rng,
                                    schemes=tables.color_schemes)
        validate_palette(colors)

        layout = synthesize_layout(prefs.layout_style, options.randomize_layout, rng,
                                   styles=tables.layout_styles)
        typography = synthesize_typography(rng, fonts=tables.fonts)
        animations = synthesize_animation(
            prefs.animation_style, options.randomize_animations, rng,
            reduced_motion=prefs.reduced_motion, styles=tables.animation_styles,
        )

        randomize_components = options.randomize_components or not self.gate_optional_sections
        composition = compose(profile.profession, tables.catalog, randomize_components, rng)

        spacing = synthesize_spacing(rng)
        name = f"{rng.choice(NAME_ADJECTIVES)} {rng.choice(NAME_NOUNS)}"

        logger.debug(
            "Seed %r: taste=%s layout=%s animation=%s draws=%d",
            seed, category, layout.style, animations.style, rng.draws,
        )
        customization = Customization(
            colors=colors,
            layout=layout,
            typography=typography,
            animations=animations,
            components=composition.plan,
            organisms=composition.organisms,
            spacing=spacing,
        )
        return customization, name


_DEFAULT: TemplateGenerator | None = None


def generate(base_template: str | None, profile: UserProfile,
             options: GenerationOptions | None = None,
             seed: str | None = None) -> GeneratedTemplate:
    """Generate with a process-wide generator over the default tables."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = TemplateGenerator()
    return _DEFAULT.generate(base_template, profile, options, seed)
