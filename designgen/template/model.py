"""Records that flow in and out of a generation call.

Inputs (``UserProfile``, ``GenerationOptions``) are plain frozen
dataclasses.  Everything a generation produces is frozen as well, with
tuples and read-only mappings in place of lists and dicts, so a
``GeneratedTemplate`` can be cached and shared without copying.

``to_dict`` uses the camelCase field names the stylesheet compiler and
the persistence layer expect (``textMuted``, ``reducedMotion``...).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

SECTION_TYPES = (
    "header", "hero", "about", "projects",
    "skills", "experience", "contact", "footer",
)
SHOWCASE_TYPE = "3d"


def _frozen(d: Mapping | None) -> Mapping:
    return MappingProxyType(dict(d or {}))


# ------------------------------------------------------------------
# Inputs
# ------------------------------------------------------------------

@dataclass(frozen=True)
class UserPreferences:
    color_scheme: str | None = None
    layout_style: str | None = None
    animation_style: str | None = None
    reduced_motion: bool | None = None

    @classmethod
    def from_dict(cls, d: dict | None) -> UserPreferences:
        d = d or {}
        return cls(
            color_scheme=d.get("colorScheme", d.get("color_scheme")),
            layout_style=d.get("layoutStyle", d.get("layout_style")),
            animation_style=d.get("animationStyle", d.get("animation_style")),
            reduced_motion=d.get("reducedMotion", d.get("reduced_motion")),
        )


@dataclass(frozen=True)
class UserProfile:
    profession: str = ""
    industry: str = ""
    experience: str = ""
    skills: tuple[str, ...] = ()
    personality: tuple[str, ...] = ()
    preferences: UserPreferences = field(default_factory=UserPreferences)

    @classmethod
    def from_dict(cls, d: dict) -> UserProfile:
        return cls(
            profession=d.get("profession", ""),
            industry=d.get("industry", ""),
            experience=d.get("experience", ""),
            skills=tuple(d.get("skills", ())),
            personality=tuple(d.get("personality", ())),
            preferences=UserPreferences.from_dict(d.get("preferences")),
        )


@dataclass(frozen=True)
class GenerationOptions:
    randomize_colors: bool = True
    randomize_layout: bool = True
    randomize_animations: bool = True
    randomize_components: bool = True
    ai_enhancement: bool = False

    @classmethod
    def from_dict(cls, d: dict | None) -> GenerationOptions:
        d = d or {}
        return cls(
            randomize_colors=d.get("randomizeColors", True),
            randomize_layout=d.get("randomizeLayout", True),
            randomize_animations=d.get("randomizeAnimations", True),
            randomize_components=d.get("randomizeComponents", True),
            ai_enhancement=d.get("aiEnhancement", False),
        )


# ------------------------------------------------------------------
# Palette
# ------------------------------------------------------------------

PALETTE_KEYS = (
    ("primary", "primary"),
    ("secondary", "secondary"),
    ("accent", "accent"),
    ("background", "background"),
    ("surface", "surface"),
    ("text", "text"),
    ("text_muted", "textMuted"),
    ("success", "success"),
    ("warning", "warning"),
    ("error", "error"),
)


@dataclass(frozen=True)
class ColorPalette:
    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    text: str
    text_muted: str
    success: str
    warning: str
    error: str

    def items(self) -> list[tuple[str, str]]:
        """(external name, hex) pairs in canonical order."""
        return [(ext, getattr(self, attr)) for attr, ext in PALETTE_KEYS]

    def to_dict(self) -> dict:
        return dict(self.items())

    @classmethod
    def from_dict(cls, d: dict) -> ColorPalette:
        return cls(**{attr: d[ext] for attr, ext in PALETTE_KEYS})


# ------------------------------------------------------------------
# Layout and spacing
# ------------------------------------------------------------------

@dataclass(frozen=True)
class SectionLayout:
    id: str
    type: str
    order: int
    width: str
    alignment: str
    padding: str
    margin: str

    def to_dict(self) -> dict:
        return {
            "id": self.id, "type": self.type, "order": self.order,
            "width": self.width, "alignment": self.alignment,
            "padding": self.padding, "margin": self.margin,
        }

    @classmethod
    def from_dict(cls, d: dict) -> SectionLayout:
        return cls(
            id=d["id"], type=d["type"], order=d["order"],
            width=d["width"], alignment=d["alignment"],
            padding=d["padding"], margin=d["margin"],
        )


@dataclass(frozen=True)
class LayoutConfig:
    style: str
    container: str
    sections: tuple[SectionLayout, ...]
    spacing: str
    alignment: str

    def to_dict(self) -> dict:
        return {
            "style": self.style,
            "container": self.container,
            "sections": [s.to_dict() for s in self.sections],
            "spacing": self.spacing,
            "alignment": self.alignment,
        }

    @classmethod
    def from_dict(cls, d: dict) -> LayoutConfig:
        return cls(
            style=d["style"], container=d["container"],
            sections=tuple(SectionLayout.from_dict(s) for s in d["sections"]),
            spacing=d["spacing"], alignment=d["alignment"],
        )


@dataclass(frozen=True)
class SpacingConfig:
    section: str
    component: str
    element: str
    custom: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "custom", _frozen(self.custom))

    def to_dict(self) -> dict:
        return {
            "section": self.section, "component": self.component,
            "element": self.element, "custom": dict(self.custom),
        }

    @classmethod
    def from_dict(cls, d: dict) -> SpacingConfig:
        return cls(
            section=d["section"], component=d["component"],
            element=d["element"], custom=d.get("custom", {}),
        )


# ------------------------------------------------------------------
# Typography and animation
# ------------------------------------------------------------------

@dataclass(frozen=True)
class TypeScale:
    h1: str
    h2: str
    h3: str
    body: str
    small: str

    def to_dict(self) -> dict:
        return {"h1": self.h1, "h2": self.h2, "h3": self.h3,
                "body": self.body, "small": self.small}


FONT_WEIGHTS = MappingProxyType({"light": 300, "normal": 400, "medium": 500, "bold": 700})


@dataclass(frozen=True)
class TypographyConfig:
    font_family: str
    heading_font: str
    body_font: str
    sizes: TypeScale
    weights: Mapping[str, int] = field(default_factory=lambda: FONT_WEIGHTS)

    def to_dict(self) -> dict:
        return {
            "fontFamily": self.font_family,
            "headingFont": self.heading_font,
            "bodyFont": self.body_font,
            "sizes": self.sizes.to_dict(),
            "weights": dict(self.weights),
        }

    @classmethod
    def from_dict(cls, d: dict) -> TypographyConfig:
        return cls(
            font_family=d["fontFamily"], heading_font=d["headingFont"],
            body_font=d["bodyFont"], sizes=TypeScale(**d["sizes"]),
            weights=MappingProxyType(dict(d.get("weights", FONT_WEIGHTS))),
        )


@dataclass(frozen=True)
class AnimationConfig:
    enabled: bool
    style: str
    duration: int
    easing: str
    stagger: bool
    reduced_motion: bool

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled, "style": self.style,
            "duration": self.duration, "easing": self.easing,
            "stagger": self.stagger, "reducedMotion": self.reduced_motion,
        }

    @classmethod
    def from_dict(cls, d: dict) -> AnimationConfig:
        return cls(
            enabled=d["enabled"], style=d["style"], duration=d["duration"],
            easing=d["easing"], stagger=d["stagger"],
            reduced_motion=d["reducedMotion"],
        )


# ------------------------------------------------------------------
# Components: which sections appear, and which organism renders each type
# ------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentConfig:
    id: str
    type: str
    position: float
    enabled: bool = True
    customization: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "customization", _frozen(self.customization))

    def to_dict(self) -> dict:
        return {
            "id": self.id, "type": self.type, "position": self.position,
            "enabled": self.enabled, "customization": dict(self.customization),
        }

    @classmethod
    def from_dict(cls, d: dict) -> ComponentConfig:
        return cls(
            id=d["id"], type=d["type"], position=d["position"],
            enabled=d.get("enabled", True),
            customization=d.get("customization", {}),
        )


@dataclass(frozen=True)
class SectionPlan:
    """Logical sections in page order."""
    sections: tuple[ComponentConfig, ...] = ()

    def types(self) -> list[str]:
        return [s.type for s in self.sections]

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self):
        return iter(self.sections)


@dataclass(frozen=True)
class OrganismAssignment:
    """Catalog organism id chosen for each section type."""
    by_type: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "by_type", _frozen(self.by_type))

    def for_section(self, section_type: str) -> str | None:
        return self.by_type.get(section_type)

    def to_dict(self) -> dict:
        return dict(self.by_type)


# ------------------------------------------------------------------
# Result
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Customization:
    colors: ColorPalette
    layout: LayoutConfig
    typography: TypographyConfig
    animations: AnimationConfig
    components: SectionPlan
    organisms: OrganismAssignment
    spacing: SpacingConfig

    def to_dict(self) -> dict:
        return {
            "colors": self.colors.to_dict(),
            "layout": self.layout.to_dict(),
            "typography": self.typography.to_dict(),
            "animations": self.animations.to_dict(),
            "components": [c.to_dict() for c in self.components],
            "organisms": self.organisms.to_dict(),
            "spacing": self.spacing.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> Customization:
        return cls(
            colors=ColorPalette.from_dict(d["colors"]),
            layout=LayoutConfig.from_dict(d["layout"]),
            typography=TypographyConfig.from_dict(d["typography"]),
            animations=AnimationConfig.from_dict(d["animations"]),
            components=SectionPlan(tuple(
                ComponentConfig.from_dict(c) for c in d["components"]
            )),
            organisms=OrganismAssignment(d.get("organisms", {})),
            spacing=SpacingConfig.from_dict(d["spacing"]),
        )


@dataclass(frozen=True)
class TemplateMetadata:
    seed: str
    ai_enhanced: bool
    uniqueness_score: float
    performance_score: int

    def to_dict(self) -> dict:
        return {
            "generationSeed": self.seed,
            "aiEnhanced": self.ai_enhanced,
            "uniquenessScore": self.uniqueness_score,
            "performanceScore": self.performance_score,
        }


@dataclass(frozen=True)
class GeneratedTemplate:
    id: str
    name: str
    base_template: str
    unique_id: str
    generated_at: str
    customization: Customization
    metadata: TemplateMetadata

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "baseTemplate": self.base_template,
            "uniqueId": self.unique_id,
            "generatedAt": self.generated_at,
            "customization": self.customization.to_dict(),
            "metadata": self.metadata.to_dict(),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, d: dict) -> GeneratedTemplate:
        meta = d["metadata"]
        return cls(
            id=d["id"],
            name=d["name"],
            base_template=d["baseTemplate"],
            unique_id=d["uniqueId"],
            generated_at=d["generatedAt"],
            customization=Customization.from_dict(d["customization"]),
            metadata=TemplateMetadata(
                seed=meta["generationSeed"],
                ai_enhanced=meta["aiEnhanced"],
                uniqueness_score=meta["uniquenessScore"],
                performance_score=meta["performanceScore"],
            ),
        )
