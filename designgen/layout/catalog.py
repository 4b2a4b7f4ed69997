"""Organism catalog: reusable section-level design variants.

Each organism renders one section type (header, hero, about, projects,
skills, experience, contact, footer) and carries its sub-component
references, style variants, a default property bag and a layout
descriptor with per-breakpoint overrides.

The catalog is read-only.  Build it once and share it; reduced catalogs
are derived with ``without_type`` rather than by mutation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from designgen.template.model import SECTION_TYPES


@dataclass(frozen=True)
class OrganismLayout:
    container: str
    sections: tuple[str, ...]
    responsive: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def __post_init__(self):
        frozen = {bp: MappingProxyType(dict(v)) for bp, v in dict(self.responsive).items()}
        object.__setattr__(self, "responsive", MappingProxyType(frozen))

    def to_dict(self) -> dict:
        return {
            "container": self.container,
            "sections": list(self.sections),
            "responsive": {bp: dict(v) for bp, v in self.responsive.items()},
        }


@dataclass(frozen=True)
class Organism:
    id: str
    name: str
    type: str
    molecules: tuple[str, ...]
    variants: tuple[str, ...]
    properties: Mapping[str, Any]
    layout: OrganismLayout

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def to_dict(self) -> dict:
        return {
            "id": self.id, "name": self.name, "type": self.type,
            "molecules": list(self.molecules),
            "variants": list(self.variants),
            "properties": dict(self.properties),
            "layout": self.layout.to_dict(),
        }


class Catalog:
    def __init__(self, organisms: Iterable[Organism]):
        self._organisms: tuple[Organism, ...] = tuple(organisms)
        self._by_id = MappingProxyType({o.id: o for o in self._organisms})
        index: dict[str, list[Organism]] = {t: [] for t in SECTION_TYPES}
        for o in self._organisms:
            index.setdefault(o.type, []).append(o)
        self._by_type = MappingProxyType({t: tuple(v) for t, v in index.items()})

    def __len__(self) -> int:
        return len(self._organisms)

    def __iter__(self) -> Iterator[Organism]:
        return iter(self._organisms)

    def get(self, organism_id: str) -> Organism | None:
        return self._by_id.get(organism_id)

    def by_type(self, section_type: str) -> tuple[Organism, ...]:
        return self._by_type.get(section_type, ())

    def section_types(self) -> list[str]:
        """Section types that have at least one organism."""
        return [t for t, v in self._by_type.items() if v]

    def counts(self) -> dict[str, int]:
        return {t: len(v) for t, v in self._by_type.items()}

    def total_combinations(self) -> int:
        """Distinct one-organism-per-type pages; empty types are skipped."""
        sizes = [len(v) for v in self._by_type.values() if v]
        return math.prod(sizes) if sizes else 0

    def without_type(self, section_type: str) -> Catalog:
        return Catalog(o for o in self._organisms if o.type != section_type)


# ------------------------------------------------------------------
# Built-in organisms
# ------------------------------------------------------------------

_BP_PADDING = {"mobile": {"padding": "4rem 0"}, "tablet": {"padding": "6rem 0"}}
_BP_HEIGHT = {"mobile": {"minHeight": "80vh"}, "tablet": {"minHeight": "100vh"}}

_LIGHT = {"padding": "6rem 0", "backgroundColor": "#FFFFFF", "color": "#1F2937"}
_SOFT = {"padding": "6rem 0", "backgroundColor": "#F8FAFC", "color": "#1F2937"}
_BLUE = {"padding": "6rem 0", "background": "linear-gradient(135deg, #1E40AF, #3B82F6)",
         "color": "#FFFFFF"}
_VIOLET = {"padding": "6rem 0", "background": "linear-gradient(135deg, #1E40AF, #8B5CF6)",
           "color": "#FFFFFF"}
_SLATE = {"padding": "6rem 0", "background": "linear-gradient(135deg, #1E293B, #0F172A)",
          "color": "#FFFFFF"}


def _o(oid, name, kind, molecules, variants, properties,
       container, sections, responsive=None) -> Organism:
    return Organism(
        id=oid, name=name, type=kind,
        molecules=tuple(molecules), variants=tuple(variants),
        properties=properties,
        layout=OrganismLayout(container, tuple(sections), responsive or _BP_PADDING),
    )


_BUILTIN = (
    # header
    _o("header-standard", "Standard Header", "header",
       ["nav-primary", "btn-group-horizontal"], ["fixed", "sticky", "transparent", "glass"],
       {"height": "4rem", "backgroundColor": "#FFFFFF", "borderBottom": "1px solid #E5E7EB",
        "position": "sticky", "top": "0", "zIndex": "1000"},
       "max-width-1200", ["logo", "navigation", "cta"],
       {"mobile": {"direction": "column", "height": "auto"},
        "tablet": {"direction": "row", "height": "4rem"}}),
    _o("header-minimal", "Minimal Header", "header",
       ["nav-secondary", "btn-icon"], ["centered", "left-aligned", "right-aligned"],
       {"height": "3rem", "backgroundColor": "transparent", "position": "absolute",
        "top": "0", "width": "100%", "zIndex": "1000"},
       "max-width-1200", ["logo", "navigation"],
       {"mobile": {"display": "none"}, "tablet": {"display": "flex"}}),
    _o("header-creative", "Creative Header", "header",
       ["nav-primary", "btn-group-vertical"], ["animated", "3d", "particles"],
       {"height": "5rem", "background": "linear-gradient(135deg, #1E40AF, #3B82F6)",
        "position": "relative", "overflow": "hidden"},
       "max-width-1400", ["logo", "navigation", "social", "cta"],
       {"mobile": {"height": "auto", "padding": "1rem"},
        "tablet": {"height": "5rem", "padding": "0 2rem"}}),
    _o("header-corporate", "Corporate Header", "header",
       ["nav-primary", "btn-group-horizontal"], ["professional", "minimal", "branded"],
       {"height": "4.5rem", "backgroundColor": "#1F2937", "color": "#FFFFFF",
        "borderBottom": "2px solid #374151"},
       "max-width-1200", ["logo", "navigation", "contact-info"],
       {"mobile": {"height": "auto"}, "tablet": {"height": "4.5rem"}}),
    _o("header-mobile-first", "Mobile-First Header", "header",
       ["nav-mobile", "btn-icon"], ["hamburger", "slide-out", "overlay"],
       {"height": "3.5rem", "backgroundColor": "#FFFFFF", "position": "fixed",
        "top": "0", "width": "100%", "zIndex": "1000"},
       "full-width", ["logo", "hamburger", "mobile-menu"],
       {"mobile": {"display": "flex"}, "tablet": {"display": "none"}}),

    # hero
    _o("hero-standard", "Standard Hero", "hero",
       ["text-group-heading", "btn-group-horizontal", "media-image"],
       ["centered", "split", "full-width", "minimal"],
       {"minHeight": "100vh", "background": "linear-gradient(135deg, #1E293B, #0F172A)",
        "color": "#FFFFFF", "display": "flex", "alignItems": "center",
        "justifyContent": "center"},
       "max-width-1200", ["content", "media", "cta"],
       {"mobile": {"minHeight": "80vh", "padding": "2rem 1rem"},
        "tablet": {"minHeight": "100vh", "padding": "4rem 2rem"}}),
    _o("hero-3d", "3D Hero", "hero",
       ["text-group-heading", "btn-group-horizontal"], ["particles", "geometric", "interactive"],
       {"minHeight": "100vh", "background": "linear-gradient(135deg, #1E40AF, #8B5CF6)",
        "color": "#FFFFFF", "position": "relative", "overflow": "hidden"},
       "max-width-1400", ["3d-scene", "content", "cta"], _BP_HEIGHT),
    _o("hero-video", "Video Hero", "hero",
       ["text-group-heading", "btn-group-horizontal", "media-video"],
       ["background", "overlay", "autoplay"],
       {"minHeight": "100vh", "position": "relative", "overflow": "hidden",
        "display": "flex", "alignItems": "center", "justifyContent": "center"},
       "max-width-1200", ["video-background", "content-overlay", "cta"], _BP_HEIGHT),
    _o("hero-parallax", "Parallax Hero", "hero",
       ["text-group-heading", "btn-group-horizontal"], ["scroll", "mouse", "touch"],
       {"minHeight": "120vh", "background": "linear-gradient(135deg, #0F172A, #1E293B)",
        "color": "#FFFFFF", "position": "relative", "overflow": "hidden"},
       "max-width-1200", ["parallax-bg", "content", "cta"],
       {"mobile": {"minHeight": "100vh"}, "tablet": {"minHeight": "120vh"}}),
    _o("hero-minimal", "Minimal Hero", "hero",
       ["text-group-heading", "btn-secondary"], ["centered", "left-aligned", "right-aligned"],
       {"minHeight": "80vh", "backgroundColor": "#FFFFFF", "color": "#1F2937",
        "display": "flex", "alignItems": "center", "justifyContent": "center"},
       "max-width-800", ["content", "cta"],
       {"mobile": {"minHeight": "60vh", "padding": "2rem 1rem"},
        "tablet": {"minHeight": "80vh", "padding": "4rem 2rem"}}),
    _o("hero-split", "Split Hero", "hero",
       ["text-group-heading", "btn-group-horizontal", "media-image"],
       ["image-left", "image-right", "diagonal"],
       {"minHeight": "90vh", "backgroundColor": "#F8FAFC", "color": "#1F2937",
        "display": "grid", "gridTemplateColumns": "1fr 1fr"},
       "max-width-1400", ["content", "media"],
       {"mobile": {"gridTemplateColumns": "1fr"}, "tablet": {"gridTemplateColumns": "1fr 1fr"}}),
    _o("hero-typographic", "Typographic Hero", "hero",
       ["text-group-heading", "btn-secondary"], ["oversized", "stacked", "outlined"],
       {"minHeight": "90vh", "backgroundColor": "#0F172A", "color": "#F8FAFC",
        "display": "flex", "alignItems": "flex-end"},
       "max-width-1400", ["headline", "subline", "cta"],
       {"mobile": {"minHeight": "70vh"}, "tablet": {"minHeight": "90vh"}}),
    _o("hero-gradient", "Gradient Hero", "hero",
       ["text-group-heading", "btn-group-horizontal"], ["mesh", "radial", "animated"],
       {"minHeight": "100vh", "background": "linear-gradient(135deg, #8B5CF6, #EC4899)",
        "color": "#FFFFFF", "display": "flex", "alignItems": "center"},
       "max-width-1200", ["content", "cta"], _BP_HEIGHT),
    _o("hero-carousel", "Carousel Hero", "hero",
       ["text-group-heading", "media-gallery", "btn-group-horizontal"],
       ["slides", "fade", "ken-burns"],
       {"minHeight": "100vh", "position": "relative", "overflow": "hidden",
        "color": "#FFFFFF"},
       "full-width", ["slides", "content-overlay", "navigation"], _BP_HEIGHT),
    _o("hero-profile", "Profile Hero", "hero",
       ["media-avatar", "text-group-heading", "nav-social"],
       ["card", "centered", "badge"],
       {"minHeight": "80vh", "backgroundColor": "#FFFFFF", "color": "#1F2937",
        "display": "flex", "flexDirection": "column", "alignItems": "center"},
       "max-width-800", ["avatar", "content", "social"],
       {"mobile": {"minHeight": "60vh"}, "tablet": {"minHeight": "80vh"}}),

    # about
    _o("about-standard", "Standard About", "about",
       ["text-group-heading", "text-group-paragraph", "media-image"],
       ["text-image", "image-text", "centered"], _SOFT,
       "max-width-1200", ["heading", "content", "image", "stats"],
       {"mobile": {"padding": "4rem 0", "direction": "column"},
        "tablet": {"padding": "6rem 0", "direction": "row"}}),
    _o("about-timeline", "Timeline About", "about",
       ["text-group-heading", "text-group-paragraph"], ["vertical", "horizontal", "zigzag"],
       dict(_LIGHT, position="relative"), "max-width-1200", ["heading", "timeline"]),
    _o("about-stats", "Stats About", "about",
       ["text-group-heading", "card-basic"], ["numbers", "progress", "achievements"],
       _BLUE, "max-width-1200", ["heading", "stats-grid"]),
    _o("about-values", "Values About", "about",
       ["text-group-heading", "card-basic"], ["icons", "cards", "list"],
       _SOFT, "max-width-1200", ["heading", "values-grid"]),
    _o("about-testimonial", "Testimonial About", "about",
       ["text-group-heading", "card-testimonial"], ["single", "carousel", "grid"],
       _LIGHT, "max-width-1200", ["heading", "testimonials"]),

    # projects
    _o("projects-grid", "Projects Grid", "projects",
       ["text-group-heading", "card-project", "layout-grid"],
       ["2-column", "3-column", "4-column", "masonry"], _SOFT,
       "max-width-1400", ["heading", "filters", "projects-grid"],
       {"mobile": {"padding": "4rem 0", "gridColumns": "1"},
        "tablet": {"padding": "6rem 0", "gridColumns": "2"},
        "desktop": {"gridColumns": "3"}}),
    _o("projects-carousel", "Projects Carousel", "projects",
       ["text-group-heading", "card-project"], ["horizontal", "vertical", "3d"],
       dict(_LIGHT, overflow="hidden"), "max-width-1400", ["heading", "carousel", "navigation"]),
    _o("projects-featured", "Featured Projects", "projects",
       ["text-group-heading", "card-project", "media-gallery"],
       ["hero-project", "side-projects", "alternating"], _SLATE,
       "max-width-1400", ["heading", "featured", "other-projects"]),
    _o("projects-categories", "Categorized Projects", "projects",
       ["text-group-heading", "card-project", "nav-secondary"], ["tabs", "filters", "tags"],
       _SOFT, "max-width-1400", ["heading", "categories", "projects"]),
    _o("projects-interactive", "Interactive Projects", "projects",
       ["text-group-heading", "card-project"], ["hover-effects", "3d-cards", "parallax"],
       dict(_LIGHT, perspective="1000px"), "max-width-1400", ["heading", "interactive-grid"]),
    _o("projects-masonry", "Masonry Projects", "projects",
       ["text-group-heading", "card-project", "layout-grid"], ["tight", "gapped", "staggered"],
       _LIGHT, "max-width-1400", ["heading", "masonry-grid"]),
    _o("projects-list", "Project List", "projects",
       ["text-group-heading", "card-project"], ["compact", "detailed", "numbered"],
       _SOFT, "max-width-1000", ["heading", "project-rows"]),
    _o("projects-case-study", "Case Study Projects", "projects",
       ["text-group-heading", "text-group-paragraph", "media-image"],
       ["long-form", "alternating", "chaptered"], _LIGHT,
       "max-width-1200", ["heading", "case-studies", "cta"]),
    _o("projects-showcase", "Showcase Projects", "projects",
       ["text-group-heading", "card-project", "media-video"],
       ["fullscreen", "spotlight", "reel"], _SLATE,
       "full-width", ["heading", "showcase", "navigation"]),
    _o("projects-timeline", "Project Timeline", "projects",
       ["text-group-heading", "card-project"], ["vertical", "horizontal", "by-year"],
       dict(_SOFT, position="relative"), "max-width-1200", ["heading", "timeline"]),

    # skills
    _o("skills-bars", "Skills Bars", "skills",
       ["text-group-heading", "card-skill"], ["horizontal", "vertical", "circular"],
       _SOFT, "max-width-1200", ["heading", "skills-grid"]),
    _o("skills-cloud", "Skills Cloud", "skills",
       ["text-group-heading", "card-skill"], ["word-cloud", "tag-cloud", "bubble"],
       dict(_LIGHT, position="relative"), "max-width-1200", ["heading", "skills-cloud"]),
    _o("skills-categories", "Categorized Skills", "skills",
       ["text-group-heading", "card-skill"], ["frontend", "backend", "tools", "soft-skills"],
       _VIOLET, "max-width-1200", ["heading", "categories", "skills-grid"]),
    _o("skills-timeline", "Skills Timeline", "skills",
       ["text-group-heading", "card-skill"], ["chronological", "proficiency", "learning"],
       dict(_SOFT, position="relative"), "max-width-1200", ["heading", "timeline"]),
    _o("skills-interactive", "Interactive Skills", "skills",
       ["text-group-heading", "card-skill"], ["3d-visualization", "interactive-chart", "skill-tree"],
       dict(_LIGHT, minHeight="80vh"), "max-width-1400", ["heading", "3d-scene"],
       {"mobile": {"padding": "4rem 0", "minHeight": "60vh"},
        "tablet": {"padding": "6rem 0", "minHeight": "80vh"}}),

    # experience
    _o("experience-timeline", "Experience Timeline", "experience",
       ["text-group-heading", "card-basic"], ["vertical", "horizontal", "zigzag"],
       dict(_SOFT, position="relative"), "max-width-1200", ["heading", "timeline"]),
    _o("experience-cards", "Experience Cards", "experience",
       ["text-group-heading", "card-basic"], ["grid", "carousel", "accordion"],
       _LIGHT, "max-width-1200", ["heading", "experience-grid"]),
    _o("experience-company", "Company Experience", "experience",
       ["text-group-heading", "card-basic", "media-image"],
       ["logo-timeline", "company-cards", "role-progression"], _SLATE,
       "max-width-1200", ["heading", "companies", "roles"]),
    _o("experience-achievements", "Achievements Experience", "experience",
       ["text-group-heading", "card-basic"], ["milestones", "awards", "certifications"],
       _SOFT, "max-width-1200", ["heading", "achievements-grid"]),
    _o("experience-projects", "Project Experience", "experience",
       ["text-group-heading", "card-project"], ["chronological", "by-company", "by-role"],
       _LIGHT, "max-width-1400", ["heading", "projects-timeline"]),

    # contact
    _o("contact-form", "Contact Form", "contact",
       ["text-group-heading", "form-input", "form-textarea", "btn-primary"],
       ["standard", "minimal", "creative"], _SOFT,
       "max-width-800", ["heading", "form", "info"]),
    _o("contact-split", "Split Contact", "contact",
       ["text-group-heading", "form-input", "card-contact"],
       ["form-info", "form-map", "form-social"], _LIGHT,
       "max-width-1200", ["heading", "form-section", "info-section"],
       {"mobile": {"padding": "4rem 0", "direction": "column"},
        "tablet": {"padding": "6rem 0", "direction": "row"}}),
    _o("contact-cards", "Contact Cards", "contact",
       ["text-group-heading", "card-contact"], ["info-cards", "social-cards", "location-cards"],
       _BLUE, "max-width-1200", ["heading", "contact-grid"]),
    _o("contact-interactive", "Interactive Contact", "contact",
       ["text-group-heading", "form-input", "btn-primary"],
       ["animated-form", "3d-contact", "particle-bg"],
       dict(_LIGHT, position="relative", overflow="hidden"),
       "max-width-1200", ["heading", "interactive-form", "background"]),
    _o("contact-minimal", "Minimal Contact", "contact",
       ["text-group-heading", "form-input", "btn-secondary"],
       ["centered", "left-aligned", "right-aligned"], _SOFT,
       "max-width-600", ["heading", "form"]),

    # footer
    _o("footer-standard", "Standard Footer", "footer",
       ["nav-social", "text-group-paragraph"], ["simple", "detailed", "branded"],
       {"padding": "4rem 0 2rem", "backgroundColor": "#1F2937", "color": "#FFFFFF"},
       "max-width-1200", ["content", "links", "social", "copyright"],
       {"mobile": {"padding": "2rem 0 1rem"}, "tablet": {"padding": "4rem 0 2rem"}}),
    _o("footer-minimal", "Minimal Footer", "footer",
       ["text-caption", "nav-social"], ["centered", "left-aligned", "right-aligned"],
       {"padding": "2rem 0", "backgroundColor": "#F8FAFC", "color": "#6B7280",
        "borderTop": "1px solid #E5E7EB"},
       "max-width-1200", ["copyright", "social"],
       {"mobile": {"padding": "1rem 0"}, "tablet": {"padding": "2rem 0"}}),
    _o("footer-creative", "Creative Footer", "footer",
       ["text-group-heading", "nav-social", "btn-primary"], ["animated", "3d", "particles"],
       {"padding": "6rem 0 2rem", "background": "linear-gradient(135deg, #1E40AF, #8B5CF6)",
        "color": "#FFFFFF", "position": "relative", "overflow": "hidden"},
       "max-width-1200", ["content", "cta", "social", "copyright"],
       {"mobile": {"padding": "4rem 0 1rem"}, "tablet": {"padding": "6rem 0 2rem"}}),
    _o("footer-corporate", "Corporate Footer", "footer",
       ["text-group-paragraph", "nav-primary"], ["professional", "legal", "branded"],
       {"padding": "4rem 0 2rem", "backgroundColor": "#111827", "color": "#D1D5DB",
        "borderTop": "2px solid #374151"},
       "max-width-1200", ["company-info", "links", "legal", "copyright"],
       {"mobile": {"padding": "2rem 0 1rem"}, "tablet": {"padding": "4rem 0 2rem"}}),
    _o("footer-glass", "Glass Footer", "footer",
       ["text-group-paragraph", "nav-social"], ["frosted", "blur", "transparent"],
       {"padding": "4rem 0 2rem", "backgroundColor": "rgba(255, 255, 255, 0.1)",
        "backdropFilter": "blur(10px)", "borderTop": "1px solid rgba(255, 255, 255, 0.2)",
        "color": "#FFFFFF"},
       "max-width-1200", ["content", "social", "copyright"],
       {"mobile": {"padding": "2rem 0 1rem"}, "tablet": {"padding": "4rem 0 2rem"}}),
)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    return Catalog(_BUILTIN)
