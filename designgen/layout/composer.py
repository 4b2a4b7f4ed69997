"""Section selection, ordering and per-section customization.

Two linked decisions are made here:

* the *section plan*: which logical sections appear, their perturbed
  page order and a type-specific customization bag each;
* the *organism assignment*: which catalog organism renders each
  section type.

The two are joined by section type.  Hero, about, projects and contact
are always planned; skills, experience and (for developers and
designers) a 3D showcase are optional.  A section type with no catalog
organisms is dropped from the plan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

from designgen.layout.catalog import Catalog
from designgen.rng import SeededRandom
from designgen.template.model import (
    SECTION_TYPES,
    SHOWCASE_TYPE,
    ComponentConfig,
    OrganismAssignment,
    SectionPlan,
)

logger = logging.getLogger(__name__)

MANDATORY_SECTIONS = ("hero", "about", "projects", "contact")

# (type, nominal position, inclusion threshold or None for always)
BASE_SECTIONS = (
    ("hero", 1, None),
    ("about", 2, None),
    ("projects", 3, None),
    ("skills", 4, 0.3),
    ("experience", 5, 0.4),
    ("contact", 6, None),
)

SHOWCASE_ID = "3d-showcase"
SHOWCASE_PROFESSIONS = ("developer", "designer")
SHOWCASE_THRESHOLD = 0.5

CUSTOMIZATION_OPTIONS = MappingProxyType({
    "hero": (
        ("background", ("gradient", "solid", "image", "3d")),
        ("layout", ("centered", "split", "full-width")),
        ("animation", ("fade", "slide", "zoom")),
    ),
    "about": (
        ("layout", ("text-only", "image-text", "cards")),
        ("alignment", ("left", "center", "justify")),
    ),
    "projects": (
        ("layout", ("grid", "masonry", "carousel")),
        ("columns", (2, 3, 4)),
        ("animation", ("fade", "slide", "zoom")),
    ),
    "skills": (
        ("visualization", ("bars", "circles", "tags")),
        ("layout", ("grid", "list", "cloud")),
    ),
    "contact": (
        ("layout", ("form-only", "form-info", "split")),
        ("fields", ("name", "email", "message", "phone")),
    ),
})


@dataclass(frozen=True)
class Composition:
    plan: SectionPlan
    organisms: OrganismAssignment


def wants_showcase(profession: str) -> bool:
    text = (profession or "").lower()
    return any(p in text for p in SHOWCASE_PROFESSIONS)


def customize_section(section_type: str, rng: SeededRandom, randomize: bool = True) -> dict:
    bag = {}
    for key, options in CUSTOMIZATION_OPTIONS.get(section_type, ()):
        bag[key] = rng.choice(options) if randomize else options[0]
    return bag


def _has_organisms(catalog: Catalog, section_type: str) -> bool:
    if section_type not in SECTION_TYPES:
        return True
    return bool(catalog.by_type(section_type))


def plan_sections(profession: str, catalog: Catalog, randomize: bool,
                  rng: SeededRandom) -> SectionPlan:
    candidates: list[tuple[str, str, int]] = []
    for section_type, position, threshold in BASE_SECTIONS:
        if threshold is None or not randomize or rng.chance(threshold):
            candidates.append((section_type, section_type, position))

    if randomize and wants_showcase(profession):
        position = rng.index(3) + 2
        if rng.chance(SHOWCASE_THRESHOLD):
            candidates.append((SHOWCASE_ID, SHOWCASE_TYPE, position))

    sections = []
    for section_id, section_type, position in candidates:
        if not _has_organisms(catalog, section_type):
            logger.warning("No catalog organisms for %r; omitting section", section_type)
            continue
        if randomize:
            position = position + (rng.next() - 0.5) * 2
        sections.append(ComponentConfig(
            id=section_id,
            type=section_type,
            position=float(position),
            enabled=True,
            customization=customize_section(section_type, rng, randomize),
        ))

    sections.sort(key=lambda c: c.position)
    return SectionPlan(tuple(sections))


def assign_organisms(catalog: Catalog, randomize: bool, rng: SeededRandom) -> OrganismAssignment:
    chosen = {}
    for section_type in SECTION_TYPES:
        options = catalog.by_type(section_type)
        if not options:
            continue
        organism = rng.choice(options) if randomize else options[0]
        chosen[section_type] = organism.id
    return OrganismAssignment(chosen)


def compose(profession: str, catalog: Catalog, randomize: bool,
            rng: SeededRandom) -> Composition:
    plan = plan_sections(profession, catalog, randomize, rng)
    organisms = assign_organisms(catalog, randomize, rng)
    logger.debug("Planned sections %s", plan.types())
    return Composition(plan=plan, organisms=organisms)
