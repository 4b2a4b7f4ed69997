"""Tests for layout synthesis, the organism catalog and section planning."""

import pytest

from designgen.layout.catalog import Catalog, default_catalog
from designgen.layout.composer import (
    CUSTOMIZATION_OPTIONS,
    MANDATORY_SECTIONS,
    SHOWCASE_ID,
    assign_organisms,
    compose,
    customize_section,
    plan_sections,
    wants_showcase,
)
from designgen.layout.synth import (
    BASE_SECTIONS,
    CONTAINERS,
    SECTION_ALIGNMENTS,
    SECTION_WIDTHS,
    synthesize_layout,
    synthesize_spacing,
)
from designgen.rng import SeededRandom
from designgen.template.model import SECTION_TYPES


def _rem(value: str) -> float:
    return float(value.removesuffix("rem"))


class TestSynthesizeLayout:
    def test_fixed_layout_uses_base_sections(self):
        layout = synthesize_layout("corporate", False, SeededRandom("x"))
        assert layout.style == "corporate"
        assert layout.container == "centered"
        assert layout.spacing == "normal"
        assert layout.alignment == "left"
        assert layout.sections == BASE_SECTIONS

    def test_preferred_style_skips_style_draw(self):
        rng = SeededRandom("x")
        synthesize_layout("modern", False, rng)
        assert rng.draws == 0

    def test_unknown_style_falls_back(self):
        layout = synthesize_layout("brutalist", True, SeededRandom("x"))
        assert layout.style == "brutalist"
        assert layout.container == "centered"
        assert layout.spacing == "normal"
        assert layout.alignment == "center"

    def test_randomized_sections_stay_in_bounds(self):
        for i in range(20):
            layout = synthesize_layout(None, True, SeededRandom(f"layout-{i}"))
            assert layout.container in CONTAINERS[layout.style]
            assert [s.type for s in layout.sections] == [s.type for s in BASE_SECTIONS]
            for section in layout.sections:
                assert section.width in SECTION_WIDTHS
                assert section.alignment in SECTION_ALIGNMENTS
                assert 2.0 <= _rem(section.padding) <= 6.0
                assert section.margin.endswith(" 0")

    def test_spacing_scales_from_one_base(self):
        spacing = synthesize_spacing(SeededRandom("spacing"))
        base = _rem(spacing.element)
        assert 1.0 <= base <= 3.0
        assert _rem(spacing.section) == pytest.approx(base * 4, abs=0.01)
        assert _rem(spacing.component) == pytest.approx(base * 2, abs=0.01)
        assert set(spacing.custom) == {"hero", "footer", "sidebar"}


class TestCatalog:
    def test_builtin_counts(self):
        catalog = default_catalog()
        assert len(catalog) == 50
        counts = catalog.counts()
        assert counts["hero"] == 10
        assert counts["projects"] == 10
        assert all(counts[t] == 5 for t in
                   ("header", "about", "skills", "experience", "contact", "footer"))
        assert catalog.total_combinations() == 5 ** 6 * 10 * 10

    def test_ids_are_unique(self):
        ids = [o.id for o in default_catalog()]
        assert len(ids) == len(set(ids))

    def test_lookup(self):
        catalog = default_catalog()
        assert catalog.get("header-standard").type == "header"
        assert catalog.get("no-such-organism") is None
        assert catalog.by_type("3d") == ()

    def test_without_type(self):
        reduced = default_catalog().without_type("experience")
        assert reduced.by_type("experience") == ()
        assert "experience" not in reduced.section_types()
        assert len(reduced) == 45
        assert reduced.total_combinations() == 5 ** 5 * 10 * 10

    def test_empty_catalog(self):
        assert Catalog([]).total_combinations() == 0

    def test_organisms_are_read_only(self):
        organism = default_catalog().get("header-standard")
        with pytest.raises(TypeError):
            organism.properties["height"] = "1rem"


class TestPlanSections:
    def test_sections_are_unique_and_sorted(self):
        catalog = default_catalog()
        for i in range(30):
            plan = plan_sections("Senior Developer", catalog, True, SeededRandom(f"plan-{i}"))
            types = plan.types()
            assert len(types) == len(set(types))
            assert set(MANDATORY_SECTIONS) <= set(types)
            positions = [s.position for s in plan]
            assert positions == sorted(positions)

    def test_fixed_plan(self):
        rng = SeededRandom("fixed")
        plan = plan_sections("Senior Developer", default_catalog(), False, rng)
        assert plan.types() == ["hero", "about", "projects", "skills", "experience", "contact"]
        assert [s.position for s in plan] == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        assert dict(plan.sections[0].customization) == {
            "background": "gradient", "layout": "centered", "animation": "fade",
        }
        assert rng.draws == 0

    @pytest.mark.parametrize("seed", ["abc", "xyz123", "gate-1", "gate-2", "gate-3",
                                      "gate-4", "gate-5", "gate-6", "gate-7", "gate-8"])
    def test_optional_sections_follow_their_draws(self, seed):
        replay = SeededRandom(seed)
        skills = replay.next() > 0.3
        experience = replay.next() > 0.4
        showcase_position = replay.index(3) + 2
        showcase = replay.next() > 0.5

        plan = plan_sections("Senior Developer", default_catalog(), True, SeededRandom(seed))
        types = plan.types()
        assert ("skills" in types) is skills
        assert ("experience" in types) is experience
        assert ("3d" in types) is showcase
        if showcase:
            position = next(s.position for s in plan if s.type == "3d")
            assert showcase_position - 1 <= position <= showcase_position + 1

    def test_showcase_only_for_developers_and_designers(self):
        catalog = default_catalog()
        accountant = [plan_sections("Accountant", catalog, True, SeededRandom(f"s-{i}"))
                      for i in range(40)]
        assert all("3d" not in p.types() for p in accountant)

        developer = [plan_sections("Developer", catalog, True, SeededRandom(f"s-{i}"))
                     for i in range(40)]
        showcases = [s for p in developer for s in p if s.type == "3d"]
        assert showcases
        assert all(s.id == SHOWCASE_ID for s in showcases)

    def test_empty_type_is_omitted(self):
        reduced = default_catalog().without_type("experience")
        for i in range(20):
            plan = plan_sections("Designer", reduced, True, SeededRandom(f"d-{i}"))
            assert "experience" not in plan.types()
            assert set(MANDATORY_SECTIONS) <= set(plan.types())

    def test_empty_mandatory_type_is_omitted(self):
        reduced = default_catalog().without_type("about")
        plan = plan_sections("", reduced, False, SeededRandom("x"))
        assert "about" not in plan.types()

    def test_wants_showcase(self):
        assert wants_showcase("Senior Developer")
        assert wants_showcase("product designer")
        assert not wants_showcase("Lawyer")
        assert not wants_showcase("")


class TestCustomization:
    def test_values_come_from_options(self):
        rng = SeededRandom("custom")
        for section_type, options in CUSTOMIZATION_OPTIONS.items():
            bag = customize_section(section_type, rng)
            assert list(bag) == [key for key, _ in options]
            for key, values in options:
                assert bag[key] in values

    def test_unknown_type_has_empty_bag(self):
        rng = SeededRandom("custom")
        assert customize_section("experience", rng) == {}
        assert rng.draws == 0


class TestAssignOrganisms:
    def test_fixed_assignment_takes_first(self):
        catalog = default_catalog()
        chosen = assign_organisms(catalog, False, SeededRandom("x"))
        for section_type in SECTION_TYPES:
            assert chosen.for_section(section_type) == catalog.by_type(section_type)[0].id

    def test_random_assignment_matches_type(self):
        catalog = default_catalog()
        chosen = assign_organisms(catalog, True, SeededRandom("x"))
        for section_type, organism_id in chosen.by_type.items():
            assert catalog.get(organism_id).type == section_type

    def test_compose_is_deterministic(self):
        catalog = default_catalog()
        a = compose("Developer", catalog, True, SeededRandom("same"))
        b = compose("Developer", catalog, True, SeededRandom("same"))
        assert a == b
