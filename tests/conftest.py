"""Shared fixtures for generator tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from designgen.template.generator import TemplateGenerator
from designgen.template.model import GenerationOptions, UserProfile

FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def generator() -> TemplateGenerator:
    """Generator over the default tables with a frozen clock."""
    return TemplateGenerator(config={"clock": lambda: FIXED_NOW})


@pytest.fixture
def developer() -> UserProfile:
    return UserProfile(
        profession="Senior Developer",
        industry="technology",
        experience="8 years",
        skills=("python", "typescript"),
    )


@pytest.fixture
def designer() -> UserProfile:
    return UserProfile(profession="UX Designer", industry="design agency")


@pytest.fixture
def fixed_options() -> GenerationOptions:
    """Everything switched off: base tables, no optional draws."""
    return GenerationOptions(
        randomize_colors=False,
        randomize_layout=False,
        randomize_animations=False,
        randomize_components=False,
    )
