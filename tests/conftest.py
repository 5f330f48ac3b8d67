"""Pytest configuration and shared fixtures for enclosure tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rackmount.domain import EnclosureAssembler, EnclosureModel, EnclosureParameters

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def default_params() -> EnclosureParameters:
    """One 200 mm switch in a 1U, 10" rack."""
    return EnclosureParameters()


@pytest.fixture
def stack_params() -> EnclosureParameters:
    """Three switches in a requested 2U that has to grow to fit."""
    return EnclosureParameters(
        switch_count=3,
        switch_height=28.3,
        case_thickness=6.0,
        rack_height=2.0,
        half_height_holes=True,
    )


@pytest.fixture
def default_model(default_params: EnclosureParameters) -> EnclosureModel:
    return EnclosureAssembler().build(default_params)


@pytest.fixture
def stack_model(stack_params: EnclosureParameters) -> EnclosureModel:
    return EnclosureAssembler().build(stack_params)
