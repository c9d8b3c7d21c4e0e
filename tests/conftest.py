"""Pytest fixtures."""

import pathlib

import pytest

from datecheck.model import config


TEST_FOLDER = pathlib.Path(__file__).parent
DATA_FOLDER = TEST_FOLDER / "data"


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> config.Settings:
    """Give every test a fresh settings object."""
    fresh_settings = config.Settings()
    monkeypatch.setattr(config, "settings", fresh_settings)
    return fresh_settings


@pytest.fixture
def empty_working_dir(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> pathlib.Path:
    """Run the test from an empty directory with no datecheck.toml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def month_year_pairs() -> list[tuple[int, int]]:
    """Every month in a selection of leap, common and centurial years."""
    years = [1, 4, 100, 400, 1900, 2000, 2023, 2024, 9999]
    return [(month, year) for year in years for month in range(1, 13)]
