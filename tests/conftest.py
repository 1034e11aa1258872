"""Shared fixtures for pyxmltv tests"""

from pathlib import Path

import pytest

from pyxmltv import translations
from pyxmltv.translations import TranslationRegistry


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def example_xml(fixtures_dir: Path) -> str:
    """A full featured XMLTV document."""
    return (fixtures_dir / "example.xml").read_text(encoding="utf-8")


@pytest.fixture
def channel_only_xml(fixtures_dir: Path) -> str:
    """A document with a single channel and no programmes."""
    return (fixtures_dir / "channel-only.xml").read_text(encoding="utf-8")


@pytest.fixture
def registry() -> TranslationRegistry:
    """A fresh registry with the built-in translations."""
    return TranslationRegistry()


@pytest.fixture
def isolated_default_registry(monkeypatch) -> TranslationRegistry:
    """Replace the process-wide default registry for the duration of a test."""
    fresh = TranslationRegistry()
    monkeypatch.setattr(translations, "_default_registry", fresh)
    return fresh
