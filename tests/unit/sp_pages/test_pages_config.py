"""Tests for environment-driven page configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from sp_pages.config import PagesConfig


pytestmark = pytest.mark.unit_pages


def test_defaults_without_environment() -> None:
    config = PagesConfig.from_env({})

    assert config.locale == "en"
    assert config.locales_dir is None
    assert config.headers is False


def test_environment_overrides(tmp_path: Path) -> None:
    config = PagesConfig.from_env(
        {"SP_LOCALE": " fr ", "SP_LOCALES_DIR": str(tmp_path), "SP_I18N": "yes"}
    )

    assert config.locale == "fr"
    assert config.locales_dir == tmp_path
    assert config.headers is True


def test_build_catalog_loads_locale_dir(tmp_path: Path) -> None:
    (tmp_path / "fr.json").write_text('{"hello": "Bonjour"}', encoding="utf-8")
    config = PagesConfig(locale="fr", locales_dir=tmp_path)

    catalog = config.build_catalog()

    assert catalog.locale == "fr"
    assert catalog.translate("hello") == "Bonjour"
