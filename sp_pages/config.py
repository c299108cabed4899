"""Runtime configuration for page rendering."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from sp_common.config.env import parse_bool_env, parse_path_env, parse_str_env
from sp_pages.i18n import LocaleCatalog


class PagesConfig(BaseModel):
    """Locale and localization switches used when building pages."""

    locale: str = Field(default="en", min_length=1, description="Catalog locale")
    locales_dir: Optional[Path] = Field(
        default=None, description="Directory holding <locale>.yml/.json files"
    )
    headers: bool = Field(
        default=False, description="Replace display names with localization keys"
    )

    model_config = {
        "extra": "ignore",
    }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PagesConfig":
        """Build a config from ``SP_LOCALE``, ``SP_LOCALES_DIR`` and ``SP_I18N``."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        locale = parse_str_env(env.get("SP_LOCALE"))
        if locale is not None:
            values["locale"] = locale
        locales_dir = parse_path_env(env.get("SP_LOCALES_DIR"))
        if locales_dir is not None:
            values["locales_dir"] = locales_dir
        headers = parse_bool_env(env.get("SP_I18N"))
        if headers is not None:
            values["headers"] = headers
        return cls(**values)

    def build_catalog(self) -> LocaleCatalog:
        catalog = LocaleCatalog(self.locale)
        if self.locales_dir is not None:
            catalog.load_directory(self.locales_dir)
        return catalog
