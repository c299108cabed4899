"""Typer options shared by page commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

LOCALE_OPTION: Optional[str] = typer.Option(
    None,
    "--locale",
    "-l",
    help="Catalog locale; defaults to SP_LOCALE or 'en'.",
)
LOCALES_DIR_OPTION: Optional[Path] = typer.Option(
    None,
    "--locales-dir",
    help="Directory with <locale>.yml/.json message files; defaults to SP_LOCALES_DIR.",
)
I18N_OPTION: Optional[bool] = typer.Option(
    None,
    "--i18n/--no-i18n",
    help="Replace display names with localization keys; defaults to SP_I18N.",
)
