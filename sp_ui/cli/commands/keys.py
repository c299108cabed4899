from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.table import Table

from sp_common.errors import SPError
from sp_pages.loader import load_page
from sp_ui.cli.commands.options import LOCALE_OPTION, LOCALES_DIR_OPTION
from sp_ui.wiring.dependencies import UIContext


def register_keys_command(app: typer.Typer, ctx: UIContext) -> None:
    """Attach the `keys` command to the root app."""

    @app.command("keys")
    def keys(
        page_file: Path = typer.Argument(..., help="YAML page definition."),
        locale: Optional[str] = LOCALE_OPTION,
        locales_dir: Optional[Path] = LOCALES_DIR_OPTION,
        missing_only: bool = typer.Option(
            False,
            "--missing",
            help="Only list keys the catalog has no message for.",
        ),
        seed: Optional[Path] = typer.Option(
            None,
            "--seed",
            help="Write the missing keys with their fallback text as a YAML locale file.",
        ),
    ) -> None:
        """List the localization keys a page references."""
        config = ctx.resolve_config(locale=locale, locales_dir=locales_dir, headers=True)
        try:
            page = load_page(page_file, config)
        except SPError as exc:
            ctx.report_error(f"Cannot load {page_file}", exc)
            raise typer.Exit(1)

        catalog = page.catalog
        table = Table(title=f"Localization keys ({config.locale})", show_header=True)
        table.add_column("Key", style="cyan", overflow="fold")
        table.add_column("Status")
        shown = 0
        for key in page.localization_keys():
            present = catalog is not None and catalog.has(key)
            if missing_only and present:
                continue
            table.add_row(key, "[green]ok[/green]" if present else "[yellow]missing[/yellow]")
            shown += 1

        if seed is not None and catalog is not None:
            # Rendering looks every key up, recording misses with their fallback text.
            page.to_json()
            seed.parent.mkdir(parents=True, exist_ok=True)
            seed.write_text(
                yaml.safe_dump(
                    catalog.missing_messages(), sort_keys=False, allow_unicode=True
                ),
                encoding="utf-8",
            )
            ctx.err_console.print(f"[green]Wrote {seed}[/green]")

        if not shown:
            ctx.console.print("No localization keys to report.")
            return
        ctx.console.print(table)
