from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from sp_common.errors import SPError
from sp_pages.loader import load_page
from sp_ui.cli.commands.options import I18N_OPTION, LOCALE_OPTION, LOCALES_DIR_OPTION
from sp_ui.wiring.dependencies import UIContext


def register_render_command(app: typer.Typer, ctx: UIContext) -> None:
    """Attach the `render` command to the root app."""

    @app.command("render")
    def render(
        page_file: Path = typer.Argument(..., help="YAML page definition."),
        locale: Optional[str] = LOCALE_OPTION,
        locales_dir: Optional[Path] = LOCALES_DIR_OPTION,
        i18n: Optional[bool] = I18N_OPTION,
        output: Optional[Path] = typer.Option(
            None,
            "--output",
            "-o",
            help="Write the page JSON to this file instead of stdout.",
        ),
        indent: int = typer.Option(2, "--indent", min=0, help="JSON indentation."),
    ) -> None:
        """Render a page definition to its JSON document."""
        config = ctx.resolve_config(locale=locale, locales_dir=locales_dir, headers=i18n)
        try:
            document = load_page(page_file, config).to_json()
        except SPError as exc:
            ctx.report_error(f"Cannot render {page_file}", exc)
            raise typer.Exit(1)

        text = json.dumps(document, indent=indent or None, ensure_ascii=False)
        if output is None:
            typer.echo(text)
            return
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        ctx.err_console.print(f"[green]Wrote {output}[/green]")
