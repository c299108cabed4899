"""
Command-line interface for settings-pages.

Renders YAML page definitions to their JSON documents and lists the
localization keys they need.
"""

from __future__ import annotations

import typer

from sp_common.api import configure_logging
from sp_ui.cli.commands.keys import register_keys_command
from sp_ui.cli.commands.render import register_render_command
from sp_ui.wiring.dependencies import UIContext

ctx_store = UIContext()

app = typer.Typer(help="Build configuration page schemas.", no_args_is_help=True)


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON."),
) -> None:
    """Global options applied before every command."""
    configure_logging(debug=debug, json=log_json or None, force=True)
    ctx_store.json_errors = log_json


register_render_command(app, ctx_store)
register_keys_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
