from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from sp_common.errors import SPError, error_to_payload
from sp_pages.config import PagesConfig


@dataclass
class UIContext:
    """Container for CLI consoles and config, initialized lazily."""

    json_errors: bool = False

    _console: Optional[Console] = None
    _err_console: Optional[Console] = None

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console()
        return self._console

    @console.setter
    def console(self, value: Console):
        self._console = value

    @property
    def err_console(self) -> Console:
        if self._err_console is None:
            self._err_console = Console(stderr=True)
        return self._err_console

    @err_console.setter
    def err_console(self, value: Console):
        self._err_console = value

    def resolve_config(
        self,
        *,
        locale: Optional[str] = None,
        locales_dir: Optional[Path] = None,
        headers: Optional[bool] = None,
    ) -> PagesConfig:
        """Environment defaults overridden by explicit CLI flags."""
        config = PagesConfig.from_env()
        overrides: dict[str, object] = {}
        if locale is not None:
            overrides["locale"] = locale
        if locales_dir is not None:
            overrides["locales_dir"] = locales_dir
        if headers is not None:
            overrides["headers"] = headers
        return config.model_copy(update=overrides)

    def report_error(self, message: str, error: SPError) -> None:
        """Print a command failure, as a JSON payload when JSON logging is on."""
        if self.json_errors:
            self.err_console.print_json(data={"message": message, **error_to_payload(error)})
            return
        self.err_console.print(f"[red]{message}: {error}[/red]")
