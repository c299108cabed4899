"""Locale message catalog used to resolve localization keys."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from sp_common.errors import DefinitionError

logger = logging.getLogger(__name__)

_SUFFIXES = (".yml", ".yaml", ".json")


def _flatten(data: Mapping[Any, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in data.items():
        qualified = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, qualified))
        elif value is not None:
            flat[qualified] = str(value)
    return flat


class LocaleCatalog:
    """Flat dotted-key message table for a single locale.

    Messages can be nested mappings in the source files; they are flattened
    on load, so ``{"pages": {"main": {"name": "Main"}}}`` answers
    ``pages.main.name``. Keys looked up without an entry are remembered and
    exposed through ``missing_keys`` for seeding locale files.
    """

    def __init__(
        self,
        locale: str = "en",
        messages: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.locale = locale
        self._messages: Dict[str, str] = {}
        self._missing: Dict[str, Optional[str]] = {}
        if messages:
            self.add_messages(messages)

    def add_messages(
        self, mapping: Mapping[str, Any], *, namespace: str | None = None
    ) -> None:
        """Register messages, optionally below a dotted namespace."""
        self._messages.update(_flatten(mapping, namespace or ""))

    def load_file(self, path: Path) -> None:
        """Load a YAML or JSON locale file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
            if Path(path).suffix == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise DefinitionError(
                f"Cannot read locale file {path}", context={"path": path}, cause=exc
            ) from exc
        if data is None:
            return
        if not isinstance(data, Mapping):
            raise DefinitionError(
                f"Locale file {path} must contain a mapping", context={"path": path}
            )
        self.add_messages(data)
        logger.debug("Loaded %d messages from %s", len(self._messages), path)

    def load_directory(self, directory: Path) -> bool:
        """Load ``<locale>.yml|yaml|json`` from a directory.

        Returns False when no file for the locale exists.
        """
        for suffix in _SUFFIXES:
            candidate = Path(directory) / f"{self.locale}{suffix}"
            if candidate.is_file():
                self.load_file(candidate)
                return True
        logger.warning("No '%s' locale file found in %s", self.locale, directory)
        return False

    def has(self, key: str) -> bool:
        return key in self._messages

    def translate(self, key: str, *, default: Optional[str] = None) -> str:
        """Return the message for ``key``, else ``default``, else the key."""
        message = self._messages.get(key)
        if message is not None:
            return message
        if key not in self._missing:
            logger.debug("Missing '%s' translation for key '%s'", self.locale, key)
            self._missing[key] = default
        return default if default is not None else key

    def missing_keys(self) -> Tuple[str, ...]:
        """Keys looked up so far without an entry, in lookup order."""
        return tuple(self._missing)

    def missing_messages(self) -> Dict[str, str]:
        """Missing keys paired with the fallback text they were rendered with."""
        return {key: default or key for key, default in self._missing.items()}
