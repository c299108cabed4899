"""Configuration page: localization capability and JSON assembly."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sp_pages.i18n import LocaleCatalog
from sp_pages.names import LiteralName, LocalizationKey, NameRef
from sp_pages.section import Section

logger = logging.getLogger(__name__)


class Page:
    """
    A configuration page made of sections.

    ``headers`` turns on localization: settings then store localization keys
    (``pages.<page_id>.<path>``) instead of literal names, and every key is
    resolved through ``catalog`` when the page is serialized. Without a
    catalog, keys fall back to the text they were minted from.
    """

    def __init__(
        self,
        page_id: str,
        *,
        name: Optional[str] = None,
        headers: bool = False,
        catalog: Optional[LocaleCatalog] = None,
    ) -> None:
        self.page_id = page_id
        self.headers = headers
        self.catalog = catalog
        self._name = name
        self._complete = False
        self._next_page_id: Optional[str] = None
        self._previous_page_id: Optional[str] = None
        self._sections: list[Section] = []

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    def i18n_key(self, path: str, default: Optional[str] = None) -> LocalizationKey:
        return LocalizationKey(path=f"pages.{self.page_id}.{path}", default=default)

    @staticmethod
    def literal(text: str) -> LiteralName:
        return LiteralName(text=text)

    def translate(self, ref: NameRef) -> str:
        """Resolve a display-name ref to text."""
        if isinstance(ref, LiteralName):
            return ref.text
        fallback = ref.default if ref.default is not None else ref.path
        if self.catalog is None:
            return fallback
        return self.catalog.translate(ref.path, default=fallback)

    def section(self, name: Optional[str] = None) -> Section:
        section = Section(self, name)
        self._sections.append(section)
        return section

    def complete(self, value: bool) -> "Page":
        self._complete = bool(value)
        return self

    def next_page_id(self, value: str) -> "Page":
        self._next_page_id = value
        return self

    def previous_page_id(self, value: str) -> "Page":
        self._previous_page_id = value
        return self

    def _name_ref(self) -> NameRef:
        text = self._name or self.page_id
        if self.headers:
            return self.i18n_key("name", text)
        return LiteralName(text=text)

    def name_refs(self) -> list[NameRef]:
        """Every display-name ref the page resolves when serialized."""
        refs = [self._name_ref()]
        for section in self._sections:
            refs.extend(section.name_refs())
        return refs

    def localization_keys(self) -> list[str]:
        """Distinct localization key paths referenced by the page."""
        seen: dict[str, None] = {}
        for ref in self.name_refs():
            if isinstance(ref, LocalizationKey):
                seen.setdefault(ref.path, None)
        return list(seen)

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "pageId": self.page_id,
            "name": self.translate(self._name_ref()),
            "complete": self._complete,
        }
        if self._next_page_id:
            result["nextPageId"] = self._next_page_id
        if self._previous_page_id:
            result["previousPageId"] = self._previous_page_id
        result["sections"] = [section.to_json() for section in self._sections]
        logger.debug(
            "Serialized page %s with %d sections", self.page_id, len(self._sections)
        )
        return result
