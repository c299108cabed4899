"""Page sections grouping settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from sp_pages.enum_setting import EnumSetting
from sp_pages.names import NameRef
from sp_pages.setting import SectionSetting

if TYPE_CHECKING:
    from sp_pages.page import Page


class Section:
    """Ordered collection of settings on a page."""

    def __init__(self, page: "Page", name: Optional[str] = None) -> None:
        self._page = page
        self._name = name
        self._hidden = False
        self._settings: list[SectionSetting] = []

    @property
    def page(self) -> "Page":
        return self._page

    @property
    def settings(self) -> tuple[SectionSetting, ...]:
        return tuple(self._settings)

    def hidden(self, value: bool) -> "Section":
        self._hidden = bool(value)
        return self

    def add_setting(self, setting: SectionSetting) -> SectionSetting:
        self._settings.append(setting)
        return setting

    def enum_setting(self, setting_id: str) -> EnumSetting:
        setting = EnumSetting(self, setting_id)
        self.add_setting(setting)
        return setting

    def _name_ref(self) -> Optional[NameRef]:
        if self._name is None:
            return None
        if self._page.headers:
            return self._page.i18n_key(f"sections.{self._name}.name", self._name)
        return self._page.literal(self._name)

    def name_refs(self) -> list[NameRef]:
        refs = []
        name = self._name_ref()
        if name is not None:
            refs.append(name)
        for setting in self._settings:
            refs.extend(setting.name_refs())
        return refs

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        name = self._name_ref()
        if name is not None:
            result["name"] = self._page.translate(name)
        if self._hidden:
            result["hidden"] = True
        result["settings"] = [setting.to_document() for setting in self._settings]
        return result
