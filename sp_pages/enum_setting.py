"""Enum setting: a closed set of selectable options."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from sp_pages.document import groups_document, options_document
from sp_pages.names import LiteralName, NameRef
from sp_pages.options import (
    Option,
    OptionGroup,
    OptionNamer,
    iter_name_refs,
    normalize_groups,
    normalize_options,
)
from sp_pages.setting import SectionSetting, SettingStyle

if TYPE_CHECKING:
    from sp_pages.section import Section

logger = logging.getLogger(__name__)


class EnumSetting(SectionSetting):
    """
    Setting presenting a closed set of choices, flat or grouped.

    Example:
        section.enum_setting("color").set_grouped_options(
            {"Warm": ["red", "orange"], "Cold": {"b": "Blue"}}
        ).set_multiple(True)

    When the owning page has headers enabled, option and group names are
    replaced by localization keys under ``settings.<id>`` and resolved
    through the page catalog by ``to_document``.
    """

    setting_type = "ENUM"

    def __init__(self, section: "Section", setting_id: str) -> None:
        super().__init__(section, setting_id)
        self._description = LiteralName(text="Tap to set")
        self._options: Optional[tuple[Option, ...]] = None
        self._grouped_options: Optional[tuple[OptionGroup, ...]] = None
        self._multiple: Optional[bool] = None
        self._close_on_selection: Optional[bool] = None
        self._style: Optional[SettingStyle] = None

    @property
    def options(self) -> Optional[tuple[Option, ...]]:
        return self._options

    @property
    def grouped_options(self) -> Optional[tuple[OptionGroup, ...]]:
        return self._grouped_options

    def _namer(self) -> OptionNamer:
        return OptionNamer(self._id, self.page.i18n_key if self.page.headers else None)

    def set_options(self, options: Any) -> "EnumSetting":
        """Replace the flat options.

        Accepts a sequence of strings and/or ``{"id", "name"}`` records, or a
        mapping of id to display text.
        """
        self._ensure_building()
        self._options = normalize_options(options, self._namer())
        return self

    def set_grouped_options(self, groups: Any) -> "EnumSetting":
        """Replace the grouped options.

        Accepts a sequence of ``{"name", "options"}`` records, or a mapping
        of group name to a list of strings or an id-to-text mapping.
        """
        self._ensure_building()
        self._grouped_options = normalize_groups(groups, self._namer())
        return self

    def set_multiple(self, value: bool) -> "EnumSetting":
        """Allow several values at once (default false)."""
        self._ensure_building()
        self._multiple = bool(value)
        return self

    def set_close_on_selection(self, value: bool) -> "EnumSetting":
        """Dismiss the selector once a value is picked (default true)."""
        self._ensure_building()
        self._close_on_selection = bool(value)
        return self

    def set_style(self, value: Union[SettingStyle, str]) -> "EnumSetting":
        self._ensure_building()
        self._style = SettingStyle.coerce(value)
        return self

    def name_refs(self) -> list[NameRef]:
        return super().name_refs() + iter_name_refs(
            self._options or (), self._grouped_options or ()
        )

    def _build_document(self) -> dict[str, Any]:
        result = super()._build_document()
        if self._multiple:
            result["multiple"] = True
        if self._close_on_selection:
            result["closeOnSelection"] = True
        if self._grouped_options is not None and self._options is not None:
            logger.warning(
                "Enum setting '%s' has both options and grouped options", self._id
            )
        if self._grouped_options is not None:
            result["groupedOptions"] = groups_document(
                self._grouped_options, self.translate
            )
        if self._options is not None:
            result["options"] = options_document(self._options, self.translate)
        if self._style:
            result["style"] = self._style.value
        return result
