"""Base class for settings placed in a page section."""

from __future__ import annotations

import copy
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from sp_common.errors import InvalidSettingError, SettingStateError
from sp_pages.names import LiteralName, LocalizationKey, NameRef

if TYPE_CHECKING:
    from sp_pages.page import Page
    from sp_pages.section import Section


class SettingState(str, Enum):
    BUILDING = "building"
    SERIALIZED = "serialized"


class SettingStyle(str, Enum):
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"
    DEFAULT = "DEFAULT"
    DROPDOWN = "DROPDOWN"

    @classmethod
    def coerce(cls, value: Union["SettingStyle", str]) -> "SettingStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError as exc:
            raise InvalidSettingError(
                f"{value!r} is not a valid setting style",
                context={"value": value, "allowed": [style.value for style in cls]},
                cause=exc,
            ) from exc


def _as_name_ref(value: Union[str, NameRef]) -> NameRef:
    if isinstance(value, (LiteralName, LocalizationKey)):
        return value
    return LiteralName(text=str(value))


class SectionSetting:
    """
    Common fields and serialization shared by every setting type.

    A setting is mutated through chained builder calls and serialized with
    ``to_document``. The first serialization freezes it: later builder calls
    raise ``SettingStateError``, repeated serialization is allowed.
    """

    setting_type = "TEXT"

    def __init__(self, section: "Section", setting_id: str) -> None:
        self._section = section
        self._id = setting_id
        self._state = SettingState.BUILDING
        self._required = False
        self._disabled = False
        self._default_value: Any = None
        self._submit_on_change = False
        self._description: Optional[NameRef] = None
        if self.page.headers:
            self._name: NameRef = self.i18n_key("name", setting_id)
        else:
            self._name = LiteralName(text=setting_id)

    @property
    def id(self) -> str:
        return self._id

    @property
    def section(self) -> "Section":
        return self._section

    @property
    def page(self) -> "Page":
        return self._section.page

    @property
    def state(self) -> SettingState:
        return self._state

    def i18n_key(self, prop: str, default: Optional[str] = None) -> LocalizationKey:
        return self.page.i18n_key(f"settings.{self._id}.{prop}", default)

    def translate(self, ref: NameRef) -> str:
        return self.page.translate(ref)

    def _ensure_building(self) -> None:
        if self._state is not SettingState.BUILDING:
            raise SettingStateError(
                f"Setting '{self._id}' was already serialized",
                context={"setting": self._id, "state": self._state.value},
            )

    def set_name(self, value: Union[str, NameRef]) -> "SectionSetting":
        self._ensure_building()
        self._name = _as_name_ref(value)
        return self

    def set_description(self, value: Union[str, NameRef]) -> "SectionSetting":
        self._ensure_building()
        self._description = _as_name_ref(value)
        return self

    def set_required(self, value: bool) -> "SectionSetting":
        self._ensure_building()
        self._required = bool(value)
        return self

    def set_disabled(self, value: bool) -> "SectionSetting":
        self._ensure_building()
        self._disabled = bool(value)
        return self

    def set_default_value(self, value: Any) -> "SectionSetting":
        self._ensure_building()
        self._default_value = value
        return self

    def set_submit_on_change(self, value: bool) -> "SectionSetting":
        """Refresh the page after this setting's value changes."""
        self._ensure_building()
        self._submit_on_change = bool(value)
        return self

    def name_refs(self) -> list[NameRef]:
        """Display-name refs this setting resolves when serialized."""
        refs = [self._name]
        if self._description is not None:
            refs.append(self._description)
        return refs

    def to_document(self) -> dict[str, Any]:
        """Serialize the setting; the setting is frozen once this returns."""
        result = self._build_document()
        self._state = SettingState.SERIALIZED
        return result

    def _build_document(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self._id,
            "name": self.translate(self._name),
            "type": self.setting_type,
            "required": self._required,
        }
        if self._description is not None:
            result["description"] = self.translate(self._description)
        if self._default_value is not None:
            result["defaultValue"] = copy.deepcopy(self._default_value)
        if self._disabled:
            result["disabled"] = True
        if self._submit_on_change:
            result["submitOnChange"] = True
        return result
