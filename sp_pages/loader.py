"""Load page definitions from YAML and drive the builder API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sp_common.errors import DefinitionError
from sp_pages.config import PagesConfig
from sp_pages.page import Page
from sp_pages.section import Section

logger = logging.getLogger(__name__)


class EnumSettingDefinition(BaseModel):
    """Declarative form of an enum setting."""

    id: str = Field(..., min_length=1)
    type: Literal["ENUM"] = "ENUM"
    name: Optional[str] = None
    description: Optional[str] = None
    required: bool = False
    disabled: bool = False
    default_value: Any = Field(default=None, alias="defaultValue")
    submit_on_change: Optional[bool] = Field(default=None, alias="submitOnChange")
    multiple: Optional[bool] = None
    close_on_selection: Optional[bool] = Field(default=None, alias="closeOnSelection")
    style: Optional[str] = None
    options: Any = None
    grouped_options: Any = Field(default=None, alias="groupedOptions")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class SectionDefinition(BaseModel):
    name: Optional[str] = None
    hidden: bool = False
    settings: List[EnumSettingDefinition] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class PageDefinition(BaseModel):
    """Top-level YAML document describing one page."""

    id: str = Field(..., min_length=1)
    name: Optional[str] = None
    complete: bool = False
    next_page_id: Optional[str] = Field(default=None, alias="nextPageId")
    previous_page_id: Optional[str] = Field(default=None, alias="previousPageId")
    sections: List[SectionDefinition] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_page_definition(path: Path) -> PageDefinition:
    """Parse and validate a YAML page definition.

    Raises:
        DefinitionError: If the file is missing, not valid YAML, or does not
            match the page schema.
    """
    path = Path(path)
    if not path.exists():
        raise DefinitionError(f"Page definition not found: {path}", context={"path": path})
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise DefinitionError(
            f"Invalid YAML in {path}", context={"path": path}, cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise DefinitionError(
            f"Page definition {path} must be a mapping", context={"path": path}
        )
    try:
        return PageDefinition.model_validate(data)
    except ValidationError as exc:
        raise DefinitionError(
            f"Invalid page definition {path}: {exc.error_count()} error(s)",
            context={"path": path, "errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc


def _apply_enum_setting(section: Section, definition: EnumSettingDefinition) -> None:
    setting = section.enum_setting(definition.id)
    if definition.name is not None:
        setting.set_name(definition.name)
    if definition.description is not None:
        setting.set_description(definition.description)
    setting.set_required(definition.required)
    setting.set_disabled(definition.disabled)
    if definition.default_value is not None:
        setting.set_default_value(definition.default_value)
    if definition.submit_on_change is not None:
        setting.set_submit_on_change(definition.submit_on_change)
    if definition.multiple is not None:
        setting.set_multiple(definition.multiple)
    if definition.close_on_selection is not None:
        setting.set_close_on_selection(definition.close_on_selection)
    if definition.style is not None:
        setting.set_style(definition.style)
    if definition.options is not None:
        setting.set_options(definition.options)
    if definition.grouped_options is not None:
        setting.set_grouped_options(definition.grouped_options)


def build_page(definition: PageDefinition, config: Optional[PagesConfig] = None) -> Page:
    """Instantiate a page (with its catalog) from a validated definition."""
    config = config or PagesConfig()
    page = Page(
        definition.id,
        name=definition.name,
        headers=config.headers,
        catalog=config.build_catalog(),
    )
    page.complete(definition.complete)
    if definition.next_page_id:
        page.next_page_id(definition.next_page_id)
    if definition.previous_page_id:
        page.previous_page_id(definition.previous_page_id)
    for section_def in definition.sections:
        section = page.section(section_def.name)
        section.hidden(section_def.hidden)
        for setting_def in section_def.settings:
            _apply_enum_setting(section, setting_def)
    logger.debug("Built page %s from definition", definition.id)
    return page


def load_page(path: Path, config: Optional[PagesConfig] = None) -> Page:
    return build_page(load_page_definition(path), config)
