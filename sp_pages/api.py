"""Public API surface for sp_pages."""

from sp_pages.config import PagesConfig
from sp_pages.enum_setting import EnumSetting
from sp_pages.i18n import LocaleCatalog
from sp_pages.loader import build_page, load_page, load_page_definition
from sp_pages.names import LiteralName, LocalizationKey, NameRef
from sp_pages.options import (
    InputShape,
    Option,
    OptionGroup,
    OptionNamer,
    classify_groups,
    classify_options,
    normalize_groups,
    normalize_options,
)
from sp_pages.page import Page
from sp_pages.section import Section
from sp_pages.setting import SectionSetting, SettingState, SettingStyle

__all__ = [
    "build_page",
    "classify_groups",
    "classify_options",
    "EnumSetting",
    "InputShape",
    "LiteralName",
    "load_page",
    "load_page_definition",
    "LocaleCatalog",
    "LocalizationKey",
    "NameRef",
    "normalize_groups",
    "normalize_options",
    "Option",
    "OptionGroup",
    "OptionNamer",
    "Page",
    "PagesConfig",
    "Section",
    "SectionSetting",
    "SettingState",
    "SettingStyle",
]
