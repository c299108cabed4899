"""Configuration page schemas with enum settings."""

from sp_pages.api import EnumSetting, LocaleCatalog, Page, Section

__all__ = ["EnumSetting", "LocaleCatalog", "Page", "Section"]
