"""Shared helpers for settings-pages."""

from sp_common.api import SPError, configure_logging

__all__ = ["configure_logging", "SPError"]
