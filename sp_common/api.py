"""Public API surface for sp_common."""

from sp_common.errors import (
    DefinitionError,
    InvalidOptionsError,
    InvalidSettingError,
    SettingStateError,
    SPError,
    error_to_payload,
)
from sp_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "DefinitionError",
    "error_to_payload",
    "InvalidOptionsError",
    "InvalidSettingError",
    "SettingStateError",
    "SPError",
]
