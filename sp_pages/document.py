"""Serialization of canonical options into plain documents."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from sp_pages.names import NameRef
from sp_pages.options import Option, OptionGroup

Translate = Callable[[NameRef], str]


def option_document(option: Option, translate: Translate) -> dict[str, Any]:
    return {"id": option.id, "name": translate(option.name)}


def options_document(
    options: Sequence[Option], translate: Translate
) -> list[dict[str, Any]]:
    """Resolve every option name, returning fresh dicts."""
    return [option_document(option, translate) for option in options]


def groups_document(
    groups: Sequence[OptionGroup], translate: Translate
) -> list[dict[str, Any]]:
    """Resolve group and option names, returning fresh dicts."""
    return [
        {
            "name": translate(group.name),
            "options": options_document(group.options, translate),
        }
        for group in groups
    ]
