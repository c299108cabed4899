"""Canonical option models and the normalizer for enum setting inputs.

Callers may describe options in several loose shapes::

    ["red", "blue"]                                 # strings, id == name
    [{"id": "r", "name": "Red"}, "blue"]            # records (mixed is fine)
    {"r": "Red", "b": "Blue"}                       # id -> display text

and groups as::

    [{"name": "Warm", "options": [{"id": "r", "name": "Red"}]}]
    {"Warm": ["red", "orange"], "Cold": {"b": "Blue"}}

Every shape is classified once (``classify_options`` / ``classify_groups``)
and handed to a single normalization function for that shape. The result is a
tuple of frozen ``Option`` / ``OptionGroup`` models whose names are either
literal text or localization keys minted through an ``OptionNamer``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from sp_common.errors import InvalidOptionsError
from sp_pages.names import LiteralName, LocalizationKey, NameRef

logger = logging.getLogger(__name__)

MAX_ID_LENGTH = 128

KeyMinter = Callable[[str, Optional[str]], LocalizationKey]


class Option(BaseModel):
    """One selectable choice."""

    id: str = Field(..., min_length=1, description="Unique id within the setting")
    name: NameRef

    model_config = ConfigDict(frozen=True)


class OptionGroup(BaseModel):
    """A named cluster of options, used for presentation only."""

    name: NameRef
    options: tuple[Option, ...] = ()

    model_config = ConfigDict(frozen=True)


class InputShape(str, Enum):
    STRING_SEQUENCE = "string_sequence"
    RECORD_SEQUENCE = "record_sequence"
    SCALAR_MAPPING = "scalar_mapping"
    NESTED_MAPPING = "nested_mapping"


class OptionNamer:
    """Builds display-name refs for one setting.

    Without a ``mint`` callable every name stays literal. With one, names are
    replaced by keys under ``settings.<setting_id>``.
    """

    def __init__(self, setting_id: str, mint: KeyMinter | None = None) -> None:
        self.setting_id = setting_id
        self._mint = mint

    @property
    def localized(self) -> bool:
        return self._mint is not None

    def option(self, name: str) -> NameRef:
        return self._ref(f"settings.{self.setting_id}.options.{name}.name", name)

    def group(self, name: str) -> NameRef:
        return self._ref(f"settings.{self.setting_id}.groups.{name}.name", name)

    def group_option(self, group: str, name: str) -> NameRef:
        return self._ref(
            f"settings.{self.setting_id}.groups.{group}.options.{name}.name", name
        )

    def _ref(self, path: str, text: str) -> NameRef:
        if self._mint is None:
            return LiteralName(text=text)
        return self._mint(path, text)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _text(value: Any, field: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidOptionsError(
        f"{type(value).__name__} not valid for option {field}",
        context={"field": field, "value": value},
    )


def _option_id(value: Any) -> str:
    option_id = _text(value, "id")
    if not option_id:
        raise InvalidOptionsError("option id must not be empty")
    if len(option_id) > MAX_ID_LENGTH:
        logger.warning(
            "Option id longer than %d characters: %s", MAX_ID_LENGTH, option_id
        )
    return option_id


def classify_options(value: Any) -> InputShape:
    """Return the input shape of a flat option argument."""
    if isinstance(value, Mapping):
        return InputShape.SCALAR_MAPPING
    if _is_sequence(value):
        if all(isinstance(item, str) for item in value):
            return InputShape.STRING_SEQUENCE
        return InputShape.RECORD_SEQUENCE
    raise InvalidOptionsError(
        f"{type(value).__name__} not valid for options",
        context={"value": value},
    )


def classify_groups(value: Any) -> InputShape:
    """Return the input shape of a grouped option argument."""
    if isinstance(value, Mapping):
        return InputShape.NESTED_MAPPING
    if _is_sequence(value):
        return InputShape.RECORD_SEQUENCE
    raise InvalidOptionsError(
        f"{type(value).__name__} not valid for options group",
        context={"value": value},
    )


def _from_strings(values: Sequence[str], name_for: Callable[[str], NameRef]) -> list[Option]:
    return [Option(id=_option_id(value), name=name_for(value)) for value in values]


def _name_ref(raw_name: Any, name_for: Callable[[str], NameRef]) -> NameRef:
    if isinstance(raw_name, LocalizationKey):
        return raw_name
    if isinstance(raw_name, LiteralName):
        return name_for(raw_name.text)
    return name_for(_text(raw_name, "name"))


def _group_ref(raw_group: Any, namer: OptionNamer) -> tuple[NameRef, str]:
    """Group name ref plus the plain label used in option key paths."""
    if isinstance(raw_group, LocalizationKey):
        return raw_group, raw_group.default or raw_group.path
    if isinstance(raw_group, LiteralName):
        raw_group = raw_group.text
    group_name = _text(raw_group, "group name")
    return namer.group(group_name), group_name


def _from_scalar_mapping(
    values: Mapping[Any, Any], name_for: Callable[[str], NameRef]
) -> list[Option]:
    return [
        Option(id=_option_id(key), name=_name_ref(raw_name, name_for))
        for key, raw_name in values.items()
    ]


def _option_record(
    item: Any,
    name_for: Callable[[str], NameRef],
    *,
    name_required: bool,
) -> Option:
    if isinstance(item, Option):
        return Option(id=item.id, name=_name_ref(item.name, name_for))
    if not isinstance(item, Mapping):
        raise InvalidOptionsError(
            f"{type(item).__name__} not valid for option item",
            context={"value": item},
        )
    if "id" not in item:
        raise InvalidOptionsError("option record is missing 'id'", context={"value": item})
    option_id = _option_id(item["id"])
    raw_name = item.get("name")
    if raw_name is None:
        if name_required:
            raise InvalidOptionsError(
                "grouped option record is missing 'name'", context={"value": item}
            )
        raw_name = option_id
    return Option(id=option_id, name=_name_ref(raw_name, name_for))


def _flat_records(values: Sequence[Any], namer: OptionNamer) -> list[Option]:
    options = []
    for item in values:
        if isinstance(item, str):
            options.append(Option(id=_option_id(item), name=namer.option(item)))
        else:
            options.append(_option_record(item, namer.option, name_required=False))
    return options


_FLAT_NORMALIZERS: dict[InputShape, Callable[[Any, OptionNamer], list[Option]]] = {
    InputShape.STRING_SEQUENCE: lambda values, namer: _from_strings(values, namer.option),
    InputShape.RECORD_SEQUENCE: _flat_records,
    InputShape.SCALAR_MAPPING: lambda values, namer: _from_scalar_mapping(
        values, namer.option
    ),
}


def normalize_options(value: Any, namer: OptionNamer) -> tuple[Option, ...]:
    """Coerce a flat option argument into canonical options."""
    shape = classify_options(value)
    options = tuple(_FLAT_NORMALIZERS[shape](value, namer))
    logger.debug(
        "Normalized %d options for setting %s (%s)",
        len(options),
        namer.setting_id,
        shape.value,
    )
    return options


def _group_from_record(item: Any, namer: OptionNamer) -> OptionGroup:
    if isinstance(item, OptionGroup):
        raw_group: Any = item.name
        raw_options: Any = item.options
    elif isinstance(item, Mapping):
        if item.get("name") is None:
            raise InvalidOptionsError(
                "options group record is missing 'name'", context={"value": item}
            )
        raw_group = item["name"]
        raw_options = item.get("options")
    else:
        raise InvalidOptionsError(
            f"{type(item).__name__} not valid for options group item",
            context={"value": item},
        )
    group_ref, group_name = _group_ref(raw_group, namer)
    if not _is_sequence(raw_options):
        raise InvalidOptionsError(
            f"{type(raw_options).__name__} not valid for options of group {group_name}",
            context={"group": group_name},
        )

    # Record input keys options under the plain group name.
    def name_for(text: str) -> NameRef:
        return namer.group_option(group_name, text)

    options = tuple(
        _option_record(option, name_for, name_required=True) for option in raw_options
    )
    return OptionGroup(name=group_ref, options=options)


def _groups_from_records(values: Sequence[Any], namer: OptionNamer) -> list[OptionGroup]:
    return [_group_from_record(item, namer) for item in values]


def _groups_from_mapping(
    values: Mapping[Any, Any], namer: OptionNamer
) -> list[OptionGroup]:
    groups = []
    for raw_group, raw_options in values.items():
        group_ref, group_name = _group_ref(raw_group, namer)
        # Mapping input keys options under the group's already-minted key.
        segment = str(group_ref) if isinstance(group_ref, LocalizationKey) else group_name

        def name_for(text: str, _segment: str = segment) -> NameRef:
            return namer.group_option(_segment, text)

        if isinstance(raw_options, Mapping):
            options = _from_scalar_mapping(raw_options, name_for)
        elif _is_sequence(raw_options) and all(isinstance(v, str) for v in raw_options):
            options = _from_strings(raw_options, name_for)
        else:
            raise InvalidOptionsError(
                f"{type(raw_options).__name__} not valid for options of group {group_name}",
                context={"group": group_name, "value": raw_options},
            )
        groups.append(OptionGroup(name=group_ref, options=tuple(options)))
    return groups


_GROUP_NORMALIZERS: dict[InputShape, Callable[[Any, OptionNamer], list[OptionGroup]]] = {
    InputShape.RECORD_SEQUENCE: _groups_from_records,
    InputShape.NESTED_MAPPING: _groups_from_mapping,
}


def normalize_groups(value: Any, namer: OptionNamer) -> tuple[OptionGroup, ...]:
    """Coerce a grouped option argument into canonical groups."""
    shape = classify_groups(value)
    groups = tuple(_GROUP_NORMALIZERS[shape](value, namer))
    logger.debug(
        "Normalized %d option groups for setting %s (%s)",
        len(groups),
        namer.setting_id,
        shape.value,
    )
    return groups


def iter_name_refs(
    options: Sequence[Option] = (), groups: Sequence[OptionGroup] = ()
) -> list[NameRef]:
    """Every display-name ref of a canonical structure, in document order."""
    refs: list[NameRef] = []
    for group in groups:
        refs.append(group.name)
        refs.extend(option.name for option in group.options)
    refs.extend(option.name for option in options)
    return refs
