"""Tests for option input classification and normalization."""

from __future__ import annotations

import logging

import pytest

from sp_common.errors import InvalidOptionsError
from sp_pages.names import LiteralName, LocalizationKey
from sp_pages.options import (
    InputShape,
    Option,
    OptionGroup,
    OptionNamer,
    classify_groups,
    classify_options,
    iter_name_refs,
    normalize_groups,
    normalize_options,
)


pytestmark = pytest.mark.unit_pages


def _mint(path: str, default: str | None = None) -> LocalizationKey:
    return LocalizationKey(path=f"pages.p.{path}", default=default)


@pytest.fixture
def namer() -> OptionNamer:
    return OptionNamer("color")


@pytest.fixture
def localized_namer() -> OptionNamer:
    return OptionNamer("color", _mint)


def _pairs(options) -> list[tuple[str, str]]:
    return [(option.id, option.name.text) for option in options]


@pytest.mark.parametrize(
    "value, shape",
    [
        (["a", "b"], InputShape.STRING_SEQUENCE),
        ([], InputShape.STRING_SEQUENCE),
        (("a", {"id": "b"}), InputShape.RECORD_SEQUENCE),
        ({"a": "A"}, InputShape.SCALAR_MAPPING),
    ],
)
def test_classify_options(value, shape) -> None:
    assert classify_options(value) is shape


@pytest.mark.parametrize(
    "value, shape",
    [
        ([{"name": "g", "options": []}], InputShape.RECORD_SEQUENCE),
        ({"g": ["a"]}, InputShape.NESTED_MAPPING),
    ],
)
def test_classify_groups(value, shape) -> None:
    assert classify_groups(value) is shape


@pytest.mark.parametrize("value", [42, "str", b"bytes", None, 1.5])
def test_options_rejects_non_collection(value, namer: OptionNamer) -> None:
    with pytest.raises(TypeError):
        normalize_options(value, namer)


def test_string_sequence_uses_value_as_id_and_name(namer: OptionNamer) -> None:
    options = normalize_options(["red", "blue", "green"], namer)

    assert _pairs(options) == [("red", "red"), ("blue", "blue"), ("green", "green")]
    assert all(isinstance(option.name, LiteralName) for option in options)


def test_mapping_keeps_insertion_order(namer: OptionNamer) -> None:
    options = normalize_options({"z": "Zed", "a": "Ay", "m": "Em"}, namer)

    assert _pairs(options) == [("z", "Zed"), ("a", "Ay"), ("m", "Em")]


def test_records_default_name_to_id(namer: OptionNamer) -> None:
    options = normalize_options(
        [{"id": "opt-1", "name": "Option 1"}, {"id": "opt-2"}, "plain"], namer
    )

    assert _pairs(options) == [
        ("opt-1", "Option 1"),
        ("opt-2", "opt-2"),
        ("plain", "plain"),
    ]


def test_canonical_options_pass_through(namer: OptionNamer) -> None:
    option = Option(id="x", name=LiteralName(text="Ex"))

    assert normalize_options([option], namer) == (option,)


def test_records_do_not_mutate_input(localized_namer: OptionNamer) -> None:
    record = {"id": "a", "name": "Alpha"}

    normalize_options([record], localized_namer)

    assert record == {"id": "a", "name": "Alpha"}


def test_numeric_ids_are_stringified(namer: OptionNamer) -> None:
    options = normalize_options({1: "One", 2: "Two"}, namer)

    assert [option.id for option in options] == ["1", "2"]


@pytest.mark.parametrize(
    "value",
    [
        [42],
        [{"name": "no id"}],
        [{"id": ""}],
        [""],
        {"a": ["not", "text"]},
    ],
)
def test_options_rejects_malformed_elements(value, namer: OptionNamer) -> None:
    with pytest.raises(InvalidOptionsError):
        normalize_options(value, namer)


def test_long_id_logs_warning(namer: OptionNamer, caplog: pytest.LogCaptureFixture) -> None:
    long_id = "x" * 129

    with caplog.at_level(logging.WARNING, logger="sp_pages.options"):
        options = normalize_options([long_id], namer)

    assert options[0].id == long_id
    assert "longer than 128" in caplog.text


def test_localized_flat_options_use_original_name(localized_namer: OptionNamer) -> None:
    options = normalize_options({"r": "Red"}, localized_namer)

    assert options[0].id == "r"
    assert options[0].name == LocalizationKey(
        path="pages.p.settings.color.options.Red.name", default="Red"
    )


def test_grouped_mapping_of_lists(namer: OptionNamer) -> None:
    groups = normalize_groups({"Warm": ["red", "orange"], "Cold": ["blue"]}, namer)

    assert [group.name.text for group in groups] == ["Warm", "Cold"]
    assert _pairs(groups[0].options) == [("red", "red"), ("orange", "orange")]
    assert _pairs(groups[1].options) == [("blue", "blue")]


def test_grouped_mapping_of_mappings(namer: OptionNamer) -> None:
    groups = normalize_groups({"Cold": {"b": "Blue", "c": "Cyan"}}, namer)

    assert _pairs(groups[0].options) == [("b", "Blue"), ("c", "Cyan")]


def test_grouped_records(namer: OptionNamer) -> None:
    groups = normalize_groups(
        [
            {"name": "First Group", "options": [{"id": "option-001", "name": "Option 1"}]},
            {"name": "Second Group", "options": [{"id": "option-002", "name": "Option 2"}]},
        ],
        namer,
    )

    assert [group.name.text for group in groups] == ["First Group", "Second Group"]
    assert _pairs(groups[1].options) == [("option-002", "Option 2")]


def test_grouped_mapping_keys_options_under_group_key(
    localized_namer: OptionNamer,
) -> None:
    groups = normalize_groups({"Colors": {"r": "Red"}}, localized_namer)

    group_key = "pages.p.settings.color.groups.Colors.name"
    assert groups[0].name.path == group_key
    assert groups[0].options[0].name.path == (
        f"pages.p.settings.color.groups.{group_key}.options.Red.name"
    )
    assert groups[0].options[0].name.default == "Red"


def test_grouped_records_key_options_under_plain_group_name(
    localized_namer: OptionNamer,
) -> None:
    groups = normalize_groups(
        [{"name": "Colors", "options": [{"id": "r", "name": "Red"}]}], localized_namer
    )

    assert groups[0].name.path == "pages.p.settings.color.groups.Colors.name"
    assert groups[0].options[0].name.path == (
        "pages.p.settings.color.groups.Colors.options.Red.name"
    )


def test_canonical_group_with_literal_name_is_localized(
    localized_namer: OptionNamer,
) -> None:
    group = OptionGroup(
        name=LiteralName(text="G"),
        options=(Option(id="a", name=LiteralName(text="A")),),
    )

    (result,) = normalize_groups([group], localized_namer)

    assert result.name.path == "pages.p.settings.color.groups.G.name"
    assert result.options[0].name.path == "pages.p.settings.color.groups.G.options.A.name"


@pytest.mark.parametrize(
    "value",
    [
        [1, 2, 3],
        ["group"],
        [{"options": []}],
        [{"name": "g"}],
        [{"name": "g", "options": ["plain"]}],
        [{"name": "g", "options": [{"id": "a"}]}],
        {"g": 5},
        {"g": [1, 2]},
        42,
        "str",
    ],
)
def test_groups_rejects_malformed_input(value, namer: OptionNamer) -> None:
    with pytest.raises(TypeError):
        normalize_groups(value, namer)


def test_iter_name_refs_orders_groups_before_options(namer: OptionNamer) -> None:
    groups = normalize_groups({"G": ["a"]}, namer)
    options = normalize_options(["b"], namer)

    refs = iter_name_refs(options, groups)

    assert [ref.text for ref in refs] == ["G", "a", "b"]


def test_canonical_group_with_key_name_still_localizes_options(
    localized_namer: OptionNamer,
) -> None:
    group_key = LocalizationKey(path="pages.p.custom.group", default="G")
    group = OptionGroup(
        name=group_key,
        options=(Option(id="a", name=LiteralName(text="A")),),
    )

    (result,) = normalize_groups([group], localized_namer)

    assert result.name == group_key
    assert result.options[0].name == LocalizationKey(
        path="pages.p.settings.color.groups.G.options.A.name", default="A"
    )


def test_mapping_values_accept_name_refs(localized_namer: OptionNamer) -> None:
    preset = LocalizationKey(path="pages.p.shared.red", default="Red")

    options = normalize_options(
        {"r": preset, "b": LiteralName(text="Blue")}, localized_namer
    )
    groups = normalize_groups({"Cold": {"c": LiteralName(text="Cyan")}}, localized_namer)

    assert options[0].name == preset
    assert options[1].name.path == "pages.p.settings.color.options.Blue.name"
    assert groups[0].options[0].name.default == "Cyan"
