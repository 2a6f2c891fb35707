from __future__ import annotations

import pytest

from totale_markdown.config import (
    DEFAULT_CONFIG,
    ConfigurationError,
    ElementsConfig,
    FullConfig,
    UnorderedListConfig,
    merge_config,
)


def test_default_config_leaves() -> None:
    elements = DEFAULT_CONFIG.elements

    assert elements.heading.include_new_line is True
    assert elements.link.include_new_line is False
    assert elements.font.include_new_line is False
    assert elements.table.pad_columns is True
    assert (elements.ul.indent, elements.ul.indent_increment, elements.ul.include_new_line) == (0, 2, True)


def test_merge_replaces_only_supplied_leaves() -> None:
    merged = merge_config(DEFAULT_CONFIG, {"elements": {"ul": {"indent_increment": 4}}})

    expected = DEFAULT_CONFIG.model_dump()
    expected["elements"]["ul"]["indent_increment"] = 4
    assert merged.model_dump() == expected


def test_merge_returns_new_tree() -> None:
    base = FullConfig()

    merged = merge_config(base, {"elements": {"heading": {"include_new_line": False}}})

    assert merged is not base
    assert base.elements.heading.include_new_line is True
    assert merged.elements.heading.include_new_line is False


def test_merge_without_partial_copies_base() -> None:
    merged = merge_config(DEFAULT_CONFIG, None)

    assert merged == DEFAULT_CONFIG
    assert merged is not DEFAULT_CONFIG
    assert merged.elements is not DEFAULT_CONFIG.elements


def test_merge_ignores_none_leaves() -> None:
    merged = merge_config(DEFAULT_CONFIG, {"elements": {"ul": {"indent": None, "indent_increment": 3}}})

    assert merged.elements.ul.indent == 0
    assert merged.elements.ul.indent_increment == 3


def test_merge_accepts_model_partial() -> None:
    partial = FullConfig(elements=ElementsConfig(ul=UnorderedListConfig(indent=4)))

    merged = merge_config(
        merge_config(DEFAULT_CONFIG, {"elements": {"ul": {"indent_increment": 3}}}),
        partial,
    )

    assert merged.elements.ul.indent == 4
    assert merged.elements.ul.indent_increment == 3


@pytest.mark.parametrize(
    "partial",
    [
        {"elements": {"blockquote": {"include_new_line": True}}},
        {"elements": {"ul": {"bullet": "*"}}},
        {"theme": "dark"},
    ],
)
def test_merge_rejects_unknown_keys(partial) -> None:
    with pytest.raises(ConfigurationError, match="Unknown configuration key"):
        merge_config(DEFAULT_CONFIG, partial)


def test_merge_rejects_scalar_for_mapping_node() -> None:
    with pytest.raises(ConfigurationError, match="expects a mapping"):
        merge_config(DEFAULT_CONFIG, {"elements": {"ul": 3}})


@pytest.mark.parametrize(
    "partial",
    [
        {"elements": {"heading": {"include_new_line": "false"}}},
        {"elements": {"heading": {"include_new_line": 1}}},
        {"elements": {"ul": {"indent": "2"}}},
        {"elements": {"ul": {"indent": True}}},
        {"elements": {"table": {"pad_columns": [True]}}},
    ],
)
def test_merge_rejects_wrong_leaf_types(partial) -> None:
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        merge_config(DEFAULT_CONFIG, partial)


def test_merge_rejects_non_mapping_partial() -> None:
    with pytest.raises(ConfigurationError):
        merge_config(DEFAULT_CONFIG, ["elements"])  # type: ignore[arg-type]


def test_configuration_error_is_value_error() -> None:
    assert issubclass(ConfigurationError, ValueError)
