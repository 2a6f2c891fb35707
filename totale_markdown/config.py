"""Configuration tree for element defaults and the deep-merge helpers around it."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, ValidationError


class ConfigurationError(ValueError):
    """Raised when a partial configuration does not fit the configuration tree."""


class ElementConfig(BaseModel):
    """Base class for per-element default settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class BlockElementConfig(ElementConfig):
    include_new_line: StrictBool = True


class InlineElementConfig(ElementConfig):
    include_new_line: StrictBool = False


class DetailsConfig(BlockElementConfig):
    pass


class FontConfig(InlineElementConfig):
    pass


class GitHubAlertConfig(BlockElementConfig):
    pass


class HeadingConfig(BlockElementConfig):
    pass


class LinkConfig(InlineElementConfig):
    pass


class MarkdownlintIgnoreConfig(BlockElementConfig):
    pass


class PrettierIgnoreConfig(BlockElementConfig):
    pass


class TableConfig(BlockElementConfig):
    pad_columns: StrictBool = True


class UnorderedListConfig(BlockElementConfig):
    indent: StrictInt = 0
    indent_increment: StrictInt = 2


class ElementsConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    details: DetailsConfig = Field(default_factory=DetailsConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    github_alert: GitHubAlertConfig = Field(default_factory=GitHubAlertConfig)
    heading: HeadingConfig = Field(default_factory=HeadingConfig)
    link: LinkConfig = Field(default_factory=LinkConfig)
    markdownlint_ignore: MarkdownlintIgnoreConfig = Field(default_factory=MarkdownlintIgnoreConfig)
    prettier_ignore: PrettierIgnoreConfig = Field(default_factory=PrettierIgnoreConfig)
    table: TableConfig = Field(default_factory=TableConfig)
    ul: UnorderedListConfig = Field(default_factory=UnorderedListConfig)


class FullConfig(BaseModel):
    """Complete configuration tree; every leaf carries a default."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    elements: ElementsConfig = Field(default_factory=ElementsConfig)


PartialConfig = Union[Mapping[str, Any], FullConfig]

DEFAULT_CONFIG = FullConfig()


def merge_config(base: FullConfig, partial: PartialConfig | None) -> FullConfig:
    """Deep-merge ``partial`` onto ``base`` and return a new configuration tree.

    Mapping nodes merge key by key; scalar and sequence leaves are replaced
    wholesale. ``None`` leaves count as "not supplied" and keep the base value.
    When ``partial`` is a ``FullConfig`` only its explicitly set fields apply.

    Raises
    ------
    ConfigurationError
        If ``partial`` names an unknown key, puts a scalar where a mapping node
        is expected, or holds a leaf of the wrong type.
    """
    if partial is None:
        return base.model_copy(deep=True)
    if isinstance(partial, BaseModel):
        partial = partial.model_dump(exclude_unset=True)
    if not isinstance(partial, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping, received {type(partial).__name__}."
        )

    merged = _merge_tree(base.model_dump(), partial, ())
    try:
        return FullConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigurationError(_describe_errors(exc)) from exc


def _merge_tree(
    base: Mapping[str, Any],
    partial: Mapping[str, Any],
    path: tuple[str, ...],
) -> dict[str, Any]:
    merged = copy.deepcopy(dict(base))
    for key, value in partial.items():
        location = ".".join((*path, str(key)))
        if key not in base:
            raise ConfigurationError(f"Unknown configuration key '{location}'.")
        if value is None:
            continue
        current = base[key]
        if isinstance(current, Mapping):
            if not isinstance(value, Mapping):
                raise ConfigurationError(
                    f"Configuration node '{location}' expects a mapping, "
                    f"received {type(value).__name__}."
                )
            merged[key] = _merge_tree(current, value, (*path, key))
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _describe_errors(exc: ValidationError) -> str:
    details = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return "Invalid configuration: " + "; ".join(details)


__all__ = [
    "BlockElementConfig",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DetailsConfig",
    "ElementConfig",
    "ElementsConfig",
    "FontConfig",
    "FullConfig",
    "GitHubAlertConfig",
    "HeadingConfig",
    "InlineElementConfig",
    "LinkConfig",
    "MarkdownlintIgnoreConfig",
    "PartialConfig",
    "PrettierIgnoreConfig",
    "TableConfig",
    "UnorderedListConfig",
    "merge_config",
]
