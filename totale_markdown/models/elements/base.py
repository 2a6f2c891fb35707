"""Shared building blocks for element option models."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, StrictBool

OptionsT = TypeVar("OptionsT", bound="ElementOptions")


class ElementKind(str, Enum):
    DETAILS = "details"
    FONT = "font"
    GITHUB_ALERT = "github_alert"
    HEADING = "heading"
    LINK = "link"
    MARKDOWNLINT_IGNORE = "markdownlint_ignore"
    PRETTIER_IGNORE = "prettier_ignore"
    TABLE = "table"
    UL = "ul"


class ElementOptions(BaseModel):
    """Immutable input for a single render call.

    Optional fields default to ``None`` which means "not supplied": the value
    is then taken from the facade configuration or ``DEFAULT_CONFIG``.
    """

    kind: ClassVar[ElementKind]

    include_new_line: StrictBool | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def coerce(cls: type[OptionsT], value: OptionsT | Mapping[str, Any]) -> OptionsT:
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(value)
        raise TypeError(
            f"{cls.__name__} expects a {cls.__name__} instance or a mapping, "
            f"received {type(value).__name__}."
        )

    def missing_fields(self, names: list[str]) -> list[str]:
        """Return the subset of ``names`` the caller left unset."""
        return [name for name in names if getattr(self, name) is None]


__all__ = ["ElementKind", "ElementOptions", "OptionsT"]
