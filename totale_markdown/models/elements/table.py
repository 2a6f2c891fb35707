"""Table option model."""

from __future__ import annotations

from enum import Enum

from typing import ClassVar

from pydantic import Field, StrictBool

from .base import ElementKind, ElementOptions


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    NONE = "none"


class TableOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.TABLE
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = Field(default_factory=tuple)
    alignment: tuple[Alignment, ...] = Field(default_factory=tuple)
    pad_columns: StrictBool | None = None


__all__ = ["Alignment", "TableOptions"]
