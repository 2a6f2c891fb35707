"""Heading option model."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .base import ElementKind, ElementOptions


class HeadingOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.HEADING
    text: str
    level: int = Field(ge=1)


__all__ = ["HeadingOptions"]
