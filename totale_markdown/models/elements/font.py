"""Font tag option model."""

from __future__ import annotations

from typing import ClassVar

from .base import ElementKind, ElementOptions


class FontOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.FONT
    text: str
    color: str | None = None


__all__ = ["FontOptions"]
