"""Collapsible details option model."""

from __future__ import annotations

from typing import ClassVar

from .base import ElementKind, ElementOptions


class DetailsOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.DETAILS
    summary: str
    text: str


__all__ = ["DetailsOptions"]
