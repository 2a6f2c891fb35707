"""Link option model."""

from __future__ import annotations

from typing import ClassVar

from .base import ElementKind, ElementOptions


class LinkOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.LINK
    text: str
    url: str


__all__ = ["LinkOptions"]
