"""Option models for formatter and linter ignore comments."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .base import ElementKind, ElementOptions


class MarkdownlintIgnoreOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.MARKDOWNLINT_IGNORE
    text: str
    # Empty means every rule is disabled for the wrapped text.
    rules: tuple[str, ...] = Field(default_factory=tuple)


class PrettierIgnoreOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.PRETTIER_IGNORE
    text: str


__all__ = ["MarkdownlintIgnoreOptions", "PrettierIgnoreOptions"]
