"""Typed option models, one per Markdown element."""

from __future__ import annotations

from .base import ElementKind, ElementOptions
from .details import DetailsOptions
from .font import FontOptions
from .github_alert import AlertType, GitHubAlertOptions
from .heading import HeadingOptions
from .link import LinkOptions
from .lint_ignore import MarkdownlintIgnoreOptions, PrettierIgnoreOptions
from .table import Alignment, TableOptions
from .unordered_list import ListItem, UnorderedListOptions

__all__ = [
    "Alignment",
    "AlertType",
    "DetailsOptions",
    "ElementKind",
    "ElementOptions",
    "FontOptions",
    "GitHubAlertOptions",
    "HeadingOptions",
    "LinkOptions",
    "ListItem",
    "MarkdownlintIgnoreOptions",
    "PrettierIgnoreOptions",
    "TableOptions",
    "UnorderedListOptions",
]
