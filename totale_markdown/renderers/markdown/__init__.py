"""Markdown element renderers and table layout."""

from .components import (
    details,
    encode_url,
    font,
    github_alert,
    heading,
    link,
    markdownlint_ignore,
    prettier_ignore,
    table,
    ul,
)
from .table_layout import format_table

__all__ = [
    "details",
    "encode_url",
    "font",
    "format_table",
    "github_alert",
    "heading",
    "link",
    "markdownlint_ignore",
    "prettier_ignore",
    "table",
    "ul",
]
