"""Markdown element renderers.

Each renderer takes its option model (or an equivalent mapping) and returns a
string. Optional fields left as ``None`` fall back to ``DEFAULT_CONFIG``.
"""

from __future__ import annotations

from urllib.parse import quote

from totale_markdown.config import DEFAULT_CONFIG
from totale_markdown.models.elements import (
    DetailsOptions,
    FontOptions,
    GitHubAlertOptions,
    HeadingOptions,
    LinkOptions,
    ListItem,
    MarkdownlintIgnoreOptions,
    PrettierIgnoreOptions,
    TableOptions,
    UnorderedListOptions,
)
from totale_markdown.renderers.base import renders

from .table_layout import format_table

# RFC 3986 reserved characters plus the unreserved marks quote() does not keep.
URL_SAFE_CHARACTERS = ":/?#[]@!$&'()*+,;=-_.~"

_defaults = DEFAULT_CONFIG.elements


# ---------------------------------------------------------------------------
# Block elements


@renders(HeadingOptions, new_line_default=_defaults.heading.include_new_line)
def heading(options: HeadingOptions) -> str:
    return f"{'#' * options.level} {options.text}"


@renders(DetailsOptions, new_line_default=_defaults.details.include_new_line)
def details(options: DetailsOptions) -> str:
    return (
        "<details>\n"
        f"<summary>\n\n{options.summary}\n</summary>\n\n"
        f"{options.text}\n"
        "</details>"
    )


@renders(GitHubAlertOptions, new_line_default=_defaults.github_alert.include_new_line)
def github_alert(options: GitHubAlertOptions) -> str:
    marker = f"> [!{options.type.value.upper()}]"
    return f"{marker}\n{_quote_lines(options.text)}"


@renders(UnorderedListOptions, new_line_default=_defaults.ul.include_new_line)
def ul(options: UnorderedListOptions) -> str:
    indent = options.indent if options.indent is not None else _defaults.ul.indent
    increment = options.indent_increment if options.indent_increment is not None else _defaults.ul.indent_increment
    return _render_items(options.items, indent, increment)


@renders(TableOptions, new_line_default=_defaults.table.include_new_line)
def table(options: TableOptions) -> str:
    pad = options.pad_columns if options.pad_columns is not None else _defaults.table.pad_columns
    return format_table(options.headers, options.rows, options.alignment, pad)


@renders(MarkdownlintIgnoreOptions, new_line_default=_defaults.markdownlint_ignore.include_new_line)
def markdownlint_ignore(options: MarkdownlintIgnoreOptions) -> str:
    rules = "".join(f" {rule}" for rule in options.rules)
    return (
        f"<!-- markdownlint-disable{rules} -->\n"
        f"{options.text}\n"
        f"<!-- markdownlint-enable{rules} -->"
    )


@renders(PrettierIgnoreOptions, new_line_default=_defaults.prettier_ignore.include_new_line)
def prettier_ignore(options: PrettierIgnoreOptions) -> str:
    return f"<!-- prettier-ignore-start -->\n{options.text}\n<!-- prettier-ignore-end -->"


# ---------------------------------------------------------------------------
# Inline elements


@renders(LinkOptions, new_line_default=_defaults.link.include_new_line)
def link(options: LinkOptions) -> str:
    return f"[{options.text}]({encode_url(options.url)})"


@renders(FontOptions, new_line_default=_defaults.font.include_new_line)
def font(options: FontOptions) -> str:
    if options.color is None:
        return f"<font>{options.text}</font>"
    return f'<font color="{options.color}">{options.text}</font>'


# Helper utilities -----------------------------------------------------------


def encode_url(url: str) -> str:
    """Percent-encode a URL for a link target, keeping its reserved characters."""
    return quote(url, safe=URL_SAFE_CHARACTERS)


def _render_items(items: tuple[ListItem, ...], indent: int, increment: int) -> str:
    # Nested blocks join as one entry so an empty nested list still yields a line.
    lines: list[str] = []
    for item in items:
        if isinstance(item, str):
            lines.append(f"{' ' * indent}- {item}")
        else:
            lines.append(_render_items(item, indent + increment, increment))
    return "\n".join(lines)


def _quote_lines(text: str) -> str:
    lines = text.splitlines() or [""]
    quoted = []
    for line in lines:
        if line:
            quoted.append(f"> {line}")
        else:
            quoted.append(">")
    return "\n".join(quoted)


__all__ = [
    "details",
    "encode_url",
    "font",
    "github_alert",
    "heading",
    "link",
    "markdownlint_ignore",
    "prettier_ignore",
    "table",
    "ul",
]
