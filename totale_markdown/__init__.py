"""Render Markdown fragments from typed options, with configurable defaults."""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, ConfigurationError, FullConfig, PartialConfig, merge_config  # noqa: E402
from .facade import TotaleMarkdown  # noqa: E402
from .models.elements import (  # noqa: E402
    AlertType,
    Alignment,
    DetailsOptions,
    FontOptions,
    GitHubAlertOptions,
    HeadingOptions,
    LinkOptions,
    MarkdownlintIgnoreOptions,
    PrettierIgnoreOptions,
    TableOptions,
    UnorderedListOptions,
)
from .renderers.markdown import (  # noqa: E402
    details,
    font,
    github_alert,
    heading,
    link,
    markdownlint_ignore,
    prettier_ignore,
    table,
    ul,
)

__all__ = [
    "__version__",
    "AlertType",
    "Alignment",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DetailsOptions",
    "FontOptions",
    "FullConfig",
    "GitHubAlertOptions",
    "HeadingOptions",
    "LinkOptions",
    "MarkdownlintIgnoreOptions",
    "PartialConfig",
    "PrettierIgnoreOptions",
    "TableOptions",
    "TotaleMarkdown",
    "UnorderedListOptions",
    "details",
    "font",
    "github_alert",
    "heading",
    "link",
    "markdownlint_ignore",
    "merge_config",
    "prettier_ignore",
    "table",
    "ul",
]
