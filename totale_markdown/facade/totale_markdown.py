"""Configurable facade over the element renderers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from totale_markdown.config import (
    DEFAULT_CONFIG,
    ElementConfig,
    FullConfig,
    PartialConfig,
    merge_config,
)
from totale_markdown.models.elements import (
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
from totale_markdown.models.elements.base import OptionsT
from totale_markdown.renderers.markdown import components

logger = logging.getLogger(__name__)


class TotaleMarkdown:
    """Render Markdown elements with defaults taken from a private configuration.

    The configuration starts as ``DEFAULT_CONFIG`` deep-merged with the optional
    partial ``config`` and can be layered further with :meth:`configure`.
    Element methods fill every option the caller left unset from the current
    configuration before delegating to the module-level renderer.

    Instances are not synchronised: guard ``configure`` with a lock when the
    same instance renders from several threads.
    """

    DEFAULT_CONFIG: ClassVar[FullConfig] = DEFAULT_CONFIG

    def __init__(self, config: PartialConfig | None = None) -> None:
        self._config = merge_config(self.DEFAULT_CONFIG, config)
        logger.debug("Created TotaleMarkdown with config %s", self._config.model_dump())

    @property
    def config(self) -> FullConfig:
        """Return a deep copy of the current configuration."""
        return self._config.model_copy(deep=True)

    def configure(self, config: PartialConfig) -> None:
        """Deep-merge ``config`` onto the current configuration.

        Example::

            md = TotaleMarkdown()
            md.configure({"elements": {"ul": {"indent": 2}}})
        """
        self._config = merge_config(self._config, config)
        logger.debug("Reconfigured TotaleMarkdown: %s", self._config.model_dump())

    # Elements ---------------------------------------------------------

    def details(self, options: DetailsOptions | Mapping[str, Any]) -> str:
        return components.details(self._resolve(DetailsOptions, options))

    def font(self, options: FontOptions | Mapping[str, Any]) -> str:
        return components.font(self._resolve(FontOptions, options))

    def github_alert(self, options: GitHubAlertOptions | Mapping[str, Any]) -> str:
        return components.github_alert(self._resolve(GitHubAlertOptions, options))

    def heading(self, options: HeadingOptions | Mapping[str, Any]) -> str:
        return components.heading(self._resolve(HeadingOptions, options))

    def link(self, options: LinkOptions | Mapping[str, Any]) -> str:
        return components.link(self._resolve(LinkOptions, options))

    def markdownlint_ignore(self, options: MarkdownlintIgnoreOptions | Mapping[str, Any]) -> str:
        return components.markdownlint_ignore(self._resolve(MarkdownlintIgnoreOptions, options))

    def prettier_ignore(self, options: PrettierIgnoreOptions | Mapping[str, Any]) -> str:
        return components.prettier_ignore(self._resolve(PrettierIgnoreOptions, options))

    def table(self, options: TableOptions | Mapping[str, Any]) -> str:
        return components.table(self._resolve(TableOptions, options))

    def ul(self, options: UnorderedListOptions | Mapping[str, Any]) -> str:
        return components.ul(self._resolve(UnorderedListOptions, options))

    # Internal helpers -------------------------------------------------

    def _resolve(self, model: type[OptionsT], options: OptionsT | Mapping[str, Any]) -> OptionsT:
        opts = model.coerce(options)
        element_config: ElementConfig = getattr(self._config.elements, model.kind.value)
        defaults = element_config.model_dump()
        missing = opts.missing_fields(list(defaults))
        if not missing:
            return opts
        return opts.model_copy(update={name: defaults[name] for name in missing})


__all__ = ["TotaleMarkdown"]
