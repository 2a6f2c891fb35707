"""Configuration facade over the element renderers."""

from .totale_markdown import TotaleMarkdown

__all__ = ["TotaleMarkdown"]
