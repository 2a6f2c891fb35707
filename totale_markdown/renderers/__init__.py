"""Renderer implementations and helpers."""

from .base import ElementRenderer, append_new_line, renders

__all__ = ["ElementRenderer", "append_new_line", "renders"]
