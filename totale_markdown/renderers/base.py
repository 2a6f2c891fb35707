"""Renderer interfaces and shared helpers."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any, Callable, Protocol, TypeVar

from totale_markdown.models.elements import ElementOptions

OptionsT = TypeVar("OptionsT", bound=ElementOptions)
OptionsT_contra = TypeVar("OptionsT_contra", bound=ElementOptions, contravariant=True)


class ElementRenderer(Protocol[OptionsT_contra]):
    def __call__(self, options: OptionsT_contra | Mapping[str, Any]) -> str:
        ...


def append_new_line(text: str, include: bool) -> str:
    return f"{text}\n" if include else text


def renders(
    options_model: type[OptionsT],
    *,
    new_line_default: bool,
) -> Callable[[Callable[[OptionsT], str]], ElementRenderer[OptionsT]]:
    """Wrap a core render function with option coercion and the trailing newline.

    The wrapped function accepts an ``options_model`` instance or a plain
    mapping. A newline is appended when ``include_new_line`` is true, or when
    it is ``None`` and ``new_line_default`` is true. ``new_line_default`` is
    bound once; callers wanting a live default pass ``include_new_line``.
    """

    def decorator(fn: Callable[[OptionsT], str]) -> ElementRenderer[OptionsT]:
        @functools.wraps(fn)
        def wrapper(options: OptionsT | Mapping[str, Any]) -> str:
            opts = options_model.coerce(options)
            include = new_line_default if opts.include_new_line is None else opts.include_new_line
            return append_new_line(fn(opts), include)

        return wrapper

    return decorator


__all__ = ["ElementRenderer", "append_new_line", "renders"]
