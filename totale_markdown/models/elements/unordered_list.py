"""Unordered list option model."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Union

from pydantic import StrictInt, field_validator

from .base import ElementKind, ElementOptions

# A list item is either a leaf string or a nested sequence of list items.
ListItem = Union[str, tuple[Any, ...]]


class UnorderedListOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.UL
    items: tuple[ListItem, ...]
    indent: StrictInt | None = None
    indent_increment: StrictInt | None = None

    @field_validator("items", mode="before")
    @classmethod
    def _freeze_items(cls, value: Any) -> tuple[ListItem, ...]:
        return _freeze(value, ("items",))


def _freeze(value: Any, path: tuple[str, ...]) -> tuple[ListItem, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ValueError(f"{'.'.join(path)} must be a sequence, received {type(value).__name__}.")
    frozen: list[ListItem] = []
    for index, item in enumerate(value):
        if isinstance(item, str):
            frozen.append(item)
        else:
            frozen.append(_freeze(item, (*path, str(index))))
    return tuple(frozen)


__all__ = ["ListItem", "UnorderedListOptions"]
