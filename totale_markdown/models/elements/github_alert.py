"""GitHub alert option model."""

from __future__ import annotations

from enum import Enum

from typing import ClassVar

from .base import ElementKind, ElementOptions


class AlertType(str, Enum):
    NOTE = "note"
    TIP = "tip"
    IMPORTANT = "important"
    WARNING = "warning"
    CAUTION = "caution"


class GitHubAlertOptions(ElementOptions):
    kind: ClassVar[ElementKind] = ElementKind.GITHUB_ALERT
    type: AlertType
    text: str


__all__ = ["AlertType", "GitHubAlertOptions"]
