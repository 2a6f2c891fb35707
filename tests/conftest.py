from __future__ import annotations

from typing import Any, Callable

import pytest

from totale_markdown import TotaleMarkdown
from totale_markdown.models.elements import ElementOptions
from totale_markdown.renderers.markdown import components

RENDERER_NAMES = (
    "details",
    "font",
    "github_alert",
    "heading",
    "link",
    "markdownlint_ignore",
    "prettier_ignore",
    "table",
    "ul",
)


@pytest.fixture
def md() -> TotaleMarkdown:
    return TotaleMarkdown()


@pytest.fixture
def render_calls(monkeypatch: pytest.MonkeyPatch) -> dict[str, list[ElementOptions]]:
    """Record the options every module-level renderer receives.

    The wrapped renderers still run, so facade output stays observable.
    """
    calls: dict[str, list[ElementOptions]] = {name: [] for name in RENDERER_NAMES}

    def _recorder(name: str, original: Callable[[Any], str]) -> Callable[[Any], str]:
        def _record(options: Any) -> str:
            calls[name].append(options)
            return original(options)

        return _record

    for name in RENDERER_NAMES:
        monkeypatch.setattr(components, name, _recorder(name, getattr(components, name)))
    return calls
