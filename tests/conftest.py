from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pagebuilder import JinjaRenderer, TemplateLoadError


PAGE_TEMPLATES = {
    "h": "<html><body>",
    "f": "</body></html>",
    "top": "<ul>",
    "element": "<li>{{ name }}: {{ value }}</li>",
    "bottom": "</ul>",
    "view_start": "<h1>{{ view_name }}</h1>",
}


class StubFragment:
    def __init__(self, template_id: str, options: dict[str, Any]) -> None:
        self.template_id = template_id
        self.options = options
        self.params: dict[str, Any] = {}
        self.render_calls = 0

    def set_param(self, name: str, value: Any) -> None:
        self.params[name] = value

    def render(self) -> str:
        self.render_calls += 1
        params = ",".join(f"{key}={self.params[key]}" for key in sorted(self.params))
        return f"[{self.template_id}|{params}]"


class StubRenderer:
    """Renderer double that records every handle it hands out."""

    def __init__(self, known: set[str] | None = None) -> None:
        self.known = known
        self.loaded: list[StubFragment] = []

    def load_template(self, template_id: str, **options: Any) -> StubFragment:
        if self.known is not None and template_id not in self.known:
            raise TemplateLoadError(template_id)
        fragment = StubFragment(template_id, options)
        self.loaded.append(fragment)
        return fragment


@pytest.fixture
def stub_renderer() -> StubRenderer:
    return StubRenderer()


@pytest.fixture
def jinja_renderer() -> JinjaRenderer:
    return JinjaRenderer(templates=PAGE_TEMPLATES)


@pytest.fixture
def make_stub_renderer() -> Callable[..., StubRenderer]:
    return StubRenderer


@pytest.fixture
def page_templates() -> dict[str, str]:
    return dict(PAGE_TEMPLATES)
