"""Contracts between the page builder and the template engine it drives."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FragmentHandle(Protocol):
    """A loaded template instance waiting for parameters."""

    def set_param(self, name: str, value: Any) -> None: ...

    def render(self) -> str: ...


@runtime_checkable
class TemplateRenderer(Protocol):
    """Loads templates by identifier and hands back fragment handles.

    Implementations must raise :class:`~pagebuilder.core.exceptions.TemplateLoadError`
    when ``template_id`` cannot be resolved, never return an empty fragment.
    """

    def load_template(self, template_id: str, **options: Any) -> FragmentHandle: ...


__all__ = ["FragmentHandle", "TemplateRenderer"]
