"""Template renderer contract and the bundled Jinja implementation."""

from __future__ import annotations

from .base import FragmentHandle, TemplateRenderer
from .jinja import DEFAULT_AUTOESCAPE_EXTENSIONS, JinjaFragment, JinjaRenderer

__all__ = [
    "DEFAULT_AUTOESCAPE_EXTENSIONS",
    "FragmentHandle",
    "JinjaFragment",
    "JinjaRenderer",
    "TemplateRenderer",
]
