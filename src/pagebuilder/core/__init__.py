"""Core page assembly: the builder, its renderer contract and diagnostics."""

from __future__ import annotations

from .builder import PageBuilder
from .config import PageOptions, RenderOptions
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    NoCurrentFragmentError,
    NotInitializedError,
    PageBuilderError,
    PageOptionsError,
    RenderError,
    RenderOptionsError,
    TemplateLoadError,
    UnknownParameterError,
)
from .templates import FragmentHandle, JinjaFragment, JinjaRenderer, TemplateRenderer

__all__ = [
    "DiagnosticEmitter",
    "FragmentHandle",
    "JinjaFragment",
    "JinjaRenderer",
    "LoggingEmitter",
    "NoCurrentFragmentError",
    "NotInitializedError",
    "NullEmitter",
    "PageBuilder",
    "PageBuilderError",
    "PageOptionsError",
    "PageOptions",
    "RenderError",
    "RenderOptions",
    "RenderOptionsError",
    "TemplateLoadError",
    "TemplateRenderer",
    "UnknownParameterError",
]
