"""Build web pages from many small templates instead of one monolithic one."""

from __future__ import annotations

from pagebuilder.core import (
    DiagnosticEmitter,
    FragmentHandle,
    JinjaFragment,
    JinjaRenderer,
    LoggingEmitter,
    NoCurrentFragmentError,
    NotInitializedError,
    NullEmitter,
    PageBuilder,
    PageBuilderError,
    PageOptionsError,
    PageOptions,
    RenderError,
    RenderOptions,
    RenderOptionsError,
    TemplateLoadError,
    TemplateRenderer,
    UnknownParameterError,
)
from pagebuilder.version import get_version


__version__ = get_version()

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
    "__version__",
    "get_version",
]
