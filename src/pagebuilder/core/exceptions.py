"""Exception hierarchy for page assembly failures."""

from __future__ import annotations


class PageBuilderError(RuntimeError):
    """Base exception for page assembly failures."""


class TemplateLoadError(PageBuilderError):
    """Raised by a renderer when a template cannot be resolved or parsed."""

    def __init__(self, template_id: str, message: str | None = None) -> None:
        self.template_id = template_id
        super().__init__(message or f"Unable to load template '{template_id}'.")


class NoCurrentFragmentError(PageBuilderError):
    """Raised when parameters are set before any fragment has been appended."""


class NotInitializedError(PageBuilderError):
    """Raised when a fragment is appended to a builder that was never initialised."""


class UnknownParameterError(PageBuilderError):
    """Raised when a strict fragment receives a parameter its template never uses."""

    def __init__(self, template_id: str, name: str) -> None:
        self.template_id = template_id
        self.name = name
        super().__init__(
            f"Template '{template_id}' does not use a parameter named '{name}'. "
            "Pass die_on_bad_params=False to accept it anyway."
        )


class PageOptionsError(PageBuilderError, ValueError):
    """Raised when header or footer options have the wrong type."""


class RenderOptionsError(PageBuilderError, ValueError):
    """Raised when render options forwarded to a renderer are invalid."""


class RenderError(PageBuilderError):
    """Raised when a loaded fragment fails while rendering."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "NoCurrentFragmentError",
    "NotInitializedError",
    "PageBuilderError",
    "PageOptionsError",
    "RenderError",
    "RenderOptionsError",
    "TemplateLoadError",
    "UnknownParameterError",
    "exception_messages",
]
