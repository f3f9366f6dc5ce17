"""Diagnostic abstractions shared by the page builder and its renderers."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Receives page assembly failures and structured page events."""

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(self, *, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.error(message, exc_info=exc)
        else:
            self._logger.error(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def ensure_emitter(emitter: DiagnosticEmitter | None) -> DiagnosticEmitter:
    """Return a usable emitter, defaulting to the null implementation."""
    return emitter if emitter is not None else NullEmitter()


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for page-level diagnostic events."""
    data = dict(payload)

    if name == "page_built":
        count = data.get("fragments", 0)
        details: list[str] = []
        if data.get("header"):
            details.append(f"header={data['header']}")
        if data.get("footer"):
            details.append(f"footer={data['footer']}")
        suffix = f" ({', '.join(details)})" if details else ""
        plural = "" if count == 1 else "s"
        return f"Built page from {count} fragment{plural}{suffix}"

    if name == "param_skipped":
        param = data.get("name") or "<unknown>"
        template_id = data.get("template") or "<unknown>"
        return f"Skipped parameter '{param}' on '{template_id}' (value {data.get('value')!r})"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "ensure_emitter",
    "format_event_message",
]
