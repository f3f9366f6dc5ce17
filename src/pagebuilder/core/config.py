"""Configuration models used by the page builder and its renderers.

PageOptions

`header` (`str | None`)
: Identifier of a template rendered before every fragment. It never receives
  parameters and is never the current fragment.

`footer` (`str | None`)
: Identifier of a template rendered after every fragment, under the same rules
  as `header`.

Unknown keys are ignored so that host applications can pass their own request
options through untouched. Values other than strings or `None` raise
`PageOptionsError`.

RenderOptions

`die_on_bad_params` (`bool`)
: Reject parameters the template never references. Mirrors the HTML::Template
  option of the same name and defaults to `True`.

`strict` (`bool`)
: Fail at render time when the template references a parameter that was never
  set, instead of rendering it as an empty string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import PageOptionsError, RenderOptionsError


class PageOptions(BaseModel):
    """Header and footer wrapping applied around the page fragments."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    header: str | None = None
    footer: str | None = None

    @field_validator("header", "footer", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def coerce(cls, options: PageOptions | Mapping[str, Any] | None) -> PageOptions:
        """Return ``options`` as a model, treating ``None`` as no wrapping."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            raise PageOptionsError(f"Invalid page options: {exc}") from exc


class RenderOptions(BaseModel):
    """Per-fragment options understood by :class:`JinjaRenderer`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    die_on_bad_params: bool = True
    strict: bool = False

    @classmethod
    def coerce(cls, options: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
        """Validate raw render options, wrapping pydantic failures."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            raise RenderOptionsError(f"Invalid render options: {exc}") from exc


__all__ = ["PageOptions", "RenderOptions"]
