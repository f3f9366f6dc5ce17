"""Ordered assembly of a page from independently rendered template fragments."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from .config import PageOptions
from .diagnostics import DiagnosticEmitter, ensure_emitter
from .exceptions import NoCurrentFragmentError, NotInitializedError, PageBuilderError
from .templates.base import FragmentHandle, TemplateRenderer


logger = logging.getLogger(__name__)


class PageBuilder:
    """Accumulate template fragments for one page and concatenate them on build.

    Parameters always go to the *current* fragment, the one appended last. Once
    a newer fragment is appended there is no way back to the earlier ones, so a
    page reads top to bottom exactly like the code that builds it::

        page = PageBuilder(renderer)
        page.initialize({"header": "header.html", "footer": "footer.html"})
        page.append_fragment("view_start.html")
        page.set_param("view_name", "This View")
        for row in rows:
            page.append_fragment("view_element.html")
            page.set_params(name=row.name, info=row.info)
        page.append_fragment("view_end.html")
        html = page.build()

    Builders hold per-request state and must not be shared between requests.

    Args:
        renderer: Template engine used to load every fragment.
        auto_initialize: Initialise with empty options on the first append when
            :meth:`initialize` was never called. When disabled, appending to an
            uninitialised builder raises :class:`NotInitializedError`.
        skip_falsy: Treat any falsy value passed to :meth:`set_param` as
            "do not set". When disabled only ``None`` is skipped.
        accumulate_output: Keep appending rendered output to the same buffer
            across :meth:`build` calls instead of starting afresh each time.
        emitter: Receives ``fragment_appended``, ``param_skipped`` and
            ``page_built`` events, and an error for every template that fails
            to load or render before the failure propagates.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        *,
        auto_initialize: bool = True,
        skip_falsy: bool = True,
        accumulate_output: bool = False,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.renderer = renderer
        self.auto_initialize = auto_initialize
        self.skip_falsy = skip_falsy
        self.accumulate_output = accumulate_output
        self.emitter = ensure_emitter(emitter)
        self.options = PageOptions()
        self.initialized = False
        self._fragments: list[FragmentHandle] = []
        self._template_ids: list[str] = []
        self._buffer: list[str] = []

    @classmethod
    def from_options(
        cls,
        renderer: TemplateRenderer,
        options: PageOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> PageBuilder:
        """Create a builder and initialise it in one step."""
        builder = cls(renderer, **kwargs)
        builder.initialize(options)
        return builder

    @property
    def header(self) -> str | None:
        return self.options.header

    @property
    def footer(self) -> str | None:
        return self.options.footer

    @property
    def fragments(self) -> tuple[FragmentHandle, ...]:
        """Appended fragment handles in output order."""
        return tuple(self._fragments)

    @property
    def current(self) -> FragmentHandle | None:
        """The fragment that receives parameters, if any was appended."""
        return self._fragments[-1] if self._fragments else None

    def __len__(self) -> int:
        return len(self._fragments)

    def initialize(self, options: PageOptions | Mapping[str, Any] | None = None) -> None:
        """Reset the page and record optional header and footer templates."""
        self.options = PageOptions.coerce(options)
        self._fragments = []
        self._template_ids = []
        self._buffer = []
        self.initialized = True

    def append_fragment(
        self,
        template_id: str,
        render_options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FragmentHandle:
        """Load ``template_id`` and make it the current fragment.

        ``render_options`` and any keyword arguments are forwarded to the renderer
        untouched. Load failures from the renderer propagate as raised.
        """
        if not self.initialized:
            if not self.auto_initialize:
                raise NotInitializedError(
                    f"Cannot append '{template_id}': the page builder was never initialised."
                )
            self.initialize()

        options = dict(render_options or {})
        options.update(kwargs)
        try:
            handle = self.renderer.load_template(template_id, **options)
        except PageBuilderError as exc:
            self.emitter.error(f"Could not append fragment '{template_id}': {exc}", exc)
            raise
        self._fragments.append(handle)
        self._template_ids.append(template_id)
        self.emitter.event(
            "fragment_appended", {"template": template_id, "position": len(self._fragments)}
        )
        return handle

    def set_param(self, name: str, value: Any) -> bool:
        """Set one parameter on the current fragment.

        Returns ``False`` without touching the fragment when ``value`` is skipped:
        any falsy value by default (``""`` and ``0`` included), or only ``None``
        when the builder was created with ``skip_falsy=False``.
        """
        handle = self._require_current("set_param")
        skipped = not value if self.skip_falsy else value is None
        if skipped:
            self.emitter.event(
                "param_skipped",
                {"template": self._template_ids[-1], "name": name, "value": value},
            )
            return False
        handle.set_param(name, value)
        return True

    def set_params(self, mapping: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set every pair of ``mapping`` and ``kwargs`` on the current fragment."""
        handle = self._require_current("set_params")
        values = dict(mapping or {})
        values.update(kwargs)
        for name, value in values.items():
            handle.set_param(name, value)

    def build(self) -> str:
        """Render header, fragments and footer, and return them concatenated."""
        if not self.accumulate_output:
            self._buffer = []

        parts: list[str] = []
        try:
            if self.options.header:
                parts.append(self.renderer.load_template(self.options.header).render())
            parts.extend(handle.render() for handle in self._fragments)
            if self.options.footer:
                parts.append(self.renderer.load_template(self.options.footer).render())
        except PageBuilderError as exc:
            self.emitter.error(f"Page build failed: {exc}", exc)
            raise

        self._buffer.extend(parts)
        logger.debug("Rendered %d fragment(s) into page", len(self._fragments))
        self.emitter.event(
            "page_built",
            {
                "fragments": len(self._fragments),
                "header": self.options.header,
                "footer": self.options.footer,
            },
        )
        return "".join(self._buffer)

    def _require_current(self, operation: str) -> FragmentHandle:
        handle = self.current
        if handle is None:
            raise NoCurrentFragmentError(
                f"{operation}() needs a fragment; call append_fragment() first."
            )
        return handle

    def __repr__(self) -> str:
        return (
            f"PageBuilder(fragments={self._template_ids!r}, "
            f"header={self.options.header!r}, footer={self.options.footer!r})"
        )


__all__ = ["PageBuilder"]
