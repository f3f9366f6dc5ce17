"""FastAPI integration: one page builder per request, HTML responses out.

Usage in routes::

    renderer = JinjaRenderer(["app/templates"])
    get_page = page_builder_dependency(renderer, header="header.html", footer="footer.html")

    @app.get("/views")
    def views(page: PageBuilder = Depends(get_page)):
        page.append_fragment("view_start.html")
        for row in rows:
            page.append_fragment("view_element.html")
            page.set_params(name=row.name, info=row.info)
        return page_response(page)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from pagebuilder.core.builder import PageBuilder
from pagebuilder.core.exceptions import PageBuilderError, exception_messages
from pagebuilder.core.templates.base import TemplateRenderer


logger = logging.getLogger(__name__)


def page_builder_dependency(
    renderer: TemplateRenderer,
    *,
    header: str | None = None,
    footer: str | None = None,
    **builder_kwargs: Any,
) -> Callable[[], PageBuilder]:
    """Return a dependency that hands every request its own initialised builder."""

    def get_page_builder() -> PageBuilder:
        return PageBuilder.from_options(
            renderer, {"header": header, "footer": footer}, **builder_kwargs
        )

    return get_page_builder


def page_response(
    builder: PageBuilder,
    *,
    status_code: int = status.HTTP_200_OK,
    headers: Mapping[str, str] | None = None,
) -> HTMLResponse:
    """Build the page and wrap it in an HTML response."""
    return HTMLResponse(content=builder.build(), status_code=status_code, headers=headers)


async def _page_builder_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    chain = " <- ".join(exception_messages(exc)) or type(exc).__name__
    logger.error("Page build failed for %s %s: %s", request.method, request.url.path, chain)
    # Template names and parameters stay out of the response body.
    return PlainTextResponse(
        "Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def install_error_handlers(app: FastAPI) -> None:
    """Log page assembly failures and answer them with a plain 500."""
    app.add_exception_handler(PageBuilderError, _page_builder_error_handler)


__all__ = ["install_error_handlers", "page_builder_dependency", "page_response"]
