"""Jinja2 implementation of the template renderer contract."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import logging
import os
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    meta,
    select_autoescape,
)

from pagebuilder.core.config import RenderOptions
from pagebuilder.core.exceptions import (
    RenderError,
    TemplateLoadError,
    UnknownParameterError,
)


logger = logging.getLogger(__name__)

DEFAULT_AUTOESCAPE_EXTENSIONS = ("html", "htm", "xml")


def _build_loader(
    search_paths: str | os.PathLike[str] | Iterable[str | os.PathLike[str]] | None,
    templates: Mapping[str, str] | None,
) -> BaseLoader:
    loaders: list[BaseLoader] = []
    if templates is not None:
        loaders.append(DictLoader(dict(templates)))
    if search_paths is not None:
        if isinstance(search_paths, (str, os.PathLike)):
            search_paths = [search_paths]
        loaders.append(FileSystemLoader([str(Path(path)) for path in search_paths]))
    if not loaders:
        raise ValueError("JinjaRenderer needs search paths, in-memory templates or an environment.")
    return loaders[0] if len(loaders) == 1 else ChoiceLoader(loaders)


def _build_environment(
    loader: BaseLoader, autoescape: bool | Callable[[str | None], bool] | None
) -> Environment:
    if autoescape is None:
        autoescape = select_autoescape(DEFAULT_AUTOESCAPE_EXTENSIONS)
    return Environment(
        loader=loader,
        autoescape=autoescape,
        keep_trailing_newline=True,
    )


class JinjaFragment:
    """One loaded Jinja template and the parameters collected for it."""

    def __init__(
        self,
        template_id: str,
        template: Template,
        declared_parameters: frozenset[str],
        options: RenderOptions,
    ) -> None:
        self.template_id = template_id
        self.template = template
        self.declared_parameters = declared_parameters
        self.options = options
        self.params: dict[str, Any] = {}

    def set_param(self, name: str, value: Any) -> None:
        if self.options.die_on_bad_params and name not in self.declared_parameters:
            raise UnknownParameterError(self.template_id, name)
        self.params[name] = value

    def render(self) -> str:
        try:
            return self.template.render(self.params)
        except TemplateError as exc:
            raise RenderError(f"Failed to render template '{self.template_id}': {exc}") from exc

    def __repr__(self) -> str:
        return f"JinjaFragment({self.template_id!r}, params={sorted(self.params)!r})"


class JinjaRenderer:
    """Load page fragments from a Jinja environment.

    The renderer is safe to share between requests. It caches the parameter
    names each template references, and drops a cached entry as soon as the
    loader reports one of the sources behind it as changed.
    """

    def __init__(
        self,
        search_paths: str | os.PathLike[str] | Iterable[str | os.PathLike[str]] | None = None,
        *,
        templates: Mapping[str, str] | None = None,
        environment: Environment | None = None,
        autoescape: bool | Callable[[str | None], bool] | None = None,
    ) -> None:
        if environment is None:
            environment = _build_environment(_build_loader(search_paths, templates), autoescape)
        self.environment = environment
        self._strict_environment: Environment | None = None
        self._declared: dict[str, tuple[frozenset[str], tuple[Callable[[], bool], ...]]] = {}

    @property
    def strict_environment(self) -> Environment:
        """Overlay of the environment that raises on undefined parameters."""
        if self._strict_environment is None:
            # A private cache keeps strict templates from leaking into the lenient one.
            self._strict_environment = self.environment.overlay(
                undefined=StrictUndefined, cache_size=50
            )
        return self._strict_environment

    def load_template(self, template_id: str, **options: Any) -> JinjaFragment:
        render_options = RenderOptions.coerce(options)
        environment = self.strict_environment if render_options.strict else self.environment
        template = self._get_template(environment, template_id)
        declared = self.declared_parameters(template_id)
        logger.debug("Loaded template '%s' (%d declared parameters)", template_id, len(declared))
        return JinjaFragment(template_id, template, declared, render_options)

    def declared_parameters(self, template_id: str) -> frozenset[str]:
        """Return the parameter names ``template_id`` and the templates it pulls in use."""
        cached = self._declared.get(template_id)
        if cached is not None:
            declared, checks = cached
            if all(check() for check in checks):
                return declared
            logger.debug("Template '%s' changed on disk, re-reading parameters", template_id)

        names: set[str] = set()
        checks_found: list[Callable[[], bool]] = []
        pending = [template_id]
        visited: set[str] = set()
        while pending:
            current = pending.pop()
            if current in visited:
                continue
            visited.add(current)
            ast, uptodate = self._parse(current, requested=template_id)
            if uptodate is not None:
                checks_found.append(uptodate)
            names.update(meta.find_undeclared_variables(ast))
            pending.extend(
                name for name in meta.find_referenced_templates(ast) if isinstance(name, str)
            )

        declared = frozenset(names)
        self._declared[template_id] = (declared, tuple(checks_found))
        return declared

    def _get_template(self, environment: Environment, template_id: str) -> Template:
        try:
            return environment.get_template(template_id)
        except TemplateNotFound as exc:
            raise TemplateLoadError(
                template_id, f"Template '{template_id}' was not found."
            ) from exc
        except TemplateSyntaxError as exc:
            raise TemplateLoadError(
                template_id,
                f"Template '{template_id}' is invalid: {exc.message} (line {exc.lineno}).",
            ) from exc

    def _parse(
        self, template_id: str, *, requested: str
    ) -> tuple[Any, Callable[[], bool] | None]:
        loader = self.environment.loader
        if loader is None:
            raise TemplateLoadError(requested, "The Jinja environment has no loader.")
        try:
            source, _, uptodate = loader.get_source(self.environment, template_id)
            return self.environment.parse(source), uptodate
        except TemplateNotFound as exc:
            raise TemplateLoadError(
                requested, f"Template '{requested}' references missing template '{template_id}'."
            ) from exc
        except TemplateSyntaxError as exc:
            raise TemplateLoadError(
                requested,
                f"Template '{template_id}' is invalid: {exc.message} (line {exc.lineno}).",
            ) from exc


__all__ = ["DEFAULT_AUTOESCAPE_EXTENSIONS", "JinjaFragment", "JinjaRenderer"]
