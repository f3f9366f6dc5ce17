from __future__ import annotations

import pytest

from pagebuilder import PageOptions, RenderOptions, RenderOptionsError


def test_page_options_default_to_no_wrapping() -> None:
    options = PageOptions.coerce(None)
    assert options.header is None
    assert options.footer is None


def test_page_options_ignore_unknown_keys() -> None:
    options = PageOptions.coerce({"header": "h.html", "theme": "dark"})
    assert options.header == "h.html"
    assert not hasattr(options, "theme")


def test_page_options_treat_blank_names_as_missing() -> None:
    options = PageOptions.coerce({"header": "  ", "footer": ""})
    assert options.header is None
    assert options.footer is None


def test_page_options_instances_pass_through() -> None:
    options = PageOptions(footer="f.html")
    assert PageOptions.coerce(options) is options


def test_render_options_defaults() -> None:
    options = RenderOptions.coerce({})
    assert options.die_on_bad_params is True
    assert options.strict is False


def test_render_options_forbid_unknown_keys() -> None:
    with pytest.raises(RenderOptionsError, match="loop_context_vars"):
        RenderOptions.coerce({"loop_context_vars": True})
