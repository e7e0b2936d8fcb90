"""Unit tests for the theme-variable stylesheet generator."""

from __future__ import annotations

import typing as typ

import pytest

from site_components.config import THEME_FIELDS, ThemeConfig
from site_components.theme import (
    QUOTE_CARD_GLOW,
    ThemeStylesheetBuilder,
    build_theme_response,
    matches_theme_request,
    render_theme_css,
    theme_stylesheet_href,
    theme_variables,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def _block(css: str, selector: str) -> str:
    """Return the body of the rule block opened by ``selector``."""
    start = css.index(f"{selector} {{")
    end = css.index("}", start)
    return css[start:end]


def test_defaults_render_without_config() -> None:
    css = render_theme_css(None)
    dark = _block(css, ".theme-dark")
    light = _block(css, ".theme-light")
    assert "  --header-background-color: #212020;" in dark
    assert "  --header-background-color: #fdfeff;" in light
    assert "  --header-height: 60px;" in dark
    assert f"  --quote-card-glow: {QUOTE_CARD_GLOW};" in light


def test_layout_has_two_blocks_and_trailing_newline() -> None:
    css = render_theme_css(None)
    assert css.startswith(".theme-dark {\n  /* Header theme variables */\n")
    assert "}\n\n.theme-light {\n" in css
    assert css.endswith("}\n")
    assert css.count("{") == 2


def test_configured_values_override_defaults() -> None:
    config = ThemeConfig(
        dark_header_background_color="#101010", header_height="72px"
    )
    css = render_theme_css(config)
    assert "  --header-background-color: #101010;" in _block(css, ".theme-dark")
    assert "  --header-background-color: #fdfeff;" in _block(css, ".theme-light")
    assert css.count("  --header-height: 72px;") == 2


def test_empty_value_falls_back_to_default() -> None:
    css = render_theme_css(ThemeConfig(dark_header_background_color=""))
    assert "  --header-background-color: #212020;" in _block(css, ".theme-dark")


def test_empty_light_quote_background_uses_body_background() -> None:
    for config in (None, ThemeConfig(light_quote_bg="")):
        light = _block(render_theme_css(config), ".theme-light")
        assert "  --quote-bg: var(--site-body-bg);" in light

    light = _block(render_theme_css(ThemeConfig(light_quote_bg="#eee")), ".theme-light")
    assert "  --quote-bg: #eee;" in light


def test_literal_declarations_are_not_configurable() -> None:
    css = render_theme_css(None)
    assert css.count("  --site-body-text: var(--standard-primary-site-text-color);") == 2


class _ExplodingConfig:
    """Config double whose header colour accessor raises."""

    @property
    def dark_header_background_color(self) -> str:
        msg = "storage unavailable"
        raise RuntimeError(msg)

    def __getattr__(self, name: str) -> str | None:
        return None


def test_failing_accessor_uses_default() -> None:
    css = render_theme_css(_ExplodingConfig())
    assert "  --header-background-color: #212020;" in _block(css, ".theme-dark")


def test_rendering_is_deterministic() -> None:
    config = ThemeConfig(light_site_body_bg="#fafafa")
    assert render_theme_css(config) == render_theme_css(config)


def test_every_variable_reads_a_known_config_field() -> None:
    accessors = {variable.accessor for variable in theme_variables()}
    assert accessors <= THEME_FIELDS
    assert accessors == THEME_FIELDS, "Every config field should feed the stylesheet"


def test_response_headers() -> None:
    response = build_theme_response(None)
    assert response.content_type == "text/css;charset=UTF-8"
    assert response.headers["Cache-Control"] == "public, max-age=3600"
    assert response.body == render_theme_css(None)


@pytest.mark.parametrize(
    ("resource_type", "selectors", "extension", "method", "expected"),
    [
        ("adobexp/components/global/pages/page/v1/page", ["theme-variables"], "css", "GET", True),
        ("cq/experience-fragments/components/xfpage", ["theme-variables"], "css", "get", True),
        ("adobexp/components/global/pages/page/v1/page", ["theme-variables"], "css", "POST", False),
        ("adobexp/components/global/pages/page/v1/page", [], "css", "GET", False),
        ("adobexp/components/global/pages/page/v1/page", ["theme-variables"], "json", "GET", False),
        ("adobexp/components/content/text/v1/text", ["theme-variables"], "css", "GET", False),
        (None, ["theme-variables"], "css", "GET", False),
    ],
)
def test_matches_theme_request(
    resource_type: str | None,
    selectors: list[str],
    extension: str,
    method: str,
    expected: bool,
) -> None:
    assert matches_theme_request(resource_type, selectors, extension, method) is expected


def test_stylesheet_href_appends_selector_and_extension() -> None:
    assert theme_stylesheet_href("/content/site/en/") == (
        "/content/site/en.theme-variables.css"
    )


def test_builder_writes_stylesheet(tmp_path: Path) -> None:
    builder = ThemeStylesheetBuilder(ThemeConfig(header_height="80px"), output_dir=tmp_path)
    path = builder.run("/content/site/en")
    assert path == tmp_path / "content/site/en.theme-variables.css"
    css = path.read_text(encoding="utf-8")
    assert "  --header-height: 80px;" in css
