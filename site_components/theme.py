"""Generate the per-site theme stylesheet of CSS custom properties.

The stylesheet has two rule blocks, ``.theme-dark`` and ``.theme-light``.
Each declaration reads one attribute from a theme configuration object and
falls back to a built-in default when the configuration is missing, the
attribute is unset or empty, or reading it raises. The custom property names
and defaults are consumed by the component stylesheets and must stay stable.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import (
    THEME_CACHE_CONTROL,
    THEME_CONTENT_TYPE,
    THEME_EXTENSION,
    THEME_RESOURCE_TYPES,
    THEME_SELECTOR,
    THEME_STYLESHEET_SUFFIX,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)

QUOTE_CARD_GLOW = (
    "radial-gradient(closest-side at 82% 28%, rgba(246, 255, 0, 0.34), transparent 60%), "
    "radial-gradient(closest-side at 92% 10%, rgba(255, 196, 0, 0.22), transparent 58%)"
)


@dc.dataclass(slots=True, frozen=True)
class ThemeVariable:
    """One ``--name: value;`` declaration sourced from a config attribute."""

    name: str
    accessor: str
    default: str
    empty_fallback: str | None = None


@dc.dataclass(slots=True, frozen=True)
class LiteralDeclaration:
    """A declaration whose value never comes from configuration."""

    name: str
    value: str


Declaration = ThemeVariable | LiteralDeclaration


@dc.dataclass(slots=True, frozen=True)
class ThemeSection:
    """Commented group of declarations inside a theme block."""

    comment: str
    declarations: tuple[Declaration, ...]


@dc.dataclass(slots=True, frozen=True)
class ThemeBlock:
    """A full rule block such as ``.theme-dark { ... }``."""

    selector: str
    sections: tuple[ThemeSection, ...]


DARK_THEME = ThemeBlock(
    selector=".theme-dark",
    sections=(
        ThemeSection(
            "Header theme variables",
            (
                ThemeVariable("header-background-color", "dark_header_background_color", "#212020"),
                ThemeVariable("header-height", "header_height", "60px"),
            ),
        ),
        ThemeSection(
            "Text color variables - Dark theme",
            (
                ThemeVariable("primary-text-color", "dark_primary_text_color", "#ffc846"),
                ThemeVariable("secondary-text-color", "dark_secondary_text_color", "#ffedc2"),
                ThemeVariable(
                    "standard-primary-site-text-color",
                    "dark_standard_primary_site_text_color",
                    "#ffffff",
                ),
                ThemeVariable(
                    "standard-secondary-site-text-color",
                    "dark_standard_secondary_site_text_color",
                    "#a2a2a2",
                ),
                ThemeVariable("standard-site-font-size", "standard_site_font_size", "16px"),
                ThemeVariable("standard-site-font-weight", "standard_site_font_weight", "400"),
            ),
        ),
        ThemeSection(
            "Global page",
            (
                ThemeVariable("site-body-bg", "dark_site_body_bg", "#1e1e1e"),
                LiteralDeclaration("site-body-text", "var(--standard-primary-site-text-color)"),
            ),
        ),
        ThemeSection(
            "Footer",
            (
                ThemeVariable("footer-bg", "dark_footer_bg", "#363535"),
                ThemeVariable(
                    "footer-curtain-height-offset", "footer_curtain_height_offset", "-25px"
                ),
            ),
        ),
        ThemeSection(
            "Services",
            (
                ThemeVariable(
                    "services-divider-color",
                    "dark_services_divider_color",
                    "rgba(255, 255, 255, 0.12)",
                ),
            ),
        ),
        ThemeSection(
            "Button theme variables - Dark theme",
            (
                ThemeVariable("button-theme-dark-bg", "dark_button_bg", "transparent"),
                ThemeVariable("button-theme-dark-text", "dark_button_text", "#ffffff"),
                ThemeVariable("button-theme-dark-border", "dark_button_border", "#ffffff"),
                ThemeVariable("button-theme-dark-hover-bg", "dark_button_hover_bg", "#ffffff"),
                ThemeVariable("button-theme-dark-hover-text", "dark_button_hover_text", "#000000"),
            ),
        ),
        ThemeSection(
            "AboutUs",
            (ThemeVariable("about-us-bg", "dark_about_us_bg", "#1e1e1e"),),
        ),
        ThemeSection(
            "Lead Banner gradient variables - Dark theme",
            (
                ThemeVariable("lead-banner-height", "lead_banner_height", "600px"),
                ThemeVariable("lead-banner-height-mobile", "lead_banner_height_mobile", "460px"),
                ThemeVariable(
                    "lead-banner-gradient-start", "dark_lead_banner_gradient_start", "#212020"
                ),
                ThemeVariable(
                    "lead-banner-gradient-stop-25", "dark_lead_banner_gradient_stop_25", "#aa7802"
                ),
                ThemeVariable(
                    "lead-banner-gradient-stop-50", "dark_lead_banner_gradient_stop_50", "#e3a002"
                ),
                ThemeVariable(
                    "lead-banner-gradient-stop-75", "dark_lead_banner_gradient_stop_75", "#aa7802"
                ),
                ThemeVariable(
                    "lead-banner-gradient-end", "dark_lead_banner_gradient_end", "#212020"
                ),
                ThemeVariable(
                    "lead-banner-text-primary", "dark_lead_banner_text_primary", "#ffffff"
                ),
                ThemeVariable(
                    "lead-banner-text-secondary", "dark_lead_banner_text_secondary", "#242424"
                ),
                ThemeVariable(
                    "lead-banner-secondary-text-color",
                    "dark_lead_banner_secondary_text_color",
                    "#fffffa",
                ),
                ThemeVariable(
                    "lead-banner-char-fade-duration", "lead_banner_char_fade_duration", "0.3s"
                ),
            ),
        ),
        ThemeSection(
            "Article tiles (Header overlay)",
            (
                ThemeVariable(
                    "article-tile-overlay-bg", "dark_article_tile_overlay_bg", "rgba(0, 0, 0, 0.8)"
                ),
            ),
        ),
        ThemeSection(
            "Header overlay",
            (
                ThemeVariable(
                    "header-overlay-column-divider-color",
                    "dark_header_overlay_column_divider_color",
                    "rgba(255, 255, 255, 0.12)",
                ),
                ThemeVariable(
                    "header-overlay-hover-bg",
                    "dark_header_overlay_hover_bg",
                    "rgba(255, 255, 255, 0.10)",
                ),
            ),
        ),
        ThemeSection(
            "Site banner",
            (
                ThemeVariable("site-banner-bg", "dark_site_banner_bg", "#363535"),
                LiteralDeclaration("site-banner-text-color", "var(--primary-text-color)"),
                ThemeVariable(
                    "site-banner-marquee-duration", "dark_site_banner_marquee_duration", "5s"
                ),
                ThemeVariable(
                    "site-banner-cycle-duration", "dark_site_banner_cycle_duration", "10s"
                ),
                ThemeVariable("site-banner-font-size", "site_banner_font_size", "20px"),
            ),
        ),
        ThemeSection(
            "Quote",
            (
                ThemeVariable("quote-bg", "dark_quote_bg", "#363535"),
                ThemeVariable("quote-card-glow", "quote_card_glow", QUOTE_CARD_GLOW),
            ),
        ),
        ThemeSection(
            "LoopingCircleGallery overlay",
            (
                ThemeVariable(
                    "looping-circle-gallery-overlay-bg",
                    "dark_looping_circle_gallery_overlay_bg",
                    "rgba(255, 255, 255, 0.5)",
                ),
                ThemeVariable(
                    "looping-circle-gallery-overlay-text",
                    "dark_looping_circle_gallery_overlay_text",
                    "#000000",
                ),
            ),
        ),
    ),
)

LIGHT_THEME = ThemeBlock(
    selector=".theme-light",
    sections=(
        ThemeSection(
            "Header theme variables",
            (
                ThemeVariable("header-background-color", "light_header_background_color", "#fdfeff"),
                ThemeVariable("header-height", "header_height", "60px"),
            ),
        ),
        ThemeSection(
            "Text color variables - Light theme",
            (
                ThemeVariable("primary-text-color", "light_primary_text_color", "#000000"),
                ThemeVariable("secondary-text-color", "light_secondary_text_color", "#4b5563"),
                ThemeVariable(
                    "standard-primary-site-text-color",
                    "light_standard_primary_site_text_color",
                    "#111827",
                ),
                ThemeVariable(
                    "standard-secondary-site-text-color",
                    "light_standard_secondary_site_text_color",
                    "#4b5563",
                ),
                ThemeVariable("standard-site-font-size", "standard_site_font_size", "16px"),
                ThemeVariable("standard-site-font-weight", "standard_site_font_weight", "400"),
            ),
        ),
        ThemeSection(
            "Global page",
            (
                ThemeVariable("site-body-bg", "light_site_body_bg", "#ffffff"),
                LiteralDeclaration("site-body-text", "var(--standard-primary-site-text-color)"),
            ),
        ),
        ThemeSection(
            "Footer",
            (
                ThemeVariable("footer-bg", "light_footer_bg", "#f5f5f5"),
                ThemeVariable(
                    "footer-curtain-height-offset", "footer_curtain_height_offset", "-25px"
                ),
            ),
        ),
        ThemeSection(
            "Services",
            (
                ThemeVariable(
                    "services-divider-color", "light_services_divider_color", "rgba(0, 0, 0, 0.12)"
                ),
            ),
        ),
        ThemeSection(
            "Button theme variables - Light theme",
            (
                ThemeVariable("button-theme-light-bg", "light_button_bg", "transparent"),
                ThemeVariable("button-theme-light-text", "light_button_text", "#000000"),
                ThemeVariable("button-theme-light-border", "light_button_border", "#000000"),
                ThemeVariable("button-theme-light-hover-bg", "light_button_hover_bg", "#000000"),
                ThemeVariable(
                    "button-theme-light-hover-text", "light_button_hover_text", "#ffffff"
                ),
            ),
        ),
        ThemeSection(
            "AboutUs",
            (ThemeVariable("about-us-bg", "light_about_us_bg", "transparent"),),
        ),
        ThemeSection(
            "Lead Banner gradient variables - Light theme",
            (
                ThemeVariable("lead-banner-height", "lead_banner_height", "600px"),
                ThemeVariable("lead-banner-height-mobile", "lead_banner_height_mobile", "460px"),
                ThemeVariable(
                    "lead-banner-gradient-start", "light_lead_banner_gradient_start", "#ffffff"
                ),
                ThemeVariable(
                    "lead-banner-gradient-stop-25", "light_lead_banner_gradient_stop_25", "#b4e1f6"
                ),
                ThemeVariable(
                    "lead-banner-gradient-stop-50", "light_lead_banner_gradient_stop_50", "#42c2fd"
                ),
                ThemeVariable(
                    "lead-banner-gradient-stop-75", "light_lead_banner_gradient_stop_75", "#b4e1f6"
                ),
                ThemeVariable(
                    "lead-banner-gradient-end", "light_lead_banner_gradient_end", "#ffffff"
                ),
                ThemeVariable(
                    "lead-banner-text-primary", "light_lead_banner_text_primary", "#323232"
                ),
                ThemeVariable(
                    "lead-banner-text-secondary", "light_lead_banner_text_secondary", "#6e6e6e"
                ),
                ThemeVariable(
                    "lead-banner-secondary-text-color",
                    "light_lead_banner_secondary_text_color",
                    "#323232",
                ),
                ThemeVariable(
                    "lead-banner-char-fade-duration", "lead_banner_char_fade_duration", "0.3s"
                ),
            ),
        ),
        ThemeSection(
            "Article tiles (Header overlay)",
            (
                ThemeVariable(
                    "article-tile-overlay-bg", "light_article_tile_overlay_bg", "#77d0fac7"
                ),
            ),
        ),
        ThemeSection(
            "Header overlay",
            (
                ThemeVariable(
                    "header-overlay-column-divider-color",
                    "light_header_overlay_column_divider_color",
                    "rgba(0, 0, 0, 0.18)",
                ),
                ThemeVariable(
                    "header-overlay-hover-bg",
                    "light_header_overlay_hover_bg",
                    "rgba(0, 0, 0, 0.08)",
                ),
            ),
        ),
        ThemeSection(
            "Site banner",
            (
                ThemeVariable("site-banner-bg", "light_site_banner_bg", "#9adcfa"),
                LiteralDeclaration("site-banner-text-color", "var(--primary-text-color)"),
                ThemeVariable(
                    "site-banner-marquee-duration", "light_site_banner_marquee_duration", "10s"
                ),
                ThemeVariable(
                    "site-banner-cycle-duration", "light_site_banner_cycle_duration", "20s"
                ),
                ThemeVariable("site-banner-font-size", "site_banner_font_size", "20px"),
            ),
        ),
        ThemeSection(
            "Quote",
            (
                ThemeVariable(
                    "quote-bg", "light_quote_bg", "", empty_fallback="var(--site-body-bg)"
                ),
                ThemeVariable("quote-card-glow", "quote_card_glow", QUOTE_CARD_GLOW),
            ),
        ),
        ThemeSection(
            "LoopingCircleGallery overlay",
            (
                ThemeVariable(
                    "looping-circle-gallery-overlay-bg",
                    "light_looping_circle_gallery_overlay_bg",
                    "rgba(0, 0, 0, 0.5)",
                ),
                ThemeVariable(
                    "looping-circle-gallery-overlay-text",
                    "light_looping_circle_gallery_overlay_text",
                    "#ffffff",
                ),
            ),
        ),
    ),
)

THEME_BLOCKS: tuple[ThemeBlock, ...] = (DARK_THEME, LIGHT_THEME)


def theme_variables() -> cabc.Iterator[ThemeVariable]:
    """Yield every configurable declaration across both theme blocks."""
    for block in THEME_BLOCKS:
        for section in block.sections:
            for declaration in section.declarations:
                if isinstance(declaration, ThemeVariable):
                    yield declaration


def _value_or_default(config: object | None, accessor: str, default: str) -> str:
    """Return the configured value for ``accessor`` or ``default``."""
    if config is None:
        return default
    try:
        value = getattr(config, accessor)
    except Exception:  # noqa: BLE001
        logger.debug("Error reading theme variable %r, using default", accessor, exc_info=True)
        return default
    if value is None:
        return default
    text = str(value)
    return text or default


def _declaration_value(declaration: Declaration, config: object | None) -> str:
    """Return the rendered value of a single declaration."""
    match declaration:
        case LiteralDeclaration(value=value):
            return value
        case ThemeVariable(accessor=accessor, default=default, empty_fallback=fallback):
            value = _value_or_default(config, accessor, default)
            if not value and fallback is not None:
                return fallback
            return value


def _render_block(block: ThemeBlock, config: object | None) -> list[str]:
    """Render one rule block as a list of lines."""
    lines = [f"{block.selector} {{"]
    for index, section in enumerate(block.sections):
        if index:
            lines.append("")
        lines.append(f"  /* {section.comment} */")
        lines.extend(
            f"  --{declaration.name}: {_declaration_value(declaration, config)};"
            for declaration in section.declarations
        )
    lines.append("}")
    return lines


def render_theme_css(config: object | None) -> str:
    """Render the dark and light theme blocks for ``config``.

    Parameters
    ----------
    config : object or None
        Any object exposing theme attributes (usually a
        :class:`~site_components.config.ThemeConfig`). ``None`` renders every
        default.

    Returns
    -------
    str
        CSS text with a ``.theme-dark`` block, a blank line and a
        ``.theme-light`` block, terminated by a newline.
    """
    lines: list[str] = []
    for index, block in enumerate(THEME_BLOCKS):
        if index:
            lines.append("")
        lines.extend(_render_block(block, config))
    return "\n".join(lines) + "\n"


@dc.dataclass(slots=True, frozen=True)
class ThemeStylesheetResponse:
    """Body and headers served for a theme stylesheet request."""

    body: str
    headers: dict[str, str]

    @property
    def content_type(self) -> str:
        """Return the ``Content-Type`` header value."""
        return self.headers["Content-Type"]


def build_theme_response(config: object | None) -> ThemeStylesheetResponse:
    """Render ``config`` into a cacheable ``text/css`` response."""
    return ThemeStylesheetResponse(
        body=render_theme_css(config),
        headers={
            "Content-Type": THEME_CONTENT_TYPE,
            "Cache-Control": THEME_CACHE_CONTROL,
        },
    )


def matches_theme_request(
    resource_type: str | None,
    selectors: cabc.Sequence[str],
    extension: str | None,
    method: str = "GET",
) -> bool:
    """Return True when a request addresses the theme stylesheet of a page."""
    return (
        method.upper() == "GET"
        and resource_type in THEME_RESOURCE_TYPES
        and THEME_SELECTOR in selectors
        and extension == THEME_EXTENSION
    )


def theme_stylesheet_href(page_path: str) -> str:
    """Return the stylesheet URL for the page at ``page_path``."""
    return THEME_STYLESHEET_SUFFIX.format(path=page_path.rstrip("/"))


class ThemeStylesheetBuilder:
    """Write the theme stylesheet for a page into an output directory."""

    def __init__(self, config: object | None, *, output_dir: Path) -> None:
        self.config = config
        self.output_dir = output_dir

    def run(self, page_path: str) -> Path:
        """Render and write the stylesheet, returning the output path.

        The file lands at ``output_dir`` joined with the stylesheet URL of
        ``page_path``, mirroring the address a browser would request.
        """
        output_path = self.output_dir / theme_stylesheet_href(page_path).lstrip("/")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(render_theme_css(self.config), encoding="utf-8")
        return output_path


__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
    "QUOTE_CARD_GLOW",
    "THEME_BLOCKS",
    "LiteralDeclaration",
    "ThemeBlock",
    "ThemeSection",
    "ThemeStylesheetBuilder",
    "ThemeStylesheetResponse",
    "ThemeVariable",
    "build_theme_response",
    "matches_theme_request",
    "render_theme_css",
    "theme_stylesheet_href",
    "theme_variables",
]
