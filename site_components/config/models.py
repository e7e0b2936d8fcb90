"""Typed dataclasses describing site component configuration structures."""

from __future__ import annotations

import dataclasses as dc
import posixpath
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class RewriterConfig:
    """Raw URL rewriter settings as supplied by the configuration file.

    ``urls_to_be_rewritten`` holds one JSON object per entry, for example
    ``{"internalUrl": "/content/dam/", "externalUrl": "/static/assets/"}``.
    ``urls_to_be_skipped`` holds plain path prefixes.
    """

    urls_to_be_rewritten: list[str] = dc.field(default_factory=list)
    urls_to_be_skipped: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True, frozen=True)
class ThemeConfig:
    """Per-site theme variable overrides.

    Every field is optional; ``None`` (or an empty string) means the theme
    renderer falls back to its built-in default for that variable.
    """

    # Header
    dark_header_background_color: str | None = None
    light_header_background_color: str | None = None
    header_height: str | None = None
    # Text colours
    dark_primary_text_color: str | None = None
    light_primary_text_color: str | None = None
    dark_secondary_text_color: str | None = None
    light_secondary_text_color: str | None = None
    dark_standard_primary_site_text_color: str | None = None
    light_standard_primary_site_text_color: str | None = None
    dark_standard_secondary_site_text_color: str | None = None
    light_standard_secondary_site_text_color: str | None = None
    standard_site_font_size: str | None = None
    standard_site_font_weight: str | None = None
    # Global page
    dark_site_body_bg: str | None = None
    light_site_body_bg: str | None = None
    # Footer
    dark_footer_bg: str | None = None
    light_footer_bg: str | None = None
    footer_curtain_height_offset: str | None = None
    # Services
    dark_services_divider_color: str | None = None
    light_services_divider_color: str | None = None
    # Buttons
    dark_button_bg: str | None = None
    dark_button_text: str | None = None
    dark_button_border: str | None = None
    dark_button_hover_bg: str | None = None
    dark_button_hover_text: str | None = None
    light_button_bg: str | None = None
    light_button_text: str | None = None
    light_button_border: str | None = None
    light_button_hover_bg: str | None = None
    light_button_hover_text: str | None = None
    # About us
    dark_about_us_bg: str | None = None
    light_about_us_bg: str | None = None
    # Lead banner
    lead_banner_height: str | None = None
    lead_banner_height_mobile: str | None = None
    dark_lead_banner_gradient_start: str | None = None
    light_lead_banner_gradient_start: str | None = None
    dark_lead_banner_gradient_stop_25: str | None = None
    light_lead_banner_gradient_stop_25: str | None = None
    dark_lead_banner_gradient_stop_50: str | None = None
    light_lead_banner_gradient_stop_50: str | None = None
    dark_lead_banner_gradient_stop_75: str | None = None
    light_lead_banner_gradient_stop_75: str | None = None
    dark_lead_banner_gradient_end: str | None = None
    light_lead_banner_gradient_end: str | None = None
    dark_lead_banner_text_primary: str | None = None
    light_lead_banner_text_primary: str | None = None
    dark_lead_banner_text_secondary: str | None = None
    light_lead_banner_text_secondary: str | None = None
    dark_lead_banner_secondary_text_color: str | None = None
    light_lead_banner_secondary_text_color: str | None = None
    lead_banner_char_fade_duration: str | None = None
    # Article tiles
    dark_article_tile_overlay_bg: str | None = None
    light_article_tile_overlay_bg: str | None = None
    # Header overlay
    dark_header_overlay_column_divider_color: str | None = None
    light_header_overlay_column_divider_color: str | None = None
    dark_header_overlay_hover_bg: str | None = None
    light_header_overlay_hover_bg: str | None = None
    # Site banner
    dark_site_banner_bg: str | None = None
    light_site_banner_bg: str | None = None
    dark_site_banner_marquee_duration: str | None = None
    light_site_banner_marquee_duration: str | None = None
    dark_site_banner_cycle_duration: str | None = None
    light_site_banner_cycle_duration: str | None = None
    site_banner_font_size: str | None = None
    # Quote
    dark_quote_bg: str | None = None
    light_quote_bg: str | None = None
    quote_card_glow: str | None = None
    # Looping circle gallery
    dark_looping_circle_gallery_overlay_bg: str | None = None
    light_looping_circle_gallery_overlay_bg: str | None = None
    dark_looping_circle_gallery_overlay_text: str | None = None
    light_looping_circle_gallery_overlay_text: str | None = None


THEME_FIELDS: frozenset[str] = frozenset(
    field.name for field in dc.fields(ThemeConfig)
)


@dc.dataclass(slots=True)
class SiteConfig:
    """Rewriter settings and theme configuration contexts for one site."""

    rewriter: RewriterConfig = dc.field(default_factory=RewriterConfig)
    theme: ThemeConfig | None = None
    theme_contexts: dict[str, ThemeConfig] = dc.field(default_factory=dict)
    output_dir: Path = Path("public")

    def theme_for(self, resource_path: str | None) -> ThemeConfig | None:
        """Return the theme configuration that applies to ``resource_path``.

        The nearest configured context wins: a context key matches when it is
        the resource path itself or one of its ancestors. Without a matching
        context the site-wide theme is returned, which may be ``None``.
        """
        if resource_path:
            normalized = posixpath.normpath(resource_path)
            best: str | None = None
            for context in self.theme_contexts:
                if _is_within(normalized, context) and (
                    best is None or len(context) > len(best)
                ):
                    best = context
            if best is not None:
                return self.theme_contexts[best]
        return self.theme


def _is_within(path: str, context: str) -> bool:
    """Return True when ``context`` equals ``path`` or is one of its ancestors."""
    if context == "/":
        return path.startswith("/")
    return path == context or path.startswith(f"{context}/")


__all__ = [
    "THEME_FIELDS",
    "RewriterConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
]
