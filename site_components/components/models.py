"""Typed view models handed to the component templates."""

from __future__ import annotations

import dataclasses as dc
import json

MENU_TYPE_LEAF = "leaf"
MENU_TYPE_CONTAINER = "container"
DEFAULT_SOCIAL_SECTION_TITLE = "Follow us"
DEFAULT_CYCLE_DURATION = 10

_HTML_UNSAFE = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "=": "\\u003d",
        "'": "\\u0027",
    }
)


def _compact_json(values: list[str], *, escape_html: bool) -> str:
    """Serialize ``values`` as compact JSON, optionally escaping HTML characters."""
    text = json.dumps(values, ensure_ascii=False, separators=(",", ":"))
    if escape_html:
        return text.translate(_HTML_UNSAFE)
    return text


# Header ---------------------------------------------------------------------


@dc.dataclass(slots=True, frozen=True)
class Level3MenuItem:
    """Third-level navigation entry."""

    title: str
    description: str | None = None
    link: str | None = None


@dc.dataclass(slots=True, frozen=True)
class SubMenuItem:
    """Second-level navigation entry, optionally holding third-level items."""

    item_type: str | None
    title: str
    description: str | None = None
    link: str | None = None
    level3_items: tuple[Level3MenuItem, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return self.item_type == MENU_TYPE_LEAF

    @property
    def is_container(self) -> bool:
        return self.item_type == MENU_TYPE_CONTAINER


@dc.dataclass(slots=True, frozen=True)
class MenuItem:
    """Top-level navigation entry, optionally holding sub-menu items."""

    item_type: str | None
    title: str
    description: str | None = None
    link: str | None = None
    sub_items: tuple[SubMenuItem, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return self.item_type == MENU_TYPE_LEAF

    @property
    def is_container(self) -> bool:
        return self.item_type == MENU_TYPE_CONTAINER


@dc.dataclass(slots=True, frozen=True)
class MenuOption:
    """Utility link shown beside the main navigation."""

    title: str
    description: str | None = None
    link: str | None = None
    new_tab: bool = False


@dc.dataclass(slots=True, frozen=True)
class ArticleTeaser:
    """Article tile shown in the header overlay."""

    title: str
    description: str | None = None
    link: str | None = None
    image: str | None = None
    image_alt: str | None = None


@dc.dataclass(slots=True, frozen=True)
class HeaderModel:
    """Global header: logos, navigation, social links and article tiles."""

    logo_dark_image: str | None = None
    logo_dark_alt: str | None = None
    logo_light_image: str | None = None
    logo_light_alt: str | None = None
    logo_link: str | None = None
    title: str | None = None
    subtitle: str | None = None
    social_section_title: str = DEFAULT_SOCIAL_SECTION_TITLE
    twitter_link: str | None = None
    facebook_link: str | None = None
    instagram_link: str | None = None
    linkedin_link: str | None = None
    pinterest_link: str | None = None
    youtube_link: str | None = None
    menu_items: tuple[MenuItem, ...] = ()
    menu_options: tuple[MenuOption, ...] = ()
    article_teasers: tuple[ArticleTeaser, ...] = ()

    @property
    def social_links(self) -> dict[str, str]:
        """Return the configured social links keyed by network name."""
        links = {
            "twitter": self.twitter_link,
            "facebook": self.facebook_link,
            "instagram": self.instagram_link,
            "linkedin": self.linkedin_link,
            "pinterest": self.pinterest_link,
            "youtube": self.youtube_link,
        }
        return {name: href for name, href in links.items() if href and href.strip()}

    @property
    def has_social_links(self) -> bool:
        return bool(self.social_links)

    @property
    def has_article_teasers(self) -> bool:
        return bool(self.article_teasers)


# Footer ---------------------------------------------------------------------


@dc.dataclass(slots=True, frozen=True)
class FooterMenuItem:
    """Footer link in either the main or the useful-links column."""

    title: str
    link: str | None = None
    external: bool = False


@dc.dataclass(slots=True, frozen=True)
class FooterModel:
    """Global footer copy and link columns."""

    heading: str | None = None
    lead: str | None = None
    email: str | None = None
    main_menu_title: str | None = None
    useful_menu_title: str | None = None
    privacy_policy_title: str | None = None
    privacy_policy_link: str | None = None
    copyright_text: str | None = None
    main_menu_items: tuple[FooterMenuItem, ...] = ()
    useful_menu_items: tuple[FooterMenuItem, ...] = ()

    @property
    def has_main_menu_items(self) -> bool:
        return bool(self.main_menu_items)

    @property
    def has_useful_menu_items(self) -> bool:
        return bool(self.useful_menu_items)


# Banners --------------------------------------------------------------------


@dc.dataclass(slots=True, frozen=True)
class SecondaryHeadlineItem:
    """Rotating headline with its optional stacked image."""

    text: str
    stack_image: str | None = None
    stack_image_alt: str | None = None


@dc.dataclass(slots=True, frozen=True)
class LeadBannerModel:
    """Hero banner with a fixed headline and rotating secondary headlines."""

    primary_headline: str | None = None
    secondary_text: str | None = None
    secondary_headline_items: tuple[SecondaryHeadlineItem, ...] = ()

    @property
    def has_secondary_headline_items(self) -> bool:
        return bool(self.secondary_headline_items)

    @property
    def secondary_headline_strings_json(self) -> str:
        """Return the rotating headline texts as a JSON array for a data attribute."""
        texts = [
            item.text for item in self.secondary_headline_items if item.text.strip()
        ]
        return _compact_json(texts, escape_html=True)

    @property
    def first_secondary_headline_text(self) -> str:
        if not self.secondary_headline_items:
            return ""
        return self.secondary_headline_items[0].text


@dc.dataclass(slots=True, frozen=True)
class BannerMessage:
    """One message cycled through by the site banner."""

    text: str


@dc.dataclass(slots=True, frozen=True)
class SiteBannerModel:
    """Marquee banner cycling through short messages."""

    messages: tuple[BannerMessage, ...] = ()
    configured_cycle_duration: int = DEFAULT_CYCLE_DURATION

    @property
    def cycle_duration(self) -> int:
        """Return the cycle duration in seconds, ignoring non-positive values."""
        if self.configured_cycle_duration > 0:
            return self.configured_cycle_duration
        return DEFAULT_CYCLE_DURATION

    @property
    def has_messages(self) -> bool:
        return bool(self.messages)

    @property
    def messages_json(self) -> str:
        return _compact_json([message.text for message in self.messages], escape_html=False)


# Content --------------------------------------------------------------------


@dc.dataclass(slots=True, frozen=True)
class QuoteModel:
    """Testimonial quote with author attribution."""

    title: str | None = None
    primary_text: str | None = None
    muted_text: str | None = None
    avatar: str | None = None
    author_name: str | None = None
    author_organisation: str | None = None


@dc.dataclass(slots=True, frozen=True)
class ServiceItem:
    """Single service tile."""

    headline: str
    icon: str | None = None
    description: str | None = None


@dc.dataclass(slots=True, frozen=True)
class ServicesModel:
    """Titled grid of service tiles."""

    title: str | None = None
    items: tuple[ServiceItem, ...] = ()

    @property
    def has_service_items(self) -> bool:
        return bool(self.items)


@dc.dataclass(slots=True, frozen=True)
class ComparisonColumn:
    """One of the three comparison columns."""

    heading_num: str | None = None
    title: str | None = None
    description: str | None = None
    items: tuple[str, ...] = ()

    @property
    def has_content(self) -> bool:
        return bool(self.title and self.title.strip()) or bool(self.items)


@dc.dataclass(slots=True, frozen=True)
class ComparisonModel:
    """Three-column comparison table."""

    title: str | None = None
    columns: tuple[ComparisonColumn, ...] = ()

    @property
    def has_content(self) -> bool:
        return any(column.has_content for column in self.columns)


@dc.dataclass(slots=True, frozen=True)
class GalleryImage:
    """Image in the looping circle gallery with its display position."""

    path: str
    alt: str | None
    index: int


@dc.dataclass(slots=True, frozen=True)
class LoopingCircleGalleryModel:
    """Circular image carousel with an overlay message."""

    message: str | None = None
    images: tuple[GalleryImage, ...] = ()

    @property
    def has_images(self) -> bool:
        return bool(self.images)


@dc.dataclass(slots=True, frozen=True)
class VideoModel:
    """Background video with optional link and playback toggles."""

    path: str | None = None
    title: str | None = None
    description: str | None = None
    href: str | None = None
    open_in_new_tab: bool = False
    show_play_toggle: bool = True
    show_mute_toggle: bool = True


@dc.dataclass(slots=True, frozen=True)
class TwoToneTextTeaserModel:
    """Two-colour headline teaser with a call to action."""

    primary_text: str | None = None
    secondary_text: str | None = None
    cta_text: str | None = None
    cta_link: str | None = None
    cta_link_external: bool = False


@dc.dataclass(slots=True, frozen=True)
class TextModel:
    """Plain or rich text block."""

    text: str | None = None
    is_rich_text: bool = False


__all__ = [
    "DEFAULT_CYCLE_DURATION",
    "DEFAULT_SOCIAL_SECTION_TITLE",
    "MENU_TYPE_CONTAINER",
    "MENU_TYPE_LEAF",
    "ArticleTeaser",
    "BannerMessage",
    "ComparisonColumn",
    "ComparisonModel",
    "FooterMenuItem",
    "FooterModel",
    "GalleryImage",
    "HeaderModel",
    "LeadBannerModel",
    "Level3MenuItem",
    "LoopingCircleGalleryModel",
    "MenuItem",
    "MenuOption",
    "QuoteModel",
    "SecondaryHeadlineItem",
    "ServiceItem",
    "ServicesModel",
    "SiteBannerModel",
    "TextModel",
    "TwoToneTextTeaserModel",
    "VideoModel",
]
