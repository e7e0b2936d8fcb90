"""Header component adapter.

The header node carries logo, title and social-link properties plus three
child containers: ``menuItems`` (up to three navigation levels),
``menuOptions`` and ``articleTeasers``. Entries without a title are dropped.
"""

from __future__ import annotations

from ..content import ContentNode, is_blank
from .models import (
    DEFAULT_SOCIAL_SECTION_TITLE,
    MENU_TYPE_CONTAINER,
    ArticleTeaser,
    HeaderModel,
    Level3MenuItem,
    MenuItem,
    MenuOption,
    SubMenuItem,
)

MENU_ITEMS_NODE = "menuItems"
MENU_OPTIONS_NODE = "menuOptions"
SUB_MENU_ITEMS_NODE = "subMenuItems"
LEVEL3_MENU_ITEMS_NODE = "level3MenuItems"
ARTICLE_TEASERS_NODE = "articleTeasers"


def parse_header(node: ContentNode | None) -> HeaderModel:
    """Build the header view model from its content node."""
    if node is None:
        return HeaderModel()
    return HeaderModel(
        logo_dark_image=node.get_str("logoDarkImage"),
        logo_dark_alt=node.get_str("logoDarkAlt"),
        logo_light_image=node.get_str("logoLightImage"),
        logo_light_alt=node.get_str("logoLightAlt"),
        logo_link=node.get_str("logoLink"),
        title=node.get_str("headerTitle"),
        subtitle=node.get_str("headerSubtitle"),
        social_section_title=node.get_str(
            "socialSectionTitle", DEFAULT_SOCIAL_SECTION_TITLE
        )
        or "",
        twitter_link=node.get_str("twitterLink"),
        facebook_link=node.get_str("facebookLink"),
        instagram_link=node.get_str("instagramLink"),
        linkedin_link=node.get_str("linkedinLink"),
        pinterest_link=node.get_str("pinterestLink"),
        youtube_link=node.get_str("youtubeLink"),
        menu_items=_build_menu_items(node),
        menu_options=_build_menu_options(node),
        article_teasers=_build_article_teasers(node),
    )


def _build_menu_items(node: ContentNode) -> tuple[MenuItem, ...]:
    """Build top-level menu items, descending into container entries."""
    items: list[MenuItem] = []
    for entry in node.iter_child_items(MENU_ITEMS_NODE):
        title = entry.get_str("menuTitle")
        if is_blank(title):
            continue
        item_type = entry.get_str("menuItemType")
        sub_items: tuple[SubMenuItem, ...] = ()
        if item_type == MENU_TYPE_CONTAINER:
            sub_items = _build_sub_menu_items(entry)
        items.append(
            MenuItem(
                item_type=item_type,
                title=str(title),
                description=entry.get_str("menuDescription"),
                link=entry.get_str("menuLink"),
                sub_items=sub_items,
            )
        )
    return tuple(items)


def _build_sub_menu_items(node: ContentNode) -> tuple[SubMenuItem, ...]:
    """Build second-level menu items for a container menu entry."""
    items: list[SubMenuItem] = []
    for entry in node.iter_child_items(SUB_MENU_ITEMS_NODE):
        title = entry.get_str("subMenuTitle")
        if is_blank(title):
            continue
        item_type = entry.get_str("subMenuItemType")
        level3_items: tuple[Level3MenuItem, ...] = ()
        if item_type == MENU_TYPE_CONTAINER:
            level3_items = _build_level3_menu_items(entry)
        items.append(
            SubMenuItem(
                item_type=item_type,
                title=str(title),
                description=entry.get_str("subMenuDescription"),
                link=entry.get_str("subMenuLink"),
                level3_items=level3_items,
            )
        )
    return tuple(items)


def _build_level3_menu_items(node: ContentNode) -> tuple[Level3MenuItem, ...]:
    """Build third-level menu items for a container sub-menu entry."""
    items: list[Level3MenuItem] = []
    for entry in node.iter_child_items(LEVEL3_MENU_ITEMS_NODE):
        title = entry.get_str("level3MenuTitle")
        if is_blank(title):
            continue
        items.append(
            Level3MenuItem(
                title=str(title),
                description=entry.get_str("level3MenuDescription"),
                link=entry.get_str("level3MenuLink"),
            )
        )
    return tuple(items)


def _build_menu_options(node: ContentNode) -> tuple[MenuOption, ...]:
    """Build the utility menu options."""
    options: list[MenuOption] = []
    for entry in node.iter_child_items(MENU_OPTIONS_NODE):
        title = entry.get_str("optionTitle")
        if is_blank(title):
            continue
        options.append(
            MenuOption(
                title=str(title),
                description=entry.get_str("optionDescription"),
                link=entry.get_str("optionLink"),
                new_tab=entry.get_bool("optionNewTab"),
            )
        )
    return tuple(options)


def _build_article_teasers(node: ContentNode) -> tuple[ArticleTeaser, ...]:
    """Build the article tiles shown in the header overlay."""
    teasers: list[ArticleTeaser] = []
    for entry in node.iter_child_items(ARTICLE_TEASERS_NODE):
        title = entry.get_str("articleTitle")
        if is_blank(title):
            continue
        teasers.append(
            ArticleTeaser(
                title=str(title),
                description=entry.get_str("articleDescription"),
                link=entry.get_str("articleLink"),
                image=entry.get_str("articleImage"),
                image_alt=entry.get_str("articleImageAlt"),
            )
        )
    return tuple(teasers)


__all__ = ["parse_header"]
