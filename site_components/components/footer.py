"""Footer component adapter."""

from __future__ import annotations

from ..content import ContentNode, is_blank
from .models import FooterMenuItem, FooterModel

MAIN_MENU_ITEMS_NODE = "mainMenuItems"
USEFUL_MENU_ITEMS_NODE = "usefulMenuItems"


def parse_footer(node: ContentNode | None) -> FooterModel:
    """Build the footer view model from its content node."""
    if node is None:
        return FooterModel()
    return FooterModel(
        heading=node.get_str("footerHeading"),
        lead=node.get_str("footerLead"),
        email=node.get_str("footerEmail"),
        main_menu_title=node.get_str("mainMenuTitle"),
        useful_menu_title=node.get_str("usefulMenuTitle"),
        privacy_policy_title=node.get_str("privacyPolicyTitle"),
        privacy_policy_link=node.get_str("privacyPolicyLink"),
        copyright_text=node.get_str("copyrightText"),
        main_menu_items=_build_footer_links(
            node,
            MAIN_MENU_ITEMS_NODE,
            title_key="menuItemTitle",
            link_key="menuItemLink",
            external_key="menuItemExternal",
        ),
        useful_menu_items=_build_footer_links(
            node,
            USEFUL_MENU_ITEMS_NODE,
            title_key="usefulItemTitle",
            link_key="usefulItemLink",
            external_key="usefulItemExternal",
        ),
    )


def _build_footer_links(
    node: ContentNode,
    container: str,
    *,
    title_key: str,
    link_key: str,
    external_key: str,
) -> tuple[FooterMenuItem, ...]:
    """Build one footer link column, skipping untitled entries."""
    links: list[FooterMenuItem] = []
    for entry in node.iter_child_items(container):
        title = entry.get_str(title_key)
        if is_blank(title):
            continue
        links.append(
            FooterMenuItem(
                title=str(title),
                link=entry.get_str(link_key),
                external=entry.get_bool(external_key),
            )
        )
    return tuple(links)


__all__ = ["parse_footer"]
