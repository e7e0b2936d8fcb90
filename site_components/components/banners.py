"""Lead banner and site banner adapters."""

from __future__ import annotations

from ..content import ContentNode, is_blank
from .models import (
    DEFAULT_CYCLE_DURATION,
    BannerMessage,
    LeadBannerModel,
    SecondaryHeadlineItem,
    SiteBannerModel,
)

SECONDARY_HEADLINE_ITEMS_NODE = "secondaryHeadlineItems"
BANNER_MESSAGES_NODE = "bannerMessages"


def parse_lead_banner(node: ContentNode | None) -> LeadBannerModel:
    """Build the lead banner view model.

    Secondary headline entries need at least their text; the stacked image
    is optional.
    """
    if node is None:
        return LeadBannerModel()
    items: list[SecondaryHeadlineItem] = []
    for entry in node.iter_child_items(SECONDARY_HEADLINE_ITEMS_NODE):
        text = entry.get_str("secondaryHeadlineText")
        if is_blank(text):
            continue
        items.append(
            SecondaryHeadlineItem(
                text=str(text),
                stack_image=entry.get_str("stackImage"),
                stack_image_alt=entry.get_str("stackImageAlt"),
            )
        )
    return LeadBannerModel(
        primary_headline=node.get_str("primaryHeadline"),
        secondary_text=node.get_str("secondaryText"),
        secondary_headline_items=tuple(items),
    )


def parse_site_banner(node: ContentNode | None) -> SiteBannerModel:
    """Build the site banner view model."""
    if node is None:
        return SiteBannerModel()
    messages = tuple(
        BannerMessage(text=str(text))
        for entry in node.iter_child_items(BANNER_MESSAGES_NODE)
        if not is_blank(text := entry.get_str("messageText"))
    )
    return SiteBannerModel(
        messages=messages,
        configured_cycle_duration=node.get_int(
            "cycleDuration", default=DEFAULT_CYCLE_DURATION
        ),
    )


__all__ = ["parse_lead_banner", "parse_site_banner"]
