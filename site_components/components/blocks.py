"""Adapters for the page-body content components."""

from __future__ import annotations

from ..content import ContentNode, is_blank
from .models import (
    ComparisonColumn,
    ComparisonModel,
    GalleryImage,
    LoopingCircleGalleryModel,
    QuoteModel,
    ServiceItem,
    ServicesModel,
    TextModel,
    TwoToneTextTeaserModel,
    VideoModel,
)

SERVICE_ITEMS_NODE = "serviceItems"
GALLERY_IMAGES_NODE = "galleryImages"
COMPARISON_COLUMN_COUNT = 3


def parse_quote(node: ContentNode | None) -> QuoteModel:
    """Build the quote view model."""
    if node is None:
        return QuoteModel()
    return QuoteModel(
        title=node.get_str("quoteTitle"),
        primary_text=node.get_str("quotePrimaryText"),
        muted_text=node.get_str("quoteMutedText"),
        avatar=node.get_str("quoteAvatar"),
        author_name=node.get_str("authorName"),
        author_organisation=node.get_str("authorOrganisation"),
    )


def parse_services(node: ContentNode | None) -> ServicesModel:
    """Build the services grid; tiles without a headline are dropped."""
    if node is None:
        return ServicesModel()
    items: list[ServiceItem] = []
    for entry in node.iter_child_items(SERVICE_ITEMS_NODE):
        headline = entry.get_str("serviceHeadline")
        if is_blank(headline):
            continue
        items.append(
            ServiceItem(
                headline=str(headline),
                icon=entry.get_str("serviceIcon"),
                description=entry.get_str("serviceDescription"),
            )
        )
    return ServicesModel(title=node.get_str("servicesTitle"), items=tuple(items))


def parse_comparison(node: ContentNode | None) -> ComparisonModel:
    """Build the three-column comparison.

    Column ``n`` reads ``column<n>HeadingNum``, ``column<n>Title`` and
    ``column<n>Description`` plus the ``itemText`` of each child of
    ``column<n>Items``. All three columns are always present.
    """
    if node is None:
        return ComparisonModel()
    columns = tuple(
        _build_comparison_column(node, number)
        for number in range(1, COMPARISON_COLUMN_COUNT + 1)
    )
    return ComparisonModel(title=node.get_str("title"), columns=columns)


def _build_comparison_column(node: ContentNode, number: int) -> ComparisonColumn:
    prefix = f"column{number}"
    items = tuple(
        str(text)
        for entry in node.iter_child_items(f"{prefix}Items")
        if not is_blank(text := entry.get_str("itemText"))
    )
    return ComparisonColumn(
        heading_num=node.get_str(f"{prefix}HeadingNum"),
        title=node.get_str(f"{prefix}Title"),
        description=node.get_str(f"{prefix}Description"),
        items=items,
    )


def parse_looping_circle_gallery(
    node: ContentNode | None,
) -> LoopingCircleGalleryModel:
    """Build the gallery; the index counts only images that were kept."""
    if node is None:
        return LoopingCircleGalleryModel()
    images: list[GalleryImage] = []
    for entry in node.iter_child_items(GALLERY_IMAGES_NODE):
        path = entry.get_str("imagePath")
        if is_blank(path):
            continue
        images.append(
            GalleryImage(path=str(path), alt=entry.get_str("imageAlt"), index=len(images))
        )
    return LoopingCircleGalleryModel(
        message=node.get_str("galleryMessage"), images=tuple(images)
    )


def parse_video(node: ContentNode | None) -> VideoModel:
    """Build the video view model.

    Opening in a new tab is opt-in (``"true"``); the play and mute toggles
    are shown unless explicitly set to ``"false"``.
    """
    if node is None:
        return VideoModel()
    return VideoModel(
        path=node.get_str("videoPath"),
        title=node.get_str("videoTitle"),
        description=node.get_str("videoDescription"),
        href=node.get_str("videoHref"),
        open_in_new_tab=node.get_str("openInNewTab") == "true",
        show_play_toggle=node.get_str("showPlayToggle") != "false",
        show_mute_toggle=node.get_str("showMuteToggle") != "false",
    )


def parse_two_tone_text_teaser(node: ContentNode | None) -> TwoToneTextTeaserModel:
    if node is None:
        return TwoToneTextTeaserModel()
    return TwoToneTextTeaserModel(
        primary_text=node.get_str("primaryText"),
        secondary_text=node.get_str("secondaryText"),
        cta_text=node.get_str("ctaText"),
        cta_link=node.get_str("ctaLink"),
        cta_link_external=node.get_bool("ctaLinkExternal"),
    )


def parse_text(node: ContentNode | None) -> TextModel:
    if node is None:
        return TextModel()
    return TextModel(
        text=node.get_str("text"), is_rich_text=node.get_bool("textIsRich")
    )


__all__ = [
    "parse_comparison",
    "parse_looping_circle_gallery",
    "parse_quote",
    "parse_services",
    "parse_text",
    "parse_two_tone_text_teaser",
    "parse_video",
]
