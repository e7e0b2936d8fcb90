"""Unit tests for the component adapters.

Each test builds a content node from a nested mapping, the same shape a YAML
content export produces, and checks the view model returned by the adapter.
"""

from __future__ import annotations

import json

import pytest

from site_components.components import (
    COMPONENT_PARSERS,
    component_name,
    parse_comparison,
    parse_component,
    parse_footer,
    parse_header,
    parse_lead_banner,
    parse_looping_circle_gallery,
    parse_quote,
    parse_services,
    parse_site_banner,
    parse_text,
    parse_two_tone_text_teaser,
    parse_video,
)
from site_components.components.models import (
    HeaderModel,
    SiteBannerModel,
    TextModel,
)
from site_components.content import node_from_mapping


def test_header_menu_levels_and_flags() -> None:
    node = node_from_mapping(
        "header",
        {
            "logoLink": "/content/site/en",
            "twitterLink": "https://twitter.example/site",
            "youtubeLink": "  ",
            "menuItems": {
                "item0": {"menuTitle": "Home", "menuItemType": "leaf", "menuLink": "/content/site/en"},
                "item1": {
                    "menuTitle": "Work",
                    "menuItemType": "container",
                    "subMenuItems": {
                        "item0": {
                            "subMenuTitle": "Cases",
                            "subMenuItemType": "container",
                            "level3MenuItems": {
                                "item0": {"level3MenuTitle": "Retail", "level3MenuLink": "/r"},
                                "item1": {"level3MenuTitle": ""},
                            },
                        },
                        "item1": {"subMenuTitle": "   "},
                    },
                },
                "item2": {"menuItemType": "leaf"},
                "item3": {
                    "menuTitle": "Leaf with children",
                    "menuItemType": "leaf",
                    "subMenuItems": {"item0": {"subMenuTitle": "Hidden"}},
                },
            },
            "menuOptions": {"item0": {"optionTitle": "Contact", "optionNewTab": "true"}},
            "articleTeasers": {"item0": {"articleTitle": "News", "articleImage": "/img.png"}},
        },
    )
    model = parse_header(node)

    assert [item.title for item in model.menu_items] == ["Home", "Work", "Leaf with children"]
    home, work, leaf = model.menu_items
    assert home.is_leaf
    assert not home.is_container
    assert work.is_container
    assert [sub.title for sub in work.sub_items] == ["Cases"]
    assert [item.title for item in work.sub_items[0].level3_items] == ["Retail"]
    assert leaf.sub_items == ()
    assert model.menu_options[0].new_tab
    assert model.has_article_teasers
    assert model.social_links == {"twitter": "https://twitter.example/site"}
    assert model.has_social_links
    assert model.social_section_title == "Follow us"


def test_missing_header_node_yields_empty_model() -> None:
    model = parse_header(None)
    assert model == HeaderModel()
    assert not model.has_social_links
    assert not model.has_article_teasers


def test_footer_link_columns() -> None:
    node = node_from_mapping(
        "footer",
        {
            "footerHeading": "Talk to us",
            "mainMenuItems": {
                "item0": {"menuItemTitle": "About", "menuItemLink": "/about", "menuItemExternal": "true"},
                "item1": {"menuItemLink": "/untitled"},
            },
        },
    )
    model = parse_footer(node)
    assert model.heading == "Talk to us"
    assert [item.title for item in model.main_menu_items] == ["About"]
    assert model.main_menu_items[0].external
    assert model.has_main_menu_items
    assert not model.has_useful_menu_items


def test_lead_banner_json_escapes_html() -> None:
    node = node_from_mapping(
        "lead",
        {
            "primaryHeadline": "We build",
            "secondaryHeadlineItems": {
                "item0": {"secondaryHeadlineText": "<fast> & 'safe'", "stackImage": "/a.png"},
                "item1": {"stackImage": "/b.png"},
                "item2": {"secondaryHeadlineText": "calm"},
            },
        },
    )
    model = parse_lead_banner(node)
    assert model.has_secondary_headline_items
    assert model.first_secondary_headline_text == "<fast> & 'safe'"
    encoded = model.secondary_headline_strings_json
    assert "<" not in encoded
    assert "&" not in encoded
    assert "'" not in encoded
    assert json.loads(encoded) == ["<fast> & 'safe'", "calm"]
    assert parse_lead_banner(None).first_secondary_headline_text == ""


@pytest.mark.parametrize(
    ("duration", "expected"),
    [(None, 10), ("4", 4), (6, 6), ("0", 10), ("-3", 10), ("soon", 10)],
)
def test_site_banner_cycle_duration(duration: object, expected: int) -> None:
    properties: dict[str, object] = {
        "bannerMessages": {"item0": {"messageText": "Hello <b>"}, "item1": {"messageText": ""}}
    }
    if duration is not None:
        properties["cycleDuration"] = duration
    model = parse_site_banner(node_from_mapping("banner", properties))
    assert model.cycle_duration == expected
    assert model.messages_json == '["Hello <b>"]'


def test_site_banner_without_messages() -> None:
    model = parse_site_banner(None)
    assert model == SiteBannerModel()
    assert not model.has_messages
    assert model.messages_json == "[]"


def test_quote_fields() -> None:
    node = node_from_mapping(
        "quote",
        {"quoteTitle": "Said", "quotePrimaryText": "Great", "authorName": "Ada"},
    )
    model = parse_quote(node)
    assert (model.title, model.primary_text, model.author_name) == ("Said", "Great", "Ada")
    assert model.muted_text is None


def test_services_require_headline() -> None:
    node = node_from_mapping(
        "services",
        {
            "servicesTitle": "What we do",
            "serviceItems": {
                "item0": {"serviceHeadline": "Design", "serviceIcon": "/i.svg"},
                "item1": {"serviceDescription": "No headline"},
            },
        },
    )
    model = parse_services(node)
    assert model.title == "What we do"
    assert [item.headline for item in model.items] == ["Design"]
    assert model.has_service_items


def test_comparison_columns_and_content_flags() -> None:
    node = node_from_mapping(
        "comparison",
        {
            "title": "Before and after",
            "column1Title": "Before",
            "column1HeadingNum": "01",
            "column2Items": {"item0": {"itemText": "Fast"}, "item1": {"itemText": " "}},
        },
    )
    model = parse_comparison(node)
    assert len(model.columns) == 3
    first, second, third = model.columns
    assert first.has_content
    assert first.heading_num == "01"
    assert second.items == ("Fast",)
    assert second.has_content
    assert not third.has_content
    assert model.has_content
    assert not parse_comparison(node_from_mapping("empty", {})).has_content


def test_gallery_index_counts_kept_images() -> None:
    node = node_from_mapping(
        "gallery",
        {
            "galleryImages": {
                "item0": {"imagePath": "/a.png", "imageAlt": "A"},
                "item1": {"imageAlt": "no path"},
                "item2": {"imagePath": "/c.png"},
            }
        },
    )
    model = parse_looping_circle_gallery(node)
    assert [(image.path, image.index) for image in model.images] == [
        ("/a.png", 0),
        ("/c.png", 1),
    ]
    assert model.has_images


@pytest.mark.parametrize(
    ("properties", "new_tab", "play", "mute"),
    [
        ({}, False, True, True),
        ({"openInNewTab": "true", "showPlayToggle": "false"}, True, False, True),
        ({"openInNewTab": "yes", "showMuteToggle": "false"}, False, True, False),
        ({"openInNewTab": True, "showPlayToggle": False}, True, False, True),
    ],
)
def test_video_flags(
    properties: dict[str, object], new_tab: bool, play: bool, mute: bool
) -> None:
    model = parse_video(node_from_mapping("video", {"videoPath": "/v.mp4", **properties}))
    assert model.open_in_new_tab is new_tab
    assert model.show_play_toggle is play
    assert model.show_mute_toggle is mute


def test_two_tone_teaser_and_text() -> None:
    teaser = parse_two_tone_text_teaser(
        node_from_mapping(
            "teaser", {"primaryText": "Bold", "ctaLink": "/go", "ctaLinkExternal": "true"}
        )
    )
    assert teaser.primary_text == "Bold"
    assert teaser.cta_link_external

    text = parse_text(node_from_mapping("text", {"text": "<p>Hi</p>", "textIsRich": True}))
    assert text.is_rich_text
    assert parse_text(None) == TextModel()
    assert not parse_text(node_from_mapping("text", {"text": "plain"})).is_rich_text


def test_registry_covers_every_component() -> None:
    names = {component_name(resource_type) for resource_type in COMPONENT_PARSERS}
    assert names == {
        "header",
        "footer",
        "sitebanner",
        "leadbanner",
        "quote",
        "services",
        "comparison",
        "looping_circle_gallery",
        "video",
        "two_tone_text_teaser",
        "text",
    }


def test_parse_component_dispatches_on_resource_type() -> None:
    quote = node_from_mapping(
        "quote",
        {"sling:resourceType": "adobexp/components/content/quote", "authorName": "Ada"},
    )
    assert parse_component(quote) == parse_quote(quote)
    unknown = node_from_mapping("x", {"sling:resourceType": "other/thing"})
    assert parse_component(unknown) is None
    assert parse_component(node_from_mapping("plain", {})) is None
