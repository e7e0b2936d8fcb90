"""Component adapters that turn content nodes into template view models.

Each adapter is a pure ``parse_*(node)`` function returning a frozen
dataclass. :data:`COMPONENT_PARSERS` maps a node's resource type to its
adapter so the renderer can dispatch without knowing individual components.

Examples
--------
>>> from site_components.content import node_from_mapping
>>> from site_components.components import parse_component
>>> node = node_from_mapping(
...     "quote",
...     {
...         "sling:resourceType": "adobexp/components/content/quote",
...         "authorName": "Ada",
...     },
... )
>>> parse_component(node).author_name
'Ada'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import (
    COMPARISON_RESOURCE_TYPE,
    FOOTER_RESOURCE_TYPE,
    GALLERY_RESOURCE_TYPE,
    HEADER_RESOURCE_TYPE,
    LEAD_BANNER_RESOURCE_TYPE,
    QUOTE_RESOURCE_TYPE,
    SERVICES_RESOURCE_TYPE,
    SITE_BANNER_RESOURCE_TYPE,
    TEXT_RESOURCE_TYPE,
    TWO_TONE_TEASER_RESOURCE_TYPE,
    VIDEO_RESOURCE_TYPE,
)
from .banners import parse_lead_banner, parse_site_banner
from .blocks import (
    parse_comparison,
    parse_looping_circle_gallery,
    parse_quote,
    parse_services,
    parse_text,
    parse_two_tone_text_teaser,
    parse_video,
)
from .footer import parse_footer
from .header import parse_header

if typ.TYPE_CHECKING:
    from ..content import ContentNode

ComponentParser = cabc.Callable[..., typ.Any]

COMPONENT_PARSERS: dict[str, ComponentParser] = {
    HEADER_RESOURCE_TYPE: parse_header,
    FOOTER_RESOURCE_TYPE: parse_footer,
    SITE_BANNER_RESOURCE_TYPE: parse_site_banner,
    LEAD_BANNER_RESOURCE_TYPE: parse_lead_banner,
    QUOTE_RESOURCE_TYPE: parse_quote,
    SERVICES_RESOURCE_TYPE: parse_services,
    COMPARISON_RESOURCE_TYPE: parse_comparison,
    GALLERY_RESOURCE_TYPE: parse_looping_circle_gallery,
    VIDEO_RESOURCE_TYPE: parse_video,
    TWO_TONE_TEASER_RESOURCE_TYPE: parse_two_tone_text_teaser,
    TEXT_RESOURCE_TYPE: parse_text,
}


def component_name(resource_type: str) -> str:
    """Return the template name for a resource type.

    >>> component_name("adobexp/components/content/text/v1/text")
    'text'
    >>> component_name("adobexp/components/content/looping-circle-gallery")
    'looping_circle_gallery'
    """
    return resource_type.rstrip("/").rsplit("/", 1)[-1].replace("-", "_")


def parse_component(node: ContentNode) -> typ.Any | None:
    """Return the view model for ``node`` or ``None`` for unknown resource types."""
    resource_type = node.resource_type
    if resource_type is None:
        return None
    parser = COMPONENT_PARSERS.get(resource_type)
    if parser is None:
        return None
    return parser(node)


__all__ = [
    "COMPONENT_PARSERS",
    "ComponentParser",
    "component_name",
    "parse_comparison",
    "parse_component",
    "parse_footer",
    "parse_header",
    "parse_lead_banner",
    "parse_looping_circle_gallery",
    "parse_quote",
    "parse_services",
    "parse_site_banner",
    "parse_text",
    "parse_two_tone_text_teaser",
    "parse_video",
]
