"""Common literal values used across site_components.

These constants keep resource types, reserved names and stylesheet binding
details centralized so adapters, the renderer and tests can import the same
values without drifting. Intended for internal use within the package.

Examples
--------
>>> from site_components import _constants
>>> _constants.THEME_STYLESHEET_SUFFIX.format(path="/content/site/en")
'/content/site/en.theme-variables.css'
>>> "jcr:content".startswith(_constants.RESERVED_CHILD_PREFIX)
True
"""

RESERVED_CHILD_PREFIX = "jcr:"
RESOURCE_TYPE_PROPERTY = "sling:resourceType"

CONTENT_ROOT_PREFIX = "/content/"
DAM_ROOT_PREFIX = "/content/dam/"
JSON_URL_MARKER = "JsonUrl"
PAGE_EXTENSION = ".html"

THEME_SELECTOR = "theme-variables"
THEME_EXTENSION = "css"
THEME_STYLESHEET_SUFFIX = "{path}." + THEME_SELECTOR + "." + THEME_EXTENSION
THEME_CONTENT_TYPE = "text/css;charset=UTF-8"
THEME_CACHE_CONTROL = "public, max-age=3600"
THEME_RESOURCE_TYPES = (
    "adobexp/components/global/pages/page/v1/page",
    "adobexp/components/global/pages/rootpage/v1/rootpage",
    "cq/experience-fragments/components/xfpage",
)

HEADER_RESOURCE_TYPE = "adobexp/components/global/header"
FOOTER_RESOURCE_TYPE = "adobexp/components/global/footer"
SITE_BANNER_RESOURCE_TYPE = "adobexp/components/global/sitebanner"
LEAD_BANNER_RESOURCE_TYPE = "adobexp/components/content/leadbanner"
QUOTE_RESOURCE_TYPE = "adobexp/components/content/quote"
SERVICES_RESOURCE_TYPE = "adobexp/components/content/services"
COMPARISON_RESOURCE_TYPE = "adobexp/components/content/comparison"
GALLERY_RESOURCE_TYPE = "adobexp/components/content/looping-circle-gallery"
VIDEO_RESOURCE_TYPE = "adobexp/components/content/video"
TWO_TONE_TEASER_RESOURCE_TYPE = "adobexp/components/content/two-tone-text-teaser"
TEXT_RESOURCE_TYPE = "adobexp/components/content/text/v1/text"
