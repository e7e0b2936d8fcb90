"""Load and validate site configuration YAML for component rendering.

This subpackage parses the project's ``site.yaml`` file into strongly typed
dataclasses: the raw URL rewriter settings (:class:`RewriterConfig`), the
site-wide :class:`ThemeConfig`, and theme overrides keyed by content path.
The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from site_components.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.theme_for("/content/site-b/en")  # doctest: +SKIP
ThemeConfig(...)
"""

from .loader import load_site_config
from .models import (
    THEME_FIELDS,
    RewriterConfig,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)

__all__ = [
    "THEME_FIELDS",
    "RewriterConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "load_site_config",
]
