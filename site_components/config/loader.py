"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_rewriter_config,
    _build_theme_config,
    _build_theme_contexts,
)
from .models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing rewriter and theme settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site configuration, including the raw rewriter settings, the
        site-wide theme and any context-specific theme overrides.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or the theme names an unknown
        variable.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from site_components.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.rewriter.urls_to_be_skipped  # doctest: +SKIP
    ['/content/dam/private']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return SiteConfig(
        rewriter=_build_rewriter_config(raw.get("rewriter")),
        theme=_build_theme_config(raw.get("theme")),
        theme_contexts=_build_theme_contexts(raw.get("theme_contexts")),
        output_dir=Path(raw.get("output_dir", "public")),
    )


__all__ = ["load_site_config"]
