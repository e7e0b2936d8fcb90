"""Map internal content paths to the public paths exposed on published pages.

The rewriter is configured with two lists: JSON objects naming an internal
prefix and its external replacement, and plain prefixes that must never be
rewritten. :func:`load_rewrite_rules` turns those lists into an immutable
:class:`RewriteRules` value; :class:`RewriterService` owns the current value
and swaps it wholesale whenever it is reactivated.

Examples
--------
>>> rules = load_rewrite_rules(
...     ['{"internalUrl": "/content/dam/", "externalUrl": "/static/assets/"}'], []
... )
>>> rules.resolve("/content/dam/images/a.png", rewriting_enabled=True)
'/static/assets/images/a.png'
>>> rules.resolve("/content/dam/images/a.png", rewriting_enabled=False)
'/content/dam/images/a.png'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import json
import logging
import re
import typing as typ

from ._constants import (
    CONTENT_ROOT_PREFIX,
    DAM_ROOT_PREFIX,
    JSON_URL_MARKER,
    PAGE_EXTENSION,
    RESERVED_CHILD_PREFIX,
)

if typ.TYPE_CHECKING:
    from .config import RewriterConfig

logger = logging.getLogger(__name__)

INTERNAL_URL_KEY = "internalUrl"
EXTERNAL_URL_KEY = "externalUrl"
LINE_BREAKS = re.compile(r"[\n\r]+")


class RewriteEntryError(ValueError):
    """Raised when a single rewrite entry cannot be turned into a mapping."""


@dc.dataclass(slots=True, frozen=True)
class RewriteRules:
    """Ordered prefix mapping plus the prefixes that are never rewritten."""

    mapping: tuple[tuple[str, str], ...] = ()
    skipped: tuple[str, ...] = ()

    def is_skipped(self, internal_path: str | None) -> bool:
        """Return True when ``internal_path`` starts with a skip prefix."""
        if not internal_path:
            return False
        return any(internal_path.startswith(prefix) for prefix in self.skipped)

    def resolve(self, internal_path: str | None, *, rewriting_enabled: bool) -> str | None:
        """Return the public path for ``internal_path``.

        Parameters
        ----------
        internal_path : str or None
            Repository path of the link target.
        rewriting_enabled : bool
            ``False`` returns the path untouched, as author-side rendering
            must keep linking to internal paths.

        Returns
        -------
        str or None
            The first mapping entry (in insertion order) whose internal prefix
            starts the path has that prefix replaced by its external prefix.
            Skipped and unmatched paths are returned unchanged.
        """
        if not rewriting_enabled or self.is_skipped(internal_path):
            return internal_path
        if internal_path is None:
            return None
        for internal_prefix, external_prefix in self.mapping:
            if internal_path.startswith(internal_prefix):
                return external_prefix + internal_path[len(internal_prefix) :]
        return internal_path

    def as_dict(self) -> dict[str, str]:
        """Return the mapping as an insertion-ordered dictionary."""
        return dict(self.mapping)


def parse_rewrite_entry(entry: str) -> tuple[str, str]:
    """Parse one ``{"internalUrl": ..., "externalUrl": ...}`` JSON entry.

    Raises
    ------
    RewriteEntryError
        If the entry is not a JSON object with two string URLs, or the
        internal URL is empty.
    """
    try:
        payload = json.loads(entry)
    except json.JSONDecodeError as exc:
        msg = f"not valid JSON: {exc.msg}"
        raise RewriteEntryError(msg) from exc
    match payload:
        case {"internalUrl": str() as internal, "externalUrl": str() as external}:
            pass
        case dict():
            msg = f"expected string '{INTERNAL_URL_KEY}' and '{EXTERNAL_URL_KEY}' keys"
            raise RewriteEntryError(msg)
        case _:
            msg = "expected a JSON object"
            raise RewriteEntryError(msg)
    if not internal:
        msg = f"'{INTERNAL_URL_KEY}' must not be empty"
        raise RewriteEntryError(msg)
    return internal, external


def load_rewrite_rules(
    urls_to_be_rewritten: cabc.Iterable[str | None] | None,
    urls_to_be_skipped: cabc.Iterable[str | None] | None,
) -> RewriteRules:
    """Build :class:`RewriteRules` from the raw configuration lists.

    Blank rewrite entries and blank skip prefixes are logged and ignored.
    Malformed entries are logged and skipped so that the remaining entries
    still load. A repeated internal prefix keeps its original position but
    takes the later external prefix.
    """
    mapping: dict[str, str] = {}
    for entry in urls_to_be_rewritten or ():
        if not entry or not entry.strip():
            logger.info("Ignoring blank URL rewrite entry: %r", entry)
            continue
        try:
            internal, external = parse_rewrite_entry(entry)
        except RewriteEntryError as exc:
            logger.error("Skipping malformed URL rewrite entry %r: %s", entry, exc)
            continue
        mapping[internal] = external
    skipped: list[str] = []
    for prefix in urls_to_be_skipped or ():
        if not prefix or not prefix.strip():
            logger.info("Ignoring blank URL skip entry: %r", prefix)
            continue
        skipped.append(prefix)
    rules = RewriteRules(mapping=tuple(mapping.items()), skipped=tuple(skipped))
    logger.info(
        "Loaded URL rewrite rules: mapping=%s skipped=%s",
        rules.as_dict(),
        list(rules.skipped),
    )
    return rules


class RenderMode(enum.StrEnum):
    """Rendering context in which a link is resolved."""

    DISABLED = "disabled"
    EDIT = "edit"
    PREVIEW = "preview"

    @property
    def rewriting_enabled(self) -> bool:
        """Return True when links should be rewritten to public paths."""
        return self is RenderMode.DISABLED


class RewriterService:
    """Hold the active :class:`RewriteRules` and resolve links against them.

    The rules are replaced by a single reference assignment on each
    :meth:`activate`, so callers always observe either the complete old or the
    complete new mapping.
    """

    def __init__(self, rules: RewriteRules | None = None) -> None:
        self._rules = rules or RewriteRules()

    @property
    def rules(self) -> RewriteRules:
        """Return the currently active rules."""
        return self._rules

    def activate(self, config: RewriterConfig) -> RewriteRules:
        """Rebuild the rules from ``config`` and make them active."""
        logger.info(
            "Activating URL rewriter: rewritten=%s skipped=%s",
            config.urls_to_be_rewritten,
            config.urls_to_be_skipped,
        )
        rules = load_rewrite_rules(
            config.urls_to_be_rewritten, config.urls_to_be_skipped
        )
        self._rules = rules
        return rules

    def deactivate(self) -> None:
        """Drop the active rules so every path passes through unchanged."""
        self._rules = RewriteRules()
        logger.info("URL rewriter deactivated")

    def publish_url(self, internal_path: str | None, *, rewriting_enabled: bool) -> str | None:
        """Resolve ``internal_path`` against the active rules."""
        resolved = self._rules.resolve(
            internal_path, rewriting_enabled=rewriting_enabled
        )
        logger.debug("Rewrote %r -> %r", internal_path, resolved)
        return resolved

    def url_for_mode(self, internal_path: str | None, mode: RenderMode) -> str | None:
        """Resolve ``internal_path`` for the given rendering mode."""
        if not internal_path:
            return internal_path
        return self.publish_url(internal_path, rewriting_enabled=mode.rewriting_enabled)


def is_content_page(path: str) -> bool:
    """Return True when ``path`` addresses a content page rather than a file.

    Pages live below ``/content/`` outside the asset root and carry no file
    extension in their last segment.

    >>> is_content_page("/content/site/en/about")
    True
    >>> is_content_page("/content/dam/site/logo.svg")
    False
    >>> is_content_page("/content/site/en/about.html")
    False
    """
    if not path.startswith(CONTENT_ROOT_PREFIX) or path.startswith(DAM_ROOT_PREFIX):
        return False
    last_segment = path.rstrip("/").rsplit("/", 1)[-1]
    return "." not in last_segment


@dc.dataclass(slots=True, frozen=True)
class PropertyValue:
    """A component property prepared for output by a template."""

    valid_key: bool
    value: typ.Any
    value_type: str


def resolve_property(
    name: str,
    value: typ.Any,
    *,
    service: RewriterService,
    mode: RenderMode,
    is_page: cabc.Callable[[str], bool] | None = None,
) -> PropertyValue:
    """Prepare a raw property value for output, rewriting link-like strings.

    ``jcr:`` properties are flagged through ``valid_key`` so templates can
    omit them. String values lose embedded line breaks; internal page paths
    recognised by ``is_page`` gain the page extension unless the property
    names a JSON endpoint. Strings are finally passed through the rewriter.
    """
    valid_key = not name.startswith(RESERVED_CHILD_PREFIX)
    if not value:
        return PropertyValue(valid_key=valid_key, value=value, value_type="String")
    match value:
        case str():
            text = LINE_BREAKS.sub("", value)
            if (
                text.startswith(CONTENT_ROOT_PREFIX)
                and is_page is not None
                and is_page(text)
                and JSON_URL_MARKER not in name
            ):
                text = f"{text}{PAGE_EXTENSION}"
            return PropertyValue(
                valid_key=valid_key,
                value=service.url_for_mode(text, mode),
                value_type="String",
            )
        case bool() | int() | float():
            value_type = "Boolean"
        case list() | tuple():
            value_type = "Array"
        case _:
            value_type = "String"
    return PropertyValue(valid_key=valid_key, value=value, value_type=value_type)


__all__ = [
    "EXTERNAL_URL_KEY",
    "INTERNAL_URL_KEY",
    "PropertyValue",
    "RenderMode",
    "RewriteEntryError",
    "RewriteRules",
    "RewriterService",
    "is_content_page",
    "load_rewrite_rules",
    "parse_rewrite_entry",
    "resolve_property",
]
