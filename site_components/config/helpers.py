"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import posixpath
import typing as typ

from .models import THEME_FIELDS, RewriterConfig, SiteConfigError, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(value: object | None, *, key: str) -> list[str]:
    """Normalize a YAML sequence of scalars into a list of strings.

    ``None`` entries are kept as empty strings so that downstream consumers
    can apply their own blank-entry policy.
    """
    match value:
        case None:
            return []
        case str() as single:
            return [single]
        case list() as items:
            pass
        case _:
            msg = f"'{key}' must be a list of strings."
            raise SiteConfigError(msg)
    normalized: list[str] = []
    for item in items:
        match item:
            case None:
                normalized.append("")
            case str():
                normalized.append(item)
            case dict() | list():
                msg = f"'{key}' entries must be strings, got {type(item).__name__}."
                raise SiteConfigError(msg)
            case _:
                normalized.append(str(item))
    return normalized


def _build_rewriter_config(payload: typ.Mapping[str, typ.Any] | None) -> RewriterConfig:
    """Build a RewriterConfig from the ``rewriter`` mapping."""
    match payload:
        case None:
            return RewriterConfig()
        case dict() as data:
            pass
        case _:
            msg = "The 'rewriter' section must be a mapping."
            raise SiteConfigError(msg)
    return RewriterConfig(
        urls_to_be_rewritten=_string_list(
            data.get("urls_to_be_rewritten"), key="urls_to_be_rewritten"
        ),
        urls_to_be_skipped=_string_list(
            data.get("urls_to_be_skipped"), key="urls_to_be_skipped"
        ),
    )


def _build_theme_config(
    payload: typ.Mapping[str, typ.Any] | None, *, context: str = "theme"
) -> ThemeConfig | None:
    """Build a ThemeConfig from a mapping of variable overrides."""
    match payload:
        case None:
            return None
        case dict() as data:
            pass
        case _:
            msg = f"Theme configuration for '{context}' must be a mapping."
            raise SiteConfigError(msg)
    unknown = sorted(str(key) for key in data if key not in THEME_FIELDS)
    if unknown:
        msg = f"Unknown theme variables in '{context}': {', '.join(unknown)}"
        raise SiteConfigError(msg)
    values = {key: _theme_value(value) for key, value in data.items()}
    return ThemeConfig(**values)


def _theme_value(value: object | None) -> str | None:
    """Coerce a YAML scalar into the string form used by CSS declarations."""
    match value:
        case None:
            return None
        case bool():
            return "true" if value else "false"
        case str():
            return value.strip()
        case int() | float():
            return str(value)
        case _:
            msg = f"Theme values must be scalars, got {type(value).__name__}."
            raise SiteConfigError(msg)


def _build_theme_contexts(
    payload: typ.Mapping[str, typ.Any] | None,
) -> dict[str, ThemeConfig]:
    """Build the context-path keyed theme overrides."""
    match payload:
        case None:
            return {}
        case dict() as data:
            pass
        case _:
            msg = "The 'theme_contexts' section must be a mapping."
            raise SiteConfigError(msg)
    contexts: dict[str, ThemeConfig] = {}
    for raw_path, overrides in data.items():
        path = _normalize_context_path(raw_path)
        theme = _build_theme_config(overrides or {}, context=path)
        if theme is not None:
            contexts[path] = theme
    return contexts


def _normalize_context_path(value: object) -> str:
    """Return an absolute, normalized content path for a theme context key."""
    text = _optional_str(value)
    if not text or not text.startswith("/"):
        msg = f"Theme context keys must be absolute content paths, got {value!r}."
        raise SiteConfigError(msg)
    return posixpath.normpath(text)


__all__ = [
    "_build_rewriter_config",
    "_build_theme_config",
    "_build_theme_contexts",
    "_normalize_context_path",
    "_optional_str",
    "_string_list",
    "_theme_value",
]
