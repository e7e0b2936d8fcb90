"""Unit tests for the URL rewriter.

These tests cover rule loading from the raw configuration lists, prefix
resolution, the skip list, render-mode handling and the property helper used
by templates.

Usage
-----
Run ``pytest tests/test_rewrite.py -v``. Only pytest's built-in ``caplog``
fixture is required.
"""

from __future__ import annotations

import json
import logging

import pytest

from site_components.config import RewriterConfig
from site_components.rewrite import (
    RenderMode,
    RewriteEntryError,
    RewriteRules,
    RewriterService,
    load_rewrite_rules,
    is_content_page,
    parse_rewrite_entry,
    resolve_property,
)

DAM_ENTRY = '{"internalUrl": "/content/dam/", "externalUrl": "/static/assets/"}'


def _entry(internal: str, external: str) -> str:
    return json.dumps({"internalUrl": internal, "externalUrl": external})


def test_prefix_is_replaced_when_rewriting_enabled() -> None:
    """A matching prefix should be swapped for its external counterpart."""
    rules = load_rewrite_rules([DAM_ENTRY], [])
    actual = rules.resolve("/content/dam/images/a.png", rewriting_enabled=True)
    assert actual == "/static/assets/images/a.png", (
        "Expected the DAM prefix to be rewritten"
    )


def test_rewriting_disabled_returns_path_unchanged() -> None:
    """Author-side resolution must never change the path."""
    rules = load_rewrite_rules([DAM_ENTRY], [])
    for path in ("/content/dam/images/a.png", "/content/site/en", "", "/"):
        assert rules.resolve(path, rewriting_enabled=False) == path


def test_skip_prefix_wins_over_mapping() -> None:
    """Skipped prefixes should be returned untouched even when mapped."""
    rules = load_rewrite_rules([DAM_ENTRY], ["/content/dam"])
    actual = rules.resolve("/content/dam/images/a.png", rewriting_enabled=True)
    assert actual == "/content/dam/images/a.png"


def test_unmatched_path_is_unchanged() -> None:
    rules = load_rewrite_rules([DAM_ENTRY], [])
    assert rules.resolve("/content/site/en", rewriting_enabled=True) == (
        "/content/site/en"
    )


def test_first_matching_entry_wins_in_insertion_order() -> None:
    """Overlapping prefixes resolve against the first configured entry."""
    rules = load_rewrite_rules(
        [_entry("/content/", "/c"), _entry("/content/dam/", "/assets/")], []
    )
    actual = rules.resolve("/content/dam/a.png", rewriting_enabled=True)
    assert actual == "/c/dam/a.png"


def test_repeated_internal_prefix_keeps_position_and_takes_later_value() -> None:
    rules = load_rewrite_rules(
        [
            _entry("/a/", "/first/"),
            _entry("/a/b/", "/nested/"),
            _entry("/a/", "/second/"),
        ],
        [],
    )
    assert list(rules.as_dict()) == ["/a/", "/a/b/"]
    assert rules.resolve("/a/b/c", rewriting_enabled=True) == "/second/b/c"


def test_none_path_passes_through() -> None:
    rules = load_rewrite_rules([DAM_ENTRY], [])
    assert rules.resolve(None, rewriting_enabled=True) is None
    assert rules.resolve(None, rewriting_enabled=False) is None


def test_malformed_entry_is_logged_and_skipped(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A malformed entry should not prevent the remaining entries from loading."""
    with caplog.at_level(logging.ERROR, logger="site_components.rewrite"):
        rules = load_rewrite_rules(["not-json", _entry("/a", "/b")], [])
    assert rules.as_dict() == {"/a": "/b"}
    assert "not-json" in caplog.text


@pytest.mark.parametrize(
    "entry",
    [
        "[1, 2]",
        '{"internalUrl": "/a"}',
        '{"internalUrl": 1, "externalUrl": "/b"}',
        '{"internalUrl": "", "externalUrl": "/b"}',
    ],
)
def test_parse_rewrite_entry_rejects_invalid_shapes(entry: str) -> None:
    with pytest.raises(RewriteEntryError):
        parse_rewrite_entry(entry)


def test_blank_entries_are_ignored() -> None:
    rules = load_rewrite_rules(["", "   ", None, _entry("/a", "/b")], [None])
    assert rules.as_dict() == {"/a": "/b"}
    assert rules.skipped == ()


def test_blank_skip_prefixes_do_not_disable_rewriting(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A blank skip entry must not match, and so skip, every path."""
    with caplog.at_level(logging.INFO, logger="site_components.rewrite"):
        rules = load_rewrite_rules([DAM_ENTRY], ["", None, "   "])
    assert rules.skipped == ()
    assert rules.resolve("/content/dam/a.png", rewriting_enabled=True) == (
        "/static/assets/a.png"
    )
    assert "Ignoring blank URL skip entry" in caplog.text


def test_empty_path_is_returned_unchanged_with_skip_prefixes() -> None:
    rules = load_rewrite_rules([DAM_ENTRY], ["/content/dam"])
    assert not rules.is_skipped("")
    assert rules.resolve("", rewriting_enabled=True) == ""


def test_empty_external_prefix_strips_internal_prefix() -> None:
    rules = load_rewrite_rules([_entry("/content/site", "")], [])
    assert rules.resolve("/content/site/en/home", rewriting_enabled=True) == (
        "/en/home"
    )


def test_service_activation_replaces_rules_atomically() -> None:
    """Reactivating should swap in a complete new rule set."""
    service = RewriterService()
    assert service.publish_url("/a/x", rewriting_enabled=True) == "/a/x"

    first = service.activate(RewriterConfig([_entry("/a/", "/one/")], []))
    assert service.rules is first
    assert service.publish_url("/a/x", rewriting_enabled=True) == "/one/x"

    second = service.activate(RewriterConfig([_entry("/b/", "/two/")], []))
    assert service.rules is second
    assert service.publish_url("/a/x", rewriting_enabled=True) == "/a/x"
    assert service.publish_url("/b/x", rewriting_enabled=True) == "/two/x"
    assert first.as_dict() == {"/a/": "/one/"}, "Old rules must not be mutated"


def test_deactivate_clears_rules() -> None:
    service = RewriterService()
    service.activate(RewriterConfig([DAM_ENTRY], ["/content/dam/private"]))
    service.deactivate()
    assert service.rules == RewriteRules()


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (RenderMode.DISABLED, "/static/assets/a.png"),
        (RenderMode.EDIT, "/content/dam/a.png"),
        (RenderMode.PREVIEW, "/content/dam/a.png"),
    ],
)
def test_url_for_mode_only_rewrites_published_output(
    mode: RenderMode, expected: str
) -> None:
    service = RewriterService(load_rewrite_rules([DAM_ENTRY], []))
    assert service.url_for_mode("/content/dam/a.png", mode) == expected


def test_resolve_property_rewrites_and_appends_page_extension() -> None:
    service = RewriterService(load_rewrite_rules([_entry("/content/site", "")], []))
    result = resolve_property(
        "ctaLink",
        "/content/site/en/about\n",
        service=service,
        mode=RenderMode.DISABLED,
        is_page=lambda path: path.startswith("/content/site/en/about"),
    )
    assert result.valid_key
    assert result.value_type == "String"
    assert result.value == "/en/about.html"


def test_resolve_property_leaves_json_endpoints_without_extension() -> None:
    result = resolve_property(
        "dataJsonUrl",
        "/content/site/en/data",
        service=RewriterService(),
        mode=RenderMode.DISABLED,
        is_page=lambda _path: True,
    )
    assert result.value == "/content/site/en/data"


def test_resolve_property_flags_reserved_names_and_types() -> None:
    service = RewriterService()
    reserved = resolve_property(
        "jcr:primaryType", "nt:unstructured", service=service, mode=RenderMode.EDIT
    )
    assert not reserved.valid_key

    flag = resolve_property("enabled", True, service=service, mode=RenderMode.EDIT)
    assert flag.value_type == "Boolean"
    assert flag.value is True

    items = resolve_property("tags", ["a", "b"], service=service, mode=RenderMode.EDIT)
    assert items.value_type == "Array"

    empty = resolve_property("title", "", service=service, mode=RenderMode.EDIT)
    assert empty.value == ""
    assert empty.value_type == "String"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/content/site/en/about", True),
        ("/content/site/en/", True),
        ("/content/dam/site/logo.svg", False),
        ("/content/dam/site/folder", False),
        ("/content/site/en/about.html", False),
        ("https://example.com/about", False),
    ],
)
def test_is_content_page(path: str, expected: bool) -> None:
    assert is_content_page(path) is expected
