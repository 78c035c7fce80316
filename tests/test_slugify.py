from __future__ import annotations

import pytest

from mdlint_rules.slugify import UNTITLED_SLUG, slugify, strip_localization_markers


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Setup", "setup"),
        ("Getting Started", "getting-started"),
        ("What's New?", "whats-new"),
        ("Café", "cafe"),
        ("snake_case and-dash", "snake_case-and-dash"),
        ("Multiple   Spaces", "multiple-spaces"),
        ("", UNTITLED_SLUG),
    ],
)
def test_slugify_expected_examples(title: str, expected: str):
    assert slugify(title) == expected


def test_slugify_returns_untitled_for_punctuation_only():
    assert slugify("?!...") == "untitled"


def test_slugify_preserves_unicode_when_requested():
    assert slugify("Café Crème", preserve_unicode=True) == "café-crème"


def test_strip_localization_markers_keeps_wrapped_text():
    assert strip_localization_markers("Click [!UICONTROL Save] in [!DNL Acme]") == (
        "Click Save in Acme"
    )


def test_strip_localization_markers_ignores_other_brackets():
    assert strip_localization_markers("[!NOTE] and [link]") == "[!NOTE] and [link]"


def test_slugify_unwraps_localization_markers():
    unwrapped = slugify("Use [!DNL Acme] [!UICONTROL Save]")

    assert unwrapped == slugify("Use Acme Save") == "use-acme-save"


def test_slugify_keeps_other_bracketed_text():
    assert slugify("[!NOTE] Read me") == "note-read-me"
