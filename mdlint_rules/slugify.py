"""Anchor slugs for heading titles, as the documentation renderer builds them."""

from __future__ import annotations

import re
import string
import unicodedata

from .constants import LOCALIZATION_MARKER_PATTERN

UNTITLED_SLUG = "untitled"

# Hyphens and underscores survive; every other ASCII punctuation mark is dropped
_PUNCTUATION_TABLE = str.maketrans("", "", string.punctuation.replace("-", "").replace("_", ""))
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-{2,}")


def strip_localization_markers(title: str) -> str:
    """Replace ``[!DNL text]`` and ``[!UICONTROL text]`` markers with their text.

    These markers only drive translation tooling; the rendered heading shows
    the wrapped text, so anchors are derived from it.

    Examples:
        strip_localization_markers("Use [!DNL Acme] [!UICONTROL Save]")  # "Use Acme Save"
    """
    return LOCALIZATION_MARKER_PATTERN.sub(lambda match: match.group("text"), title)


def _fold(title: str, preserve_unicode: bool) -> str:
    if preserve_unicode:
        return unicodedata.normalize("NFKC", title).casefold()
    ascii_title = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    return ascii_title.casefold()


def slugify(title: str, preserve_unicode: bool = False) -> str:
    """Generate the anchor slug of a heading title.

    Localization markers are unwrapped first, so ``[!DNL Acme] Setup`` and
    ``Acme Setup`` share an anchor. The title is then folded to lowercase
    ASCII (or Unicode when preserving), punctuation other than hyphens and
    underscores is removed, and whitespace runs become single hyphens.

    Titles with nothing left, such as empty headings or ``# ???``, all map to
    ``"untitled"`` and therefore collide with each other and with a heading
    literally titled "Untitled".

    Args:
        title: The heading text, without any ``{#id}`` directive.
        preserve_unicode: When True, retain Unicode characters instead of
            transliterating to ASCII.

    Returns:
        str: Hyphen-separated slug, ``"untitled"`` when the title is empty.

    Examples:
        slugify("Getting Started")  # "getting-started"
        slugify("Use [!DNL Acme]")  # "use-acme"
        slugify("Café", preserve_unicode=True)  # "café"
    """
    slug = _fold(strip_localization_markers(title), preserve_unicode)
    slug = _WHITESPACE_RUN.sub("-", slug.translate(_PUNCTUATION_TABLE))
    slug = _HYPHEN_RUN.sub("-", slug).strip("-")
    return slug or UNTITLED_SLUG
