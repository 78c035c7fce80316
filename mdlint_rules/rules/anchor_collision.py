"""AM022: heading anchors must be unique within a document."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from ..constants import EXPLICIT_ANCHOR_PATTERN
from ..document import Document
from ..helpers import add_error, for_each_heading
from ..models import OnError, Rule
from ..slugify import slugify


@dataclass(frozen=True)
class AnchorOccurrence:
    """One heading's claim on an anchor.

    Attributes:
        anchor_id: Explicit ``{#id}`` anchor, or "" when the anchor is generated.
        slug: Effective generated slug (with any ``-N`` suffix), or "" when explicit.
        line_number: One-based line number of the heading.
    """

    anchor_id: str
    slug: str
    line_number: int

    @property
    def is_autogenerated(self) -> bool:
        return bool(self.slug)

    @property
    def effective_anchor(self) -> str:
        return self.anchor_id or self.slug


def split_explicit_anchor(title: str) -> tuple[str, str]:
    """Separate a trailing ``{#id}`` directive from a heading title.

    Args:
        title: Heading text.

    Returns:
        tuple[str, str]: The title without the directive, and the anchor id
            ("" when there is no directive).

    Examples:
        split_explicit_anchor("Setup {#install}")  # ("Setup", "install")
        split_explicit_anchor("Setup")  # ("Setup", "")
    """
    match = EXPLICIT_ANCHOR_PATTERN.search(title)
    if match is None:
        return title, ""
    return title[: match.start()], match.group("anchor")


def collect_anchors(params: Document) -> dict[str, list[AnchorOccurrence]]:
    """Group every heading's anchor by key, in document order.

    The key is the explicit anchor id when present, otherwise the slug of the
    visible title. Repeated generated slugs are numbered the way static site
    generators disambiguate them: the first keeps the bare slug, later ones
    get ``-1``, ``-2``, ... as their effective slug, while staying grouped
    under the bare slug.

    Args:
        params: Document to inspect.

    Returns:
        dict[str, list[AnchorOccurrence]]: Occurrences keyed by anchor.
    """
    anchors: dict[str, list[AnchorOccurrence]] = {}
    slug_counts: dict[str, int] = {}

    for heading, content in for_each_heading(params):
        title, anchor_id = split_explicit_anchor(content)

        if anchor_id:
            key = anchor_id
            slug = ""
        else:
            key = slugify(title)
            count = slug_counts.get(key, 0)
            slug = key if count == 0 else f"{key}-{count}"
            slug_counts[key] = count + 1

        anchors.setdefault(key, []).append(
            AnchorOccurrence(anchor_id=anchor_id, slug=slug, line_number=heading.line_number)
        )

    return anchors


def check_anchor_collisions(params: Document, on_error: OnError) -> None:
    """Report every heading whose anchor is claimed by another heading.

    Repeated titles are reported under their bare slug, numbered repeats
    included. A heading is also reported when its effective anchor (the
    explicit id or the numbered slug) is claimed by a different heading,
    e.g. ``{#setup-1}`` next to a second ``Setup`` heading.
    """
    anchors = collect_anchors(params)
    claims = Counter(
        occurrence.effective_anchor
        for occurrences in anchors.values()
        for occurrence in occurrences
    )

    reported: list[tuple[AnchorOccurrence, str]] = []
    for key, occurrences in anchors.items():
        for occurrence in occurrences:
            if len(occurrences) > 1:
                reported.append((occurrence, key))
            elif claims[occurrence.effective_anchor] > 1:
                reported.append((occurrence, occurrence.effective_anchor))

    for occurrence, key in sorted(reported, key=lambda item: item[0].line_number):
        anchor_type = " (autogenerated)" if occurrence.is_autogenerated else ""
        detail = None
        if occurrence.is_autogenerated and occurrence.slug != key:
            detail = f"Generated anchor: '{occurrence.slug}'"
        add_error(
            on_error,
            occurrence.line_number,
            detail,
            f"Duplicate anchor{anchor_type} '{key}'",
        )


AM022 = Rule(
    names=("AM022", "header-anchor-collision"),
    description="Heading anchor has collision",
    tags=("headings", "headers"),
    function=check_anchor_collisions,
)
