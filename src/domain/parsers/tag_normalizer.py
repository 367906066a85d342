"""Canonicalization of free-form problem tags."""

from collections.abc import Iterable

from domain.tables import TAG_SYNONYMS


def normalize_tag(tag: str) -> str:
    """
    Map a tag to its canonical form.

    Known aliases resolve through the synonym table; anything else is
    lowercased with internal whitespace replaced by hyphens.
    """
    lower = " ".join(tag.lower().split())
    canonical = TAG_SYNONYMS.get(lower)
    if canonical is not None:
        return canonical

    hyphenated = lower.replace(" ", "-")
    # "z shape" hyphenates into the "z-shape" alias
    return TAG_SYNONYMS.get(hyphenated, hyphenated)


def normalize_tags(tags: Iterable[str] | None) -> frozenset[str]:
    """Normalize a collection of tags, skipping blank ones."""
    if not tags:
        return frozenset()
    return frozenset(normalize_tag(tag) for tag in tags if tag and tag.strip())
