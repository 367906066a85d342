"""Inference of input scale and I/O shape from free problem text."""

import re
from collections.abc import Iterable, Mapping

from domain.tables import IO_SHAPE_KEYWORDS

_COMPARATOR = r"\s*(?:≤|<=?)\s*"

# Exponent forms win over bare integers for the same variable
EXPONENT_PATTERNS = (
    re.compile(r"(\w)" + _COMPARATOR + r"10\^(\d+)", re.IGNORECASE),
    re.compile(r"(\w)" + _COMPARATOR + r"1e(\d+)", re.IGNORECASE),
)
BARE_INTEGER_PATTERN = re.compile(r"(\w)" + _COMPARATOR + r"(\d{3,})", re.IGNORECASE)

IO_SHAPE_PATTERNS = {
    shape: re.compile(r"\b(?:" + "|".join(keywords) + r")\b")
    for shape, keywords in IO_SHAPE_KEYWORDS.items()
}


def extract_constraints(text: str | None) -> dict[str, int]:
    """
    Extract ``{variable: upper bound}`` pairs from constraint text.

    Recognizes ``n ≤ 10^5``, ``n <= 1e5`` and ``n < 100000`` (three or more
    digits). The first match for a variable wins.
    """
    if not text:
        return {}

    constraints: dict[str, int] = {}
    for pattern in EXPONENT_PATTERNS:
        for match in pattern.finditer(text):
            constraints.setdefault(match.group(1).lower(), 10 ** int(match.group(2)))

    for match in BARE_INTEGER_PATTERN.finditer(text):
        constraints.setdefault(match.group(1).lower(), int(match.group(2)))

    return constraints


def scale_of(constraints: Mapping[str, object] | str | None) -> float | None:
    """Largest positive bound in structured or textual constraints, or None."""
    if isinstance(constraints, str):
        constraints = extract_constraints(constraints)
    if not constraints:
        return None

    bounds = []
    for value in constraints.values():
        if isinstance(value, bool):
            continue
        try:
            bound = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            continue
        if bound > 0:
            bounds.append(bound)

    return max(bounds) if bounds else None


def extract_io_structure(text: str | None) -> frozenset[str]:
    """Classify I/O shape by keyword presence in the text."""
    if not text:
        return frozenset()

    lower = text.lower()
    return frozenset(shape for shape, pattern in IO_SHAPE_PATTERNS.items() if pattern.search(lower))


def io_shapes(value: Iterable[str] | str | None) -> frozenset[str]:
    """Shape tags from either an explicit collection or free text."""
    if isinstance(value, str):
        return extract_io_structure(value)
    if not value:
        return frozenset()
    return frozenset(shape.strip().lower() for shape in value if shape and shape.strip())
