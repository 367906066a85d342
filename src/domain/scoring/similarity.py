"""Per-dimension similarity functions, each returning a value in [0, 1]."""

import math
import re
from collections.abc import Iterable, Mapping, Set

from domain.parsers import io_shapes, normalize_tags, scale_of
from domain.tables import (
    DEFAULT_DIFFICULTY_LEVEL,
    DIFFICULTY_LEVELS,
    MAX_DIFFICULTY_LEVEL,
    RATING_BANDS,
    TITLE_STOP_WORDS,
)

NEUTRAL_UNKNOWN_SCALE = 0.5
ONE_SIDED_SCALE = 0.3

_NON_WORD = re.compile(r"[^\w\s]")
_DIGITS = re.compile(r"\d+")
_LEADING_INT = re.compile(r"^[+-]?\d+")


def tokenize(text: str | None) -> list[str]:
    """Lowercase, strip punctuation and digits, drop short and stop tokens."""
    if not text:
        return []
    cleaned = _DIGITS.sub("", _NON_WORD.sub(" ", text.lower()))
    return [token for token in cleaned.split() if len(token) > 1 and token not in TITLE_STOP_WORDS]


def jaccard_similarity(a: Set[str], b: Set[str]) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def levenshtein_distance(a: str, b: str) -> int:
    if not a or not b:
        return max(len(a), len(b))

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]


def levenshtein_similarity(a: str, b: str) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1 - levenshtein_distance(a, b) / max(len(a), len(b))


def title_similarity(a: str | None, b: str | None) -> float:
    tokens_a, tokens_b = tokenize(a), tokenize(b)
    jaccard = jaccard_similarity(set(tokens_a), set(tokens_b))
    edit = levenshtein_similarity(" ".join(sorted(tokens_a)), " ".join(sorted(tokens_b)))
    return jaccard * 0.6 + edit * 0.4


def tag_similarity(a: Iterable[str] | None, b: Iterable[str] | None) -> float:
    return jaccard_similarity(normalize_tags(a), normalize_tags(b))


def constraint_similarity(
    a: Mapping[str, float] | str | None,
    b: Mapping[str, float] | str | None,
) -> float:
    """
    Compare input scales by order of magnitude.

    Unknown scales are neutral: 0.5 when neither side has one, 0.3 when
    only one side does.
    """
    scale_a, scale_b = scale_of(a), scale_of(b)
    if scale_a is None and scale_b is None:
        return NEUTRAL_UNKNOWN_SCALE
    if scale_a is None or scale_b is None:
        return ONE_SIDED_SCALE

    log_a, log_b = math.log10(scale_a), math.log10(scale_b)
    return max(0.0, 1 - abs(log_a - log_b) / max(log_a, log_b, 1))


def difficulty_level(difficulty: str | int | None) -> int:
    """Map a label or judge rating onto the 1-5 ordinal scale (3 when unknown)."""
    if difficulty is None or isinstance(difficulty, bool):
        return DEFAULT_DIFFICULTY_LEVEL

    key = str(difficulty).strip().lower()
    if key in DIFFICULTY_LEVELS:
        return DIFFICULTY_LEVELS[key]

    match = _LEADING_INT.match(key)
    if not match:
        return DEFAULT_DIFFICULTY_LEVEL

    rating = int(match.group())
    for upper_bound, level in RATING_BANDS:
        if rating <= upper_bound:
            return level
    return MAX_DIFFICULTY_LEVEL


def difficulty_similarity(a: str | int | None, b: str | int | None) -> float:
    span = MAX_DIFFICULTY_LEVEL - 1
    return 1 - abs(difficulty_level(a) - difficulty_level(b)) / span


def io_structure_similarity(a: Iterable[str] | str | None, b: Iterable[str] | str | None) -> float:
    return jaccard_similarity(io_shapes(a), io_shapes(b))
