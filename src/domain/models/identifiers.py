"""Value objects for problem identification."""

from dataclasses import dataclass
from enum import Enum


class Platform(str, Enum):
    """Judges that problems can come from."""

    LEETCODE = "leetcode"
    CODEFORCES = "codeforces"
    CODECHEF = "codechef"
    HACKERRANK = "hackerrank"
    GEEKSFORGEEKS = "geeksforgeeks"
    ATCODER = "atcoder"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: "str | Platform | None") -> "Platform":
        """Parse a platform name, falling back to UNKNOWN."""
        if isinstance(value, Platform):
            return value
        if not value:
            return cls.UNKNOWN

        name = str(value).strip().lower()
        if name in ("gfg", "geeks-for-geeks"):
            return cls.GEEKSFORGEEKS
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a problem across all judges as ``<platform>:<slug-or-number>``."""

    platform: str
    slug: str

    SEPARATOR = ":"

    @classmethod
    def parse(cls, problem_id: str) -> "ProblemIdentifier":
        """
        Parse a problem id string.

        Raises:
            ValueError: If the id has no platform prefix or no slug
        """
        platform, sep, slug = problem_id.strip().partition(cls.SEPARATOR)
        if not sep or not platform or not slug:
            raise ValueError(f"Invalid problem id: {problem_id!r}")
        return cls(platform=platform.lower(), slug=slug)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.platform}{self.SEPARATOR}{self.slug}"


def feedback_key(problem_a_id: str, problem_b_id: str) -> str:
    """Build the order-independent storage key for a problem pair."""
    return "_".join(sorted((problem_a_id, problem_b_id)))
