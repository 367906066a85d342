"""Domain model for a coding-practice problem."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .identifiers import Platform, ProblemIdentifier


class ProblemSource(str, Enum):
    """Where a candidate problem came from."""

    API = "api"
    LOCAL = "local"
    ML = "ml"


@dataclass
class Problem:
    """A problem as supplied by the extraction collaborator or a candidate provider.

    ``constraints`` is either a structured ``{variable: bound}`` map or free text
    to be inferred; ``io_structure`` is either a collection of shape tags or free
    text. Both are optional.
    """

    id: str
    title: str
    platform: Platform = Platform.UNKNOWN
    tags: list[str] = field(default_factory=list)
    difficulty: str | int | float | None = None
    constraints: dict[str, float] | str | None = None
    io_structure: list[str] | str | None = None
    description: str | None = None
    url: str | None = None
    source: ProblemSource = ProblemSource.LOCAL

    def __post_init__(self) -> None:
        self.platform = Platform.parse(self.platform)
        if not isinstance(self.source, ProblemSource):
            self.source = ProblemSource(self.source)

    @property
    def identifier(self) -> ProblemIdentifier:
        return ProblemIdentifier.parse(self.id)

    def is_valid(self) -> bool:
        """A query problem needs at least an id and a non-blank title."""
        return bool(self.id and self.id.strip() and self.title and self.title.strip())

    def with_source(self, source: ProblemSource) -> "Problem":
        return replace(self, source=source)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Problem":
        """Build a problem from a collaborator payload (camelCase keys accepted)."""
        io_structure = data.get("io_structure", data.get("ioStructure"))
        constraints = data.get("constraints")
        return cls(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            platform=Platform.parse(data.get("platform")),
            tags=list(data.get("tags") or []),
            difficulty=data.get("difficulty"),
            constraints=dict(constraints) if isinstance(constraints, dict) else constraints,
            io_structure=list(io_structure) if isinstance(io_structure, (list, tuple, set, frozenset)) else io_structure,
            description=data.get("description"),
            url=data.get("url"),
            source=ProblemSource(data.get("source") or ProblemSource.LOCAL),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "platform": self.platform.value,
            "tags": list(self.tags),
            "difficulty": self.difficulty,
            "constraints": dict(self.constraints) if isinstance(self.constraints, dict) else self.constraints,
            "io_structure": list(self.io_structure) if isinstance(self.io_structure, (list, tuple)) else self.io_structure,
            "description": self.description,
            "url": self.url,
            "source": self.source.value,
        }
