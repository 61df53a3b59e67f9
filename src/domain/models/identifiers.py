"""Value objects for problem identification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class QueryKind(str, Enum):
    """Which GraphQL query shape a request resolves to."""

    SPECIFIC = "specific"
    DAILY = "daily"


@dataclass(frozen=True)
class SpecificProblemRequest:
    """A problem requested through its link."""

    raw_link: str

    def __str__(self) -> str:
        return self.raw_link


@dataclass(frozen=True)
class DailyProblemRequest:
    """The current daily coding challenge."""

    def __str__(self) -> str:
        return "daily challenge"


ProblemRequest = SpecificProblemRequest | DailyProblemRequest


@dataclass(frozen=True)
class ResolvedQuery:
    """Query kind and GraphQL variables derived from a ProblemRequest."""

    query_kind: QueryKind
    variables: Mapping[str, str] = field(default_factory=dict)
    source_link: str | None = None

    @property
    def title_slug(self) -> str | None:
        return self.variables.get("titleSlug")

    def __str__(self) -> str:
        if self.query_kind is QueryKind.DAILY:
            return "daily"
        return f"specific/{self.title_slug}"
