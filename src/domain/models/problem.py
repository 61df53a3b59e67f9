"""Domain model for a LeetCode problem."""

from dataclasses import dataclass, field
from enum import Enum


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CodeSnippet:
    """Starter code for one language."""

    language_label: str
    language_slug: str
    code: str


@dataclass(frozen=True)
class Problem:
    """A fetched problem, read-only after construction."""

    id: str
    frontend_id: str
    title: str
    title_slug: str
    content_html: str
    difficulty: Difficulty
    link: str
    topic_tags: frozenset[str] = field(default_factory=frozenset)
    snippets: tuple[CodeSnippet, ...] = ()

    def snippet_for(self, language: str) -> CodeSnippet | None:
        """Return the first snippet whose slug matches ``language``."""
        for snippet in self.snippets:
            if snippet.language_slug == language:
                return snippet
        return None

    def __str__(self) -> str:
        return f"{self.frontend_id}. {self.title}"
