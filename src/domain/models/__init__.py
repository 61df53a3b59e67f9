"""Domain models package."""

from .identifiers import (
    DailyProblemRequest,
    ProblemRequest,
    QueryKind,
    ResolvedQuery,
    SpecificProblemRequest,
)
from .output import OutputOptions, RenderedFile
from .problem import CodeSnippet, Difficulty, Problem

__all__ = [
    "CodeSnippet",
    "DailyProblemRequest",
    "Difficulty",
    "OutputOptions",
    "Problem",
    "ProblemRequest",
    "QueryKind",
    "RenderedFile",
    "ResolvedQuery",
    "SpecificProblemRequest",
]
