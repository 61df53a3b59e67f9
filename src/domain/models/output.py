"""Value objects for the rendered output file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputOptions:
    """How the problem file should be named and filled."""

    language: str
    use_slug_as_filename: bool = False
    bare_mode: bool = False


@dataclass(frozen=True)
class RenderedFile:
    file_name: str
    body: str
