"""Exceptions raised while fetching and writing LeetCode problems."""

from pathlib import Path


class LeetFetchError(Exception):
    """Base error for leetcode-fetch."""

    pass


class TransportError(LeetFetchError):
    """The GraphQL endpoint could not be reached or answered with a non-success status."""

    def __init__(self, status_code: int | None, message: str | None = None):
        self.status_code = status_code
        if message is None:
            message = f"HTTP error! status: {status_code}"
        super().__init__(message)


class DataShapeError(LeetFetchError):
    """The response does not contain the expected problem payload."""

    pass


class FilesystemConflict(LeetFetchError):
    """Target file already exists and was left untouched."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File already exists: {path.name}")
