"""Write rendered problems to disk."""

from pathlib import Path

from loguru import logger

from domain.exceptions import FilesystemConflict
from domain.models import RenderedFile


class FileWriter:
    """Creates problem files, never overwriting existing ones."""

    def __init__(self, directory: Path | None = None):
        self.directory = directory

    def write(self, rendered: RenderedFile) -> Path:
        """
        Write ``rendered`` into the target directory.

        Raises:
            FilesystemConflict: If the file already exists
        """
        directory = self.directory if self.directory is not None else Path.cwd()
        path = directory / rendered.file_name

        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(rendered.body)
        except FileExistsError as e:
            logger.info(f"Skipping existing file: {path}")
            raise FilesystemConflict(path) from e

        logger.info(f"Wrote {len(rendered.body)} chars to {path}")
        return path
