"""Async orchestrator for fetching a problem and writing it to disk."""

from pathlib import Path

from loguru import logger

from domain.assembler import ContentAssembler
from domain.exceptions import LeetFetchError
from domain.models import OutputOptions
from infrastructure.file_writer import FileWriter
from services.problem import ProblemService


class FetchOrchestrator:
    """Runs the fetch, assemble and write steps for one problem."""

    def __init__(
        self,
        problem_service: ProblemService,
        assembler: ContentAssembler | None = None,
        writer: FileWriter | None = None,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            problem_service: Service resolving links and fetching problems
            assembler: Renders a problem into a file name and body
            writer: Persists the rendered file
        """
        self.problem_service = problem_service
        self.assembler = assembler or ContentAssembler()
        self.writer = writer or FileWriter()

    async def run(self, raw_link: str | None, options: OutputOptions) -> Path:
        """Fetch the problem behind ``raw_link`` and write it; returns the created path."""
        logger.info(f"Fetching problem for link: {raw_link or 'daily challenge'}")

        try:
            logger.debug("Step 1: Fetching problem")
            problem = await self.problem_service.get_problem(raw_link)

            logger.debug("Step 2: Assembling file")
            rendered = self.assembler.assemble(problem, options)

            logger.debug("Step 3: Writing file")
            path = self.writer.write(rendered)

            logger.info(f"Problem {problem.frontend_id} written to {path}")
            return path

        except LeetFetchError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error in orchestrator: {e}")
            raise LeetFetchError(f"Failed to fetch problem: {e}") from e
