"""Service for handling problem-related operations."""

from loguru import logger

from domain.models import Problem
from domain.parsers.url_parser import URLParser
from infrastructure.leetcode_client import LeetCodeClient


class ProblemService:
    """Resolves problem links and fetches the matching problem."""

    def __init__(
        self,
        *,
        api_client: LeetCodeClient,
        url_parser: type[URLParser] = URLParser,
    ):
        """Initialize service with dependencies."""
        self.api_client = api_client
        self.url_parser = url_parser

    async def get_problem(self, raw_link: str | None = None) -> Problem:
        """Get the problem behind ``raw_link``, or the daily challenge when it is None."""
        request = self.url_parser.to_request(raw_link)
        logger.debug(f"Getting problem via service: {request}")

        query = self.url_parser.resolve(request)
        return await self.api_client.fetch(query)
