"""Parser for LeetCode problem URLs."""

import re

from loguru import logger

from domain.models import (
    DailyProblemRequest,
    ProblemRequest,
    QueryKind,
    ResolvedQuery,
    SpecificProblemRequest,
)
from infrastructure.config import PROBLEM_URL_TEMPLATE


class URLParser:
    """Resolves problem links into GraphQL queries."""

    # Matches .../problems/two-sum, .../problems/two-sum/ and .../problems/two-sum/description/
    SLUG_PATTERN = r"/problems/([^/?#]*)"

    @classmethod
    def to_request(cls, raw_link: str | None) -> ProblemRequest:
        """Turn an optional link into a specific or daily request."""
        if raw_link is None:
            return DailyProblemRequest()
        return SpecificProblemRequest(raw_link=raw_link)

    @classmethod
    def extract_slug(cls, raw_link: str) -> str:
        """
        Extract the title slug from a problem link.

        A link without a ``/problems/`` segment yields an empty slug; the
        remote side rejects it and the fetch fails with a data-shape error.
        """
        logger.debug(f"Parsing URL: {raw_link}")

        match = re.search(cls.SLUG_PATTERN, raw_link)
        if not match:
            logger.warning(
                f"Unrecognized LeetCode URL format: {raw_link}. "
                "Expected format: https://leetcode.com/problems/<slug>/"
            )
            return ""

        slug = match.group(1)
        logger.debug(f"Parsed URL to slug: {slug}")
        return slug

    @classmethod
    def resolve(cls, request: ProblemRequest) -> ResolvedQuery:
        """Build the query kind and variables for a request."""
        if isinstance(request, DailyProblemRequest):
            logger.debug("No link given, resolving to the daily challenge")
            return ResolvedQuery(query_kind=QueryKind.DAILY, variables={})

        slug = cls.extract_slug(request.raw_link)
        query = ResolvedQuery(
            query_kind=QueryKind.SPECIFIC,
            variables={"titleSlug": slug},
            source_link=request.raw_link,
        )
        logger.info(f"Resolved link to query: {query}")
        return query

    @classmethod
    def build_problem_url(cls, slug: str) -> str:
        """
        Build the canonical problem URL from a slug.
        """
        url = PROBLEM_URL_TEMPLATE.format(slug=slug)

        logger.debug(f"Built problem URL: {url}")
        return url


def resolve_link(raw_link: str | None) -> ResolvedQuery:
    """Resolve an optional problem link into a query."""
    return URLParser.resolve(URLParser.to_request(raw_link))
