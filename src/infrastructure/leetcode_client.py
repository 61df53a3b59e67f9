"""Client for the LeetCode GraphQL API."""

from typing import Any, Protocol

from loguru import logger
from pydantic import ValidationError

from domain.exceptions import DataShapeError
from domain.models import Problem, QueryKind, ResolvedQuery
from domain.parsers.url_parser import URLParser
from infrastructure.config import LEETCODE_API_URL
from infrastructure.schemas import DailyEnvelope, QuestionEnvelope

PROBLEM_QUERY = """
  query getQuestionDetail($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
      questionId
      questionFrontendId
      title
      titleSlug
      content
      difficulty
      topicTags {
        name
      }
      codeSnippets {
        lang
        langSlug
        code
      }
    }
  }
"""

DAILY_PROBLEM_QUERY = """
  query getDailyProblem {
    activeDailyCodingChallengeQuestion {
      question {
        questionId
        questionFrontendId
        title
        titleSlug
        content
        difficulty
        topicTags {
          name
        }
        codeSnippets {
          lang
          langSlug
          code
        }
      }
    }
  }
"""

QUERIES: dict[QueryKind, str] = {
    QueryKind.SPECIFIC: PROBLEM_QUERY,
    QueryKind.DAILY: DAILY_PROBLEM_QUERY,
}

ENVELOPES: dict[QueryKind, type[QuestionEnvelope] | type[DailyEnvelope]] = {
    QueryKind.SPECIFIC: QuestionEnvelope,
    QueryKind.DAILY: DailyEnvelope,
}


class JSONPoster(Protocol):
    """Protocol for the HTTP client."""

    async def post_json(self, url: str, payload: dict[str, Any]) -> Any:
        ...


class LeetCodeClient:
    """Fetches problems from LeetCode's GraphQL endpoint."""

    def __init__(self, http_client: JSONPoster, api_url: str = LEETCODE_API_URL):
        self.http_client = http_client
        self.api_url = api_url

    async def fetch(self, query: ResolvedQuery) -> Problem:
        """
        Fetch the problem described by ``query``.

        Raises:
            TransportError: If the endpoint is unreachable or returns a non-2xx status
            DataShapeError: If the response lacks the problem payload
        """
        logger.info(f"Fetching problem: {query}")

        payload = {
            "query": QUERIES[query.query_kind],
            "variables": dict(query.variables),
        }
        result = await self.http_client.post_json(self.api_url, payload)

        envelope = self._parse_envelope(query, result)
        question = envelope.question

        if query.query_kind is QueryKind.SPECIFIC and query.source_link is not None:
            link = query.source_link
        else:
            link = URLParser.build_problem_url(question.title_slug)

        problem = question.to_domain(link)
        logger.info(f"Successfully fetched problem: {problem}")
        return problem

    def _parse_envelope(self, query: ResolvedQuery, result: Any) -> QuestionEnvelope | DailyEnvelope:
        """Validate the response against the envelope for ``query``."""
        envelope_cls = ENVELOPES[query.query_kind]
        try:
            return envelope_cls.model_validate(result)
        except ValidationError as e:
            message = self._graphql_error(result)
            if message:
                logger.error(f"GraphQL error for {query}: {message}")
                raise DataShapeError(f"LeetCode returned an error: {message}") from e
            logger.error(f"Unexpected response shape for {query}: {e}")
            raise DataShapeError(f"Unexpected response shape for {query}") from e

    @staticmethod
    def _graphql_error(result: Any) -> str | None:
        if not isinstance(result, dict):
            return None
        errors = result.get("errors") or []
        messages = [error.get("message", "") for error in errors if isinstance(error, dict)]
        return "; ".join(m for m in messages if m) or None
