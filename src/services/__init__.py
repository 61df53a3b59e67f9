from services.problem import ProblemService


def create_problem_service() -> ProblemService:
    """Factory function to create problem service with all dependencies."""
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.leetcode_client import LeetCodeClient

    http_client = AsyncHTTPClient()
    api_client = LeetCodeClient(http_client)

    return ProblemService(api_client=api_client)


__all__ = ["ProblemService", "create_problem_service"]
