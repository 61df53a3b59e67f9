"""Static configuration for talking to LeetCode."""

from typing import TypedDict


class HTTPSettings(TypedDict):
    """Settings for the GraphQL HTTP client."""

    impersonate: str
    headers: dict[str, str]


LEETCODE_BASE_URL = "https://leetcode.com"
LEETCODE_API_URL = f"{LEETCODE_BASE_URL}/graphql"
PROBLEM_URL_TEMPLATE = f"{LEETCODE_BASE_URL}/problems/{{slug}}/"

DEFAULT_LANGUAGE = "python3"

HTTP_SETTINGS: HTTPSettings = {
    "impersonate": "chrome",
    "headers": {
        "Content-Type": "application/json",
        "Referer": f"{LEETCODE_BASE_URL}/",
        "Origin": LEETCODE_BASE_URL,
    },
}
