"""Shared fixtures for unit tests."""

import pytest

from domain.models import CodeSnippet, Difficulty, Problem


def make_question(**overrides) -> dict:
    """Question payload as returned by the GraphQL API."""
    question = {
        "questionId": "1",
        "questionFrontendId": "1",
        "title": "Two Sum",
        "titleSlug": "two-sum",
        "content": "<p>Given an array of integers <code>nums</code> &amp; an integer <code>target</code>.</p>",
        "difficulty": "Easy",
        "topicTags": [{"name": "Array"}, {"name": "Hash Table"}],
        "codeSnippets": [
            {"lang": "C++", "langSlug": "cpp", "code": "class Solution {};"},
            {"lang": "Python3", "langSlug": "python3", "code": "class Solution:\n    pass"},
        ],
    }
    question.update(overrides)
    return question


@pytest.fixture
def problem() -> Problem:
    return Problem(
        id="1",
        frontend_id="1",
        title="Two Sum",
        title_slug="two-sum",
        content_html="<p>Find two numbers &amp; return their indices.</p>",
        difficulty=Difficulty.EASY,
        link="https://leetcode.com/problems/two-sum/",
        topic_tags=frozenset({"Array", "Hash Table"}),
        snippets=(
            CodeSnippet(language_label="C++", language_slug="cpp", code="class Solution {};"),
            CodeSnippet(
                language_label="Python3",
                language_slug="python3",
                code="class Solution:\n    pass",
            ),
        ),
    )


@pytest.fixture
def question_payload() -> dict:
    return make_question()
