"""Unit tests for GraphQL response schemas."""

import pytest
from pydantic import ValidationError

from domain.models import Difficulty
from infrastructure.schemas import DailyEnvelope, QuestionEnvelope, QuestionSchema


def test_question_to_domain(question_payload):
    question = QuestionSchema.model_validate(question_payload)
    problem = question.to_domain("https://leetcode.com/problems/two-sum/")

    assert problem.id == "1"
    assert problem.frontend_id == "1"
    assert problem.title_slug == "two-sum"
    assert problem.difficulty is Difficulty.EASY
    assert problem.topic_tags == frozenset({"Array", "Hash Table"})
    assert [s.language_slug for s in problem.snippets] == ["cpp", "python3"]
    assert problem.snippets[1].language_label == "Python3"
    assert problem.link == "https://leetcode.com/problems/two-sum/"


def test_internal_and_frontend_ids_are_kept_apart(question_payload):
    question_payload.update(questionId="1000021", questionFrontendId="2501")
    problem = QuestionSchema.model_validate(question_payload).to_domain("link")

    assert problem.id == "1000021"
    assert problem.frontend_id == "2501"


def test_envelopes_expose_question(question_payload):
    specific = QuestionEnvelope.model_validate({"data": {"question": question_payload}})
    daily = DailyEnvelope.model_validate(
        {"data": {"activeDailyCodingChallengeQuestion": {"question": question_payload}}}
    )

    assert specific.question.title == "Two Sum"
    assert daily.question.title == "Two Sum"


def test_null_question_is_rejected():
    with pytest.raises(ValidationError):
        QuestionEnvelope.model_validate({"data": {"question": None}})


def test_unknown_difficulty_is_rejected(question_payload):
    question_payload["difficulty"] = "Impossible"
    with pytest.raises(ValidationError):
        QuestionSchema.model_validate(question_payload)


def test_daily_shape_does_not_match_specific_envelope(question_payload):
    with pytest.raises(ValidationError):
        QuestionEnvelope.model_validate(
            {"data": {"activeDailyCodingChallengeQuestion": {"question": question_payload}}}
        )
