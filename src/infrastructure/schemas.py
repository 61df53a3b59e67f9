"""Pydantic schemas for LeetCode GraphQL responses."""

from pydantic import BaseModel, Field

from domain.models import CodeSnippet, Difficulty, Problem


class CodeSnippetSchema(BaseModel):
    """Starter code entry of a question."""

    lang: str
    lang_slug: str = Field(alias="langSlug")
    code: str


class TopicTagSchema(BaseModel):
    name: str


class QuestionSchema(BaseModel):
    """Question payload shared by both query shapes."""

    question_id: str = Field(alias="questionId")
    question_frontend_id: str = Field(alias="questionFrontendId")
    title: str
    title_slug: str = Field(alias="titleSlug")
    content: str
    difficulty: Difficulty
    topic_tags: list[TopicTagSchema] = Field(alias="topicTags")
    code_snippets: list[CodeSnippetSchema] = Field(alias="codeSnippets")

    def to_domain(self, link: str) -> Problem:
        return Problem(
            id=self.question_id,
            frontend_id=self.question_frontend_id,
            title=self.title,
            title_slug=self.title_slug,
            content_html=self.content,
            difficulty=self.difficulty,
            link=link,
            topic_tags=frozenset(tag.name for tag in self.topic_tags),
            snippets=tuple(
                CodeSnippet(
                    language_label=snippet.lang,
                    language_slug=snippet.lang_slug,
                    code=snippet.code,
                )
                for snippet in self.code_snippets
            ),
        )


class QuestionData(BaseModel):
    question: QuestionSchema


class QuestionEnvelope(BaseModel):
    """Response of the ``question(titleSlug:)`` query."""

    data: QuestionData

    @property
    def question(self) -> QuestionSchema:
        return self.data.question


class DailyChallengeSchema(BaseModel):
    question: QuestionSchema


class DailyData(BaseModel):
    active_daily_challenge: DailyChallengeSchema = Field(alias="activeDailyCodingChallengeQuestion")


class DailyEnvelope(BaseModel):
    """Response of the ``activeDailyCodingChallengeQuestion`` query."""

    data: DailyData

    @property
    def question(self) -> QuestionSchema:
        return self.data.active_daily_challenge.question
