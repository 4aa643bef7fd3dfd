from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ComparisonCategory = Literal["good", "mid", "bad"]


class PromptIn(BaseModel):
    message: str = Field(
        description="Raw prompt, sent upstream as a single system message.",
        examples=["Explain Python generators in two sentences."],
    )


class CompletionMessage(BaseModel):
    role: str = Field(examples=["assistant"])
    content: str | None = None


class PromptCompletionOut(BaseModel):
    completion: CompletionMessage


class QAPayload(BaseModel):
    """One Stack Overflow question with three of its answers."""

    QuestionId: int | str = Field(examples=[11227809])
    QuestionTitle: str = Field(examples=["Why is processing a sorted array faster?"])
    QuestionText: str
    Tag: str = Field(examples=["python"])
    MaxScoreAnswerContent: str = Field(description="Highest-voted answer.")
    ClosestAnswerContent: str = Field(description="Answer closest to the median score.")
    MinScoreAnswerContent: str = Field(description="Lowest-voted answer.")


class ComparisonIn(BaseModel):
    message: QAPayload
    model: str = Field(description="Upstream model identifier.", examples=["gpt-4o-mini"])


class ComparisonResult(BaseModel):
    """
    The model's structured answer plus the derived `result` category.

    Values are deliberately untyped: the model is asked for ratings as strings
    and routinely answers with numbers, and both are accepted as-is. Extra keys
    returned by the model are kept.
    """

    model_config = ConfigDict(extra="allow")

    questionId: Any
    question: Any
    tag: Any
    model: Any
    answer1: Any
    answer2: Any
    answer3: Any
    better_question: Any
    why_better: Any
    rating_Answer1: Any
    explanation_for_rating1: Any
    rating_Answer2: Any
    explanation_for_rating2: Any
    rating_Answer3: Any
    explanation_for_rating3: Any
    result: ComparisonCategory | None = None


class ComparisonOut(BaseModel):
    completion: ComparisonResult


class StoredRecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    questionId: str | None
    tag: str | None
    model: str | None
    fullMessage: str | None
    answer1: str | None
    ratingAnswer1: int | None
    explanationForRating1: str | None
    answer2: str | None
    ratingAnswer2: int | None
    explanationForRating2: str | None
    answer3: str | None
    ratingAnswer3: int | None
    explanationForRating3: str | None
    result: str | None
