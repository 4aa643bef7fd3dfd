from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db import Base


class GptResponse(Base):
    """One persisted answer comparison. Column names match the existing SQL Server table."""

    __tablename__ = "gpt_responses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    questionId: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tag: Mapped[str | None] = mapped_column(String(255), nullable=True)
    model: Mapped[str | None] = mapped_column(String(255), nullable=True)
    fullMessage: Mapped[str | None] = mapped_column(Text, nullable=True)

    answer1: Mapped[str | None] = mapped_column(Text, nullable=True)
    ratingAnswer1: Mapped[int | None] = mapped_column(Integer, nullable=True)
    explanationForRating1: Mapped[str | None] = mapped_column(Text, nullable=True)

    answer2: Mapped[str | None] = mapped_column(Text, nullable=True)
    ratingAnswer2: Mapped[int | None] = mapped_column(Integer, nullable=True)
    explanationForRating2: Mapped[str | None] = mapped_column(Text, nullable=True)

    answer3: Mapped[str | None] = mapped_column(Text, nullable=True)
    ratingAnswer3: Mapped[int | None] = mapped_column(Integer, nullable=True)
    explanationForRating3: Mapped[str | None] = mapped_column(Text, nullable=True)

    result: Mapped[str | None] = mapped_column(String(16), nullable=True)
