"""create gpt_responses table

Revision ID: 0001_create_gpt_responses
Revises:
Create Date: 2026-10-17

"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_create_gpt_responses"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "gpt_responses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("questionId", sa.String(length=255), nullable=True),
        sa.Column("tag", sa.String(length=255), nullable=True),
        sa.Column("model", sa.String(length=255), nullable=True),
        sa.Column("fullMessage", sa.Text(), nullable=True),
        sa.Column("answer1", sa.Text(), nullable=True),
        sa.Column("ratingAnswer1", sa.Integer(), nullable=True),
        sa.Column("explanationForRating1", sa.Text(), nullable=True),
        sa.Column("answer2", sa.Text(), nullable=True),
        sa.Column("ratingAnswer2", sa.Integer(), nullable=True),
        sa.Column("explanationForRating2", sa.Text(), nullable=True),
        sa.Column("answer3", sa.Text(), nullable=True),
        sa.Column("ratingAnswer3", sa.Integer(), nullable=True),
        sa.Column("explanationForRating3", sa.Text(), nullable=True),
        sa.Column("result", sa.String(length=16), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("gpt_responses")
