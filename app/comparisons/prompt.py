from __future__ import annotations

from app.comparisons.schemas import QAPayload


def build_comparison_prompt(payload: QAPayload, model: str) -> str:
    """
    Build the single system prompt sent upstream for an answer comparison.

    The model is asked to rate three Stack Overflow answers and to echo the
    question/answers back inside a flat JSON skeleton, so the reply can be
    persisted without joining it to the request again. Values are interpolated
    verbatim (no JSON escaping), which means answers containing quotes can make
    the reply unparsable; the caller rejects those replies.
    """

    question = f"{payload.QuestionTitle}, {payload.QuestionText}"

    return "\n".join(
        [
            f"I have this question: {question}.",
            "And I have these three answers from Stack Overflow:",
            f"1. code number 1 - {payload.MaxScoreAnswerContent},",
            f"2. code number 2 - {payload.ClosestAnswerContent},",
            f"3. code number 3 - {payload.MinScoreAnswerContent}.",
            "",
            "Tell me which of these three answers best answers the question I provided and "
            "explain why. Also, rate each answer on a scale of 1-10 with a brief explanation "
            "for each rating. Ensure that the answer does address the question and not just "
            "based on the level of extraction.",
            "",
            "Respond ONLY in JSON format as follows (do not nest any fields):",
            "",
            "{",
            f'    "questionId": "{payload.QuestionId}",',
            f'    "question": "{question}",',
            f'    "tag": "{payload.Tag}",',
            f'    "model": "{model}",',
            f'    "answer1": "{payload.MaxScoreAnswerContent}",',
            f'    "answer2": "{payload.ClosestAnswerContent}",',
            f'    "answer3": "{payload.MinScoreAnswerContent}",',
            '    "better_question": "{answer}",',
            '    "why_better": "{explanation}",',
            '    "rating_Answer1": "{rating}",',
            '    "explanation_for_rating1": "{explanation}",',
            '    "rating_Answer2": "{rating}",',
            '    "explanation_for_rating2": "{explanation}",',
            '    "rating_Answer3": "{rating}",',
            '    "explanation_for_rating3": "{explanation}"',
            "}",
        ]
    )
