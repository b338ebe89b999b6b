"""Per-question scoring.

effective_score = response_score * evidence_multiplier

- No answer / no response: unanswered but applicable (a full gap).
- Response NA: not applicable, excluded from every denominator.
- Evidence empty or NA: degraded multiplier (0.7 by default), below
  "partial" evidence and above "none".
"""
from __future__ import annotations

from typing import Iterable, Optional

from maturity.config.loader import get_missing_evidence_multiplier
from maturity.models.answers import Answer
from maturity.models.catalog import Question, ReferenceCatalog
from maturity.models.metrics import QuestionScore
from maturity.models.shared import ResponseValue


def score_question(
    answer: Optional[Answer],
    catalog: ReferenceCatalog,
    question_id: str = "",
) -> QuestionScore:
    """Compute the effective score of one (possibly unanswered) question."""
    qid = answer.question_id if answer is not None else question_id

    if answer is None or answer.response is None:
        return QuestionScore(
            question_id=qid,
            response_score=None,
            evidence_multiplier=None,
            effective_score=None,
            is_applicable=True,
        )

    if answer.response == ResponseValue.NA:
        return QuestionScore(
            question_id=qid,
            response_score=None,
            evidence_multiplier=None,
            effective_score=None,
            is_applicable=False,
        )

    response_score = catalog.get_response_score(answer.response)
    multiplier = catalog.get_evidence_multiplier(answer.evidence_ok)
    if multiplier is None:
        multiplier = get_missing_evidence_multiplier()

    effective: Optional[float] = None
    if response_score is not None:
        effective = min(1.0, max(0.0, response_score * multiplier))

    return QuestionScore(
        question_id=qid,
        response_score=response_score,
        evidence_multiplier=multiplier,
        effective_score=effective,
        is_applicable=True,
    )


def unique_questions(questions: Iterable[Question]) -> list[Question]:
    """Drop repeated question ids; the first occurrence wins.

    Active sets are built by concatenating default and custom question
    lists, which can collide.
    """
    seen: set[str] = set()
    unique: list[Question] = []
    for q in questions:
        if q.question_id in seen:
            continue
        seen.add(q.question_id)
        unique.append(q)
    return unique
