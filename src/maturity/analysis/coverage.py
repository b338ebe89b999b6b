"""Framework coverage over the authoritative framework set.

Raw citations are normalized through the catalog's ordered name rules;
citations that match no rule, or map outside the authoritative set
(MITRE ATLAS, STRIDE, CIS, SOC 2, GDPR, EU AI Act...), are dropped.
"""
from __future__ import annotations

from typing import Mapping, Sequence

import structlog

from maturity.models.answers import Answer
from maturity.models.catalog import Question, ReferenceCatalog
from maturity.models.reports import FrameworkCoverage
from maturity.models.shared import ResponseValue
from maturity.scoring.frameworks import authoritative_frameworks_for_question
from maturity.scoring.question import score_question, unique_questions

logger = structlog.get_logger(__name__)


def framework_coverage(
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
) -> list[FrameworkCoverage]:
    """Per-framework totals, answered counts and mean score, most-cited first."""
    totals: dict[str, int] = {}
    answered: dict[str, int] = {}
    scores: dict[str, list[float]] = {}

    for q in unique_questions(active_questions):
        frameworks = authoritative_frameworks_for_question(q, catalog)
        if not frameworks:
            continue

        answer = answers.get(q.question_id)
        is_answered = answer is not None and answer.response is not None and answer.response != ResponseValue.NA
        effective = score_question(answer, catalog, q.question_id).effective_score if is_answered else None

        for name in frameworks:
            totals[name] = totals.get(name, 0) + 1
            answered.setdefault(name, 0)
            scores.setdefault(name, [])
            if is_answered:
                answered[name] += 1
                if effective is not None:
                    scores[name].append(effective)

    results = [
        FrameworkCoverage(
            framework=name,
            total_questions=total,
            answered_questions=answered[name],
            average_score=sum(scores[name]) / len(scores[name]) if scores[name] else 0.0,
            coverage=answered[name] / total if total > 0 else 0.0,
        )
        for name, total in totals.items()
    ]
    results.sort(key=lambda fc: fc.total_questions, reverse=True)

    logger.info("framework_coverage_computed", frameworks=len(results))
    return results
