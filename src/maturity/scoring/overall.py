"""Organization-wide aggregation.

Fans out to the domain and cross-cutting aggregators and combines domain
scores into one overall score:

- Domain weight = mean of its subcategory weights.
- Only domains with answered, applicable questions enter the weighted mean.
- Coverage denominator = number of active questions passed in (clamped to 1).
- Evidence readiness = mean evidence multiplier over answered, non-NA
  questions; an empty evidence field is looked up as "Não", unlike the
  degraded multiplier used for per-question scoring.
"""
from __future__ import annotations

from typing import Mapping, Sequence

import structlog

from maturity.config.loader import get_evidence_readiness_fallback
from maturity.models.answers import Answer
from maturity.models.catalog import Question, ReferenceCatalog
from maturity.models.metrics import DomainMetrics, OverallMetrics
from maturity.models.shared import ResponseValue
from maturity.scoring.aggregation import domain_metrics
from maturity.scoring.cross_cutting import (
    aggregate_framework_categories,
    aggregate_nist_functions,
    aggregate_ownership,
)
from maturity.scoring.question import unique_questions

logger = structlog.get_logger(__name__)


def evidence_readiness(
    answers: Mapping[str, Answer],
    questions: Sequence[Question],
    catalog: ReferenceCatalog,
) -> float:
    fallback = get_evidence_readiness_fallback()
    total = 0.0
    count = 0
    for q in questions:
        answer = answers.get(q.question_id)
        if answer is None or answer.response is None or answer.response == ResponseValue.NA:
            continue
        evidence = answer.evidence_ok if answer.evidence_ok is not None else fallback
        multiplier = catalog.get_evidence_multiplier(evidence)
        if multiplier is not None:
            total += multiplier
            count += 1
    return min(1.0, max(0.0, total / count)) if count > 0 else 0.0


def aggregate_overall(
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
) -> OverallMetrics:
    """Compute the full metrics snapshot for the active question set."""
    questions = unique_questions(active_questions)

    domains: list[DomainMetrics] = []
    for domain in catalog.domains:
        dm = domain_metrics(domain, questions, answers, catalog)
        if dm is not None:
            domains.append(dm)

    total_weighted = 0.0
    total_weight = 0.0
    total_answered = 0
    total_applicable = 0
    total_critical_gaps = 0

    for dm in domains:
        weight = dm.average_weight
        if dm.answered_questions > 0 and dm.applicable_questions > 0 and weight > 0:
            total_weighted += dm.score * weight
            total_weight += weight
        total_answered += dm.answered_questions
        total_applicable += dm.applicable_questions
        total_critical_gaps += dm.critical_gaps

    overall_score = total_weighted / total_weight if total_weight > 0 else 0.0
    coverage = total_answered / len(questions) if questions else 0.0

    metrics = OverallMetrics(
        overall_score=overall_score,
        maturity_level=catalog.get_maturity_level(overall_score),
        total_questions=len(questions),
        answered_questions=total_answered,
        applicable_questions=total_applicable,
        coverage=min(coverage, 1.0),
        evidence_readiness=evidence_readiness(answers, questions, catalog),
        critical_gaps=total_critical_gaps,
        domain_metrics=tuple(domains),
        nist_function_metrics=tuple(aggregate_nist_functions(domains, catalog)),
        ownership_metrics=tuple(aggregate_ownership(answers, questions, catalog)),
        framework_category_metrics=tuple(aggregate_framework_categories(answers, questions, catalog)),
    )

    logger.info(
        "overall_metrics_computed",
        active_questions=len(questions),
        domains=len(domains),
        overall_score=round(overall_score, 4),
        coverage=round(metrics.coverage, 4),
        critical_gaps=total_critical_gaps,
    )
    return metrics
