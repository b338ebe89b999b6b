"""Hierarchical aggregation: questions → subcategory → domain.

Two policies differ on purpose:
- Subcategory: a subcategory with no answered question scores 0, so
  unstarted work pulls aggregates down.
- Domain: only subcategories with at least one answered, applicable
  question (and a positive weight) enter the weighted mean. Unstarted
  subcategories still count toward coverage.
"""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

import structlog

from maturity.config.loader import get_critical_gap_score, get_high_risk_criticalities
from maturity.models.answers import Answer
from maturity.models.catalog import Domain, Question, ReferenceCatalog, Subcategory
from maturity.models.metrics import DomainMetrics, SubcategoryMetrics
from maturity.scoring.question import score_question, unique_questions

logger = structlog.get_logger(__name__)


def subcategory_metrics(
    subcat: Subcategory,
    questions: Sequence[Question],
    answers: Mapping[str, Answer],
    catalog: ReferenceCatalog,
) -> SubcategoryMetrics:
    """Roll up the given questions (already filtered to ``subcat``)."""
    high_risk = subcat.criticality.value in get_high_risk_criticalities()
    gap_score = get_critical_gap_score()

    total_effective = 0.0
    applicable_count = 0
    answered_count = 0
    critical_gaps = 0

    for q in questions:
        answer = answers.get(q.question_id)
        scored = score_question(answer, catalog, q.question_id)

        if answer is not None and answer.response is not None:
            answered_count += 1

        if not scored.is_applicable:
            continue
        applicable_count += 1
        if scored.effective_score is not None:
            total_effective += scored.effective_score
            if high_risk and scored.effective_score < gap_score:
                critical_gaps += 1

    score = total_effective / applicable_count if applicable_count > 0 and answered_count > 0 else 0.0
    coverage = answered_count / applicable_count if applicable_count > 0 else 0.0

    return SubcategoryMetrics(
        subcat_id=subcat.subcat_id,
        subcat_name=subcat.subcat_name,
        domain_id=subcat.domain_id,
        score=score,
        maturity_level=catalog.get_maturity_level(score),
        total_questions=len(questions),
        answered_questions=answered_count,
        applicable_questions=applicable_count,
        coverage=min(coverage, 1.0),
        criticality=subcat.criticality.value,
        weight=subcat.weight,
        critical_gaps=critical_gaps,
        ownership_type=subcat.ownership_type,
    )


def domain_metrics(
    domain: Domain,
    questions: Sequence[Question],
    answers: Mapping[str, Answer],
    catalog: ReferenceCatalog,
) -> Optional[DomainMetrics]:
    """Roll up a domain from its active questions; None when it has none."""
    domain_questions = [q for q in questions if q.domain_id == domain.domain_id]
    if not domain_questions:
        return None

    children: list[SubcategoryMetrics] = []
    for subcat in catalog.subcategories_for_domain(domain.domain_id):
        subcat_questions = [q for q in domain_questions if q.subcat_id == subcat.subcat_id]
        if subcat_questions:
            children.append(subcategory_metrics(subcat, subcat_questions, answers, catalog))

    for q in domain_questions:
        subcat = catalog.get_subcategory(q.subcat_id)
        if subcat is None or subcat.domain_id != domain.domain_id:
            logger.debug("question_skipped", question_id=q.question_id, reason="dangling_subcategory")

    total_weighted = 0.0
    total_weight = 0.0
    total_answered = 0
    total_applicable = 0
    total_critical_gaps = 0

    for sm in children:
        if sm.contributes_to_parent and sm.weight > 0:
            total_weighted += sm.score * sm.weight
            total_weight += sm.weight
        total_answered += sm.answered_questions
        total_applicable += sm.applicable_questions
        total_critical_gaps += sm.critical_gaps

    score = total_weighted / total_weight if total_weight > 0 else 0.0
    coverage = total_answered / total_applicable if total_applicable > 0 else 0.0

    return DomainMetrics(
        domain_id=domain.domain_id,
        domain_name=domain.domain_name,
        nist_function=domain.nist_ai_rmf_function,
        score=score,
        maturity_level=catalog.get_maturity_level(score),
        total_questions=len(domain_questions),
        answered_questions=total_answered,
        applicable_questions=total_applicable,
        coverage=min(coverage, 1.0),
        critical_gaps=total_critical_gaps,
        subcategory_metrics=tuple(children),
    )


def aggregate_subcategory(
    subcat_id: str,
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
) -> Optional[SubcategoryMetrics]:
    """Metrics for one subcategory over the active question set.

    Returns None when ``subcat_id`` is not in the catalog.
    """
    subcat = catalog.get_subcategory(subcat_id)
    if subcat is None:
        logger.debug("subcategory_not_found", subcat_id=subcat_id)
        return None

    questions = [q for q in unique_questions(active_questions) if q.subcat_id == subcat_id]
    return subcategory_metrics(subcat, questions, answers, catalog)


def aggregate_domain(
    domain_id: str,
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
) -> Optional[DomainMetrics]:
    """Metrics for one domain over the active question set.

    Returns None when ``domain_id`` is not in the catalog or has no
    active question.
    """
    domain = catalog.get_domain(domain_id)
    if domain is None:
        logger.debug("domain_not_found", domain_id=domain_id)
        return None

    return domain_metrics(domain, unique_questions(active_questions), answers, catalog)
