"""Critical gap detection.

A gap is an applicable question in a High/Critical subcategory that is
unanswered or scores below the threshold. Output order: Critical before
High, then worst score first (unanswered counts as 0).
"""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

import structlog

from maturity.config.loader import get_gap_threshold, get_high_risk_criticalities
from maturity.models.answers import Answer
from maturity.models.catalog import Question, ReferenceCatalog
from maturity.models.reports import Gap
from maturity.models.shared import Criticality
from maturity.scoring.question import score_question, unique_questions

logger = structlog.get_logger(__name__)


def _gap_sort_key(gap: Gap) -> tuple[int, float]:
    return (0 if gap.criticality == Criticality.CRITICAL.value else 1, gap.sort_score)


def detect_critical_gaps(
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
    threshold: Optional[float] = None,
) -> list[Gap]:
    """Return gaps sorted by severity.

    Args:
        answers: Answer snapshot keyed by question id
        active_questions: Questions in scope; duplicate ids keep the first
        catalog: Reference catalog
        threshold: Effective score below which an answered question is a gap
            (default from config, 0.5)
    """
    if threshold is None:
        threshold = get_gap_threshold()
    high_risk = get_high_risk_criticalities()

    gaps: list[Gap] = []
    for q in unique_questions(active_questions):
        subcat = catalog.get_subcategory(q.subcat_id)
        domain = catalog.get_domain(q.domain_id)
        if subcat is None or domain is None:
            logger.debug("question_skipped", question_id=q.question_id, reason="dangling_reference")
            continue
        if subcat.criticality.value not in high_risk:
            continue

        answer = answers.get(q.question_id)
        scored = score_question(answer, catalog, q.question_id)
        if not scored.is_applicable:
            continue
        if scored.effective_score is not None and scored.effective_score >= threshold:
            continue

        gaps.append(Gap(
            question_id=q.question_id,
            question_text=q.question_text,
            subcat_id=q.subcat_id,
            subcat_name=subcat.subcat_name,
            domain_id=q.domain_id,
            domain_name=domain.domain_name,
            criticality=subcat.criticality.value,
            effective_score=scored.effective_score,
            response=answer.response.value if answer and answer.response else None,
            evidence_ok=answer.evidence_ok.value if answer and answer.evidence_ok else None,
            ownership_type=q.ownership_type,
            nist_function=domain.nist_ai_rmf_function,
        ))

    gaps.sort(key=_gap_sort_key)
    logger.info("critical_gaps_detected", count=len(gaps), threshold=threshold)
    return gaps
