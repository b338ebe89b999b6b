"""Remediation roadmap generation.

Gaps (threshold fixed at 0.5) are grouped into one line per subcategory.
Priority:
    immediate  Critical and worst score < 0.25
    short      Critical or worst score < 0.25
    medium     otherwise
Effort:
    medium     any gap in the group is unanswered
    high       worst score < 0.25
    low        otherwise
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import structlog

from maturity.analysis.gaps import detect_critical_gaps
from maturity.config.loader import (
    get_default_ownership,
    get_roadmap_labels,
    get_roadmap_low_score,
    get_roadmap_max_items,
    get_roadmap_timeframes,
)
from maturity.models.answers import Answer
from maturity.models.catalog import Question, ReferenceCatalog
from maturity.models.reports import Gap, RoadmapItem
from maturity.models.shared import PRIORITY_ORDER, Criticality, Effort, RoadmapPriority

logger = structlog.get_logger(__name__)

ROADMAP_GAP_THRESHOLD = 0.5


@dataclass(frozen=True)
class SubcategorySummary:
    """Worst-case view of the gaps in one subcategory."""
    subcat_id: str
    subcat_name: str
    domain_name: str
    criticality: str
    worst_score: float
    has_unanswered: bool
    ownership_type: str
    question_id: str


def summarize_gaps(gaps: Sequence[Gap]) -> list[SubcategorySummary]:
    """Group gaps by subcategory, in first-seen order."""
    groups: dict[str, list[Gap]] = {}
    for gap in gaps:
        groups.setdefault(gap.subcat_id, []).append(gap)

    summaries: list[SubcategorySummary] = []
    for subcat_id, group in groups.items():
        first = group[0]
        worst = min(group, key=lambda g: g.sort_score)  # first wins on ties
        has_critical = any(g.criticality == Criticality.CRITICAL.value for g in group)
        summaries.append(SubcategorySummary(
            subcat_id=subcat_id,
            subcat_name=first.subcat_name,
            domain_name=first.domain_name,
            criticality=Criticality.CRITICAL.value if has_critical else first.criticality,
            worst_score=worst.sort_score,
            has_unanswered=any(g.is_unanswered for g in group),
            ownership_type=first.ownership_type or get_default_ownership(),
            question_id=worst.question_id,
        ))
    return summaries


def classify_priority(criticality: str, worst_score: float, low_score: float) -> RoadmapPriority:
    is_critical = criticality == Criticality.CRITICAL.value
    is_low = worst_score < low_score
    if is_critical and is_low:
        return RoadmapPriority.IMMEDIATE
    if is_critical or is_low:
        return RoadmapPriority.SHORT
    return RoadmapPriority.MEDIUM


def estimate_effort(has_unanswered: bool, worst_score: float, low_score: float) -> Effort:
    if has_unanswered:
        return Effort.MEDIUM
    if worst_score < low_score:
        return Effort.HIGH
    return Effort.LOW


def generate_roadmap(
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
    max_items: Optional[int] = None,
) -> list[RoadmapItem]:
    """Prioritized remediation actions, at most ``max_items`` (default 10)."""
    if max_items is None:
        max_items = get_roadmap_max_items()
    low_score = get_roadmap_low_score()
    timeframes = get_roadmap_timeframes()
    labels = get_roadmap_labels()

    gaps = detect_critical_gaps(answers, active_questions, catalog, threshold=ROADMAP_GAP_THRESHOLD)
    summaries = summarize_gaps(gaps)
    summaries.sort(key=lambda s: (0 if s.criticality == Criticality.CRITICAL.value else 1, s.worst_score))

    roadmap: list[RoadmapItem] = []
    for summary in summaries[:max(max_items, 0)]:
        priority = classify_priority(summary.criticality, summary.worst_score, low_score)
        is_critical = summary.criticality == Criticality.CRITICAL.value
        roadmap.append(RoadmapItem(
            priority=priority,
            timeframe=timeframes[priority.value],
            domain=summary.domain_name,
            action=labels["action_template"].format(subcat_name=summary.subcat_name),
            impact=labels["impact_critical"] if is_critical else labels["impact_default"],
            effort=estimate_effort(summary.has_unanswered, summary.worst_score, low_score),
            ownership_type=summary.ownership_type,
            question_id=summary.question_id,
            subcat_id=summary.subcat_id,
            criticality=summary.criticality,
            worst_score=summary.worst_score,
        ))

    # Stable: ties keep the criticality/score order above
    roadmap.sort(key=lambda item: PRIORITY_ORDER[item.priority])

    logger.info("roadmap_generated", items=len(roadmap), subcategories_with_gaps=len(summaries))
    return roadmap
