"""Gap, framework coverage and roadmap report objects."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from maturity.models.shared import Effort, RoadmapPriority


@dataclass(frozen=True)
class Gap:
    """An applicable question below threshold in a High/Critical subcategory."""
    question_id: str
    question_text: str
    subcat_id: str
    subcat_name: str
    domain_id: str
    domain_name: str
    criticality: str
    effective_score: Optional[float]  # None when unanswered
    response: Optional[str]
    evidence_ok: Optional[str]
    ownership_type: Optional[str] = None
    nist_function: Optional[str] = None

    @property
    def is_unanswered(self) -> bool:
        return self.effective_score is None

    @property
    def sort_score(self) -> float:
        """Score used for ordering; unanswered counts as 0."""
        return self.effective_score if self.effective_score is not None else 0.0

    def to_dict(self, unanswered_label: str = "Not answered") -> dict[str, Any]:
        return {
            "question_id": self.question_id,
            "question_text": self.question_text,
            "subcat_id": self.subcat_id,
            "subcat_name": self.subcat_name,
            "domain_id": self.domain_id,
            "domain_name": self.domain_name,
            "criticality": self.criticality,
            "effective_score": round(self.sort_score, 4),
            "response": self.response or unanswered_label,
            "evidence_ok": self.evidence_ok or "N/A",
            "ownership_type": self.ownership_type,
            "nist_function": self.nist_function,
        }


@dataclass(frozen=True)
class FrameworkCoverage:
    framework: str
    total_questions: int
    answered_questions: int
    average_score: float
    coverage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "framework": self.framework,
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
            "average_score": round(self.average_score, 4),
            "coverage": round(self.coverage, 4),
        }


@dataclass(frozen=True)
class RoadmapItem:
    """One remediation action, one per subcategory."""
    priority: RoadmapPriority
    timeframe: str
    domain: str
    action: str
    impact: str
    effort: Effort
    ownership_type: str
    question_id: str  # worst-scoring gap, for deep-linking
    subcat_id: str
    criticality: str
    worst_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "priority": self.priority.value,
            "timeframe": self.timeframe,
            "domain": self.domain,
            "action": self.action,
            "impact": self.impact,
            "effort": self.effort.value,
            "ownership_type": self.ownership_type,
            "question_id": self.question_id,
            "subcat_id": self.subcat_id,
            "criticality": self.criticality,
            "worst_score": round(self.worst_score, 4),
        }
