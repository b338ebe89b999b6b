"""Scoring result objects.

All metrics are immutable value objects, recomputed on every pass.
Score transform: every ``score``/``coverage`` lies in [0, 1]; ``to_dict``
rounds to 4 decimals for reporting only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from maturity.models.catalog import MaturityLevel


def _round(value: Optional[float]) -> Optional[float]:
    return round(value, 4) if value is not None else None


def maturity_to_dict(level: Optional[MaturityLevel]) -> Optional[dict[str, Any]]:
    if level is None:
        return None
    return {"level": level.level, "name": level.name, "color": level.color}


@dataclass(frozen=True)
class QuestionScore:
    """Effective score of one question.

    ``effective_score = response_score * evidence_multiplier``; all three are
    None for an unanswered question (still applicable) and for an NA answer
    (not applicable).
    """
    question_id: str
    response_score: Optional[float]
    evidence_multiplier: Optional[float]
    effective_score: Optional[float]
    is_applicable: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "question_id": self.question_id,
            "response_score": _round(self.response_score),
            "evidence_multiplier": _round(self.evidence_multiplier),
            "effective_score": _round(self.effective_score),
            "is_applicable": self.is_applicable,
        }


@dataclass(frozen=True)
class SubcategoryMetrics:
    subcat_id: str
    subcat_name: str
    domain_id: str
    score: float
    maturity_level: Optional[MaturityLevel]
    total_questions: int
    answered_questions: int
    applicable_questions: int
    coverage: float
    criticality: str
    weight: float
    critical_gaps: int
    ownership_type: Optional[str] = None

    @property
    def contributes_to_parent(self) -> bool:
        """True when the subcategory has at least one answered, applicable question."""
        return self.applicable_questions > 0 and self.answered_questions > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "subcat_id": self.subcat_id,
            "subcat_name": self.subcat_name,
            "domain_id": self.domain_id,
            "score": _round(self.score),
            "maturity_level": maturity_to_dict(self.maturity_level),
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
            "applicable_questions": self.applicable_questions,
            "coverage": _round(self.coverage),
            "criticality": self.criticality,
            "weight": self.weight,
            "critical_gaps": self.critical_gaps,
            "ownership_type": self.ownership_type,
        }


@dataclass(frozen=True)
class DomainMetrics:
    domain_id: str
    domain_name: str
    nist_function: Optional[str]
    score: float
    maturity_level: Optional[MaturityLevel]
    total_questions: int
    answered_questions: int
    applicable_questions: int
    coverage: float
    critical_gaps: int
    subcategory_metrics: tuple[SubcategoryMetrics, ...] = field(default_factory=tuple)

    @property
    def average_weight(self) -> float:
        """Mean of the child subcategory weights; the domain's weight one level up."""
        if not self.subcategory_metrics:
            return 0.0
        return sum(sm.weight for sm in self.subcategory_metrics) / len(self.subcategory_metrics)

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain_id": self.domain_id,
            "domain_name": self.domain_name,
            "nist_function": self.nist_function,
            "score": _round(self.score),
            "maturity_level": maturity_to_dict(self.maturity_level),
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
            "applicable_questions": self.applicable_questions,
            "coverage": _round(self.coverage),
            "critical_gaps": self.critical_gaps,
            "subcategories": [sm.to_dict() for sm in self.subcategory_metrics],
        }


@dataclass(frozen=True)
class NistFunctionMetrics:
    function: str
    score: float
    maturity_level: Optional[MaturityLevel]
    total_questions: int
    answered_questions: int
    coverage: float
    domain_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "function": self.function,
            "score": _round(self.score),
            "maturity_level": maturity_to_dict(self.maturity_level),
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
            "coverage": _round(self.coverage),
            "domain_count": self.domain_count,
        }


@dataclass(frozen=True)
class OwnershipMetrics:
    ownership_type: str
    score: float
    maturity_level: Optional[MaturityLevel]
    total_questions: int
    answered_questions: int
    coverage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "ownership_type": self.ownership_type,
            "score": _round(self.score),
            "maturity_level": maturity_to_dict(self.maturity_level),
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
            "coverage": _round(self.coverage),
        }


@dataclass(frozen=True)
class FrameworkCategoryMetrics:
    category_id: str
    category_name: str
    score: float
    maturity_level: Optional[MaturityLevel]
    total_questions: int
    answered_questions: int
    coverage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "category_name": self.category_name,
            "score": _round(self.score),
            "maturity_level": maturity_to_dict(self.maturity_level),
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
            "coverage": _round(self.coverage),
        }


@dataclass(frozen=True)
class OverallMetrics:
    """Organization-wide snapshot with every cross-cutting grouping."""
    overall_score: float
    maturity_level: Optional[MaturityLevel]
    total_questions: int
    answered_questions: int
    applicable_questions: int
    coverage: float
    evidence_readiness: float
    critical_gaps: int
    domain_metrics: tuple[DomainMetrics, ...] = field(default_factory=tuple)
    nist_function_metrics: tuple[NistFunctionMetrics, ...] = field(default_factory=tuple)
    ownership_metrics: tuple[OwnershipMetrics, ...] = field(default_factory=tuple)
    framework_category_metrics: tuple[FrameworkCategoryMetrics, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_score": _round(self.overall_score),
            "maturity_level": maturity_to_dict(self.maturity_level),
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
            "applicable_questions": self.applicable_questions,
            "coverage": _round(self.coverage),
            "evidence_readiness": _round(self.evidence_readiness),
            "critical_gaps": self.critical_gaps,
            "domains": [dm.to_dict() for dm in self.domain_metrics],
            "nist_functions": [nm.to_dict() for nm in self.nist_function_metrics],
            "ownership": [om.to_dict() for om in self.ownership_metrics],
            "framework_categories": [fm.to_dict() for fm in self.framework_category_metrics],
        }
