"""Catalog, answer and result models."""
from maturity.models.answers import Answer, answers_by_question, load_answers
from maturity.models.catalog import (
    Domain,
    EvidenceOption,
    FrameworkCategory,
    FrameworkRule,
    MaturityLevel,
    Question,
    ReferenceCatalog,
    ResponseOption,
    Subcategory,
)
from maturity.models.metrics import (
    DomainMetrics,
    FrameworkCategoryMetrics,
    NistFunctionMetrics,
    OverallMetrics,
    OwnershipMetrics,
    QuestionScore,
    SubcategoryMetrics,
)
from maturity.models.reports import FrameworkCoverage, Gap, RoadmapItem
from maturity.models.shared import Criticality, Effort, ResponseValue, RoadmapPriority

__all__ = [
    "Answer",
    "answers_by_question",
    "load_answers",
    "Domain",
    "EvidenceOption",
    "FrameworkCategory",
    "FrameworkRule",
    "MaturityLevel",
    "Question",
    "ReferenceCatalog",
    "ResponseOption",
    "Subcategory",
    "DomainMetrics",
    "FrameworkCategoryMetrics",
    "NistFunctionMetrics",
    "OverallMetrics",
    "OwnershipMetrics",
    "QuestionScore",
    "SubcategoryMetrics",
    "FrameworkCoverage",
    "Gap",
    "RoadmapItem",
    "Criticality",
    "Effort",
    "ResponseValue",
    "RoadmapPriority",
]
