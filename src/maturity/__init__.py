"""Security-maturity scoring and gap-analysis engine.

Pure functions over (answers, active questions, reference catalog):

    from maturity import aggregate_overall, detect_critical_gaps, generate_roadmap
"""
from maturity.analysis import detect_critical_gaps, framework_coverage, generate_roadmap
from maturity.catalog import build_catalog, load_catalog, validate_catalog
from maturity.models import Answer, Question, ReferenceCatalog, load_answers
from maturity.scoring import (
    aggregate_domain,
    aggregate_framework_categories,
    aggregate_nist_functions,
    aggregate_overall,
    aggregate_ownership,
    aggregate_subcategory,
    score_question,
)

__version__ = "0.1.0"

__all__ = [
    "Answer",
    "Question",
    "ReferenceCatalog",
    "load_answers",
    "build_catalog",
    "load_catalog",
    "validate_catalog",
    "score_question",
    "aggregate_subcategory",
    "aggregate_domain",
    "aggregate_nist_functions",
    "aggregate_ownership",
    "aggregate_framework_categories",
    "aggregate_overall",
    "detect_critical_gaps",
    "framework_coverage",
    "generate_roadmap",
]
