"""Scoring modules for the maturity engine.

This package contains:
- question.py: Per-question effective score
- aggregation.py: Subcategory and domain roll-ups
- cross_cutting.py: NIST function, ownership and framework-category groupings
- overall.py: Organization-wide snapshot
- frameworks.py: Framework tag resolution
"""
from maturity.scoring.question import score_question, unique_questions
from maturity.scoring.aggregation import aggregate_domain, aggregate_subcategory
from maturity.scoring.cross_cutting import (
    aggregate_framework_categories,
    aggregate_nist_functions,
    aggregate_ownership,
)
from maturity.scoring.overall import aggregate_overall, evidence_readiness
from maturity.scoring.frameworks import (
    authoritative_frameworks_for_question,
    framework_categories_for_question,
    framework_tags_for_question,
)

__all__ = [
    # Question
    "score_question",
    "unique_questions",
    # Hierarchy
    "aggregate_subcategory",
    "aggregate_domain",
    "aggregate_overall",
    "evidence_readiness",
    # Cross-cutting
    "aggregate_nist_functions",
    "aggregate_ownership",
    "aggregate_framework_categories",
    # Frameworks
    "framework_tags_for_question",
    "framework_categories_for_question",
    "authoritative_frameworks_for_question",
]
