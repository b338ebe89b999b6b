"""Catalog integrity checks.

The scoring core tolerates a dirty catalog (dangling references are skipped,
an empty band table yields no maturity level). Callers run these checks
before scoring to surface configuration problems.
"""
from __future__ import annotations

from collections import Counter

import structlog

from maturity.models.catalog import ReferenceCatalog

logger = structlog.get_logger(__name__)

# Allowed slack between adjacent maturity bands
BAND_TOLERANCE = 1e-9


def _duplicates(ids: list[str]) -> list[str]:
    return sorted(i for i, n in Counter(ids).items() if n > 1)


def validate_catalog(catalog: ReferenceCatalog) -> list[str]:
    """Return human-readable integrity issues; empty when the catalog is clean."""
    issues: list[str] = []

    for label, ids in (
        ("domain", [d.domain_id for d in catalog.domains]),
        ("subcategory", [s.subcat_id for s in catalog.subcategories]),
        ("question", [q.question_id for q in catalog.questions]),
    ):
        for dup in _duplicates(ids):
            issues.append(f"Duplicate {label} id: {dup}")

    for s in catalog.subcategories:
        if catalog.get_domain(s.domain_id) is None:
            issues.append(f"Subcategory {s.subcat_id} references unknown domain {s.domain_id}")
        if s.weight <= 0:
            issues.append(f"Subcategory {s.subcat_id} has non-positive weight {s.weight}")

    for q in catalog.questions:
        subcat = catalog.get_subcategory(q.subcat_id)
        if subcat is None:
            issues.append(f"Question {q.question_id} references unknown subcategory {q.subcat_id or '<empty>'}")
        elif subcat.domain_id != q.domain_id:
            issues.append(
                f"Question {q.question_id} domain {q.domain_id} does not match "
                f"subcategory {subcat.subcat_id} domain {subcat.domain_id}"
            )
        if catalog.get_domain(q.domain_id) is None:
            issues.append(f"Question {q.question_id} references unknown domain {q.domain_id}")

    issues.extend(_band_issues(catalog))

    for d in catalog.domains:
        if d.nist_ai_rmf_function and d.nist_ai_rmf_function not in catalog.nist_functions:
            issues.append(f"Domain {d.domain_id} has unknown function tag {d.nist_ai_rmf_function}")

    if issues:
        logger.debug("catalog_validation_issues", count=len(issues))
    return issues


def _band_issues(catalog: ReferenceCatalog) -> list[str]:
    bands = sorted(catalog.maturity_levels, key=lambda b: b.min_score)
    if not bands:
        return ["Maturity level table is empty"]

    issues: list[str] = []
    for band in bands:
        if band.min_score > band.max_score:
            issues.append(f"Maturity level {band.level} has min_score above max_score")
    if bands[0].min_score > BAND_TOLERANCE:
        issues.append(f"Maturity levels start at {bands[0].min_score}, not 0")
    if bands[-1].max_score < 1 - BAND_TOLERANCE:
        issues.append(f"Maturity levels end at {bands[-1].max_score}, not 1")
    for lower, upper in zip(bands, bands[1:]):
        if upper.min_score - lower.max_score > BAND_TOLERANCE:
            issues.append(f"Gap between maturity levels {lower.level} and {upper.level}")
        elif lower.max_score - upper.min_score > BAND_TOLERANCE:
            issues.append(f"Maturity levels {lower.level} and {upper.level} overlap")
    return issues
