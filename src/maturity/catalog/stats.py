"""Question-count statistics over a catalog or an active question list."""
from __future__ import annotations

from typing import Any, Optional, Sequence

from maturity.models.catalog import Question, ReferenceCatalog
from maturity.scoring.frameworks import framework_tags_for_question


def question_count_by_domain(catalog: ReferenceCatalog, questions: Sequence[Question]) -> dict[str, int]:
    return {
        d.domain_id: sum(1 for q in questions if q.domain_id == d.domain_id)
        for d in catalog.domains
    }


def question_count_by_subcategory(catalog: ReferenceCatalog, questions: Sequence[Question]) -> dict[str, int]:
    return {
        s.subcat_id: sum(1 for q in questions if q.subcat_id == s.subcat_id)
        for s in catalog.subcategories
    }


def question_count_by_nist_function(catalog: ReferenceCatalog, questions: Sequence[Question]) -> dict[str, int]:
    counts = {func: 0 for func in catalog.nist_functions}
    for q in questions:
        domain = catalog.get_domain(q.domain_id)
        if domain and domain.nist_ai_rmf_function in counts:
            counts[domain.nist_ai_rmf_function] += 1
    return counts


def question_count_by_ownership(catalog: ReferenceCatalog, questions: Sequence[Question]) -> dict[str, int]:
    counts = {owner: 0 for owner in catalog.ownership_types}
    for q in questions:
        if q.ownership_type in counts:
            counts[q.ownership_type] += 1
    return counts


def question_count_by_framework_category(catalog: ReferenceCatalog, questions: Sequence[Question]) -> dict[str, int]:
    counts = {c.category_id: 0 for c in catalog.framework_categories}
    for q in questions:
        categories = {catalog.classify_framework(tag) for tag in framework_tags_for_question(q, catalog)}
        for category_id in categories:
            if category_id in counts:
                counts[category_id] += 1
    return counts


def security_domain_totals(catalog: ReferenceCatalog, security_domain_id: str) -> dict[str, int]:
    return {
        "domains": sum(1 for d in catalog.domains if d.security_domain_id == security_domain_id),
        "subcategories": sum(1 for s in catalog.subcategories if s.security_domain_id == security_domain_id),
        "questions": sum(1 for q in catalog.questions if q.security_domain_id == security_domain_id),
    }


def questions_for_security_domain(catalog: ReferenceCatalog, security_domain_id: Optional[str]) -> list[Question]:
    """Catalog questions in a security domain; all questions when no id is given.

    A question without its own tag inherits its domain's tag.
    """
    if not security_domain_id:
        return list(catalog.questions)
    selected = []
    for q in catalog.questions:
        tag = q.security_domain_id
        if tag is None:
            domain = catalog.get_domain(q.domain_id)
            tag = domain.security_domain_id if domain else None
        if tag == security_domain_id:
            selected.append(q)
    return selected


def catalog_statistics(catalog: ReferenceCatalog, questions: Sequence[Question]) -> dict[str, Any]:
    """All counts in one JSON-ready dict."""
    return {
        "total_domains": len(catalog.domains),
        "total_subcategories": len(catalog.subcategories),
        "total_questions": len(questions),
        "by_domain": question_count_by_domain(catalog, questions),
        "by_subcategory": question_count_by_subcategory(catalog, questions),
        "by_nist_function": question_count_by_nist_function(catalog, questions),
        "by_ownership": question_count_by_ownership(catalog, questions),
        "by_framework_category": question_count_by_framework_category(catalog, questions),
    }
