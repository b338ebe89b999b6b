"""Framework tag resolution for questions.

A question's framework tags are its own citations plus the regulatory
references declared on its subcategory, so subcategory-level references
(e.g. BACEN/CMN) show up in analytics without being repeated on every question.
"""
from __future__ import annotations

from typing import Optional

from maturity.models.catalog import Question, ReferenceCatalog


def framework_tags_for_question(question: Question, catalog: ReferenceCatalog) -> list[str]:
    """Union of question and subcategory framework tags, first-seen order, no blanks."""
    subcat = catalog.get_subcategory(question.subcat_id)
    refs = subcat.framework_refs if subcat else ()

    combined: dict[str, None] = {}
    for tag in (*question.frameworks, *refs):
        if tag:
            combined.setdefault(tag, None)
    return list(combined)


def framework_categories_for_question(question: Question, catalog: ReferenceCatalog) -> set[str]:
    """Category ids the question belongs to; empty when no tag classifies."""
    categories: set[str] = set()
    for tag in framework_tags_for_question(question, catalog):
        category_id: Optional[str] = catalog.classify_framework(tag)
        if category_id is not None:
            categories.add(category_id)
    return categories


def authoritative_frameworks_for_question(question: Question, catalog: ReferenceCatalog) -> list[str]:
    """Authoritative framework names cited by the question, each listed once."""
    names: dict[str, None] = {}
    for tag in framework_tags_for_question(question, catalog):
        name = catalog.normalize_framework_name(tag)
        if name is not None:
            names.setdefault(name, None)
    return list(names)
