"""Cross-cutting groupings of the same active question set.

- NIST AI RMF function: mean of the scores of answered domains tagged with
  the function.
- Ownership: unweighted mean of question effective scores per owner role.
- Framework category: unweighted mean of question effective scores per
  category; one question may sit in several categories.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from maturity.models.answers import Answer
from maturity.models.catalog import Question, ReferenceCatalog
from maturity.models.metrics import (
    DomainMetrics,
    FrameworkCategoryMetrics,
    NistFunctionMetrics,
    OwnershipMetrics,
)
from maturity.scoring.frameworks import framework_categories_for_question
from maturity.scoring.question import score_question, unique_questions


def _bucket_scores(
    questions: Sequence[Question],
    answers: Mapping[str, Answer],
    catalog: ReferenceCatalog,
) -> tuple[float, int, float]:
    """(score, answered_count, coverage) averaged over answered, applicable questions."""
    total = 0.0
    answered = 0
    applicable = 0

    for q in questions:
        scored = score_question(answers.get(q.question_id), catalog, q.question_id)
        if not scored.is_applicable:
            continue
        applicable += 1
        if scored.effective_score is not None:
            total += scored.effective_score
            answered += 1

    score = total / answered if answered > 0 else 0.0
    coverage = answered / applicable if applicable > 0 else 0.0
    return score, answered, coverage


def aggregate_nist_functions(
    domain_metrics: Sequence[DomainMetrics],
    catalog: ReferenceCatalog,
) -> list[NistFunctionMetrics]:
    results: list[NistFunctionMetrics] = []
    for func in catalog.nist_functions:
        func_domains = [dm for dm in domain_metrics if dm.nist_function == func]

        total_score = 0.0
        scored_domains = 0
        total_answered = 0
        total_questions = 0
        for dm in func_domains:
            if dm.answered_questions > 0:
                total_score += dm.score
                scored_domains += 1
            total_answered += dm.answered_questions
            total_questions += dm.total_questions

        score = total_score / scored_domains if scored_domains > 0 else 0.0
        coverage = total_answered / total_questions if total_questions > 0 else 0.0

        results.append(NistFunctionMetrics(
            function=func,
            score=score,
            maturity_level=catalog.get_maturity_level(score),
            total_questions=total_questions,
            answered_questions=total_answered,
            coverage=min(coverage, 1.0),
            domain_count=len(func_domains),
        ))
    return results


def aggregate_ownership(
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
) -> list[OwnershipMetrics]:
    questions = unique_questions(active_questions)
    results: list[OwnershipMetrics] = []
    for owner in catalog.ownership_types:
        owner_questions = [q for q in questions if q.ownership_type == owner]
        score, answered, coverage = _bucket_scores(owner_questions, answers, catalog)
        results.append(OwnershipMetrics(
            ownership_type=owner,
            score=score,
            maturity_level=catalog.get_maturity_level(score),
            total_questions=len(owner_questions),
            answered_questions=answered,
            coverage=coverage,
        ))
    return results


def aggregate_framework_categories(
    answers: Mapping[str, Answer],
    active_questions: Sequence[Question],
    catalog: ReferenceCatalog,
) -> list[FrameworkCategoryMetrics]:
    questions = unique_questions(active_questions)
    memberships = {q.question_id: framework_categories_for_question(q, catalog) for q in questions}

    results: list[FrameworkCategoryMetrics] = []
    for category in catalog.framework_categories:
        category_questions = [q for q in questions if category.category_id in memberships[q.question_id]]
        score, answered, coverage = _bucket_scores(category_questions, answers, catalog)
        results.append(FrameworkCategoryMetrics(
            category_id=category.category_id,
            category_name=category.name or category.category_id,
            score=score,
            maturity_level=catalog.get_maturity_level(score),
            total_questions=len(category_questions),
            answered_questions=answered,
            coverage=coverage,
        ))
    return results
