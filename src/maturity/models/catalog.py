"""Reference catalog models for the maturity engine.

The catalog is the read-only dataset every scoring call works against:
the domain → subcategory → question taxonomy plus the lookup tables
(maturity bands, response scores, evidence multipliers) and the ordered
rule tables that classify free-text framework citations.

Field aliases follow the camelCase used by catalog files
(``questionId``, ``frameworkRefs``...); snake_case names are accepted too.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.alias_generators import to_camel

from maturity.models.shared import Criticality


class CatalogModel(BaseModel):
    """Shared config for all catalog records."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Domain(CatalogModel):
    domain_id: str
    domain_name: str = ""
    order: int = 0
    nist_ai_rmf_function: Optional[str] = None
    strategic_question: Optional[str] = None
    description: Optional[str] = None
    security_domain_id: Optional[str] = None


class Subcategory(CatalogModel):
    subcat_id: str
    domain_id: str
    subcat_name: str = ""
    definition: Optional[str] = None
    objective: Optional[str] = None
    criticality: Criticality = Criticality.MEDIUM
    weight: float = 1.0
    ownership_type: Optional[str] = None
    risk_summary: Optional[str] = None
    framework_refs: tuple[str, ...] = ()
    security_domain_id: Optional[str] = None


class Question(CatalogModel):
    """A question of the active set, default or custom."""
    question_id: str
    subcat_id: str = ""
    domain_id: str
    question_text: str = ""
    expected_evidence: str = ""
    imperative_checks: str = ""
    risk_summary: str = ""
    frameworks: tuple[str, ...] = ()
    framework_id: Optional[str] = None
    ownership_type: Optional[str] = None
    security_domain_id: Optional[str] = None


class MaturityLevel(CatalogModel):
    level: int
    name: str
    description: str = ""
    min_score: float
    max_score: float
    color: str = ""

    def contains(self, score: float) -> bool:
        return self.min_score <= score <= self.max_score


class ResponseOption(CatalogModel):
    value: str
    score: Optional[float] = None
    label: str = ""


class EvidenceOption(CatalogModel):
    value: str
    multiplier: Optional[float] = None
    label: str = ""


class FrameworkCategory(CatalogModel):
    category_id: str
    name: str = ""
    description: str = ""


class FrameworkRule(CatalogModel):
    """Pattern → target rule for framework citations.

    Matches when every ``all_of`` needle occurs in the lowercased tag and,
    if ``any_of`` is non-empty, at least one of its needles does.
    A ``None`` target marks an explicit exclusion.
    """
    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()
    target: Optional[str] = None

    def matches(self, tag: str) -> bool:
        text = tag.lower()
        if not self.any_of and not self.all_of:
            return False
        if not all(needle.lower() in text for needle in self.all_of):
            return False
        return not self.any_of or any(needle.lower() in text for needle in self.any_of)


def apply_rules(rules: tuple[FrameworkRule, ...], tag: str) -> Optional[str]:
    """Return the target of the first matching rule, or None."""
    for rule in rules:
        if rule.matches(tag):
            return rule.target
    return None


class ReferenceCatalog(CatalogModel):
    """Immutable reference dataset passed into every scoring call."""
    domains: tuple[Domain, ...] = ()
    subcategories: tuple[Subcategory, ...] = ()
    questions: tuple[Question, ...] = ()
    maturity_levels: tuple[MaturityLevel, ...] = ()
    response_options: tuple[ResponseOption, ...] = ()
    evidence_options: tuple[EvidenceOption, ...] = ()
    nist_functions: tuple[str, ...] = ()
    ownership_types: tuple[str, ...] = ()
    framework_categories: tuple[FrameworkCategory, ...] = ()
    framework_category_rules: tuple[FrameworkRule, ...] = ()
    authoritative_frameworks: tuple[str, ...] = ()
    framework_name_rules: tuple[FrameworkRule, ...] = ()

    _domains_by_id: dict[str, Domain] = PrivateAttr(default_factory=dict)
    _subcats_by_id: dict[str, Subcategory] = PrivateAttr(default_factory=dict)
    _questions_by_id: dict[str, Question] = PrivateAttr(default_factory=dict)
    _response_scores: dict[str, Optional[float]] = PrivateAttr(default_factory=dict)
    _evidence_multipliers: dict[str, Optional[float]] = PrivateAttr(default_factory=dict)

    def model_post_init(self, _context) -> None:
        # First occurrence wins on duplicate ids.
        for d in self.domains:
            self._domains_by_id.setdefault(d.domain_id, d)
        for s in self.subcategories:
            self._subcats_by_id.setdefault(s.subcat_id, s)
        for q in self.questions:
            self._questions_by_id.setdefault(q.question_id, q)
        for o in self.response_options:
            self._response_scores.setdefault(o.value, o.score)
        for o in self.evidence_options:
            self._evidence_multipliers.setdefault(o.value, o.multiplier)

    # --- Taxonomy lookups ---

    def get_domain(self, domain_id: str) -> Optional[Domain]:
        return self._domains_by_id.get(domain_id)

    def get_subcategory(self, subcat_id: str) -> Optional[Subcategory]:
        return self._subcats_by_id.get(subcat_id)

    def get_question(self, question_id: str) -> Optional[Question]:
        return self._questions_by_id.get(question_id)

    def subcategories_for_domain(self, domain_id: str) -> list[Subcategory]:
        return [s for s in self.subcategories if s.domain_id == domain_id]

    def questions_for_subcategory(self, subcat_id: str) -> list[Question]:
        return [q for q in self.questions if q.subcat_id == subcat_id]

    def questions_for_domain(self, domain_id: str) -> list[Question]:
        return [q for q in self.questions if q.domain_id == domain_id]

    # --- Lookup tables ---

    def get_maturity_level(self, score: float) -> Optional[MaturityLevel]:
        """Band containing ``score``; the lowest band when none does."""
        for level in self.maturity_levels:
            if level.contains(score):
                return level
        if not self.maturity_levels:
            return None
        return min(self.maturity_levels, key=lambda band: band.min_score)

    def get_response_score(self, response: Optional[str]) -> Optional[float]:
        if response is None:
            return None
        return self._response_scores.get(str(_value(response)))

    def get_evidence_multiplier(self, evidence: Optional[str]) -> Optional[float]:
        if evidence is None:
            return None
        return self._evidence_multipliers.get(str(_value(evidence)))

    # --- Framework classification ---

    def classify_framework(self, tag: str) -> Optional[str]:
        """Framework category id for a raw citation, or None."""
        return apply_rules(self.framework_category_rules, tag)

    def normalize_framework_name(self, tag: str) -> Optional[str]:
        """Authoritative framework name for a raw citation, or None."""
        name = apply_rules(self.framework_name_rules, tag)
        if name is None or name not in self.authoritative_frameworks:
            return None
        return name


def _value(item: object) -> object:
    # Enum members compare by their value in the lookup tables.
    return getattr(item, "value", item)
