from __future__ import annotations

import sys
from pathlib import Path

# Add src directory to path immediately on import - MUST be before any other imports
_src_dir = Path(__file__).resolve().parents[1] / "src"
_src_str = str(_src_dir)
if _src_str not in sys.path:
    sys.path.insert(0, _src_str)

import pytest

from maturity.catalog import build_catalog
from maturity.models import ReferenceCatalog


def pytest_configure(config: pytest.Config) -> None:
    """Ensure src directory is on sys.path so tests can import modules."""
    if _src_str not in sys.path:
        sys.path.insert(0, _src_str)


DOMAINS = [
    {
        "domainId": "D1",
        "domainName": "AI Governance",
        "order": 1,
        "nistAiRmfFunction": "GOVERN",
        "securityDomainId": "AI",
    },
    {
        "domainId": "D2",
        "domainName": "Secure Development",
        "order": 2,
        "nistAiRmfFunction": "MANAGE",
        "securityDomainId": "APP",
    },
]

SUBCATEGORIES = [
    {
        "subcatId": "S1",
        "domainId": "D1",
        "subcatName": "AI Policy",
        "criticality": "Critical",
        "weight": 1,
        "ownershipType": "Executive",
        "frameworkRefs": ["BACEN 4.893"],
        "securityDomainId": "AI",
    },
    {
        "subcatId": "S2",
        "domainId": "D1",
        "subcatName": "Model Inventory",
        "criticality": "High",
        "weight": 5,
        "ownershipType": "GRC",
        "securityDomainId": "AI",
    },
    {
        "subcatId": "S3",
        "domainId": "D2",
        "subcatName": "Pipeline Hardening",
        "criticality": "Medium",
        "weight": 2,
        "ownershipType": "Engineering",
        "securityDomainId": "APP",
    },
]

QUESTIONS = [
    {
        "questionId": "Q1",
        "subcatId": "S1",
        "domainId": "D1",
        "questionText": "Is there an approved AI usage policy?",
        "frameworks": ["NIST AI RMF GOVERN 1.1", "ISO 27001", "ISO 27002 A.5.1"],
        "ownershipType": "Executive",
    },
    {
        "questionId": "Q2",
        "subcatId": "S1",
        "domainId": "D1",
        "questionText": "Is the policy reviewed yearly?",
        "frameworks": ["ISO/IEC 27002:2022", "MITRE ATLAS"],
        "ownershipType": "Executive",
    },
    {
        "questionId": "Q3",
        "subcatId": "S2",
        "domainId": "D1",
        "questionText": "Are models inventoried with a data owner?",
        "frameworks": ["LGPD Art. 37"],
        "ownershipType": "GRC",
    },
    {
        "questionId": "Q4",
        "subcatId": "S2",
        "domainId": "D1",
        "questionText": "Are prompt injection risks recorded per model?",
        "frameworks": ["OWASP LLM01: Prompt Injection"],
        "ownershipType": "GRC",
    },
    {
        "questionId": "Q5",
        "subcatId": "S3",
        "domainId": "D2",
        "questionText": "Are build pipelines hardened?",
        "frameworks": ["NIST SSDF PW.1", "GDPR"],
        "ownershipType": "Engineering",
    },
    {
        "questionId": "Q6",
        "subcatId": "S3",
        "domainId": "D2",
        "questionText": "Are model-serving APIs tested?",
        "frameworks": ["OWASP API Security Top 10"],
        "ownershipType": "Engineering",
    },
]


@pytest.fixture
def catalog() -> ReferenceCatalog:
    """Two domains, three subcategories (Critical/High/Medium), six questions."""
    return build_catalog(domains=DOMAINS, subcategories=SUBCATEGORIES, questions=QUESTIONS)


@pytest.fixture
def active_questions(catalog: ReferenceCatalog) -> list:
    return list(catalog.questions)


@pytest.fixture
def catalog_payload() -> dict:
    """Raw taxonomy content as it appears in a catalog file."""
    return {"domains": DOMAINS, "subcategories": SUBCATEGORIES, "questions": QUESTIONS}
