"""Reference catalog loading, validation and statistics."""
from maturity.catalog.loader import build_catalog, load_catalog, load_reference_tables
from maturity.catalog.stats import (
    catalog_statistics,
    questions_for_security_domain,
    security_domain_totals,
)
from maturity.catalog.validation import validate_catalog

__all__ = [
    "build_catalog",
    "load_catalog",
    "load_reference_tables",
    "catalog_statistics",
    "questions_for_security_domain",
    "security_domain_totals",
    "validate_catalog",
]
