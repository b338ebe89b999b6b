"""Tests for catalog loading and the catalog model lookups."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from maturity.catalog import build_catalog, load_catalog, load_reference_tables
from maturity.models import Criticality, ReferenceCatalog
from maturity.utils import CatalogLoadError, CatalogValidationError


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_yaml_catalog_merges_reference_tables(self, tmp_path: Path, catalog_payload):
        """A taxonomy file picks up the shipped bands and lookup tables."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text(yaml.safe_dump(catalog_payload, allow_unicode=True), encoding="utf-8")

        catalog = load_catalog(path)

        assert isinstance(catalog, ReferenceCatalog)
        assert len(catalog.questions) == 6
        assert len(catalog.maturity_levels) == 5
        assert catalog.get_subcategory("S1").criticality == Criticality.CRITICAL
        assert catalog.get_subcategory("S2").weight == 5.0
        assert catalog.nist_functions == ("GOVERN", "MAP", "MEASURE", "MANAGE")

    def test_json_catalog(self, tmp_path: Path, catalog_payload):
        """JSON files load the same way."""
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps(catalog_payload), encoding="utf-8")

        catalog = load_catalog(path)

        assert catalog.get_question("Q4").frameworks == ("OWASP LLM01: Prompt Injection",)

    def test_snake_case_keys_accepted(self, tmp_path: Path):
        """Records may use Python field names instead of camelCase."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text(
            yaml.safe_dump({
                "domains": [{"domain_id": "D1", "domain_name": "Gov"}],
                "subcategories": [{"subcat_id": "S1", "domain_id": "D1"}],
                "questions": [{"question_id": "Q1", "subcat_id": "S1", "domain_id": "D1"}],
            }),
            encoding="utf-8",
        )

        catalog = load_catalog(path)

        assert catalog.get_question("Q1").subcat_id == "S1"

    def test_file_overrides_reference_table(self, tmp_path: Path, catalog_payload):
        """A top-level table in the file replaces the shipped one."""
        payload = dict(catalog_payload)
        payload["maturity_levels"] = [
            {"level": 1, "name": "Low", "minScore": 0.0, "maxScore": 0.5},
            {"level": 2, "name": "High", "minScore": 0.5, "maxScore": 1.0},
        ]
        path = tmp_path / "taxonomy.yaml"
        path.write_text(yaml.safe_dump(payload, allow_unicode=True), encoding="utf-8")

        catalog = load_catalog(path)

        assert [band.name for band in catalog.maturity_levels] == ["Low", "High"]

    def test_missing_file(self, tmp_path: Path):
        """A missing file raises CatalogLoadError."""
        with pytest.raises(CatalogLoadError) as exc_info:
            load_catalog(tmp_path / "missing.yaml")

        assert exc_info.value.error_type == "CATALOG_LOAD"
        assert "file not found" in exc_info.value.details

    def test_invalid_yaml(self, tmp_path: Path):
        """Unparsable YAML raises CatalogLoadError."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text("domains: [unclosed", encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        """A list at the top level is rejected."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_invalid_record(self, tmp_path: Path):
        """A question without an id fails validation."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text(yaml.safe_dump({"questions": [{"domainId": "D1"}]}), encoding="utf-8")

        with pytest.raises(CatalogValidationError) as exc_info:
            load_catalog(path)

        assert exc_info.value.error_type == "CATALOG_VALIDATION"


class TestBuildCatalog:
    """Tests for build_catalog and load_reference_tables."""

    def test_reference_tables_are_copies(self):
        """Mutating the returned dict does not affect later calls."""
        tables = load_reference_tables()
        tables["maturityLevels"].clear()
        tables["frameworkCategories"][0]["name"] = "changed"

        assert len(load_reference_tables()["maturityLevels"]) == 5
        assert len(build_catalog().maturity_levels) == 5
        assert build_catalog().framework_categories[0].name == "NIST AI RMF"

    def test_keyword_override_replaces_table(self):
        """snake_case overrides replace the aliased reference table."""
        catalog = build_catalog(maturity_levels=[])

        assert catalog.maturity_levels == ()
        assert catalog.get_maturity_level(0.5) is None

    def test_invalid_records_raise(self):
        """Bad field types raise CatalogValidationError."""
        with pytest.raises(CatalogValidationError):
            build_catalog(subcategories=[{"subcatId": "S1", "domainId": "D1", "weight": "heavy"}])


class TestReferenceCatalogLookups:
    """Tests for ReferenceCatalog lookups."""

    def test_taxonomy_lookups(self, catalog):
        """Id lookups and parent/child listings."""
        assert catalog.get_domain("D1").domain_name == "AI Governance"
        assert catalog.get_domain("D9") is None
        assert [s.subcat_id for s in catalog.subcategories_for_domain("D1")] == ["S1", "S2"]
        assert [q.question_id for q in catalog.questions_for_subcategory("S3")] == ["Q5", "Q6"]
        assert len(catalog.questions_for_domain("D1")) == 4

    @pytest.mark.parametrize(
        ("score", "level"),
        [(0.0, 1), (0.1, 1), (0.3, 2), (0.5, 3), (0.7, 4), (0.95, 5), (1.0, 5)],
    )
    def test_maturity_level_bands(self, catalog, score, level):
        """Scores land in the band that contains them."""
        assert catalog.get_maturity_level(score).level == level

    def test_maturity_level_fallback_is_lowest_band(self, catalog):
        """An out-of-range score falls back to the lowest band."""
        assert catalog.get_maturity_level(-0.5).level == 1

    def test_response_and_evidence_tables(self, catalog):
        """Lookup tables follow the reference data."""
        assert catalog.get_response_score("Parcial") == 0.5
        assert catalog.get_response_score("NA") is None
        assert catalog.get_evidence_multiplier("Não") == 0.5
        assert catalog.get_evidence_multiplier(None) is None
        assert catalog.get_evidence_multiplier("Unknown") is None

    def test_classify_framework(self, catalog):
        """Citations classify into categories; excluded ones return None."""
        assert catalog.classify_framework("NIST AI RMF MEASURE 2.1") == "NIST_AI_RMF"
        assert catalog.classify_framework("ISO/IEC 42001") == "AI_RISK_MGMT"
        assert catalog.classify_framework("OWASP ML Security Top 10") == "SECURE_DEVELOPMENT"
        assert catalog.classify_framework("MITRE ATLAS") is None
