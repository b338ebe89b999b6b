"""Reference catalog loading.

The shipped ``reference_data.yaml`` carries the tables every catalog shares
(maturity bands, response/evidence lookups, framework rules). A taxonomy file
supplies domains, subcategories and questions and may override any table.
"""
from __future__ import annotations

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Optional

import structlog
import yaml
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from maturity.models.catalog import Domain, Question, ReferenceCatalog, Subcategory
from maturity.utils.error_handler import CatalogLoadError, CatalogValidationError

logger = structlog.get_logger(__name__)

REFERENCE_DATA_FILE = Path(__file__).resolve().parents[1] / "config" / "reference_data.yaml"


@lru_cache(maxsize=1)
def _read_reference_file(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _aliased(data: dict[str, Any]) -> dict[str, Any]:
    # Reference tables are keyed by alias; snake_case keys must replace them, not sit beside them.
    return {to_camel(key) if "_" in key else key: value for key, value in data.items()}


def load_reference_tables(path: Optional[Path] = None) -> dict[str, Any]:
    """Return the shared lookup tables as a plain dict (a fresh copy per call).

    Raises:
        CatalogLoadError: the reference file is missing or not valid YAML
    """
    ref_path = path or REFERENCE_DATA_FILE
    try:
        tables = _read_reference_file(str(ref_path))
    except (OSError, yaml.YAMLError) as e:
        raise CatalogLoadError(str(ref_path), str(e)) from e
    return copy.deepcopy(tables)


def build_catalog(
    domains: Iterable[Domain | dict] = (),
    subcategories: Iterable[Subcategory | dict] = (),
    questions: Iterable[Question | dict] = (),
    **overrides: Any,
) -> ReferenceCatalog:
    """Build a catalog from taxonomy records plus the shared reference tables.

    Keyword overrides replace a reference table by field name
    (e.g. ``maturity_levels=[...]``).

    Raises:
        CatalogValidationError: records fail model validation
    """
    payload: dict[str, Any] = load_reference_tables()
    payload.update(
        domains=list(domains),
        subcategories=list(subcategories),
        questions=list(questions),
    )
    payload.update(_aliased(overrides))
    try:
        return ReferenceCatalog.model_validate(payload)
    except ValidationError as e:
        raise CatalogValidationError(str(e)) from e


def _read_catalog_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise CatalogLoadError(str(path), "file not found")
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise CatalogLoadError(str(path), "top-level value must be a mapping")
    return data


def load_catalog(path: Path) -> ReferenceCatalog:
    """Load a taxonomy file (YAML or JSON) into a ReferenceCatalog.

    The file holds ``domains``, ``subcategories`` and ``questions`` lists;
    any other top-level key overrides the matching reference table.

    Raises:
        CatalogLoadError: file missing or unparsable
        CatalogValidationError: records fail model validation
    """
    data = _read_catalog_file(path)

    payload: dict[str, Any] = load_reference_tables()
    payload.update(_aliased(data))
    try:
        catalog = ReferenceCatalog.model_validate(payload)
    except ValidationError as e:
        raise CatalogValidationError(str(e)) from e

    logger.info(
        "catalog_loaded",
        path=str(path),
        domains=len(catalog.domains),
        subcategories=len(catalog.subcategories),
        questions=len(catalog.questions),
    )
    return catalog
