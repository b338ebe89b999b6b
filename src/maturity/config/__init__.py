"""Engine configuration (policy thresholds and labels)."""
from maturity.config.loader import (
    ConfigLoader,
    get_config,
    get_critical_gap_score,
    get_default_ownership,
    get_evidence_readiness_fallback,
    get_gap_threshold,
    get_high_risk_criticalities,
    get_missing_evidence_multiplier,
    get_roadmap_labels,
    get_roadmap_low_score,
    get_roadmap_max_items,
    get_roadmap_timeframes,
    get_unanswered_label,
)

__all__ = [
    "ConfigLoader",
    "get_config",
    "get_critical_gap_score",
    "get_default_ownership",
    "get_evidence_readiness_fallback",
    "get_gap_threshold",
    "get_high_risk_criticalities",
    "get_missing_evidence_multiplier",
    "get_roadmap_labels",
    "get_roadmap_low_score",
    "get_roadmap_max_items",
    "get_roadmap_timeframes",
    "get_unanswered_label",
]
