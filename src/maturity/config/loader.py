"""Configuration loader for the maturity scoring engine.

Provides centralized access to the scoring policy parameters
(thresholds, degraded-evidence multiplier, roadmap labels).
"""
from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Any, Optional
import structlog

logger = structlog.get_logger(__name__)

CONFIG_FILE = Path(__file__).parent / "engine_config.yaml"
CONFIG_ENV_VAR = "MATURITY_ENGINE_CONFIG"


class ConfigLoader:
    """Loads and provides access to engine configuration."""

    _instance: Optional[ConfigLoader] = None
    _config: Optional[dict[str, Any]] = None

    def __new__(cls) -> ConfigLoader:
        """Singleton pattern - ensure only one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize config loader (only runs once due to singleton)."""
        if self._config is None:
            self._load_config()

    @staticmethod
    def _config_path() -> Path:
        override = os.getenv(CONFIG_ENV_VAR)
        return Path(override) if override else CONFIG_FILE

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        path = self._config_path()
        if path.exists():
            with open(path, encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.info("config_loaded", path=str(path))
        else:
            logger.warning("config_file_not_found", path=str(path))
            self._config = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key.

        Examples:
            config.get("scoring.missing_evidence_multiplier")
            config.get("roadmap.timeframes.immediate")
            config.get("nonexistent.key", default=100)
        """
        if not self._config:
            return default

        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_section(self, section: str) -> dict[str, Any]:
        """Get entire configuration section.

        Examples:
            config.get_section("scoring")
            config.get_section("roadmap")
        """
        return self.get(section, default={})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = None
        self._load_config()


# Singleton instance
_config = ConfigLoader()


def get_config() -> ConfigLoader:
    """Get the global config instance."""
    return _config


def get_missing_evidence_multiplier() -> float:
    """Multiplier applied when an answered question has no usable evidence value."""
    return float(_config.get("scoring.missing_evidence_multiplier", 0.7))


def get_critical_gap_score() -> float:
    """Effective score below which a question counts as a subcategory critical gap."""
    return float(_config.get("scoring.critical_gap_score", 0.5))


def get_high_risk_criticalities() -> list[str]:
    """Subcategory criticalities that make a low score a critical gap."""
    return list(_config.get("scoring.high_risk_criticalities", default=["High", "Critical"]))


def get_evidence_readiness_fallback() -> str:
    """Evidence value assumed for evidence readiness when the field is empty."""
    return str(_config.get("scoring.evidence_readiness_fallback", "Não"))


def get_gap_threshold() -> float:
    """Default severity threshold for the gap detector."""
    return float(_config.get("gaps.threshold", 0.5))


def get_unanswered_label() -> str:
    """Display label for a gap whose question has no response."""
    return str(_config.get("gaps.unanswered_label", "Not answered"))


def get_roadmap_max_items() -> int:
    """Default cap on roadmap lines."""
    return int(_config.get("roadmap.max_items", 10))


def get_roadmap_low_score() -> float:
    """Worst-score cut that escalates roadmap priority and effort."""
    return float(_config.get("roadmap.low_score", 0.25))


def get_roadmap_timeframes() -> dict[str, str]:
    """Timeframe label per roadmap priority tier."""
    defaults = {
        "immediate": "0-30 days",
        "short": "30-60 days",
        "medium": "60-90 days",
    }
    configured = _config.get("roadmap.timeframes", default={})
    return {**defaults, **configured}


def get_roadmap_labels() -> dict[str, str]:
    """Action template and impact labels for roadmap lines.

    Returns:
        Dictionary with action_template, impact_critical, impact_default
    """
    defaults = {
        "action_template": "Implement control: {subcat_name}",
        "impact_critical": "High risk impact",
        "impact_default": "Medium risk impact",
    }
    configured = _config.get("roadmap.labels", default={})
    return {**defaults, **configured}


def get_default_ownership() -> str:
    """Ownership type used for a roadmap line whose gaps carry none."""
    return str(_config.get("roadmap.default_ownership", "GRC"))
