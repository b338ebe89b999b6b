"""Shared enum definitions for the maturity engine.

Usage:
    from maturity.models.shared import ResponseValue, Criticality, RoadmapPriority
"""
from __future__ import annotations

from enum import Enum


class ResponseValue(str, Enum):
    """Values accepted for both the response and the evidence axis of an answer."""
    SIM = "Sim"
    PARCIAL = "Parcial"
    NAO = "Não"
    NA = "NA"


class Criticality(str, Enum):
    """Risk criticality of a subcategory."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class RoadmapPriority(str, Enum):
    """Roadmap priority tiers, in execution order."""
    IMMEDIATE = "immediate"
    SHORT = "short"
    MEDIUM = "medium"


class Effort(str, Enum):
    """Estimated effort of a roadmap action."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Sort rank per priority tier
PRIORITY_ORDER: dict[RoadmapPriority, int] = {
    RoadmapPriority.IMMEDIATE: 0,
    RoadmapPriority.SHORT: 1,
    RoadmapPriority.MEDIUM: 2,
}
