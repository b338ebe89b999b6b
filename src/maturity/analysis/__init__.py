"""Gap analysis, framework coverage and remediation roadmap."""
from maturity.analysis.gaps import detect_critical_gaps
from maturity.analysis.coverage import framework_coverage
from maturity.analysis.roadmap import (
    classify_priority,
    estimate_effort,
    generate_roadmap,
    summarize_gaps,
)

__all__ = [
    "detect_critical_gaps",
    "framework_coverage",
    "classify_priority",
    "estimate_effort",
    "generate_roadmap",
    "summarize_gaps",
]
