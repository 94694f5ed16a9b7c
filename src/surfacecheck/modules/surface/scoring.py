"""Risk scoring for attack-surface findings."""

import math
from collections.abc import Sequence

from .models import SeverityBreakdown, Vulnerability

SEVERITY_WEIGHTS = {"high": 3, "medium": 2, "low": 1}
RISK_SCALE = 3.33
MAX_RISK_SCORE = 10
TOP_ISSUES = 3


def calculate_risk_score(vulnerabilities: Sequence[Vulnerability]) -> int:
    """Average severity weight rescaled to 0-10.

    Rounds half up, so a scaled 4.5 scores 5.
    """
    total = sum(SEVERITY_WEIGHTS.get(vuln.severity, 0) for vuln in vulnerabilities)
    average = total / max(1, len(vulnerabilities))
    return min(MAX_RISK_SCORE, math.floor(average * RISK_SCALE + 0.5))


def severity_breakdown(vulnerabilities: Sequence[Vulnerability]) -> SeverityBreakdown:
    """Count findings per severity."""
    counts = {severity: 0 for severity in SEVERITY_WEIGHTS}
    for vuln in vulnerabilities:
        if vuln.severity in counts:
            counts[vuln.severity] += 1
    return SeverityBreakdown(**counts)


def top_issues(vulnerabilities: Sequence[Vulnerability]) -> list[Vulnerability]:
    """First findings in discovery order; not sorted by severity."""
    return list(vulnerabilities[:TOP_ISSUES])
