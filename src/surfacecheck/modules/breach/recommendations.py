"""User-facing advice derived from matched breaches."""

from collections.abc import Sequence

from .models import BreachMatch, SecurityRecommendation


def generate_security_recommendations(
    matches: Sequence[BreachMatch],
) -> list[SecurityRecommendation]:
    if not matches:
        return [
            SecurityRecommendation(
                type="success",
                title="Great Security Posture!",
                message=(
                    "No breaches found for your email address. "
                    "Keep up the good security practices!"
                ),
                actions=[
                    "Enable 2FA where possible",
                    "Use unique passwords",
                    "Regular security checkups",
                ],
            )
        ]

    recommendations: list[SecurityRecommendation] = []
    high = sum(1 for match in matches if match.severity == "high")
    medium = sum(1 for match in matches if match.severity == "medium")

    if high:
        recommendations.append(
            SecurityRecommendation(
                type="critical",
                title="Immediate Action Required",
                message=f"{high} high-risk breaches found. Change passwords immediately.",
                actions=["Change passwords now", "Enable 2FA", "Monitor accounts closely"],
            )
        )
    if medium:
        recommendations.append(
            SecurityRecommendation(
                type="warning",
                title="Security Review Needed",
                message=f"{medium} medium-risk breaches found. Review your account security.",
                actions=["Update passwords", "Review account permissions", "Enable notifications"],
            )
        )
    return recommendations
