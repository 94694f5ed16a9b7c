"""Tests for the security score, status updates and recommendations."""

import pytest

from surfacecheck.modules.breach import (
    BreachMatch,
    BreachRecord,
    UserService,
    build_status_updates,
    calculate_security_score,
    count_breached_services,
    generate_security_recommendations,
)


def _match(service_id: int, severity: str, breach_name: str = "Adobe") -> BreachMatch:
    return BreachMatch(
        service=UserService(id=service_id, service_name=f"svc{service_id}", domain="adobe.com"),
        breach=BreachRecord(
            name=breach_name,
            domain="adobe.com",
            breach_date="2013-10-04",
            data_classes=["Passwords"],
            description="desc",
        ),
        severity=severity,
    )


class TestSecurityScore:
    """Test the 0-100 security score."""

    def test_no_services_is_perfect(self):
        assert calculate_security_score([_match(1, "high")], 0) == 100

    def test_no_matches_is_perfect(self):
        assert calculate_security_score([], 4) == 100

    def test_one_high_match(self):
        assert calculate_security_score([_match(1, "high")], 4) == 65

    @pytest.mark.parametrize(("severity", "expected"), [("medium", 75), ("low", 80)])
    def test_one_lower_severity_match(self, severity: str, expected: int):
        assert calculate_security_score([_match(1, severity)], 4) == expected

    def test_score_clamped_at_zero(self):
        matches = [_match(i, "high") for i in range(5)]
        assert calculate_security_score(matches, 5) == 0

    def test_more_matches_never_raise_score(self):
        one = calculate_security_score([_match(1, "low")], 3)
        two = calculate_security_score([_match(1, "low"), _match(2, "low")], 3)
        assert two <= one


class TestStatusUpdates:
    def test_one_update_per_match(self):
        matches = [_match(1, "high", "Adobe"), _match(1, "medium", "Adobe2"), _match(2, "high")]
        updates = build_status_updates(matches)

        assert [(u.service_id, u.breach_name, u.severity) for u in updates] == [
            (1, "Adobe", "high"),
            (1, "Adobe2", "medium"),
            (2, "Adobe", "high"),
        ]
        assert all(u.is_breached for u in updates)
        assert updates[0].data_classes == ["Passwords"]
        assert updates[0].breach_date == "2013-10-04"

    def test_breached_services_counted_once(self):
        matches = [_match(1, "high", "A"), _match(1, "high", "B"), _match(2, "low")]
        assert count_breached_services(matches) == 2


class TestRecommendations:
    def test_clean_result(self):
        recommendations = generate_security_recommendations([])
        assert [r.type for r in recommendations] == ["success"]
        assert recommendations[0].actions

    def test_high_and_medium(self):
        recommendations = generate_security_recommendations(
            [_match(1, "high"), _match(2, "high"), _match(3, "medium")]
        )
        assert [r.type for r in recommendations] == ["critical", "warning"]
        assert recommendations[0].message.startswith("2 high-risk")
        assert recommendations[1].message.startswith("1 medium-risk")

    def test_low_only_has_no_advice(self):
        assert generate_security_recommendations([_match(1, "low")]) == []
