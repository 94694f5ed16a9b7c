"""Tests for endpoint heuristics and risk scoring."""

import pytest

from surfacecheck.modules.surface import (
    DiscoveredEndpoint,
    Evidence,
    Vulnerability,
    VulnerabilityType,
    calculate_risk_score,
    perform_security_checks,
    severity_breakdown,
    top_issues,
)


def _endpoint(
    url: str = "https://api.example.com/health",
    path: str = "/health",
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> DiscoveredEndpoint:
    return DiscoveredEndpoint(
        url=url,
        subdomain="api.example.com",
        path=path,
        status_code=status_code,
        headers=headers or {},
    )


def _finding(severity: str) -> Vulnerability:
    return Vulnerability(
        type=VulnerabilityType.INFORMATION_DISCLOSURE,
        severity=severity,
        title="t",
        description="d",
        recommendation="r",
        evidence=Evidence(location="https://example.com"),
    )


class TestSecurityChecks:
    """Test per-endpoint heuristics."""

    def test_http_endpoint_is_insecure(self):
        findings = perform_security_checks(
            [_endpoint(url="http://api.example.com/health", status_code=401)]
        )
        assert [(f.type, f.severity) for f in findings] == [
            (VulnerabilityType.INSECURE_PROTOCOL, "high")
        ]

    def test_public_200_has_no_authentication(self):
        findings = perform_security_checks([_endpoint()])
        assert [(f.type, f.severity) for f in findings] == [
            (VulnerabilityType.NO_AUTHENTICATION, "medium")
        ]
        assert findings[0].evidence.response == "HTTP 200"

    def test_redirect_is_public_but_not_flagged_for_auth(self):
        endpoint = _endpoint(status_code=302)
        assert endpoint.is_public
        assert perform_security_checks([endpoint]) == []

    def test_cors_wildcard(self):
        findings = perform_security_checks(
            [_endpoint(status_code=403, headers={"access-control-allow-origin": "*"})]
        )
        assert [f.type for f in findings] == [VulnerabilityType.CORS_MISCONFIGURATION]
        assert findings[0].evidence.response == "Access-Control-Allow-Origin: *"

    def test_specific_cors_origin_is_fine(self):
        endpoint = _endpoint(
            status_code=403, headers={"access-control-allow-origin": "https://example.com"}
        )
        assert perform_security_checks([endpoint]) == []

    def test_server_and_powered_by_are_separate_findings(self):
        """Each disclosing header is its own low finding on the same endpoint."""
        endpoint = _endpoint(
            status_code=401,
            headers={"x-powered-by": "Express", "server": "nginx"},
        )
        findings = perform_security_checks([endpoint])

        assert [f.type for f in findings] == [VulnerabilityType.INFORMATION_DISCLOSURE] * 2
        assert all(f.severity == "low" for f in findings)
        assert [f.evidence.response for f in findings] == ["server: nginx", "x-powered-by: Express"]
        assert {f.evidence.location for f in findings} == {endpoint.url}

    @pytest.mark.parametrize("path", ["/admin", "/dashboard", "/admin/users"])
    def test_admin_interface_exposed(self, path: str):
        endpoint = _endpoint(url=f"https://admin.example.com{path}", path=path, status_code=301)
        findings = perform_security_checks([endpoint])
        assert [(f.type, f.severity) for f in findings] == [
            (VulnerabilityType.EXPOSED_SENSITIVE_DATA, "high")
        ]

    def test_protected_admin_interface_is_fine(self):
        endpoint = _endpoint(url="https://admin.example.com/admin", path="/admin", status_code=403)
        assert perform_security_checks([endpoint]) == []

    def test_findings_grouped_by_endpoint_in_order(self):
        first = _endpoint(url="http://a.example.com/admin", path="/admin")
        second = _endpoint(url="https://b.example.com/health", headers={"server": "nginx"})
        findings = perform_security_checks([first, second])

        assert [f.type for f in findings] == [
            VulnerabilityType.INSECURE_PROTOCOL,
            VulnerabilityType.NO_AUTHENTICATION,
            VulnerabilityType.EXPOSED_SENSITIVE_DATA,
            VulnerabilityType.NO_AUTHENTICATION,
            VulnerabilityType.INFORMATION_DISCLOSURE,
        ]

    def test_checks_are_deterministic(self):
        endpoints = [
            _endpoint(url="http://a.example.com/admin", path="/admin", headers={"server": "x"}),
            _endpoint(headers={"access-control-allow-origin": "*"}),
        ]
        assert perform_security_checks(endpoints) == perform_security_checks(endpoints)

    def test_no_endpoints_no_findings(self):
        assert perform_security_checks([]) == []


class TestRiskScore:
    """Test the 0-10 risk score."""

    def test_empty_is_zero(self):
        assert calculate_risk_score([]) == 0

    @pytest.mark.parametrize(
        ("severities", "expected"),
        [
            (["high"], 10),
            (["medium"], 7),
            (["low"], 3),
            (["high", "low"], 7),
            (["medium", "low"], 5),
            (["high", "medium", "low"], 7),
        ],
    )
    def test_average_weight_scaled(self, severities: list[str], expected: int):
        assert calculate_risk_score([_finding(s) for s in severities]) == expected

    def test_score_bounded(self):
        many = [_finding("high")] * 50
        assert 0 <= calculate_risk_score(many) <= 10

    def test_adding_high_never_lowers_score(self):
        findings = [_finding("low"), _finding("medium")]
        before = calculate_risk_score(findings)
        assert calculate_risk_score(findings + [_finding("high")]) >= before

    def test_breakdown_and_top_issues(self):
        findings = [_finding("low"), _finding("high"), _finding("low"), _finding("medium")]
        breakdown = severity_breakdown(findings)
        assert (breakdown.high, breakdown.medium, breakdown.low) == (1, 1, 2)
        assert breakdown.total == 4
        assert top_issues(findings) == findings[:3]
