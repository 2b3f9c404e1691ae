"""Tests for the HTTP dispatcher in adsense_auditor.app."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from adsense_auditor.app import app
from adsense_auditor.core.analyzer import analyze_html
from adsense_auditor.models.schema import AuditReport


@pytest.fixture
def client():
    return TestClient(app)


class TestHealthEndpoints:
    def test_healthz(self, client):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.content == b""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestStaticFiles:
    def test_root_serves_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "AdSense Compliance Auditor" in response.text

    def test_asset_content_type(self, client):
        response = client.get("/style.css")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    def test_unknown_path(self, client):
        assert client.get("/missing.png").status_code == 404


class TestAuditEndpoint:
    def test_invalid_json_body(self, client):
        response = client.post(
            "/api/audit", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"ok": False, "error": "Invalid JSON body"}

    @pytest.mark.parametrize("body", [b"[\"https://example.com\"]", b"null", b"\"x\""])
    def test_non_object_body_has_no_url(self, client, body):
        response = client.post("/api/audit", content=body, headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"ok": False, "error": "Provide a valid http(s) URL in { url }"}

    def test_unencodable_host_is_a_fetch_failure(self, client):
        response = client.post("/api/audit", json={"url": "https://xn--/"})
        assert response.status_code == 502
        assert response.json()["error"] == "Fetch failed"

    @pytest.mark.parametrize("payload", [{}, {"url": ""}, {"url": 42}, {"url": "example.com"}])
    def test_missing_or_invalid_url(self, client, payload):
        with patch("adsense_auditor.app.audit_site", new=AsyncMock()) as mock_audit:
            response = client.post("/api/audit", json=payload)

        assert response.status_code == 400
        assert response.json() == {"ok": False, "error": "Provide a valid http(s) URL in { url }"}
        mock_audit.assert_not_called()

    def test_empty_body_is_missing_url(self, client):
        response = client.post("/api/audit")
        assert response.status_code == 400
        assert response.json()["error"] == "Provide a valid http(s) URL in { url }"

    def test_successful_audit(self, client):
        report = analyze_html("<title>Hello</title>privacy policy", "https://example.com")
        report.checks.ads_txt_exists = True
        with patch("adsense_auditor.app.audit_site", new=AsyncMock(return_value=report)) as mock_audit:
            response = client.post("/api/audit", json={"url": "https://example.com"})

        mock_audit.assert_awaited_once_with("https://example.com")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        data = response.json()
        assert data["ok"] is True
        assert data["page"] == {"title": "Hello", "length": 34}
        assert data["checks"]["ads_txt_exists"] is True
        assert data["checks"]["privacy_policy_present"] is True

    def test_fetch_failure(self, client):
        report = AuditReport.failure("Fetch failed", "Name or service not known")
        with patch("adsense_auditor.app.audit_site", new=AsyncMock(return_value=report)):
            response = client.post("/api/audit", json={"url": "https://nowhere.invalid"})

        assert response.status_code == 502
        assert response.json() == {
            "ok": False,
            "error": "Fetch failed",
            "detail": "Name or service not known",
        }
