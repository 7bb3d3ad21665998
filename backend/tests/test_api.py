"""
HSN Validation API Tests
Exercises the FastAPI routes end to end with TestClient.

Run with:
    pytest backend/tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from app.api.routes import hsn
from app.config import settings
from app.data.hsn_catalog import SAMPLE_CATALOG
from app.main import app


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def client(monkeypatch):
    """Client with the engine built from the bundled sample catalog."""
    monkeypatch.setattr(settings, "HSN_CATALOG_PATH", "")
    monkeypatch.setattr(settings, "HSN_HIERARCHY_CHECK", False)
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# BATCH VALIDATION
# =============================================================================

class TestValidateEndpoint:

    def test_post_batch(self, client):
        response = client.post(
            "/api/v1/hsn/validate",
            json={"codes": "0101, 08013220, 99999999, 12AB, "},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 5
        assert body["valid_count"] == 2
        assert body["invalid_count"] == 3
        assert body["results"][0] == {
            "valid": True,
            "code": "0101",
            "description": SAMPLE_CATALOG["0101"],
        }
        assert [r.get("reason") for r in body["results"][2:]] == ["not-found", "format", "format"]

    def test_absent_fields_omitted(self, client):
        body = client.post("/api/v1/hsn/validate", json={"codes": "0101,99"}).json()
        valid, invalid = body["results"]
        assert "reason" not in valid and "detail" not in valid
        assert "description" not in invalid

    def test_get_batch(self, client):
        response = client.get("/api/v1/hsn/validate", params={"codes": "10063020,1006"})
        assert response.status_code == 200
        assert response.json()["valid_count"] == 2

    def test_delimiter_override(self, client):
        body = client.post(
            "/api/v1/hsn/validate",
            json={"codes": "0101;5201", "delimiter": ";"},
        ).json()
        assert body["total"] == 2
        assert body["valid_count"] == 2

    def test_empty_delimiter_rejected(self, client):
        response = client.post("/api/v1/hsn/validate", json={"codes": "0101", "delimiter": ""})
        assert response.status_code == 422

    def test_missing_codes_field(self, client):
        assert client.post("/api/v1/hsn/validate", json={}).status_code == 422

    def test_batch_limit(self, client, monkeypatch):
        monkeypatch.setattr(settings, "HSN_MAX_BATCH_CODES", 3)
        response = client.post("/api/v1/hsn/validate", json={"codes": "01,01,01,01"})
        assert response.status_code == 413


# =============================================================================
# SINGLE CODE + CATALOG
# =============================================================================

class TestCodeEndpoints:

    def test_single_code_valid(self, client):
        body = client.get("/api/v1/hsn/codes/120740").json()
        assert body == {"valid": True, "code": "120740", "description": SAMPLE_CATALOG["120740"]}

    def test_single_code_invalid(self, client):
        body = client.get("/api/v1/hsn/codes/12AB").json()
        assert body["valid"] is False
        assert body["reason"] == "format"

    def test_catalog_lookup(self, client):
        response = client.get("/api/v1/hsn/catalog/5201")
        assert response.status_code == 200
        assert response.json()["description"] == SAMPLE_CATALOG["5201"]

    def test_catalog_lookup_unknown(self, client):
        assert client.get("/api/v1/hsn/catalog/9999").status_code == 404

    def test_catalog_stats(self, client):
        body = client.get("/api/v1/hsn/catalog").json()
        assert body["source"] == "bundled sample"
        assert body["code_count"] == len(SAMPLE_CATALOG)
        assert body["hierarchy_check"] is False


# =============================================================================
# RELOAD
# =============================================================================

class TestCatalogReload:

    def test_reload_swaps_engine(self, client, monkeypatch, catalog_csv):
        monkeypatch.setattr(settings, "HSN_CATALOG_PATH", str(catalog_csv))
        response = client.post("/api/v1/hsn/catalog/reload")
        assert response.status_code == 200
        assert response.json()["code_count"] == 4
        assert response.json()["skipped_rows"] == 2

        # 0801 is only in the bundled sample
        assert client.get("/api/v1/hsn/codes/0801").json()["reason"] == "not-found"

    def test_failed_reload_keeps_current_engine(self, client, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "HSN_CATALOG_PATH", str(tmp_path / "missing.csv"))
        response = client.post("/api/v1/hsn/catalog/reload")
        assert response.status_code == 503
        assert client.get("/api/v1/hsn/catalog").json()["code_count"] == len(SAMPLE_CATALOG)

    def test_reload_with_bad_scope_keeps_current_engine(self, client, monkeypatch):
        # Assignment skips settings validation, as a hand-edited runtime value would
        monkeypatch.setattr(settings, "HSN_HIERARCHY_SCOPE", "chapters")
        response = client.post("/api/v1/hsn/catalog/reload")
        assert response.status_code == 503
        assert "chapters" in response.json()["detail"]

        stats = client.get("/api/v1/hsn/catalog").json()
        assert stats["hierarchy_scope"] == "tariff_item"
        assert client.get("/api/v1/hsn/codes/0101").json()["valid"] is True


# =============================================================================
# SERVICE
# =============================================================================

class TestService:

    def test_root(self, client):
        assert client.get("/").json()["status"] == "operational"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_unavailable_without_engine(self):
        hsn.set_engine(None)
        response = TestClient(app).get("/api/v1/hsn/validate", params={"codes": "0101"})
        assert response.status_code == 503
