"""Integration tests for the REST API."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from rackmount.web import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def _config(**sections: Any) -> dict[str, Any]:
    return {"schema_version": "1.0", **sections}


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["formats"] == ["dxf", "json", "scad", "stl"]


class TestGenerateEndpoint:
    """Tests for POST /api/v1/generate."""

    def test_json_by_request_format(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate", json={"config": _config(switch={"count": 2}), "format": "json"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["schema_version"] == "1.0"
        assert data["parameters"]["switch_count"] == 2
        assert data["tree"]["type"] == "difference"

    def test_format_from_config(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={"config": _config()})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("// Rack-mount switch enclosure")

    def test_binary_format_not_inline(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate", json={"config": _config(), "format": "stl"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "unsupported_format"
        assert body["details"]["available"] == ["json", "scad"]

    def test_configuration_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate",
            json={"config": _config(rack={"width": 200.0}), "format": "json"},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "configuration"
        assert body["details"][0]["parameter"] == "rack_width"

    def test_schema_error(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={"config": {"switch": {"count": 2}}})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "schema_version"

    def test_missing_config(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={})

        assert response.status_code == 422


class TestSolveEndpoint:
    """Tests for POST /api/v1/solve."""

    def test_solve(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/solve",
            json={"config": _config(rack={"height": 2.0}, switch={"count": 3})},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["dimensions"]["was_adjusted"] is True
        assert body["dimensions"]["total_height_mm"] == pytest.approx(108.9)
        assert len(body["mounting_holes"]) == 14

    def test_configuration_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/solve", json={"config": _config(chassis={"lip_thickness": 20.0})}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "configuration"
        assert body["details"] == [
            {"parameter": "lip_thickness", "message": "Lip closes the switch opening completely"}
        ]


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        config = _config(rack={"height": 2.0}, switch={"width": 150.0, "case_thickness": 16.0})

        response = client.post("/api/v1/validate", json={"config": config})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_rear_frame_warning(self, client: TestClient) -> None:
        response = client.post("/api/v1/validate", json={"config": _config()})

        body = response.json()
        assert body["is_valid"] is True
        assert [w["path"] for w in body["warnings"]] == ["switch.case_thickness"]

    def test_warnings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _config(switch={"height": 50.0})}
        )

        body = response.json()
        assert body["is_valid"] is True
        assert body["warnings"][0]["path"] == "rack.height"

    def test_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _config(rack={"width": 200.0})}
        )

        body = response.json()
        assert body["is_valid"] is False
        assert body["errors"][0]["path"] == "rack.width"


class TestExportEndpoint:
    """Tests for POST /api/v1/export/{format}."""

    @pytest.mark.parametrize(
        "format_name, media_type",
        [
            ("stl", "application/octet-stream"),
            ("dxf", "application/dxf"),
            ("scad", "text/plain"),
            ("json", "application/json"),
        ],
    )
    def test_export(self, client: TestClient, format_name: str, media_type: str) -> None:
        response = client.post(f"/api/v1/export/{format_name}", json={"config": _config()})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith(media_type)
        assert (
            response.headers["content-disposition"]
            == f"attachment; filename=enclosure.{format_name}"
        )
        assert len(response.content) > 0

    def test_stl_part_from_config(self, client: TestClient) -> None:
        body = client.post("/api/v1/export/stl", json={"config": _config()})
        cutters = client.post(
            "/api/v1/export/stl", json={"config": _config(output={"stl_part": "cutters"})}
        )

        assert len(cutters.content) > len(body.content)

    def test_unknown_format(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/obj", json={"config": _config()})

        assert response.status_code == 400
        assert response.json()["error_type"] == "unsupported_format"

    def test_generation_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/export/stl", json={"config": _config(switch={"tolerance": 6.0})}
        )

        assert response.status_code == 422
        assert response.json()["details"][0]["parameter"] == "tolerance"
