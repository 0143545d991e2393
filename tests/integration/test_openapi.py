"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_title_and_version(self, schema: dict) -> None:
        assert schema["info"]["title"] == "workshop-registration"
        assert schema["info"]["version"] == "0.1.0"

    @pytest.mark.parametrize(
        ("path", "method"),
        [
            ("/register", "post"),
            ("/remaining-seats", "get"),
            ("/participants", "get"),
            ("/participants/summary", "get"),
            ("/health", "get"),
        ],
    )
    def test_endpoint_documented(self, schema: dict, path: str, method: str) -> None:
        assert method in schema["paths"][path]

    def test_register_request_schema(self, schema: dict) -> None:
        props = schema["components"]["schemas"]["RegisterRequest"]["properties"]
        assert set(props) == {"name", "usn", "email", "year", "phone"}

    def test_remaining_seats_uses_camel_case(self, schema: dict) -> None:
        props = schema["components"]["schemas"]["RemainingSeatsResponse"]["properties"]
        assert "remainingSeats" in props

    def test_tags(self, schema: dict) -> None:
        tag_names = [t["name"] for t in schema.get("tags", [])]
        assert tag_names == ["registration", "admin"]
        assert "registration" in schema["paths"]["/register"]["post"]["tags"]
        assert "admin" in schema["paths"]["/participants"]["get"]["tags"]


class TestSwaggerUI:
    """Tests for Swagger UI availability."""

    def test_docs_endpoint_accessible(self, client: TestClient) -> None:
        response = client.get("/docs")
        assert response.status_code == 200
        assert "swagger" in response.text.lower()
