"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for both endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def schema() -> dict:
    """Fetch the generated OpenAPI schema."""
    response = TestClient(app).get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_title_and_description(self, schema: dict) -> None:
        """OpenAPI schema has correct title and description."""
        assert schema["info"]["title"] == "user-registry"
        assert "look them up by email" in schema["info"]["description"]
        assert schema["info"]["version"] == "0.1.0"

    def test_only_designated_methods_documented(self, schema: dict) -> None:
        """Method fallback routes are excluded from the schema."""
        assert set(schema["paths"]) == {"/register", "/user"}
        assert set(schema["paths"]["/register"]) == {"post"}
        assert set(schema["paths"]["/user"]) == {"get"}

    def test_register_endpoint_in_schema(self, schema: dict) -> None:
        """POST /register is documented with its request body and status codes."""
        register = schema["paths"]["/register"]["post"]
        assert register["summary"] == "Register a new user"
        assert {"201", "400", "403", "405", "500"} <= set(register["responses"])

        body_schema = register["requestBody"]["content"]["application/json"]["schema"]
        assert set(body_schema["properties"]) == {"email", "name"}

    def test_get_user_endpoint_in_schema(self, schema: dict) -> None:
        """GET /user is documented with its email query parameter."""
        get_user = schema["paths"]["/user"]["get"]
        assert get_user["summary"] == "Get a user by email"
        assert [p["name"] for p in get_user["parameters"]] == ["email"]
        assert {"200", "400", "404", "405", "500"} <= set(get_user["responses"])

    def test_user_response_schema(self, schema: dict) -> None:
        """UserResponse schema has email and name fields."""
        components = schema["components"]["schemas"]
        assert "UserResponse" in components
        assert set(components["UserResponse"]["properties"]) == {"email", "name"}
