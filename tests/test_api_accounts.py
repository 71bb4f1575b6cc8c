"""
Tests for the accounts API endpoint.

Exercises the full FastAPI stack: route, pydantic adapter,
JsonValidationFailureMiddleware and the catch-all error handler.
"""

from fastapi.testclient import TestClient

from json_validation.main import app

client = TestClient(app)
JSON_HEADERS = {"Accept": "application/json"}

VALID_ACCOUNT = {"email": "ada@example.com", "display_name": "Ada", "age": 36}


class TestCreateAccount:
    """Tests for POST /api/v1/accounts."""

    def test_valid_payload_returns_201(self) -> None:
        response = client.post("/api/v1/accounts", json=VALID_ACCOUNT, headers=JSON_HEADERS)

        assert response.status_code == 201
        assert response.json() == VALID_ACCOUNT

    def test_invalid_payload_returns_422_envelope(self) -> None:
        payload = {"email": "not-an-email", "display_name": "Ada", "age": -1}
        response = client.post("/api/v1/accounts", json=payload, headers=JSON_HEADERS)

        assert response.status_code == 422
        assert response.headers["content-type"] == "application/json"
        body = response.json()
        assert body["reason"] == "Validation failure."
        assert [f["property"] for f in body["validationFailures"]] == ["email", "age"]
        assert "greater than or equal to 0" in body["validationFailures"][1]["message"]

    def test_missing_field_reported(self) -> None:
        payload = {"email": "ada@example.com", "age": 36}
        response = client.post("/api/v1/accounts", json=payload, headers=JSON_HEADERS)

        assert response.status_code == 422
        assert response.json()["validationFailures"] == [
            {"property": "display_name", "message": "Field required"}
        ]

    def test_failure_response_is_not_cacheable(self) -> None:
        response = client.post("/api/v1/accounts", json={}, headers=JSON_HEADERS)

        assert response.status_code == 422
        assert response.headers["cache-control"] == "no-cache,no-store"
        assert response.headers["pragma"] == "no-cache"
        assert response.headers["expires"] == "-1"
        assert "etag" not in response.headers

    def test_identical_requests_give_identical_bodies(self) -> None:
        first = client.post("/api/v1/accounts", json={"age": -5}, headers=JSON_HEADERS)
        second = client.post("/api/v1/accounts", json={"age": -5}, headers=JSON_HEADERS)

        assert first.content == second.content

    def test_client_not_accepting_json_gets_default_handling(self) -> None:
        lenient = TestClient(app, raise_server_exceptions=False)
        response = lenient.post(
            "/api/v1/accounts", json={"age": -5}, headers={"Accept": "text/html"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_wildcard_accept_gets_default_handling(self) -> None:
        lenient = TestClient(app, raise_server_exceptions=False)
        response = lenient.post("/api/v1/accounts", json={"age": -5})

        assert response.status_code == 500
        assert "validationFailures" not in response.text

    def test_non_object_body_returns_422_envelope(self) -> None:
        """A JSON array never reaches field validation but still gets the envelope."""
        response = client.post("/api/v1/accounts", json=[1, 2], headers=JSON_HEADERS)

        assert response.status_code == 422
        assert response.headers["cache-control"] == "no-cache,no-store"
        assert response.headers["pragma"] == "no-cache"
        assert response.headers["expires"] == "-1"
        body = response.json()
        assert body["reason"] == "Validation failure."
        assert [f["property"] for f in body["validationFailures"]] == [""]
        assert "detail" not in body

    def test_malformed_json_returns_422_envelope(self) -> None:
        response = client.post(
            "/api/v1/accounts",
            content=b"{bad",
            headers={**JSON_HEADERS, "Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.headers["cache-control"] == "no-cache,no-store"
        failures = response.json()["validationFailures"]
        assert len(failures) == 1
        assert failures[0]["property"] == ""
        assert failures[0]["message"].startswith("Invalid JSON")

    def test_empty_body_returns_422_envelope(self) -> None:
        response = client.post("/api/v1/accounts", headers=JSON_HEADERS)

        assert response.status_code == 422
        assert "validationFailures" in response.json()


class TestAccountsOpenApi:
    """Tests for the documented contract of POST /api/v1/accounts."""

    def test_422_documents_validation_envelope(self) -> None:
        operation = app.openapi()["paths"]["/api/v1/accounts"]["post"]
        ref = operation["responses"]["422"]["content"]["application/json"]["schema"]["$ref"]

        assert ref.endswith("/ValidationFailureResponse")

    def test_request_body_documents_account_fields(self) -> None:
        operation = app.openapi()["paths"]["/api/v1/accounts"]["post"]
        schema = operation["requestBody"]["content"]["application/json"]["schema"]

        assert set(schema["properties"]) == {"email", "display_name", "age"}
