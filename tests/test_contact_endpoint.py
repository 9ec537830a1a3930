# Tests for POST /api/contact/submit.

from __future__ import annotations

import pytest

from support import FakeDatabase, api_test_client


def test_submission_defaults_preferred_contact_to_email(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeDatabase().queue({"id": 9}).install(monkeypatch)

    with api_test_client() as client:
        response = client.post(
            "/api/contact/submit",
            json={"name": "Sam", "email": "sam@example.com", "message": "Laptop will not boot"},
        )

    assert response.status_code == 201
    assert response.json() == {
        "success": True,
        "message": "Contact form submitted successfully",
        "submissionId": 9,
    }
    sql, args = fake.calls[0]
    assert "INSERT INTO contact_submissions" in sql
    assert "'new'" in sql
    assert args == ("Sam", "sam@example.com", None, None, "Laptop will not boot", "email")


def test_submission_keeps_caller_preferred_contact(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeDatabase().queue({"id": 10}).install(monkeypatch)

    with api_test_client() as client:
        response = client.post(
            "/api/contact/submit",
            json={
                "name": "Sam",
                "email": "sam@example.com",
                "phone": "555-0100",
                "service": "Data recovery",
                "message": "Help",
                "preferredContact": "phone",
            },
        )

    assert response.status_code == 201
    assert fake.last_args == ("Sam", "sam@example.com", "555-0100", "Data recovery", "Help", "phone")


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Sam", "email": "sam@example.com", "message": ""},
        {"name": "Sam", "email": "sam@example.com"},
        {"name": "", "email": "sam@example.com", "message": "Help"},
        {"name": "Sam", "message": "Help"},
    ],
)
def test_missing_required_field_returns_400(monkeypatch: pytest.MonkeyPatch, body: dict) -> None:
    fake = FakeDatabase().install(monkeypatch)

    with api_test_client() as client:
        response = client.post("/api/contact/submit", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Name, email, and message are required"}
    assert fake.calls == []


def test_no_email_format_validation(monkeypatch: pytest.MonkeyPatch) -> None:
    FakeDatabase().queue({"id": 11}).install(monkeypatch)

    with api_test_client() as client:
        response = client.post(
            "/api/contact/submit",
            json={"name": "Sam", "email": "not-an-email", "message": "Help"},
        )

    assert response.status_code == 201


def test_insert_failure_is_surfaced(monkeypatch: pytest.MonkeyPatch) -> None:
    FakeDatabase().fail('null value in column "email"').install(monkeypatch)

    with api_test_client() as client:
        response = client.post(
            "/api/contact/submit",
            json={"name": "Sam", "email": "sam@example.com", "message": "Help"},
        )

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Failed to submit contact form",
        "error": 'null value in column "email"',
    }
