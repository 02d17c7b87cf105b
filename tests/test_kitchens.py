import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.domain.problem_types import ProblemCategory, lookup


# ============================================================================
# READ KITCHEN TESTS
# ============================================================================


def test_list_kitchens(client, kitchen):
    """Test listing kitchens."""
    response = client.get("/api/v1/kitchens")
    assert response.status_code == 200
    assert response.json() == [{"id": kitchen.id, "name": "Thai"}]


def test_get_kitchen_by_id(client, kitchen):
    response = client.get(f"/api/v1/kitchens/{kitchen.id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Thai"


def test_get_missing_kitchen_returns_problem(client, db: Session):
    """Test a missing kitchen yields a resource-not-found document."""
    response = client.get("/api/v1/kitchens/42")

    assert response.status_code == 404
    data = response.json()
    assert data["status"] == 404
    assert data["type"] == lookup(ProblemCategory.RESOURCE_NOT_FOUND).uri
    assert data["title"] == "Resource not found"
    assert data["detail"] == "kitchen 42 not found"
    assert data["userMessage"] == "kitchen 42 not found"
    assert "timestamp" in data


def test_get_kitchen_with_non_numeric_id(client, db: Session):
    response = client.get("/api/v1/kitchens/thai")

    assert response.status_code == 400
    data = response.json()
    assert data["type"] == lookup(ProblemCategory.INVALID_PARAMETER).uri
    assert data["detail"] == "parameter 'kitchen_id' received value 'thai', expected type int"
    assert data["userMessage"] == settings.generic_user_message


# ============================================================================
# CREATE KITCHEN TESTS
# ============================================================================


def test_create_kitchen(client, db: Session):
    response = client.post("/api/v1/kitchens", json={"name": "Indian"})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Indian"
    assert "id" in data


def test_create_kitchen_with_unknown_property(client, db: Session):
    """Test an unknown property is reported by name."""
    response = client.post("/api/v1/kitchens", json={"name": "Indian", "chef": "Raj"})

    assert response.status_code == 400
    data = response.json()
    assert data["type"] == lookup(ProblemCategory.UNREADABLE_MESSAGE).uri
    assert data["detail"] == "property 'chef' does not exist"
    assert data["userMessage"] == settings.generic_user_message


def test_create_kitchen_with_malformed_json(client, db: Session):
    response = client.post(
        "/api/v1/kitchens",
        content=b'{"name": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["type"] == lookup(ProblemCategory.UNREADABLE_MESSAGE).uri
    assert data["detail"] == "request body invalid"


# ============================================================================
# DELETE KITCHEN TESTS
# ============================================================================


def test_delete_unused_kitchen(client, kitchen):
    response = client.delete(f"/api/v1/kitchens/{kitchen.id}")
    assert response.status_code == 204

    response = client.get(f"/api/v1/kitchens/{kitchen.id}")
    assert response.status_code == 404


def test_delete_kitchen_in_use_returns_conflict(client, kitchen, restaurant):
    """Test removing a referenced kitchen yields resource-in-use."""
    response = client.delete(f"/api/v1/kitchens/{kitchen.id}")

    assert response.status_code == 409
    data = response.json()
    assert data["type"] == lookup(ProblemCategory.RESOURCE_IN_USE).uri
    assert data["title"] == "Resource in use"
    assert data["detail"] == f"kitchen {kitchen.id} is in use and cannot be removed"


def test_delete_missing_kitchen(client, db: Session):
    response = client.delete("/api/v1/kitchens/7")
    assert response.status_code == 404
    assert response.json()["detail"] == "kitchen 7 not found"


def test_create_kitchen_with_undecodable_body(client, db: Session):
    """Test a body that is not valid UTF-8 is an unreadable message."""
    response = client.post(
        "/api/v1/kitchens",
        content=b"\xff\xfe{",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["type"] == lookup(ProblemCategory.UNREADABLE_MESSAGE).uri
    assert data["detail"] == "request body invalid"
    assert data["userMessage"] == settings.generic_user_message
    assert "parsing" not in response.text


def test_get_kitchen_with_oversized_id(client, db: Session, caplog):
    """Test an id too large for the database is a client error, not an incident."""
    with caplog.at_level(logging.ERROR, logger="app.api.exception_handlers"):
        response = client.get("/api/v1/kitchens/99999999999999999999999")

    assert response.status_code == 400
    data = response.json()
    assert data["title"] == "Bad Request"
    assert data["userMessage"] == settings.generic_user_message
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_delete_kitchen_with_non_positive_id(client, db: Session):
    response = client.delete("/api/v1/kitchens/0")
    assert response.status_code == 400
