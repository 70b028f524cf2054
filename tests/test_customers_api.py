import asyncio
import uuid

from app.api.v1.dependencies import get_customer_repository
from app.api.v1.routers import health
from app.crud.customer_crud import InMemoryCustomerRepository
from app.main import app

BASE_URL = "/api/v1/customers"


def unique_email(prefix="alice"):
    return f"{prefix}{uuid.uuid4().hex}@gmail.com"


def create_customer(client, name="Alice", email=None, address="US"):
    payload = {"name": name, "email": email or unique_email(), "address": address}
    response = client.post(BASE_URL, json=payload)
    assert response.status_code == 200
    return response.json()


def test_root_and_health(client):
    assert client.get("/").status_code == 200
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_database_health(client):
    response = client.get("/api/v1/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "reachable"}


def test_create_customer(client):
    email = unique_email()

    created = create_customer(client, email=email)

    assert isinstance(created["id"], int)
    response = client.get(BASE_URL)
    assert response.status_code == 200
    found = [customer for customer in response.json() if customer["email"] == email]
    assert len(found) == 1
    assert found[0] == {"id": created["id"], "name": "Alice", "email": email, "address": "US"}


def test_create_customer_with_taken_email_returns_conflict(client):
    email = unique_email()
    create_customer(client, email=email)

    response = client.post(BASE_URL, json={"name": "Bob", "email": email, "address": "UK"})

    assert response.status_code == 409
    assert response.json()["error_code"] == "EMAIL_UNAVAILABLE"
    assert len(client.get(BASE_URL).json()) == 1


def test_create_customer_with_invalid_payload_is_rejected(client):
    response = client.post(BASE_URL, json={"name": "", "email": "not-an-email", "address": "US"})

    assert response.status_code == 422


def test_get_unknown_customer_returns_not_found(client):
    response = client.get(f"{BASE_URL}/9999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Customer with id 9999 not found.", "error_code": "CUSTOMER_NOT_FOUND"}


def test_update_customer(client):
    created = create_customer(client)
    new_email = unique_email("alicetrump")

    response = client.put(
        f"{BASE_URL}/{created['id']}",
        params={"name": "Alice Trump", "email": new_email, "address": "UK"},
    )

    assert response.status_code == 200
    updated = client.get(f"{BASE_URL}/{created['id']}").json()
    assert updated == {"id": created["id"], "name": "Alice Trump", "email": new_email, "address": "UK"}


def test_partial_update_keeps_other_fields(client):
    created = create_customer(client)

    response = client.put(f"{BASE_URL}/{created['id']}", params={"name": "Alice Trump", "address": "UK"})

    assert response.status_code == 200
    assert response.json() == {
        "id": created["id"], "name": "Alice Trump", "email": created["email"], "address": "UK"
    }


def test_update_with_email_of_another_customer_returns_conflict(client):
    alice = create_customer(client)
    bob = create_customer(client, name="Bob", email=unique_email("bob"), address="UK")

    response = client.put(f"{BASE_URL}/{alice['id']}", params={"email": bob["email"], "name": "Changed"})

    assert response.status_code == 409
    assert client.get(f"{BASE_URL}/{alice['id']}").json() == alice


def test_update_unknown_customer_returns_not_found(client):
    response = client.put(f"{BASE_URL}/9999", params={"name": "Ghost"})

    assert response.status_code == 404


def test_delete_customer(client):
    created = create_customer(client)

    response = client.delete(f"{BASE_URL}/{created['id']}")

    assert response.status_code == 204
    assert client.get(f"{BASE_URL}/{created['id']}").status_code == 404


def test_delete_unknown_customer_returns_not_found(client):
    response = client.delete(f"{BASE_URL}/9999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Customer with id 9999 does not exist."


def test_database_health_check_runs_in_threadpool(client, monkeypatch):
    calls = []
    real_text = health.text

    def recording_text(statement):
        try:
            asyncio.get_running_loop()
            on_event_loop = True
        except RuntimeError:
            on_event_loop = False
        calls.append(on_event_loop)
        return real_text(statement)

    monkeypatch.setattr(health, "text", recording_text)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert calls == [False]


def test_customer_lifecycle_on_in_memory_storage(client):
    repository = InMemoryCustomerRepository()
    app.dependency_overrides[get_customer_repository] = lambda: repository
    try:
        created = create_customer(client, email="alice@gmail.com")
        assert repository.find_by_email("alice@gmail.com").id == created["id"]

        conflict = client.post(BASE_URL, json={"name": "Bob", "email": "alice@gmail.com", "address": "UK"})
        assert conflict.status_code == 409

        response = client.put(f"{BASE_URL}/{created['id']}", params={"name": "Alice Trump", "address": "UK"})
        assert response.status_code == 200
        assert repository.find_by_id(created["id"]).name == "Alice Trump"
        assert client.get(BASE_URL).json() == [
            {"id": created["id"], "name": "Alice Trump", "email": "alice@gmail.com", "address": "UK"}
        ]

        assert client.delete(f"{BASE_URL}/{created['id']}").status_code == 204
        assert repository.find_all() == []
        assert client.get(f"{BASE_URL}/{created['id']}").status_code == 404
    finally:
        app.dependency_overrides.pop(get_customer_repository, None)
