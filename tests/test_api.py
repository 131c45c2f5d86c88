"""API tests. The app builds its model lazily from sample data; no server needed."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from feebook.application import ContactNotFoundError, Logic
from feebook.infrastructure import ModelManager, sample_contacts


@pytest.fixture
def client():
    app.state.logic = None
    return TestClient(app)


def _new_contact(**overrides) -> dict:
    body = {
        "name": "Roy Balakrishnan",
        "phone": "92624417",
        "email": "royb@example.com",
        "address": "Blk 45 Aljunied Street 85, #11-31",
        "fees": "350",
        "class_id": "4",
    }
    body.update(overrides)
    return body


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_contacts(client):
    r = client.get("/contacts")
    assert r.status_code == 200
    items = r.json()
    assert items[0]["index"] == 1
    assert items[0]["name"] == "Alex Yeoh"
    assert items[0]["months_paid"] == ["2024-01", "2024-02"]


def test_markpaid_command(client):
    r = client.post("/commands", json={"command": "markpaid 1 m/2024-03"})
    assert r.status_code == 200
    assert r.json() == {
        "feedback": "Marked contact as paid: Alex Yeoh; Months Paid: 2024-01, 2024-02, 2024-03"
    }
    assert client.get("/contacts").json()[0]["months_paid"] == ["2024-01", "2024-02", "2024-03"]


def test_markpaid_duplicate_returns_400(client):
    r = client.post("/commands", json={"command": "markpaid 1 m/2024-01"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Duplicate month paid: 2024-01"


def test_unknown_command_returns_400(client):
    r = client.post("/commands", json={"command": "fly 1"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Unknown command"


def test_find_filters_listing(client):
    client.post("/commands", json={"command": "find david"})
    names = [c["name"] for c in client.get("/contacts").json()]
    assert names == ["David Li"]


def test_create_contact(client):
    r = client.post("/contacts", json=_new_contact(months_paid=["2024-01"], tags=["new"]))
    assert r.status_code == 201
    assert r.json()["feedback"].startswith("New contact added: Roy Balakrishnan;")
    last = client.get("/contacts").json()[-1]
    assert last["name"] == "Roy Balakrishnan"
    assert last["months_paid"] == ["2024-01"]
    assert last["tags"] == ["new"]


def test_create_contact_invalid_month_returns_400(client):
    r = client.post("/contacts", json=_new_contact(months_paid=["2024-13"]))
    assert r.status_code == 400
    assert r.json()["detail"].startswith("Invalid month format: 2024-13.")


def test_create_contact_invalid_email_returns_400(client):
    r = client.post("/contacts", json=_new_contact(email="not-an-email"))
    assert r.status_code == 400


def test_create_duplicate_contact_returns_409(client):
    r = client.post("/contacts", json=_new_contact(name="Alex Yeoh"))
    assert r.status_code == 409


class _ConcurrentlyEditedModel(ModelManager):
    """Model whose contacts change between a command's read and its write."""

    def set_contact(self, target, edited):
        raise ContactNotFoundError(f"No such contact: {target.name}")


def test_contact_changed_mid_command_returns_409(client):
    app.state.logic = Logic(_ConcurrentlyEditedModel(sample_contacts(), phone_region="SG"))
    r = client.post("/commands", json={"command": "markpaid 3 m/2025-07"})
    assert r.status_code == 409
    assert "changed by another request" in r.json()["detail"]
