import pytest
from crud import consultation_form_crud


@pytest.fixture
def customer(owner_client):
    return owner_client.post("/api/customers/", json={"name": "Jane Doe", "phone": "07700900000"}).json()


def test_completed_form_updates_customer(owner, therapist, customer, login_as):
    client = login_as(therapist)
    response = client.post("/api/consultation-forms/", json={
        "customerId": customer["customerId"],
        "answers": {"allergies": "none", "pregnant": False},
        "completedAt": "2024-06-01T09:30:00Z",
    })

    assert response.status_code == 201
    form = response.json()
    assert form["therapistId"] == therapist.user_id
    assert form["ownerId"] == owner.user_id
    assert form["status"] == "completed"

    updated = client.get(f"/api/customers/{customer['customerId']}").json()
    assert updated["lastConsultationFormDate"].startswith("2024-06-01T09:30:00")


def test_draft_form_leaves_customer_alone(owner_client, customer):
    response = owner_client.post("/api/consultation-forms/", json={
        "customerId": customer["customerId"],
        "status": "draft",
    })
    assert response.status_code == 201

    updated = owner_client.get(f"/api/customers/{customer['customerId']}").json()
    assert updated["lastConsultationFormDate"] is None


def test_customer_update_failure_does_not_fail_the_form(owner_client, customer, monkeypatch):
    async def broken(*args, **kwargs):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(consultation_form_crud, "set_last_consultation_form_date", broken)

    response = owner_client.post("/api/consultation-forms/", json={"customerId": customer["customerId"]})
    assert response.status_code == 201

    forms = owner_client.get(f"/api/consultation-forms/?customerId={customer['customerId']}").json()
    assert [f["formId"] for f in forms] == [response.json()["formId"]]
    updated = owner_client.get(f"/api/customers/{customer['customerId']}").json()
    assert updated["lastConsultationFormDate"] is None


def test_unknown_customer(owner_client):
    response = owner_client.post("/api/consultation-forms/", json={"customerId": "CUNOPE0000"})
    assert response.status_code == 404
    assert response.json() == {"detail": "Customer not found"}


def test_owner_must_exist(login_as, therapist):
    client = login_as(therapist)
    customer = client.post("/api/customers/", json={"name": "Jane", "phone": "1"}).json()

    response = client.post("/api/consultation-forms/", json={"customerId": customer["customerId"]})
    assert response.status_code == 404
    assert response.json() == {"detail": "Owner not found"}


def test_forms_require_session(client):
    assert client.post("/api/consultation-forms/", json={"customerId": "CU1"}).status_code == 401
    assert client.get("/api/consultation-forms/").status_code == 401
