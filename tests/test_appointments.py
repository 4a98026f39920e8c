import pytest


@pytest.fixture
def customer(owner_client):
    return owner_client.post("/api/customers/", json={"name": "Jane Doe", "phone": "07700900000"}).json()


@pytest.fixture
def services(owner_client):
    return [
        owner_client.post("/api/services/", json={"name": "Cut", "price": 40, "duration": 45, "category": "Hair"}).json(),
        owner_client.post("/api/services/", json={"name": "Colour", "price": 60.5, "duration": 90, "category": "Hair"}).json(),
    ]


def book(client, customer, services, start, end):
    return client.post("/api/appointments/", json={
        "customerId": customer["customerId"],
        "services": [{"serviceId": s["serviceId"], "price": s["price"]} for s in services],
        "startTime": start,
        "endTime": end,
    })


def test_total_is_derived_and_details_populated(owner_client, customer, services):
    response = book(owner_client, customer, services, "2024-05-01T10:00:00Z", "2024-05-01T12:00:00Z")

    assert response.status_code == 201
    appointment = response.json()
    assert appointment["totalAmount"] == 100.5
    assert appointment["status"] == "scheduled"
    assert appointment["customer"]["name"] == "Jane Doe"
    assert sorted(s["name"] for s in appointment["serviceDetails"]) == ["Colour", "Cut"]


def test_create_does_not_check_overlap(owner_client, customer, services):
    first = book(owner_client, customer, services, "2024-05-01T10:00:00Z", "2024-05-01T11:00:00Z")
    second = book(owner_client, customer, services, "2024-05-01T10:30:00Z", "2024-05-01T11:30:00Z")
    assert first.status_code == second.status_code == 201


def test_end_must_follow_start(owner_client, customer, services):
    response = book(owner_client, customer, services, "2024-05-01T11:00:00Z", "2024-05-01T10:00:00Z")
    assert response.status_code == 400
    assert "endTime must be after startTime" in response.json()["detail"]


def test_unknown_customer_cannot_book(owner_client, services):
    response = book(owner_client, {"customerId": "CUNOPE0000"}, services, "2024-05-01T10:00:00Z", "2024-05-01T11:00:00Z")
    assert response.status_code == 404


def test_reschedule_into_overlap_is_rejected(owner_client, customer, services):
    book(owner_client, customer, services, "2024-05-01T10:00:00Z", "2024-05-01T11:00:00Z")
    other = book(owner_client, customer, services, "2024-05-01T13:00:00Z", "2024-05-01T14:00:00Z").json()

    response = owner_client.put(f"/api/appointments/{other['appointmentId']}", json={
        "startTime": "2024-05-01T10:30:00Z",
        "endTime": "2024-05-01T11:30:00Z",
    })
    assert response.status_code == 400
    assert response.json() == {"detail": "There is an overlapping appointment"}


def test_reschedule_back_to_back_is_allowed(owner_client, customer, services):
    book(owner_client, customer, services, "2024-05-01T10:00:00Z", "2024-05-01T11:00:00Z")
    other = book(owner_client, customer, services, "2024-05-01T13:00:00Z", "2024-05-01T14:00:00Z").json()

    response = owner_client.put(f"/api/appointments/{other['appointmentId']}", json={
        "startTime": "2024-05-01T11:00:00Z",
        "endTime": "2024-05-01T12:00:00Z",
    })
    assert response.status_code == 200
    assert response.json()["startTime"].startswith("2024-05-01T11:00:00")


def test_rescheduling_within_own_slot_is_allowed(owner_client, customer, services):
    appointment = book(owner_client, customer, services, "2024-05-01T10:00:00Z", "2024-05-01T11:00:00Z").json()
    response = owner_client.put(f"/api/appointments/{appointment['appointmentId']}", json={
        "startTime": "2024-05-01T10:15:00Z",
        "endTime": "2024-05-01T11:00:00Z",
    })
    assert response.status_code == 200


def test_changing_services_recomputes_total(owner_client, customer, services):
    appointment = book(owner_client, customer, services, "2024-05-01T10:00:00Z", "2024-05-01T11:00:00Z").json()
    cut = services[0]

    response = owner_client.put(f"/api/appointments/{appointment['appointmentId']}", json={
        "services": [{"serviceId": cut["serviceId"], "price": cut["price"]}],
        "status": "completed",
    })
    assert response.json()["totalAmount"] == 40
    assert response.json()["status"] == "completed"


def test_list_and_delete(owner_client, customer, services):
    early = book(owner_client, customer, services, "2024-05-01T09:00:00Z", "2024-05-01T10:00:00Z").json()
    late = book(owner_client, customer, services, "2024-05-02T09:00:00Z", "2024-05-02T10:00:00Z").json()

    listed = owner_client.get("/api/appointments/").json()
    assert [a["appointmentId"] for a in listed] == [late["appointmentId"], early["appointmentId"]]

    assert owner_client.delete(f"/api/appointments/{early['appointmentId']}").status_code == 200
    assert owner_client.get(f"/api/appointments/{early['appointmentId']}").status_code == 404


@pytest.mark.parametrize("field", ["customerId", "services", "startTime", "endTime", "status", "paymentStatus"])
def test_update_rejects_null_for_required_fields(owner_client, customer, services, field):
    appointment = book(owner_client, customer, services, "2024-05-01T10:00:00Z", "2024-05-01T11:00:00Z").json()

    response = owner_client.put(f"/api/appointments/{appointment['appointmentId']}", json={field: None})
    assert response.status_code == 400
    assert field in response.json()["detail"]
    assert owner_client.get("/api/appointments/").status_code == 200
