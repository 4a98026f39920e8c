import pytest


@pytest.fixture
def service(owner_client):
    return owner_client.post("/api/services/", json={"name": "Facial", "price": 50, "duration": 30, "category": "Skin"}).json()


def test_update_service(owner_client, service):
    response = owner_client.put(f"/api/services/{service['serviceId']}", json={"price": 55, "description": None})
    assert response.status_code == 200
    assert response.json()["price"] == 55
    assert response.json()["name"] == "Facial"


@pytest.mark.parametrize("field", ["name", "price", "duration", "category", "active"])
def test_update_rejects_null_for_required_fields(owner_client, service, field):
    response = owner_client.put(f"/api/services/{service['serviceId']}", json={field: None})
    assert response.status_code == 400
    assert field in response.json()["detail"]
    assert owner_client.get("/api/services/").status_code == 200


def test_categories(owner_client, service):
    owner_client.post("/api/services/", json={"name": "Cut", "price": 30, "duration": 30, "category": "Hair"})
    assert owner_client.get("/api/services/categories").json() == ["Hair", "Skin"]


def test_unknown_service(owner_client):
    assert owner_client.get("/api/services/SVNOPE0000").json() == {"detail": "Service not found"}
    assert owner_client.delete("/api/services/SVNOPE0000").status_code == 404
