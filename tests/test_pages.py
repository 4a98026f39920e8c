from tests.conftest import PASSWORD


def test_unauthenticated_page_redirects_to_login(client):
    response = client.get("/reports", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/?callbackUrl=/reports"


def test_login_after_redirect_lands_on_callback(client, therapist):
    redirect = client.get("/reports", follow_redirects=False).headers["location"]
    callback = redirect.split("callbackUrl=", 1)[1]

    response = client.post("/api/auth/login", json={
        "username": "tina", "password": PASSWORD, "callbackUrl": callback
    })
    assert response.json()["redirectTo"] == "/reports"
    assert client.get("/reports", follow_redirects=False).status_code == 200


def test_therapist_is_sent_to_pos_from_owner_pages(login_as, therapist):
    client = login_as(therapist)
    for path in ("/dashboard", "/users", "/services", "/hours"):
        response = client.get(path, follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/pos"


def test_owner_sees_dashboard(owner_client):
    response = owner_client.get("/dashboard", follow_redirects=False)
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["role"] == "owner"
    assert body["stats"]["today"]["transactionCount"] == 0
    assert body["stats"]["customerCount"] == 0


def test_pos_page_lists_active_records(login_as, therapist, owner):
    client = login_as(therapist)
    client.post("/api/services/", json={"name": "Facial", "price": 50, "duration": 30, "category": "Skin"})
    client.post("/api/services/", json={"name": "Old", "price": 10, "duration": 10, "category": "Skin", "active": False})

    body = client.get("/pos").json()
    assert [service["name"] for service in body["services"]] == ["Facial"]
    assert [user["username"] for user in body["therapists"]] == ["tina"]


def test_login_page_redirects_signed_in_users(owner_client):
    response = owner_client.get("/?callbackUrl=/customers", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/customers"


def test_login_page_shows_logo(client):
    response = client.get("/?callbackUrl=/pos")
    assert response.status_code == 200
    assert response.json() == {"callbackUrl": "/pos", "logo": ""}


def test_consultation_form_page_unknown_customer(owner_client):
    assert owner_client.get("/consultation-form/CUNOPE0000").status_code == 404
