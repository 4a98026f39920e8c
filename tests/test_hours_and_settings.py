def test_hours_are_upserted_per_day(owner_client, therapist):
    first = owner_client.post("/api/hours/", json={"therapistId": therapist.user_id, "date": "2024-05-01", "hours": 7.5})
    second = owner_client.post("/api/hours/", json={"therapistId": therapist.user_id, "date": "2024-05-01", "hours": 8})

    assert first.status_code == second.status_code == 200
    assert first.json()["entryId"] == second.json()["entryId"]
    assert second.json()["hours"] == 8

    entries = owner_client.get(f"/api/hours/?therapistId={therapist.user_id}").json()
    assert len(entries) == 1


def test_hours_date_filters(owner_client, therapist):
    for day in ("2024-04-30", "2024-05-01", "2024-05-02"):
        owner_client.post("/api/hours/", json={"therapistId": therapist.user_id, "date": day, "hours": 6})

    entries = owner_client.get("/api/hours/?startDate=2024-05-01&endDate=2024-05-02").json()
    assert [entry["date"] for entry in entries] == ["2024-05-01", "2024-05-02"]


def test_hours_must_fit_in_a_day(owner_client, therapist):
    response = owner_client.post("/api/hours/", json={"therapistId": therapist.user_id, "date": "2024-05-01", "hours": 25})
    assert response.status_code == 400


def test_delete_hours(owner_client, therapist):
    entry = owner_client.post("/api/hours/", json={"therapistId": therapist.user_id, "date": "2024-05-01", "hours": 4}).json()
    assert owner_client.delete(f"/api/hours/{entry['entryId']}").status_code == 200
    assert owner_client.delete(f"/api/hours/{entry['entryId']}").status_code == 404


def test_logo_is_public_and_empty_by_default(client):
    response = client.get("/api/settings/logo")
    assert response.status_code == 200
    assert response.json()["logo"] == ""


def test_logo_update_needs_session(client):
    assert client.post("/api/settings/logo", json={"logo": "data:image/png;base64,AAAA"}).status_code == 401


def test_logo_update(owner_client):
    response = owner_client.post("/api/settings/logo", json={"logo": "data:image/png;base64,AAAA"})
    assert response.status_code == 200

    owner_client.cookies.clear()
    assert owner_client.get("/api/settings/logo").json()["logo"] == "data:image/png;base64,AAAA"
