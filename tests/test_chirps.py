import pytest

from models import storage


def post_chirp(client, token, body):
    return client.post("/api/chirps", json={"body": body}, headers={"Authorization": f"Bearer {token}"})


def test_create_chirp(client, user):
    resp = post_chirp(client, user["token"], "I'm the one who knocks!")
    assert resp.status_code == 201
    data = resp.get_json()
    assert set(data) == {"id", "created_at", "updated_at", "body", "user_id"}
    assert data["body"] == "I'm the one who knocks!"
    assert data["user_id"] == user["user"]["id"]


def test_create_chirp_filters_profanity(client, user):
    resp = post_chirp(client, user["token"], "This is a kerfuffle opinion I need to share about the world")
    assert resp.status_code == 201
    assert resp.get_json()["body"] == "This is a **** opinion I need to share about the world"


def test_chirp_of_140_code_points_is_accepted(client, user):
    body = "é" * 140
    resp = post_chirp(client, user["token"], body)
    assert resp.status_code == 201
    assert resp.get_json()["body"] == body


def test_chirp_of_141_code_points_is_rejected(client, user):
    resp = post_chirp(client, user["token"], "é" * 141)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Chirp is too long"


def test_length_is_checked_before_filtering(client, user):
    # 141 characters that would shrink once collapsed and masked
    body = "kerfuffle " * 14 + "x"
    assert len(body) == 141
    resp = post_chirp(client, user["token"], body)
    assert resp.status_code == 400


def test_create_chirp_requires_token(client):
    resp = client.post("/api/chirps", json={"body": "hello"})
    assert resp.status_code == 401


def test_create_chirp_rejects_forged_token(client, user):
    header, payload, _ = user["token"].split(".")
    resp = post_chirp(client, f"{header}.{payload}.forged", "hello")
    assert resp.status_code == 401


def test_create_chirp_malformed_body(client, user):
    resp = client.post(
        "/api/chirps",
        data="{oops",
        content_type="application/json",
        headers={"Authorization": f"Bearer {user['token']}"},
    )
    assert resp.status_code == 400


def test_list_and_get_chirps(client, user):
    ids = [post_chirp(client, user["token"], f"chirp {i}").get_json()["id"] for i in range(3)]

    resp = client.get("/api/chirps")
    assert resp.status_code == 200
    assert sorted(c["id"] for c in resp.get_json()) == sorted(ids)

    resp = client.get(f"/api/chirps/{ids[1]}")
    assert resp.status_code == 200
    assert resp.get_json()["body"] == "chirp 1"


def test_list_chirps_empty(client):
    resp = client.get("/api/chirps")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_list_chirps_by_author(client, make_user):
    walt = make_user(email="walt@breakingbad.com")
    jesse = make_user(email="jesse@breakingbad.com")
    post_chirp(client, walt["token"], "say my name")
    post_chirp(client, jesse["token"], "yeah science")

    resp = client.get("/api/chirps", query_string={"author_id": jesse["user"]["id"]})
    bodies = [c["body"] for c in resp.get_json()]
    assert bodies == ["yeah science"]


def test_list_chirps_rejects_unknown_sort(client):
    resp = client.get("/api/chirps", query_string={"sort": "sideways"})
    assert resp.status_code == 400


@pytest.mark.parametrize("sort", ["asc", "desc"])
def test_list_chirps_sort(client, user, sort):
    for i in range(3):
        post_chirp(client, user["token"], f"chirp {i}")
    created = [c["created_at"] for c in client.get("/api/chirps", query_string={"sort": sort}).get_json()]
    assert created == sorted(created, reverse=(sort == "desc"))


def test_get_missing_chirp(client):
    resp = client.get("/api/chirps/00000000-0000-0000-0000-000000000000")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Chirp not found"


def test_delete_chirp_by_owner(client, user):
    chirp_id = post_chirp(client, user["token"], "temporary").get_json()["id"]
    resp = client.delete(f"/api/chirps/{chirp_id}", headers={"Authorization": f"Bearer {user['token']}"})
    assert resp.status_code == 204
    assert client.get(f"/api/chirps/{chirp_id}").status_code == 404


def test_delete_chirp_by_someone_else(client, make_user):
    walt = make_user(email="walt@breakingbad.com")
    jesse = make_user(email="jesse@breakingbad.com")
    chirp_id = post_chirp(client, walt["token"], "mine").get_json()["id"]

    resp = client.delete(f"/api/chirps/{chirp_id}", headers={"Authorization": f"Bearer {jesse['token']}"})
    assert resp.status_code == 403
    assert client.get(f"/api/chirps/{chirp_id}").status_code == 200


def test_delete_missing_chirp(client, user):
    resp = client.delete(
        "/api/chirps/00000000-0000-0000-0000-000000000000",
        headers={"Authorization": f"Bearer {user['token']}"},
    )
    assert resp.status_code == 400


def test_delete_chirp_requires_token(client, user):
    chirp_id = post_chirp(client, user["token"], "keep me").get_json()["id"]
    assert client.delete(f"/api/chirps/{chirp_id}").status_code == 401


def test_timestamps_serialize_the_same_after_reload(client, user):
    created = post_chirp(client, user["token"], "same instant").get_json()
    storage.close()

    fetched = client.get(f"/api/chirps/{created['id']}").get_json()
    assert fetched["created_at"] == created["created_at"]
    assert fetched["updated_at"] == created["updated_at"]
    assert fetched["created_at"].endswith("+00:00")

    listed = client.get("/api/chirps").get_json()
    assert listed[0]["created_at"] == created["created_at"]


def test_user_timestamps_match_between_register_and_login(client):
    registered = client.post("/api/users", json={"email": "gus@pollos.com", "password": "chicken"}).get_json()
    storage.close()
    logged_in = client.post("/api/login", json={"email": "gus@pollos.com", "password": "chicken"}).get_json()
    assert logged_in["user"]["created_at"] == registered["created_at"]
    assert registered["created_at"].endswith("+00:00")
