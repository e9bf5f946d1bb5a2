from __future__ import annotations


def test_register_login_and_me(client) -> None:
    created = client.post(
        "/users",
        json={"name": "Paulo", "email": "paulo@example.com", "password": "s3cret-pass", "provider": True},
    )
    assert created.status_code == 201
    assert created.json()["provider"] is True
    assert "password_hash" not in created.json()

    login = client.post("/auth/login", data={"username": "paulo@example.com", "password": "s3cret-pass"})
    assert login.status_code == 200
    token = login.json()["access_token"]
    assert login.json()["user"]["name"] == "Paulo"

    me = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json() == {"id": created.json()["id"], "name": "Paulo", "email": "paulo@example.com", "provider": True}


def test_duplicate_email_is_rejected(client) -> None:
    payload = {"name": "Rita", "email": "rita@example.com", "password": "s3cret-pass"}
    assert client.post("/users", json=payload).status_code == 201

    resp = client.post("/users", json=payload)

    assert resp.status_code == 409


def test_wrong_password(client) -> None:
    client.post("/users", json={"name": "Rita", "email": "rita@example.com", "password": "s3cret-pass"})

    resp = client.post("/auth/login", data={"username": "rita@example.com", "password": "nope-nope"})

    assert resp.status_code == 401


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}
