from __future__ import annotations

from booking_api.models import Notification


def test_provider_sees_booking_notifications_newest_first(client, clock, make_user, auth_headers) -> None:
    rita = make_user("Rita")
    sara = make_user("Sara")
    paulo = make_user("Paulo", provider=True)
    client.post("/appointments", json={"provider_id": paulo.id, "date": "2026-03-05T09:00:00"}, headers=auth_headers(rita))
    clock.advance(minutes=1)
    client.post("/appointments", json={"provider_id": paulo.id, "date": "2026-03-05T10:00:00"}, headers=auth_headers(sara))

    resp = client.get("/notifications", headers=auth_headers(paulo))

    assert resp.status_code == 200
    contents = [n["content"] for n in resp.json()]
    assert contents == [
        "New appointment from Sara on March 05, at 10:00h",
        "New appointment from Rita on March 05, at 9:00h",
    ]
    assert all(n["read"] is False for n in resp.json())


def test_regular_users_have_no_inbox(client, make_user, auth_headers) -> None:
    rita = make_user("Rita")

    resp = client.get("/notifications", headers=auth_headers(rita))

    assert resp.status_code == 401
    assert resp.json() == {"error": "User is not a provider"}


def test_mark_as_read(client, session, make_user, auth_headers) -> None:
    paulo = make_user("Paulo", provider=True)
    pedro = make_user("Pedro", provider=True)
    notification = Notification(content="hello", recipient_id=paulo.id)
    session.add(notification)
    session.commit()
    session.refresh(notification)

    someone_else = client.put(f"/notifications/{notification.id}", headers=auth_headers(pedro))
    resp = client.put(f"/notifications/{notification.id}", headers=auth_headers(paulo))

    assert someone_else.status_code == 404
    assert resp.status_code == 200
    assert resp.json()["read"] is True
