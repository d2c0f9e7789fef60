from datetime import timedelta
from uuid import UUID

import pytest

from flatscout.models.base import SyncSessionLocal, utcnow
from flatscout.models.notification import Notification
from flatscout.services.notification_service import create_notification
from flatscout.tasks.notification_tasks import cleanup_expired_notifications


async def test_connection_request_notifies_recipient(register):
    alice, _ = await register("alice@example.com", name="Alice")
    bob, bob_user = await register("bob@example.com", name="Bob")

    await alice.post("/api/v1/connections/requests", json={"toUserId": bob_user["id"]})

    page = (await bob.get("/api/v1/notifications")).json()
    assert page["unreadCount"] == 1
    assert page["pagination"] == {"page": 1, "limit": 20, "total": 1, "pages": 1}

    notification = page["notifications"][0]
    assert notification["type"] == "connection_request"
    assert notification["title"] == "New Connection Request"
    assert notification["message"] == "Alice wants to connect with you!"
    assert notification["actionUrl"] == "/profile"
    assert notification["sentVia"] == ["in_app"]
    assert notification["read"] is False

    assert (await alice.get("/api/v1/notifications")).json()["unreadCount"] == 0


async def test_accepting_notifies_sender(register):
    alice, _ = await register("alice@example.com", name="Alice")
    bob, bob_user = await register("bob@example.com", name="Bob")

    request = (await alice.post("/api/v1/connections/requests", json={"toUserId": bob_user["id"]})).json()
    await bob.post(f"/api/v1/connections/requests/{request['id']}/accept")

    notifications = (await alice.get("/api/v1/notifications")).json()["notifications"]
    assert len(notifications) == 1
    assert notifications[0]["title"] == "Connection Accepted!"
    assert notifications[0]["message"] == "Bob accepted your connection request. You can now chat!"
    assert notifications[0]["actionText"] == "Start Chatting"
    assert notifications[0]["data"]["connection_request_id"] == request["id"]


async def test_mark_read(register):
    alice, _ = await register("alice@example.com")
    bob, bob_user = await register("bob@example.com")
    await alice.post("/api/v1/connections/requests", json={"toUserId": bob_user["id"]})

    notification_id = (await bob.get("/api/v1/notifications")).json()["notifications"][0]["id"]

    # only the owner can see it
    assert (await alice.put(f"/api/v1/notifications/{notification_id}/read")).status_code == 404

    resp = await bob.put(f"/api/v1/notifications/{notification_id}/read")
    assert resp.status_code == 200
    assert resp.json()["read"] is True
    assert resp.json()["readAt"] is not None

    page = (await bob.get("/api/v1/notifications", params={"unread_only": True})).json()
    assert page["notifications"] == []
    assert page["unreadCount"] == 0


async def test_mark_all_read_and_paging(register):
    receiver, receiver_user = await register("receiver@example.com")
    for i in range(3):
        sender, _ = await register(f"sender{i}@example.com", name=f"Sender {i}")
        await sender.post("/api/v1/connections/requests", json={"toUserId": receiver_user["id"]})

    page = (await receiver.get("/api/v1/notifications", params={"limit": 2})).json()
    assert len(page["notifications"]) == 2
    assert page["pagination"]["pages"] == 2
    assert page["unreadCount"] == 3

    resp = await receiver.put("/api/v1/notifications/read-all")
    assert resp.json() == {"updatedCount": 3}

    assert (await receiver.get("/api/v1/notifications")).json()["unreadCount"] == 0
    assert (await receiver.put("/api/v1/notifications/read-all")).json() == {"updatedCount": 0}


async def test_notifications_require_login(client):
    assert (await client.get("/api/v1/notifications")).status_code == 401


async def test_cleanup_removes_expired(register):
    _, user = await register("expiring@example.com")
    user_id = UUID(user["id"])

    with SyncSessionLocal() as session:
        create_notification(session, user_id, "connection_request", "Still here", "Fresh")
        expired = create_notification(session, user_id, "connection_request", "Gone", "Old")
        expired.expires_at = utcnow() - timedelta(days=1)
        session.commit()

    assert cleanup_expired_notifications() == {"deleted": 1}

    with SyncSessionLocal() as session:
        titles = [n.title for n in session.query(Notification).all()]
    assert titles == ["Still here"]


async def test_create_notification_rejects_unknown_type(register):
    _, user = await register("strict@example.com")

    with SyncSessionLocal() as session:
        with pytest.raises(ValueError, match="carrier_pigeon"):
            create_notification(session, UUID(user["id"]), "carrier_pigeon", "Hi", "Hello")
