async def send(client, to_user_id):
    return await client.post("/api/v1/connections/requests", json={"toUserId": to_user_id})


async def test_send_and_accept(register):
    alice, alice_user = await register("alice@example.com", name="Alice")
    bob, bob_user = await register("bob@example.com", name="Bob")

    resp = await send(alice, bob_user["id"])
    assert resp.status_code == 201
    request = resp.json()
    assert request["status"] == "pending"
    assert request["fromUserId"] == alice_user["id"]

    assert (await alice.get(f"/api/v1/connections/status/{bob_user['id']}")).json() == {"status": "request_sent"}
    assert (await bob.get(f"/api/v1/connections/status/{alice_user['id']}")).json() == {"status": "request_received"}

    pending = (await bob.get("/api/v1/connections/requests/pending")).json()
    assert len(pending) == 1
    assert pending[0]["fromUser"]["name"] == "Alice"

    accepted = await bob.post(f"/api/v1/connections/requests/{request['id']}/accept")
    assert accepted.status_code == 200
    assert accepted.json()["status"] == "accepted"
    assert accepted.json()["respondedAt"] is not None

    assert (await alice.get(f"/api/v1/connections/status/{bob_user['id']}")).json() == {"status": "connected"}
    assert (await bob.get("/api/v1/connections/requests/pending")).json() == []


async def test_connected_users_use_avatar_fallback(register):
    alice, alice_user = await register("alice@example.com", name="Alice Smith")
    bob, bob_user = await register("bob@example.com", name="Bob")
    await bob.put("/api/v1/users/me", json={"profileImage": "https://img.example.com/bob.png"})

    request = (await send(alice, bob_user["id"])).json()
    await bob.post(f"/api/v1/connections/requests/{request['id']}/accept")

    alice_friends = (await alice.get("/api/v1/connections")).json()
    assert alice_friends == [{
        "id": bob_user["id"],
        "name": "Bob",
        "email": "bob@example.com",
        "profilePicture": "https://img.example.com/bob.png",
    }]

    bob_friends = (await bob.get("/api/v1/connections")).json()
    assert bob_friends[0]["id"] == alice_user["id"]
    assert bob_friends[0]["profilePicture"].startswith("https://ui-avatars.com/api/?name=Alice%20Smith")


async def test_no_connections(register):
    client, _ = await register("solo@example.com")
    assert (await client.get("/api/v1/connections")).json() == []


async def test_send_request_errors(register):
    alice, alice_user = await register("alice@example.com")
    bob, bob_user = await register("bob@example.com")

    assert (await send(alice, alice_user["id"])).status_code == 400
    assert (await send(alice, "00000000-0000-0000-0000-000000000000")).status_code == 404

    first = await send(alice, bob_user["id"])
    assert first.status_code == 201

    again = await send(alice, bob_user["id"])
    assert again.status_code == 409
    assert again.json()["detail"] == "Connection request already sent"

    reverse = await send(bob, alice_user["id"])
    assert reverse.status_code == 409
    assert reverse.json()["detail"] == "This user has already sent you a connection request"

    await bob.post(f"/api/v1/connections/requests/{first.json()['id']}/accept")
    assert (await send(alice, bob_user["id"])).status_code == 409


async def test_send_requires_login(client):
    resp = await send(client, "00000000-0000-0000-0000-000000000000")
    assert resp.status_code == 401


async def test_only_recipient_can_respond(register):
    alice, _ = await register("alice@example.com")
    bob, bob_user = await register("bob@example.com")
    carol, _ = await register("carol@example.com")

    request = (await send(alice, bob_user["id"])).json()

    assert (await carol.post(f"/api/v1/connections/requests/{request['id']}/accept")).status_code == 403
    assert (await alice.post(f"/api/v1/connections/requests/{request['id']}/decline")).status_code == 403
    missing = "/api/v1/connections/requests/00000000-0000-0000-0000-000000000000/accept"
    assert (await bob.post(missing)).status_code == 404


async def test_decline_then_resend(register):
    alice, alice_user = await register("alice@example.com")
    bob, bob_user = await register("bob@example.com")

    request = (await send(alice, bob_user["id"])).json()
    declined = await bob.post(f"/api/v1/connections/requests/{request['id']}/decline")
    assert declined.status_code == 200
    assert declined.json()["status"] == "declined"

    processed = await bob.post(f"/api/v1/connections/requests/{request['id']}/accept")
    assert processed.status_code == 400

    assert (await alice.get(f"/api/v1/connections/status/{bob_user['id']}")).json() == {"status": "not_connected"}

    resent = await send(alice, bob_user["id"])
    assert resent.status_code == 201
    assert resent.json()["id"] == request["id"]
    assert resent.json()["status"] == "pending"
    assert resent.json()["respondedAt"] is None


async def test_status_unknown_user(register):
    alice, _ = await register("alice@example.com")
    resp = await alice.get("/api/v1/connections/status/00000000-0000-0000-0000-000000000000")
    assert resp.status_code == 404


async def test_concurrent_duplicate_send_conflicts(register, monkeypatch):
    from flatscout.api.v1 import connections

    alice, _ = await register("alice@example.com")
    _, bob_user = await register("bob@example.com")
    assert (await send(alice, bob_user["id"])).status_code == 201

    # A second send that read the pair before the first one committed
    async def nothing_between(db, user_a, user_b):
        return []

    monkeypatch.setattr(connections, "get_requests_between", nothing_between)

    resp = await send(alice, bob_user["id"])
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Connection request already sent"
