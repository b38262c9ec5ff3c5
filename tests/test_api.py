import uuid

import pytest

from conftest import new_user_id, service_token


def _create_trip(client, auth_headers, owner, *others):
    res = client.post(
        "/conversations",
        headers=auth_headers(owner),
        json={
            "kind": "group",
            "name": "Trip",
            "participant_user_ids": [u.value for u in others],
        },
    )
    assert res.status_code == 201, res.text
    return res.json()


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy"}


def test_requests_need_a_token(client):
    res = client.get("/conversations")
    assert res.status_code in (401, 403)


def test_expired_token_is_rejected(client, alice):
    token = service_token(alice.value, expires_in=-60)
    res = client.get("/conversations", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json()["error"] == "Token has expired"


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_create_and_list_conversations(client, auth_headers, alice, bob):
    trip = _create_trip(client, auth_headers, alice, bob)

    assert trip["kind"] == "group"
    assert {p["user_id"] for p in trip["participants"]} == {alice.value, bob.value}

    res = client.get("/conversations", headers=auth_headers(bob))
    assert [c["id"] for c in res.json()["conversations"]] == [trip["id"]]

    res = client.get(f"/conversations/{trip['id']}", headers=auth_headers(alice))
    assert res.status_code == 200
    assert res.json()["name"] == "Trip"


def test_invalid_shapes_map_to_400(client, auth_headers, alice, bob, carol):
    res = client.post(
        "/conversations",
        headers=auth_headers(alice),
        json={"kind": "direct", "participant_user_ids": [bob.value, carol.value]},
    )
    assert res.status_code == 400
    assert "exactly" in res.json()["error"]

    res = client.get("/conversations/not-a-uuid", headers=auth_headers(alice))
    assert res.status_code == 400


def test_unknown_conversation_is_404(client, auth_headers, alice):
    res = client.get(f"/conversations/{uuid.uuid4()}", headers=auth_headers(alice))
    assert res.status_code == 404


def test_strangers_cannot_view_conversation(client, auth_headers, alice, bob):
    trip = _create_trip(client, auth_headers, alice, bob)

    res = client.get(f"/conversations/{trip['id']}", headers=auth_headers(new_user_id()))
    assert res.status_code == 403


def test_participants_join_and_leave(client, auth_headers, alice, bob, carol):
    trip = _create_trip(client, auth_headers, alice, bob)
    url = f"/conversations/{trip['id']}/participants"

    res = client.post(url, headers=auth_headers(alice), json={"user_id": carol.value})
    assert res.status_code == 201
    assert res.json()["active"] is True

    res = client.post(url, headers=auth_headers(alice), json={"user_id": carol.value})
    assert res.status_code == 409

    res = client.delete(f"{url}/{carol.value}", headers=auth_headers(alice))
    assert res.status_code == 403

    res = client.delete(f"{url}/{carol.value}", headers=auth_headers(carol))
    assert res.status_code == 200
    assert res.json()["active"] is False

    res = client.delete(f"{url}/{carol.value}", headers=auth_headers(carol))
    assert res.status_code == 404


def test_message_pages_over_http(client, auth_headers, alice, bob):
    trip = _create_trip(client, auth_headers, alice, bob)
    url = f"/conversations/{trip['id']}/messages"
    for i in range(5):
        res = client.post(url, headers=auth_headers(alice), json={"text": f"m{i}"})
        assert res.status_code == 201

    first = client.get(url, headers=auth_headers(bob), params={"limit": "3"}).json()
    assert [m["text"] for m in first["messages"]] == ["m4", "m3", "m2"]

    rest = client.get(
        url, headers=auth_headers(bob), params={"before": first["next_cursor"], "limit": "3"}
    ).json()
    assert [m["text"] for m in rest["messages"]] == ["m1", "m0"]
    assert rest["next_cursor"] is None

    res = client.get(url, headers=auth_headers(bob), params={"limit": "many"})
    assert len(res.json()["messages"]) == 5

    res = client.get(url, headers=auth_headers(bob), params={"before": "bogus"})
    assert res.status_code == 400


def test_outsider_cannot_post(client, auth_headers, alice, bob):
    trip = _create_trip(client, auth_headers, alice, bob)

    res = client.post(
        f"/conversations/{trip['id']}/messages",
        headers=auth_headers(new_user_id()),
        json={"text": "let me in"},
    )
    assert res.status_code == 403
    assert "error" in res.json()


def test_outsiders_cannot_add_members(client, auth_headers, alice, bob, carol):
    trip = _create_trip(client, auth_headers, alice, bob)
    outsider = new_user_id()
    url = f"/conversations/{trip['id']}/participants"

    res = client.post(url, headers=auth_headers(outsider), json={"user_id": outsider.value})
    assert res.status_code == 403
    assert "error" in res.json()

    client.delete(f"{url}/{bob.value}", headers=auth_headers(bob))
    res = client.post(url, headers=auth_headers(bob), json={"user_id": carol.value})
    assert res.status_code == 403


def test_outsiders_cannot_react_or_bookmark(client, auth_headers, alice, bob):
    trip = _create_trip(client, auth_headers, alice, bob)
    message = client.post(
        f"/conversations/{trip['id']}/messages",
        headers=auth_headers(alice),
        json={"text": "members only"},
    ).json()
    outsider = new_user_id()

    res = client.post(
        f"/messages/{message['id']}/reactions",
        headers=auth_headers(outsider),
        json={"emoji": "👀"},
    )
    assert res.status_code == 403

    res = client.post(
        f"/messages/{message['id']}/bookmarks", headers=auth_headers(outsider)
    )
    assert res.status_code == 403


def test_reactions_and_bookmarks(client, auth_headers, alice, bob):
    trip = _create_trip(client, auth_headers, alice, bob)
    message = client.post(
        f"/conversations/{trip['id']}/messages",
        headers=auth_headers(alice),
        json={"text": "hi"},
    ).json()
    reactions = f"/messages/{message['id']}/reactions"

    res = client.post(reactions, headers=auth_headers(bob), json={"emoji": "👍"})
    assert res.status_code == 201
    res = client.post(reactions, headers=auth_headers(bob), json={"emoji": "👍"})
    assert res.status_code == 409
    res = client.delete(f"{reactions}/👍", headers=auth_headers(bob))
    assert res.status_code == 200

    bookmarks = f"/messages/{message['id']}/bookmarks"
    res = client.post(bookmarks, headers=auth_headers(alice))
    assert res.status_code == 201
    assert res.json()["status"] == "bookmarked"
    assert res.json()["bookmark"]["message_id"] == message["id"]

    res = client.get(f"/users/{alice.value}/bookmarks", headers=auth_headers(alice))
    saved = res.json()["bookmarks"]
    assert [(s["message_id"], s["conversation_id"]) for s in saved] == [
        (message["id"], trip["id"])
    ]

    res = client.get(f"/users/{alice.value}/bookmarks", headers=auth_headers(bob))
    assert res.status_code == 403

    res = client.delete(bookmarks, headers=auth_headers(alice))
    assert res.json() == {"status": "unbookmarked"}


def test_unknown_message_is_404(client, auth_headers, alice):
    res = client.post("/messages/999/bookmarks", headers=auth_headers(alice))
    assert res.status_code == 404


def test_storage_outage_is_503(client, auth_headers, store, alice):
    store.available = False

    res = client.get("/conversations", headers=auth_headers(alice))

    assert res.status_code == 503


@pytest.mark.parametrize("name", ["", " " * 3])
def test_user_name_required(client, auth_headers, alice, name):
    res = client.post("/users", headers=auth_headers(alice), json={"name": name})
    assert res.status_code == 400


def test_users_directory(client, auth_headers, alice):
    created = client.post(
        "/users", headers=auth_headers(alice), json={"name": "Alice"}
    ).json()

    res = client.get(f"/users/{created['id']}", headers=auth_headers(alice))
    assert res.json()["name"] == "Alice"

    res = client.get("/users", headers=auth_headers(alice))
    assert [u["id"] for u in res.json()["users"]] == [created["id"]]

    res = client.get(f"/users/{uuid.uuid4()}", headers=auth_headers(alice))
    assert res.status_code == 404
