"""Integration test for the complete note sharing workflow over HTTP."""

import pytest


class TestNoteSharingWorkflow:
    """Two users: the owner shares a note, the collaborator edits it, the owner deletes it."""

    @pytest.fixture
    async def tokens(self, async_client):
        out = {}
        for name in ("owner", "collaborator"):
            email = f"{name}@x.com"
            reg = await async_client.post(
                "/api/auth/register", json={"email": email, "password": "testpass123"}
            )
            assert reg.status_code == 201

            login = await async_client.post(
                "/api/auth/login", json={"email": email, "password": "testpass123"}
            )
            assert login.status_code == 200
            out[name] = {"Authorization": f"Bearer {login.json()['access_token']}"}
        return out

    async def test_complete_sharing_workflow(self, async_client, tokens):
        owner, collaborator = tokens["owner"], tokens["collaborator"]

        # Step 1: owner creates a note
        created = await async_client.post(
            "/api/notes/", json={"title": "Plan", "content": "v1"}, headers=owner
        )
        assert created.status_code == 201
        note_id = created.json()["id"]

        # Step 2: collaborator cannot see it yet
        resp = await async_client.get(f"/api/notes/{note_id}", headers=collaborator)
        assert resp.status_code == 403

        # Step 3: owner shares it
        resp = await async_client.post(
            f"/api/notes/{note_id}/share", json={"email": "collaborator@x.com"}, headers=owner
        )
        assert resp.status_code == 200

        # Step 4: collaborator reads it as a non-owner
        resp = await async_client.get(f"/api/notes/{note_id}", headers=collaborator)
        assert resp.status_code == 200
        assert resp.json()["is_owner"] is False
        assert resp.json()["note"]["is_shared"] is True

        # Step 5: collaborator updates content, owner sees the change
        resp = await async_client.put(
            f"/api/notes/{note_id}", json={"content": "v2"}, headers=collaborator
        )
        assert resp.status_code == 200
        resp = await async_client.get(f"/api/notes/{note_id}", headers=owner)
        assert resp.json()["note"]["content"] == "v2"
        assert resp.json()["is_owner"] is True

        # Step 6: it shows up in the collaborator's shared list only
        listing = (await async_client.get("/api/notes/", headers=collaborator)).json()
        assert listing["own"] == []
        assert [n["id"] for n in listing["shared"]] == [note_id]

        # Step 7: collaborator cannot delete
        resp = await async_client.delete(f"/api/notes/{note_id}", headers=collaborator)
        assert resp.status_code == 403
        assert resp.json()["message"] == "Only the owner may delete this note"

        # Step 8: collaborator cannot share it onward
        resp = await async_client.post(
            f"/api/notes/{note_id}/share", json={"email": "owner@x.com"}, headers=collaborator
        )
        assert resp.status_code == 403
        assert resp.json()["message"] == "Only the owner may share this note"

        # Step 9: owner deletes, the note is gone for both
        resp = await async_client.delete(f"/api/notes/{note_id}", headers=owner)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Note deleted"}

        for headers in (owner, collaborator):
            resp = await async_client.get(f"/api/notes/{note_id}", headers=headers)
            assert resp.status_code == 404

        listing = (await async_client.get("/api/notes/", headers=collaborator)).json()
        assert listing["shared"] == []

    async def test_request_id_round_trip(self, async_client):
        resp = await async_client.get("/api/notes/", headers={"X-Request-Id": "abc-123"})
        assert resp.status_code == 401
        assert resp.headers["x-request-id"] == "abc-123"
        assert resp.json()["request_id"] == "abc-123"

    async def test_root_index(self, async_client):
        resp = await async_client.get("/")
        assert resp.status_code == 200
        assert resp.json()["endpoints"]["notes"] == "/api/notes/"
