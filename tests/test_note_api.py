"""
Notes API — /api/notes Endpoint Tests
======================================

What:  End-to-end tests of the notes endpoints through the ASGI app.
How:   Each test runs against a fresh SQLite database seeded with the `root`
       user and INITIAL_NOTES; results are checked over HTTP and directly
       in the database.
"""

import pytest

from helpers import INITIAL_NOTES, INITIAL_USER, non_existing_id, notes_in_db


class TestListNotes:
    """When there are initially some notes saved."""

    @pytest.mark.asyncio
    async def test_notes_are_returned_as_json(self, test_client, seeded):
        response = await test_client.get("/api/notes")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")

    @pytest.mark.asyncio
    async def test_all_notes_are_returned(self, test_client, seeded):
        response = await test_client.get("/api/notes")
        assert len(response.json()) == len(INITIAL_NOTES)

    @pytest.mark.asyncio
    async def test_a_specific_note_is_within_the_returned_notes(self, test_client, seeded):
        response = await test_client.get("/api/notes")
        contents = [n["content"] for n in response.json()]
        assert INITIAL_NOTES[1]["content"] in contents

    @pytest.mark.asyncio
    async def test_owner_is_populated_with_username_only(self, test_client, seeded):
        response = await test_client.get("/api/notes")
        owner = response.json()[0]["user"]
        assert owner["username"] == INITIAL_USER["username"]
        assert set(owner) == {"id", "username"}


class TestViewNote:
    """Viewing a specific note."""

    @pytest.mark.asyncio
    async def test_succeeds_with_a_valid_id(self, test_client, app, seeded):
        note_to_view = (await notes_in_db(app))[0]

        response = await test_client.get(f"/api/notes/{note_to_view.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(note_to_view.id)
        assert body["content"] == note_to_view.content
        assert body["important"] == note_to_view.important
        assert body["user"] == str(note_to_view.user_id)

    @pytest.mark.asyncio
    async def test_fails_with_404_if_note_does_not_exist(self, test_client, seeded):
        response = await test_client.get(f"/api/notes/{non_existing_id()}")
        assert response.status_code == 404
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_fails_with_400_if_id_is_invalid(self, test_client, seeded):
        response = await test_client.get("/api/notes/5a3d5da59070081a82a3445")
        assert response.status_code == 400
        assert response.json()["error"] == "malformatted id"


class TestAddNote:
    """Addition of a new note."""

    @pytest.mark.asyncio
    async def test_succeeds_with_valid_data_when_logged_in(self, test_client, app, auth_header):
        new_note = {"content": "async/await simplifies making async calls", "important": True}

        response = await test_client.post("/api/notes", json=new_note, headers=auth_header)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        notes_at_end = await notes_in_db(app)
        assert len(notes_at_end) == len(INITIAL_NOTES) + 1
        assert new_note["content"] in [n.content for n in notes_at_end]

    @pytest.mark.asyncio
    async def test_new_note_is_owned_by_the_logged_in_user(self, test_client, auth_header, seeded):
        response = await test_client.post(
            "/api/notes", json={"content": "mine"}, headers=auth_header
        )
        assert response.json()["user"] == str(seeded.id)
        assert response.json()["important"] is False

        users = (await test_client.get("/api/users")).json()
        root = next(u for u in users if u["username"] == INITIAL_USER["username"])
        assert [n["content"] for n in root["notes"]][-1] == "mine"
        assert len(root["notes"]) == len(INITIAL_NOTES) + 1

    @pytest.mark.asyncio
    async def test_fails_with_401_if_no_user_is_logged_in(self, test_client, app, seeded):
        new_note = {"content": "cannot save note without logging in", "important": True}

        response = await test_client.post("/api/notes", json=new_note)

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("application/json")
        assert response.json()["error"] == "invalid token"
        assert len(await notes_in_db(app)) == len(INITIAL_NOTES)

    @pytest.mark.asyncio
    async def test_fails_with_401_for_a_forged_token(self, test_client, app, seeded):
        response = await test_client.post(
            "/api/notes",
            json={"content": "forged"},
            headers={"authorization": "bearer not.a.token"},
        )
        assert response.status_code == 401
        assert response.json()["error"] == "invalid token"
        assert len(await notes_in_db(app)) == len(INITIAL_NOTES)

    @pytest.mark.asyncio
    async def test_fails_with_400_if_content_missing(self, test_client, app, auth_header):
        response = await test_client.post(
            "/api/notes", json={"important": False}, headers=auth_header
        )
        assert response.status_code == 400
        assert "content" in response.json()["error"]
        assert len(await notes_in_db(app)) == len(INITIAL_NOTES)

    @pytest.mark.asyncio
    async def test_fails_with_400_if_content_empty(self, test_client, app, auth_header):
        response = await test_client.post("/api/notes", json={"content": ""}, headers=auth_header)
        assert response.status_code == 400
        assert len(await notes_in_db(app)) == len(INITIAL_NOTES)


class TestDeleteNote:
    """Deletion of a note."""

    @pytest.mark.asyncio
    async def test_succeeds_with_204_if_id_is_valid(self, test_client, app, seeded):
        note_to_delete = (await notes_in_db(app))[0]

        response = await test_client.delete(f"/api/notes/{note_to_delete.id}")

        assert response.status_code == 204
        notes_at_end = await notes_in_db(app)
        assert len(notes_at_end) == len(INITIAL_NOTES) - 1
        assert note_to_delete.content not in [n.content for n in notes_at_end]

    @pytest.mark.asyncio
    async def test_deleting_twice_still_succeeds(self, test_client, app, seeded):
        note_to_delete = (await notes_in_db(app))[0]

        first = await test_client.delete(f"/api/notes/{note_to_delete.id}")
        second = await test_client.delete(f"/api/notes/{note_to_delete.id}")

        assert first.status_code == 204
        assert second.status_code == 204
        assert len(await notes_in_db(app)) == len(INITIAL_NOTES) - 1

    @pytest.mark.asyncio
    async def test_deleted_note_disappears_from_owner(self, test_client, app, seeded):
        note_to_delete = (await notes_in_db(app))[0]
        await test_client.delete(f"/api/notes/{note_to_delete.id}")

        users = (await test_client.get("/api/users")).json()
        note_ids = [n["id"] for u in users for n in u["notes"]]
        assert str(note_to_delete.id) not in note_ids

    @pytest.mark.asyncio
    async def test_malformed_id_is_rejected(self, test_client, seeded):
        response = await test_client.delete("/api/notes/not-an-id")
        assert response.status_code == 400
        assert response.json()["error"] == "malformatted id"


class TestUpdateNote:

    @pytest.mark.asyncio
    async def test_toggle_importance(self, test_client, app, seeded):
        note = (await notes_in_db(app))[0]

        response = await test_client.put(
            f"/api/notes/{note.id}", json={"important": not note.important}
        )

        assert response.status_code == 200
        assert response.json()["important"] is (not note.important)
        assert response.json()["content"] == note.content
        updated = next(n for n in await notes_in_db(app) if n.id == note.id)
        assert updated.important is (not note.important)

    @pytest.mark.asyncio
    async def test_update_missing_note_is_404(self, test_client, seeded):
        response = await test_client.put(
            f"/api/notes/{non_existing_id()}", json={"important": True}
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_with_empty_content_is_400(self, test_client, app, seeded):
        note = (await notes_in_db(app))[0]
        response = await test_client.put(f"/api/notes/{note.id}", json={"content": ""})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_with_malformed_id_is_400(self, test_client, app, seeded):
        notes_at_start = await notes_in_db(app)

        response = await test_client.put("/api/notes/5a3d5da59070081a82a3445", json={"important": True})

        assert response.status_code == 400
        assert response.json()["error"] == "malformatted id"
        assert [n.important for n in await notes_in_db(app)] == [n.important for n in notes_at_start]
