"""Unit tests for core/services/note_service.py"""

import pytest

from collabnotes.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationFailedError,
)
from collabnotes.core.schemas.notes import NoteCreate, NoteUpdate, ShareRequest
from collabnotes.core.services.access_control import OWNER_ONLY_DELETE, OWNER_ONLY_SHARE
from collabnotes.core.services.note_service import (
    ALREADY_COLLABORATOR,
    COLLABORATOR_NOT_FOUND,
    SELF_SHARE,
    NoteService,
)


@pytest.fixture
def service(note_repo, collaborator_repo, user_repo):
    return NoteService(note_repo, collaborator_repo, user_repo)


async def _share(service, note_id, owner_id, email):
    return await service.share_note(note_id, owner_id, ShareRequest(email=email))


async def test_create_note_defaults_missing_content_to_empty(service, users):
    created = await service.create_note(users["a"].id, NoteCreate(title="Groceries"))
    assert created.title == "Groceries"
    assert created.content == ""
    assert created.owner_id == users["a"].id
    assert created.is_shared is False


async def test_get_note_reports_ownership(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="T", content="c"))
    await _share(service, note.id, users["a"].id, "b@x.com")

    as_owner = await service.get_note(note.id, users["a"].id)
    assert as_owner.is_owner is True
    assert as_owner.note.is_shared is False
    assert as_owner.collaborator_ids == [users["b"].id]

    as_collaborator = await service.get_note(note.id, users["b"].id)
    assert as_collaborator.is_owner is False
    assert as_collaborator.note.is_shared is True


async def test_get_note_unrelated_user_forbidden(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    with pytest.raises(ForbiddenError):
        await service.get_note(note.id, users["c"].id)


async def test_collaborator_can_update(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="T", content="old"))
    await _share(service, note.id, users["a"].id, "b@x.com")

    updated = await service.update_note(note.id, users["b"].id, NoteUpdate(content="new"))
    assert updated.content == "new"
    assert updated.title == "T"
    assert updated.updated_at >= note.updated_at


async def test_partial_update_ignores_omitted_and_null_fields(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="Keep", content="body"))

    updated = await service.update_note(note.id, users["a"].id, NoteUpdate(title=None))
    assert updated.title == "Keep"
    assert updated.content == "body"

    updated = await service.update_note(note.id, users["a"].id, NoteUpdate(title="New"))
    assert updated.title == "New"
    assert updated.content == "body"


async def test_update_unrelated_user_forbidden(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    with pytest.raises(ForbiddenError):
        await service.update_note(note.id, users["c"].id, NoteUpdate(title="x"))


async def test_delete_is_owner_only(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    await _share(service, note.id, users["a"].id, "b@x.com")

    with pytest.raises(ForbiddenError) as exc_info:
        await service.delete_note(note.id, users["b"].id)
    assert exc_info.value.message == OWNER_ONLY_DELETE

    result = await service.delete_note(note.id, users["a"].id)
    assert result.message == "Note deleted"

    for user in ("a", "b"):
        with pytest.raises(NotFoundError):
            await service.get_note(note.id, users[user].id)


async def test_delete_removes_collaborator_rows(service, users, store):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    await _share(service, note.id, users["a"].id, "b@x.com")
    await service.delete_note(note.id, users["a"].id)
    assert store.collaborators == []


async def test_share_success(service, users, collaborator_repo):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    result = await _share(service, note.id, users["a"].id, "b@x.com")
    assert result.message == "Note shared successfully"
    assert await collaborator_repo.find_one(note.id, users["b"].id) is not None


async def test_second_share_is_rejected(service, users, collaborator_repo):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    await _share(service, note.id, users["a"].id, "b@x.com")

    with pytest.raises(ValidationFailedError) as exc_info:
        await _share(service, note.id, users["a"].id, "b@x.com")
    assert exc_info.value.message == ALREADY_COLLABORATOR
    assert collaborator_repo.created == 1


async def test_self_share_is_rejected(service, users, collaborator_repo):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    with pytest.raises(ValidationFailedError) as exc_info:
        await _share(service, note.id, users["a"].id, "a@x.com")
    assert exc_info.value.message == SELF_SHARE
    assert collaborator_repo.created == 0


async def test_share_with_unknown_email(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    with pytest.raises(NotFoundError) as exc_info:
        await _share(service, note.id, users["a"].id, "nobody@x.com")
    assert exc_info.value.message == COLLABORATOR_NOT_FOUND


async def test_share_missing_note_is_not_found(service, users):
    with pytest.raises(NotFoundError) as exc_info:
        await _share(service, 404, users["a"].id, "b@x.com")
    assert exc_info.value.message == "Note not found"


async def test_share_by_collaborator_is_refused_before_target_lookup(service, users):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    await _share(service, note.id, users["a"].id, "b@x.com")

    # unknown target would be NotFound, but ownership is checked first
    with pytest.raises(ForbiddenError) as exc_info:
        await _share(service, note.id, users["b"].id, "nobody@x.com")
    assert exc_info.value.message == OWNER_ONLY_SHARE


async def test_share_race_surfaces_as_conflict(service, users, collaborator_repo, monkeypatch):
    note = await service.create_note(users["a"].id, NoteCreate(title="T"))
    await collaborator_repo.create(note.id, users["b"].id)

    async def stale_find_one(note_id, user_id):
        return None

    # another request inserted the row after our duplicate check ran
    monkeypatch.setattr(collaborator_repo, "find_one", stale_find_one)
    with pytest.raises(ConflictError):
        await _share(service, note.id, users["a"].id, "b@x.com")


async def test_list_for_user_splits_own_and_shared(service, users):
    first = await service.create_note(users["a"].id, NoteCreate(title="A1"))
    second = await service.create_note(users["a"].id, NoteCreate(title="A2"))
    b_note = await service.create_note(users["b"].id, NoteCreate(title="B1"))
    await _share(service, b_note.id, users["b"].id, "a@x.com")

    listing = await service.list_for_user(users["a"].id)
    assert [n.id for n in listing.own] == [second.id, first.id]
    assert all(n.is_shared is False for n in listing.own)
    assert [n.id for n in listing.shared] == [b_note.id]
    assert listing.shared[0].is_shared is True


async def test_list_own_orders_by_latest_update(service, users):
    first = await service.create_note(users["a"].id, NoteCreate(title="A1"))
    second = await service.create_note(users["a"].id, NoteCreate(title="A2"))
    await service.update_note(first.id, users["a"].id, NoteUpdate(content="edited"))

    listing = await service.list_for_user(users["a"].id)
    assert [n.id for n in listing.own] == [first.id, second.id]


async def test_list_for_user_with_nothing(service, users):
    listing = await service.list_for_user(users["c"].id)
    assert listing.own == []
    assert listing.shared == []
