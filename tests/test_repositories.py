import pytest

from todo_api.config.errors import Conflict, NotFound, Unauthorized, ValidationError
from todo_api.models.user import UserStatus
from todo_api.repositories import todos as todo_repository
from todo_api.repositories import users as user_repository


def test_create_todo_defaults(db):
    todo = todo_repository.create_todo(db, "  read  ", "u1")

    assert todo.id
    assert todo.content == "read"
    assert todo.user_id == "u1"
    assert todo.status is False


@pytest.mark.parametrize("content", ["", "  ", None])
def test_create_todo_requires_content(db, content):
    with pytest.raises(ValidationError):
        todo_repository.create_todo(db, content)


def test_update_status_requires_bool(db):
    todo = todo_repository.create_todo(db, "read")

    with pytest.raises(ValidationError):
        todo_repository.update_todo_status(db, todo.id, "true")
    with pytest.raises(ValidationError):
        todo_repository.update_todo_status(db, todo.id, 1)


def test_unscoped_update_matches_any_owner(db):
    todo = todo_repository.create_todo(db, "read", "u1")

    updated = todo_repository.update_todo_status(db, todo.id, True)

    assert updated.status is True


def test_scoped_delete_ignores_other_owners(db):
    todo = todo_repository.create_todo(db, "read", "u1")

    with pytest.raises(NotFound):
        todo_repository.delete_todo(db, todo.id, "u2")

    todo_repository.delete_todo(db, todo.id, "u1")
    assert todo_repository.list_todos(db, "u1") == []


def test_register_hashes_password(db):
    user = user_repository.register_user(db, "alice", "alice@x.com", "pw1")

    assert user.status == UserStatus.ACTIVE
    assert user.hashed_password != "pw1"
    assert user.image is None


def test_register_duplicate_email(db):
    user_repository.register_user(db, "alice", "alice@x.com", "pw1")

    with pytest.raises(Conflict):
        user_repository.register_user(db, "other", "alice@x.com", "pw2")


def test_unique_index_catches_duplicates_missed_by_lookup(db, monkeypatch):
    user_repository.register_user(db, "alice", "alice@x.com", "pw1")
    # Simulate a concurrent registration that passed the lookup
    monkeypatch.setattr(user_repository, "get_user_by_email", lambda db, email: None)

    with pytest.raises(Conflict):
        user_repository.register_user(db, "other", "alice@x.com", "pw2")


def test_authenticate(db):
    user = user_repository.register_user(db, "alice", "alice@x.com", "pw1")

    assert user_repository.authenticate_user(db, "alice@x.com", "pw1").id == user.id
    with pytest.raises(Unauthorized):
        user_repository.authenticate_user(db, "alice@x.com", "PW1")
    with pytest.raises(ValidationError):
        user_repository.authenticate_user(db, "alice@x.com", None)


def test_get_user_missing(db):
    with pytest.raises(NotFound):
        user_repository.get_user(db, "missing")


def test_update_user_partial(db):
    user = user_repository.register_user(db, "alice", "alice@x.com", "pw1")

    updated = user_repository.update_user(db, user.id, email="alice@y.com")

    assert updated.username == "alice"
    assert updated.email == "alice@y.com"
    assert user_repository.authenticate_user(db, "alice@y.com", "pw1").id == user.id


def test_update_missing_user(db):
    with pytest.raises(NotFound):
        user_repository.update_user(db, "missing", username="x")
