# tests/test_user_service.py
import pytest

from photoshare.core.exceptions import AlreadyExists, DuplicateUsername, UserNotFound
from photoshare.models.user import User
from photoshare.services import relationship_service, user_service


def test_create_and_get_user(db):
    user = user_service.create_user(db, "alice")

    assert user.id is not None
    assert user_service.get_user(db, user.id).username == "alice"
    assert user_service.get_user_by_username(db, "alice").id == user.id


def test_create_user_duplicate_username(db, alice):
    with pytest.raises(DuplicateUsername) as exc:
        user_service.create_user(db, "alice")

    assert isinstance(exc.value, AlreadyExists)
    assert db.query(User).filter(User.username == "alice").count() == 1


def test_get_missing_user(db):
    with pytest.raises(UserNotFound):
        user_service.get_user(db, 42)
    with pytest.raises(UserNotFound):
        user_service.get_user_by_username(db, "nobody")


def test_login_creates_once(db):
    first = user_service.login(db, "dave")
    second = user_service.login(db, "dave")

    assert first.id == second.id
    assert db.query(User).count() == 1


def test_update_username(db, alice):
    user_service.update_username(db, alice, "alice2")

    assert user_service.get_user(db, alice.id).username == "alice2"
    with pytest.raises(UserNotFound):
        user_service.get_user_by_username(db, "alice")


def test_update_username_taken(db, alice, bob):
    with pytest.raises(DuplicateUsername):
        user_service.update_username(db, alice, "bob")

    assert user_service.get_user(db, alice.id).username == "alice"


def test_update_username_missing_user(db):
    with pytest.raises(UserNotFound):
        user_service.update_username(db, User(id=999, username="ghost"), "someone")


def test_search_users_hides_banners(db, alice, bob, carol):
    alicia = user_service.create_user(db, "alicia")
    relationship_service.insert_ban(db, alicia, carol)

    names = [u.username for u in user_service.search_users(db, "ali", carol).users]
    assert names == ["alice"]

    names = [u.username for u in user_service.search_users(db, "ali", bob).users]
    assert names == ["alice", "alicia"]


def test_search_users_escapes_wildcards(db, alice):
    user_service.create_user(db, "a_b")

    names = [u.username for u in user_service.search_users(db, "_", alice).users]
    assert names == ["a_b"]
