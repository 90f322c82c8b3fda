# tests/test_relationship_service.py
import pytest

from photoshare.core.exceptions import AlreadyExists, EdgeAlreadyExists, EdgeNotFound, NotFound
from photoshare.models.ban import Ban
from photoshare.models.follow import Follow
from photoshare.models.like import Like
from photoshare.services import relationship_service, user_service


def test_ban_is_directional(db, alice, bob):
    relationship_service.insert_ban(db, alice, bob)

    assert relationship_service.check_ban(db, alice, bob) is True
    assert relationship_service.check_ban(db, bob, alice) is False


def test_duplicate_follow_fails(db, alice, bob):
    relationship_service.insert_follow(db, alice, bob)

    with pytest.raises(EdgeAlreadyExists) as exc:
        relationship_service.insert_follow(db, alice, bob)

    assert isinstance(exc.value, AlreadyExists)
    assert exc.value.kind == "follow"
    assert db.query(Follow).filter(Follow.follower_id == alice.id, Follow.followed_id == bob.id).count() == 1


def test_duplicate_ban_and_like_fail(db, alice, bob, alice_photo):
    relationship_service.insert_ban(db, alice, bob)
    relationship_service.insert_like(db, bob, alice_photo)

    with pytest.raises(EdgeAlreadyExists):
        relationship_service.insert_ban(db, alice, bob)
    with pytest.raises(EdgeAlreadyExists):
        relationship_service.insert_like(db, bob, alice_photo)

    assert db.query(Ban).count() == 1
    assert db.query(Like).count() == 1


def test_delete_missing_ban_fails_without_changes(db, alice, bob, carol):
    relationship_service.insert_ban(db, carol, alice)

    with pytest.raises(EdgeNotFound) as exc:
        relationship_service.delete_ban(db, alice, bob)

    assert isinstance(exc.value, NotFound)
    assert exc.value.kind == "ban"
    assert db.query(Ban).count() == 1


def test_delete_edges(db, alice, bob, alice_photo):
    relationship_service.insert_follow(db, alice, bob)
    relationship_service.insert_ban(db, alice, bob)
    relationship_service.insert_like(db, bob, alice_photo)

    relationship_service.delete_follow(db, alice, bob)
    relationship_service.delete_ban(db, alice, bob)
    relationship_service.delete_like(db, bob, alice_photo)

    assert relationship_service.get_follow_status(db, alice, bob) is False
    assert relationship_service.check_ban(db, alice, bob) is False
    assert relationship_service.get_like_status(db, bob, alice_photo) is False

    with pytest.raises(EdgeNotFound):
        relationship_service.delete_follow(db, alice, bob)
    with pytest.raises(EdgeNotFound):
        relationship_service.delete_like(db, bob, alice_photo)


def test_self_edges_are_not_special_cased(db, alice):
    relationship_service.insert_ban(db, alice, alice)
    assert relationship_service.check_ban(db, alice, alice) is True

    relationship_service.delete_ban(db, alice, alice)
    with pytest.raises(EdgeNotFound):
        relationship_service.delete_ban(db, alice, alice)


def test_follow_status(db, alice, bob):
    relationship_service.insert_follow(db, alice, bob)

    assert relationship_service.get_follow_status(db, alice, bob) is True
    assert relationship_service.get_follow_status(db, bob, alice) is False


def test_follow_lists(db, alice, bob, carol):
    relationship_service.insert_follow(db, bob, alice)
    relationship_service.insert_follow(db, carol, alice)
    relationship_service.insert_follow(db, alice, carol)

    followers = relationship_service.get_followers_list(db, alice, alice)
    assert [u.username for u in followers.users] == ["bob", "carol"]

    following = relationship_service.get_following_list(db, alice, bob)
    assert [u.username for u in following.users] == ["carol"]


def test_follow_lists_hide_banners_of_acting_user(db, alice, bob, carol):
    dave = user_service.create_user(db, "dave")
    relationship_service.insert_follow(db, bob, alice)
    relationship_service.insert_follow(db, carol, alice)
    relationship_service.insert_ban(db, carol, dave)

    followers = relationship_service.get_followers_list(db, alice, dave)
    assert [u.username for u in followers.users] == ["bob"]

    # 차단한 쪽에서 보면 그대로
    followers = relationship_service.get_followers_list(db, alice, carol)
    assert [u.username for u in followers.users] == ["bob", "carol"]


def test_like_list_hides_banners(db, alice, bob, carol, alice_photo):
    relationship_service.insert_like(db, bob, alice_photo)
    relationship_service.insert_like(db, carol, alice_photo)
    relationship_service.insert_ban(db, bob, alice)

    likers = relationship_service.get_like_list(db, alice_photo, alice)
    assert [u.username for u in likers.users] == ["carol"]

    likers = relationship_service.get_like_list(db, alice_photo, carol)
    assert [u.username for u in likers.users] == ["bob", "carol"]
