# photoshare/services/relationship_service.py
"""
관계(edge) 저장소: follow, ban, like

- 중복 추가는 EdgeAlreadyExists (PK 충돌로 판단, 사전 조회 없음)
- 없는 관계 삭제는 EdgeNotFound (삭제된 행 수 0으로 판단)
- 자기 자신 대상 검사는 호출하는 쪽 책임
"""
from sqlalchemy import delete, insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from photoshare.core.exceptions import EdgeAlreadyExists, EdgeNotFound, classify_integrity_error
from photoshare.core.logger import logger
from photoshare.database import store_operation, transaction
from photoshare.models.user import User
from photoshare.models.photo import Photo
from photoshare.models.follow import Follow
from photoshare.models.ban import Ban
from photoshare.models.like import Like
from photoshare.schemas.user import UserListResponse, UserResponse
from photoshare.services.visibility import visible_to

FOLLOW = "follow"
BAN = "ban"
LIKE = "like"


def _insert_edge(db: Session, model, kind: str, **values) -> None:
    try:
        with transaction(db):
            db.execute(insert(model).values(**values))
    except IntegrityError as e:
        logger.warning(f"{kind} 추가 실패 {values}: {e.orig}")
        raise classify_integrity_error(e, EdgeAlreadyExists(kind)) from e

    logger.info(f"{kind} 추가: {values}")


def _delete_edge(db: Session, model, kind: str, **values) -> None:
    criteria = [getattr(model, column) == value for column, value in values.items()]
    with transaction(db):
        result = db.execute(delete(model).where(*criteria))
        if result.rowcount == 0:
            raise EdgeNotFound(kind)

    logger.info(f"{kind} 삭제: {values}")


def _user_list(users) -> UserListResponse:
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])

# ===== Follow =====

@store_operation
def insert_follow(db: Session, actor: User, target: User) -> None:
    _insert_edge(db, Follow, FOLLOW, follower_id=actor.id, followed_id=target.id)

@store_operation
def delete_follow(db: Session, actor: User, target: User) -> None:
    _delete_edge(db, Follow, FOLLOW, follower_id=actor.id, followed_id=target.id)

@store_operation
def get_follow_status(db: Session, first: User, second: User) -> bool:
    """first가 second를 팔로우 중인지"""
    return db.query(Follow)\
        .filter(Follow.follower_id == first.id, Follow.followed_id == second.id)\
        .first() is not None

@store_operation
def get_followers_list(db: Session, target: User, acting_user: User) -> UserListResponse:
    """target의 팔로워 (acting_user를 차단한 유저는 숨김)"""
    users = db.query(User)\
        .join(Follow, Follow.follower_id == User.id)\
        .filter(
            Follow.followed_id == target.id,
            visible_to(User.id, acting_user.id)
        )\
        .order_by(User.username)\
        .all()
    return _user_list(users)

@store_operation
def get_following_list(db: Session, target: User, acting_user: User) -> UserListResponse:
    """target이 팔로우하는 유저 (acting_user를 차단한 유저는 숨김)"""
    users = db.query(User)\
        .join(Follow, Follow.followed_id == User.id)\
        .filter(
            Follow.follower_id == target.id,
            visible_to(User.id, acting_user.id)
        )\
        .order_by(User.username)\
        .all()
    return _user_list(users)

# ===== Ban =====

@store_operation
def insert_ban(db: Session, actor: User, target: User) -> None:
    _insert_edge(db, Ban, BAN, banner_id=actor.id, banned_id=target.id)

@store_operation
def delete_ban(db: Session, actor: User, target: User) -> None:
    _delete_edge(db, Ban, BAN, banner_id=actor.id, banned_id=target.id)

@store_operation
def check_ban(db: Session, first: User, second: User) -> bool:
    """first가 second를 차단했는지 (단방향)"""
    return db.query(Ban)\
        .filter(Ban.banner_id == first.id, Ban.banned_id == second.id)\
        .first() is not None

# ===== Like =====

@store_operation
def insert_like(db: Session, actor: User, photo: Photo) -> None:
    _insert_edge(db, Like, LIKE, user_id=actor.id, photo_id=photo.id)

@store_operation
def delete_like(db: Session, actor: User, photo: Photo) -> None:
    _delete_edge(db, Like, LIKE, user_id=actor.id, photo_id=photo.id)

@store_operation
def get_like_status(db: Session, user: User, photo: Photo) -> bool:
    """user가 photo에 좋아요를 눌렀는지"""
    return db.query(Like)\
        .filter(Like.user_id == user.id, Like.photo_id == photo.id)\
        .first() is not None

@store_operation
def get_like_list(db: Session, photo: Photo, acting_user: User) -> UserListResponse:
    """좋아요 누른 유저 (acting_user를 차단한 유저는 숨김)"""
    users = db.query(User)\
        .join(Like, Like.user_id == User.id)\
        .filter(
            Like.photo_id == photo.id,
            visible_to(User.id, acting_user.id)
        )\
        .order_by(User.username)\
        .all()
    return _user_list(users)
