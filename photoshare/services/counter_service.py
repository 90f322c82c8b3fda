# photoshare/services/counter_service.py
# 카운트는 캐시하지 않고 매번 원본 테이블에서 계산
from sqlalchemy.orm import Session

from photoshare.database import store_operation
from photoshare.models.user import User
from photoshare.models.photo import Photo
from photoshare.models.comment import Comment
from photoshare.models.follow import Follow
from photoshare.models.like import Like
from photoshare.services.visibility import visible_to

@store_operation
def follower_count(db: Session, user: User) -> int:
    """팔로워 수 (차단 필터 없음)"""
    return db.query(Follow).filter(Follow.followed_id == user.id).count()

@store_operation
def following_count(db: Session, user: User) -> int:
    """팔로잉 수 (차단 필터 없음)"""
    return db.query(Follow).filter(Follow.follower_id == user.id).count()

@store_operation
def photo_count(db: Session, user: User) -> int:
    return db.query(Photo).filter(Photo.user_id == user.id).count()

@store_operation
def like_count(db: Session, photo: Photo, acting_user: User) -> int:
    """acting_user를 차단한 유저의 좋아요는 제외"""
    return db.query(Like)\
        .filter(
            Like.photo_id == photo.id,
            visible_to(Like.user_id, acting_user.id)
        )\
        .count()

@store_operation
def comment_count(db: Session, photo: Photo, acting_user: User) -> int:
    """acting_user를 차단한 유저의 댓글은 제외"""
    return db.query(Comment)\
        .filter(
            Comment.photo_id == photo.id,
            visible_to(Comment.user_id, acting_user.id)
        )\
        .count()
