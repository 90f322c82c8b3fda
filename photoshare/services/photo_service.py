# photoshare/services/photo_service.py
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session

from photoshare.core.exceptions import PhotoNotFound
from photoshare.core.logger import logger
from photoshare.database import store_operation, transaction
from photoshare.models.user import User
from photoshare.models.photo import Photo
from photoshare.models.comment import Comment
from photoshare.models.follow import Follow
from photoshare.models.like import Like
from photoshare.schemas.photo import PhotoResponse, StreamResponse
from photoshare.schemas.user import UserResponse
from photoshare.services import counter_service, relationship_service
from photoshare.services.visibility import visible_to

@store_operation
def create_photo(db: Session, owner: User, url: str) -> Photo:
    """사진 등록"""
    photo = Photo(user_id=owner.id, url=url)
    with transaction(db):
        db.add(photo)

    db.refresh(photo)
    logger.info(f"사진 등록: {photo.id} (user {owner.id})")
    return photo

def build_photo_response(db: Session, photo: Photo, acting_user: User) -> PhotoResponse:
    """카운트/좋아요 여부를 acting_user 기준으로 채운 사진 응답"""
    return PhotoResponse(
        id=photo.id,
        user=UserResponse.model_validate(photo.user),
        url=photo.url,
        created_at=photo.created_at,
        like_count=counter_service.like_count(db, photo, acting_user),
        comment_count=counter_service.comment_count(db, photo, acting_user),
        like_status=relationship_service.get_like_status(db, acting_user, photo)
    )

@store_operation
def get_photo_model(db: Session, photo_id: int, acting_user: User) -> Photo:
    """
    사진 조회 (ORM 객체)
    - 없거나 작성자가 acting_user를 차단했으면 PhotoNotFound
    """
    photo = db.query(Photo)\
        .filter(
            Photo.id == photo_id,
            visible_to(Photo.user_id, acting_user.id)
        )\
        .first()
    if photo is None:
        raise PhotoNotFound()
    return photo

def get_photo(db: Session, photo_id: int, acting_user: User) -> PhotoResponse:
    photo = get_photo_model(db, photo_id, acting_user)
    return build_photo_response(db, photo, acting_user)

@store_operation
def delete_photo(db: Session, photo_id: int) -> None:
    """
    사진 삭제
    댓글 -> 좋아요 -> 사진 순서로 하나의 트랜잭션에서 삭제.
    중간에 실패하면 전체 롤백.
    """
    with transaction(db):
        comments = db.query(Comment).filter(Comment.photo_id == photo_id).delete()
        likes = db.query(Like).filter(Like.photo_id == photo_id).delete()
        deleted = db.query(Photo).filter(Photo.id == photo_id).delete()
        if deleted == 0:
            raise PhotoNotFound()

    logger.info(f"사진 삭제: {photo_id} (댓글 {comments}, 좋아요 {likes})")

@store_operation
def list_user_photos(db: Session, owner: User, acting_user: User) -> List[PhotoResponse]:
    """프로필 사진 목록 (최신순). owner가 acting_user를 차단했으면 빈 목록"""
    photos = db.query(Photo)\
        .filter(
            Photo.user_id == owner.id,
            visible_to(Photo.user_id, acting_user.id)
        )\
        .order_by(Photo.created_at.desc(), Photo.id.desc())\
        .all()

    return [build_photo_response(db, p, acting_user) for p in photos]

@store_operation
def get_stream(db: Session, acting_user: User) -> StreamResponse:
    """팔로우한 유저들의 사진 (최신순, acting_user를 차단한 유저 제외)"""
    followed_ids = select(Follow.followed_id).where(Follow.follower_id == acting_user.id)

    photos = db.query(Photo)\
        .filter(
            Photo.user_id.in_(followed_ids),
            visible_to(Photo.user_id, acting_user.id)
        )\
        .order_by(Photo.created_at.desc(), Photo.id.desc())\
        .all()

    return StreamResponse(
        user=UserResponse.model_validate(acting_user),
        photos=[build_photo_response(db, p, acting_user) for p in photos]
    )
