# photoshare/services/comment_service.py
from sqlalchemy.orm import Session

from photoshare.core.exceptions import CommentNotFound
from photoshare.core.logger import logger
from photoshare.database import store_operation, transaction
from photoshare.models.user import User
from photoshare.models.photo import Photo
from photoshare.models.comment import Comment
from photoshare.schemas.comment import CommentListResponse, CommentResponse
from photoshare.schemas.user import UserResponse
from photoshare.services import photo_service
from photoshare.services.visibility import visible_to

@store_operation
def create_comment(db: Session, author: User, photo: Photo, body: str) -> Comment:
    """댓글 작성"""
    comment = Comment(user_id=author.id, photo_id=photo.id, body=body)
    with transaction(db):
        db.add(comment)

    db.refresh(comment)
    logger.info(f"댓글 작성: {comment.id} (user {author.id}, photo {photo.id})")
    return comment

@store_operation
def get_comment(db: Session, comment_id: int, acting_user: User) -> CommentResponse:
    """
    댓글 조회
    - 작성자가 acting_user를 차단했으면 CommentNotFound
    - 사진은 acting_user 기준으로 다시 조회 (카운트 포함)
    """
    comment = db.query(Comment)\
        .filter(
            Comment.id == comment_id,
            visible_to(Comment.user_id, acting_user.id)
        )\
        .first()
    if comment is None:
        raise CommentNotFound()

    photo = photo_service.get_photo(db, comment.photo_id, acting_user)

    return CommentResponse(
        id=comment.id,
        user=UserResponse.model_validate(comment.user),
        photo=photo,
        created_at=comment.created_at,
        body=comment.body
    )

@store_operation
def delete_comment(db: Session, comment_id: int) -> None:
    """댓글 삭제 (삭제된 행이 없으면 CommentNotFound)"""
    with transaction(db):
        deleted = db.query(Comment).filter(Comment.id == comment_id).delete()
        if deleted == 0:
            raise CommentNotFound()

    logger.info(f"댓글 삭제: {comment_id}")

@store_operation
def list_comments(db: Session, photo: Photo, acting_user: User) -> CommentListResponse:
    """
    사진의 댓글 목록 (오래된 순)
    acting_user를 차단한 유저의 댓글만 빠지고 나머지는 그대로 보인다.
    """
    comments = db.query(Comment)\
        .filter(
            Comment.photo_id == photo.id,
            visible_to(Comment.user_id, acting_user.id)
        )\
        .order_by(Comment.created_at, Comment.id)\
        .all()

    if not comments:
        return CommentListResponse()

    # 사진 정보는 한 번만 계산
    photo_response = photo_service.build_photo_response(db, photo, acting_user)

    return CommentListResponse(
        comments=[
            CommentResponse(
                id=c.id,
                user=UserResponse.model_validate(c.user),
                photo=photo_response,
                created_at=c.created_at,
                body=c.body
            ) for c in comments
        ]
    )
