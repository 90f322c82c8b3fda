# photoshare/services/profile_service.py
from sqlalchemy.orm import Session

from photoshare.models.user import User
from photoshare.schemas.profile import ProfileResponse
from photoshare.schemas.user import UserResponse
from photoshare.services import counter_service, photo_service, relationship_service

def get_profile(db: Session, profile_user: User, acting_user: User) -> ProfileResponse:
    """프로필 조회 (사진 목록만 차단 필터 적용, 카운트는 원본 기준)"""
    return ProfileResponse(
        user=UserResponse.model_validate(profile_user),
        photos=photo_service.list_user_photos(db, profile_user, acting_user),
        photo_count=counter_service.photo_count(db, profile_user),
        followers_count=counter_service.follower_count(db, profile_user),
        following_count=counter_service.following_count(db, profile_user),
        follow_status=relationship_service.get_follow_status(db, acting_user, profile_user),
        ban_status=relationship_service.check_ban(db, acting_user, profile_user)
    )
