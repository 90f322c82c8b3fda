# photoshare/schemas/profile.py
from pydantic import BaseModel
from typing import List
from photoshare.schemas.user import UserResponse
from photoshare.schemas.photo import PhotoResponse

class ProfileResponse(BaseModel):
    """프로필 응답"""
    user: UserResponse
    photos: List[PhotoResponse] = []
    photo_count: int = 0
    followers_count: int = 0
    following_count: int = 0
    follow_status: bool = False  # 조회하는 유저가 팔로우 중인지
    ban_status: bool = False     # 조회하는 유저가 차단했는지
