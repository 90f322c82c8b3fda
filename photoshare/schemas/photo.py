# photoshare/schemas/photo.py
from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from photoshare.schemas.user import UserResponse

class PhotoResponse(BaseModel):
    """사진 응답 (카운트는 조회하는 유저 기준)"""
    id: int
    user: UserResponse
    url: str
    created_at: Optional[datetime] = None
    like_count: int = 0
    comment_count: int = 0
    like_status: bool = False

    class Config:
        from_attributes = True

class StreamResponse(BaseModel):
    """스트림 (팔로우한 유저들의 사진)"""
    user: UserResponse
    photos: List[PhotoResponse] = []
