# photoshare/schemas/user.py
from pydantic import BaseModel
from typing import List

class UserResponse(BaseModel):
    """유저 응답"""
    id: int
    username: str

    class Config:
        from_attributes = True

class UserListResponse(BaseModel):
    """유저 목록 (팔로워, 팔로잉, 좋아요 누른 사람, 검색 결과)"""
    users: List[UserResponse] = []
