# photoshare/schemas/comment.py
from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from photoshare.schemas.user import UserResponse
from photoshare.schemas.photo import PhotoResponse

class CommentResponse(BaseModel):
    """댓글 응답"""
    id: int
    user: UserResponse
    photo: PhotoResponse
    created_at: Optional[datetime] = None
    body: str

class CommentListResponse(BaseModel):
    """사진의 댓글 목록"""
    comments: List[CommentResponse] = []
