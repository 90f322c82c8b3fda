# photoshare/models/comment.py
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from photoshare.database import Base

class Comment(Base):
    """댓글 모델"""
    __tablename__ = "comments"
    __table_args__ = (
        Index("idx_comments_photo_id", "photo_id"),
        Index("idx_comments_user_id", "user_id"),
        {"sqlite_autoincrement": True},
    )

    # 기본 필드
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    photo_id = Column(Integer, ForeignKey("photos.id"), nullable=False)

    # 내용
    body = Column(Text, nullable=False)

    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # 관계
    user = relationship("User")
    photo = relationship("Photo")

    def __repr__(self):
        return f"<Comment {self.id} on Photo {self.photo_id}>"
