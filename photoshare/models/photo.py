# photoshare/models/photo.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from photoshare.database import Base

class Photo(Base):
    """사진 모델"""
    __tablename__ = "photos"
    __table_args__ = (
        Index("idx_photos_user_id", "user_id"),
        {"sqlite_autoincrement": True},
    )

    # 기본 필드
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    # URL
    url = Column(String, nullable=False)

    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # 관계 (댓글/좋아요 삭제는 photo_service.delete_photo가 담당)
    user = relationship("User")

    def __repr__(self):
        return f"<Photo {self.id} by {self.user_id}>"
