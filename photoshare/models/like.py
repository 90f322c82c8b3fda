# photoshare/models/like.py
from sqlalchemy import Column, Integer, ForeignKey, Index
from photoshare.database import Base

class Like(Base):
    """좋아요 (유저당 사진 1회)"""
    __tablename__ = "likes"
    __table_args__ = (
        Index("idx_likes_photo_id", "photo_id"),
    )

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    photo_id = Column(Integer, ForeignKey("photos.id"), primary_key=True)

    def __repr__(self):
        return f"<Like {self.user_id} -> Photo {self.photo_id}>"
