# photoshare/models/follow.py
from sqlalchemy import Column, Integer, ForeignKey, Index
from photoshare.database import Base

class Follow(Base):
    """팔로우 관계 (follower -> followed)"""
    __tablename__ = "follows"
    __table_args__ = (
        Index("idx_follows_followed_id", "followed_id"),
    )

    # 복합 PK: 같은 쌍은 한 번만
    follower_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    followed_id = Column(Integer, ForeignKey("users.id"), primary_key=True)

    def __repr__(self):
        return f"<Follow {self.follower_id} -> {self.followed_id}>"
