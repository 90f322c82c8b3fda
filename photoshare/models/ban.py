# photoshare/models/ban.py
from sqlalchemy import Column, Integer, ForeignKey, Index
from photoshare.database import Base

class Ban(Base):
    """차단 관계: banner가 banned에게 자신의 콘텐츠를 숨김"""
    __tablename__ = "bans"
    __table_args__ = (
        # 가시성 필터는 banned_id로 조회함
        Index("idx_bans_banned_id", "banned_id"),
    )

    banner_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    banned_id = Column(Integer, ForeignKey("users.id"), primary_key=True)

    def __repr__(self):
        return f"<Ban {self.banner_id} -> {self.banned_id}>"
