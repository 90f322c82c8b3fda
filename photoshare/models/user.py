# photoshare/models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from photoshare.database import Base

class User(Base):
    """유저 모델"""
    __tablename__ = "users"
    # 삭제된 id 재사용 방지
    __table_args__ = {"sqlite_autoincrement": True}

    # 기본 필드
    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)

    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User {self.id} {self.username}>"
