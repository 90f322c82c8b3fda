# photoshare/services/schema_service.py
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from photoshare.core.exceptions import SchemaCreationError
from photoshare.core.logger import logger
from photoshare.database import Base
from photoshare.models.user import User
from photoshare.models.photo import Photo
from photoshare.models.comment import Comment
from photoshare.models.follow import Follow
from photoshare.models.ban import Ban
from photoshare.models.like import Like

# FK 순서: User -> Photo -> Comment / 관계 테이블
TABLE_ORDER = [User, Photo, Comment, Follow, Ban, Like]


def initialize(engine: Engine) -> None:
    """
    테이블 생성 (이미 있으면 건너뜀)
    - 시작할 때마다 호출해도 안전
    - SQLite면 FK 검사가 켜져 있는지 확인
    """
    try:
        with engine.begin() as conn:
            if conn.dialect.name == "sqlite":
                enabled = conn.execute(text("PRAGMA foreign_keys")).scalar()
                if not enabled:
                    raise SchemaCreationError("SQLite 외래키 검사가 꺼져 있습니다")

            for model in TABLE_ORDER:
                Base.metadata.create_all(bind=conn, tables=[model.__table__], checkfirst=True)
    except SQLAlchemyError as e:
        logger.error(f"스키마 생성 실패: {e}")
        raise SchemaCreationError(f"데이터베이스 구조 생성 오류: {e}") from e

    logger.info(f"스키마 준비 완료: {', '.join(m.__tablename__ for m in TABLE_ORDER)}")
