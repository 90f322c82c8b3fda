# photoshare/database.py
from contextlib import contextmanager
from functools import wraps
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from photoshare.config import settings
from photoshare.core.exceptions import ConstraintViolation, StoreUnavailable
from photoshare.core.logger import logger

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite는 연결마다 FK 검사를 켜야 함"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    """공유 저장소 핸들 (엔진 + 세션 팩토리)"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        is_sqlite = database_url.startswith("sqlite")

        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        if is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                # 인메모리 DB는 연결 하나를 공유해야 테이블이 유지됨
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(database_url, **engine_kwargs)
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        # 세션 팩토리
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def initialize(self) -> None:
        """스키마 생성 (시작 시 매번 호출해도 안전)"""
        from photoshare.services import schema_service
        schema_service.initialize(self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> None:
        """연결 상태 확인"""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except (OperationalError, InterfaceError) as e:
            logger.error(f"데이터베이스 ping 실패: {e}")
            raise StoreUnavailable(str(e)) from e

    def close(self) -> None:
        """연결 풀 정리"""
        self.engine.dispose()
        logger.info("데이터베이스 연결 종료")


# 기본 저장소
store = Store(settings.database_url, echo=settings.debug)


# DB 세션 의존성 (FastAPI에서 사용)
def get_db() -> Iterator[Session]:
    """DB 세션 생성 및 종료"""
    db = store.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """성공 시 commit, 실패 시 rollback 후 예외 전파"""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def store_operation(func):
    """
    드라이버 예외를 분류된 StoreError로 변환 (재시도 없음)
    - 연결 계열 -> StoreUnavailable
    - 분류되지 않은 무결성 오류 -> ConstraintViolation
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError as e:
            logger.warning(f"{func.__name__} 제약 조건 위반: {e.orig}")
            raise ConstraintViolation(str(e.orig)) from e
        except (OperationalError, InterfaceError) as e:
            logger.warning(f"{func.__name__} 저장소 오류: {e}")
            raise StoreUnavailable(str(e)) from e
    return wrapper
