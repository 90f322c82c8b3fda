# photoshare/core/exceptions.py
from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class StoreError(Exception):
    """데이터 계층 에러 (기본)"""
    message = "저장소 오류가 발생했습니다"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NotFound(StoreError):
    message = "대상을 찾을 수 없습니다"


class UserNotFound(NotFound):
    message = "유저를 찾을 수 없습니다"


class PhotoNotFound(NotFound):
    message = "사진을 찾을 수 없습니다"


class CommentNotFound(NotFound):
    message = "댓글을 찾을 수 없습니다"


class EdgeNotFound(NotFound):
    """follow / ban / like 관계가 없음"""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"{kind} 관계가 존재하지 않습니다")


class AlreadyExists(StoreError):
    message = "이미 존재합니다"


class DuplicateUsername(AlreadyExists):
    message = "이미 사용 중인 유저네임입니다"


class EdgeAlreadyExists(AlreadyExists):
    """follow / ban / like 관계 중복"""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"{kind} 관계가 이미 존재합니다")


class SelfReferenceRejected(StoreError):
    message = "자기 자신을 대상으로 할 수 없습니다"


class ConstraintViolation(StoreError):
    message = "데이터 제약 조건을 위반했습니다"


class StoreUnavailable(StoreError):
    message = "데이터베이스에 연결할 수 없습니다"


class SchemaCreationError(StoreError):
    message = "데이터베이스 구조 생성에 실패했습니다"


def is_unique_violation(exc: IntegrityError) -> bool:
    """IntegrityError가 UNIQUE / PK 충돌인지 판별"""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    text = str(orig).upper()
    return "UNIQUE" in text or "PRIMARY KEY" in text or "DUPLICATE" in text


def classify_integrity_error(exc: IntegrityError, on_duplicate: StoreError) -> StoreError:
    """중복이면 on_duplicate, 그 외(FK 등)는 ConstraintViolation"""
    if is_unique_violation(exc):
        return on_duplicate
    return ConstraintViolation(str(exc.orig))
