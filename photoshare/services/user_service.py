# photoshare/services/user_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from photoshare.core.exceptions import DuplicateUsername, UserNotFound, classify_integrity_error
from photoshare.core.logger import logger
from photoshare.database import store_operation, transaction
from photoshare.models.user import User
from photoshare.schemas.user import UserListResponse, UserResponse
from photoshare.services.visibility import visible_to

@store_operation
def create_user(db: Session, username: str) -> User:
    """유저 생성 (유저네임 중복 시 DuplicateUsername)"""
    user = User(username=username)
    try:
        with transaction(db):
            db.add(user)
    except IntegrityError as e:
        raise classify_integrity_error(e, DuplicateUsername()) from e

    db.refresh(user)
    logger.info(f"유저 생성: {user.id} ({user.username})")
    return user

@store_operation
def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise UserNotFound()
    return user

@store_operation
def get_user_by_username(db: Session, username: str) -> User:
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        raise UserNotFound()
    return user

def login(db: Session, username: str) -> User:
    """
    로그인 = 유저네임으로 조회, 없으면 생성
    동시에 같은 이름으로 생성되면 먼저 만들어진 유저를 반환
    """
    try:
        return get_user_by_username(db, username)
    except UserNotFound:
        pass

    try:
        return create_user(db, username)
    except DuplicateUsername:
        return get_user_by_username(db, username)

@store_operation
def update_username(db: Session, user: User, new_username: str) -> None:
    """
    유저네임 변경
    - 대상 행이 없으면 UserNotFound (사전 조회 없이 영향받은 행 수로 판단)
    - 이미 쓰는 이름이면 DuplicateUsername
    """
    try:
        with transaction(db):
            updated = db.query(User)\
                .filter(User.id == user.id)\
                .update({User.username: new_username}, synchronize_session="evaluate")
            if updated == 0:
                raise UserNotFound()
    except IntegrityError as e:
        raise classify_integrity_error(e, DuplicateUsername()) from e

    logger.info(f"유저네임 변경: {user.id} -> {new_username}")

@store_operation
def search_users(db: Session, query: str, acting_user: User) -> UserListResponse:
    """유저네임 검색 (acting_user를 차단한 유저는 제외)"""
    users = db.query(User)\
        .filter(
            User.username.contains(query, autoescape=True),
            visible_to(User.id, acting_user.id)
        )\
        .order_by(User.username)\
        .all()

    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])
