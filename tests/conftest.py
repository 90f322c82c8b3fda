# tests/conftest.py
import os

# 테스트에서는 파일 로그 / 디스크 DB를 쓰지 않음
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest

from photoshare.database import Store
from photoshare.services import photo_service, user_service


@pytest.fixture
def store():
    """테스트마다 새 인메모리 DB"""
    s = Store("sqlite://")
    s.initialize()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def db(store):
    session = store.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def alice(db):
    return user_service.create_user(db, "alice")


@pytest.fixture
def bob(db):
    return user_service.create_user(db, "bob")


@pytest.fixture
def carol(db):
    return user_service.create_user(db, "carol")


@pytest.fixture
def alice_photo(db, alice):
    return photo_service.create_photo(db, alice, "https://cdn.example.com/p1.jpg")
