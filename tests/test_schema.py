# tests/test_schema.py
import pytest
from sqlalchemy import create_engine, inspect

from photoshare.core.exceptions import ConstraintViolation, SchemaCreationError, StoreUnavailable
from photoshare.database import Store
from photoshare.models.user import User
from photoshare.services import relationship_service, schema_service, user_service


def test_initialize_creates_all_tables(store):
    tables = set(inspect(store.engine).get_table_names())
    assert {"users", "photos", "comments", "follows", "bans", "likes"} <= tables


def test_initialize_is_idempotent(store, db, alice):
    store.initialize()
    store.initialize()

    # 기존 데이터 유지
    assert user_service.get_user(db, alice.id).username == "alice"


def test_edge_tables_have_composite_primary_keys(store):
    inspector = inspect(store.engine)
    assert inspector.get_pk_constraint("follows")["constrained_columns"] == ["follower_id", "followed_id"]
    assert inspector.get_pk_constraint("bans")["constrained_columns"] == ["banner_id", "banned_id"]
    assert inspector.get_pk_constraint("likes")["constrained_columns"] == ["user_id", "photo_id"]


def test_foreign_keys_reference_surrogate_ids(store):
    inspector = inspect(store.engine)
    for table in ("photos", "comments", "follows", "bans", "likes"):
        for fk in inspector.get_foreign_keys(table):
            assert fk["referred_table"] in ("users", "photos")
            assert fk["referred_columns"] == ["id"]


def test_foreign_keys_are_enforced(db, alice):
    ghost = User(id=999, username="ghost")

    with pytest.raises(ConstraintViolation):
        relationship_service.insert_follow(db, alice, ghost)


def test_initialize_rejects_sqlite_without_foreign_keys():
    engine = create_engine("sqlite://")
    try:
        with pytest.raises(SchemaCreationError):
            schema_service.initialize(engine)
    finally:
        engine.dispose()


def test_unreachable_store_reports_unavailable(tmp_path):
    s = Store(f"sqlite:///{tmp_path}/missing/dir/photoshare.db")
    try:
        with pytest.raises(StoreUnavailable):
            s.ping()

        session = s.session()
        try:
            with pytest.raises(StoreUnavailable):
                user_service.get_user(session, 1)
        finally:
            session.close()
    finally:
        s.close()
