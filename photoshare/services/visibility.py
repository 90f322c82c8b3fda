# photoshare/services/visibility.py
"""
차단 기반 가시성 필터

Ban(X, U)가 있으면 X가 만든 콘텐츠(사진, 댓글, 좋아요, 팔로우 목록 노출)는
U가 조회할 때 보이지 않는다. 방향 주의: "U가 차단한 사람"이 아니라
"U를 차단한 사람"을 제외한다.
"""
from sqlalchemy import select
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

from photoshare.models.ban import Ban


def banners_of(user_id: int) -> Select:
    """user_id를 차단한 유저들의 id"""
    return select(Ban.banner_id).where(Ban.banned_id == user_id)


def visible_to(author_column, acting_user_id: int) -> ColumnElement:
    """author_column의 작성자가 acting_user를 차단하지 않았으면 True"""
    return author_column.not_in(banners_of(acting_user_id))
