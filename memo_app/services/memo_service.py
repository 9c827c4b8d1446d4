import asyncio
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from sqlalchemy import delete as sql_delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from memo_app.core.cache import ViewCache
from memo_app.models.memo import Memo
from memo_app.schemas.memo import MemoFormData, MemoResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ✅ 저장소 장애로 취급하는 예외 (asyncpg 연결 실패는 OSError로 올라옴)
STORAGE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)

# ✅ 목록 화면 캐시의 루트 경로
COLLECTION_PATH = "/"


class StoreStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"


@dataclass
class StoreResult(Generic[T]):
    """
    저장소 작업 결과.
    실패해도 value에는 빈 값([], None, False)이 들어 있어 기존 방식대로 써도 된다.
    """
    status: StoreStatus
    value: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is StoreStatus.OK

    @classmethod
    def success(cls, value):
        return cls(StoreStatus.OK, value)

    @classmethod
    def not_found(cls, value=None):
        return cls(StoreStatus.NOT_FOUND, value)

    @classmethod
    def failure(cls, value, error: Exception):
        return cls(StoreStatus.STORAGE_ERROR, value, str(error))


def to_memo(row: Memo) -> MemoResponse:
    return MemoResponse.model_validate(row)


def matches(memo: MemoResponse, query: str) -> bool:
    """제목, 내용, 태그 중 하나라도 query를 대소문자 구분 없이 포함하면 True"""
    needle = query.lower()
    if needle in memo.title.lower() or needle in memo.content.lower():
        return True
    return any(needle in tag.lower() for tag in memo.tags)


def _parse_id(memo_id) -> Optional[uuid.UUID]:
    if isinstance(memo_id, uuid.UUID):
        return memo_id
    try:
        return uuid.UUID(str(memo_id))
    except ValueError:
        return None


class MemoStore:
    """
    memos 테이블에 대한 모든 읽기/쓰기를 담당.
    저장소 오류는 로그만 남기고 StoreResult로 돌려주며 예외를 다시 던지지 않는다.
    """

    def __init__(self, session_factory: async_sessionmaker, view_cache: Optional[ViewCache] = None):
        self._session_factory = session_factory
        self._view_cache = view_cache

    # ✅ 목록 화면 캐시 무효화
    def _revalidate(self):
        if self._view_cache is not None:
            self._view_cache.revalidate(COLLECTION_PATH)

    async def _fetch_list(self, stmt, action: str) -> StoreResult[List[MemoResponse]]:
        try:
            async with self._session_factory() as db:
                rows = (await db.scalars(stmt)).all()
        except STORAGE_ERRORS as e:
            logger.error("🔥 %s 오류: %s", action, e)
            return StoreResult.failure([], e)
        return StoreResult.success([to_memo(row) for row in rows])

    # ✅ 전체 메모 조회 (최신순)
    async def list_all(self) -> StoreResult[List[MemoResponse]]:
        stmt = select(Memo).order_by(Memo.created_at.desc())
        return await self._fetch_list(stmt, "메모 목록 조회")

    # ✅ 메모 단건 조회
    async def get_by_id(self, memo_id) -> StoreResult[Optional[MemoResponse]]:
        key = _parse_id(memo_id)
        if key is None:
            return StoreResult.not_found()

        try:
            async with self._session_factory() as db:
                memo = await db.get(Memo, key)
        except STORAGE_ERRORS as e:
            logger.error("🔥 메모 조회 오류: %s", e)
            return StoreResult.failure(None, e)

        if memo is None:
            return StoreResult.not_found()
        return StoreResult.success(to_memo(memo))

    # ✅ 메모 저장
    async def create(self, form: MemoFormData) -> StoreResult[Optional[MemoResponse]]:
        new_memo = Memo(
            title=form.title,
            content=form.content,
            tags=form.tags or [],
        )
        if form.category is not None:
            new_memo.category = form.category

        # 세션 종료 시 커밋되지 않은 트랜잭션은 롤백됨
        try:
            async with self._session_factory() as db:
                db.add(new_memo)
                await db.commit()
                await db.refresh(new_memo)
        except STORAGE_ERRORS as e:
            logger.error("🔥 메모 저장 오류: %s", e)
            return StoreResult.failure(None, e)

        logger.info("메모 저장 완료: id=%s", new_memo.id)
        self._revalidate()
        return StoreResult.success(to_memo(new_memo))

    # ✅ 메모 수정
    async def update(self, memo_id, form: MemoFormData) -> StoreResult[Optional[MemoResponse]]:
        key = _parse_id(memo_id)
        if key is None:
            return StoreResult.not_found()

        try:
            async with self._session_factory() as db:
                memo = await db.get(Memo, key)
                if memo is None:
                    return StoreResult.not_found()

                memo.title = form.title
                memo.content = form.content
                if form.category is not None:
                    memo.category = form.category
                memo.tags = form.tags or []

                await db.commit()
                await db.refresh(memo)
        except STORAGE_ERRORS as e:
            logger.error("🔥 메모 업데이트 오류: %s", e)
            return StoreResult.failure(None, e)

        logger.info("메모 수정 완료: id=%s", memo.id)
        self._revalidate()
        return StoreResult.success(to_memo(memo))

    # ✅ 메모 삭제 (없는 id를 지워도 성공으로 처리)
    async def delete(self, memo_id) -> StoreResult[bool]:
        key = _parse_id(memo_id)
        if key is None:
            return StoreResult.success(True)

        try:
            async with self._session_factory() as db:
                result = await db.execute(sql_delete(Memo).where(Memo.id == key))
                removed = result.rowcount
                await db.commit()
        except STORAGE_ERRORS as e:
            logger.error("🔥 메모 삭제 오류: %s", e)
            return StoreResult.failure(False, e)

        logger.info("메모 삭제 완료: id=%s, 삭제 %d건", key, removed)
        self._revalidate()
        return StoreResult.success(True)

    # ✅ 메모 검색 (제목, 내용, 태그)
    async def search(self, query: str) -> StoreResult[List[MemoResponse]]:
        stmt = select(Memo).order_by(Memo.created_at.desc())
        result = await self._fetch_list(stmt, "메모 검색")
        if not result.ok:
            return result
        return StoreResult.success([memo for memo in result.value if matches(memo, query)])

    # ✅ 카테고리별 조회 ("all"이면 전체)
    async def list_by_category(self, category: str) -> StoreResult[List[MemoResponse]]:
        stmt = select(Memo).order_by(Memo.created_at.desc())
        if category != "all":
            stmt = stmt.where(Memo.category == category)
        return await self._fetch_list(stmt, "카테고리별 메모 조회")
