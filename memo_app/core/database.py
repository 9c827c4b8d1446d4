import asyncio
import logging

from fastapi import Request
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# ✅ ORM 모델을 위한 베이스 클래스
Base = declarative_base()


# ✅ SQLAlchemy 비동기 엔진 생성 (커넥션 풀 설정 포함)
def make_engine(settings: Settings | None = None, url: str | None = None) -> AsyncEngine:
    """설정값으로 엔진을 만든다. `url`을 주면 설정의 URL 대신 사용한다."""
    settings = settings or default_settings
    url = url or settings.database_url

    if url.startswith("sqlite"):
        # 메모리 DB는 커넥션 하나를 공유해야 테이블이 유지됨
        return create_async_engine(
            url,
            echo=settings.is_development,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        url,
        echo=settings.is_development,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
    )


# ✅ 요청마다 사용할 세션 팩토리
def make_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


# ✅ ORM 세션을 제공하는 의존성 (예외 발생 시 롤백)
async def get_db(request: Request):
    session_factory = request.app.state.session_factory
    async with session_factory() as db:
        try:
            yield db
        except Exception:
            await db.rollback()
            raise


# ✅ 테이블 자동 생성 함수 (중복 생성 방지)
async def init_db(engine: AsyncEngine) -> bool:
    """memos 테이블이 없을 때만 생성한다. 새로 만들었으면 True."""
    from memo_app.models.memo import Memo

    async with engine.begin() as conn:
        exists = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table(Memo.__tablename__)
        )
        if exists:
            return False
        await conn.run_sync(Memo.metadata.create_all)

    logger.info("테이블이 성공적으로 생성되었습니다: %s", Memo.__tablename__)
    return True


async def _main():
    engine = make_engine()
    try:
        await init_db(engine)
    finally:
        await engine.dispose()


# 직접 실행을 위한 코드
if __name__ == "__main__":
    from .logging_config import setup_logging

    setup_logging(default_settings.LOG_LEVEL)
    asyncio.run(_main())
