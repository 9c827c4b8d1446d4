import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from memo_app.core.cache import ViewCache
from memo_app.core.config import Settings, settings as default_settings
from memo_app.core.database import init_db, make_engine, make_session_factory
from memo_app.core.logging_config import setup_logging
from memo_app.routes.check import router as check_router
from memo_app.routes.memo import router as memo_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database_url: str | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.
    엔진/세션 팩토리/뷰 캐시는 lifespan에서 만들어 app.state에 보관한다.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging("DEBUG" if settings.is_development else settings.LOG_LEVEL)

        engine = make_engine(settings, url=database_url)
        await init_db(engine)

        app.state.engine = engine
        app.state.session_factory = make_session_factory(engine)
        app.state.view_cache = ViewCache(duration=settings.CACHE_DURATION)
        logger.info("메모 서버 시작")
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("메모 서버 종료")

    app = FastAPI(title="Memo API", lifespan=lifespan)
    app.include_router(memo_router, prefix="/memos", tags=["memos"])
    app.include_router(check_router, prefix="/check", tags=["check"])
    return app


app = create_app()
