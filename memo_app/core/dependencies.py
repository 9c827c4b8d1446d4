from fastapi import Request

from memo_app.core.cache import ViewCache
from memo_app.services.memo_service import MemoStore


# ✅ 앱 상태에 보관된 세션 팩토리/캐시로 MemoStore 생성
def get_memo_store(request: Request) -> MemoStore:
    return MemoStore(
        session_factory=request.app.state.session_factory,
        view_cache=request.app.state.view_cache,
    )


# ✅ 목록 화면 캐시
def get_view_cache(request: Request) -> ViewCache:
    return request.app.state.view_cache
