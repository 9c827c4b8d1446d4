from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from memo_app.core.cache import ViewCache
from memo_app.core.dependencies import get_memo_store, get_view_cache
from memo_app.schemas.memo import MemoDeleteResponse, MemoFormData, MemoResponse
from memo_app.services.memo_service import COLLECTION_PATH, MemoStore, StoreResult, StoreStatus

router = APIRouter()


# ✅ StoreResult → 응답 값 / HTTPException 변환
def _unwrap(result: StoreResult):
    if result.status is StoreStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="메모를 찾을 수 없습니다.")
    if result.status is StoreStatus.STORAGE_ERROR:
        raise HTTPException(status_code=503, detail="저장소에 연결할 수 없습니다.")
    return result.value


# ✅ 메모 목록 조회 (카테고리 필터 선택)
@router.get("", response_model=list[MemoResponse])
async def get_memos(
    category: Optional[str] = None,
    store: MemoStore = Depends(get_memo_store),
    cache: ViewCache = Depends(get_view_cache),
):
    cache_key = COLLECTION_PATH if category is None else f"{COLLECTION_PATH}?category={category}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    if category is None:
        memos = _unwrap(await store.list_all())
    else:
        memos = _unwrap(await store.list_by_category(category))

    cache.set(cache_key, memos)
    return memos


# ✅ 메모 검색
@router.get("/search", response_model=list[MemoResponse])
async def search_memos(q: str, store: MemoStore = Depends(get_memo_store)):
    return _unwrap(await store.search(q))


# ✅ 메모 단건 조회
@router.get("/{memo_id}", response_model=MemoResponse)
async def get_memo(memo_id: str, store: MemoStore = Depends(get_memo_store)):
    return _unwrap(await store.get_by_id(memo_id))


# ✅ 메모 저장
@router.post("", response_model=MemoResponse, status_code=status.HTTP_201_CREATED)
async def create_memo(memo: MemoFormData, store: MemoStore = Depends(get_memo_store)):
    return _unwrap(await store.create(memo))


# ✅ 메모 수정
@router.put("/{memo_id}", response_model=MemoResponse)
async def update_memo(memo_id: str, memo: MemoFormData, store: MemoStore = Depends(get_memo_store)):
    return _unwrap(await store.update(memo_id, memo))


# ✅ 메모 삭제
@router.delete("/{memo_id}", response_model=MemoDeleteResponse)
async def delete_memo(memo_id: str, store: MemoStore = Depends(get_memo_store)):
    deleted = _unwrap(await store.delete(memo_id))
    return {"message": "메모가 삭제되었습니다.", "memo_id": memo_id, "deleted": deleted}
