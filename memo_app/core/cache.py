import logging
import time

logger = logging.getLogger(__name__)


class ViewCache:
    """
    목록 화면 응답을 경로별로 잠시 보관하는 메모리 캐시.
    메모가 생성/수정/삭제되면 revalidate()로 해당 경로를 무효화한다.
    """

    def __init__(self, duration: int = 60):
        self.duration = duration  # 캐시 유효 시간 (초)
        self._entries = {}

    def get(self, key: str):
        entry = self._entries.get(key)
        if entry is None:
            return None
        timestamp, value = entry
        if time.monotonic() - timestamp > self.duration:
            del self._entries[key]
            return None
        return value

    # 저장할 때마다 만료 항목을 정리해 키가 계속 쌓이지 않게 함
    def set(self, key: str, value):
        self.cleanup()
        self._entries[key] = (time.monotonic(), value)

    # ✅ 경로 무효화 ("/"이면 전체)
    def revalidate(self, path: str = "/"):
        stale = [key for key in self._entries if key.startswith(path)]
        for key in stale:
            del self._entries[key]
        logger.debug("뷰 캐시 무효화: path=%s, 삭제 %d건", path, len(stale))

    # ✅ 만료된 항목 정리
    def cleanup(self):
        now = time.monotonic()
        expired = [
            key for key, (timestamp, _) in self._entries.items()
            if now - timestamp > self.duration
        ]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return self.get(key) is not None
