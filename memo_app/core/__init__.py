from .config import (
    Settings,
    settings,
)

from .database import (
    Base,
    make_engine,
    make_session_factory,
    get_db,
    init_db
)

from .cache import ViewCache
from .logging_config import setup_logging

__all__ = [
    # 설정
    'Settings',
    'settings',

    # 데이터베이스 관련
    'Base',
    'make_engine',
    'make_session_factory',
    'get_db',
    'init_db',

    # 캐시 / 로깅
    'ViewCache',
    'setup_logging',
]
