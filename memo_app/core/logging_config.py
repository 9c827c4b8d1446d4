"""애플리케이션 전역 로깅 설정."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ✅ 중복 설정 방지용 핸들러 이름
_HANDLER_NAME = "memo_app.console"


def setup_logging(level: str = "INFO") -> None:
    """루트 로거에 콘솔 핸들러를 한 번만 붙인다.

    앱 시작 시(lifespan) 호출되며, 여러 번 호출돼도 핸들러는 하나만 유지된다.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level.upper())
            return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level.upper())
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))
    root.addHandler(handler)
