import os
from typing import Optional
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# ✅ .env 파일 로드
load_dotenv()

class Settings(BaseSettings):
    # ✅ 데이터베이스 설정
    DB_HOST: Optional[str] = os.getenv("DB_HOST")
    DB_NAME: Optional[str] = os.getenv("DB_NAME")
    DB_USER: Optional[str] = os.getenv("DB_USER")
    DB_PASSWORD: Optional[str] = os.getenv("DB_PASSWORD")
    DB_PORT: str = os.getenv("DB_PORT", "5432")  # 기본값 5432 설정

    # ✅ 전체 URL을 직접 지정하면 DB_* 값보다 우선
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")

    # ✅ 실행 환경 / 로그 레벨
    ENV: str = os.getenv("ENV", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ✅ 목록 화면 캐시 유효 시간 (초)
    CACHE_DURATION: int = 60

    # ✅ 커넥션 풀 설정
    POOL_SIZE: int = 10       # 최대 10개의 커넥션 유지
    MAX_OVERFLOW: int = 20    # 최대 20개까지 추가 가능
    POOL_TIMEOUT: int = 30    # 30초 동안 연결을 기다림
    POOL_RECYCLE: int = 1800  # 30분마다 커넥션 재사용

    # ✅ SQLAlchemy에서 사용할 데이터베이스 URL 생성
    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def is_development(self) -> bool:
        return self.ENV == "development"


# ✅ 설정 객체 생성
settings = Settings()
