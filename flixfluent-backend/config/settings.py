"""
FlixFluent Backend 설정 모듈
환경 변수 및 애플리케이션 상수를 관리합니다.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    애플리케이션 설정 클래스
    환경 변수에서 값을 로드하며, 기본값을 제공합니다.
    """

    # 애플리케이션 기본 설정
    APP_NAME: str = "FlixFluent Backend"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # 서버 설정
    HOST: str = "127.0.0.1"
    PORT: int = 3001
    CORS_ORIGINS: list[str] = ["*"]

    # YouTube timedtext (비공식 엔드포인트)
    TIMEDTEXT_URL: str = "https://www.youtube.com/api/timedtext"
    TIMEDTEXT_TIMEOUT: float = 10.0  # 초
    TIMEDTEXT_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # 이중 자막 언어 쌍
    PRIMARY_LANGUAGE: str = "en"
    SECONDARY_LANGUAGE: str = "ko"

    # LLM 설정
    OLLAMA_HOST: str = "http://localhost:11434"
    LLM_MODEL: str = "llama3.1:8b"
    LLM_TIMEOUT: float = 60.0  # 초
    LLM_TEMPERATURE: float = 0.3

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다.
    lru_cache를 사용하여 싱글톤 패턴을 구현합니다.
    """
    return Settings()
