# photoshare/config.py
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    """환경변수 설정"""

    # 기본 설정
    app_name: str = "photoshare"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./photoshare.db"

    # 로깅
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True

    @field_validator('log_level')
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f'알 수 없는 로그 레벨입니다: {v}')
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False

# 싱글톤 인스턴스
settings = Settings()
