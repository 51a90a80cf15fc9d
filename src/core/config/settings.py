from pydantic_settings import BaseSettings
from typing import Optional


class AppSettings(BaseSettings):
    APP_NAME: str = "Showcase"
    DEBUG: bool = True

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # ===== GitHub =====
    # 토큰이 없어도 동작은 동일, rate limit만 낮아짐
    GITHUB_TOKEN: Optional[str] = None

    # ===== Content =====
    CONTENT_DIR: str = "content/projects"
    BUILD_OUTPUT_PATH: str = "dist/projects.json"

    # Project tag enrichment
    PROJECT_TAG_LIMIT: int = 6
    PROJECT_TAG_ENRICH_THRESHOLD: int = 1

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = AppSettings()
