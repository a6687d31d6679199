from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # API
    API_HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    DATABASE_URL: str = "sqlite:///./team_registration.db"

    # Режим развертывания: всё, кроме "production", включает отладку
    ENVIRONMENT: str = "development"

    # CORS (через запятую, "*" - разрешить всё)
    CORS_ORIGINS: str = "*"

    @property
    def debug(self) -> bool:
        """Отладочный режим: SQL echo и уровень логирования DEBUG"""
        return self.ENVIRONMENT.strip().lower() != "production"

    @property
    def cors_origins(self) -> List[str]:
        """
        Возвращает список разрешенных источников.
        Поддерживает "*" и CSV: "http://a.com,http://b.com"
        """
        raw = self.CORS_ORIGINS
        if not raw or not raw.strip():
            return []
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
