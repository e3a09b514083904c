from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration sourced from environment variables."""

    service_title: str = "NewsCheck Credibility Service"
    version: str = "1.0.0"
    description: str = "Heuristic fake-news scoring API"
    cors_origins: str = "*"
    log_level: str = "INFO"
    log_file: str = "logs/newscheck.log"
    debug: bool = False
    max_content_length: int = 10000
    host: str = "0.0.0.0"
    port: int = 8001

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "case_sensitive": False,
    }

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(1)
def get_settings() -> Settings:
    return Settings()
