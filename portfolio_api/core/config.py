# === portfolio_api/core/config.py ===
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

ASYNC_POSTGRES_SCHEME = "postgresql+asyncpg://"


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./portfolio.db"
    DATABASE_ECHO: bool = False
    API_PREFIX: str = ""
    SEED_ON_STARTUP: bool = True
    ENABLE_DOCS: bool = False
    CORS_ORIGINS: List[str] = ["*"]
    ALLOWED_HOSTS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    SLOW_REQUEST_SECONDS: float = 2.0
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def database_url(self) -> str:
        """DATABASE_URL rewritten for the async postgres driver.

        Hosted postgres providers hand out ``postgres://`` or ``postgresql://``
        URLs with a libpq style ``sslmode`` query argument; asyncpg wants its
        own scheme and an ``ssl`` argument instead.
        """
        url = self.DATABASE_URL
        for scheme in ("postgres://", "postgresql://"):
            if url.startswith(scheme):
                url = ASYNC_POSTGRES_SCHEME + url[len(scheme):]
                break
        if url.startswith(ASYNC_POSTGRES_SCHEME):
            url = url.replace("sslmode=", "ssl=")
        return url


settings = Settings()
