import os
from functools import lru_cache

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class Settings:
    # General settings
    debug: str = os.getenv("DEBUG", "False")
    docs_url: str = "/docs"
    root_path: str = ""
    openapi_url: str = "/openapi.json"
    redoc_url: str = "/redoc"
    title: str = "The Gaadi Backend"
    version: str = "0.1.0"

    # Custom settings
    disable_docs: bool = os.getenv("DISABLE_DOCS", "false").lower() == "true"

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Database
    DATABASE_URL = os.getenv("DATABASE_URL")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_NAME = os.getenv("DB_NAME", "thegaadi")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "12345678")
    DB_PORT = int(os.getenv("DB_PORT", "5432"))

    @property
    def database_url(self) -> str | URL:
        """
        The URL the engine connects to.

        An explicit `DATABASE_URL` wins; otherwise a PostgreSQL URL is assembled from the `DB_*` variables.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @property
    def fastapi_kwargs(self) -> dict[str, bool | str | None]:
        """
        This returns a dictionary of the most commonly used keyword arguments when initializing a FastAPI instance

        If `self.disable_docs` is True, the various docs-related arguments are disabled, so the OpenAPI schema is not
        published.
        """
        fastapi_kwargs: dict[str, bool | str | None] = {
            "debug": self.debug.lower() == "true",
            "docs_url": self.docs_url,
            "root_path": self.root_path,
            "openapi_url": self.openapi_url,
            "redoc_url": self.redoc_url,
            "title": self.title,
            "version": self.version,
        }
        if self.disable_docs:
            fastapi_kwargs.update({"docs_url": None, "openapi_url": None, "redoc_url": None})
        return fastapi_kwargs


@lru_cache
def get_api_settings() -> Settings:
    """
    This function returns a cached instance of the Settings object.

    Caching is used to prevent re-reading the environment every time the API settings are used in an endpoint.

    If you want to change an environment variable and reset the cache (e.g., during testing), this can be done
    using the `lru_cache` instance method `get_api_settings.cache_clear()`.
    """
    return Settings()


settings = get_api_settings()
