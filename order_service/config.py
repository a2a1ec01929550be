import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # Database
    POSTGRES_CONNECTION_STRING: str = os.getenv("POSTGRES_CONNECTION_STRING", "sqlite+aiosqlite:///./orders.db")

    # Product service
    API_TOKEN: str = os.getenv("API_TOKEN", "")
    PRODUCT_SERVICE_URL: str = os.getenv("PRODUCT_SERVICE_URL", "http://localhost:19093")
    PRODUCT_SERVICE_TIMEOUT: float = float(os.getenv("PRODUCT_SERVICE_TIMEOUT", "10.0"))

    # Cache
    CACHE_BACKEND: str = os.getenv("CACHE_BACKEND", "redis")
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    ORDER_CACHE_NAMESPACE: str = os.getenv("ORDER_CACHE_NAMESPACE", "orders")
    ORDER_CACHE_TTL: int = int(os.getenv("ORDER_CACHE_TTL", "0"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for the application"""
        return (
            self.POSTGRES_CONNECTION_STRING
            .replace("postgres://", "postgresql+asyncpg://")
            .replace("postgresql://", "postgresql+asyncpg://")
        )

    @property
    def SYNC_DATABASE_URL(self) -> str:
        """Sync URL for Alembic"""
        return (
            self.POSTGRES_CONNECTION_STRING
            .replace("postgres://", "postgresql://")
            .replace("postgresql+asyncpg://", "postgresql://")
            .replace("sqlite+aiosqlite://", "sqlite://")
        )


settings = Settings()
