from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_NAME: str = "pageforge"
    DATABASE_USER: str = "pageforge"
    DATABASE_PASSWORD: str = "pageforge"
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432

    # Full SQLAlchemy URL, takes precedence over the DATABASE_* parts
    DATABASE_URL: str | None = None

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.DATABASE_USER}:"
            f"{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}:"
            f"{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    # Render cache: "memory" (per process) or "redis" (shared)
    RENDER_CACHE_BACKEND: str = "memory"
    RENDER_CACHE_TTL_SECONDS: int = 60
    REDIS_URL: str | None = None

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Sentry error tracking
    SENTRY_DSN: str | None = None
    SENTRY_ENVIRONMENT: str = "development"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8"
    }


settings = Settings()
