from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Service
    service_name: str = "api"
    environment: str = "dev"
    git_commit: str = "unknown"  # Deployment identifier, reported as version

    # Server
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000

    # CORS
    cors_origins: list[str] = ["*"]

    @property
    def version(self) -> str:
        return self.git_commit

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
