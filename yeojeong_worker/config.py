from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Worker settings loaded from environment."""

    # Service
    service_name: str = "worker"
    environment: str = "dev"
    git_commit: str = "unknown"  # Deployment identifier, reported as version

    # Task loop (seconds)
    task_duration_seconds: float = 5  # Simulated work per task
    task_interval_seconds: float = 10  # Pause between tasks
    error_retry_seconds: float = 30  # Pause after a failed iteration

    @property
    def version(self) -> str:
        return self.git_commit

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
