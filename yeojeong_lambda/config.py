from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Lambda settings loaded from environment."""

    service_name: str = "hello-world-lambda"
    environment: str = "dev"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
