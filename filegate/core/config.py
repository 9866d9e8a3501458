"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MinIO / S3
    S3_ENDPOINT: str = "http://localhost:9000"
    S3_ACCESS_KEY: str = "minioadmin"
    S3_SECRET_KEY: str = "minioadmin"
    S3_BUCKET: str = "uploads"
    S3_ENSURE_BUCKET: bool = True

    # Base for listing URLs; empty means "<S3_ENDPOINT>/<S3_BUCKET>"
    PUBLIC_URL_PREFIX: str = ""

    # Application
    APP_NAME: str = "File Upload Gateway"
    MAX_FILE_SIZE_MB: int = 25

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    def public_url_prefix(self) -> str:
        prefix = self.PUBLIC_URL_PREFIX or f"{self.S3_ENDPOINT.rstrip('/')}/{self.S3_BUCKET}"
        return prefix.rstrip("/")


# Global settings instance
settings = Settings()
