from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    api_prefix: str = ""

    pdf_engine: str = "pdfplumber"
    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    max_upload_bytes: int = 10 * 1024 * 1024
    extraction_max_workers: int = 4
    extraction_timeout_seconds: float = 60.0

    document_id_start: int = 1
