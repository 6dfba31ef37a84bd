from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "receiptly"
    db_username: str = "receiptly"
    db_password: str = "secret"

    scratch_dir_name: str = "receiptly-uploads"
    max_upload_size_bytes: int = 10 * 1024 * 1024
    max_candidate_lines: int = 50

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    tesseract_cmd: str | None = None

    categorization_provider: str = "openai"
    categorization_temperature: float = 0.1
    categorization_max_tokens: int = 800

    categorization_openai_api_key: str = ""
    categorization_openai_model_name: str = "gpt-3.5-turbo"
    categorization_openai_timeout_seconds: int = 30

    categorization_openai_compatible_base_url: str | None = None
    categorization_openai_compatible_api_key: str = ""
    categorization_openai_compatible_model_name: str = ""
    categorization_openai_compatible_timeout_seconds: int = 30

    categorization_openrouter_api_key: str = ""
    categorization_openrouter_model_name: str = ""
    categorization_openrouter_timeout_seconds: int = 30

    categorization_groq_api_key: str = ""
    categorization_groq_model_name: str = ""
    categorization_groq_timeout_seconds: int = 30

    categorization_together_api_key: str = ""
    categorization_together_model_name: str = ""
    categorization_together_timeout_seconds: int = 30

    categorization_deepseek_api_key: str = ""
    categorization_deepseek_model_name: str = ""
    categorization_deepseek_timeout_seconds: int = 30

    categorization_ollama_api_key: str = "ollama"
    categorization_ollama_model_name: str = ""
    categorization_ollama_timeout_seconds: int = 60
