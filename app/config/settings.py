from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    accepted_media_type: str = "application/pdf"

    extraction_provider: str = "gemini"
    extraction_temperature: float = 0.0

    extraction_gemini_api_key: str = ""
    extraction_gemini_model_name: str = "gemini-2.5-flash"
    extraction_gemini_timeout_seconds: int = 120

    extraction_openai_api_key: str = ""
    extraction_openai_model_name: str = "gpt-4o-mini"
    extraction_openai_timeout_seconds: int = 120

    extraction_openai_compatible_api_key: str = ""
    extraction_openai_compatible_model_name: str = ""
    extraction_openai_compatible_base_url: str = ""
    extraction_openai_compatible_timeout_seconds: int = 120

    google_client_secrets_file: str = "credentials.json"
    google_token_file: str = ""
    google_oauth_port: int = 0

    drive_folder_id: str = ""
    drive_folder_name: str = ""
    sheet_id: str = ""
    sheet_name: str = ""
