from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_file_encoding="utf-8")
    APP_NAME: str = "Magic Guard"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    MAX_UPLOAD_SIZE_MB: float = 10.0
    # Empty = accept any extension and only report mismatches
    ALLOWED_EXTENSIONS: set[str] = set()
    # When True, uploads whose content does not match their extension are rejected with 415
    REJECT_MISMATCHED_UPLOADS: bool = False
    # CORS: comma-separated list of allowed origins (e.g. "http://localhost:3000,https://app.example.com"). Empty = same-origin only.
    CORS_ORIGINS: str = ""


settings = Settings()
