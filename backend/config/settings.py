from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List, Literal
from pathlib import Path

class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    # API Settings
    PROJECT_NAME: str = "Fitness Image Relay"
    VERSION: str = "1.0.0"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Provider selection: "openai" sends multipart, "fal" sends a base64 data URL
    IMAGE_PROVIDER: Literal["openai", "fal"] = "openai"

    # External APIs - OpenAI image edits
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_IMAGE_MODEL: Optional[str] = None
    OPENAI_TIMEOUT_SECONDS: float = 120.0

    # External APIs - Fal.ai
    FAL_KEY: Optional[str] = None
    FAL_BASE_URL: str = "https://fal.run"
    FAL_MODEL: str = "fal-ai/flux/dev/image-to-image"
    FAL_TIMEOUT_SECONDS: Optional[float] = None  # None = no client-side timeout

    # Outbound payloads, None = no cap
    MAX_OUTBOUND_BODY_BYTES: Optional[int] = None

    # Upload Limits
    UPLOAD_DIR: Path = Path("uploads")
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/jpg", "image/png"]
    ENFORCE_IMAGE_TYPES: Optional[bool] = None  # None = only for the fal provider

    # How the base64 provider labels the data URL
    MIME_DETECTION: Literal["extension", "content_type"] = "extension"

    # CORS Settings
    CORS_ALLOW_ORIGIN: str = "*"

    def enforces_image_types(self) -> bool:
        if self.ENFORCE_IMAGE_TYPES is not None:
            return self.ENFORCE_IMAGE_TYPES
        return self.IMAGE_PROVIDER == "fal"
