from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


# ──────────────────────────────────────────────
# Settings (from environment variables / .env)
# ──────────────────────────────────────────────
class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000

    # S3 settings
    aws_region: str = "us-east-2"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    s3_bucket: str = "juanitocomponent"

    # Upload settings
    max_upload_size: int = 50 * 1024 * 1024  # 50 MB

    # Service description (GET /metadata)
    service_name: str = "Juanito Component File Server"
    custom_domain: str = "pdf.juanitocomponent.com"
    supported_file_types: str = "PDF,MP4"

    # CORS settings
    cors_origins: str = "*"
    cors_allow_credentials: bool = False
    cors_allow_methods: str = "*"
    cors_allow_headers: str = "*"

    # Application settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def cors_methods_list(self) -> list[str]:
        """Parse CORS methods from comma-separated string."""
        if self.cors_allow_methods == "*":
            return ["*"]
        return [method.strip() for method in self.cors_allow_methods.split(",")]

    @property
    def cors_headers_list(self) -> list[str]:
        """Parse CORS headers from comma-separated string."""
        if self.cors_allow_headers == "*":
            return ["*"]
        return [header.strip() for header in self.cors_allow_headers.split(",")]

    @property
    def supported_file_types_list(self) -> list[str]:
        """Parse the advertised file type categories from comma-separated string."""
        return [kind.strip() for kind in self.supported_file_types.split(",") if kind.strip()]

    @property
    def max_upload_size_label(self) -> str:
        """Human-readable size ceiling, e.g. ``50MB``."""
        return f"{self.max_upload_size // (1024 * 1024)}MB"


# Global settings instance
settings = Settings()

# ──────────────────────────────────────────────
# Upload form
# ──────────────────────────────────────────────
UPLOAD_FIELD = "file"

# ──────────────────────────────────────────────
# Accepted media types (declared Content-Type of the file part)
# ──────────────────────────────────────────────
ALLOWED_MEDIA_TYPES: frozenset[str] = frozenset({
    # Documents
    "application/pdf",
    "application/msword",  # .doc
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # .docx
    "application/vnd.ms-excel",  # .xls
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",  # .xlsx
    "application/vnd.ms-powerpoint",  # .ppt
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",  # .pptx
    "text/plain",  # .txt
    # Images
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    # Video
    "video/mp4",
    "video/quicktime",
})
