# backend/complaint_upload/core/config.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from complaint_upload.core.exceptions import StorageConfigError

# SigV4 presigned URLs cannot outlive one week.
MAX_PRESIGN_TTL_SEC = 604800


class Settings(BaseSettings):
    """
    Environment-driven settings.

    Storage settings are OPTIONAL at load time so the app boots in local dev / CI.
    They are checked by validate_storage_or_raise() right before a URL is signed.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
        case_sensitive=False,
    )

    # Environment
    env: str = Field(default="dev", alias="ENV")
    port: int = Field(default=8000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Credentials (unset = boto3 default credential chain)
    aws_access_key_id: Optional[str] = Field(default=None, alias="AWS_ACCESS_KEY_ID")
    aws_secret_access_key: Optional[str] = Field(default=None, alias="AWS_SECRET_ACCESS_KEY")
    aws_region: str = Field(default="ap-south-1", alias="AWS_REGION")

    # Bucket
    s3_bucket: Optional[str] = Field(default=None, alias="S3_BUCKET")
    s3_endpoint_url: Optional[str] = Field(default=None, alias="S3_ENDPOINT_URL")  # S3-compatible stores
    s3_addressing_style: Literal["auto", "path", "virtual"] = Field(default="auto", alias="S3_ADDRESSING_STYLE")

    # Upload URL
    upload_url_ttl_sec: int = Field(default=60, alias="UPLOAD_URL_TTL_SEC")
    upload_content_type: str = Field(default="text/csv", alias="UPLOAD_CONTENT_TYPE")
    upload_key_prefix: str = Field(default="complaints", alias="UPLOAD_KEY_PREFIX")

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")  # comma-separated or "*"

    @field_validator("upload_key_prefix")
    @classmethod
    def _normalize_key_prefix(cls, v: str) -> str:
        # The prefix becomes the start of the object key, which has no leading slash.
        return v.strip().lstrip("/")

    @property
    def is_dev(self) -> bool:
        return (self.env or "dev").strip().lower() == "dev"

    @property
    def cors_origins_list(self) -> list[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def validate_storage_or_raise(self) -> None:
        """
        Call this ONLY when a URL is about to be signed.
        """
        missing = []
        if not self.s3_bucket:
            missing.append("S3_BUCKET")

        # One half of a key pair is always a mistake; none at all means the SDK chain.
        if bool(self.aws_access_key_id) != bool(self.aws_secret_access_key):
            missing.append(
                "AWS_SECRET_ACCESS_KEY" if self.aws_access_key_id else "AWS_ACCESS_KEY_ID"
            )

        if missing:
            raise StorageConfigError(
                "Storage is not configured, required env vars are missing: " + ", ".join(missing),
                missing=missing,
            )

        if not 0 < self.upload_url_ttl_sec <= MAX_PRESIGN_TTL_SEC:
            raise StorageConfigError(
                f"UPLOAD_URL_TTL_SEC must be between 1 and {MAX_PRESIGN_TTL_SEC}, got {self.upload_url_ttl_sec}",
                missing=[],
            )


settings = Settings()
