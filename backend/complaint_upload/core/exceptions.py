"""Custom exceptions for the upload URL service."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class UploadServiceError(Exception):
    """Base exception for all upload-URL errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class StorageConfigError(UploadServiceError):
    """Raised when required storage settings are missing or invalid."""

    def __init__(self, message: str, missing: List[str]) -> None:
        super().__init__(
            message=message,
            error_code="STORAGE_CONFIG_ERROR",
            details={"missing": missing},
        )


class PresignError(UploadServiceError):
    """Raised when the storage SDK fails to sign a URL."""

    def __init__(self, bucket: Optional[str], key: str, message: str) -> None:
        super().__init__(
            message=f"Could not presign '{key}' in bucket '{bucket}': {message}",
            error_code="PRESIGN_ERROR",
            details={"bucket": bucket, "key": key},
        )
