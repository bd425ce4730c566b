from __future__ import annotations

import time

from complaint_upload.core.config import Settings
from complaint_upload.models.upload import UploadUrlResponse
from complaint_upload.services.storage_s3 import presign_put


def _now_ms() -> int:
    return int(time.time() * 1000)


def build_upload_key(prefix: str = "complaints", now_ms: int | None = None) -> str:
    """
    Object key for one upload: <prefix>-<unix-millis>.csv

    Two calls in the same millisecond produce the same key.
    """
    stamp = _now_ms() if now_ms is None else now_ms
    return f"{prefix}-{stamp}.csv"


def issue_upload_url(settings: Settings, client=None) -> UploadUrlResponse:
    file_name = build_upload_key(settings.upload_key_prefix)
    url = presign_put(settings, file_name, client=client)
    return UploadUrlResponse(uploadUrl=url, fileName=file_name)
