from __future__ import annotations

from pydantic import BaseModel


class UploadUrlResponse(BaseModel):
    """
    Returned by GET /generate-upload-url.
    - uploadUrl: pre-signed PUT URL, short-lived
    - fileName: object key the client's upload lands under
    """
    uploadUrl: str
    fileName: str


class ErrorResponse(BaseModel):
    error: str
