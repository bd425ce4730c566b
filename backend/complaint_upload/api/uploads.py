from __future__ import annotations

from fastapi import APIRouter

from complaint_upload.core.config import Settings
from complaint_upload.models.upload import ErrorResponse, UploadUrlResponse
from complaint_upload.services.signer import issue_upload_url


def create_upload_router(settings: Settings) -> APIRouter:
    """
    One handler per configured bucket. Bucket, prefix, TTL and content type
    all come from `settings`.
    """
    router = APIRouter()

    @router.get(
        "/generate-upload-url",
        response_model=UploadUrlResponse,
        responses={500: {"model": ErrorResponse}},
    )
    def generate_upload_url():
        """
        Returns a short-lived pre-signed PUT URL and the key it uploads to.
        Signing failures are turned into a fixed 500 by the app's error handler.
        """
        return issue_upload_url(settings)

    return router
