# backend/complaint_upload/services/storage_s3.py
from __future__ import annotations

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from complaint_upload.core.config import Settings
from complaint_upload.core.exceptions import PresignError

logger = logging.getLogger(__name__)

# Browsers PUT straight to the bucket, so the bucket must allow cross-origin uploads.
BUCKET_CORS_RULES = [
    {
        "AllowedHeaders": ["*"],
        "AllowedMethods": ["PUT", "POST"],
        "AllowedOrigins": ["*"],
        "ExposeHeaders": [],
    }
]


def get_s3_client(settings: Settings):
    return boto3.client(
        "s3",
        endpoint_url=settings.s3_endpoint_url,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region_name=settings.aws_region,
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": settings.s3_addressing_style},
        ),
    )


def presign_put(settings: Settings, key: str, client=None) -> str:
    """
    Returns a pre-signed PUT URL for `key`, bound to the configured content type
    and valid for settings.upload_url_ttl_sec seconds.
    """
    settings.validate_storage_or_raise()

    logger.debug("Presign PUT: bucket='%s' key='%s'", settings.s3_bucket, key)

    # Client construction fails on a bad endpoint or region (ValueError).
    try:
        s3 = client or get_s3_client(settings)
        return s3.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": settings.s3_bucket,
                "Key": key,
                "ContentType": settings.upload_content_type,
            },
            ExpiresIn=settings.upload_url_ttl_sec,
        )
    except (ClientError, BotoCoreError, ValueError) as e:
        raise PresignError(settings.s3_bucket, key, str(e)) from e


def apply_bucket_cors(settings: Settings, client=None) -> None:
    """
    Writes BUCKET_CORS_RULES to the configured bucket (operator task, not request path).
    """
    settings.validate_storage_or_raise()

    s3 = client or get_s3_client(settings)
    logger.info("Applying CORS rules to bucket='%s'", settings.s3_bucket)
    s3.put_bucket_cors(
        Bucket=settings.s3_bucket,
        CORSConfiguration={"CORSRules": BUCKET_CORS_RULES},
    )
