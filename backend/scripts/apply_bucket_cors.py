#!/usr/bin/env python3
# backend/scripts/apply_bucket_cors.py
#
# Applies the CORS policy the upload bucket needs so browsers can PUT
# directly to pre-signed URLs.
#
# Usage (from backend/, with S3_BUCKET and credentials in env or .env):
#   python ./scripts/apply_bucket_cors.py
#   python ./scripts/apply_bucket_cors.py --bucket other-bucket --dry-run

from __future__ import annotations

import argparse
import json
import logging

from botocore.exceptions import BotoCoreError, ClientError

from complaint_upload.core.config import Settings
from complaint_upload.core.exceptions import StorageConfigError
from complaint_upload.core.logging import configure_logging
from complaint_upload.services.storage_s3 import BUCKET_CORS_RULES, apply_bucket_cors

logger = logging.getLogger("apply_bucket_cors")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Apply upload CORS rules to the S3 bucket.")
    parser.add_argument("--bucket", help="Override S3_BUCKET")
    parser.add_argument("--dry-run", action="store_true", help="Print the rules without applying them")
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level)
    if args.bucket:
        settings.s3_bucket = args.bucket

    if args.dry_run:
        print(json.dumps({"CORSRules": BUCKET_CORS_RULES}, indent=2))
        return 0

    try:
        apply_bucket_cors(settings)
    except StorageConfigError as e:
        logger.error("%s", e.message)
        return 2
    except (ClientError, BotoCoreError, ValueError):
        logger.exception("Could not apply CORS rules to bucket '%s'", settings.s3_bucket)
        return 2

    logger.info("CORS rules applied to bucket '%s'", settings.s3_bucket)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
