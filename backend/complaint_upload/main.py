from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from complaint_upload.api.middleware import LoggingMiddleware
from complaint_upload.api.uploads import create_upload_router
from complaint_upload.core.config import Settings, settings as default_settings
from complaint_upload.core.exceptions import UploadServiceError
from complaint_upload.core.logging import configure_logging, get_logger

logger = get_logger(__name__)

UPLOAD_URL_ERROR = "Could not generate URL"


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or default_settings
    configure_logging(app_settings.log_level)

    app = FastAPI(title="Complaint Upload API", version="1.0.0")

    app.add_middleware(LoggingMiddleware)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(create_upload_router(app_settings), tags=["uploads"])

    @app.exception_handler(UploadServiceError)
    async def upload_service_error(request: Request, exc: UploadServiceError) -> JSONResponse:
        # Callers get one opaque message whatever the cause.
        logger.error("S3 pre-sign URL error: %s", exc.message, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": UPLOAD_URL_ERROR})

    @app.get("/health")
    def health():
        return {"ok": True, "service": "complaint-upload"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "complaint_upload.main:app",
        host="0.0.0.0",
        port=default_settings.port,
        reload=default_settings.is_dev,
    )
