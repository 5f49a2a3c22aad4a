from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi import FastAPI, Request

from core.exceptions import QueryError, StoreUnavailable
from core.logging import get_logger
from core.settings import settings
from schemas.common import error_response, ApiStatus

log = get_logger("middleware")


def setup_middleware(app: FastAPI):
    """Setup CORS and global exception handlers"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("request_validation_failed", url=str(request.url), errors=exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response(
                message="Request validation failed",
                status=ApiStatus.VALIDATION_ERROR,
                error_code="VALIDATION_ERROR",
                data={"errors": exc.errors()}
            )
        )

    @app.exception_handler(QueryError)
    async def query_exception_handler(request: Request, exc: QueryError):
        if isinstance(exc, StoreUnavailable):
            log.error("store_unavailable", url=str(request.url), error=exc.message)
        else:
            log.info(
                "query_rejected",
                url=str(request.url),
                error_code=exc.error_code,
                query=exc.query,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(
                message=exc.message,
                status=exc.api_status,
                error_code=exc.error_code,
            )
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
