"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 핸들러, 라우터 등록.

FastAPI application entry point — Middleware, exception handler and
router registration. Errors are rendered as ``{"success": false, "error": ...}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from app.config import settings
from app.middleware.admin_session import AdminSessionMiddleware
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.services.storage_service import UPLOADS_DIR, storage_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# 관리자 세션 게이트 — Cookie check on /api/v1/admin/* (innermost)
app.add_middleware(AdminSessionMiddleware)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# 세션 게이트보다 바깥에 등록하여 401 응답도 캡처 (Wraps the gate so its 401s are logged)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — credentials(쿠키) 허용을 위해 origin 명시
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# 예외 핸들러 — Uniform error envelope
# ---------------------------------------------------------------------------
def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(exc.status_code, message, getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg')}" if location else str(first.get("msg", "Invalid request"))
    return error_response(422, message)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# 로컬 스토리지 모드 — Serve uploaded images when S3 is not configured
if storage_service.is_local:
    UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(UPLOADS_DIR)), name="uploads")


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from app.api.admin import admin_router  # noqa: E402
from app.api.store import store_router  # noqa: E402

app.include_router(admin_router, prefix="/api/v1/admin")
app.include_router(store_router, prefix="/api/v1/store")
