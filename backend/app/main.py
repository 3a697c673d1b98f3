# ============================================================
#  FastAPI 애플리케이션 진입점
# ============================================================
"""
FastAPI 애플리케이션 메인 파일

이 파일이 FastAPI 앱의 시작점입니다.

구성:
- GZip 압축 (응답 크기 감소)
- CORS
- 느린 요청 로깅 (성능 모니터링)
- Prometheus 메트릭 (/metrics)
- 전역 예외 핸들러 (검증 실패 400, 그 외 500)

실행:
    uvicorn app.main:app --host 0.0.0.0 --port 8000
"""
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.db.session import engine

perf_logger = logging.getLogger("performance")
logger = logging.getLogger(__name__)


# FastAPI 앱 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="부동산 매물 CRUD 서비스 API",
    docs_url="/docs",
    redoc_url="/redoc",
    default_response_class=ORJSONResponse,  # orjson 사용 (JSON 직렬화 속도 개선)
)

# ============================================================
# GZip 압축 미들웨어 (500 bytes 이상 응답)
# ============================================================
app.add_middleware(GZipMiddleware, minimum_size=500)

# CORS 미들웨어 설정
if settings.ALLOWED_ORIGINS:
    origins = [origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",")]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    # 개발 환경: 모든 출처 허용 (allow_origins=["*"]일 때는 credentials 불가)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )


SLOW_REQUEST_THRESHOLD = 5.0  # 느린 요청 임계값 (초)


class PerformanceMiddleware(BaseHTTPMiddleware):
    """
    성능 모니터링 미들웨어

    - 요청 처리 시간 측정 (X-Response-Time 헤더)
    - 느린 요청 로깅 (> 5초)
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        path = request.url.path

        if path in ["/metrics", "/health", "/docs", "/redoc", "/openapi.json"]:
            return await call_next(request)

        response = await call_next(request)
        duration = time.time() - start_time

        if duration > SLOW_REQUEST_THRESHOLD:
            perf_logger.warning(f"느린 요청: {request.method} {path} - {duration:.2f}초")

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response


app.add_middleware(PerformanceMiddleware)

# ============================================================
#  Prometheus 메트릭 수집 설정
# ============================================================
instrumentator = Instrumentator(
    excluded_handlers=[
        "/metrics",
        "/health",
        "/docs",
        "/redoc",
    ],
)
instrumentator.instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

# ============================================================
# 전역 예외 핸들러 (검증 실패 → 400, 그 외 → 500)
# ============================================================
register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    """애플리케이션 시작 시 실행되는 이벤트"""
    setup_logging()
    logger.info(f"{settings.PROJECT_NAME} v{settings.VERSION} 시작")


@app.on_event("shutdown")
async def shutdown_event():
    """애플리케이션 종료 시 DB 연결 풀 정리"""
    await engine.dispose()
    logger.info("DB 연결 풀 종료 완료")


# ============================================================
# 라우터 등록
# ============================================================
app.include_router(api_router, prefix=settings.API_V1_STR)


# ============================================================
# 기본 엔드포인트
# ============================================================

@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "부동산 매물 CRUD 서비스 API",
        "version": settings.VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트"""
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME
    }
