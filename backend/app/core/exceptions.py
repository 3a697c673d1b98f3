"""
전역 예외 핸들러

요청 처리 중 발생하는 에러를 두 종류로만 구분합니다.

1. 요청 검증 에러 (RequestValidationError) → 400
   - 필수 필드 누락, 타입 불일치, 알 수 없는 필드, 범위 초과, 잘못된 JSON
   - 필드별 에러 목록을 함께 반환합니다.
2. 그 외 모든 에러 → 500
   - 상세 내용은 서버 로그에만 남기고, 클라이언트에는 일반 메시지만 반환합니다.

등록 순서가 중요합니다. 검증 에러 핸들러가 먼저 등록되어야 합니다.
"""
import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred"


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> List[str]:
    """
    pydantic 에러 목록을 "<위치>: <메시지>" 문자열 목록으로 변환

    예: {"loc": ("body", "address"), "msg": "Field required"}
        → "body.address: Field required"
    """
    formatted = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        formatted.append(f"{location}: {message}" if location else message)
    return formatted


def summarize_validation_errors(validation_errors: Sequence[str]) -> str:
    """에러가 하나면 그 메시지를, 여러 개면 개수를 요약해서 반환"""
    if len(validation_errors) == 1:
        return validation_errors[0]
    return f"{len(validation_errors)} errors occurred"


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """요청 검증 실패 → 400"""
    validation_errors = format_validation_errors(exc.errors())
    message = summarize_validation_errors(validation_errors)

    # 사용자 입력 문제지만 추이 모니터링을 위해 WARNING으로 남김
    logger.warning(f"[{request.url.path}]: {message}")

    return JSONResponse(
        status_code=400,
        content={
            "message": message,
            "validationErrors": validation_errors,
        }
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 모든 예외 → 500 (내부 정보는 응답에 포함하지 않음)"""
    logger.error(
        f"[{request.method} {request.url.path}] 예외 발생: {type(exc).__name__}: {exc}",
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={"message": UNEXPECTED_ERROR_MESSAGE}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """FastAPI 앱에 예외 핸들러 등록"""
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
