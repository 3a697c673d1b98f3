"""
로깅 설정

루트 로거에 콘솔(stdout) 핸들러와 선택적인 파일 핸들러를 등록합니다.
여러 번 호출해도 핸들러가 중복 등록되지 않습니다.
"""
import logging
import sys
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    루트 로거 설정

    Args:
        level: 로그 레벨 (기본값: settings.LOG_LEVEL, DEBUG 모드면 DEBUG)
        log_file: 파일 핸들러 경로 (기본값: settings.LOG_FILE)

    Returns:
        설정된 루트 로거
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    if log_file is None:
        log_file = settings.LOG_FILE

    root_logger = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 콘솔 핸들러 (Docker 환경에서 로그 확인용)
    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root_logger.handlers
    )
    if not has_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # 파일 핸들러
    if log_file and not any(isinstance(h, logging.FileHandler) for h in root_logger.handlers):
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level.upper())

    # SQLAlchemy 엔진 로거는 WARNING 이상만 (INFO 레벨의 SQL 쿼리 로그 방지)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return root_logger
