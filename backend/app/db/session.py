"""
데이터베이스 세션 관리

비동기 SQLAlchemy 세션을 생성하고 관리합니다.

- 기본 드라이버는 asyncpg (PostgreSQL)
- SQLite(aiosqlite)는 테스트/로컬 개발용으로 연결 풀 옵션 없이 생성
- pool_pre_ping으로 연결 상태 확인
- pool_recycle로 stale 연결 방지
"""
import logging
from typing import Any, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings

logger = logging.getLogger(__name__)

POOL_TIMEOUT = 20           # 연결 대기 타임아웃 (초)
POOL_RECYCLE = 900          # 연결 재활용 (15분)
STATEMENT_TIMEOUT = 30000   # 쿼리 타임아웃 30초
COMMAND_TIMEOUT = 30        # asyncpg 명령 타임아웃 30초


def engine_options(database_url: str) -> Dict[str, Any]:
    """드라이버별 엔진 옵션 구성"""
    url = make_url(database_url)
    options: Dict[str, Any] = {"echo": settings.DEBUG}

    if url.get_backend_name() == "sqlite":
        return options

    options.update(
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=POOL_TIMEOUT,
        pool_recycle=POOL_RECYCLE,
        pool_pre_ping=True,
    )

    if url.get_driver_name() == "asyncpg":
        options["connect_args"] = {
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT),
            },
            "command_timeout": COMMAND_TIMEOUT,
        }

    return options


def build_engine(database_url: str) -> AsyncEngine:
    """비동기 엔진 생성"""
    return create_async_engine(database_url, **engine_options(database_url))


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """비동기 세션 팩토리 생성"""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


engine = build_engine(settings.DATABASE_URL)

logger.info(f"DB 엔진 생성 완료 - backend: {engine.url.get_backend_name()}")

AsyncSessionLocal = build_session_factory(engine)
