"""
의존성 주입 (Dependency Injection)

FastAPI의 Depends를 사용하여 요청마다 데이터베이스 세션을 관리합니다.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import AsyncSessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    데이터베이스 세션 의존성

    각 요청마다 DB 세션을 생성하고, 요청이 끝나면 자동으로 닫습니다.
    에러가 나면 롤백 후 그대로 다시 발생시킵니다. (전역 핸들러에서 500 처리)

    Yields:
        AsyncSession: 데이터베이스 세션
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
