#!/usr/bin/env python3
"""
데이터베이스 테이블 생성 스크립트

SQLAlchemy 모델을 기반으로 데이터베이스 테이블을 생성합니다.
(마이그레이션 도구를 쓰지 않고 create_all만 수행)

사용법:
    python backend/scripts/create_tables.py
"""
import asyncio
import sys
from pathlib import Path

# backend 디렉토리를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.db.base import Base
from app.db.session import build_engine

# 모든 모델을 import하여 SQLAlchemy가 인식하도록 함
from app.models import Property  # noqa: F401


async def create_tables():
    """데이터베이스 테이블 생성"""
    print("=" * 60)
    print(" 데이터베이스 테이블 생성 시작...")
    print(f" DB URL: {settings.DATABASE_URL.split('@')[-1] if '@' in settings.DATABASE_URL else settings.DATABASE_URL}")
    print("=" * 60)

    engine = build_engine(settings.DATABASE_URL)

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        print(" 테이블 생성 완료!")
        for table in Base.metadata.sorted_tables:
            print(f"   - {table.name}")
        print("=" * 60)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(create_tables())
