#!/usr/bin/env python3
"""
매물 시드 데이터 입력 스크립트

id 순서대로 증가하는 매물 데이터를 넣습니다. 테이블이 먼저 생성되어 있어야 합니다.

사용법:
    python backend/scripts/seed_properties.py [개수]
"""
import asyncio
import sys
from pathlib import Path

# backend 디렉토리를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.db.seed import DEFAULT_SEED_COUNT, seed_properties
from app.db.session import AsyncSessionLocal, engine


async def main(count: int) -> None:
    try:
        async with AsyncSessionLocal() as db:
            inserted = await seed_properties(db, count)
        print(f" 매물 {inserted}건 입력 완료")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    count = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SEED_COUNT
    asyncio.run(main(count))
