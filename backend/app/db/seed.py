"""
매물 시드 데이터

로컬 개발/테스트용으로 id 순서대로 증가하는 매물 데이터를 생성합니다.
가격은 id에 비례해서 증가하므로 가격 범위 조회 결과를 예측할 수 있습니다.
"""
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.property import Property

DEFAULT_SEED_COUNT = 126

BASE_PRICE = 100000
PRICE_STEP = 150000
PROPERTY_TYPES = ("Single Family", "Condominium", "Townhouse", None)
STREET_NAMES = ("Main St", "Oak Ave", "Maple Dr", "Cedar Ln", "Pine Rd", "Elm St")


def build_seed_properties(count: int = DEFAULT_SEED_COUNT) -> List[Property]:
    """
    시드 매물 객체 목록 생성 (DB 반영 전)

    n번째 매물의 가격은 BASE_PRICE + n * PRICE_STEP 입니다.
    """
    properties = []
    for n in range(1, count + 1):
        properties.append(
            Property(
                address=f"{100 + n} {STREET_NAMES[n % len(STREET_NAMES)]}",
                price=BASE_PRICE + n * PRICE_STEP,
                bedrooms=1 + n % 5,
                bathrooms=1 + n % 3,
                type=PROPERTY_TYPES[n % len(PROPERTY_TYPES)],
            )
        )
    return properties


async def seed_properties(db: AsyncSession, count: int = DEFAULT_SEED_COUNT) -> int:
    """
    시드 매물 저장

    순서대로 flush해서 id가 1부터 연속으로 부여되도록 합니다. (빈 테이블 기준)

    Returns:
        저장한 매물 수
    """
    for obj in build_seed_properties(count):
        db.add(obj)
        await db.flush()
    await db.commit()
    return count
