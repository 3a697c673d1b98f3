"""
부동산 매물 관련 비즈니스 로직

담당 기능:
- 매물 생성
- 매물 단건 조회
- 가격 범위 필터 + 페이지네이션 목록 조회
- 매물 부분 수정
- 매물 삭제

대상이 없는 경우는 에러가 아니라 None을 반환합니다.
404 응답 변환은 엔드포인트에서 처리합니다.
"""
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.property import CRUDProperty, property_crud
from app.models.property import Property
from app.schemas.property import PriceRange, PropertyCreate, PropertyUpdate

logger = logging.getLogger(__name__)


class PropertyService:
    """
    부동산 매물 비즈니스 로직

    각 메서드는 요청마다 전달받은 DB 세션만 사용하며 내부 상태를 갖지 않습니다.
    """

    def __init__(self, crud: CRUDProperty = property_crud):
        self.crud = crud

    async def create_property(
        self,
        db: AsyncSession,
        *,
        obj_in: PropertyCreate
    ) -> Property:
        """
        매물 생성

        Args:
            db: 데이터베이스 세션
            obj_in: 생성할 매물 정보 (허용된 5개 필드만 저장)

        Returns:
            생성된 Property 객체 (id 포함)
        """
        created = await self.crud.create(db, obj_in=obj_in)
        logger.info(f"매물 생성 완료 - id: {created.id}")
        return created

    async def find_property_by_id(
        self,
        db: AsyncSession,
        *,
        property_id: int
    ) -> Optional[Property]:
        """
        매물 단건 조회

        Returns:
            Property 객체 또는 None
        """
        return await self.crud.get(db, id=property_id)

    async def find_properties(
        self,
        db: AsyncSession,
        *,
        page: int,
        limit: int,
        price: Optional[PriceRange] = None
    ) -> List[Property]:
        """
        매물 목록 조회

        Args:
            db: 데이터베이스 세션
            page: 페이지 번호 (1부터 시작)
            limit: 페이지당 최대 개수
            price: 가격 범위 (양 끝 포함)

        Returns:
            id 오름차순 Property 목록 (범위를 벗어난 페이지면 빈 목록)
        """
        skip = (page - 1) * limit
        price = price or PriceRange()

        return await self.crud.get_multi_by_price(
            db,
            skip=skip,
            limit=limit,
            min_price=price.min,
            max_price=price.max
        )

    async def update_property(
        self,
        db: AsyncSession,
        *,
        property_id: int,
        obj_in: PropertyUpdate
    ) -> Optional[Property]:
        """
        매물 부분 수정

        값이 있고 null이 아닌 필드만 덮어쓰고 나머지는 기존 값을 유지합니다.

        Returns:
            수정된 Property 객체 또는 None (대상 없음)
        """
        existing = await self.crud.get(db, id=property_id)
        if existing is None:
            logger.info(f"수정 대상 매물 없음 - id: {property_id}")
            return None

        updated = await self.crud.update(db, db_obj=existing, obj_in=obj_in)
        logger.info(f"매물 수정 완료 - id: {property_id}")
        return updated

    async def delete_property_by_id(
        self,
        db: AsyncSession,
        *,
        property_id: int
    ) -> Optional[Property]:
        """
        매물 삭제

        Returns:
            삭제 직전의 Property 객체 또는 None (대상 없음)
        """
        deleted = await self.crud.remove(db, id=property_id)
        if deleted is None:
            logger.info(f"삭제 대상 매물 없음 - id: {property_id}")
            return None

        logger.info(f"매물 삭제 완료 - id: {property_id}")
        return deleted


# 싱글톤 인스턴스 생성
# 다른 곳에서 from app.services.property import property_service 로 사용
property_service = PropertyService()
