"""
부동산 매물 CRUD

데이터베이스 작업을 담당하는 레이어
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.property import Property
from app.schemas.property import PropertyCreate, PropertyUpdate

# 생성/수정 시 DB에 반영할 수 있는 필드 (그 외 입력은 절대 컬럼으로 흘려보내지 않음)
WRITABLE_FIELDS = ("address", "price", "bedrooms", "bathrooms", "type")


class CRUDProperty(CRUDBase[Property, PropertyCreate, PropertyUpdate]):
    """
    부동산 매물 CRUD 클래스

    Property 모델에 대한 데이터베이스 작업을 수행합니다.
    """

    async def get_multi_by_price(
        self,
        db: AsyncSession,
        *,
        skip: int = 0,
        limit: int = 100,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None
    ) -> List[Property]:
        """
        가격 범위로 매물 목록 조회

        Args:
            db: 데이터베이스 세션
            skip: 건너뛸 레코드 수
            limit: 가져올 레코드 수
            min_price: 최소 가격 (포함, 선택)
            max_price: 최대 가격 (포함, 선택)

        Returns:
            Property 객체 목록 (id 오름차순)
        """
        query = select(Property)

        if min_price is not None:
            query = query.where(Property.price >= min_price)
        if max_price is not None:
            query = query.where(Property.price <= max_price)

        result = await db.execute(
            query
            .order_by(Property.id)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: PropertyCreate) -> Property:
        """
        매물 생성

        Args:
            db: 데이터베이스 세션
            obj_in: 생성할 매물 정보

        Returns:
            생성된 Property 객체 (id 포함)
        """
        db_obj = Property(
            address=obj_in.address,
            price=obj_in.price,
            bedrooms=obj_in.bedrooms,
            bathrooms=obj_in.bathrooms,
            type=obj_in.type,
        )

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)

        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: Property,
        obj_in: PropertyUpdate
    ) -> Property:
        """
        매물 정보 수정

        값이 있고 null이 아닌 필드만 덮어씁니다.

        Args:
            db: 데이터베이스 세션
            db_obj: 수정할 Property 객체
            obj_in: 수정할 정보

        Returns:
            수정된 Property 객체
        """
        update_data = {
            field: value
            for field, value in obj_in.model_dump(exclude_none=True).items()
            if field in WRITABLE_FIELDS
        }

        return await super().update(db, db_obj=db_obj, obj_in=update_data)


# CRUD 인스턴스 생성
property_crud = CRUDProperty(Property)
