"""
CRUD 기본 클래스

모든 CRUD 클래스가 상속받는 제네릭 베이스입니다.
모델별 CRUD 클래스에서는 필요한 메서드만 오버라이드합니다.
"""
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    공통 CRUD 작업 (조회, 수정, 삭제)

    생성은 모델마다 허용 필드가 달라서 각 CRUD 클래스에서 구현합니다.

    Args:
        model: SQLAlchemy 모델 클래스
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """기본키로 단건 조회 (없으면 None)"""
        return await db.get(self.model, id)

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """전달된 필드만 수정"""
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        기본키로 하드 삭제

        Returns:
            삭제 직전의 객체 또는 None (대상 없음)
        """
        db_obj = await self.get(db, id)
        if db_obj is None:
            return None

        await db.delete(db_obj)
        await db.commit()
        return db_obj
