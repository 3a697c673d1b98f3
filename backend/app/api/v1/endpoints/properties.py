"""
부동산 매물 API 엔드포인트

담당 기능:
- 매물 목록 조회 (GET /properties?page&limit&minPrice&maxPrice)
- 매물 단건 조회 (GET /properties/{property_id})
- 매물 등록 (POST /properties)
- 매물 수정 (PUT /properties/{property_id})
- 매물 삭제 (DELETE /properties/{property_id})

요청 검증 실패는 여기서 처리하지 않고 전역 핸들러(app.core.exceptions)로 넘어가 400으로 응답합니다.
대상 매물이 없으면 404와 고정 메시지를 반환합니다.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import get_db
from app.schemas.property import (
    MAX_PAGE,
    MAX_PAGE_SIZE,
    MAX_PRICE_FILTER,
    MAX_PROPERTY_ID,
    MessageResponse,
    PriceRange,
    PropertyCreate,
    PropertyResponse,
    PropertyUpdate,
)
from app.services.property import property_service


router = APIRouter()

NOT_FOUND_MESSAGE = "Unable to find property for specified id"

NOT_FOUND_RESPONSE = {
    404: {
        "model": MessageResponse,
        "description": "매물을 찾을 수 없음",
        "content": {
            "application/json": {
                "example": {"message": NOT_FOUND_MESSAGE}
            }
        }
    }
}

VALIDATION_ERROR_RESPONSE = {
    400: {
        "description": "입력값 검증 실패",
        "content": {
            "application/json": {
                "example": {
                    "message": "query.page: Field required",
                    "validationErrors": ["query.page: Field required"]
                }
            }
        }
    }
}


def property_not_found() -> JSONResponse:
    """404 응답 생성"""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": NOT_FOUND_MESSAGE}
    )


@router.get(
    "",
    response_model=List[PropertyResponse],
    status_code=status.HTTP_200_OK,
    summary="매물 목록 조회",
    description="""
    가격 범위 필터와 페이지네이션으로 매물 목록을 조회합니다.

    ### 파라미터
    - `page`, `limit`: 필수, 1 이상의 정수 (`limit`은 최대 1000)
    - `minPrice`: 선택, 0 이상의 정수 (포함)
    - `maxPrice`: 선택, 정수 (포함)

    ### 정렬
    - id 오름차순으로 정렬됩니다.
    - 범위를 벗어난 페이지는 빈 배열을 반환합니다.
    """,
    responses=VALIDATION_ERROR_RESPONSE
)
@router.get("/", response_model=List[PropertyResponse], include_in_schema=False)
async def get_properties(
    page: int = Query(..., ge=1, le=MAX_PAGE, description="페이지 번호 (1부터 시작)"),
    limit: int = Query(..., ge=1, le=MAX_PAGE_SIZE, description="페이지당 최대 개수 (최대 1000)"),
    min_price: Optional[int] = Query(
        None, ge=0, le=MAX_PRICE_FILTER, alias="minPrice", description="최소 가격 (포함)"
    ),
    max_price: Optional[int] = Query(
        None, ge=-MAX_PRICE_FILTER, le=MAX_PRICE_FILTER, alias="maxPrice", description="최대 가격 (포함)"
    ),
    db: AsyncSession = Depends(get_db)
):
    """매물 목록 조회"""
    return await property_service.find_properties(
        db,
        page=page,
        limit=limit,
        price=PriceRange(min=min_price, max=max_price)
    )


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    status_code=status.HTTP_200_OK,
    summary="매물 단건 조회",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_ERROR_RESPONSE}
)
async def get_property(
    property_id: int = Path(..., ge=1, le=MAX_PROPERTY_ID, description="매물 ID"),
    db: AsyncSession = Depends(get_db)
):
    """매물 단건 조회"""
    found = await property_service.find_property_by_id(db, property_id=property_id)

    if found is None:
        return property_not_found()

    return found


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_200_OK,
    summary="매물 등록",
    description="""
    새로운 매물을 등록합니다.

    ### 검증 규칙
    - `address`, `price`, `bedrooms`, `bathrooms`, `type` 모두 필수입니다. (`type`은 null 허용)
    - 선언되지 않은 필드가 있으면 400을 반환합니다.
    - 타입 자동 변환을 하지 않습니다. (예: `"3"`은 숫자로 인정되지 않음)
    """,
    responses=VALIDATION_ERROR_RESPONSE
)
@router.post("/", response_model=PropertyResponse, include_in_schema=False)
async def create_property(
    obj_in: PropertyCreate,
    db: AsyncSession = Depends(get_db)
):
    """매물 등록"""
    return await property_service.create_property(db, obj_in=obj_in)


@router.put(
    "/{property_id}",
    response_model=PropertyResponse,
    status_code=status.HTTP_200_OK,
    summary="매물 수정",
    description="""
    매물 정보를 부분 수정합니다.

    - 전달된 필드 중 null이 아닌 값만 반영되고, 나머지는 기존 값을 유지합니다.
    - 본문이 없으면 아무 것도 바꾸지 않고 현재 매물을 반환합니다.
    - 없는 매물을 새로 만들지 않습니다. (404)
    """,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_ERROR_RESPONSE}
)
async def update_property(
    property_id: int = Path(..., ge=1, le=MAX_PROPERTY_ID, description="매물 ID"),
    obj_in: Optional[PropertyUpdate] = Body(None),
    db: AsyncSession = Depends(get_db)
):
    """매물 수정"""
    updated = await property_service.update_property(
        db,
        property_id=property_id,
        obj_in=obj_in or PropertyUpdate()
    )

    if updated is None:
        return property_not_found()

    return updated


@router.delete(
    "/{property_id}",
    response_model=PropertyResponse,
    status_code=status.HTTP_200_OK,
    summary="매물 삭제",
    description="""
    매물을 삭제하고 삭제 직전의 매물 정보를 반환합니다.

    - 하드 삭제입니다. 이미 삭제된 매물을 다시 삭제하면 404를 반환합니다.
    """,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_ERROR_RESPONSE}
)
async def delete_property(
    property_id: int = Path(..., ge=1, le=MAX_PROPERTY_ID, description="매물 ID"),
    db: AsyncSession = Depends(get_db)
):
    """매물 삭제"""
    deleted = await property_service.delete_property_by_id(db, property_id=property_id)

    if deleted is None:
        return property_not_found()

    return deleted
