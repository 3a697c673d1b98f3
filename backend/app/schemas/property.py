"""
부동산 매물 스키마

요청/응답 데이터 검증 및 직렬화를 위한 Pydantic 스키마

- 생성/수정 요청 본문은 strict 모드로 검증합니다.
  (문자열 "3"을 숫자 3으로 바꿔주는 등의 암묵적 변환 없음)
- 정의되지 않은 필드가 포함되면 요청을 거부합니다.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# DB 정수 컬럼 범위를 넘는 입력은 500이 아니라 검증 단계(400)에서 거부
MAX_PROPERTY_ID = 2**31 - 1      # INTEGER PK 최대값
MAX_PAGE = 2**31 - 1             # (page - 1) * limit 이 BIGINT 범위 안에 들어가도록
MAX_PAGE_SIZE = 1000
MAX_PRICE_FILTER = 2**63 - 1


# ============ 매물 생성 스키마 ============

class PropertyCreate(BaseModel):
    """매물 등록 요청 스키마"""
    address: str = Field(..., description="주소")
    price: float = Field(..., description="가격", allow_inf_nan=False)
    bedrooms: int = Field(..., description="침실 수")
    bathrooms: int = Field(..., description="욕실 수")
    # 필수 필드지만 명시적인 null은 허용
    type: Optional[str] = Field(..., description="매물 유형 (null 허용)")

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "address": "123 Fake St",
                "price": 200000.0,
                "bedrooms": 3,
                "bathrooms": 3,
                "type": "Condominium"
            }
        }
    )


# ============ 매물 수정 스키마 ============

class PropertyUpdate(BaseModel):
    """
    매물 수정 요청 스키마

    모든 필드는 선택입니다. 값이 없거나 null이면 기존 값을 유지합니다.
    """
    address: Optional[str] = Field(None, description="주소")
    price: Optional[float] = Field(None, description="가격", allow_inf_nan=False)
    bedrooms: Optional[int] = Field(None, description="침실 수")
    bathrooms: Optional[int] = Field(None, description="욕실 수")
    type: Optional[str] = Field(None, description="매물 유형")

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "price": 215000.0,
                "type": "Townhouse"
            }
        }
    )


# ============ 목록 조회 필터 ============

class PriceRange(BaseModel):
    """가격 범위 필터 (양 끝 포함, 둘 다 선택)"""
    min: Optional[int] = Field(None, description="최소 가격", ge=0, le=MAX_PRICE_FILTER)
    max: Optional[int] = Field(None, description="최대 가격", ge=-MAX_PRICE_FILTER, le=MAX_PRICE_FILTER)


# ============ 매물 응답 스키마 ============

class PropertyResponse(BaseModel):
    """매물 응답 스키마"""
    id: int = Field(..., description="매물 ID (PK)")
    address: str = Field(..., description="주소")
    price: float = Field(..., description="가격")
    bedrooms: int = Field(..., description="침실 수")
    bathrooms: int = Field(..., description="욕실 수")
    type: Optional[str] = Field(None, description="매물 유형")

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """단순 메시지 응답 스키마 (404 등)"""
    message: str = Field(..., description="메시지")
