"""
부동산 매물 모델

테이블명: property
매물 주소, 가격, 방/욕실 수, 유형을 저장합니다.
"""
from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Numeric, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Property(Base):
    """
    부동산 매물 테이블

    컬럼:
        - id: 고유 번호 (자동 생성, PK)
        - address: 주소
        - price: 가격 (범위 조회용 인덱스)
        - bedrooms: 침실 수
        - bathrooms: 욕실 수
        - type: 매물 유형 (예: Condominium, Townhouse)
    """
    __tablename__ = "property"

    # 기본키 (Primary Key)
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="PK"
    )

    address: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="주소"
    )

    # 가격 범위 조회(minPrice/maxPrice)에 사용
    price: Mapped[Decimal] = mapped_column(
        Numeric,
        nullable=False,
        index=True,
        comment="가격"
    )

    bedrooms: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        comment="침실 수"
    )

    bathrooms: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        comment="욕실 수"
    )

    type: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="매물 유형"
    )

    def __repr__(self):
        return f"<Property(id={self.id}, address='{self.address}', price={self.price})>"
