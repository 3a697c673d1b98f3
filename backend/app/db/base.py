"""
SQLAlchemy 선언적 Base

모든 모델은 이 Base를 상속받습니다.
"""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
