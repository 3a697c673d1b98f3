"""
모든 모델을 한 곳에서 import

SQLAlchemy가 모든 모델을 인식할 수 있도록 모든 모델을 import합니다.
"""
from app.models.property import Property

__all__ = [
    "Property",
]
