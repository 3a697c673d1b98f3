"""
API v1 라우터

모든 API 엔드포인트를 한 곳에 모아서 관리합니다.

작동 방식:
1. 각 기능별 엔드포인트 파일 (properties.py 등)에서 router를 정의
2. 이 파일에서 모든 router를 import
3. api_router에 각 router를 등록 (prefix와 tags 지정)
4. app/main.py에서 이 api_router를 FastAPI 앱에 등록
"""
from fastapi import APIRouter

from app.api.v1.endpoints import properties

# 메인 API 라우터 생성
api_router = APIRouter()

# ============================================================
# 부동산 매물 API
# ============================================================
#
# 엔드포인트:
# - GET    /properties?page&limit&minPrice&maxPrice - 매물 목록 조회
# - GET    /properties/{property_id}                - 매물 단건 조회
# - POST   /properties                              - 매물 등록
# - PUT    /properties/{property_id}                - 매물 수정
# - DELETE /properties/{property_id}                - 매물 삭제
#
# 파일 위치: app/api/v1/endpoints/properties.py
api_router.include_router(
    properties.router,
    prefix="/properties",
    tags=["🏠 Properties (매물)"]
)
