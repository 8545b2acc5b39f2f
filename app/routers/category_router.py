from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy.orm import sessionmaker

from app.core.database import get_session_factory
from app.schemas.category_schema import (
    CategoryCreate,
    CategoryDuplicateResponse,
    CategoryIdsResponse,
    CategoryNamesRequest,
    CategoryResponse,
    CategoryUpdate,
)
from app.schemas.page_schema import Page
from app.services.category_service import CategoryService

# 카테고리 관련 API 라우터
router = APIRouter(prefix="/categories", tags=["Categories"])


# 서비스 의존성 (세션 팩토리 주입)
def get_category_service(session_factory: sessionmaker = Depends(get_session_factory)):
    return CategoryService(session_factory)


# 카테고리 목록 조회 (페이지네이션 + 이름 검색)
@router.get("/", response_model=Page[CategoryResponse])
async def read_categories(
    skip: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
    sort_by: str = "created_at",
    order: str = "desc",
    name: Optional[str] = None,
    is_deleted: Optional[bool] = None,
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_categories(skip, limit, sort_by, order, name, is_deleted)


# 이름 중복 검사
@router.get("/check-duplicate", response_model=CategoryDuplicateResponse)
async def check_duplicate(value: str, service: CategoryService = Depends(get_category_service)):
    category = await service.check_duplicate_category(value)
    return CategoryDuplicateResponse(exists=category is not None, category=category)


# 이름 목록 → ID 목록
@router.post("/by-names", response_model=CategoryIdsResponse)
async def read_category_ids(
    payload: CategoryNamesRequest,
    service: CategoryService = Depends(get_category_service),
):
    return CategoryIdsResponse(ids=await service.get_category_by_names(payload.names))


# 카테고리 생성
@router.post("/", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    user_id: str = Header(..., alias="X-User-Id"),
    service: CategoryService = Depends(get_category_service),
):
    return await service.create_category(category, user_id)


# 카테고리 수정
@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    update_data: CategoryUpdate,
    user_id: str = Header(..., alias="X-User-Id"),
    service: CategoryService = Depends(get_category_service),
):
    return await service.update_category(category_id, user_id, update_data)


# 카테고리 삭제 (소프트 삭제)
@router.delete("/{category_id}", response_model=CategoryResponse)
async def delete_category(
    category_id: str,
    user_id: str = Header(..., alias="X-User-Id"),
    service: CategoryService = Depends(get_category_service),
):
    return await service.delete_category(category_id, user_id)
