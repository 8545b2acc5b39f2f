import logging
from typing import Any, List, Optional, Sequence

import anyio
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from sqlalchemy.orm import Session, sessionmaker

from app.core.exceptions import (
    InvalidIdError,
    ItemNotFoundError,
    UnprocessableError,
    raise_store_error,
)
from app.crud import category_crud
from app.crud.base_crud import check_id
from app.models.category_model import Category
from app.models.user_model import User
from app.schemas.category_schema import CategoryCreate, CategoryResponse, CategoryUpdate
from app.schemas.page_schema import Page

logger = logging.getLogger(__name__)


def _as_dict(data: Any) -> dict:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return dict(data or {})


# 참조 ID 존재 확인 (없으면 InvalidIdError로 변환)
def _check_reference(db: Session, value: Any, model, not_found_message: str) -> int:
    try:
        return check_id(db, value, model, not_found_message)
    except ItemNotFoundError as error:
        raise InvalidIdError(error.message) from error


class CategoryService:
    """
    카테고리(Category) 관련 비즈니스 로직을 관리하는 서비스 클래스

    DB 작업은 주입받은 세션 팩토리로 작업마다 새 세션을 열어
    스레드풀에서 실행한다. 모든 실패는 app.core.exceptions 의
    다섯 가지 에러로 변환되어 올라간다.
    """
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # READ 카테고리 목록 페이지 조회
    async def get_categories(
        self,
        skip: int = 0,
        limit: int = 100,
        sort_by: str = "created_at",
        order: str = "desc",
        name: Optional[str] = None,
        is_deleted: Optional[bool] = None,
    ) -> Page[CategoryResponse]:
        try:
            return await run_in_threadpool(
                self._get_categories, skip, limit, sort_by, order, name, is_deleted
            )
        except Exception as error:
            logger.error(f"Error listing categories: {error!r}")
            raise UnprocessableError("Failed to retrieve categories") from error

    def _get_categories(self, skip, limit, sort_by, order, name, is_deleted):
        with self.session_factory() as db:
            result = category_crud.get_categories(
                db, skip, limit, sort_by, order, name=name, is_deleted=is_deleted
            )
            items = [CategoryResponse.model_validate(item) for item in result["items"]]
            return Page[CategoryResponse](**{**result, "items": items})

    # READ 이름 목록 → 카테고리 ID 목록 (입력 순서 유지, 하나라도 없으면 실패)
    async def get_category_by_names(self, names: Sequence[str]) -> List[int]:
        ids: List[Optional[int]] = [None] * len(names)

        async def lookup(index: int, name: str):
            category_id = await self._lookup_id(name)
            if category_id is None:
                raise ItemNotFoundError("Categories not found")
            ids[index] = category_id

        # 하나가 실패하면 남은 조회는 task group이 취소
        try:
            async with anyio.create_task_group() as tg:
                for index, name in enumerate(names):
                    tg.start_soon(lookup, index, name)
        except Exception as error:
            logger.error(f"Error looking up categories by names {list(names)}: {error!r}")
            raise ItemNotFoundError("Categories not found") from error

        return ids

    async def _lookup_id(self, name: str) -> Optional[int]:
        return await run_in_threadpool(self._find_id_by_name, name)

    def _find_id_by_name(self, name: str) -> Optional[int]:
        with self.session_factory() as db:
            category = category_crud.get_category_by_name(db, name)
            return category.id if category else None

    # CREATE 카테고리 추가
    async def create_category(self, input_category: CategoryCreate, creator_id: Any) -> CategoryResponse:
        try:
            category = await run_in_threadpool(self._create_category, input_category, creator_id)
        except Exception as error:
            raise_store_error(error, "Failed to create category")
        logger.info(f"Category {category.id} '{category.name}' created by user {category.creator_id}")
        return category

    def _create_category(self, input_category, creator_id):
        data = _as_dict(input_category)
        with self.session_factory() as db:
            creator = check_id(db, creator_id, User, f"User with id {creator_id} not found")
            category = category_crud.create_category(
                db, {**data, "creator_id": creator, "updater_id": None}
            )
            return CategoryResponse.model_validate(category)

    # UPDATE 카테고리 수정
    async def update_category(
        self, category_id: Any, updater_id: Any, input_category: CategoryUpdate
    ) -> CategoryResponse:
        try:
            category = await run_in_threadpool(
                self._update_category, category_id, updater_id, input_category
            )
        except Exception as error:
            raise_store_error(error, "Failed to update category")
        logger.info(f"Category {category.id} updated by user {category.updater_id}")
        return category

    def _update_category(self, category_id, updater_id, input_category):
        data = _as_dict(input_category)
        with self.session_factory() as db:
            object_id = _check_reference(
                db, category_id, Category, f"Category with id {category_id} not found"
            )
            updater = _check_reference(db, updater_id, User, f"User with id {updater_id} not found")
            category = category_crud.update_category(db, object_id, {**data, "updater_id": updater})
            return CategoryResponse.model_validate(category)

    # DELETE 카테고리 소프트 삭제
    async def delete_category(self, category_id: Any, updater_id: Any) -> CategoryResponse:
        try:
            category = await run_in_threadpool(self._delete_category, category_id, updater_id)
        except Exception as error:
            raise_store_error(error, "Failed to delete category", check_duplicates=False)
        logger.info(f"Category {category.id} marked deleted by user {category.updater_id}")
        return category

    def _delete_category(self, category_id, updater_id):
        with self.session_factory() as db:
            object_id = _check_reference(
                db, category_id, Category, f"Category with id {category_id} not found"
            )
            updater = _check_reference(db, updater_id, User, f"User with id {updater_id} not found")
            category = category_crud.soft_delete_category(db, object_id, updater)
            return CategoryResponse.model_validate(category)

    # READ 이름 중복 검사 (없으면 None)
    async def check_duplicate_category(self, value: str) -> Optional[CategoryResponse]:
        try:
            return await run_in_threadpool(self._check_duplicate_category, value)
        except Exception as error:
            logger.error(f"Error checking category duplicate '{value}': {error!r}")
            raise UnprocessableError("Failed check category duplicate") from error

    def _check_duplicate_category(self, value: str):
        with self.session_factory() as db:
            category = category_crud.get_category_by_name(db, value)
            return CategoryResponse.model_validate(category) if category else None
