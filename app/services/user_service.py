import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import sessionmaker

from app.core.exceptions import raise_store_error
from app.crud import user_crud
from app.crud.base_crud import check_id
from app.models.user_model import User
from app.schemas.user_schema import UserCreate, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """
    사용자(User) 생성/조회 서비스 (카테고리 생성자/수정자 참조용)
    """
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # CREATE 사용자 추가
    async def create_user(self, input_user: UserCreate) -> UserResponse:
        try:
            user = await run_in_threadpool(self._create_user, input_user)
        except Exception as error:
            raise_store_error(error, "Failed to create user", entity="User")
        logger.info(f"User {user.id} '{user.username}' created")
        return user

    def _create_user(self, input_user: UserCreate):
        with self.session_factory() as db:
            user = user_crud.create_user(db, input_user.model_dump())
            return UserResponse.model_validate(user)

    # READ 사용자 조회
    async def get_user(self, user_id: Any) -> UserResponse:
        try:
            return await run_in_threadpool(self._get_user, user_id)
        except Exception as error:
            raise_store_error(error, "Failed to retrieve user", entity="User")

    def _get_user(self, user_id):
        with self.session_factory() as db:
            object_id = check_id(db, user_id, User, f"User with id {user_id} not found")
            return UserResponse.model_validate(user_crud.get_user(db, object_id))
