from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import sessionmaker

from app.core.database import get_session_factory
from app.schemas.user_schema import UserCreate, UserResponse
from app.services.user_service import UserService

# 사용자 관련 API 라우터
router = APIRouter(prefix="/users", tags=["Users"])


def get_user_service(session_factory: sessionmaker = Depends(get_session_factory)):
    return UserService(session_factory)


# 사용자 생성
@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)):
    return await service.create_user(user)


# 단일 사용자 조회
@router.get("/{user_id}", response_model=UserResponse)
async def read_user(user_id: str, service: UserService = Depends(get_user_service)):
    return await service.get_user(user_id)
