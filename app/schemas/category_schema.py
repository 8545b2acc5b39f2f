from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user_schema import UserSummary


# 기본 스키마
class CategoryBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., min_length=1, max_length=100)

# 생성용 스키마
class CategoryCreate(CategoryBase):
    pass

# 수정용 스키마
class CategoryUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=100)

# 응답용 스키마
class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    creator_id: Optional[int] = None
    updater_id: Optional[int] = None
    creator: Optional[UserSummary] = None
    updater: Optional[UserSummary] = None
    is_deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

# 이름 목록 조회 요청 / 응답
class CategoryNamesRequest(BaseModel):
    names: List[str]

class CategoryIdsResponse(BaseModel):
    ids: List[int]

# 중복 검사 응답
class CategoryDuplicateResponse(BaseModel):
    exists: bool
    category: Optional[CategoryResponse] = None
