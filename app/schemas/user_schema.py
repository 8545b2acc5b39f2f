from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# 생성용 스키마
class UserCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=255)
    description: Optional[str] = None

# 카테고리 조회 시 확장되는 사용자 정보 (username, email, description)
class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str
    email: str
    description: Optional[str] = None

# 응답용 스키마
class UserResponse(UserSummary):
    id: int
    created_at: Optional[datetime] = None
