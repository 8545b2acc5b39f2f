from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


# 페이지네이션 응답 스키마
class Page(BaseModel, Generic[T]):
    items: List[T]
    total: int
    skip: int
    limit: int
    page: int
    pages: int
