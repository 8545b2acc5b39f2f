"""모든 엔티티에서 공통으로 쓰는 조회 헬퍼.

ID 파싱/존재 확인, 조건 누적, 페이지네이션 조회를 담당한다.
"""
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import InvalidIdError, ItemNotFoundError


# 관계 필드 확장 설정 (path: relationship 이름, select: 가져올 컬럼)
@dataclass(frozen=True)
class PopulateSpec:
    path: str
    select: Sequence[str] = field(default_factory=tuple)


# 정렬 방향 문자열 → 오름차순 여부
_ORDER = {
    "asc": True,
    "ascending": True,
    "1": True,
    "desc": False,
    "descending": False,
    "-1": False,
}


# ID 문자열/정수 → 정수 ID (형식 오류 시 InvalidIdError)
def get_object_id(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidIdError(f"Invalid ID: {value} is not a valid ID")
    if isinstance(value, int):
        if value < 1:
            raise InvalidIdError(f"Invalid ID: {value} is not a valid ID")
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())
        if parsed >= 1:
            return parsed
    raise InvalidIdError(f"Invalid ID: {value} is not a valid ID")


# ID 형식 확인 + 존재 여부 확인 (없으면 ItemNotFoundError)
def check_id(db: Session, value: Any, model, not_found_message: str) -> int:
    object_id = get_object_id(value)
    if object_id is None or db.get(model, object_id) is None:
        raise ItemNotFoundError(not_found_message)
    return object_id


# 조건이 있을 때만 criteria 목록에 추가
def add_condition_to_criteria(criteria: List[Any], condition: Any) -> List[Any]:
    if condition is not None:
        criteria.append(condition)
    return criteria


def _populate_options(model, populate: Sequence[PopulateSpec]):
    options = []
    for spec in populate:
        relation = getattr(model, spec.path)
        loader = selectinload(relation)
        if spec.select:
            target = relation.property.mapper.class_
            loader = loader.load_only(*[getattr(target, name) for name in spec.select])
        options.append(loader)
    return options


def get_paginated_items(
    db: Session,
    model,
    skip: int,
    limit: int,
    sort_by: str,
    order: str,
    populate: Sequence[PopulateSpec] = (),
    criteria: Sequence[Any] = (),
) -> dict:
    """조건에 맞는 항목을 정렬/페이지 단위로 조회한다.

    Args:
        db: DB 세션.
        model: 조회할 ORM 모델 클래스.
        skip: 건너뛸 개수 (0 이상).
        limit: 페이지 크기 (1 이상).
        sort_by: 정렬 기준 컬럼 이름.
        order: 정렬 방향 (asc / desc / 1 / -1).
        populate: 함께 불러올 관계 필드 목록.
        criteria: WHERE 조건 목록 (AND 결합).

    Returns:
        items, total, skip, limit, page, pages 키를 가진 dict.

    Raises:
        ValueError: skip/limit/sort_by/order 값이 잘못된 경우.
    """
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    ascending = _ORDER.get(str(order).lower())
    if ascending is None:
        raise ValueError(f"Unknown sort order: {order}")

    if sort_by not in model.__table__.columns:
        raise ValueError(f"Unknown sort field: {sort_by}")
    sort_column = model.__table__.columns[sort_by]

    count_stmt = select(func.count()).select_from(model)
    stmt = select(model)
    if criteria:
        count_stmt = count_stmt.where(*criteria)
        stmt = stmt.where(*criteria)
    total = db.scalar(count_stmt)

    # 같은 값일 때 id도 같은 방향으로 정렬
    if ascending:
        ordering = [sort_column.asc(), model.id.asc()]
    else:
        ordering = [sort_column.desc(), model.id.desc()]

    stmt = (
        stmt
        .options(*_populate_options(model, populate))
        .order_by(*ordering)
        .offset(skip)
        .limit(limit)
    )
    items = db.scalars(stmt).all()

    return {
        "items": items,
        "total": total,
        "skip": skip,
        "limit": limit,
        "page": skip // limit + 1,
        "pages": math.ceil(total / limit) if total else 0,
    }
