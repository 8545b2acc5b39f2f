from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.crud.base_crud import PopulateSpec, add_condition_to_criteria, get_paginated_items
from app.models.category_model import Category

# 생성자/수정자 확장 시 가져올 사용자 필드
USER_PROJECTION = ("username", "email", "description")

CATEGORY_POPULATE = [
    PopulateSpec(path="creator", select=USER_PROJECTION),
    PopulateSpec(path="updater", select=USER_PROJECTION),
]


# CREATE 새로운 카테고리 추가
def create_category(db: Session, category_data: dict):
    category = Category(**category_data)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


# READ 특정 카테고리 ID로 조회
def get_category(db: Session, category_id: int):
    return db.get(Category, category_id)


# READ 이름이 정확히 일치하는 카테고리 조회 (저장 시와 같이 앞뒤 공백 제거 후 비교)
def get_category_by_name(db: Session, name: str) -> Optional[Category]:
    name = name.strip() if isinstance(name, str) else name
    return db.scalars(select(Category).where(Category.name == name).limit(1)).first()


# READ-ALL 카테고리 목록 페이지 조회 (이름 부분일치, 대소문자 무시)
def get_categories(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    sort_by: str = "created_at",
    order: str = "desc",
    name: Optional[str] = None,
    is_deleted: Optional[bool] = None,
):
    criteria = []
    criteria = add_condition_to_criteria(
        criteria,
        func.lower(Category.name).contains(name.lower(), autoescape=True) if name else None,
    )
    criteria = add_condition_to_criteria(
        criteria,
        (Category.is_deleted == is_deleted) if is_deleted is not None else None,
    )
    return get_paginated_items(
        db,
        Category,
        skip,
        limit,
        sort_by,
        order,
        CATEGORY_POPULATE,
        criteria,
    )


# UPDATE 카테고리 데이터 수정 후 수정된 객체 반환
def update_category(db: Session, category_id: int, update_data: dict):
    category = db.get(Category, category_id)
    if not category:
        return None

    for key, value in update_data.items():
        setattr(category, key, value)

    db.commit()
    db.refresh(category)
    return category


# DELETE 소프트 삭제 (레코드는 남기고 is_deleted만 표시)
def soft_delete_category(db: Session, category_id: int, updater_id: int):
    return update_category(db, category_id, {"is_deleted": True, "updater_id": updater_id})
