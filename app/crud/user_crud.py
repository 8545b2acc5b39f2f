from sqlalchemy.orm import Session
from app.models.user_model import User


# CREATE 새로운 사용자 추가
def create_user(db: Session, user_data: dict):
    user = User(**user_data)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


# READ 특정 사용자 ID로 조회
def get_user(db: Session, user_id: int):
    return db.get(User, user_id)
