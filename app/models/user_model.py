from sqlalchemy import Column, String, Text, DateTime, func
from sqlalchemy.orm import validates
from app.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from app.models.types import IdType

class User(Base):

    __tablename__ = "user"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(IdType, primary_key=True, autoincrement=True)

    # 사용자 이름
    username = Column(String(50), nullable=False, unique=True)  # 필수, 중복 불가

    # 이메일
    email = Column(String(255), nullable=False, unique=True)  # 필수, 중복 불가

    # 소개 (옵션)
    description = Column(Text, nullable=True)

    # 생성 시각
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    @validates("username", "email")
    def _strip_required(self, key, value):
        value = value.strip() if isinstance(value, str) else value
        if not value:
            raise ValueError(f"Path `{key}` is required.")
        return value
