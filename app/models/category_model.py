from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship, validates
from app.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from app.models.types import IdType

# 카테고리 이름 최대 길이
NAME_MAX_LENGTH = 100

class Category(Base):

    __tablename__ = "category"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(IdType, primary_key=True, autoincrement=True)

    # 카테고리 이름
    name = Column(String(NAME_MAX_LENGTH), nullable=False, unique=True)  # 필수, 중복 불가

    # 생성자 / 최종 수정자 FK (User.id 참조)
    creator_id = Column(IdType, ForeignKey("user.id"), nullable=True)
    updater_id = Column(IdType, ForeignKey("user.id"), nullable=True)

    # 소프트 삭제 여부
    is_deleted = Column(Boolean, nullable=False, default=False, server_default="0")

    # 생성 / 수정 시각 (DB에서 관리)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    # relationship: 조회 시 사용자 정보 확장
    creator = relationship("User", foreign_keys=[creator_id])
    updater = relationship("User", foreign_keys=[updater_id])

    # 앞뒤 공백 제거 후 필수값 / 길이 검사
    @validates("name")
    def _trim_name(self, key, value):
        value = value.strip() if isinstance(value, str) else value
        if not value:
            raise ValueError(f"Path `{key}` is required.")
        if len(value) > NAME_MAX_LENGTH:
            raise ValueError(f"Path `{key}` is longer than the maximum allowed length ({NAME_MAX_LENGTH}).")
        return value
