from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings


def build_engine(url: str):
    # SQLite는 스레드풀에서 접근하므로 동일 스레드 검사 해제
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)

    if url.startswith("sqlite"):
        # SQLite 외래키 제약 활성화
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )


# SQLAlchemy 엔진
engine = build_engine(settings.db_url)

# DB 세션 팩토리
SessionLocal = build_session_factory(engine)

# ORM 베이스 클래스
Base = declarative_base()


# 세션 팩토리 의존성 (서비스에 주입, 테스트에서 교체)
def get_session_factory() -> sessionmaker:
    return SessionLocal
