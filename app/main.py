# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import (
    AppError,
    AlreadyExistsError,
    InvalidError,
    InvalidIdError,
    ItemNotFoundError,
    UnprocessableError,
)

from app.routers.category_router import router as category_router
from app.routers.user_router import router as user_router

from app.core.database import Base, engine
from app import models  # noqa: F401  모델 등록 (create_all 대상)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# 에러 종류 → HTTP 상태 코드
ERROR_STATUS = {
    InvalidError: 400,
    InvalidIdError: 400,
    ItemNotFoundError: 404,
    AlreadyExistsError: 409,
    UnprocessableError: 422,
}

app = FastAPI(title="Category Service", debug=settings.DEBUG)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(user_router)
app.include_router(category_router)


# --------------------------------
# 에러 응답 변환
# --------------------------------
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), 422),
        content={"error": exc.kind, "detail": exc.message},
    )


# 요청 본문/헤더 검증 실패도 InvalidError와 같은 형식으로 응답
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=ERROR_STATUS[InvalidError],
        content={"error": InvalidError.kind, "detail": f"Validation Error: {problems}"},
    )


# --------------------------------
# 서버 이벤트
# --------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("DB 테이블 자동 생성 완료")


@app.on_event("shutdown")
def on_shutdown():
    engine.dispose()
    logger.info("서버 종료")
