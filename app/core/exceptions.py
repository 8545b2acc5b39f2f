"""애플리케이션 에러 분류와 DB 에러 변환.

서비스는 아래 다섯 종류의 에러만 상위(라우터)로 올린다.
DB 드라이버/ORM 에러는 translate_store_error 한 곳에서 변환한다.
"""
import logging
import re
from typing import List, NoReturn

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class AppError(Exception):
    kind = "UNPROCESSABLE"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# 스키마/검증 실패
class InvalidError(AppError):
    kind = "INVALID"


# 유니크 제약 위반
class AlreadyExistsError(AppError):
    kind = "ALREADY_EXISTS"


# 잘못된 형식 또는 존재하지 않는 ID 참조
class InvalidIdError(AppError):
    kind = "INVALID_ID"


# 조회 대상 없음
class ItemNotFoundError(AppError):
    kind = "ITEM_NOT_FOUND"


# 그 외 모든 DB 실패
class UnprocessableError(AppError):
    kind = "UNPROCESSABLE"


# SQLite: "UNIQUE constraint failed: category.name"
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<columns>[\w.,\s]+)")
# MySQL: "Duplicate entry 'x' for key 'category.name'"
_MYSQL_DUPLICATE = re.compile(r"Duplicate entry .* for key '(?P<key>[^']+)'")


def duplicated_fields(error: IntegrityError) -> List[str]:
    """유니크 제약 위반 에러에서 충돌한 컬럼 이름 목록을 꺼낸다 (아니면 빈 목록)."""
    text = str(error.orig)

    match = _SQLITE_UNIQUE.search(text)
    if match:
        columns = [c.strip() for c in match.group("columns").split(",")]
        return [c.rsplit(".", 1)[-1] for c in columns if c]

    match = _MYSQL_DUPLICATE.search(text)
    if match:
        return [match.group("key").rsplit(".", 1)[-1]]

    return []


def translate_store_error(
    error: Exception,
    fallback: str,
    entity: str = "Category",
    check_duplicates: bool = True,
) -> AppError:
    """DB 계층에서 발생한 예외를 애플리케이션 에러로 변환한다.

    Args:
        error: 원본 예외.
        fallback: 매칭되는 경우가 없을 때 UnprocessableError 메시지.
        entity: 중복 메시지에 들어갈 엔티티 이름.
        check_duplicates: False면 유니크 제약 위반도 fallback으로 처리.

    Returns:
        raise 할 AppError 인스턴스.
    """
    # 이미 변환된 에러는 그대로
    if isinstance(error, AppError):
        return error

    logger.error(f"{fallback}: {error!r}")

    # 모델 validator 실패
    if isinstance(error, ValueError):
        return InvalidError(f"Validation Error: {error}")

    if check_duplicates and isinstance(error, IntegrityError):
        fields = duplicated_fields(error)
        if fields:
            message = f"{entity} with {' and '.join(fields)} already exists"
            return AlreadyExistsError(f"Duplicate Key Error: {message}")

    return UnprocessableError(fallback)


def raise_store_error(error: Exception, fallback: str, **kwargs) -> NoReturn:
    """except 블록 안에서 호출: 변환된 에러를 원본 예외와 연결해 raise."""
    app_error = translate_store_error(error, fallback, **kwargs)
    if app_error is error:
        raise error
    raise app_error from error
