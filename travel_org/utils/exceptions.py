"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these directly so routers stay free of status-code plumbing.

Usage:
    from travel_org.utils.exceptions import NotFoundError, ConflictError
    raise NotFoundError("Trip not found")
    raise ConflictError("Destination still has trips")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found — 요청한 리소스를 찾을 수 없을 때 사용."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised when a uniqueness rule is violated (e.g. duplicate username or email).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ConflictError(HTTPException):
    """409 Conflict 예외 — 종속 레코드가 있어 삭제가 제한될 때 사용.

    Raised when a delete is restricted because dependent rows still exist
    (destination with trips, trip or user with registrations).
    """

    def __init__(self, detail: str = "Resource has dependent records") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden — 권한 부족 시 사용 (e.g. a user reading someone else's booking)."""

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized — 인증 실패 시 사용."""

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 비즈니스 규칙 위반 시 사용.

    Raised when the request is well-formed but breaks a business rule
    (e.g. booking more participants than the trip has room for).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
