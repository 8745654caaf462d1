"""FastAPI 의존성 주입 모듈 — 인증 및 권한 검사.

FastAPI dependency injection module — Authentication and authorization.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 서명, 만료, 발급자, 대상을 검증
       (decode_token verifies signature, expiry, issuer and audience)
    3. 페이로드의 "sub" 필드로 DB에서 사용자를 조회
       (User is fetched from DB using payload "sub" field)

Authorization Flow (require_role):
    토큰의 역할 문자열이 아니라 DB의 is_admin 값으로 역할을 판단
    (The role is derived from the stored is_admin flag, so a demoted admin
    loses access even with an old token)
"""

from typing import Annotated, Callable, Awaitable
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.repositories.user_repository import user_repository
from travel_org.utils.exceptions import ForbiddenError, UnauthorizedError
from travel_org.utils.jwt import ROLE_ADMIN, decode_token, role_for

# HTTP Bearer 토큰 추출기: auto_error=False로 누락 시 403 대신 401 반환
# (Missing header yields 401 rather than HTTPBearer's default 403)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode JWT from the Authorization header and return the authenticated user.

    Raises:
        UnauthorizedError: 토큰 누락/무효/만료, 또는 사용자 없음
                           (Missing, invalid or expired token, or unknown user)
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")
    try:
        payload: dict = decode_token(credentials.credentials)
        user_id: UUID = UUID(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise UnauthorizedError("Invalid or expired token")

    user: User | None = await user_repository.get_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError("User not found")
    return user


def require_role(role: str) -> Callable[..., Awaitable[User]]:
    """역할 문자열 기반 권한 검사 의존성 팩토리.

    Dependency factory enforcing a role string ("Admin" or "User").

    Args:
        role: 필요한 역할 (Required role string)

    Returns:
        FastAPI 의존성 함수 — 인증된 사용자 반환 또는 403 발생
        (FastAPI dependency returning the User or raising 403)
    """
    async def _check(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if role_for(current_user.is_admin) != role:
            raise ForbiddenError("Insufficient permissions")
        return current_user
    return _check


# 편의 의존성: Pre-configured role dependency
require_admin = require_role(ROLE_ADMIN)
