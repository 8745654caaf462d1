"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.

JWT Payload Structure:
    {
        "sub": "user_uuid",        # 사용자 ID (User identifier)
        "name": "alice",           # 사용자명 (Username)
        "role": "Admin"|"User",    # 역할 문자열 (Role string used for authorization)
        "iss": "travel-org-api",   # 발급자 (Issuer)
        "aud": "travel-org-clients",  # 대상 (Audience)
        "exp": 1234567890          # 만료 시간 UNIX timestamp (Expiration)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from travel_org.config import settings

ROLE_ADMIN: str = "Admin"
ROLE_USER: str = "User"


def role_for(is_admin: bool) -> str:
    """관리자 플래그를 역할 문자열로 변환합니다 (Map the admin flag to a role string)."""
    return ROLE_ADMIN if is_admin else ROLE_USER


def create_access_token(data: dict[str, Any]) -> tuple[str, datetime]:
    """JWT 액세스 토큰을 생성합니다.

    Generate a signed JWT access token with the given payload data.
    Token expires after JWT_ACCESS_TOKEN_EXPIRE_MINUTES (default: 120 min).

    Args:
        data: JWT 페이로드 데이터 (JWT payload data, typically sub/name/role)

    Returns:
        tuple[str, datetime]: (인코딩된 토큰, 만료 시각) (Encoded token and its expiry)
    """
    to_encode: dict[str, Any] = data.copy()
    expire: datetime = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    })
    token: str = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, expire


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string, including issuer and audience.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )
