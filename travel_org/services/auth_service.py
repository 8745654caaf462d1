"""인증 서비스 — 회원가입, 로그인, 비밀번호 변경 비즈니스 로직.

Auth Service — Business logic for registration, login and password change.
Issues JWT access tokens carrying the user's role string.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.user import User
from travel_org.repositories.user_repository import user_repository
from travel_org.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from travel_org.services.log_service import log_service
from travel_org.utils.exceptions import BadRequestError, DuplicateError, UnauthorizedError
from travel_org.utils.jwt import create_access_token, role_for
from travel_org.utils.password import hash_password, verify_password


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, user: User) -> dict[str, Any]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT payload: subject, username and role string.
        """
        return {
            "sub": str(user.id),
            "name": user.username,
            "role": role_for(user.is_admin),
        }

    async def register(self, db: AsyncSession, data: RegisterRequest) -> MessageResponse:
        """새 일반 사용자를 등록합니다.

        Register a new non-admin user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Registration request data)

        Returns:
            MessageResponse: 성공 메시지 (Success message)

        Raises:
            DuplicateError: 사용자명 또는 이메일 중복 (Username or email already used)
        """
        if await user_repository.get_by_username(db, data.username) is not None:
            raise DuplicateError("Username already exists")
        if await user_repository.email_taken(db, data.email):
            raise DuplicateError("Email already exists")

        await user_repository.create(
            db,
            {
                "username": data.username,
                "email": data.email,
                "password_hash": hash_password(data.password),
                "first_name": data.first_name,
                "last_name": data.last_name,
                "phone_number": data.phone_number,
                "address": data.address,
                "is_admin": False,
            },
        )
        await log_service.information(db, f"User '{data.username}' registered")
        return MessageResponse(message="User registered successfully")

    async def login(self, db: AsyncSession, data: LoginRequest) -> TokenResponse:
        """자격 증명을 확인하고 JWT를 발급합니다.

        Verify credentials and issue an access token.

        Raises:
            UnauthorizedError: 잘못된 사용자명/비밀번호 (Invalid credentials)
        """
        user: User | None = await user_repository.get_by_username(db, data.username)
        if user is None or not verify_password(data.password, user.password_hash):
            await log_service.warning(db, f"Failed login attempt for '{data.username}'", persist=True)
            raise UnauthorizedError("Invalid username or password")

        token, expires_at = create_access_token(self._build_jwt_payload(user))
        await log_service.information(db, f"User '{user.username}' logged in")
        return TokenResponse(
            token=token,
            username=user.username,
            is_admin=user.is_admin,
            expires_at=expires_at,
        )

    async def change_password(
        self,
        db: AsyncSession,
        user: User,
        data: ChangePasswordRequest,
    ) -> MessageResponse:
        """비밀번호를 변경합니다.

        Change the current user's password after re-verifying the old one.

        Raises:
            BadRequestError: 현재 비밀번호 불일치 (Current password is wrong)
        """
        if not verify_password(data.current_password, user.password_hash):
            await log_service.warning(
                db, f"Failed password change for '{user.username}': wrong current password", persist=True
            )
            raise BadRequestError("Current password is incorrect")

        user.password_hash = hash_password(data.new_password)
        await db.flush()
        await log_service.information(db, f"User '{user.username}' changed password")
        return MessageResponse(message="Password changed successfully")


# 싱글턴 인스턴스: Singleton instance
auth_service: AuthService = AuthService()
