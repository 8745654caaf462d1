"""인증 라우터 — 회원가입, 로그인, 비밀번호 변경.

Auth Router — Registration, login and password change endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.api.deps import get_current_user
from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from travel_org.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """회원가입 — 일반 사용자 계정 생성.

    Register a new (non-admin) user account.
    """
    result: MessageResponse = await auth_service.register(db, data)
    await db.commit()
    return result


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """로그인 — JWT 액세스 토큰 발급.

    Verify credentials and return a JWT access token.
    """
    result: TokenResponse = await auth_service.login(db, data)
    await db.commit()
    return result


@router.post("/changepassword", response_model=MessageResponse)
async def change_password(
    data: ChangePasswordRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> MessageResponse:
    """비밀번호 변경 (Change the current user's password)."""
    result: MessageResponse = await auth_service.change_password(db, current_user, data)
    await db.commit()
    return result
