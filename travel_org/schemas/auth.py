"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers registration, login, and password change.
"""

from datetime import datetime
from pydantic import BaseModel, Field, model_validator

# 이메일 형식: 간단한 형식 검증 (Lightweight email shape check)
EMAIL_PATTERN: str = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
# 전화번호 형식: 숫자, 공백, +, -, 괄호 (Digits, spaces, +, -, parentheses)
PHONE_PATTERN: str = r"^[0-9+\-() ]*$"


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Self-registration request schema. New accounts are never administrators.

    Attributes:
        username: 사용자 아이디 (3~100자, Login ID)
        email: 이메일 (Email address, unique)
        password: 비밀번호 (6~100자, hashed with bcrypt on the server)
        confirm_password: 비밀번호 확인 (Must equal password)
        first_name / last_name / phone_number / address: 선택 프로필 (Optional profile fields)
    """

    username: str = Field(min_length=3, max_length=100)
    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6, max_length=100)
    confirm_password: str
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone_number: str | None = Field(default=None, max_length=20, pattern=PHONE_PATTERN)
    address: str | None = Field(default=None, max_length=200)

    @model_validator(mode="after")
    def _passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("The password and confirmation password do not match.")
        return self


class LoginRequest(BaseModel):
    """로그인 요청 스키마 (Login request schema)."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ChangePasswordRequest(BaseModel):
    """비밀번호 변경 요청 스키마.

    Password change request. The current password is re-verified on the server.
    """

    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=100)
    confirm_new_password: str

    @model_validator(mode="after")
    def _passwords_match(self) -> "ChangePasswordRequest":
        if self.new_password != self.confirm_new_password:
            raise ValueError("The new password and confirmation password do not match.")
        return self


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Returned after a successful login.

    Attributes:
        token: JWT 액세스 토큰 (Bearer token for the Authorization header)
        username: 사용자명 (Username)
        is_admin: 관리자 여부 (Administrator flag)
        expires_at: 만료 시각 UTC (Token expiry)
    """

    token: str
    username: str
    is_admin: bool
    expires_at: datetime
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    """단순 메시지 응답 (Plain message response)."""

    message: str
