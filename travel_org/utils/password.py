"""비밀번호 해싱 유틸리티 — bcrypt.

Password hashing helpers. Only bcrypt hashes are ever stored.
"""

import bcrypt


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다 (Hash a plain text password)."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호가 저장된 해시와 일치하는지 확인합니다.

    Verify a plain text password against a stored bcrypt hash.
    Malformed hashes are treated as a mismatch.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
