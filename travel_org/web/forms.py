"""HTML 폼 값 정리 헬퍼 (HTML form value helpers)."""


def blank_to_none(value: str | None) -> str | None:
    """빈 입력을 None으로 변환합니다 (Empty or whitespace-only input becomes None)."""
    if value is None:
        return None
    value = value.strip()
    return value or None
