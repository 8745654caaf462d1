"""비즈니스 로직 서비스 패키지 (Business logic services)."""
