"""Setup: 설정, 로깅, 의존성 조립."""
