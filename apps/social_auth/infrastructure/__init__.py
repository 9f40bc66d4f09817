"""Infrastructure Layer.

Application Port의 구현체 (OAuth 프로바이더, JWT, Redis, PostgreSQL) 입니다.
"""
