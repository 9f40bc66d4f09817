"""Domain Layer.

외부 시스템에 의존하지 않는 순수 도메인 모델입니다.
"""
