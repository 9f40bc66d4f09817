"""Application Layer.

Use Case(Interactor)와 외부 시스템 Port 정의입니다.
"""
