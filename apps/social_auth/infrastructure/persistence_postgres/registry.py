"""SQLAlchemy Mapper Registry.

도메인 엔티티를 Imperative Mapping으로 테이블에 연결하기 위한 레지스트리입니다.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

mapper_registry = registry(metadata=MetaData())
