"""Value Object Base Class.

Value Object의 특징:
- 불변(Immutable)
- 동등성은 값으로 비교 (ID가 아님)
- 자기 검증(Self-validation)
"""

from __future__ import annotations

from abc import ABC


class ValueObject(ABC):
    """Value Object 베이스 클래스.

    dataclass로 구현 시:
        @dataclass(frozen=True, slots=True)
        class ProviderProfile(ValueObject):
            provider_id: str
    """

    __slots__ = ()
