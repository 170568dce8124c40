from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import ErrorKind, NotationError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """평가/변환 결과 - 성공 값 또는 실패 원인 중 하나만 가진다"""
    value: Optional[T] = None
    error: Optional[NotationError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NotationError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        """성공이면 값을 반환하고, 실패면 저장된 예외를 그대로 raise"""
        if self.error is not None:
            raise self.error
        return self.value
