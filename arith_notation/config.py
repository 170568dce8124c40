from __future__ import annotations
from dataclasses import dataclass

import numpy as np

# 지원하는 고정 폭 정수 타입
INT_DTYPES = ("int8", "int16", "int32", "int64")


@dataclass(frozen=True)
class ArithConfig:
    int_dtype: str = "int32"      # 피연산자/결과의 정수 폭
    wrap_overflow: bool = True    # False면 overflow 시 IntegerOverflowError

    def __post_init__(self):
        if self.int_dtype not in INT_DTYPES:
            raise ValueError(f"Unsupported int_dtype {self.int_dtype!r}, expected one of {INT_DTYPES}")

    @property
    def bounds(self) -> tuple[int, int]:
        info = np.iinfo(self.int_dtype)
        return int(info.min), int(info.max)

    @property
    def bits(self) -> int:
        return int(np.iinfo(self.int_dtype).bits)


DEFAULT_CONFIG = ArithConfig()
