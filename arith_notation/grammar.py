from __future__ import annotations
import re
from enum import Enum

from .config import ArithConfig, DEFAULT_CONFIG

# Operator dictionary: symbol -> (name, arity)
TOKENS = {
    "+": ("ADD", 2),
    "-": ("SUB", 2),
    "*": ("MUL", 2),
    "/": ("DIV", 2),
    "^": ("POW", 2),  # 검증/변환에서만 연산자로 취급, 평가 의미는 정의되지 않음
}
OPS = frozenset(TOKENS)
ARITY = {sym: a for sym, (_, a) in TOKENS.items()}
TOKEN_NAMES = {sym: n for sym, (n, _) in TOKENS.items()}

_OPERAND_RE = re.compile(r"-?[0-9]+")


class Notation(Enum):
    PREFIX = "prefix"
    POSTFIX = "postfix"
    INFIX = "infix"

    @classmethod
    def parse(cls, value: "Notation | str") -> "Notation":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown notation {value!r}") from None


def is_operator(tok) -> bool:
    return isinstance(tok, str) and tok in OPS


def parse_operand(tok, cfg: ArithConfig | None = None) -> int | None:
    """정수 리터럴이면 값을, 아니면 None 반환 (범위 밖 리터럴도 None)"""
    if not isinstance(tok, str) or _OPERAND_RE.fullmatch(tok) is None:
        return None
    lo, hi = (cfg or DEFAULT_CONFIG).bounds
    # int() 자릿수 제한 전에 길이로 범위 밖 리터럴 제외 (선행 0은 무시)
    digits = tok.lstrip("-").lstrip("0") or "0"
    if len(digits) > len(str(max(-lo, hi))):
        return None
    value = -int(digits) if tok.startswith("-") else int(digits)
    if not lo <= value <= hi:
        return None
    return value


def is_operand(tok, cfg: ArithConfig | None = None) -> bool:
    return parse_operand(tok, cfg) is not None
