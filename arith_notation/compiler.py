from __future__ import annotations
import logging
from typing import Sequence

from .config import ArithConfig, DEFAULT_CONFIG
from .errors import (
    DivisionByZeroError,
    IntegerOverflowError,
    NotationError,
    UnsupportedOperatorError,
)
from .grammar import Notation, is_operator, parse_operand
from .result import Result
from .validator import check_postfix, check_prefix

logger = logging.getLogger(__name__)


def _trunc_div(a: int, b: int) -> int:
    # 0 방향으로 절삭하는 정수 나눗셈 (파이썬 // 는 floor)
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _fit(value: int, cfg: ArithConfig) -> int:
    lo, hi = cfg.bounds
    if lo <= value <= hi:
        return value
    if not cfg.wrap_overflow:
        raise IntegerOverflowError(f"Result {value} out of {cfg.int_dtype} range [{lo}, {hi}]")
    span = 1 << cfg.bits
    return (value - lo) % span + lo


def combine(op: str, a: int, b: int, cfg: ArithConfig | None = None) -> int:
    """이진 연산 op(a, b); 피연산자 순서는 호출자가 보장"""
    cfg = cfg or DEFAULT_CONFIG
    if op == "*":
        z = a * b
    elif op == "/":
        if b == 0:
            raise DivisionByZeroError(f"Division by zero: {a} / {b}")
        z = _trunc_div(a, b)
    elif op == "+":
        z = a + b
    elif op == "-":
        z = a - b
    elif op == "^":
        raise UnsupportedOperatorError("Operator '^' has no evaluation semantics")
    else:
        raise ValueError(f"Unknown operator {op!r}")
    return _fit(z, cfg)


def _operand(tok: str, cfg: ArithConfig) -> int:
    value = parse_operand(tok, cfg)
    # 검증을 통과한 토큰만 들어온다
    assert value is not None, f"unvalidated operand {tok!r}"
    return value


def eval_prefix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> Result[int]:
    """Evaluate prefix expression; failures are reported in the Result, not raised."""
    cfg = cfg or DEFAULT_CONFIG
    try:
        check_prefix(tokens, cfg)
        stack: list[int] = []
        for tok in reversed(tokens):
            if is_operator(tok):
                a = stack.pop(); b = stack.pop()
                stack.append(combine(tok, a, b, cfg))
            else:
                stack.append(_operand(tok, cfg))
    except NotationError as e:
        logger.debug(f"Prefix evaluation failed for {list(tokens)}: {e}")
        return Result.failure(e)
    return Result.success(stack.pop())


def eval_postfix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> Result[int]:
    """Evaluate postfix expression; failures are reported in the Result, not raised."""
    cfg = cfg or DEFAULT_CONFIG
    try:
        check_postfix(tokens, cfg)
        stack: list[int] = []
        for tok in tokens:
            if is_operator(tok):
                right = stack.pop(); left = stack.pop()
                stack.append(combine(tok, left, right, cfg))
            else:
                stack.append(_operand(tok, cfg))
    except NotationError as e:
        logger.debug(f"Postfix evaluation failed for {list(tokens)}: {e}")
        return Result.failure(e)
    return Result.success(stack.pop())


def evaluate(tokens: Sequence[str], notation: Notation | str, cfg: ArithConfig | None = None) -> Result[int]:
    notation = Notation.parse(notation)
    if notation is Notation.PREFIX:
        return eval_prefix(tokens, cfg)
    if notation is Notation.POSTFIX:
        return eval_postfix(tokens, cfg)
    raise ValueError(f"Cannot evaluate {notation.value} input")
