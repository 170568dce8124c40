"""Structural validation of prefix/postfix token sequences.

Validation only tracks stack depth; no arithmetic is performed here, so an
expression such as ``/ 6 0`` is well-formed and its division by zero is left
to the evaluator.
"""

from __future__ import annotations
import logging
from typing import Sequence

from .config import ArithConfig
from .errors import MalformedTokenError, NotationError, StructuralError
from .grammar import ARITY, Notation, is_operand, is_operator

logger = logging.getLogger(__name__)


def _malformed(tok, pos: int) -> MalformedTokenError:
    return MalformedTokenError(f"Malformed token {tok!r} at position {pos}", pos)


def check_postfix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> None:
    """postfix 구조 검증; 실패 시 MalformedTokenError / StructuralError"""
    count = 0
    for pos, tok in enumerate(tokens):
        if is_operand(tok, cfg):
            count += 1
        elif is_operator(tok):
            arity = ARITY[tok]
            if count < arity:
                raise StructuralError(f"Stack underflow at operator {tok!r} (position {pos})", pos)
            count -= arity - 1
        else:
            raise _malformed(tok, pos)
    if count != 1:
        raise StructuralError(f"Expected exactly one value after scan, got {count}")


def check_prefix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> None:
    """prefix 구조 검증 (오른쪽 -> 왼쪽 스캔)"""
    depth = 0
    for pos in range(len(tokens) - 1, -1, -1):
        tok = tokens[pos]
        if is_operator(tok):
            arity = ARITY[tok]
            if depth < arity:
                raise StructuralError(f"Stack underflow at operator {tok!r} (position {pos})", pos)
            depth -= arity - 1
        elif is_operand(tok, cfg):
            depth += 1
        else:
            raise _malformed(tok, pos)
    if depth != 1:
        raise StructuralError(f"Expected exactly one value after scan, got {depth}")


_CHECKS = {
    Notation.PREFIX: check_prefix,
    Notation.POSTFIX: check_postfix,
}


def check(tokens: Sequence[str], notation: Notation | str, cfg: ArithConfig | None = None) -> None:
    notation = Notation.parse(notation)
    if notation not in _CHECKS:
        raise ValueError(f"Cannot validate {notation.value} input")
    _CHECKS[notation](tokens, cfg)


def is_valid(tokens: Sequence[str], notation: Notation | str, cfg: ArithConfig | None = None) -> bool:
    notation = Notation.parse(notation)
    try:
        check(tokens, notation, cfg)
    except NotationError as e:
        logger.debug(f"Rejected {notation.value} expression {list(tokens)}: {e}")
        return False
    return True


def is_valid_prefix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> bool:
    return is_valid(tokens, Notation.PREFIX, cfg)


def is_valid_postfix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> bool:
    return is_valid(tokens, Notation.POSTFIX, cfg)
