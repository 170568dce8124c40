from __future__ import annotations
from typing import Sequence

from .config import ArithConfig
from .grammar import ARITY, Notation, is_operand, is_operator
from .validator import check


def count_terms(tokens: Sequence[str], cfg: ArithConfig | None = None) -> tuple[int, int]:
    """(피연산자 수, 연산자 수); 잘못된 토큰은 세지 않음"""
    operands = sum(1 for tok in tokens if is_operand(tok, cfg))
    operators = sum(1 for tok in tokens if is_operator(tok))
    return operands, operators


def calc_tree_depth(tokens: Sequence[str], notation: Notation | str,
                    cfg: ArithConfig | None = None) -> int:
    """
    prefix/postfix 토큰 리스트의 최대 트리 깊이 계산 (피연산자 하나 = 1)
    """
    notation = Notation.parse(notation)
    check(tokens, notation, cfg)
    stack: list[int] = []
    for tok in (reversed(tokens) if notation is Notation.PREFIX else tokens):
        if is_operator(tok):
            depths = [stack.pop() for _ in range(ARITY[tok])]
            stack.append(max(depths) + 1)
        else:
            stack.append(1)
    return stack.pop()
