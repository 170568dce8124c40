from __future__ import annotations
import logging
from typing import Callable, List, Sequence

from .config import ArithConfig
from .errors import NotationError
from .grammar import Notation, is_operator
from .result import Result
from .validator import check, check_postfix, check_prefix

logger = logging.getLogger(__name__)

Render = Callable[[str, List[str], List[str]], List[str]]


def _rewrite(tokens: Sequence[str], reverse: bool, render: Render) -> list[str]:
    """스택 기반 재작성: 연산자마다 두 부분식을 pop 순서대로 render에 전달"""
    stack: list[list[str]] = []
    for tok in (reversed(tokens) if reverse else tokens):
        if is_operator(tok):
            assert len(stack) >= 2, f"stack underflow at {tok!r} after validation"
            first = stack.pop(); second = stack.pop()
            stack.append(render(tok, first, second))
        else:
            stack.append([tok])
    assert len(stack) == 1, "dangling values after validation"
    return stack.pop()


def _convert(tokens, checker, reverse: bool, render: Render, cfg) -> Result[list[str]]:
    try:
        checker(tokens, cfg)
    except NotationError as e:
        logger.debug(f"Conversion rejected {list(tokens)}: {e}")
        return Result.failure(e)
    return Result.success(_rewrite(tokens, reverse, render))


def prefix_to_postfix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> Result[list[str]]:
    return _convert(tokens, check_prefix, True,
                    lambda op, first, second: first + second + [op], cfg)


def postfix_to_prefix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> Result[list[str]]:
    return _convert(tokens, check_postfix, False,
                    lambda op, first, second: [op] + second + first, cfg)


def prefix_to_infix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> Result[list[str]]:
    return _convert(tokens, check_prefix, True,
                    lambda op, first, second: ["("] + first + [op] + second + [")"], cfg)


def postfix_to_infix(tokens: Sequence[str], cfg: ArithConfig | None = None) -> Result[list[str]]:
    return _convert(tokens, check_postfix, False,
                    lambda op, first, second: ["("] + second + [op] + first + [")"], cfg)


_CONVERTERS = {
    (Notation.PREFIX, Notation.POSTFIX): prefix_to_postfix,
    (Notation.POSTFIX, Notation.PREFIX): postfix_to_prefix,
    (Notation.PREFIX, Notation.INFIX): prefix_to_infix,
    (Notation.POSTFIX, Notation.INFIX): postfix_to_infix,
}


def convert(tokens: Sequence[str], src: Notation | str, dst: Notation | str,
            cfg: ArithConfig | None = None) -> Result[list[str]]:
    """src 표기법의 토큰 시퀀스를 dst 표기법으로 변환"""
    src, dst = Notation.parse(src), Notation.parse(dst)
    if src is Notation.INFIX:
        raise ValueError("Infix input is not supported")
    if src is dst:
        try:
            check(tokens, src, cfg)
        except NotationError as e:
            return Result.failure(e)
        return Result.success(list(tokens))
    return _CONVERTERS[(src, dst)](tokens, cfg)
