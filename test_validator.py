#!/usr/bin/env python3
"""
검증기 테스트: prefix/postfix 구조 검증
"""

import pytest

from arith_notation import (
    ArithConfig, ErrorKind, MalformedTokenError, StructuralError,
    check_postfix, check_prefix, is_valid, is_valid_postfix, is_valid_prefix,
)
from arith_notation.utils import count_terms


def test_simple_expressions():
    assert is_valid_prefix(["+", "3", "4"])
    assert is_valid_postfix(["3", "4", "+"])
    assert is_valid_prefix(["*", "+", "1", "2", "3"])
    assert is_valid_postfix(["1", "2", "+", "3", "*"])
    assert is_valid_prefix(["-", "-5", "-3"])


def test_empty_sequence_is_invalid():
    assert not is_valid_prefix([])
    assert not is_valid_postfix([])


def test_single_operand_is_valid():
    assert is_valid_prefix(["7"])
    assert is_valid_postfix(["7"])


def test_bare_operator_is_invalid():
    for op in ["+", "-", "*", "/", "^"]:
        assert not is_valid_prefix([op])
        assert not is_valid_postfix([op])


def test_postfix_leftover_values():
    # 카운터가 2로 끝남
    assert not is_valid_postfix(["3", "4", "+", "5"])
    with pytest.raises(StructuralError):
        check_postfix(["3", "4", "+", "5"])


def test_postfix_underflow_mid_scan():
    # 카운터만 보면 1로 끝나지만 연산자에서 스택이 부족
    assert not is_valid_postfix(["+", "3", "4"])
    with pytest.raises(StructuralError) as exc:
        check_postfix(["+", "3", "4"])
    assert exc.value.position == 0


def test_wrong_notation():
    assert not is_valid_prefix(["3", "4", "+"])
    assert not is_valid_postfix(["+", "3", "4"])


def test_malformed_tokens():
    for bad in ["x", "3.5", "+3", "--3", "", " 3", "٣", "(", "%"]:
        assert not is_valid_prefix(["+", bad, "1"]), bad
        assert not is_valid_postfix(["1", bad, "+"]), bad
    with pytest.raises(MalformedTokenError) as exc:
        check_prefix(["+", "a", "1"])
    assert exc.value.kind is ErrorKind.MALFORMED_TOKEN
    assert exc.value.position == 1


def test_non_string_tokens_are_malformed():
    assert not is_valid_prefix(["+", 3, 4])
    assert not is_valid_postfix([3, 4, "+"])


def test_operand_out_of_range():
    assert is_valid_postfix(["2147483647"])
    assert not is_valid_postfix(["2147483648"])
    assert is_valid_prefix(["-2147483648"])
    assert not is_valid_prefix(["-2147483649"])
    assert is_valid_postfix(["2147483648"], ArithConfig(int_dtype="int64"))
    assert not is_valid_postfix(["128"], ArithConfig(int_dtype="int8"))


def test_huge_literal_is_malformed():
    huge = "9" * 5000
    assert not is_valid_postfix([huge])
    assert not is_valid_prefix(["+", huge, "1"])
    with pytest.raises(MalformedTokenError):
        check_postfix([huge])
    # 선행 0은 자릿수 제한에 포함되지 않음
    assert is_valid_postfix(["0" * 5000 + "7"])
    assert is_valid_prefix(["-" + "0" * 5000 + "7"])


def test_unknown_int_dtype_rejected():
    with pytest.raises(ValueError):
        ArithConfig(int_dtype="float32")
    with pytest.raises(ValueError):
        ArithConfig(int_dtype="uint32")

def test_division_by_zero_is_structurally_valid():
    assert is_valid_prefix(["/", "6", "0"])
    assert is_valid_postfix(["6", "0", "/"])


def test_power_operator_is_recognized():
    assert is_valid_prefix(["^", "2", "3"])
    assert is_valid_postfix(["2", "3", "^"])


def test_validation_is_idempotent():
    tokens = ["*", "+", "1", "2", "3"]
    assert is_valid_prefix(tokens) == is_valid_prefix(tokens)
    bad = ["3", "4", "+", "5"]
    assert is_valid_postfix(bad) == is_valid_postfix(bad)
    assert tokens == ["*", "+", "1", "2", "3"]


def test_postfix_counter_matches_term_counts():
    for tokens in (["7"], ["3", "4", "+"], ["1", "2", "+", "3", "4", "-", "*"]):
        assert is_valid_postfix(tokens)
        operands, operators = count_terms(tokens)
        assert operands - operators == 1
        assert len(tokens) == 2 * operators + 1


def test_dispatch_by_name():
    assert is_valid(("+", "1", "2"), "PREFIX")
    assert is_valid(("1", "2", "+"), "postfix")
    with pytest.raises(ValueError):
        is_valid(["1"], "infix")
    with pytest.raises(ValueError):
        is_valid(["1"], "polish")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
