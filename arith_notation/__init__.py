from .config import ArithConfig, DEFAULT_CONFIG
from .errors import (
    ErrorKind, NotationError, MalformedTokenError, StructuralError,
    DivisionByZeroError, UnsupportedOperatorError, IntegerOverflowError,
)
from .result import Result
from .grammar import Notation, TOKENS, OPS, ARITY, TOKEN_NAMES, is_operator, is_operand, parse_operand
from .validator import is_valid, is_valid_prefix, is_valid_postfix, check, check_prefix, check_postfix
from .compiler import combine, evaluate, eval_prefix, eval_postfix
from .converter import convert, prefix_to_postfix, postfix_to_prefix, prefix_to_infix, postfix_to_infix
from .utils import count_terms, calc_tree_depth

__all__ = [
    'ArithConfig', 'DEFAULT_CONFIG',
    'ErrorKind', 'NotationError', 'MalformedTokenError', 'StructuralError',
    'DivisionByZeroError', 'UnsupportedOperatorError', 'IntegerOverflowError',
    'Result',
    'Notation', 'TOKENS', 'OPS', 'ARITY', 'TOKEN_NAMES', 'is_operator', 'is_operand', 'parse_operand',
    'is_valid', 'is_valid_prefix', 'is_valid_postfix', 'check', 'check_prefix', 'check_postfix',
    'combine', 'evaluate', 'eval_prefix', 'eval_postfix',
    'convert', 'prefix_to_postfix', 'postfix_to_prefix', 'prefix_to_infix', 'postfix_to_infix',
    'count_terms', 'calc_tree_depth',
]
