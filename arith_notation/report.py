"""
Batch report: 여러 표현식을 한 번에 검증/평가/변환해 DataFrame으로 정리
"""

from __future__ import annotations
import logging
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .compiler import evaluate
from .config import ArithConfig
from .converter import convert
from .errors import ErrorKind
from .grammar import Notation
from .utils import calc_tree_depth, count_terms

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "expression", "valid", "value", "error", "operands", "operators",
    "depth", "prefix", "postfix", "infix",
]


def _joined(tokens: Sequence[str] | None) -> str | None:
    return None if tokens is None else " ".join(map(str, tokens))


def _row(tokens: Sequence[str], notation: Notation, cfg: ArithConfig | None) -> dict:
    res = evaluate(tokens, notation, cfg)
    operands, operators = count_terms(tokens, cfg)
    # 구조적으로 유효하면 평가 실패(0으로 나누기 등)여도 변환은 가능
    valid = res.kind not in (ErrorKind.MALFORMED_TOKEN, ErrorKind.STRUCTURAL)
    row = {
        "expression": _joined(tokens),
        "valid": valid,
        "value": res.value,
        "error": None if res.ok else res.kind.value,
        "operands": operands,
        "operators": operators,
        "depth": calc_tree_depth(tokens, notation, cfg) if valid else None,
    }
    for dst in (Notation.PREFIX, Notation.POSTFIX, Notation.INFIX):
        row[dst.value] = _joined(convert(tokens, notation, dst, cfg).value) if valid else None
    return row


def build_report(expressions: Iterable[Sequence[str]], notation: Notation | str,
                 cfg: ArithConfig | None = None) -> pd.DataFrame:
    notation = Notation.parse(notation)
    rows = [_row(tokens, notation, cfg) for tokens in expressions]
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    # float 경유 시 int64 정밀도 손실 방지
    for col in ("value", "depth"):
        df[col] = pd.array([r[col] for r in rows], dtype="Int64")
    # 문자열 컬럼은 object로 유지해 None 보존
    for col in ("error", "prefix", "postfix", "infix"):
        df[col] = pd.Series([r[col] for r in rows], index=df.index, dtype=object)
    df["valid"] = df["valid"].astype(bool)
    logger.info(f"Report built: {len(df)} {notation.value} expressions, {int(df['valid'].sum())} valid")
    return df


def summarize(report: pd.DataFrame) -> dict:
    """리포트 요약 통계"""
    values = report["value"].dropna().to_numpy(dtype=np.int64)
    errors = report["error"].dropna().value_counts()
    return {
        "total": int(len(report)),
        "valid": int(report["valid"].sum()),
        "invalid": int((~report["valid"]).sum()),
        "evaluated": int(values.size),
        "errors": {str(k): int(v) for k, v in errors.items()},
        "value_min": int(np.min(values)) if values.size else None,
        "value_max": int(np.max(values)) if values.size else None,
        "value_mean": float(np.mean(values)) if values.size else None,
    }
