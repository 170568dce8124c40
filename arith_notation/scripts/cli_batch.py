from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from arith_notation import ArithConfig
from arith_notation.config import INT_DTYPES
from arith_notation.report import build_report, summarize


def load_expressions(path: Path) -> list[list[str]]:
    """JSON 파일: 토큰 리스트의 리스트 (예: [["+", "3", "4"], ["7"]])"""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, list) or not all(isinstance(e, list) for e in data):
        raise ValueError(f"{path}: expected a JSON array of token arrays")
    for i, expr in enumerate(data):
        if not all(isinstance(tok, str) for tok in expr):
            raise ValueError(f"{path}: expression {i} has non-string tokens")
    return data


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Batch report over a JSON file of expressions")
    p.add_argument("--input", required=True)
    p.add_argument("--notation", default="prefix", choices=["prefix", "postfix"])
    p.add_argument("--int_dtype", default="int32", choices=list(INT_DTYPES))
    p.add_argument("--no_wrap", action="store_true")
    p.add_argument("--out", default="notation_report.csv")
    p.add_argument("--summary", default=None, help="optional JSON path for summary stats")
    p.add_argument("--log_level", default="INFO")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        expressions = load_expressions(Path(args.input))
    except (OSError, ValueError) as e:
        logging.error(f"[ERROR] 입력 로딩 실패: {e}")
        return 1

    cfg = ArithConfig(int_dtype=args.int_dtype, wrap_overflow=not args.no_wrap)
    report = build_report(expressions, args.notation, cfg)
    stats = summarize(report)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    report.to_csv(out, index=False)

    print(f"📊 {stats['total']} expressions: {stats['valid']} valid, {stats['invalid']} invalid")
    for kind, n in stats["errors"].items():
        print(f"   - {kind}: {n}")
    if stats["evaluated"]:
        print(f"   values: min={stats['value_min']} max={stats['value_max']} mean={stats['value_mean']:.4f}")
    print(f"✅ 리포트 저장 → {out}")

    if args.summary:
        with open(args.summary, "w") as f:
            json.dump(stats, f, indent=2)

    return 0


if __name__ == "__main__":
    sys.exit(main())
