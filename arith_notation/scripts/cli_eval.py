from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from arith_notation import ArithConfig, Notation, convert, evaluate
from arith_notation.config import INT_DTYPES
from arith_notation.errors import ErrorKind
from arith_notation.utils import calc_tree_depth


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Validate, evaluate and convert a prefix/postfix expression")
    p.add_argument("tokens", nargs="+", help="expression tokens, e.g. + 3 4")
    p.add_argument("--notation", default="prefix", choices=["prefix", "postfix"])
    p.add_argument("--to", default=None, choices=["prefix", "postfix", "infix"])
    p.add_argument("--int_dtype", default="int32", choices=list(INT_DTYPES))
    p.add_argument("--no_wrap", action="store_true", help="fail on integer overflow instead of wrapping")
    p.add_argument("--outdir", default=None)
    p.add_argument("--log_level", default="WARNING")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    cfg = ArithConfig(int_dtype=args.int_dtype, wrap_overflow=not args.no_wrap)
    notation = Notation.parse(args.notation)
    tokens = args.tokens

    res = evaluate(tokens, notation, cfg)
    valid = res.kind not in (ErrorKind.MALFORMED_TOKEN, ErrorKind.STRUCTURAL)

    print(f"🧮 {notation.value}: {' '.join(tokens)}")
    if not valid:
        print(f"❌ invalid {notation.value} expression: {res.error}")
    elif res.ok:
        print(f"✅ value: {res.value}")
        print(f"📏 tree depth: {calc_tree_depth(tokens, notation, cfg)}")
    else:
        print(f"⚠️ evaluation failed ({res.kind.value}): {res.error}")

    targets = [Notation.parse(args.to)] if args.to else [n for n in Notation if n is not notation]
    conversions = {}
    if valid:
        for dst in targets:
            out = convert(tokens, notation, dst, cfg).unwrap()
            conversions[dst.value] = out
            print(f"🔄 {dst.value}: {' '.join(out)}")

    if args.outdir:
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        result_data = {
            "tokens": tokens,
            "notation": notation.value,
            "valid": valid,
            "value": res.value,
            "error": None if res.ok else res.kind.value,
            "message": None if res.ok else str(res.error),
            "conversions": conversions,
        }
        with open(outdir / "result.json", "w") as f:
            json.dump(result_data, f, indent=2)
        print(f"✅ 결과 저장 → {outdir / 'result.json'}")

    return 0 if res.ok else 1


if __name__ == "__main__":
    sys.exit(main())
