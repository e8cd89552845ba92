"""Entry point: python -m jscodegen SPEC [-t TARGET] [-o OUTPUT]

Reads a Swagger 2.0 document (JSON or YAML) and writes the generated client.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import TARGETS, CodegenOptions, get_code
from .errors import CodegenError
from .loader import load_spec


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="jscodegen", description="Generate a JavaScript/TypeScript client from a Swagger 2.0 spec.")
    parser.add_argument("spec", type=Path, help="Path to Swagger 2.0 spec (JSON/YAML)")
    parser.add_argument("-t", "--target", choices=[t for t in TARGETS if t != "custom"], default="typescript")
    parser.add_argument("-c", "--class-name", default="Client", help="Generated class name")
    parser.add_argument("-m", "--module-name", default=None, help="Generated module name")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")
    parser.add_argument("--no-beautify", action="store_true", help="Skip source formatting")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        spec = load_spec(args.spec)
        options = CodegenOptions(
            swagger=spec,
            class_name=args.class_name,
            module_name=args.module_name,
            beautify=not args.no_beautify,
        )
        code = get_code(options, args.target)
    except (CodegenError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(code)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(code, encoding="utf-8")
        print(f"Generated {args.output} ({len(spec.get('paths') or {})} paths)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
