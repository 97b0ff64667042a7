"""Entry point: python -m swaggerts --url <resource listing URL>

Fetches a Swagger 1.2 schema and writes TypeScript clients under --dest.
"""

from __future__ import annotations

import argparse
import sys

import httpx

from .codegen import generate_apis
from .config import DEFAULT_CACHE_DIR, DEFAULT_TIMEOUT, GenerateOptions
from .errors import GeneratorError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swaggerts",
        description="Generate TypeScript API clients from a Swagger 1.2 schema.",
    )
    parser.add_argument("--url", required=True, help="Api url")
    parser.add_argument(
        "--splitInterfaces",
        dest="split_interfaces",
        action="store_true",
        help="Split interfaces into separate files",
    )
    parser.add_argument(
        "--groupClass",
        dest="group_class",
        default="",
        help="Group apis in single class",
    )
    parser.add_argument("--dest", default="./generated", help="Destination path")
    parser.add_argument(
        "--cache-dir",
        default=str(DEFAULT_CACHE_DIR),
        help="Directory for cached schema documents",
    )
    parser.add_argument(
        "--no-docs",
        dest="docs",
        action="store_false",
        help="Omit JSDoc blocks on generated methods",
    )
    parser.add_argument(
        "--strict-refs",
        action="store_true",
        help="Fail when a model reference does not resolve",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    options = GenerateOptions.from_args(args)

    try:
        generate_apis(options)
    except (GeneratorError, httpx.HTTPError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
