"""Run configuration for the generator."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent / "templates"
BASE_TEMPLATE = TEMPLATE_DIR / "Api.ts"

DEFAULT_DEST = Path("generated")
DEFAULT_CACHE_DIR = Path("cache")
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class GenerateOptions:
    url: str
    dest: Path = DEFAULT_DEST
    split_interfaces: bool = False
    group_class: str = ""
    cache_dir: Path = DEFAULT_CACHE_DIR
    docs: bool = True
    strict_refs: bool = False
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> GenerateOptions:
        """Build options from parsed command line arguments."""
        return cls(
            url=args.url,
            dest=Path(args.dest),
            split_interfaces=args.split_interfaces,
            group_class=args.group_class,
            cache_dir=Path(args.cache_dir),
            docs=args.docs,
            strict_refs=args.strict_refs,
            timeout=args.timeout,
        )
