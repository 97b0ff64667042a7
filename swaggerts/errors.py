"""Error types raised by the generator.

Network (httpx) and filesystem (OSError) failures are not wrapped; they
propagate to the CLI unchanged.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for generator failures."""


class SchemaDecodeError(GeneratorError):
    """A fetched document is not JSON or does not have the expected shape."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url


class DanglingReferenceError(GeneratorError):
    """Generated text would name models the resource does not define."""

    def __init__(self, name: str, missing: list[str]) -> None:
        super().__init__(f"{name}: unresolved model references: {', '.join(missing)}")
        self.name = name
        self.missing = missing
