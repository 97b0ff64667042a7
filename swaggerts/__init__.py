from .cache import CachePolicy, JsonCache
from .codegen import WritePolicy, generate_apis
from .config import GenerateOptions
from .errors import DanglingReferenceError, GeneratorError, SchemaDecodeError
from .loader import load
from .render import Renderer
from .schema import Resource, SchemaIndex, merge_resources

__all__ = [
    "CachePolicy",
    "JsonCache",
    "WritePolicy",
    "generate_apis",
    "GenerateOptions",
    "DanglingReferenceError",
    "GeneratorError",
    "SchemaDecodeError",
    "load",
    "Renderer",
    "Resource",
    "SchemaIndex",
    "merge_resources",
]
