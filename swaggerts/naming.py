"""Map schema identifiers and type tags to TypeScript names and types.

  resourcePath /pets/{petId}/photos     -> class PetsPhotos
  model Pet                             -> interface IPet
  nickname getPet                       -> method getPet, options IGetPetOptions
  integer / number                      -> number
  array of $ref Pet                     -> IPet[]
  enum ["a", "b"]                       -> 'a' | 'b'
"""

from __future__ import annotations

import re

from .schema import PRIMITIVE_TYPES, ModelProperty, Operation, Parameter, Resource

UNKNOWN = "unknown"

_PRIMITIVE_MAP: dict[str, str] = {
    "integer": "number",
    "number": "number",
    "string": "string",
}

_WORD = re.compile(r"\w\S*")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]")
_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def to_title_case(text: str) -> str:
    """Upper-case the first character of each word, lower-case the rest."""
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def un_title_case(text: str) -> str:
    """Lower-case the first character."""
    return text[:1].lower() + text[1:]


def resource_name(resource: Resource) -> str:
    """Build a class name from the resource's own path.

    Empty segments, the version segment and {param} placeholders are
    dropped; the rest are title-cased and joined.
    """
    segments = [
        segment
        for segment in (resource.resource_path or "").split("/")
        if segment and segment != resource.api_version and not segment.startswith("{")
    ]
    name = "".join(to_title_case(segment) for segment in segments)
    return _NON_IDENTIFIER.sub("", name) or "Root"


def interface_name(model_id: str | None) -> str:
    return f"I{model_id}" if model_id else UNKNOWN


def options_interface_name(operation: Operation) -> str:
    nickname = operation.nickname
    return f"I{nickname[:1].upper()}{nickname[1:]}Options"


def method_name(operation: Operation) -> str:
    return un_title_case(operation.nickname)


def map_type(tag: str | None) -> str:
    """Map a primitive tag; unrecognised tags pass through literally."""
    if not tag:
        return UNKNOWN
    return _PRIMITIVE_MAP.get(tag, tag)


def property_type(prop: ModelProperty) -> str:
    if prop.type == "array" and prop.items:
        return property_type(prop.items) + "[]"
    if prop.ref:
        return interface_name(prop.ref)
    return map_type(prop.type)


def quote_literal(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def literal_union(values: list[str]) -> str:
    return " | ".join(quote_literal(value) for value in values)


def parameter_type(param: Parameter) -> str:
    if param.enum:
        return literal_union(param.enum)
    if param.param_type == "body":
        return interface_name(param.type)
    return map_type(param.type)


def return_type(operation: Operation) -> str:
    """TypeScript type of the value an operation resolves to."""
    if operation.type == "array":
        if operation.items:
            return property_type(operation.items) + "[]"
        return f"{UNKNOWN}[]"
    if operation.type in PRIMITIVE_TYPES:
        return map_type(operation.type)
    return interface_name(operation.type)


def property_key(name: str) -> str:
    """Quote member names that are not plain identifiers."""
    if _IDENTIFIER.fullmatch(name):
        return name
    return quote_literal(name)


def comment_text(text: str) -> str:
    """Collapse whitespace so text fits on one comment line."""
    return " ".join(text.split())
