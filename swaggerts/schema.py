"""Typed records for Swagger 1.2 resource listings and API declarations.

Documents are decoded strictly with pydantic: a shape mismatch fails with a
SchemaDecodeError naming the offending fields instead of leaking missing
values into generated text. Unknown wire fields are ignored.
"""

from __future__ import annotations

from typing import Any, Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import GeneratorError, SchemaDecodeError

# Return type tags that are never model references
PRIMITIVE_TYPES = {"integer", "number", "string", "boolean", "void"}

ParamType = Literal["query", "path", "body", "header", "form"]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ModelProperty(_Record):
    type: str | None = None
    ref: str | None = Field(default=None, alias="$ref")
    items: ModelProperty | None = None
    description: str | None = None
    format: str | None = None
    enum: list[str] | None = None


class Model(_Record):
    id: str | None = None
    description: str | None = None
    required: list[str] = Field(default_factory=list)
    properties: dict[str, ModelProperty] = Field(default_factory=dict)


class Parameter(_Record):
    name: str
    param_type: ParamType | None = Field(default=None, alias="paramType")
    required: bool = False
    enum: list[str] | None = None
    description: str | None = None
    type: str | None = None
    format: str | None = None


class Operation(_Record):
    method: str
    nickname: str
    summary: str | None = None
    notes: str | None = None
    type: str | None = None
    items: ModelProperty | None = None
    parameters: list[Parameter] = Field(default_factory=list)


class ApiOperations(_Record):
    path: str
    description: str | None = None
    operations: list[Operation] = Field(default_factory=list)


class Resource(_Record):
    api_version: str | None = Field(default=None, alias="apiVersion")
    swagger_version: str | None = Field(default=None, alias="swaggerVersion")
    base_path: str = Field(default="", alias="basePath")
    resource_path: str | None = Field(default=None, alias="resourcePath")
    description: str | None = None
    models: dict[str, Model] = Field(default_factory=dict)
    apis: list[ApiOperations] = Field(default_factory=list)

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield (path, operation) pairs in declaration order."""
        for group in self.apis:
            for operation in group.operations:
                yield group.path, operation


class ResourceRef(_Record):
    path: str
    description: str | None = None


class SchemaIndex(_Record):
    api_version: str | None = Field(default=None, alias="apiVersion")
    swagger_version: str | None = Field(default=None, alias="swaggerVersion")
    base_path: str | None = Field(default=None, alias="basePath")
    apis: list[ResourceRef]


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def decode_index(data: Any, url: str) -> SchemaIndex:
    """Decode a resource listing document."""
    try:
        return SchemaIndex.model_validate(data)
    except ValidationError as exc:
        raise SchemaDecodeError(url, _format_errors(exc)) from exc


def decode_resource(data: Any, url: str) -> Resource:
    """Decode an API declaration document."""
    try:
        return Resource.model_validate(data)
    except ValidationError as exc:
        raise SchemaDecodeError(url, _format_errors(exc)) from exc


def merge_resources(resources: list[Resource]) -> Resource:
    """Combine resources into one; later models win on id collision.

    Fields other than `apis` and `models` are taken from the first resource.
    """
    if not resources:
        raise GeneratorError("No resources to merge")

    first, *rest = resources
    apis = list(first.apis)
    models = dict(first.models)
    for resource in rest:
        apis.extend(resource.apis)
        models.update(resource.models)

    return first.model_copy(update={"apis": apis, "models": models})


def property_refs(prop: ModelProperty) -> Iterator[str]:
    """Yield model ids a property refers to, through array items."""
    if prop.type == "array" and prop.items:
        yield from property_refs(prop.items)
    elif prop.ref:
        yield prop.ref


def operation_refs(operation: Operation) -> Iterator[str]:
    """Yield model ids named by body parameters and the return type."""
    for param in operation.parameters:
        if param.param_type == "body" and not param.enum and param.type:
            yield param.type
    yield from return_refs(operation)


def return_refs(operation: Operation) -> Iterator[str]:
    """Yield model ids named by an operation's return type."""
    if operation.type == "array":
        if operation.items:
            yield from property_refs(operation.items)
    elif operation.type and operation.type not in PRIMITIVE_TYPES:
        yield operation.type


def referenced_models(resource: Resource) -> list[str]:
    """Distinct model ids the generated class will name, in first-seen order."""
    seen: dict[str, None] = {}
    for model in resource.models.values():
        for prop in model.properties.values():
            for ref in property_refs(prop):
                seen.setdefault(ref)
    for _, operation in resource.operations():
        for ref in operation_refs(operation):
            seen.setdefault(ref)
    return list(seen)


def dangling_references(resource: Resource) -> list[str]:
    """Referenced model ids missing from the resource's models, sorted."""
    return sorted(ref for ref in referenced_models(resource) if ref not in resource.models)
