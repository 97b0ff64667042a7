"""Build jinja2 template contexts from decoded schema records.

Each declaration kind gets a plain dict context; names and types come from
naming.py so the templates only arrange text.
"""

from __future__ import annotations

from typing import Any, Iterable

from .naming import (
    UNKNOWN,
    comment_text,
    interface_name,
    method_name,
    options_interface_name,
    parameter_type,
    property_key,
    property_type,
    quote_literal,
    return_type,
)
from .schema import Model, Operation, Parameter, Resource, property_refs, return_refs

# Parameter location -> options field, in emission order
_PARAM_GROUPS: list[tuple[str, str]] = [
    ("body", "body"),
    ("query", "query"),
    ("path", "params"),
    ("header", "headerParams"),
    ("form", "form"),
]


def _unique(names: Iterable[str]) -> list[str]:
    return [name for name in dict.fromkeys(names) if name != UNKNOWN]


def _doc_text(text: str) -> str:
    return comment_text(text).replace("*/", "*\\/")


def _bracket(name: str, optional: bool) -> str:
    return f"[{name}]" if optional else name


def build_interface_context(model: Model, split: bool = False) -> dict[str, Any]:
    """Context for interface.ts.j2."""
    fields = [
        {
            "name": property_key(name),
            "type": property_type(prop),
            "optional": name not in model.required,
            "description": comment_text(prop.description) if prop.description else "",
        }
        for name, prop in model.properties.items()
    ]

    imports: list[str] = []
    if split:
        imports = _unique(
            interface_name(ref)
            for prop in model.properties.values()
            for ref in property_refs(prop)
            if ref != model.id
        )

    return {"name": interface_name(model.id), "imports": imports, "fields": fields}


def _param_context(param: Parameter) -> dict[str, Any]:
    return {
        "name": property_key(param.name),
        "raw_name": param.name,
        "type": parameter_type(param),
        "optional": not param.required,
        "description": comment_text(param.description) if param.description else "",
        "enum": param.enum or [],
    }


def group_parameters(operation: Operation) -> list[dict[str, Any]]:
    """Partition parameters by location into options fields.

    A group field is required when any of its parameters is required.
    """
    groups = []
    for location, field in _PARAM_GROUPS:
        params = [param for param in operation.parameters if param.param_type == location]
        if not params:
            continue
        groups.append({
            "field": field,
            "optional": not any(param.required for param in params),
            "params": [_param_context(param) for param in params],
        })
    return groups


def build_options_context(operation: Operation, split: bool = False) -> dict[str, Any]:
    """Context for options.ts.j2."""
    imports: list[str] = []
    if split:
        imports = _unique(
            interface_name(param.type)
            for param in operation.parameters
            if param.param_type == "body" and not param.enum
        )

    return {
        "name": options_interface_name(operation),
        "split": split,
        "imports": imports,
        "groups": group_parameters(operation),
    }


def _doc_lines(
    operation: Operation,
    options_name: str,
    options_optional: bool,
    result: str,
) -> list[str]:
    lines: list[str] = []
    if operation.summary:
        lines.append(_doc_text(operation.summary))
    if operation.notes and operation.notes != operation.summary:
        lines.append(_doc_text(operation.notes))

    groups = group_parameters(operation)
    if not lines and not groups:
        return []
    if lines:
        lines.append("")

    lines.append(f"@param {{{options_name}}} {_bracket('options', options_optional)}")
    for group in groups:
        key = f"options.{group['field']}"
        lines.append(f"@param {{object}} {_bracket(key, group['optional'])}")
        for param in group["params"]:
            line = f"@param {{{param['type']}}} {_bracket(key + '.' + param['raw_name'], param['optional'])}"
            description = _doc_text(param["description"])
            if param["enum"]:
                values = ", ".join(quote_literal(value) for value in param["enum"])
                description = f"{description} One of: {values}".strip()
            if description:
                line += f" - {description}"
            lines.append(line)
    lines.append(f"@returns {{Promise<{result}>}}")
    return lines


def build_operation_context(
    operation: Operation,
    path: str,
    docs: bool = True,
) -> dict[str, Any]:
    """Context for operation.ts.j2.

    The options argument is optional only when no parameter is required.
    """
    options_name = options_interface_name(operation)
    options_optional = not any(param.required for param in operation.parameters)
    result = return_type(operation)

    return {
        "method_name": method_name(operation),
        "options_name": options_name,
        "options_optional": options_optional,
        "return_type": result,
        "http_method": operation.method.upper(),
        "path": path,
        "doc": _doc_lines(operation, options_name, options_optional, result) if docs else [],
    }


def build_class_imports(resource: Resource) -> list[str]:
    """Interfaces a split-mode class file imports from ./interfaces."""
    names: list[str] = []
    for _, operation in resource.operations():
        names.append(options_interface_name(operation))
        names.extend(interface_name(ref) for ref in return_refs(operation))
    return _unique(names)
