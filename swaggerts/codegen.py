"""Render resources and write the generated TypeScript tree.

Output layout under dest:
  Api.ts                      copied base class
  <ResourceName>.ts           one class per resource, or <groupClass>.ts
  interfaces/<IName>.ts       per model and per operation options (split mode)
"""

from __future__ import annotations

import enum
import shutil
import sys
from pathlib import Path

import httpx

from .cache import JsonCache
from .config import BASE_TEMPLATE, GenerateOptions
from .errors import DanglingReferenceError
from .loader import iter_resources
from .naming import interface_name, options_interface_name, resource_name
from .render import Renderer
from .schema import Resource, dangling_references, merge_resources


class WritePolicy(str, enum.Enum):
    OVERWRITE_ALWAYS = "overwrite-always"


WRITE_POLICY = WritePolicy.OVERWRITE_ALWAYS


def write_text(path: Path, text: str) -> Path:
    """Write text, creating parent directories and replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def copy_base_template(dest: Path) -> Path:
    """Copy the Api base class every generated class extends."""
    dest.mkdir(parents=True, exist_ok=True)
    target = dest / BASE_TEMPLATE.name
    shutil.copyfile(BASE_TEMPLATE, target)
    return target


def check_references(name: str, resource: Resource, strict: bool = False) -> list[str]:
    """Report model references the resource does not define.

    Missing ids are warned about and emitted as-is unless strict is set.
    """
    missing = dangling_references(resource)
    if missing:
        if strict:
            raise DanglingReferenceError(name, missing)
        print(
            f"warning: {name}: unresolved model references: {', '.join(missing)}",
            file=sys.stderr,
        )
    return missing


def _write_interfaces(renderer: Renderer, resource: Resource, directory: Path) -> list[Path]:
    written = []
    for model in resource.models.values():
        path = directory / f"{interface_name(model.id)}.ts"
        written.append(write_text(path, renderer.render_interface(model)))
    for _, operation in resource.operations():
        path = directory / f"{options_interface_name(operation)}.ts"
        written.append(write_text(path, renderer.render_options(operation)))
    return written


def generate_apis(
    options: GenerateOptions,
    client: httpx.Client | None = None,
    cache: JsonCache | None = None,
) -> list[Path]:
    """Fetch the schema at options.url and write the generated client tree."""
    if client is None:
        with httpx.Client(timeout=options.timeout, follow_redirects=True) as owned:
            return generate_apis(options, owned, cache)

    cache = cache or JsonCache(options.cache_dir)
    renderer = Renderer(options.split_interfaces, options.docs)
    dest = Path(options.dest)
    interfaces_dir = dest / "interfaces"

    dest.mkdir(parents=True, exist_ok=True)
    if options.split_interfaces:
        interfaces_dir.mkdir(parents=True, exist_ok=True)

    written = [copy_base_template(dest)]
    resources: list[Resource] = []

    for resource in iter_resources(options.url, cache, client):
        resources.append(resource)

        if not options.group_class:
            name = resource_name(resource)
            check_references(name, resource, options.strict_refs)
            written.append(write_text(dest / f"{name}.ts", renderer.render_class(name, resource)))

        if options.split_interfaces:
            written.extend(_write_interfaces(renderer, resource, interfaces_dir))

    if options.group_class:
        merged = merge_resources(resources)
        check_references(options.group_class, merged, options.strict_refs)
        text = renderer.render_class(options.group_class, merged)
        written.append(write_text(dest / f"{options.group_class}.ts", text))

    print(f"Generated {len(written)} files in {dest}")
    return written
