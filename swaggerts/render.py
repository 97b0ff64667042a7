"""Render TypeScript declarations from the jinja2 templates."""

from __future__ import annotations

import jinja2

from .config import TEMPLATE_DIR
from .context_builder import (
    build_class_imports,
    build_interface_context,
    build_operation_context,
    build_options_context,
)
from .naming import comment_text
from .schema import Model, Operation, Resource


class Renderer:
    """Produces one block of text per declaration kind.

    With split_interfaces set, interface blocks carry their own imports and
    class blocks import interfaces from ./interfaces instead of inlining them.
    """

    def __init__(self, split_interfaces: bool = False, docs: bool = True) -> None:
        self.split_interfaces = split_interfaces
        self.docs = docs
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _render(self, template_name: str, **context: object) -> str:
        return self.env.get_template(template_name).render(**context)

    def render_interface(self, model: Model) -> str:
        context = build_interface_context(model, self.split_interfaces)
        return self._render("interface.ts.j2", **context)

    def render_options(self, operation: Operation) -> str:
        context = build_options_context(operation, self.split_interfaces)
        return self._render("options.ts.j2", **context)

    def render_operation(self, operation: Operation, path: str) -> str:
        context = build_operation_context(operation, path, self.docs)
        return self._render("operation.ts.j2", **context)

    def render_class(self, class_name: str, resource: Resource) -> str:
        """Render a client class extending Api for every operation of a resource."""
        declarations: list[str] = []
        imports: list[str] = []
        if self.split_interfaces:
            imports = build_class_imports(resource)
        else:
            declarations.extend(
                self.render_interface(model).rstrip("\n") for model in resource.models.values()
            )
            declarations.extend(
                self.render_options(operation).rstrip("\n")
                for _, operation in resource.operations()
            )

        methods = [
            self.render_operation(operation, path).rstrip("\n")
            for path, operation in resource.operations()
        ]

        return self._render(
            "class.ts.j2",
            class_name=class_name,
            split=self.split_interfaces,
            imports=imports,
            declarations=declarations,
            description=comment_text(resource.description) if resource.description else "",
            base_path=resource.base_path,
            methods=methods,
        )
