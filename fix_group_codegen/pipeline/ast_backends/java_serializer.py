"""
Java AST Serializer.

Converts Java AST nodes to source code using Jinja2 templates:
- prefix: package, imports, notice, manager declaration and registrations
- class: one nested group singleton
- suffix: closing brace of the manager
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .java_ast_nodes import GroupClass, JavaFile


def java_string(value: str) -> str:
    """Quote a value as a Java string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class JavaSerializer:
    """Serializes Java AST nodes to source code."""

    TEMPLATE_LANG = "java"
    FILE_EXTENSION = "java"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self.jinja_env.filters["java_string"] = java_string

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.suffix_template = self.jinja_env.get_template(f"suffix.{self.FILE_EXTENSION}.jinja2")

    def serialize(self, file: JavaFile) -> str:
        """Serialize a complete Java file to source code."""
        parts = [self.prefix_template.render(file=file, manager=file.manager)]
        parts.extend(self.serialize_group_class(cls) for cls in file.manager.group_classes)
        parts.append(self.suffix_template.render(file=file, manager=file.manager))
        return "".join(parts)

    def serialize_group_class(self, cls: GroupClass) -> str:
        return self.class_template.render(cls=cls)
