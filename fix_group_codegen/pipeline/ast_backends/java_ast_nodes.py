"""
Java AST node definitions.

These nodes represent the structure of a generated group manager source
file. They are built by the AST backend and serialized to source code by
the Java serializer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class JavaNode:
    """Base class for all Java AST nodes."""

    pass


@dataclass
class ImportDirective(JavaNode):
    """Represents an import statement."""

    qualified_name: str = ""


@dataclass
class GroupRegistration(JavaNode):
    """A putGroup(...) statement in the manager's instance initializer."""

    group_id: str = ""
    class_name: str = ""
    delimiter: str = ""


@dataclass
class GroupClass(JavaNode):
    """A nested lazily created singleton describing one repeating group."""

    name: str = ""
    base_class: str = ""
    group_id: str = ""
    delimiter: str = ""
    members: list[str] = field(default_factory=list)  # Declaration order
    is_header: bool = False


@dataclass
class GroupManagerClass(JavaNode):
    """The top level manager type of one artifact."""

    name: str = ""
    base_class: str = ""
    registrations: list[GroupRegistration] = field(default_factory=list)
    group_classes: list[GroupClass] = field(default_factory=list)


@dataclass
class JavaFile(JavaNode):
    """Represents a complete generated Java source file."""

    package: str = ""
    imports: list[ImportDirective] = field(default_factory=list)
    manager: GroupManagerClass = field(default_factory=GroupManagerClass)
