"""
Java AST-based code generation backend.

Builds the AST of one group manager artifact from the schema model.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..config import CodeGeneratorConfig
from ..naming import VersionNames, group_class_name
from ..schema_model import HEADER, RepeatingGroupBuilder, RepeatingGroupBuilderMap
from .java_ast_nodes import GroupClass, GroupManagerClass, GroupRegistration, ImportDirective, JavaFile
from .java_serializer import JavaSerializer


class GroupClassEmitter:
    """Builds the nested singleton type of a repeating group."""

    def __init__(self, base_class: str):
        self.base_class = base_class

    def emit(self, scope: str, group: RepeatingGroupBuilder) -> GroupClass:
        """
        Build a group class node.

        Args:
            scope: Message type owning the group, or HEADER
            group: The group definition

        Returns:
            GroupClass with members in declaration order
        """
        return GroupClass(
            name=group_class_name(scope, group.group_id),
            base_class=self.base_class,
            group_id=group.group_id,
            delimiter=group.delimiter,
            members=list(group.members),
            is_header=scope == HEADER,
        )


class JavaAstBackend:
    """Java group manager backend using custom AST."""

    def __init__(self, version: str, group_map: RepeatingGroupBuilderMap, config: CodeGeneratorConfig):
        self.names = VersionNames(version)
        self.group_map = group_map
        self.config = config
        self.group_emitter = GroupClassEmitter(config.repeating_group_base)
        self.serializer = JavaSerializer()

    def build(self, msg_type: str) -> JavaFile:
        """Build the AST of the manager for one message type."""
        file = JavaFile()
        file.package = self.names.namespace(self.config.package_root)
        file.imports = [
            ImportDirective(f"{self.config.package_root}.{self.config.group_manager_base}"),
            ImportDirective(f"{self.config.package_root}.{self.config.repeating_group_base}"),
        ]

        manager = GroupManagerClass(
            name=self.names.artifact_name(msg_type),
            base_class=self.config.group_manager_base,
        )

        header_groups = self.group_map.header_groups()
        native_groups = self.group_map.get_groups(msg_type) if msg_type != HEADER else {}

        # Header groups are registered and defined in every manager
        manager.registrations.extend(self._registrations(HEADER, header_groups))
        manager.registrations.extend(self._registrations(msg_type, native_groups))

        manager.group_classes.extend(self._group_classes(HEADER, header_groups))
        manager.group_classes.extend(self._group_classes(msg_type, native_groups))

        file.manager = manager
        return file

    def generate(self, msg_type: str) -> str:
        """Generate the Java source of the manager for one message type."""
        return self.serializer.serialize(self.build(msg_type))

    def _registrations(self, scope: str, groups: Mapping[str, RepeatingGroupBuilder]) -> list[GroupRegistration]:
        return [
            GroupRegistration(
                group_id=group.group_id,
                class_name=group_class_name(scope, group.group_id),
                delimiter=group.delimiter,
            )
            for group in groups.values()
        ]

    def _group_classes(self, scope: str, groups: Mapping[str, RepeatingGroupBuilder]) -> list[GroupClass]:
        return [self.group_emitter.emit(scope, group) for group in groups.values()]
