"""
Schema model node definitions.

These nodes describe the repeating groups of a FIX protocol version as
produced by the dictionary parser. They are built once and only read
during code generation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

# Pseudo message type holding the groups of the standard header
HEADER = "HEADER"


@dataclass(frozen=True)
class RepeatingGroupBuilder:
    """A single repeating group definition."""

    group_id: str = ""
    delimiter: str = ""  # Field id starting each repetition
    members: tuple[str, ...] = ()  # Declaration order


@dataclass
class RepeatingGroupBuilderMap:
    """Message type -> (group id -> RepeatingGroupBuilder)."""

    group_map: dict[str, dict[str, RepeatingGroupBuilder]] = field(default_factory=dict)

    def get_groups(self, msg_type: str) -> Mapping[str, RepeatingGroupBuilder]:
        """Groups native to a message type, empty if it defines none."""
        return self.group_map.get(msg_type, {})

    def header_groups(self) -> Mapping[str, RepeatingGroupBuilder]:
        return self.get_groups(HEADER)


@dataclass
class ContextOrderMap:
    """Message type -> per-type context. Only keys and their order matter here."""

    message_map: dict[str, dict[str, str]] = field(default_factory=dict)

    def message_types(self) -> Iterator[str]:
        return iter(self.message_map)


class SchemaModel(ABC):
    """Provides the group and context maps of each protocol version."""

    @abstractmethod
    def get_repeating_group_map(self, version: str) -> RepeatingGroupBuilderMap:
        """
        Get the repeating groups of a version.

        Args:
            version: Protocol version, e.g. "FIX.4.4" or "5.0SP1"

        Returns:
            RepeatingGroupBuilderMap for the version
        """

    @abstractmethod
    def get_context_order_map(self, version: str) -> ContextOrderMap:
        """
        Get the ordered message contexts of a version.

        Args:
            version: Protocol version

        Returns:
            ContextOrderMap for the version
        """
