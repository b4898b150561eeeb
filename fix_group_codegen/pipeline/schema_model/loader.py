"""
JSON schema model loader.

Reads a prebuilt FIX schema model from its JSON interchange form and
exposes it through the SchemaModel interface. Any structural problem is
fatal: the offending key path is logged and a SchemaModelError is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .nodes import ContextOrderMap, RepeatingGroupBuilder, RepeatingGroupBuilderMap, SchemaModel

logger = logging.getLogger(__name__)


class SchemaModelError(Exception):
    """Raised when the schema model cannot be read or is malformed."""

    def __init__(self, message: str, path: list[str] | None = None):
        self.path = list(path or [])
        if self.path:
            message = f"{message} at {' > '.join(self.path)}"
        super().__init__(message)


def _fail(message: str, path: list[str]) -> SchemaModelError:
    error = SchemaModelError(message, path)
    logger.error("Schema model ERROR: %s. Trace = %s", error, path)
    return error


class JsonSchemaModel(SchemaModel):
    """Schema model backed by a JSON document keyed by protocol version."""

    def __init__(self, data: dict[str, Any]):
        """
        Parse every version of the document up front.

        Args:
            data: Mapping of version -> {"groups": ..., "messages": ...}

        Raises:
            SchemaModelError: On the first malformed entry
        """
        if not isinstance(data, dict):
            raise _fail("Schema model must be a JSON object", [])

        self._groups: dict[str, RepeatingGroupBuilderMap] = {}
        self._contexts: dict[str, ContextOrderMap] = {}
        for version, body in data.items():
            if not isinstance(body, dict):
                raise _fail("Version entry must be an object", [version])
            self._groups[version] = self._parse_groups(body.get("groups", {}), [version, "groups"])
            self._contexts[version] = self._parse_messages(body.get("messages", {}), [version, "messages"])

    @classmethod
    def from_file(cls, path: str | Path) -> JsonSchemaModel:
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise _fail(f"Invalid JSON in schema model {path}: line {e.lineno}:{e.colno} {e.msg}", []) from e
        except OSError as e:
            raise _fail(f"Cannot read schema model {path}: {e}", []) from e
        return cls(data)

    def versions(self) -> list[str]:
        return list(self._groups)

    def get_repeating_group_map(self, version: str) -> RepeatingGroupBuilderMap:
        self._check_version(version)
        return self._groups[version]

    def get_context_order_map(self, version: str) -> ContextOrderMap:
        self._check_version(version)
        return self._contexts[version]

    def _check_version(self, version: str) -> None:
        if version not in self._groups:
            known = ", ".join(self._groups) or "none"
            raise _fail(f"Unknown FIX version '{version}' (known: {known})", [version])

    def _parse_groups(self, raw: Any, path: list[str]) -> RepeatingGroupBuilderMap:
        if not isinstance(raw, dict):
            raise _fail("Groups must be an object", path)

        group_map: dict[str, dict[str, RepeatingGroupBuilder]] = {}
        for msg_type, groups in raw.items():
            msg_path = path + [msg_type]
            if not isinstance(groups, dict):
                raise _fail("Message groups must be an object", msg_path)
            group_map[msg_type] = {gid: self._parse_group(gid, body, msg_path + [gid]) for gid, body in groups.items()}

        return RepeatingGroupBuilderMap(group_map)

    def _parse_group(self, group_id: str, raw: Any, path: list[str]) -> RepeatingGroupBuilder:
        if not isinstance(raw, dict):
            raise _fail("Group must be an object", path)

        delimiter = raw.get("delimiter")
        if not isinstance(delimiter, str) or not delimiter:
            raise _fail("Group delimiter must be a non-empty string", path + ["delimiter"])

        members = raw.get("members", [])
        if not isinstance(members, list):
            raise _fail("Group members must be a list", path + ["members"])
        for i, member in enumerate(members):
            if not isinstance(member, str):
                raise _fail(f"Group member must be a string, got {member!r}", path + ["members", str(i)])

        return RepeatingGroupBuilder(group_id=group_id, delimiter=delimiter, members=tuple(members))

    def _parse_messages(self, raw: Any, path: list[str]) -> ContextOrderMap:
        # A bare list declares message types with empty contexts
        if isinstance(raw, list):
            for i, msg_type in enumerate(raw):
                if not isinstance(msg_type, str):
                    raise _fail(f"Message type must be a string, got {msg_type!r}", path + [str(i)])
            return ContextOrderMap({msg_type: {} for msg_type in raw})

        if not isinstance(raw, dict):
            raise _fail("Messages must be an object or a list", path)

        message_map: dict[str, dict[str, str]] = {}
        for msg_type, ctx in raw.items():
            if ctx is None:
                ctx = {}
            if not isinstance(ctx, dict):
                raise _fail("Message context must be an object", path + [msg_type])
            message_map[msg_type] = {str(k): str(v) for k, v in ctx.items()}

        return ContextOrderMap(message_map)
