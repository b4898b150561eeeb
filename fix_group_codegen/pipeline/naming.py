"""
Naming policy for generated group managers.

Every generated identifier is derived deterministically from the
protocol version, the message type, its Java string hash and the group
id. Downstream runtimes look classes up by these exact names.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils import java_string_hash, strip_version_dots
from .schema_model import HEADER

HEADER_GROUP_PREFIX = "Header_Group_"
MSG_GROUP_PREFIX = "Msg_"
GROUP_INFIX = "_Group_"
MANAGER_SUFFIX = "_GroupMgr"


def msg_hash_tag(msg_type: str) -> str:
    """Collision resistant tag for a message type ("D" -> "D_68")."""
    return f"{msg_type}_{java_string_hash(msg_type)}"


def header_group_class_name(group_id: str) -> str:
    return f"{HEADER_GROUP_PREFIX}{group_id}"


def native_group_class_name(msg_type: str, group_id: str) -> str:
    return f"{MSG_GROUP_PREFIX}{msg_hash_tag(msg_type)}{GROUP_INFIX}{group_id}"


def group_class_name(scope: str, group_id: str) -> str:
    """
    Class name of a group within its owning scope.

    Args:
        scope: Message type owning the group, or HEADER
        group_id: The group id

    Returns:
        Header_Group_{gid} for HEADER, Msg_{type}_{hash}_Group_{gid} otherwise
    """
    if scope == HEADER:
        return header_group_class_name(group_id)
    return native_group_class_name(scope, group_id)


@dataclass(frozen=True)
class VersionNames:
    """Names derived from a protocol version."""

    version: str

    @property
    def compact(self) -> str:
        """Version without dots ("FIX.4.4" -> "FIX44")."""
        return strip_version_dots(self.version)

    @property
    def package_segment(self) -> str:
        return self.compact.lower()

    @property
    def directory(self) -> str:
        return self.version.lower()

    def namespace(self, package_root: str) -> str:
        return f"{package_root}.{self.package_segment}.auto.group"

    def artifact_name(self, msg_type: str) -> str:
        """Manager class and file stem for a message type."""
        return f"{self.compact}_{msg_hash_tag(msg_type)}{MANAGER_SUFFIX}"
