"""
Schema model module.

Contains the read-only repeating-group model and its JSON loader.
"""

from __future__ import annotations

from .loader import JsonSchemaModel, SchemaModelError
from .nodes import (
    HEADER,
    ContextOrderMap,
    RepeatingGroupBuilder,
    RepeatingGroupBuilderMap,
    SchemaModel,
)

__all__ = [
    "HEADER",
    "RepeatingGroupBuilder",
    "RepeatingGroupBuilderMap",
    "ContextOrderMap",
    "SchemaModel",
    "JsonSchemaModel",
    "SchemaModelError",
]
