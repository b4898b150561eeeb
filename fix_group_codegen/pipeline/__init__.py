"""
Pipeline - AST-based FIX group manager generator.

1. Schema model: read-only repeating groups and message contexts
2. AST backend: build the Java AST of one manager per message type
3. Serializer: render the AST through Jinja2 templates
4. Output: write each artifact to its own file or to the console
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, ConfigError, ConfigOrigin, SourceDirSetting, load_config, resolve_source_dir
from .generator import CodeGenerationError, GeneratedArtifact, GroupManagerGenerator, generate_group_managers
from .schema_model import JsonSchemaModel, SchemaModel, SchemaModelError

__all__ = [
    "GroupManagerGenerator",
    "GeneratedArtifact",
    "generate_group_managers",
    "CodeGenerationError",
    "CodeGeneratorConfig",
    "ConfigError",
    "ConfigOrigin",
    "SourceDirSetting",
    "load_config",
    "resolve_source_dir",
    "SchemaModel",
    "JsonSchemaModel",
    "SchemaModelError",
]
