"""FIX Group Manager Code Generator

A Python package for generating the Java repeating-group managers of a
FIX protocol version from its schema model. Each message type gets one
manager registering lazily created group singletons.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGenerationError,
    CodeGeneratorConfig,
    GroupManagerGenerator,
    JsonSchemaModel,
    SchemaModelError,
    resolve_source_dir,
)

__all__ = [
    "GroupManagerGenerator",
    "CodeGeneratorConfig",
    "CodeGenerationError",
    "JsonSchemaModel",
    "SchemaModelError",
    "resolve_source_dir",
]
