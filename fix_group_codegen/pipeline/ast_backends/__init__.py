"""
AST-based code generation backends.

Builds the Java AST of a group manager and serializes it to source.
"""

from __future__ import annotations

from .java_ast_backend import GroupClassEmitter, JavaAstBackend
from .java_ast_nodes import GroupClass, GroupManagerClass, GroupRegistration, ImportDirective, JavaFile
from .java_serializer import JavaSerializer

__all__ = [
    "JavaAstBackend",
    "GroupClassEmitter",
    "JavaSerializer",
    "JavaFile",
    "ImportDirective",
    "GroupManagerClass",
    "GroupRegistration",
    "GroupClass",
]
