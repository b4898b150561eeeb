"""
Group manager code generator.

Drives one artifact per message type of a protocol version:
1. Build the Java AST (registrations, then HEADER and native group classes)
2. Serialize it through the Jinja2 templates
3. Open the output sink, write, flush and verify

A write error reported at flush time aborts the whole run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .ast_backends import JavaAstBackend
from .config import CodeGeneratorConfig, SourceDirSetting
from .output import OutputSink, open_output_sink
from .schema_model import SchemaModel

logger = logging.getLogger(__name__)

SinkFactory = Callable[[SourceDirSetting, str, str, CodeGeneratorConfig], OutputSink]


class CodeGenerationError(Exception):
    """Fatal I/O failure during generation. The run cannot continue."""

    pass


@dataclass
class GeneratedArtifact:
    """One generated group manager."""

    msg_type: str
    name: str
    path: Path | None  # None when written to the console
    code: str


class GroupManagerGenerator:
    """Generates the group manager sources of one protocol version."""

    def __init__(
        self,
        version: str,
        schema_model: SchemaModel,
        config: CodeGeneratorConfig | None = None,
        sink_factory: SinkFactory | None = None,
    ):
        """
        Initialize the generator.

        Args:
            version: Protocol version, e.g. "FIX.4.4"
            schema_model: Provider of the group and context maps
            config: Generation options, including the resolved SRC_DIR
            sink_factory: Opens the sink of an artifact (default: file or console)
        """
        self.version = version
        self.config = config or CodeGeneratorConfig()
        self.repeating_group_map = schema_model.get_repeating_group_map(version)
        self.context_order_map = schema_model.get_context_order_map(version)
        self.backend = JavaAstBackend(version, self.repeating_group_map, self.config)
        self.sink_factory = sink_factory or open_output_sink

    def artifact_name(self, msg_type: str) -> str:
        return self.backend.names.artifact_name(msg_type)

    def render_artifact(self, msg_type: str) -> str:
        """Render the source of one artifact without touching any sink."""
        return self.backend.generate(msg_type)

    def generate(self) -> list[GeneratedArtifact]:
        """
        Generate one artifact per message type, in context map order.

        Returns:
            The generated artifacts

        Raises:
            CodeGenerationError: On the first output failure; remaining
                message types are not processed
        """
        artifacts = []
        for msg_type in self.context_order_map.message_types():
            artifacts.append(self._generate_artifact(msg_type))

        logger.info("Generated %d group managers for %s", len(artifacts), self.version)
        return artifacts

    def _generate_artifact(self, msg_type: str) -> GeneratedArtifact:
        name = self.artifact_name(msg_type)
        code = self.render_artifact(msg_type)

        try:
            sink = self.sink_factory(self.config.source_dir, self.version, name, self.config)
        except OSError as e:
            logger.error("Cannot open output for %s: %s", name, e)
            raise CodeGenerationError(f"Cannot open output for {name}: {e}") from e

        # Each artifact has its own sink; the file is closed even on failure
        with sink:
            sink.write(code)
            self._finish(sink)

        return GeneratedArtifact(msg_type=msg_type, name=name, path=sink.path, code=code)

    def _finish(self, sink: OutputSink) -> None:
        if sink.check_error():
            logger.error("IO Error during Group Code Generation! Output: %s", sink.path or "<console>")
            raise CodeGenerationError("IO Error during Group Code Generation!") from sink.error


def generate_group_managers(
    version: str,
    schema_model: SchemaModel,
    config: CodeGeneratorConfig | None = None,
) -> list[GeneratedArtifact]:
    """Convenience wrapper generating every group manager of a version."""
    return GroupManagerGenerator(version, schema_model, config).generate()
