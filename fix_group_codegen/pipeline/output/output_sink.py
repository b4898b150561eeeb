"""
Output sinks for generated artifacts.

A sink is either a file under the configured source root or the console.
Like a buffered print stream, a sink never raises on write: the first
I/O or encoding error is latched and reported by check_error(), which flushes first.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from ..config import CodeGeneratorConfig, ConfigOrigin, SourceDirSetting

logger = logging.getLogger(__name__)


class OutputSink:
    """Destination of one generated artifact."""

    def __init__(self, stream: TextIO, path: Path | None = None, owns_stream: bool = True):
        """
        Args:
            stream: Text stream to write to
            path: File path, None for the console
            owns_stream: Whether close() closes the stream
        """
        self.stream = stream
        self.path = path
        self.owns_stream = owns_stream
        self.error: OSError | UnicodeError | None = None
        self.closed = False

    @property
    def is_console(self) -> bool:
        return self.path is None

    def write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except (OSError, UnicodeError) as e:
            self._latch(e)

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, UnicodeError) as e:
            self._latch(e)

    def check_error(self) -> bool:
        """Flush, then report whether any write or flush has failed."""
        if not self.closed:
            self.flush()
        return self.error is not None

    def close(self) -> None:
        if self.closed:
            return
        self.flush()
        if self.owns_stream:
            try:
                self.stream.close()
            except (OSError, UnicodeError) as e:
                self._latch(e)
        self.closed = True

    def _latch(self, error: OSError | UnicodeError) -> None:
        if self.error is None:
            self.error = error
            logger.debug("Output sink error latched for %s: %s", self.path or "<console>", error)

    def __enter__(self) -> OutputSink:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def artifact_path(source_dir: str | Path, version: str, artifact_name: str, extension: str) -> Path:
    """Path of an artifact: {root}/{version lowercased}/auto/group/{name}.{ext}."""
    return Path(source_dir) / version.lower() / "auto" / "group" / f"{artifact_name}.{extension}"


def open_output_sink(
    setting: SourceDirSetting,
    version: str,
    artifact_name: str,
    config: CodeGeneratorConfig,
    console: TextIO | None = None,
) -> OutputSink:
    """
    Resolve and open the sink of one artifact.

    Args:
        setting: Resolved SRC_DIR setting
        version: Protocol version
        artifact_name: Manager class name, used as file stem
        config: Generator configuration (extension, encoding)
        console: Console stream override, defaults to sys.stdout

    Returns:
        A console sink when SRC_DIR is unset, a file sink otherwise

    Raises:
        OSError: If the directories or the file cannot be created
    """
    if setting.origin is ConfigOrigin.ENVIRONMENT:
        logger.info("SRC_DIR is an ENV variable: %s", setting.value)
    elif setting.origin is ConfigOrigin.PROPERTY:
        logger.info("SRC_DIR is a System property: %s", setting.value)

    if not setting.is_set:
        logger.warning("No SRC_DIR provided.  Output stream is CONSOLE")
        return OutputSink(console or sys.stdout, path=None, owns_stream=False)

    path = artifact_path(setting.value, version, artifact_name, config.file_extension)
    logger.info("building java file: %s", path.absolute())

    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    stream = open(path, "w", encoding=config.encoding, newline="\n")
    return OutputSink(stream, path=path)
