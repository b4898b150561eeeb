"""
Output module.

Resolves where each generated artifact is written.
"""

from __future__ import annotations

from .output_sink import OutputSink, artifact_path, open_output_sink

__all__ = [
    "OutputSink",
    "artifact_path",
    "open_output_sink",
]
