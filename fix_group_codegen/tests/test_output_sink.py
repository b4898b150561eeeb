"""
Tests for output sink resolution and the write error latch.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from fix_group_codegen.pipeline.config import CodeGeneratorConfig, ConfigOrigin, SourceDirSetting
from fix_group_codegen.pipeline.output import OutputSink, artifact_path, open_output_sink


class BrokenStream(io.StringIO):
    """Stream whose flush always fails, like a full disk."""

    def flush(self):
        raise OSError(28, "No space left on device")


def test_artifact_path():
    path = artifact_path("/tmp/out", "4.4", "44_D_68_GroupMgr", "java")
    assert path == Path("/tmp/out/4.4/auto/group/44_D_68_GroupMgr.java")


def test_console_fallback(caplog):
    console = io.StringIO()

    with caplog.at_level(logging.WARNING):
        sink = open_output_sink(SourceDirSetting(), "4.4", "44_D_68_GroupMgr", CodeGeneratorConfig(), console=console)

    assert sink.is_console
    assert sink.path is None
    assert "No SRC_DIR provided.  Output stream is CONSOLE" in caplog.text

    sink.write("class X {}\n")
    sink.close()
    assert console.getvalue() == "class X {}\n"
    # The console is never closed
    assert not console.closed


def test_file_sink_creates_directories(tmp_path, caplog):
    setting = SourceDirSetting(str(tmp_path / "out"), ConfigOrigin.PROPERTY)

    with caplog.at_level(logging.INFO):
        sink = open_output_sink(setting, "4.4", "44_D_68_GroupMgr", CodeGeneratorConfig())

    with sink:
        sink.write("content\n")
        assert not sink.check_error()

    expected = tmp_path / "out" / "4.4" / "auto" / "group" / "44_D_68_GroupMgr.java"
    assert sink.path == expected
    assert expected.read_text(encoding="utf-8") == "content\n"
    assert "SRC_DIR is a System property" in caplog.text
    assert "building java file" in caplog.text


def test_environment_origin_is_logged(tmp_path, caplog):
    setting = SourceDirSetting(str(tmp_path), ConfigOrigin.ENVIRONMENT)

    with caplog.at_level(logging.INFO):
        open_output_sink(setting, "4.4", "44_0_48_GroupMgr", CodeGeneratorConfig()).close()

    assert "SRC_DIR is an ENV variable" in caplog.text


def test_directory_creation_is_idempotent(tmp_path):
    setting = SourceDirSetting(str(tmp_path), ConfigOrigin.PROPERTY)
    config = CodeGeneratorConfig()

    open_output_sink(setting, "4.4", "44_D_68_GroupMgr", config).close()
    open_output_sink(setting, "4.4", "44_AE_2084_GroupMgr", config).close()

    assert sorted(p.name for p in (tmp_path / "4.4" / "auto" / "group").iterdir()) == [
        "44_AE_2084_GroupMgr.java",
        "44_D_68_GroupMgr.java",
    ]


def test_custom_extension_and_encoding(tmp_path):
    config = CodeGeneratorConfig(file_extension="txt", encoding="latin-1")
    setting = SourceDirSetting(str(tmp_path), ConfigOrigin.PROPERTY)

    with open_output_sink(setting, "FIX.4.4", "FIX44_D_68_GroupMgr", config) as sink:
        sink.write("é")

    path = tmp_path / "fix.4.4" / "auto" / "group" / "FIX44_D_68_GroupMgr.txt"
    assert path.read_bytes() == "é".encode("latin-1")


class TestErrorLatch:
    def test_flush_error_is_latched(self):
        sink = OutputSink(BrokenStream(), owns_stream=False)
        sink.write("data")

        assert sink.check_error()
        assert isinstance(sink.error, OSError)
        assert sink.error.errno == 28

    def test_first_error_is_kept(self):
        sink = OutputSink(BrokenStream(), owns_stream=False)
        sink.flush()
        first = sink.error
        sink.flush()
        assert sink.error is first

    def test_healthy_stream(self):
        sink = OutputSink(io.StringIO(), owns_stream=False)
        sink.write("data")
        assert not sink.check_error()
        assert sink.error is None

    def test_close_twice(self):
        stream = io.StringIO()
        sink = OutputSink(stream)
        sink.close()
        sink.close()
        assert stream.closed
        assert sink.closed

    def test_unencodable_text_is_latched(self, tmp_path):
        config = CodeGeneratorConfig(encoding="latin-1")
        setting = SourceDirSetting(str(tmp_path), ConfigOrigin.PROPERTY)

        with open_output_sink(setting, "FIX.4.4", "FIX44_D_68_GroupMgr", config) as sink:
            sink.write("€")
            assert sink.check_error()

        assert isinstance(sink.error, UnicodeEncodeError)
