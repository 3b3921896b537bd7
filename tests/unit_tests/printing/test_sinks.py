from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from echolog.exceptions import DestinationError
from echolog.sinks import FileSink, StreamSink, resolve_sink


class FlushRecorder(io.StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


def test_stream_sink_resolves_stream_at_emit_time(monkeypatch: pytest.MonkeyPatch) -> None:
    sink = StreamSink("stdout")
    replacement = io.StringIO()
    monkeypatch.setattr(sys, "stdout", replacement)
    assert sink.emit("late") == 4
    assert replacement.getvalue() == "late"


def test_stream_sink_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown stream name"):
        StreamSink("stdin")  # type: ignore[arg-type]


def test_stream_sink_flush_follows_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    from echolog.config import settings

    stream = FlushRecorder()
    StreamSink(stream).emit("a")
    assert stream.flushes == 0

    monkeypatch.setenv("ECHOLOG_OUTPUT_FLUSH", "1")
    settings.reload()
    StreamSink(stream).emit("b")
    assert stream.flushes == 1

    StreamSink(stream, flush=False).emit("c")
    assert stream.flushes == 1


def test_file_sink_does_not_hold_handle(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    sink = FileSink(path)
    sink.emit("one\n")
    # another writer in between must not be clobbered
    with open(path, "a") as f:
        f.write("other\n")
    sink.emit("two\n")
    assert path.read_text() == "one\nother\ntwo\n"


def test_file_sink_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    written = FileSink(path, encoding="latin-1").emit("é")
    assert written == 1
    assert path.read_bytes() == b"\xe9"


def test_file_sink_unencodable_text(tmp_path: Path) -> None:
    path = tmp_path / "ascii.txt"
    with pytest.raises(DestinationError):
        FileSink(path, encoding="ascii").emit("☃")


def test_file_sink_on_directory(tmp_path: Path) -> None:
    with pytest.raises(DestinationError) as exc_info:
        FileSink(tmp_path).emit("x")
    assert isinstance(exc_info.value.__cause__, OSError)


class TestResolveSink:
    def test_stream_names(self) -> None:
        assert resolve_sink("stdout").name == "stdout"
        assert resolve_sink("stderr").name == "stderr"

    def test_paths(self, tmp_path: Path) -> None:
        by_str = resolve_sink(str(tmp_path / "a.txt"))
        by_path = resolve_sink(tmp_path / "b.txt")
        assert isinstance(by_str, FileSink)
        assert isinstance(by_path, FileSink)
        assert by_path.path == tmp_path / "b.txt"

    def test_file_named_like_stream_via_path(self) -> None:
        assert isinstance(resolve_sink(Path("stdout")), FileSink)

    def test_stream_object(self) -> None:
        assert isinstance(resolve_sink(io.StringIO()), StreamSink)

    def test_sink_passthrough(self) -> None:
        sink = StreamSink("stderr")
        assert resolve_sink(sink) is sink
