from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

from jot_engine.buffer import Buffer, BufferSaveError, Line
from jot_engine.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, str]]] = []
        self.context: Dict[str, str] = {}

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    def track_component(self, name: str) -> Any:
        return nullcontext()

    def profile(self, name: str) -> Any:
        return nullcontext()

    def info_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append(("info", message, dict(pairs)))

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append(("error", message, dict(pairs)))


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger


def test_failed_save_logs_span_failure_and_propagates(
    recorder: RecordingLogger, tmp_path: Path
) -> None:
    buffer = Buffer([Line("x")], path=tmp_path / "missing" / "out.txt")

    with pytest.raises(BufferSaveError):
        buffer.save()

    failures = [record for record in recorder.records if record[1] == "span::fail"]
    assert len(failures) == 1
    level, _, payload = failures[0]
    assert level == "error"
    assert payload["span"] == "buffer::save"
    assert payload["component"] == "buffer"
    assert "Cannot write" in payload["reason"]
    assert recorder.context == {}


def test_successful_save_records_event(
    recorder: RecordingLogger, tmp_path: Path
) -> None:
    Buffer([Line("x")], path=tmp_path / "out.txt").save()

    events = [
        record for record in recorder.records if record[1] == "event::buffer.save"
    ]
    assert events
    assert events[0][2]["lines"] == "1"
    assert not any(record[1] == "span::fail" for record in recorder.records)
