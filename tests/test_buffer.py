from __future__ import annotations

import os
from pathlib import Path

import pytest

from jot_engine.buffer import (
    Buffer,
    BufferSaveError,
    Line,
    Position,
    encode_lines,
    split_lines,
)


def make_buffer(*texts: str) -> Buffer:
    return Buffer([Line(text) for text in texts])


def test_new_buffer_has_one_empty_line() -> None:
    buffer = Buffer.new_empty()

    assert buffer.line_count == 1
    assert buffer.is_logically_empty()
    assert buffer.path is None
    assert buffer.dirty is False


def test_logical_emptiness_tracks_line_count() -> None:
    assert Buffer([]).is_logically_empty()
    assert make_buffer("").is_logically_empty()
    assert not make_buffer("a").is_logically_empty()
    assert not make_buffer("", "").is_logically_empty()


def test_line_lookup_never_raises() -> None:
    buffer = make_buffer("a", "b")

    assert buffer.line(1) == Line("b")
    assert buffer.line(2) is None
    assert buffer.line(-1) is None


def test_open_missing_file_binds_path(tmp_path: Path) -> None:
    path = tmp_path / "new.txt"

    buffer = Buffer.open(path)

    assert buffer.line_count == 0
    assert buffer.path == os.fspath(path)
    assert buffer.dirty is False
    assert buffer.is_logically_empty()


def test_open_strips_terminators(tmp_path: Path) -> None:
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\ntwo\nthree")

    buffer = Buffer.open(path)

    assert buffer.texts() == ["one", "two", "three"]


def test_round_trip_preserves_lines(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("abc\ndéjà\n", encoding="utf-8")

    Buffer.open(path).save()
    reopened = Buffer.open(path)

    assert reopened.texts() == ["abc", "déjà"]
    assert reopened.line_count == 2


def test_save_adds_trailing_terminator(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("abc", encoding="utf-8")

    buffer = Buffer.open(path)
    buffer.save()

    assert path.read_bytes() == b"abc\n"


def test_save_without_path_is_noop() -> None:
    buffer = make_buffer("x")
    buffer.insert_char(Position(0, 0), "y")

    buffer.save()

    assert buffer.dirty is True


def test_save_clears_dirty(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    buffer = Buffer.open(path)
    buffer.insert_char(Position(0, 0), "h")

    assert buffer.dirty is True
    buffer.save()

    assert buffer.dirty is False
    assert path.read_text(encoding="utf-8") == "h\n"


def test_save_failure_is_typed(tmp_path: Path) -> None:
    buffer = Buffer([Line("x")], path=tmp_path / "missing-dir" / "f.txt")
    buffer.dirty = True

    with pytest.raises(BufferSaveError) as excinfo:
        buffer.save()

    assert excinfo.value.path.endswith("f.txt")
    assert isinstance(excinfo.value.__cause__, OSError)
    assert buffer.dirty is True


def test_insert_char_beyond_virtual_row_is_ignored() -> None:
    buffer = make_buffer("a")

    assert buffer.insert_char(Position(0, 5), "x") == 0
    assert buffer.texts() == ["a"]
    assert buffer.dirty is False


def test_insert_char_on_virtual_row_appends_line() -> None:
    buffer = make_buffer("a")

    assert buffer.insert_char(Position(0, 1), "b") == 1
    assert buffer.texts() == ["a", "b"]
    assert buffer.dirty is True


def test_insert_tab_reports_four_cells() -> None:
    buffer = Buffer.new_empty()

    assert buffer.insert_char(Position(0, 0), "\t") == 4
    line = buffer.line(0)
    assert line is not None
    assert len(line) == 4


def test_insert_line_break_splits_line() -> None:
    buffer = make_buffer("hello")

    assert buffer.insert_line_break(Position(column=2, row=0)) is True

    assert buffer.texts() == ["he", "llo"]


def test_insert_line_break_on_virtual_row_and_beyond() -> None:
    buffer = make_buffer("a")

    assert buffer.insert_line_break(Position(0, 1)) is True
    assert buffer.texts() == ["a", ""]

    assert buffer.insert_line_break(Position(0, 9)) is False
    assert buffer.line_count == 2


def test_delete_at_end_of_line_merges_next() -> None:
    buffer = make_buffer("hello", "world")

    assert buffer.delete_at(Position(column=5, row=0)) is True

    assert buffer.texts() == ["helloworld"]
    assert buffer.line_count == 1


def test_delete_at_end_of_last_line_is_noop() -> None:
    buffer = make_buffer("hello")

    assert buffer.delete_at(Position(column=5, row=0)) is False
    assert buffer.texts() == ["hello"]
    assert buffer.dirty is False


def test_delete_at_inside_line_and_invalid_row() -> None:
    buffer = make_buffer("abc")

    assert buffer.delete_at(Position(column=1, row=0)) is True
    assert buffer.texts() == ["ac"]
    assert buffer.delete_at(Position(column=0, row=1)) is False


def test_split_lines_and_encode_lines() -> None:
    assert split_lines("") == []
    assert split_lines("a\n") == ["a"]
    assert split_lines("a\n\n") == ["a", ""]
    assert encode_lines([b"a", b""]) == b"a\n\n"
