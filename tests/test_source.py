from __future__ import annotations

from pathlib import Path

import pytest

from linepos import OffsetOutOfBounds, Position, Source, SourceSpan


def test_location_basic() -> None:
    s = Source(None, "ab\ncd\nef\n")
    # indexes: 0 1 2 3 4 5 6 7 8  (len=9)
    assert s.location(0) == Position(1, 0)
    assert s.location(2) == Position(1, 2)     # '\n' at end of line 1
    assert s.location(3) == Position(2, 0)     # 'c'
    assert s.location(8) == Position(3, 2)
    assert s.location(9) == Position(3, 3)     # caret at EOF, past the last '\n'


def test_location_crlf() -> None:
    s = Source(None, "ab\r\ncd")
    assert s.location(3) == Position(1, 3)
    assert s.location(4) == Position(2, 0)
    assert s.location(6) == Position(2, 2)


def test_location_empty() -> None:
    s = Source(None, "")
    assert s.location(0) == Position(1, 0)
    with pytest.raises(OffsetOutOfBounds):
        s.location(1)


def test_location_out_of_bounds() -> None:
    s = Source(None, "abc")
    with pytest.raises(OffsetOutOfBounds):
        s.location(4)
    with pytest.raises(OffsetOutOfBounds):
        s.location(-1)


def test_index_is_cached() -> None:
    s = Source(None, "a\nb\n")
    assert s.index is s.index
    assert s.index.num_lines() == 2


def test_sources_compare_by_contents_only() -> None:
    a = Source(None, "x\ny")
    b = Source(None, "x\ny")
    _ = a.index
    assert a == b


def test_locate_span() -> None:
    s = Source(None, "abc\ndef\n")
    assert s.locate_span(SourceSpan(1, 3)) == (Position(1, 1), Position(1, 3))
    # end-exclusive span ending right after a newline stays on that line
    assert s.locate_span(SourceSpan(0, 4)) == (Position(1, 0), Position(1, 4))
    assert s.locate_span(SourceSpan(2, 6)) == (Position(1, 2), Position(2, 2))
    assert s.locate_span(SourceSpan.point(5)) == (Position(2, 1), Position(2, 1))
    with pytest.raises(OffsetOutOfBounds):
        s.locate_span(SourceSpan(0, 9))


def test_slice_and_full_span() -> None:
    s = Source(None, "hello\nworld")
    assert s.full_span() == SourceSpan(0, 11)
    assert s.slice(SourceSpan(6, 11)) == "world"
    with pytest.raises(ValueError):
        s.slice(SourceSpan(0, 12))


def test_source_span_validation() -> None:
    with pytest.raises(ValueError):
        SourceSpan(-1, 0)
    with pytest.raises(ValueError):
        SourceSpan(2, 1)
    assert SourceSpan.point(3) == SourceSpan(3, 3)


def test_label() -> None:
    assert Source(None, "x").label == "<string>"
    assert Source(Path("dir/file.txt"), "x").label == "file.txt"


def test_from_file_keeps_crlf(tmp_path: Path) -> None:
    p = tmp_path / "crlf.txt"
    p.write_bytes(b"one\r\ntwo\r\n")
    s = Source.from_file(p)
    assert s.file == p
    assert s.contents == "one\r\ntwo\r\n"
    assert s.index.delimiter == "\r\n"
    assert s.location(5) == Position(2, 0)


def test_from_file_empty(tmp_path: Path) -> None:
    p = tmp_path / "empty.txt"
    p.write_text("")
    assert Source.from_file(p).index.num_lines() == 0


def test_from_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Source.from_file(tmp_path / "nope.txt")


def test_from_file_directory(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        Source.from_file(tmp_path)


def test_from_file_bad_encoding(tmp_path: Path) -> None:
    p = tmp_path / "latin.txt"
    p.write_bytes(b"caf\xe9\n")
    with pytest.raises(UnicodeDecodeError):
        Source.from_file(p)
    assert Source.from_file(p, encoding="latin-1").contents == "café\n"
