import pytest

from minivim.buffer import Buffer, ReadOnlyError, split_lines


def test_missing_file_opens_as_single_empty_new_line(tmp_path):
    buf = Buffer.from_file(str(tmp_path / "nope.txt"))
    assert buf.lines == [""]
    assert buf.is_new_file
    assert not buf.modified


def test_existing_file_is_split_on_newlines(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("one\ntwo\n\nfour\n", encoding="utf-8")
    buf = Buffer.from_file(str(path))
    assert buf.lines == ["one", "two", "", "four"]
    assert not buf.is_new_file


def test_last_line_without_terminator_is_kept(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("one\ntwo", encoding="utf-8")
    assert Buffer.from_file(str(path)).lines == ["one", "two"]


def test_empty_file_still_has_one_line(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert Buffer.from_file(str(path)).lines == [""]


def test_truncate_ignores_existing_content(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("keep me\n", encoding="utf-8")
    buf = Buffer.from_file(str(path), truncate=True)
    assert buf.lines == [""]
    assert not buf.is_new_file
    assert path.read_text(encoding="utf-8") == "keep me\n"


def test_unreadable_path_raises(tmp_path):
    with pytest.raises(OSError):
        Buffer.from_file(str(tmp_path))


def test_save_terminates_every_line(tmp_path):
    path = tmp_path / "out.txt"
    buf = Buffer(str(path), ["a", "", "b"])
    buf.modified = True
    assert buf.save_to_file() is None
    assert path.read_text(encoding="utf-8") == "a\n\nb\n"
    assert not buf.modified


def test_save_then_reload_round_trips(tmp_path):
    path = tmp_path / "rt.txt"
    lines = ["  indented", "", "tab\there", "ünïcode 漢字", ""]
    Buffer(str(path), lines).save_to_file()
    assert Buffer.from_file(str(path)).lines == lines


def test_undecodable_bytes_round_trip(tmp_path):
    path = tmp_path / "bin.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")
    buf = Buffer.from_file(str(path))
    buf.save_to_file()
    assert path.read_bytes() == b"ok\n\xff\xfe\n"


def test_save_failure_keeps_modified_and_reports(tmp_path):
    buf = Buffer(str(tmp_path / "missing-dir" / "f.txt"), ["x"])
    buf.modified = True
    error = buf.save_to_file()
    assert error
    assert buf.modified


def test_save_clears_new_file_flag(tmp_path):
    buf = Buffer.from_file(str(tmp_path / "new.txt"))
    buf.save_to_file()
    assert not buf.is_new_file


def test_read_only_buffer_refuses_edits_and_save(tmp_path):
    path = tmp_path / "ro.txt"
    buf = Buffer(str(path), ["abc"], read_only=True)
    with pytest.raises(ReadOnlyError):
        buf.insert_char(0, 0, "x")
    with pytest.raises(ReadOnlyError):
        buf.delete_line(0)
    assert buf.save_to_file() == "file is read-only"
    assert not path.exists()
    assert buf.lines == ["abc"]


def test_delete_only_line_leaves_empty_line():
    buf = Buffer("f", ["abc"])
    buf.delete_line(0)
    assert buf.lines == [""]
    assert buf.modified


def test_split_then_join_restores_line():
    line = "hello world"
    for col in range(len(line) + 1):
        buf = Buffer("f", [line])
        buf.split_line(0, col)
        assert buf.lines == [line[:col], line[col:]]
        assert buf.join_with_next(0) == col
        assert buf.lines == [line]


def test_split_lines_keeps_blank_lines():
    assert split_lines("\n\n") == ["", ""]
    assert split_lines("x") == ["x"]
