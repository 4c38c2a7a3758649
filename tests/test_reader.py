import pytest

from kplc.reader import Reader, open_source


def _drain(reader):
    chars = [reader.current_char]
    while reader.current_char is not None:
        chars.append(reader.read_char())
    return chars


def test_first_character_is_read_on_creation():
    reader = Reader("xyz")
    assert reader.current_char == "x"
    assert reader.line_no == 1
    assert reader.col_no == 1


def test_reads_all_characters_then_none():
    text = "BEGIN x := 1 END."
    assert _drain(Reader(text)) == list(text) + [None]


def test_columns_advance_by_one_on_a_line():
    text = "abcdef"
    reader = Reader(text)
    columns = [reader.col_no]
    while reader.read_char() is not None:
        columns.append(reader.col_no)
    assert columns == list(range(1, len(text) + 1))


def test_newline_starts_a_new_line():
    reader = Reader("a\nb")
    before = reader.line_no
    assert reader.read_char() == "\n"
    assert reader.line_no == before + 1
    assert reader.col_no == 0
    assert reader.read_char() == "b"
    assert reader.col_no == 1


def test_line_count_matches_newlines():
    text = "one\ntwo\n\nthree\n"
    reader = Reader(text)
    _drain(reader)
    assert reader.line_no == 1 + text.count("\n")


def test_empty_text_is_immediately_at_end():
    reader = Reader("")
    assert reader.current_char is None
    assert reader.read_char() is None


def test_open_source_reads_file(tmp_path):
    path = tmp_path / "prog.kpl"
    path.write_text("PROGRAM p;\nBEGIN END.", encoding="latin-1")
    reader = open_source(path)
    assert "".join(_drain(reader)[:-1]) == "PROGRAM p;\nBEGIN END."


def test_open_source_keeps_bytes_as_characters(tmp_path):
    path = tmp_path / "bytes.kpl"
    path.write_bytes(b"\xe9a")
    reader = open_source(path)
    assert reader.current_char == "\xe9"
    assert reader.read_char() == "a"


def test_open_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_source(tmp_path / "missing.kpl")