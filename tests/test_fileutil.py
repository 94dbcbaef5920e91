import io

import pytest

from medrec.fileutil import (
    TokenReader,
    parse_hex_key,
    read_file,
    show_file,
    split_words,
    write_file,
)


def test_token_reader_across_lines():
    reader = TokenReader(io.StringIO("one two\n\n  three\n"))
    assert [reader.next_token() for _ in range(3)] == ["one", "two", "three"]
    with pytest.raises(EOFError):
        reader.next_token()


def test_token_reader_int():
    reader = TokenReader(io.StringIO("42 -7 word"))
    assert reader.next_int() == 42
    assert reader.next_int() == -7
    with pytest.raises(ValueError):
        reader.next_int()


def test_token_reader_int_leaves_rest():
    reader = TokenReader(io.StringIO("12abc next"))
    assert reader.next_int() == 12
    assert reader.next_token() == "abc"
    assert reader.next_token() == "next"


def test_split_words():
    assert split_words("  2024.01.02 10.30\tflu  rest ") == ["2024.01.02", "10.30", "flu", "rest"]
    assert split_words("   ") == []


def test_write_and_read_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    content = "Петров\nline two\n"
    write_file(str(path), content)
    assert read_file(str(path)) == content


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_file(str(tmp_path / "missing.txt"))


def test_show_file(tmp_path):
    path = tmp_path / "show.txt"
    path.write_text("first\nsecond", encoding="utf-8")
    out = io.StringIO()
    show_file(str(path), out)
    assert out.getvalue() == "first\nsecond\n"


def test_show_missing_file(tmp_path, capsys):
    out = io.StringIO()
    show_file(str(tmp_path / "missing.txt"), out)
    assert out.getvalue() == ""
    assert "Could not open the file." in capsys.readouterr().err


def test_parse_hex_key():
    assert parse_hex_key("133457799bbcdff1") == bytes.fromhex("133457799BBCDFF1")


def test_parse_hex_key_wrong_length():
    with pytest.raises(ValueError, match="16"):
        parse_hex_key("abcd")


def test_parse_hex_key_not_hex():
    with pytest.raises(ValueError, match="шестнадцатеричные"):
        parse_hex_key("zz3457799bbcdff1")