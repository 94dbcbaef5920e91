import io
import re

import pytest

from medrec.desmenu import des_menu
from medrec.desutil import decrypt_file, generate_random_key
from medrec.fileutil import TokenReader


def _run(text):
    out = io.StringIO()
    des_menu(TokenReader(io.StringIO(text)), out)
    return out.getvalue()


@pytest.fixture
def key_hex():
    return generate_random_key().hex()


@pytest.fixture
def plain_file(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text("hello register\nsecond line\n", encoding="utf-8")
    return path


def test_encrypt_with_entered_key_round_trips(tmp_path, plain_file, key_hex):
    enc = tmp_path / "enc.txt"
    output = _run(f"1\n1\n{key_hex}\n3\n{plain_file}\n{enc}\n0\n0\n")
    assert "Файл успешно зашифрован!" in output
    assert f"Используемый ключ: {key_hex}\n" in output
    dec = tmp_path / "dec.txt"
    decrypt_file(str(enc), str(dec), bytes.fromhex(key_hex))
    assert dec.read_bytes() == plain_file.read_bytes()


def test_encrypt_then_decrypt_through_menu(tmp_path, plain_file, key_hex):
    enc = tmp_path / "enc.txt"
    dec = tmp_path / "dec.txt"
    output = _run(
        f"1\n1\n{key_hex}\n3\n{plain_file}\n{enc}\n0\n"
        f"2\n{key_hex}\n{enc}\n{dec}\n0\n"
    )
    assert "Файл успешно дешифрован!" in output
    assert dec.read_bytes() == plain_file.read_bytes()


def test_generated_key_is_shown_and_usable(tmp_path, plain_file):
    enc = tmp_path / "enc.txt"
    output = _run(f"1\n2\n3\n{plain_file}\n{enc}\n0\n0\n")
    match = re.search(r"Новый ключ сгенерирован: ((?:[0-9a-f]{2} ){8})", output)
    assert match is not None
    key = bytes.fromhex(match.group(1).replace(" ", ""))
    dec = tmp_path / "dec.txt"
    decrypt_file(str(enc), str(dec), key)
    assert dec.read_bytes() == plain_file.read_bytes()


def test_entered_key_is_echoed(key_hex):
    output = _run(f"1\n1\n{key_hex}\n0\n0\n")
    spaced = "".join(key_hex[i:i + 2] + " " for i in range(0, 16, 2))
    assert f"Ключ успешно установлен: {spaced}\n" in output


def test_key_is_cleared_after_successful_encryption(tmp_path, plain_file, key_hex):
    enc = tmp_path / "enc.txt"
    output = _run(f"1\n1\n{key_hex}\n3\n{plain_file}\n{enc}\n3\n0\n0\n")
    assert output.count("Ошибка: ключ не установлен!") == 1


def test_encrypt_without_key_is_refused():
    output = _run("1\n3\n0\n0\n")
    assert "Ошибка: ключ не установлен!" in output


def test_key_of_wrong_length_is_rejected():
    output = _run("1\n1\nabcd\n3\n0\n0\n")
    assert "Ошибка: ключ должен быть 16 символов (8 байт)!" in output
    assert "Ошибка: ключ не установлен!" in output


def test_key_with_non_hex_characters_is_rejected():
    output = _run("1\n1\nzzzzzzzzzzzzzzzz\n0\n0\n")
    assert (
        "Ошибка: ключ должен содержать только шестнадцатеричные символы (0-9, a-f)!"
        in output
    )


def test_decrypt_with_bad_key_returns_to_menu():
    output = _run("2\nshort\n0\n")
    assert "Ошибка: ключ должен быть 16 символов (8 байт)!" in output
    assert "Введите зашифрованный файл" not in output


def test_decrypt_of_missing_file_fails(tmp_path, key_hex):
    missing = tmp_path / "missing.txt"
    output = _run(f"2\n{key_hex}\n{missing}\n{tmp_path / 'out.txt'}\n0\n")
    assert "Ошибка при дешифровании!" in output
    assert not (tmp_path / "out.txt").exists()


def test_encrypt_of_missing_file_fails(tmp_path, key_hex):
    output = _run(f"1\n1\n{key_hex}\n3\n{tmp_path / 'nope'}\n{tmp_path / 'e'}\n0\n0\n")
    assert "Ошибка при шифровании!" in output


def test_unknown_submenu_choice():
    output = _run("1\n7\n0\n0\n")
    assert "Неверный выбор!" in output


def test_end_of_input_raises():
    with pytest.raises(EOFError):
        _run("")