"""Interactive menu for encrypting and decrypting files with DES."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from .desutil import DESError, decrypt_file, encrypt_file, generate_random_key
from .fileutil import parse_hex_key, show_file

_MAIN_MENU = (
    "\nМеню DES:\n"
    "1. Шифровать файл\n"
    "2. Дешифровать файл\n"
    "0. Выход\n"
    "Выбор: "
)
_ENCRYPT_MENU = (
    "\nОперации шифрования:\n"
    "1. Ввести ключ\n"
    "2. Сгенерировать ключ\n"
    "3. Выполнить шифрование\n"
    "0. Назад\n"
    "Выбор: "
)
_KEY_PROMPT = "Введите 8-байтный ключ (16 шестнадцатеричных символов): "


class _Reader(Protocol):
    def next_token(self) -> str: ...

    def next_int(self) -> int: ...


def _read_choice(reader: _Reader) -> int | None:
    try:
        return reader.next_int()
    except ValueError:
        return None


def _spaced_hex(key: bytes) -> str:
    return "".join(f"{byte:02x} " for byte in key)


def _prompt_key(reader: _Reader, out: TextIO) -> bytes | None:
    """Ask for a hexadecimal key; report the problem and return None if it is bad."""
    out.write(_KEY_PROMPT)
    text = reader.next_token()
    try:
        return parse_hex_key(text)
    except ValueError as exc:
        out.write(f"{exc}\n")
        return None


def _encrypt_menu(reader: _Reader, out: TextIO, key: bytes | None) -> bytes | None:
    """Run the encryption submenu and return the key state it leaves behind."""
    while True:
        out.write(_ENCRYPT_MENU)
        choice = _read_choice(reader)
        if choice == 0:
            return key
        if choice == 1:
            entered = _prompt_key(reader, out)
            if entered is not None:
                key = entered
                out.write(f"Ключ успешно установлен: {_spaced_hex(key)}\n")
        elif choice == 2:
            key = generate_random_key()
            out.write(f"Новый ключ сгенерирован: {_spaced_hex(key)}")
            out.write("\nСохраните этот ключ для последующего дешифрования!\n")
        elif choice == 3:
            if key is None:
                out.write("Ошибка: ключ не установлен!\n")
                continue
            out.write(f"Используемый ключ: {key.hex()}\n")
            out.write("Введите входной файл: ")
            input_file = reader.next_token()
            out.write("Содержимое входного файла: \n")
            show_file(input_file, out)
            out.write("Введите выходной файл: ")
            output_file = reader.next_token()
            try:
                encrypt_file(input_file, output_file, key)
            except (OSError, DESError) as exc:
                sys.stderr.write(f"{exc}\n")
                out.write("Ошибка при шифровании!\n")
            else:
                out.write("Файл успешно зашифрован!\n")
                out.write("Содержимое выходного файла: \n")
                show_file(output_file, out)
                key = None
        else:
            out.write("Неверный выбор!\n")


def _decrypt(reader: _Reader, out: TextIO, key: bytes | None) -> bytes | None:
    """Decrypt one file and return the key state it leaves behind."""
    if key is None:
        key = _prompt_key(reader, out)
        if key is None:
            return None
    out.write(f"Используемый ключ: {key.hex()}\n")
    out.write("Введите зашифрованный файл: ")
    input_file = reader.next_token()
    out.write("Содержимое зашифрованного файла: \n")
    show_file(input_file, out)
    out.write("Введите файл для сохранения результата: ")
    output_file = reader.next_token()
    try:
        decrypt_file(input_file, output_file, key)
    except (OSError, DESError) as exc:
        sys.stderr.write(f"{exc}\n")
        out.write("Ошибка при дешифровании!\n")
        return key
    out.write("Файл успешно дешифрован!\n")
    out.write("Содержимое выходного файла: \n")
    show_file(output_file, out)
    return None


def des_menu(reader: _Reader, out: TextIO) -> None:
    """Run the DES menu until the user chooses to leave it."""
    key: bytes | None = None
    while True:
        out.write(_MAIN_MENU)
        choice = _read_choice(reader)
        if choice == 0:
            return
        if choice == 1:
            key = _encrypt_menu(reader, out, key)
        elif choice == 2:
            key = _decrypt(reader, out, key)