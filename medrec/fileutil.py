"""Small helpers for console input and whole-file reading and writing."""

from __future__ import annotations

import re
import string
import sys
from collections import deque
from typing import TextIO

_INT_PREFIX = re.compile(r"[+-]?\d+")
_HEX_DIGITS = frozenset(string.hexdigits)


class TokenReader:
    """Reads whitespace-separated tokens from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: deque[str] = deque()

    def next_token(self) -> str:
        """Return the next token; raises EOFError when the stream is exhausted."""
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError("no more input")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def next_int(self) -> int:
        """Read an integer from the front of the next token.

        Characters after the number stay in the input as the next token.
        """
        token = self.next_token()
        match = _INT_PREFIX.match(token)
        if match is None:
            raise ValueError(f"invalid integer: {token!r}")
        rest = token[match.end():]
        if rest:
            self._tokens.appendleft(rest)
        return int(match.group())


def split_words(line: str) -> list[str]:
    """Split a line on whitespace."""
    return line.split()


def read_file(filename: str) -> str:
    """Return the whole content of a text file."""
    with open(filename, encoding="utf-8") as handle:
        return handle.read()


def write_file(filename: str, content: str) -> None:
    """Replace a file's content with the given text."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(content)


def show_file(filename: str, out: TextIO) -> None:
    """Copy a file's lines to ``out``; reports to stderr if it cannot be opened."""
    try:
        with open(filename, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                out.write(line.rstrip("\n") + "\n")
    except OSError:
        sys.stderr.write("Could not open the file.\n")


def parse_hex_key(text: str) -> bytes:
    """Turn 16 hexadecimal characters into an 8-byte key."""
    if len(text) != 16:
        raise ValueError("Ошибка: ключ должен быть 16 символов (8 байт)!")
    if not all(c in _HEX_DIGITS for c in text):
        raise ValueError(
            "Ошибка: ключ должен содержать только шестнадцатеричные символы (0-9, a-f)!"
        )
    return bytes.fromhex(text)