"""DES-ECB encryption with PKCS#7 padding and base64 file armour."""

from __future__ import annotations

import base64
import binascii
import secrets

from Crypto.Cipher import DES

_BLOCK = 8

_WEAK_KEYS = frozenset(
    bytes.fromhex(h)
    for h in (
        "0101010101010101",
        "FEFEFEFEFEFEFEFE",
        "1F1F1F1F0E0E0E0E",
        "E0E0E0E0F1F1F1F1",
        "01FE01FE01FE01FE",
        "FE01FE01FE01FE01",
        "1FE01FE00EF10EF1",
        "E01FE01FF10EF10E",
        "01E001E001F101F1",
        "E001E001F101F101",
        "1FFE1FFE0EFE0EFE",
        "FE1FFE1FFE0EFE0E",
        "011F011F010E010E",
        "1F011F010E010E01",
        "E0FEE0FEF1FEF1FE",
        "FEE0FEE0FEF1FEF1",
    )
)


class DESError(Exception):
    """Raised when a key or a ciphertext cannot be used."""


def is_weak_key(key: bytes) -> bool:
    """True for the DES weak and semi-weak keys."""
    return bytes(key) in _WEAK_KEYS


def has_odd_parity(key: bytes) -> bool:
    """True when every byte of the key has an odd number of set bits."""
    return all(bin(byte).count("1") % 2 == 1 for byte in key)


def _cipher(key: bytes):
    key = bytes(key)
    if len(key) != _BLOCK:
        raise DESError(f"key must be {_BLOCK} bytes, got {len(key)}")
    if not has_odd_parity(key):
        raise DESError("key parity check failed")
    if is_weak_key(key):
        raise DESError("Weak key detected!")
    return DES.new(key, DES.MODE_ECB)


def des_encrypt(plaintext: bytes, key: bytes) -> bytes:
    """Pad with PKCS#7 and encrypt block by block."""
    cipher = _cipher(key)
    pad_len = _BLOCK - len(plaintext) % _BLOCK
    padded = bytes(plaintext) + bytes([pad_len]) * pad_len
    return cipher.encrypt(padded)


def des_decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """Decrypt and strip the PKCS#7 padding when it looks valid."""
    if len(ciphertext) % _BLOCK != 0:
        raise DESError("Invalid ciphertext size (must be multiple of 8)")
    if not ciphertext:
        raise DESError("ciphertext is empty")
    cipher = _cipher(key)
    plaintext = cipher.decrypt(bytes(ciphertext))
    pad_len = plaintext[-1]
    if 0 < pad_len <= _BLOCK:
        plaintext = plaintext[:-pad_len]
    return plaintext


def base64_encode(data: bytes) -> str:
    """Base64 without line breaks."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(encoded: str) -> bytes:
    """Decode base64 text; raises DESError when it is malformed."""
    try:
        return base64.b64decode(encoded)
    except (binascii.Error, ValueError) as exc:
        raise DESError(f"invalid base64 data: {exc}") from exc


def encrypt_file(input_file: str, output_file: str, key: bytes) -> None:
    """Encrypt a file and write the ciphertext as base64 text."""
    with open(input_file, "rb") as handle:
        plaintext = handle.read()
    encoded = base64_encode(des_encrypt(plaintext, key))
    with open(output_file, "w", encoding="ascii") as handle:
        handle.write(encoded)


def decrypt_file(input_file: str, output_file: str, key: bytes) -> None:
    """Decrypt a base64 file written by encrypt_file."""
    with open(input_file, encoding="utf-8") as handle:
        encoded = handle.read()
    plaintext = des_decrypt(base64_decode(encoded), key)
    if not plaintext:
        raise DESError("decryption produced no data")
    with open(output_file, "wb") as handle:
        handle.write(plaintext)


def generate_random_key() -> bytes:
    """Eight random bytes adjusted to odd parity."""
    key = bytearray(secrets.token_bytes(_BLOCK))
    for index, byte in enumerate(key):
        byte &= 0xFE
        byte |= (bin(byte).count("1") % 2) ^ 1
        key[index] = byte
    return bytes(key)