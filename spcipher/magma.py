"""A Magma-style 64-bit Feistel block cipher keyed from a 56-bit key."""

from __future__ import annotations

import secrets
import warnings
from collections.abc import Sequence
from pathlib import Path

BLOCK_SIZE = 8
KEY_SIZE = 7
MAX_ENCRYPT_SIZE = 20480
WARNING_ENCRYPT_SIZE = 10240
ROUNDS = 32

_MASK32 = 0xFFFFFFFF

SBOX: tuple[tuple[int, ...], ...] = (
    (12, 4, 6, 2, 10, 5, 11, 9, 14, 8, 13, 15, 3, 7, 1, 0),
    (15, 12, 8, 2, 10, 0, 4, 13, 14, 9, 1, 7, 6, 3, 11, 5),
    (6, 8, 2, 3, 9, 10, 5, 12, 1, 14, 4, 7, 0, 15, 13, 11),
    (12, 7, 2, 1, 6, 0, 8, 13, 3, 15, 9, 10, 4, 5, 14, 11),
    (7, 15, 5, 10, 8, 1, 6, 13, 0, 9, 3, 14, 11, 4, 2, 12),
    (5, 13, 15, 6, 9, 2, 1, 8, 0, 14, 10, 4, 7, 3, 11, 12),
    (8, 14, 7, 11, 0, 10, 9, 1, 13, 3, 15, 6, 2, 5, 12, 4),
    (9, 6, 3, 15, 1, 13, 14, 0, 11, 2, 8, 5, 12, 10, 4, 7),
)


class KeyError56(ValueError):
    """Raised when a key cannot be read or is not exactly 56 bits long."""


def generate_key(path: str | Path) -> bytes:
    """Write a fresh random 56-bit key to ``path`` and return it."""
    key = secrets.token_bytes(KEY_SIZE)
    Path(path).write_bytes(key)
    return key


def read_key(path: str | Path) -> bytes:
    """Read a 56-bit key from the start of ``path``."""
    try:
        with open(path, "rb") as fh:
            key = fh.read(KEY_SIZE)
    except OSError as exc:
        raise KeyError56(f"cannot read key from {path}") from exc
    if len(key) != KEY_SIZE:
        raise KeyError56("key must be 56 bits")
    return key


def expand_key(key: bytes) -> tuple[int, ...]:
    """Stretch a 56-bit key to 256 bits and derive the 32 round keys.

    The key is repeated to fill 32 bytes, cut into eight 32-bit words, and
    the words are used three times in order and once in reverse.
    """
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise KeyError56("key must be 56 bits")
    full = key * 4 + key[:4]
    words = [int.from_bytes(full[i:i + 4], "big") for i in range(0, len(full), 4)]
    return tuple(words * 3 + words[::-1])


def apply_sbox(value: int) -> int:
    """Replace each 4-bit group of a 32-bit word through its own S-box."""
    return sum(
        row[(value >> (4 * i)) & 0xF] << (4 * i) for i, row in enumerate(SBOX)
    )


def magma_round(data: int, key: int) -> int:
    """Round function: add key mod 2**32, substitute, rotate left by 11."""
    temp = apply_sbox((data + key) & _MASK32)
    return ((temp << 11) | (temp >> 21)) & _MASK32


def _feistel(block: bytes, keys: Sequence[int]) -> bytes:
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes")
    if len(keys) != ROUNDS:
        raise ValueError(f"expected {ROUNDS} round keys")
    n1 = int.from_bytes(block[:4], "big")
    n2 = int.from_bytes(block[4:], "big")
    for key in keys[:-1]:
        n1, n2 = n2 ^ magma_round(n1, key), n1
    n2 ^= magma_round(n1, keys[-1])
    return n1.to_bytes(4, "big") + n2.to_bytes(4, "big")


def encrypt_block(block: bytes, keys: Sequence[int]) -> bytes:
    """Encrypt one 8-byte block."""
    return _feistel(bytes(block), tuple(keys))


def decrypt_block(block: bytes, keys: Sequence[int]) -> bytes:
    """Decrypt one 8-byte block."""
    return _feistel(bytes(block), tuple(keys)[::-1])


def pad_data(data: bytes) -> bytes:
    """Append 0x80 and zeros up to a whole number of blocks."""
    data = bytes(data)
    pad_len = BLOCK_SIZE - len(data) % BLOCK_SIZE
    return data + b"\x80" + bytes(pad_len - 1)


def unpad_data(data: bytes) -> bytes:
    """Strip trailing zeros and one 0x80 marker."""
    stripped = bytes(data).rstrip(b"\x00")
    return stripped[:-1] if stripped.endswith(b"\x80") else stripped


def _blocks(data: bytes):
    return (data[i:i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE))


def encrypt(data: bytes, keys: Sequence[int]) -> bytes:
    """Pad and encrypt ``data``; refuses more than 20 KB, warns above 10 KB."""
    data = bytes(data)
    if len(data) > MAX_ENCRYPT_SIZE:
        raise ValueError("input exceeds the 20 KB limit")
    if len(data) > WARNING_ENCRYPT_SIZE:
        warnings.warn(
            "input exceeds 10 KB; changing the key is recommended", stacklevel=2
        )
    keys = tuple(keys)
    return b"".join(encrypt_block(block, keys) for block in _blocks(pad_data(data)))


def decrypt(data: bytes, keys: Sequence[int]) -> bytes:
    """Decrypt ``data`` and remove its padding."""
    data = bytes(data)
    if len(data) % BLOCK_SIZE:
        raise ValueError(f"ciphertext length is not a multiple of {BLOCK_SIZE}")
    keys = tuple(keys)
    return unpad_data(b"".join(decrypt_block(block, keys) for block in _blocks(data)))


def encrypt_file(in_file: str | Path, out_file: str | Path, keys: Sequence[int]) -> None:
    """Encrypt the contents of ``in_file`` into ``out_file``."""
    Path(out_file).write_bytes(encrypt(Path(in_file).read_bytes(), keys))


def decrypt_file(in_file: str | Path, out_file: str | Path, keys: Sequence[int]) -> None:
    """Decrypt the contents of ``in_file`` into ``out_file``."""
    Path(out_file).write_bytes(decrypt(Path(in_file).read_bytes(), keys))