"""A small substitution-permutation network over bytes.

Each byte is split into two 4-bit halves that pass through a fixed S-box,
and the resulting byte is rotated right by ``p`` bits.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

S_BOX: tuple[int, ...] = (
    0xB, 0x3, 0x5, 0x8,
    0x2, 0xF, 0xA, 0xD,
    0xE, 0x1, 0x7, 0x4,
    0xC, 0x9, 0x6, 0x0,
)

INPUT_BITS = "0000000100100011010001010110011110001001101010111100110111101111"
DEFAULT_SHIFT = 5
DEFAULT_INPUT_FILE = "3_5inp.txt"
DEFAULT_OUTPUT_FILE = "3_5out.txt"


def substitute(nibble: int) -> int:
    """Pass a 4-bit value through the S-box."""
    if not 0 <= nibble <= 0xF:
        raise ValueError(f"nibble out of range: {nibble}")
    return S_BOX[nibble]


def rotate_right(byte: int, p: int) -> int:
    """Rotate an 8-bit value right by ``p`` bits (0 <= p <= 8)."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    if not 0 <= p <= 8:
        raise ValueError(f"rotation must be between 0 and 8, got {p}")
    return ((byte >> p) | (byte << (8 - p))) & 0xFF


def _substitute_byte(byte: int) -> int:
    return (S_BOX[(byte >> 4) & 0xF] << 4) | S_BOX[byte & 0xF]


def build_s_star() -> tuple[int, ...]:
    """Return the 256-entry table applying the S-box to both halves of a byte."""
    return tuple(_substitute_byte(x) for x in range(256))


def build_s_prime(p: int = DEFAULT_SHIFT) -> tuple[int, ...]:
    """Return the 256-entry table of substitution followed by rotation by ``p``."""
    return tuple(rotate_right(_substitute_byte(x), p) for x in range(256))


def transform_byte(byte: int, p: int = DEFAULT_SHIFT) -> int:
    """Substitute both halves of a byte, then rotate it right by ``p``."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return rotate_right(_substitute_byte(byte), p)


def _chunks(bits: str, width: int) -> Iterator[int]:
    if set(bits) - {"0", "1"}:
        raise ValueError("bit string may contain only '0' and '1'")
    if len(bits) % width:
        raise ValueError(f"bit string length must be a multiple of {width}")
    for start in range(0, len(bits), width):
        yield int(bits[start:start + width], 2)


def _join(values: Iterator[int], width: int) -> str:
    return "".join(format(value, f"0{width}b") for value in values)


def substitute_nibbles(bits: str) -> str:
    """Apply the S-box to every 4-bit group of a bit string."""
    return _join((substitute(v) for v in _chunks(bits, 4)), 4)


def substitute_bytes(bits: str) -> str:
    """Apply the byte-wide substitution table to every 8-bit group."""
    table = build_s_star()
    return _join((table[v] for v in _chunks(bits, 8)), 8)


def rotate_bits(bits: str, p: int = DEFAULT_SHIFT) -> str:
    """Rotate every 8-bit group of a bit string right by ``p``."""
    return _join((rotate_right(v, p) for v in _chunks(bits, 8)), 8)


def transform_bits(bits: str, p: int = DEFAULT_SHIFT) -> str:
    """Substitute and rotate every 8-bit group of a bit string."""
    table = build_s_prime(p)
    return _join((table[v] for v in _chunks(bits, 8)), 8)


def transform_data(data: bytes, p: int = DEFAULT_SHIFT) -> bytes:
    """Substitute and rotate every byte of ``data``."""
    return bytes(data).translate(bytes(build_s_prime(p)))


def transform_file(src: str | Path, dst: str | Path, p: int = DEFAULT_SHIFT) -> None:
    """Transform the bytes of ``src`` and write them to ``dst``."""
    Path(dst).write_bytes(transform_data(Path(src).read_bytes(), p))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spnet", description="S-box substitution and byte rotation."
    )
    parser.add_argument(
        "mode",
        choices=("substitute", "substitute-bytes", "rotate", "transform", "file"),
    )
    parser.add_argument("--bits", default=INPUT_BITS, help="input bit string")
    parser.add_argument("-p", "--shift", type=int, default=DEFAULT_SHIFT)
    parser.add_argument("--input", default=DEFAULT_INPUT_FILE)
    parser.add_argument("--output", default=DEFAULT_OUTPUT_FILE)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the network operations from the command line."""
    args = _parser().parse_args(argv)
    try:
        if args.mode == "file":
            transform_file(args.input, args.output, args.shift)
            return 0
        if args.mode == "substitute":
            print(f"Input:  {args.bits}")
            print(f"Output: {substitute_nibbles(args.bits)}")
        elif args.mode == "substitute-bytes":
            print(f"Output: {substitute_bytes(args.bits)}")
            print(f"S* size: {len(build_s_star())} bytes")
        elif args.mode == "rotate":
            print(f"Input:  {args.bits}")
            print(f"Output: {rotate_bits(args.bits, args.shift)}")
        else:
            output = transform_bits(args.bits, args.shift)
            print(f"Input:  {args.bits}")
            print(f"Output: {output}")
            print(f"S' size: {len(build_s_prime(args.shift))} bytes")
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())