"""Interactive front end for encrypting, decrypting and tampering with files."""

from __future__ import annotations

import argparse
import sys
import warnings
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from spcipher.magma import (
    BLOCK_SIZE,
    decrypt_file,
    encrypt_file,
    expand_key,
    generate_key,
    read_key,
)

DEFAULT_KEY_FILE = "key.key"
DEFAULT_INPUT_FILE = "input.txt"
DEFAULT_ENCRYPTED_FILE = "output.enc"
DEFAULT_DECRYPTED_FILE = "output.txt"

EXTRA_BLOCK = b"BLOCK001"


class Modification(Enum):
    """Ways of damaging an encrypted file, keyed by their menu number."""

    DROP_FIRST_BYTE = "1"
    DROP_TAIL = "2"
    DROP_LAST_BLOCK = "3"
    APPEND_BLOCK = "4"
    SWAP_BLOCKS = "5"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Modification.DROP_FIRST_BYTE: "Remove 1 byte of data",
    Modification.DROP_TAIL: "Remove the tail that is not a multiple of 64 bits",
    Modification.DROP_LAST_BLOCK: "Remove 1 block (8 bytes)",
    Modification.APPEND_BLOCK: "Append a block (8 bytes)",
    Modification.SWAP_BLOCKS: "Swap two blocks",
}


def modify_data(data: bytes, modification: Modification) -> bytes:
    """Return ``data`` with the given modification applied."""
    data = bytes(data)
    modification = Modification(modification)
    if modification is Modification.DROP_FIRST_BYTE:
        return data[1:]
    if modification is Modification.DROP_TAIL:
        rem = len(data) % BLOCK_SIZE
        return data[: len(data) - rem]
    if modification is Modification.DROP_LAST_BLOCK:
        return data[:-BLOCK_SIZE] if len(data) >= BLOCK_SIZE else data
    if modification is Modification.APPEND_BLOCK:
        return data + EXTRA_BLOCK
    if len(data) >= 2 * BLOCK_SIZE:
        first = data[:BLOCK_SIZE]
        second = data[BLOCK_SIZE : 2 * BLOCK_SIZE]
        return second + first + data[2 * BLOCK_SIZE :]
    return data


def modify_encrypted_file(
    path: str | Path = DEFAULT_ENCRYPTED_FILE,
    modification: Modification = Modification.DROP_FIRST_BYTE,
) -> bytes:
    """Apply ``modification`` to the file at ``path`` in place; return the new content."""
    target = Path(path)
    try:
        data = target.read_bytes()
    except OSError as exc:
        raise OSError(f"cannot open {target}") from exc
    result = modify_data(data, modification)
    target.write_bytes(result)
    return result


def _ask(prompt: str) -> str | None:
    try:
        answer = input(prompt)
    except EOFError:
        return None
    return answer.strip()[:1]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magma", description="Encrypt, decrypt and modify files interactively."
    )
    parser.add_argument("--key", default=DEFAULT_KEY_FILE, help="56-bit key file")
    parser.add_argument("--input", default=DEFAULT_INPUT_FILE)
    parser.add_argument("--encrypted", default=DEFAULT_ENCRYPTED_FILE)
    parser.add_argument("--decrypted", default=DEFAULT_DECRYPTED_FILE)
    return parser


def _print_menu(args: argparse.Namespace) -> None:
    print("\nChoose a mode:")
    print(f"  [h] Encrypt ({args.input} -> {args.encrypted})")
    print(f"  [r] Decrypt ({args.encrypted} -> {args.decrypted})")
    print("  [g] Modify the output file")
    print("  [q] Quit")


def _modify_interactively(path: str) -> None:
    print("Choose an operation:")
    for modification in Modification:
        print(f"  {modification.value}. {modification.description}")
    answer = _ask("Your choice: ")
    try:
        modification = Modification(answer)
    except ValueError:
        print("Invalid choice.", file=sys.stderr)
        return
    modify_encrypted_file(path, modification)
    print("File modified successfully.")


def _encrypt(args: argparse.Namespace, keys: Sequence[int]) -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        encrypt_file(args.input, args.encrypted, keys)
    for warning in caught:
        print(f"Warning: {warning.message}", file=sys.stderr)
    print(f"Encryption complete: {args.encrypted}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive encrypt/decrypt/modify loop."""
    args = _parser().parse_args(argv)
    try:
        key_path = Path(args.key)
        if not key_path.exists():
            generate_key(key_path)
            print(f"Key generated: {key_path}")
        keys = expand_key(read_key(key_path))

        while True:
            _print_menu(args)
            choice = _ask("Your choice: ")
            if choice is None:
                break
            choice = choice.lower()
            if choice == "h":
                _encrypt(args, keys)
            elif choice == "r":
                decrypt_file(args.encrypted, args.decrypted, keys)
                print(f"Decryption complete: {args.decrypted}")
            elif choice == "g":
                _modify_interactively(args.encrypted)
            elif choice == "q":
                print("Exiting.")
                break
            else:
                print("Invalid choice. Use 'h', 'r', 'g' or 'q'.", file=sys.stderr)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())