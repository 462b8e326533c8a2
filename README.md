# spcipher

Small, readable implementations of two classic building blocks of symmetric
ciphers:

* **A substitution-permutation byte transform** (`spcipher.sp_network`). Each
  byte is split into two nibbles, each nibble passes through a fixed 4-bit
  S-box, and the resulting byte is rotated right by `p` bits (5 by default).
  The transform can be computed step by step or through precomputed 256-entry
  lookup tables: `build_s_star()` for substitution alone and
  `build_s_prime(p)` for substitution followed by rotation.
* **A Magma-style 64-bit block cipher** (`spcipher.magma`). It is a 32-round
  Feistel network with the test S-boxes. A 56-bit key is repeated out to 32
  round keys. Data is padded with `0x80` followed by zero bytes up to a whole
  number of 8-byte blocks.

This is teaching material. It is **not** a vetted encryption library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### Block cipher

```
spcipher
```

This starts an interactive menu. A 56-bit key is created in `key.key` if that
file does not exist yet.

* `h` encrypts `input.txt` into `output.enc`.
* `r` decrypts `output.enc` into `output.txt`.
* `g` tampers with `output.enc`. You can drop the first byte, trim a tail that
  is not a whole block, drop the last block, append the block `BLOCK001`, or
  swap the first two blocks. This shows how damage to the ciphertext affects
  decryption.
* `q` quits. End of input also ends the loop.

The file names can be changed with `--key`, `--input`, `--encrypted` and
`--decrypted`. Encryption refuses inputs larger than 20 KB and prints a warning
recommending a key change above 10 KB. On an error the program prints it and
exits with status 1.

### Substitution-permutation demo

```
spcipher-sp MODE [--bits BITS] [-p SHIFT] [--input FILE] [--output FILE]
```

`MODE` is one of:

* `substitute` applies the S-box to every 4-bit group of the bit string.
* `substitute-bytes` applies the `S*` table to every 8-bit group and prints the
  table size.
* `rotate` rotates every 8-bit group right by `SHIFT`.
* `transform` substitutes and rotates every 8-bit group through the `S'` table
  and prints the table size.
* `file` transforms the bytes of `--input` (default `3_5inp.txt`) and writes
  them to `--output` (default `3_5out.txt`).

The bit string defaults to the demonstration value `0123456789ABCDEF` written
in binary; its length must be a multiple of the group size.

## Library use

```python
from spcipher import sp_network

sp_network.substitute(0x0)        # 0xB
sp_network.rotate_right(0x01, 5)  # 0x08

table = sp_network.build_s_prime(5)  # 256-entry lookup table
assert table[0x3C] == sp_network.transform_byte(0x3C, 5)

sp_network.substitute_nibbles("00000001")  # "10110011"
sp_network.transform_data(b"hello", 5)     # transformed bytes
sp_network.transform_file("in.bin", "out.bin", 5)
```

```python
from spcipher import magma

key = magma.generate_key("key.key")   # writes a random 56-bit key
keys = magma.expand_key(key)          # 32 round keys

ciphertext = magma.encrypt(b"attack at dawn", keys)
assert magma.decrypt(ciphertext, keys) == b"attack at dawn"

keys = magma.expand_key(magma.read_key("key.key"))
magma.encrypt_file("input.txt", "output.enc", keys)
magma.decrypt_file("output.enc", "output.txt", keys)
```

`read_key` and `expand_key` raise `magma.KeyError56` (a `ValueError`) when the
key is not exactly 56 bits. `decrypt` raises `ValueError` when the ciphertext
length is not a multiple of 8. `encrypt_block` and `decrypt_block` work on a
single 8-byte block.

Tampering can also be done without the menu: `spcipher.cli.modify_data` and
`spcipher.cli.modify_encrypted_file` take a `spcipher.cli.Modification`.

## What it does not do

Blocks are encrypted independently, one after another: there is no chaining
mode, no initialisation vector and no integrity check, so tampered ciphertext
is decrypted without complaint. Keys are raw 7-byte files; there is no key
derivation from a passphrase.