import warnings

import pytest

from spcipher.magma import (
    BLOCK_SIZE,
    KEY_SIZE,
    MAX_ENCRYPT_SIZE,
    WARNING_ENCRYPT_SIZE,
    KeyError56,
    apply_sbox,
    decrypt,
    decrypt_block,
    decrypt_file,
    encrypt,
    encrypt_block,
    encrypt_file,
    expand_key,
    generate_key,
    magma_round,
    pad_data,
    read_key,
    unpad_data,
)

KEY_BYTES = b"secret".ljust(KEY_SIZE, b"\x00")


@pytest.fixture
def round_keys():
    return expand_key(KEY_BYTES)


def test_generate_and_read_key(tmp_path):
    path = tmp_path / "key.key"
    key = generate_key(path)
    assert len(key) == KEY_SIZE
    assert read_key(path) == key


def test_read_key_short_file(tmp_path):
    path = tmp_path / "short.key"
    path.write_bytes(b"abc")
    with pytest.raises(KeyError56):
        read_key(path)


def test_read_key_missing_file(tmp_path):
    with pytest.raises(KeyError56):
        read_key(tmp_path / "absent.key")


def test_read_key_uses_first_seven_bytes(tmp_path):
    path = tmp_path / "long.key"
    path.write_bytes(KEY_BYTES + b"extra")
    assert read_key(path) == KEY_BYTES


def test_expand_key_layout(round_keys):
    assert len(round_keys) == 32
    assert round_keys[0] == int.from_bytes(KEY_BYTES[:4], "big")
    assert round_keys[1] == int.from_bytes(KEY_BYTES[4:] + KEY_BYTES[:1], "big")
    assert round_keys[8:16] == round_keys[:8]
    assert round_keys[24:] == round_keys[:8][::-1]
    assert all(0 <= k <= 0xFFFFFFFF for k in round_keys)


def test_expand_key_rejects_wrong_length():
    with pytest.raises(KeyError56):
        expand_key(b"abc")


def test_apply_sbox_of_zero():
    assert apply_sbox(0) == 0x9857C6FC


def test_magma_round_depends_on_sum_only():
    for data, key, delta in [(0, 0, 5), (0xFFFFFFFF, 1, 7), (0x12345678, 0x9ABCDEF0, 0x1000)]:
        shifted_data = (data + delta) & 0xFFFFFFFF
        shifted_key = (key - delta) & 0xFFFFFFFF
        assert magma_round(data, key) == magma_round(shifted_data, shifted_key)


def test_magma_round_stays_in_32_bits():
    for data in (0, 0xFFFFFFFF, 0x80000000, 0x7FFFFFFF):
        assert 0 <= magma_round(data, 0xFFFFFFFF) <= 0xFFFFFFFF


@pytest.mark.parametrize(
    "block", [bytes(8), b"\xff" * 8, b"ABCDEFGH", bytes(range(8))]
)
def test_block_round_trip(block, round_keys):
    encrypted = encrypt_block(block, round_keys)
    assert len(encrypted) == BLOCK_SIZE
    assert decrypt_block(encrypted, round_keys) == block


def test_block_wrong_size(round_keys):
    with pytest.raises(ValueError):
        encrypt_block(b"short", round_keys)


def test_pad_data_pinned():
    assert pad_data(b"abc") == b"abc\x80\x00\x00\x00\x00"


def test_pad_full_block_adds_block():
    padded = pad_data(b"12345678")
    assert len(padded) == 16
    assert padded[8:] == b"\x80" + bytes(7)


@pytest.mark.parametrize("data", [b"", b"x", b"1234567", b"12345678", b"ab\x00\x00", b"z\x80"])
def test_pad_unpad_round_trip(data):
    padded = pad_data(data)
    assert len(padded) % BLOCK_SIZE == 0
    assert unpad_data(padded) == data


@pytest.mark.parametrize(
    "data", [b"", b"a", b"12345678", b"hello world", bytes(range(256)), b"tail\x00"]
)
def test_encrypt_round_trip(data, round_keys):
    ciphertext = encrypt(data, round_keys)
    assert len(ciphertext) % BLOCK_SIZE == 0
    assert len(ciphertext) > len(data)
    assert decrypt(ciphertext, round_keys) == data


def test_encrypt_works_block_by_block(round_keys):
    data = b"same input"
    padded = pad_data(data)
    ciphertext = encrypt(data, round_keys)
    assert len(ciphertext) == 16
    assert ciphertext[:8] == encrypt_block(padded[:8], round_keys)
    assert ciphertext[8:] == encrypt_block(padded[8:], round_keys)


def test_encrypt_limit(round_keys):
    with pytest.raises(ValueError):
        encrypt(bytes(MAX_ENCRYPT_SIZE + 1), round_keys)


def test_encrypt_warns_above_threshold(round_keys):
    with pytest.warns(UserWarning):
        ciphertext = encrypt(bytes(WARNING_ENCRYPT_SIZE + 1), round_keys)
    assert decrypt(ciphertext, round_keys) == bytes(WARNING_ENCRYPT_SIZE + 1)


def test_encrypt_no_warning_at_threshold(round_keys):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        ciphertext = encrypt(bytes(WARNING_ENCRYPT_SIZE), round_keys)
    assert len(ciphertext) == WARNING_ENCRYPT_SIZE + BLOCK_SIZE


def test_decrypt_rejects_partial_block(round_keys):
    ciphertext = encrypt(b"abcdefgh", round_keys)
    with pytest.raises(ValueError):
        decrypt(ciphertext[1:], round_keys)


def test_file_round_trip(tmp_path, round_keys):
    plain = tmp_path / "input.txt"
    enc = tmp_path / "output.enc"
    out = tmp_path / "output.txt"
    plain.write_bytes(b"some file contents\n")
    encrypt_file(plain, enc, round_keys)
    assert enc.read_bytes() == encrypt(b"some file contents\n", round_keys)
    decrypt_file(enc, out, round_keys)
    assert out.read_bytes() == b"some file contents\n"