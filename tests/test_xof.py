import hashlib

import pytest

from mayokit.xof import sha3_256, sha3_384, sha3_512, shake128, shake256

INPUT_LENGTHS = [0, 1, 71, 72, 73, 103, 104, 105, 135, 136, 137, 167, 168, 169, 400]


def _message(size):
    return bytes((i * 7 + 3) & 0xFF for i in range(size))


def test_sha3_256_empty_known_value():
    assert sha3_256(b"").hex() == (
        "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
    )


@pytest.mark.parametrize("size", INPUT_LENGTHS)
def test_sha3_256_matches_hashlib(size):
    data = _message(size)
    assert sha3_256(data) == hashlib.sha3_256(data).digest()


@pytest.mark.parametrize("size", INPUT_LENGTHS)
def test_sha3_384_matches_hashlib(size):
    data = _message(size)
    assert sha3_384(data) == hashlib.sha3_384(data).digest()


@pytest.mark.parametrize("size", INPUT_LENGTHS)
def test_sha3_512_matches_hashlib(size):
    data = _message(size)
    assert sha3_512(data) == hashlib.sha3_512(data).digest()


@pytest.mark.parametrize("size", INPUT_LENGTHS)
@pytest.mark.parametrize("outlen", [0, 1, 32, 168, 169, 400])
def test_shake128_matches_hashlib(size, outlen):
    data = _message(size)
    assert shake128(data, outlen) == hashlib.shake_128(data).digest(outlen)


@pytest.mark.parametrize("size", INPUT_LENGTHS)
@pytest.mark.parametrize("outlen", [0, 1, 32, 136, 137, 400])
def test_shake256_matches_hashlib(size, outlen):
    data = _message(size)
    assert shake256(data, outlen) == hashlib.shake_256(data).digest(outlen)


def test_digest_lengths():
    assert len(sha3_256(b"abc")) == 32
    assert len(sha3_384(b"abc")) == 48
    assert len(sha3_512(b"abc")) == 64


def test_shake_output_is_prefix_of_longer_output():
    data = b"mayo seed"
    long = shake256(data, 500)
    for n in (1, 135, 136, 137, 272, 499):
        assert shake256(data, n) == long[:n]
    long128 = shake128(data, 400)
    assert shake128(data, 169) == long128[:169]


def test_accepts_bytearray_and_memoryview():
    data = _message(50)
    expected = shake256(data, 64)
    assert shake256(bytearray(data), 64) == expected
    assert shake256(memoryview(data), 64) == expected


def test_different_inputs_give_different_outputs():
    assert shake256(b"a", 32) != shake256(b"b", 32)
    assert shake128(b"a", 32) != shake256(b"a", 32)


def test_negative_length_raises():
    with pytest.raises(ValueError):
        shake256(b"x", -1)
    with pytest.raises(ValueError):
        shake128(b"x", -5)


def test_non_integer_length_raises():
    with pytest.raises(TypeError):
        shake256(b"x", 3.0)


def test_str_input_raises():
    with pytest.raises(TypeError):
        sha3_256("text")