import pytest

from mayokit.codec import (
    decode_nibbles,
    encode_nibbles,
    m_upper,
    pack_m_vecs,
    transpose_16x16_nibbles,
    unpack_m_vecs,
)


def test_decode_low_nibble_first():
    assert decode_nibbles(b"\x21\x43", 4) == bytes([1, 2, 3, 4])


def test_decode_odd_count_uses_low_nibble():
    assert decode_nibbles(b"\x21\xf3", 3) == bytes([1, 2, 3])


def test_encode_decode_round_trip_even():
    nibbles = [i % 16 for i in range(40)]
    packed = encode_nibbles(nibbles)
    assert len(packed) == 20
    assert list(decode_nibbles(packed, 40)) == nibbles


def test_encode_decode_round_trip_odd():
    nibbles = [(7 * i) % 16 for i in range(13)]
    packed = encode_nibbles(nibbles)
    assert len(packed) == 7
    assert list(decode_nibbles(packed, 13)) == nibbles


def test_encode_rejects_large_values():
    with pytest.raises(ValueError):
        encode_nibbles([1, 16])


def test_decode_too_short():
    with pytest.raises(ValueError):
        decode_nibbles(b"\x00", 3)


def test_unpack_pads_each_vector():
    m = 78
    data = bytes(range(1, 40)) + bytes(range(100, 139))
    limbs = unpack_m_vecs(data, 2, m)
    assert len(limbs) == 10
    assert limbs[0] == int.from_bytes(bytes(range(1, 9)), "little")
    assert limbs[4] >> 56 == 0
    assert limbs[5] == int.from_bytes(bytes(range(100, 108)), "little")


def test_pack_unpack_round_trip():
    for m in (64, 78, 108, 142):
        stride = m // 2
        data = bytes((i * 31 + 5) % 256 for i in range(3 * stride))
        assert pack_m_vecs(unpack_m_vecs(data, 3, m), 3, m) == data


def test_unpack_too_short():
    with pytest.raises(ValueError):
        unpack_m_vecs(bytes(10), 1, 64)


def test_pack_too_few_limbs():
    with pytest.raises(ValueError):
        pack_m_vecs([0, 0, 0], 1, 64)


def test_transpose_moves_nibbles():
    block = [0] * 16
    block[2] = 0xA << (4 * 5)
    result = transpose_16x16_nibbles(block)
    assert result[5] == 0xA << (4 * 2)
    assert sum(1 for row in result if row) == 1


def test_transpose_is_involution():
    block = [(i * 0x0123456789ABCDEF + 17 * i) & ((1 << 64) - 1) for i in range(16)]
    assert transpose_16x16_nibbles(transpose_16x16_nibbles(block)) == block


def test_transpose_requires_sixteen_rows():
    with pytest.raises(ValueError):
        transpose_16x16_nibbles([0] * 15)


def test_m_upper_folds_lower_triangle():
    vectors = [1, 2, 3, 4]
    assert m_upper(1, vectors, 2) == [1, 2 ^ 3, 4]


def test_m_upper_symmetric_gives_zero_off_diagonal():
    size, limbs = 3, 2
    matrix = {}
    for r in range(size):
        for c in range(r, size):
            matrix[(r, c)] = matrix[(c, r)] = [10 * r + c, 100 + r * c]
    vectors = [x for r in range(size) for c in range(size) for x in matrix[(r, c)]]
    out = m_upper(limbs, vectors, size)
    assert len(out) == size * (size + 1) // 2 * limbs
    assert out[0:2] == matrix[(0, 0)]
    assert out[2:6] == [0, 0, 0, 0]
    assert out[6:8] == matrix[(1, 1)]
    assert out[10:12] == matrix[(2, 2)]


def test_m_upper_too_short():
    with pytest.raises(ValueError):
        m_upper(2, [0] * 7, 2)