"""Nibble packing and m-vector layout helpers for MAYO."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BytesLike = bytes | bytearray | memoryview

_MASK64 = (1 << 64) - 1


def _as_bytes(value: BytesLike, what: str) -> bytes:
    try:
        return bytes(memoryview(value).cast("B"))
    except TypeError:
        raise TypeError(f"{what} must be bytes-like, not {type(value).__name__}") from None


def _check_count(value: int, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative: {value}")


def decode_nibbles(data: BytesLike, count: int) -> bytes:
    """Split bytes into ``count`` field elements, low nibble first."""
    _check_count(count, "nibble count")
    raw = _as_bytes(data, "data")
    needed = (count + 1) // 2
    if len(raw) < needed:
        raise ValueError(f"need {needed} bytes to decode {count} nibbles, got {len(raw)}")
    out = bytearray()
    for byte in raw[: count // 2]:
        out.append(byte & 0x0F)
        out.append(byte >> 4)
    if count % 2:
        out.append(raw[count // 2] & 0x0F)
    return bytes(out)


def encode_nibbles(nibbles: Iterable[int]) -> bytes:
    """Pack field elements two per byte, the first in the low nibble."""
    values = list(nibbles)
    for value in values:
        if not 0 <= value < 16:
            raise ValueError(f"nibble out of range 0..15: {value!r}")
    out = bytearray(lo | (hi << 4) for lo, hi in zip(values[0::2], values[1::2]))
    if len(values) % 2:
        out.append(values[-1])
    return bytes(out)


def _limbs_per_vector(m: int) -> int:
    return (m + 15) // 16


def unpack_m_vecs(data: BytesLike, vecs: int, m: int) -> list[int]:
    """Unpack ``vecs`` packed m-vectors into 64-bit little-endian limbs.

    Each vector takes ``m // 2`` bytes of input and is zero-padded to a
    whole number of limbs.
    """
    _check_count(vecs, "vector count")
    _check_count(m, "m")
    raw = _as_bytes(data, "data")
    stride = m // 2
    if len(raw) < vecs * stride:
        raise ValueError(f"need {vecs * stride} bytes for {vecs} vectors, got {len(raw)}")
    limbs_per_vec = _limbs_per_vector(m)
    width = 8 * limbs_per_vec
    limbs: list[int] = []
    for start in range(0, vecs * stride, stride):
        padded = raw[start:start + stride].ljust(width, b"\x00")
        limbs.extend(
            int.from_bytes(padded[8 * j:8 * j + 8], "little") for j in range(limbs_per_vec)
        )
    return limbs


def pack_m_vecs(limbs: Sequence[int], vecs: int, m: int) -> bytes:
    """Pack ``vecs`` m-vectors held as 64-bit limbs into ``m // 2`` bytes each."""
    _check_count(vecs, "vector count")
    _check_count(m, "m")
    limbs_per_vec = _limbs_per_vector(m)
    if len(limbs) < vecs * limbs_per_vec:
        raise ValueError(
            f"need {vecs * limbs_per_vec} limbs for {vecs} vectors, got {len(limbs)}"
        )
    stride = m // 2
    out = bytearray()
    for v in range(vecs):
        vector = limbs[v * limbs_per_vec:(v + 1) * limbs_per_vec]
        raw = b"".join((limb & _MASK64).to_bytes(8, "little") for limb in vector)
        out += raw[:stride]
    return bytes(out)


def transpose_16x16_nibbles(block: Sequence[int]) -> list[int]:
    """Transpose a 16x16 nibble matrix stored as 16 64-bit rows.

    Nibble ``j`` of row ``i`` (bits ``4j..4j+3``) becomes nibble ``i`` of row ``j``.
    """
    rows = list(block)
    if len(rows) != 16:
        raise ValueError(f"block must hold 16 rows, got {len(rows)}")
    for row in rows:
        if not 0 <= row <= _MASK64:
            raise ValueError(f"row value out of 64-bit range: {row!r}")
    return [
        sum(((row >> (4 * j)) & 0xF) << (4 * i) for i, row in enumerate(rows))
        for j in range(16)
    ]


def m_upper(m_vec_limbs: int, vectors: Sequence[int], size: int) -> list[int]:
    """Fold a ``size`` x ``size`` matrix of m-vectors into its upper triangle.

    Entry (r, c) with r < c becomes the sum of entries (r, c) and (c, r);
    diagonal entries are kept. Output is row-major over the upper triangle.
    """
    _check_count(m_vec_limbs, "m_vec_limbs")
    _check_count(size, "size")
    if len(vectors) < size * size * m_vec_limbs:
        raise ValueError(
            f"need {size * size * m_vec_limbs} limbs for a {size}x{size} matrix, "
            f"got {len(vectors)}"
        )

    def entry(r: int, c: int) -> Sequence[int]:
        start = m_vec_limbs * (r * size + c)
        return vectors[start:start + m_vec_limbs]

    out: list[int] = []
    for r in range(size):
        out.extend(entry(r, r))
        for c in range(r + 1, size):
            out.extend(a ^ b for a, b in zip(entry(r, c), entry(c, r)))
    return out