"""One-shot SHAKE and SHA-3 functions built on the Keccak sponge."""

from __future__ import annotations

from mayokit.keccak import (
    SHA3_256_RATE,
    SHA3_384_RATE,
    SHA3_512_RATE,
    SHA3_DOMAIN,
    SHAKE128_RATE,
    SHAKE256_RATE,
    SHAKE_DOMAIN,
    KeccakSponge,
)

BytesLike = bytes | bytearray | memoryview


def _hash(rate: int, domain: int, data: BytesLike, length: int) -> bytes:
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f"output length must be an integer, not {type(length).__name__}")
    if length < 0:
        raise ValueError(f"output length must not be negative: {length}")
    sponge = KeccakSponge(rate, domain)
    sponge.absorb(data)
    sponge.finalize()
    return sponge.squeeze(length)


def shake128(data: BytesLike, length: int) -> bytes:
    """Return ``length`` bytes of SHAKE128 output for ``data``."""
    return _hash(SHAKE128_RATE, SHAKE_DOMAIN, data, length)


def shake256(data: BytesLike, length: int) -> bytes:
    """Return ``length`` bytes of SHAKE256 output for ``data``."""
    return _hash(SHAKE256_RATE, SHAKE_DOMAIN, data, length)


def sha3_256(data: BytesLike) -> bytes:
    """Return the 32-byte SHA3-256 digest of ``data``."""
    return _hash(SHA3_256_RATE, SHA3_DOMAIN, data, 32)


def sha3_384(data: BytesLike) -> bytes:
    """Return the 48-byte SHA3-384 digest of ``data``."""
    return _hash(SHA3_384_RATE, SHA3_DOMAIN, data, 48)


def sha3_512(data: BytesLike) -> bytes:
    """Return the 64-byte SHA3-512 digest of ``data``."""
    return _hash(SHA3_512_RATE, SHA3_DOMAIN, data, 64)