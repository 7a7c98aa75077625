"""Deterministic AES-256 CTR-DRBG used to reproduce known-answer tests."""

from __future__ import annotations

from mayokit.aes import BLOCK_BYTES, aes256_ecb
from mayokit.memory import secure_clear

BytesLike = bytes | bytearray | memoryview

SEED_BYTES = 48
KEY_BYTES = 32
_V_MODULUS = 1 << (8 * BLOCK_BYTES)


def _as_bytes(value: BytesLike, what: str) -> bytes:
    try:
        return bytes(memoryview(value).cast("B"))
    except TypeError:
        raise TypeError(f"{what} must be bytes-like, not {type(value).__name__}") from None


class CtrDrbg:
    """AES-256 counter-mode deterministic random bit generator.

    Seeded with 48 bytes of entropy and an optional 48-byte personalization
    string; every call to :meth:`random_bytes` is followed by a state update.
    """

    def __init__(
        self,
        entropy_input: BytesLike,
        personalization: BytesLike | None = None,
    ) -> None:
        seed_material = bytearray(_as_bytes(entropy_input, "entropy input"))
        if len(seed_material) != SEED_BYTES:
            raise ValueError(
                f"entropy input must be {SEED_BYTES} bytes long, got {len(seed_material)}"
            )
        if personalization is not None:
            extra = _as_bytes(personalization, "personalization string")
            if len(extra) != SEED_BYTES:
                raise ValueError(
                    f"personalization string must be {SEED_BYTES} bytes long, got {len(extra)}"
                )
            seed_material = bytearray(a ^ b for a, b in zip(seed_material, extra))
        self._key = bytes(KEY_BYTES)
        self._v = bytes(BLOCK_BYTES)
        self._update(bytes(seed_material))
        secure_clear(seed_material)
        self.reseed_counter = 1

    def _next_block(self) -> bytes:
        counter = (int.from_bytes(self._v, "big") + 1) % _V_MODULUS
        self._v = counter.to_bytes(BLOCK_BYTES, "big")
        return aes256_ecb(self._v, self._key)

    def _update(self, provided_data: bytes | None) -> None:
        temp = b"".join(self._next_block() for _ in range(3))
        if provided_data is not None:
            temp = bytes(a ^ b for a, b in zip(temp, provided_data))
        self._key = temp[:KEY_BYTES]
        self._v = temp[KEY_BYTES:]

    def random_bytes(self, n: int) -> bytes:
        """Return the next ``n`` pseudo-random bytes."""
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"byte count must be an integer, not {type(n).__name__}")
        if n < 0:
            raise ValueError(f"byte count must not be negative: {n}")
        out = bytearray()
        while len(out) < n:
            out += self._next_block()
        self._update(None)
        self.reseed_counter += 1
        return bytes(out[:n])