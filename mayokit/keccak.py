"""The Keccak-f[1600] permutation and an incremental Keccak sponge."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

SHAKE128_RATE = 168
SHAKE256_RATE = 136
SHA3_256_RATE = 136
SHA3_384_RATE = 104
SHA3_512_RATE = 72

SHAKE_DOMAIN = 0x1F
SHA3_DOMAIN = 0x06

_LANES = 25
_ROUNDS = 24
_MASK64 = (1 << 64) - 1
_STATE_BYTES = 8 * _LANES


def _lfsr_bits() -> Iterator[int]:
    """Output bits of the LFSR x^8 + x^6 + x^5 + x^4 + 1 that drives iota."""
    register = 1
    while True:
        yield register & 1
        register <<= 1
        if register & 0x100:
            register ^= 0x171


def _make_round_constants() -> tuple[int, ...]:
    bits = _lfsr_bits()
    constants = []
    for _ in range(_ROUNDS):
        constant = 0
        for j in range(7):
            if next(bits):
                constant |= 1 << ((1 << j) - 1)
        constants.append(constant)
    return tuple(constants)


def _make_rotation_offsets() -> tuple[int, ...]:
    offsets = [0] * _LANES
    x, y = 1, 0
    for t in range(24):
        offsets[x + 5 * y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    return tuple(offsets)


def _make_pi_targets() -> tuple[int, ...]:
    targets = [0] * _LANES
    for x in range(5):
        for y in range(5):
            targets[x + 5 * y] = y + 5 * ((2 * x + 3 * y) % 5)
    return tuple(targets)


_ROUND_CONSTANTS = _make_round_constants()
_ROTATIONS = _make_rotation_offsets()
_PI_TARGETS = _make_pi_targets()


def _rol(value: int, shift: int) -> int:
    if shift == 0:
        return value
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _permute(lanes: list[int]) -> None:
    """Apply Keccak-f[1600] to ``lanes`` in place."""
    for constant in _ROUND_CONSTANTS:
        columns = [
            lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
            for x in range(5)
        ]
        for x in range(5):
            d = columns[(x - 1) % 5] ^ _rol(columns[(x + 1) % 5], 1)
            for y in range(0, _LANES, 5):
                lanes[x + y] ^= d

        moved = [0] * _LANES
        for index, lane in enumerate(lanes):
            moved[_PI_TARGETS[index]] = _rol(lane, _ROTATIONS[index])

        for y in range(0, _LANES, 5):
            row = moved[y:y + 5]
            for x in range(5):
                lanes[x + y] = row[x] ^ (~row[(x + 1) % 5] & _MASK64 & row[(x + 2) % 5])

        lanes[0] ^= constant


def keccak_f1600(state: Sequence[int]) -> list[int]:
    """Return the Keccak-f[1600] permutation of a 25-lane state.

    The input is left unchanged; lanes are 64-bit little-endian words.
    """
    lanes = list(state)
    if len(lanes) != _LANES:
        raise ValueError(f"Keccak state must have {_LANES} lanes, got {len(lanes)}")
    for lane in lanes:
        if not 0 <= lane <= _MASK64:
            raise ValueError(f"lane value out of 64-bit range: {lane!r}")
    _permute(lanes)
    return lanes


class KeccakSponge:
    """Incremental Keccak sponge: absorb, finalize once, then squeeze."""

    def __init__(self, rate: int, domain: int) -> None:
        if not isinstance(rate, int) or rate <= 0 or rate >= _STATE_BYTES or rate % 8:
            raise ValueError(f"rate must be a positive multiple of 8 below {_STATE_BYTES}: {rate!r}")
        if not isinstance(domain, int) or not 0 < domain <= 0xFF:
            raise ValueError(f"domain separation byte must be in 1..255: {domain!r}")
        self.rate = rate
        self.domain = domain
        self._lanes = [0] * _LANES
        self._block = bytearray(rate)
        self._position = 0
        self._finalized = False
        self._available = 0

    def _absorb_block(self) -> None:
        for i in range(self.rate // 8):
            self._lanes[i] ^= int.from_bytes(self._block[8 * i:8 * i + 8], "little")
        self._block = bytearray(self.rate)
        self._position = 0

    def absorb(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more input into the sponge."""
        if self._finalized:
            raise RuntimeError("cannot absorb after the sponge has been finalized")
        view = memoryview(data).cast("B")
        offset = 0
        while offset < len(view):
            take = min(self.rate - self._position, len(view) - offset)
            self._block[self._position:self._position + take] = view[offset:offset + take]
            self._position += take
            offset += take
            if self._position == self.rate:
                self._absorb_block()
                _permute(self._lanes)

    def finalize(self) -> None:
        """Pad the absorbed input and switch the sponge to squeezing."""
        if self._finalized:
            raise RuntimeError("sponge is already finalized")
        self._block[self._position] ^= self.domain
        self._block[self.rate - 1] ^= 0x80
        self._absorb_block()
        self._finalized = True
        self._available = 0

    def squeeze(self, length: int) -> bytes:
        """Return the next ``length`` bytes of output."""
        if not self._finalized:
            raise RuntimeError("sponge must be finalized before squeezing")
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        out = bytearray()
        while len(out) < length:
            if self._available == 0:
                _permute(self._lanes)
                self._available = self.rate
            rate_bytes = b"".join(
                lane.to_bytes(8, "little") for lane in self._lanes[: self.rate // 8]
            )
            start = self.rate - self._available
            take = min(self._available, length - len(out))
            out += rate_bytes[start:start + take]
            self._available -= take
        return bytes(out)

    def copy(self) -> KeccakSponge:
        """Return an independent sponge with the same state."""
        clone = KeccakSponge(self.rate, self.domain)
        clone._lanes = list(self._lanes)
        clone._block = bytearray(self._block)
        clone._position = self._position
        clone._finalized = self._finalized
        clone._available = self._available
        return clone