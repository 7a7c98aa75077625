"""AES block encryption with ECB and counter-mode keystream helpers."""

from __future__ import annotations

from collections.abc import Iterator

BytesLike = bytes | bytearray | memoryview

BLOCK_BYTES = 16
NONCE_BYTES = 12
_KEY_ROUNDS = {16: 10, 24: 12, 32: 14}
_RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)
_COUNTER_MODULUS = 1 << 32


def _rotl8(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (8 - shift))) & 0xFF


def _make_sbox() -> tuple[int, ...]:
    """Build the AES S-box from field inverses and the affine map."""
    sbox = [0] * 256
    p = q = 1
    while True:
        # p runs over the multiplicative group via powers of 3, q over powers of 3^-1.
        p = p ^ ((p << 1) & 0xFF) ^ (0x1B if p & 0x80 else 0)
        q ^= q << 1
        q ^= q << 2
        q ^= q << 4
        q &= 0xFF
        if q & 0x80:
            q ^= 0x09
        sbox[p] = (
            q ^ _rotl8(q, 1) ^ _rotl8(q, 2) ^ _rotl8(q, 3) ^ _rotl8(q, 4) ^ 0x63
        )
        if p == 1:
            break
    sbox[0] = 0x63
    return tuple(sbox)


def _xtime(value: int) -> int:
    value <<= 1
    return (value ^ 0x11B) if value & 0x100 else value


def _ror32(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (32 - shift))) & 0xFFFFFFFF


_SBOX = _make_sbox()
_TE0 = tuple(
    (_xtime(s) << 24) | (s << 16) | (s << 8) | (_xtime(s) ^ s) for s in _SBOX
)
_TE1 = tuple(_ror32(w, 8) for w in _TE0)
_TE2 = tuple(_ror32(w, 16) for w in _TE0)
_TE3 = tuple(_ror32(w, 24) for w in _TE0)


def _sub_word(word: int) -> int:
    return (
        (_SBOX[word >> 24] << 24)
        | (_SBOX[(word >> 16) & 0xFF] << 16)
        | (_SBOX[(word >> 8) & 0xFF] << 8)
        | _SBOX[word & 0xFF]
    )


def _as_bytes(value: BytesLike, what: str) -> bytes:
    try:
        return bytes(memoryview(value).cast("B"))
    except TypeError:
        raise TypeError(f"{what} must be bytes-like, not {type(value).__name__}") from None


class AES:
    """AES encryption with a 128-, 192- or 256-bit key."""

    def __init__(self, key: BytesLike) -> None:
        key_bytes = _as_bytes(key, "key")
        try:
            self.rounds = _KEY_ROUNDS[len(key_bytes)]
        except KeyError:
            raise ValueError(
                f"AES key must be 16, 24 or 32 bytes long, got {len(key_bytes)}"
            ) from None
        self.key_size = len(key_bytes)
        self._round_keys = self._expand_key(key_bytes)

    def _expand_key(self, key: bytes) -> tuple[int, ...]:
        nk = len(key) // 4
        words = [int.from_bytes(key[4 * i:4 * i + 4], "big") for i in range(nk)]
        for i in range(nk, 4 * (self.rounds + 1)):
            temp = words[i - 1]
            if i % nk == 0:
                temp = ((temp << 8) | (temp >> 24)) & 0xFFFFFFFF
                temp = _sub_word(temp) ^ (_RCON[i // nk - 1] << 24)
            elif nk > 6 and i % nk == 4:
                temp = _sub_word(temp)
            words.append(words[i - nk] ^ temp)
        return tuple(words)

    def _encrypt(self, block: bytes) -> bytes:
        rk = self._round_keys
        s0 = int.from_bytes(block[0:4], "big") ^ rk[0]
        s1 = int.from_bytes(block[4:8], "big") ^ rk[1]
        s2 = int.from_bytes(block[8:12], "big") ^ rk[2]
        s3 = int.from_bytes(block[12:16], "big") ^ rk[3]
        te0, te1, te2, te3 = _TE0, _TE1, _TE2, _TE3
        for r in range(1, self.rounds):
            base = 4 * r
            t0 = (te0[s0 >> 24] ^ te1[(s1 >> 16) & 0xFF]
                  ^ te2[(s2 >> 8) & 0xFF] ^ te3[s3 & 0xFF] ^ rk[base])
            t1 = (te0[s1 >> 24] ^ te1[(s2 >> 16) & 0xFF]
                  ^ te2[(s3 >> 8) & 0xFF] ^ te3[s0 & 0xFF] ^ rk[base + 1])
            t2 = (te0[s2 >> 24] ^ te1[(s3 >> 16) & 0xFF]
                  ^ te2[(s0 >> 8) & 0xFF] ^ te3[s1 & 0xFF] ^ rk[base + 2])
            t3 = (te0[s3 >> 24] ^ te1[(s0 >> 16) & 0xFF]
                  ^ te2[(s1 >> 8) & 0xFF] ^ te3[s2 & 0xFF] ^ rk[base + 3])
            s0, s1, s2, s3 = t0, t1, t2, t3
        sb = _SBOX
        base = 4 * self.rounds
        columns = ((s0, s1, s2, s3), (s1, s2, s3, s0), (s2, s3, s0, s1), (s3, s0, s1, s2))
        out = bytearray()
        for index, (a, b, c, d) in enumerate(columns):
            word = (
                (sb[a >> 24] << 24)
                | (sb[(b >> 16) & 0xFF] << 16)
                | (sb[(c >> 8) & 0xFF] << 8)
                | sb[d & 0xFF]
            ) ^ rk[base + index]
            out += word.to_bytes(4, "big")
        return bytes(out)

    def encrypt_block(self, block: BytesLike) -> bytes:
        """Encrypt one 16-byte block."""
        data = _as_bytes(block, "block")
        if len(data) != BLOCK_BYTES:
            raise ValueError(f"AES block must be {BLOCK_BYTES} bytes long, got {len(data)}")
        return self._encrypt(data)

    def ecb_encrypt(self, data: BytesLike) -> bytes:
        """Encrypt a whole number of blocks independently (ECB mode)."""
        raw = _as_bytes(data, "data")
        if len(raw) % BLOCK_BYTES:
            raise ValueError(
                f"ECB input length must be a multiple of {BLOCK_BYTES}, got {len(raw)}"
            )
        return b"".join(
            self._encrypt(raw[i:i + BLOCK_BYTES]) for i in range(0, len(raw), BLOCK_BYTES)
        )

    def _keystream_blocks(self, nonce: bytes) -> Iterator[bytes]:
        counter = 0
        while True:
            yield self._encrypt(nonce + counter.to_bytes(4, "big"))
            counter = (counter + 1) % _COUNTER_MODULUS

    def ctr_keystream(self, length: int, nonce: BytesLike = bytes(NONCE_BYTES)) -> bytes:
        """Return ``length`` bytes of counter-mode keystream.

        Each counter block is the 12-byte nonce followed by a 32-bit
        big-endian counter that starts at zero.
        """
        if not isinstance(length, int) or isinstance(length, bool):
            raise TypeError(f"length must be an integer, not {type(length).__name__}")
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        nonce_bytes = _as_bytes(nonce, "nonce")
        if len(nonce_bytes) != NONCE_BYTES:
            raise ValueError(
                f"nonce must be {NONCE_BYTES} bytes long, got {len(nonce_bytes)}"
            )
        out = bytearray()
        blocks = self._keystream_blocks(nonce_bytes)
        while len(out) < length:
            out += next(blocks)
        return bytes(out[:length])


def aes128_ctr(key: BytesLike, length: int) -> bytes:
    """AES-128 keystream with an all-zero nonce, as used to expand public seeds."""
    key_bytes = _as_bytes(key, "key")
    if len(key_bytes) != 16:
        raise ValueError(f"AES-128 key must be 16 bytes long, got {len(key_bytes)}")
    return AES(key_bytes).ctr_keystream(length)


def aes256_ecb(block: BytesLike, key: BytesLike) -> bytes:
    """Encrypt a single 16-byte block with a 32-byte AES-256 key."""
    key_bytes = _as_bytes(key, "key")
    if len(key_bytes) != 32:
        raise ValueError(f"AES-256 key must be 32 bytes long, got {len(key_bytes)}")
    return AES(key_bytes).encrypt_block(block)