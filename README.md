# mayokit

`mayokit` provides, in plain Python with no third-party dependencies, the
primitive building blocks used by the MAYO multivariate signature scheme:

- `mayokit.keccak`: the Keccak-f[1600] permutation (`keccak_f1600`) and an
  incremental sponge (`KeccakSponge`),
- `mayokit.xof`: one-shot `shake128`, `shake256`, `sha3_256`, `sha3_384`
  and `sha3_512`,
- `mayokit.aes`: AES with 128-, 192- or 256-bit keys (`AES`), plus the
  helpers `aes128_ctr` and `aes256_ecb`,
- `mayokit.drbg`: a deterministic AES-256 CTR-DRBG (`CtrDrbg`) for
  reproducible test vectors,
- `mayokit.codec`: nibble packing and m-vector layout helpers,
- `mayokit.memory`: `secure_clear` for zeroing buffers that held secrets.

It is meant for study, testing and interoperability checks, not for speed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Hashing

```python
from mayokit.xof import shake256, sha3_256
from mayokit.keccak import KeccakSponge

digest = shake256(b"message", 32)
h = sha3_256(b"abc")

# Incremental use of the sponge (SHAKE256: rate 136, domain byte 0x1F)
sponge = KeccakSponge(136, 0x1F)
sponge.absorb(b"mess")
sponge.absorb(b"age")
sponge.finalize()
assert sponge.squeeze(32) == digest

# A copy continues independently of the original
other = sponge.copy()
assert other.squeeze(8) == sponge.squeeze(8)
```

Absorbing after `finalize()`, finalizing twice, or squeezing before
finalizing raises `RuntimeError`.

## AES and the DRBG

```python
from mayokit.aes import AES, aes128_ctr, aes256_ecb
from mayokit.drbg import CtrDrbg

stream = aes128_ctr(bytes(16), 64)          # AES-128 CTR keystream, all-zero nonce
block = aes256_ecb(bytes(16), bytes(32))    # one AES-256 block
cipher = AES(bytes(16))
assert cipher.encrypt_block(bytes(16)) == cipher.ecb_encrypt(bytes(16))
ks = cipher.ctr_keystream(40, bytes(12))    # 12-byte nonce + 32-bit counter

drbg = CtrDrbg(bytes(range(48)), None)      # 48-byte entropy input
seed = drbg.random_bytes(48)
```

`CtrDrbg` takes 48 bytes of entropy and an optional 48-byte personalization
string; the same inputs always give the same output stream.

## Encodings

```python
from mayokit.codec import decode_nibbles, encode_nibbles, unpack_m_vecs, pack_m_vecs

nibbles = decode_nibbles(b"\x21\x43", 4)    # b"\x01\x02\x03\x04"
assert encode_nibbles(nibbles) == b"\x21\x43"

limbs = unpack_m_vecs(bytes(range(39)), 1, 78)   # one 78-element vector -> 5 limbs
assert pack_m_vecs(limbs, 1, 78) == bytes(range(39))
```

`transpose_16x16_nibbles` transposes a 16x16 nibble matrix held as 16
64-bit rows, and `m_upper` folds a square matrix of m-vectors into its
upper triangle.

## Clearing secrets

```python
from mayokit.memory import secure_clear

buf = bytearray(b"secret")
secure_clear(buf)
assert buf == bytearray(6)
```

## What this package does not do

`mayokit` contains only the primitives listed above. It does not define
the MAYO parameter sets, and it does not generate key pairs, expand keys,
sign or verify messages. It has no command-line program and does not
write known-answer-test files; `CtrDrbg` only supplies the deterministic
random bytes such files are built from.