"""Building blocks for the MAYO signature scheme: Keccak/SHAKE, SHA-3, AES, CTR-DRBG, encodings and buffer clearing."""

__version__ = "1.0.0"

__all__ = ["aes", "codec", "drbg", "keccak", "memory", "xof"]