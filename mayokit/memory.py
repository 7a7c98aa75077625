"""Zeroing of buffers that held secret material."""

from __future__ import annotations

from typing import Any


def secure_clear(buffer: Any) -> None:
    """Overwrite a mutable buffer with zeros in place, keeping its length.

    Accepts any writable buffer (bytearray, array.array, writable memoryview)
    or a list of integers. Immutable objects raise TypeError.
    """
    if isinstance(buffer, list):
        buffer[:] = [0] * len(buffer)
        return
    if isinstance(buffer, (bytes, str)):
        raise TypeError(f"cannot clear immutable {type(buffer).__name__}")
    try:
        view = memoryview(buffer)
    except TypeError:
        raise TypeError(f"cannot clear object of type {type(buffer).__name__}") from None
    with view:
        if view.readonly:
            raise TypeError("cannot clear a read-only buffer")
        with view.cast("B") as raw:
            raw[:] = bytes(raw.nbytes)