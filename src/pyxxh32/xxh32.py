from __future__ import annotations

import struct
from typing import Optional

from .errors import InvalidArgument

PRIME32_1 = 2654435761
PRIME32_2 = 2246822519
PRIME32_3 = 3266489917
PRIME32_4 = 668265263
PRIME32_5 = 374761393

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 16

_BLOCK = struct.Struct("<4I")
_WORD = struct.Struct("<I")


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (32 - b))) & _MASK_32


def rotl32(x: int, b: int) -> int:
    """Rotate left for 32-bit values."""
    if not 1 <= b <= 31:
        raise InvalidArgument(f"rotation count must be in [1, 31], got {b}")
    return _rotl(x & _MASK_32, b)


def _round(acc: int, word: int) -> int:
    acc = (acc + word * PRIME32_2) & _MASK_32
    return (_rotl(acc, 13) * PRIME32_1) & _MASK_32


def _check_seed(seed: int) -> int:
    if not isinstance(seed, int):
        raise TypeError("seed must be an int")
    if not 0 <= seed <= _MASK_32:
        raise InvalidArgument(f"seed must fit in 32 unsigned bits, got {seed}")
    return seed


def _as_view(data) -> memoryview:
    if isinstance(data, str):
        raise TypeError("data must be bytes-like, not str")
    try:
        view = memoryview(data)
    except TypeError as exc:
        raise TypeError("data must be bytes-like") from exc
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view


class XXH32:
    """
    Pure-Python xxHash32 with a streaming API.

    Input is folded into four 32-bit lanes one 16-byte group at a time; a
    16-byte pending buffer carries the tail between ``update`` calls, so the
    digest does not depend on how the input was chunked. The interface mirrors
    hashlib-style objects and returns 4-byte little-endian digests.
    """

    name = "xxh32"
    digest_size = 4
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"", seed: int = 0):
        self._pending = bytearray(_BLOCK_SIZE)
        self.reset(seed)
        self.update(data)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def total_len(self) -> int:
        return self._total_len

    @property
    def pending_len(self) -> int:
        return self._pending_len

    def reset(self, seed: Optional[int] = None) -> None:
        """Return to the initial state; ``None`` keeps the current seed."""
        if seed is None:
            seed = self._seed
        seed = _check_seed(seed)

        self._seed = seed
        self._v1 = (seed + PRIME32_1 + PRIME32_2) & _MASK_32
        self._v2 = (seed + PRIME32_2) & _MASK_32
        self._v3 = seed
        self._v4 = (seed - PRIME32_1) & _MASK_32
        self._total_len = 0
        self._pending_len = 0

    def copy(self) -> "XXH32":
        dup = self.__class__.__new__(self.__class__)
        dup._seed = self._seed
        dup._v1 = self._v1
        dup._v2 = self._v2
        dup._v3 = self._v3
        dup._v4 = self._v4
        dup._total_len = self._total_len
        dup._pending = bytearray(self._pending)
        dup._pending_len = self._pending_len
        return dup

    def update(self, data: bytes, offset: int = 0, count: Optional[int] = None) -> "XXH32":
        """
        Feed ``data[offset:offset + count]`` into the hash.

        ``count=None`` takes everything from ``offset`` to the end. Raises
        ``InvalidArgument`` if the range does not fit inside ``data``; the
        state is left untouched in that case.
        """
        view = _as_view(data)
        size = len(view)
        if not isinstance(offset, int) or (count is not None and not isinstance(count, int)):
            raise TypeError("offset and count must be ints")
        if offset < 0 or offset > size:
            raise InvalidArgument(f"offset {offset} is outside a buffer of {size} bytes")
        if count is None:
            count = size - offset
        if count < 0 or offset + count > size:
            raise InvalidArgument(
                f"range [{offset}, {offset + count}) does not fit a buffer of {size} bytes"
            )

        view = view[offset:offset + count]
        self._total_len = (self._total_len + count) & _MASK_64

        pending = self._pending
        pending_len = self._pending_len
        if pending_len + count < _BLOCK_SIZE:
            pending[pending_len:pending_len + count] = view
            self._pending_len = pending_len + count
            return self

        index = 0
        if pending_len:
            index = _BLOCK_SIZE - pending_len
            pending[pending_len:] = view[:index]
            self._mix_block(pending, 0)
            self._pending_len = 0

        limit = count - _BLOCK_SIZE
        while index <= limit:
            self._mix_block(view, index)
            index += _BLOCK_SIZE

        remainder = count - index
        pending[:remainder] = view[index:]
        self._pending_len = remainder
        return self

    def finish(self) -> bytes:
        """Return the 4-byte little-endian digest without altering the state."""
        return _WORD.pack(self._finalize())

    def digest(self) -> bytes:
        return self.finish()

    def hexdigest(self) -> str:
        return self.finish().hex()

    def intdigest(self) -> int:
        return self._finalize()

    # Internal helpers -------------------------------------------------
    def _mix_block(self, buf, offset: int) -> None:
        w1, w2, w3, w4 = _BLOCK.unpack_from(buf, offset)
        self._v1 = _round(self._v1, w1)
        self._v2 = _round(self._v2, w2)
        self._v3 = _round(self._v3, w3)
        self._v4 = _round(self._v4, w4)

    def _finalize(self) -> int:
        if self._total_len >= _BLOCK_SIZE:
            h = (
                _rotl(self._v1, 1)
                + _rotl(self._v2, 7)
                + _rotl(self._v3, 12)
                + _rotl(self._v4, 18)
            )
        else:
            h = self._seed + PRIME32_5

        h = (h + self._total_len) & _MASK_32

        pending = self._pending
        pending_len = self._pending_len
        index = 0
        while index <= pending_len - 4:
            h = (h + _WORD.unpack_from(pending, index)[0] * PRIME32_3) & _MASK_32
            h = (_rotl(h, 17) * PRIME32_4) & _MASK_32
            index += 4

        while index < pending_len:
            h = (h + pending[index] * PRIME32_5) & _MASK_32
            h = (_rotl(h, 11) * PRIME32_1) & _MASK_32
            index += 1

        # Avalanche
        h ^= h >> 15
        h = (h * PRIME32_2) & _MASK_32
        h ^= h >> 13
        h = (h * PRIME32_3) & _MASK_32
        h ^= h >> 16
        return h


def xxh32(data: bytes = b"", seed: int = 0) -> XXH32:
    """Convenience constructor matching hashlib-style usage."""
    return XXH32(data, seed)


def xxh32_digest(data: bytes, seed: int = 0) -> bytes:
    """One-shot xxHash32 returning the 4-byte little-endian digest."""
    return XXH32(data, seed).finish()


def xxh32_intdigest(data: bytes, seed: int = 0) -> int:
    return XXH32(data, seed).intdigest()


def xxh32_hexdigest(data: bytes, seed: int = 0) -> str:
    return XXH32(data, seed).hexdigest()


__all__ = [
    "PRIME32_1",
    "PRIME32_2",
    "PRIME32_3",
    "PRIME32_4",
    "PRIME32_5",
    "XXH32",
    "rotl32",
    "xxh32",
    "xxh32_digest",
    "xxh32_hexdigest",
    "xxh32_intdigest",
]
