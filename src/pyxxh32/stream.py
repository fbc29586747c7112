"""
Hash binary file objects and files on disk without loading them whole.
"""

from __future__ import annotations

import logging
import os
from typing import BinaryIO, Union

from .errors import InvalidArgument
from .xxh32 import XXH32

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def hash_stream(stream: BinaryIO, seed: int = 0, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """
    Hash everything readable from a binary stream.

    Args:
        stream: File-like object opened in binary mode
        seed: 32-bit seed (default: 0)
        chunk_size: Bytes requested per read

    Returns:
        4-byte little-endian xxh32 digest

    Raises:
        InvalidArgument: If chunk_size is not positive
        TypeError: If the stream yields str (text mode)
    """
    if chunk_size <= 0:
        raise InvalidArgument(f"chunk_size must be positive, got {chunk_size}")

    hasher = XXH32(seed=seed)
    while True:
        chunk = stream.read(chunk_size)
        if isinstance(chunk, str):
            raise TypeError("stream must be opened in binary mode")
        if not chunk:
            break
        hasher.update(chunk)

    logger.debug("hashed %d bytes from stream, seed=%#010x", hasher.total_len, seed)
    return hasher.finish()


def hash_file(path: Union[str, os.PathLike], seed: int = 0, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Hash the contents of the file at ``path``."""
    logger.debug("hashing file %s", path)
    with open(path, "rb") as f:
        return hash_stream(f, seed=seed, chunk_size=chunk_size)


__all__ = ["DEFAULT_CHUNK_SIZE", "hash_file", "hash_stream"]
