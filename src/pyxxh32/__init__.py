"""
Pure-Python streaming xxHash32 for checksums, fingerprints and hash-table keys.
"""

from .errors import InvalidArgument
from .protocols import StreamingHash
from .stream import hash_file, hash_stream
from .xxh32 import (
    XXH32,
    rotl32,
    xxh32,
    xxh32_digest,
    xxh32_hexdigest,
    xxh32_intdigest,
)
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "InvalidArgument",
    "StreamingHash",
    "XXH32",
    "rotl32",
    "xxh32",
    "xxh32_digest",
    "xxh32_hexdigest",
    "xxh32_intdigest",
    "hash_file",
    "hash_stream",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
