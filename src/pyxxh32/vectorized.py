from __future__ import annotations

from typing import Any, Optional

from .xxh32 import xxh32_intdigest

try:
    import numpy as _np  # type: ignore

    _NUMPY_GENERIC = _np.generic  # type: ignore[attr-defined]
except Exception:  # pragma: no cover - numpy is optional
    _NUMPY_GENERIC = ()  # type: ignore[assignment]


def _element_bytes(value: Any) -> Optional[bytes]:
    if _NUMPY_GENERIC and isinstance(value, _NUMPY_GENERIC):
        value = value.item()
    if value is None:
        return None
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Unsupported element type for xxh32 hashing: {type(value)!r}")


def _hash_values(values, seed: int):
    hashes = []
    for val in values:
        data = _element_bytes(val)
        hashes.append(None if data is None else xxh32_intdigest(data, seed))
    return hashes


def hash_pandas_series(series: Any, seed: int = 0):
    """
    Hash a pandas Series of str/bytes into a nullable UInt32 Series.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_values(series, seed)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="UInt32")


def hash_arrow_array(array: Any, seed: int = 0):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint32 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = _hash_values(arr.to_pylist(), seed)
    return pa.array(hashes, type=pa.uint32())


def hash_polars_series(series: Any, seed: int = 0):
    """
    Hash a polars Series into a UInt32 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_values(ser.to_list(), seed)
    name = getattr(ser, "name", None) or "xxh32"
    return pl.Series(name=name, values=hashes, dtype=pl.UInt32)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
