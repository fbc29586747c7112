from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised for a byte range that does not fit its buffer, or a bad seed."""


__all__ = ["InvalidArgument"]
