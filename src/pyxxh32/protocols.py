from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class StreamingHash(Protocol):
    """Anything that hashes bytes fed in chunks: reset, update, finish."""

    name: str
    digest_size: int

    def reset(self, seed: Optional[int] = ...) -> None: ...

    def update(self, data: bytes, offset: int = ..., count: Optional[int] = ...) -> object: ...

    def finish(self) -> bytes: ...


__all__ = ["StreamingHash"]
