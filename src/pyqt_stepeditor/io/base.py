"""Protocols for IO backends."""

from typing import Any, Protocol


class ByteStore(Protocol):
    """Protocol for a single-document byte storage backend."""

    @property
    def location(self) -> Any:
        ...

    def exists(self) -> bool:
        ...

    def read_bytes(self) -> bytes:
        ...

    def write_bytes(self, data: bytes) -> None:
        ...
