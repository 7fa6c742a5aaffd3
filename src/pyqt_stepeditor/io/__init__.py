"""
Persistence layer.

Byte-level storage backends and the JSON gateway that loads and saves the
step sequence.
"""

from .base import ByteStore
from .exceptions import StorageResolutionError, LoadCorruptionError, SaveFailureError
from .backends import DiskByteStore, MemoryByteStore, resolve_save_path
from .persistence import PersistenceGateway, encode_steps, decode_steps

__all__ = [
    "ByteStore",
    "StorageResolutionError",
    "LoadCorruptionError",
    "SaveFailureError",
    "DiskByteStore",
    "MemoryByteStore",
    "resolve_save_path",
    "PersistenceGateway",
    "encode_steps",
    "decode_steps",
]
