"""SHA-1 message digests of strings, bytes, streams and files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO, Union

_CHUNK_SIZE = 64 * 1024

Data = Union[str, bytes, bytearray, memoryview, BinaryIO]


class Sha1:
    """Incremental SHA-1 hasher.

    ``final()`` and ``digest()`` return the result and reset the hasher, so
    the same object can be reused for the next message.
    """

    def __init__(self) -> None:
        self._hash = hashlib.sha1()

    def update(self, data: Data) -> None:
        """Feed text (UTF-8 encoded), bytes, or a binary stream to the hasher."""
        if isinstance(data, str):
            self._hash.update(data.encode("utf-8"))
        elif isinstance(data, (bytes, bytearray, memoryview)):
            self._hash.update(data)
        else:
            for chunk in iter(lambda: data.read(_CHUNK_SIZE), b""):
                self._hash.update(chunk)

    def final(self) -> str:
        """Return the digest as 40 lower-case hexadecimal digits, then reset."""
        result = self._hash.hexdigest()
        self._reset()
        return result

    def digest(self) -> bytes:
        """Return the raw 20-byte digest, then reset."""
        result = self._hash.digest()
        self._reset()
        return result

    @staticmethod
    def from_file(filename: str | Path) -> str:
        """Return the hexadecimal SHA-1 of a file's contents."""
        checksum = Sha1()
        with open(filename, "rb") as stream:
            checksum.update(stream)
        return checksum.final()

    def _reset(self) -> None:
        self._hash = hashlib.sha1()