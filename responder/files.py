"""Local file access: identity, stat metadata and windowed byte streaming."""

import os
from pathlib import Path
from typing import Iterator, Optional, Union

from common.constants import STREAM_PIECE_SIZE_BYTES


class LocalFile:
    """
    A file on the local filesystem, addressed by path.

    Stat metadata is read on access, so the object can be created for a path
    that does not exist; callers check ``is_file()`` before asking for
    ``size`` or ``mtime``.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"LocalFile({str(self._path)!r})"

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def name(self) -> str:
        return self._path.name

    def exists(self) -> bool:
        return self._path.exists()

    def is_file(self) -> bool:
        return self._path.is_file()

    @property
    def size(self) -> int:
        return self._path.stat().st_size

    @property
    def mtime(self) -> int:
        """Modification time in whole seconds since the epoch."""
        return int(self._path.stat().st_mtime)

    def iter_bytes(
        self,
        start: int = 0,
        end: Optional[int] = None,
        piece_size: int = STREAM_PIECE_SIZE_BYTES
    ) -> Iterator[bytes]:
        """
        Stream the inclusive byte window ``[start, end]`` in pieces.

        Args:
            start: First byte offset to send
            end: Last byte offset to send (defaults to the last byte of the file)
            piece_size: Size of each piece in bytes (default 64KB)

        Yields:
            File data pieces; nothing at all for an empty or reversed window

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If read operation fails
        """
        if end is None:
            end = self.size - 1

        remaining = end - start + 1
        if remaining <= 0:
            return

        with open(self._path, 'rb') as f:
            f.seek(start, os.SEEK_SET)
            while remaining > 0:
                piece = f.read(min(piece_size, remaining))
                if not piece:
                    break
                remaining -= len(piece)
                yield piece

    def read_bytes(self, start: int = 0, end: Optional[int] = None) -> bytes:
        """Read the inclusive byte window ``[start, end]`` into memory."""
        return b"".join(self.iter_bytes(start, end))
