"""Stream handles returned by ``LocalFileSystem.open``."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import IO, Any

logger = logging.getLogger(__name__)

__all__ = ["ByteReader", "ByteWriter", "TextReader", "TextWriter"]


class _Stream:
    """Common lifecycle for all stream handles.

    A handle owns an open file object until :meth:`close` is called.
    Using it as a context manager closes it on every exit path.
    """

    def __init__(self, handle: IO[Any], path: str) -> None:
        self._handle = handle
        self.path = path

    @property
    def closed(self) -> bool:
        """True once the handle has been closed."""
        return self._handle.closed

    def close(self) -> None:
        """Release the underlying file. Closing twice is a no-op."""
        if not self._handle.closed:
            self._handle.close()
            logger.debug("Closed %s for %s", type(self).__name__, self.path)

    def _ensure_open(self) -> None:
        if self._handle.closed:
            raise ValueError(f"I/O operation on closed stream: {self.path}")

    def __enter__(self) -> _Stream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<{type(self).__name__} {self.path!r} ({state})>"


class TextReader(_Stream):
    """Reads decoded text."""

    def read(self, size: int = -1) -> str:
        """Read up to ``size`` characters, or everything left if negative."""
        self._ensure_open()
        return self._handle.read(size)


class TextWriter(_Stream):
    """Writes text, truncating or appending depending on how it was opened."""

    def write(self, data: str) -> int:
        """Write ``data`` and return the number of characters written."""
        self._ensure_open()
        return self._handle.write(data)

    def flush(self) -> None:
        self._ensure_open()
        self._handle.flush()


class ByteReader(_Stream):
    """Reads raw bytes."""

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left if negative."""
        self._ensure_open()
        return self._handle.read(size)


class ByteWriter(_Stream):
    """Writes raw bytes.

    ``str`` data is accepted and encoded with the writer's encoding.
    """

    def __init__(self, handle: IO[bytes], path: str, encoding: str = "utf-8") -> None:
        super().__init__(handle, path)
        self.encoding = encoding

    def write(self, data: bytes | bytearray | memoryview | str) -> int:
        """Write ``data`` and return the number of bytes written."""
        self._ensure_open()
        if isinstance(data, str):
            data = data.encode(self.encoding)
        return self._handle.write(data)

    def flush(self) -> None:
        self._ensure_open()
        self._handle.flush()
