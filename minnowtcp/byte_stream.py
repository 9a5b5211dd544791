"""A bounded, in-memory byte stream with a writing side and a reading side."""

from __future__ import annotations

__all__ = ["ByteStream", "read"]


class ByteStream:
    """A reliable byte stream of fixed capacity.

    A writer pushes bytes into the stream, as many as the free capacity
    allows, and may close it. A reader peeks at and pops buffered bytes.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()
        self._closed = False
        self._error = False
        self._bytes_pushed = 0
        self._bytes_popped = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self.capacity}, "
            f"buffered={len(self._buffer)}, closed={self._closed})"
        )

    # Writing side

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        accepted = bytes(data)[: self.available_capacity()]
        self._buffer.extend(accepted)
        self._bytes_pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        """Whether the writer has closed the stream."""
        return self._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self.capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes ever pushed."""
        return self._bytes_pushed

    # Reading side

    def peek(self) -> bytes:
        """Return the bytes currently buffered, without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        length = min(length, len(self._buffer))
        del self._buffer[:length]
        self._bytes_popped += length

    def is_finished(self) -> bool:
        """Whether the stream is closed and every byte has been popped."""
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        """Number of bytes pushed but not yet popped."""
        return len(self._buffer)

    def bytes_popped(self) -> int:
        """Total number of bytes ever popped."""
        return self._bytes_popped

    # Error state

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        """Whether the stream has had an error."""
        return self._error


def read(stream: ByteStream, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``stream`` and return them."""
    out = bytearray()
    while stream.bytes_buffered() and len(out) < max_len:
        view = stream.peek()
        if not view:
            raise RuntimeError("peek() returned no bytes while bytes are buffered")
        chunk = view[: max_len - len(out)]
        out.extend(chunk)
        stream.pop(len(chunk))
    return bytes(out)