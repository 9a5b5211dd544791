"""Reassembly of indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

from bisect import bisect_left

from minnowtcp.byte_stream import ByteStream

__all__ = ["Reassembler"]


class Reassembler:
    """Puts out-of-order, overlapping substrings back together in order.

    Bytes that are next in the stream go straight to the output stream.
    Bytes that fit in the output's free capacity but follow a gap are kept
    until the gap is filled. Bytes beyond that capacity are discarded.
    The output is closed once the last byte has been written.
    """

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._starts: list[int] = []
        self._segments: dict[int, bytes] = {}
        self._pending_bytes = 0
        self._end_index: int | None = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pending={self._pending_bytes}, "
            f"segments={len(self._starts)}, output={self._output!r})"
        )

    def output(self) -> ByteStream:
        """The stream that reassembled bytes are written into."""
        return self._output

    def count_bytes_pending(self) -> int:
        """How many bytes are held here, waiting for earlier bytes."""
        return self._pending_bytes

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` whose first byte has stream index ``first_index``."""
        if first_index < 0:
            raise ValueError("first_index must not be negative")
        data = bytes(data)
        stream = self._output

        if not data:
            if self._end_index is None and is_last_substring:
                self._end_index = first_index
            self._try_close()
            return

        if stream.is_closed() or stream.available_capacity() == 0:
            return

        first_unassembled = stream.bytes_pushed()
        first_unacceptable = first_unassembled + stream.available_capacity()

        if first_index + len(data) <= first_unassembled or first_index >= first_unacceptable:
            return

        if first_index + len(data) > first_unacceptable:
            data = data[: first_unacceptable - first_index]
            is_last_substring = False

        if first_index < first_unassembled:
            data = data[first_unassembled - first_index :]
            first_index = first_unassembled

        end = first_index + len(data)
        if self._end_index is None and is_last_substring:
            self._end_index = end

        self._split(end)
        self._split(first_index)
        lo = bisect_left(self._starts, first_index)
        hi = bisect_left(self._starts, end)
        for start in self._starts[lo:hi]:
            self._pending_bytes -= len(self._segments.pop(start))
        self._starts[lo:hi] = [first_index]
        self._segments[first_index] = data
        self._pending_bytes += len(data)

        self._flush()
        self._try_close()

    def _split(self, pos: int) -> None:
        """Ensure no stored segment straddles ``pos``."""
        i = bisect_left(self._starts, pos)
        if i < len(self._starts) and self._starts[i] == pos:
            return
        if i == 0:
            return
        prev_start = self._starts[i - 1]
        segment = self._segments[prev_start]
        if prev_start + len(segment) > pos:
            cut = pos - prev_start
            self._segments[prev_start] = segment[:cut]
            self._segments[pos] = segment[cut:]
            self._starts.insert(i, pos)

    def _flush(self) -> None:
        """Write every stored segment that is now next in the stream."""
        stream = self._output
        while self._starts and self._starts[0] == stream.bytes_pushed():
            start = self._starts.pop(0)
            payload = self._segments.pop(start)
            self._pending_bytes -= len(payload)
            stream.push(payload)

    def _try_close(self) -> None:
        if self._end_index is not None and self._end_index == self._output.bytes_pushed():
            self._output.close()