"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from minnowtcp.byte_stream import ByteStream
from minnowtcp.reassembler import Reassembler
from minnowtcp.wrapping_integers import Wrap32

__all__ = ["TCPSenderMessage", "TCPReceiverMessage", "TCPReceiver"]

_MAX_WINDOW = 0xFFFF


@dataclass
class TCPSenderMessage:
    """A segment as sent by the peer's sender."""

    seqno: Wrap32
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False


@dataclass
class TCPReceiverMessage:
    """Acknowledgement and flow-control information for the peer's sender."""

    ackno: Wrap32 | None = None
    window_size: int = 0
    rst: bool = False


class TCPReceiver:
    """Inserts incoming payloads into a reassembler at the right stream index."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._isn: Wrap32 | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(isn={self._isn!r}, reassembler={self._reassembler!r})"

    def reassembler(self) -> Reassembler:
        """The reassembler that payloads are fed into."""
        return self._reassembler

    def output(self) -> ByteStream:
        """The inbound byte stream."""
        return self._reassembler.output()

    def receive(self, message: TCPSenderMessage) -> None:
        """Process a segment from the peer's sender."""
        stream = self.output()
        if stream.has_error():
            return
        if message.rst:
            stream.set_error()
            return
        if message.syn and self._isn is None:
            self._isn = message.seqno
        if self._isn is None:
            return

        absolute = message.seqno.unwrap(self._isn, stream.bytes_pushed())
        if message.syn:
            stream_index = 0
        elif absolute == 0:
            # Only the SYN may occupy the first sequence number.
            return
        else:
            stream_index = absolute - 1
        self._reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the message to send back to the peer's sender."""
        stream = self.output()
        ackno = None
        if self._isn is not None:
            next_seqno = stream.bytes_pushed() + 1 + int(stream.is_closed())
            ackno = Wrap32.wrap(next_seqno, self._isn)
        return TCPReceiverMessage(
            ackno=ackno,
            window_size=min(_MAX_WINDOW, stream.available_capacity()),
            rst=stream.has_error(),
        )