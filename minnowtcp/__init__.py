"""Byte streams, stream reassembly, wrapping sequence numbers and a TCP receiver."""

__version__ = "0.1.0"

__all__ = ["byte_stream", "reassembler", "tcp_receiver", "wrapping_integers"]