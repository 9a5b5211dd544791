# minnowtcp

The receiving half of a TCP connection, built from small parts that can be
used and tested on their own:

- `minnowtcp.byte_stream`: `ByteStream` is an in-memory byte pipe with a fixed
  capacity. Bytes are added with `push()` (anything beyond the free capacity
  is dropped), looked at with `peek()` and removed with `pop()`. `close()`
  marks the end of the stream, and `is_finished()` tells when it is closed and
  empty. The `read(stream, max_len)` helper takes up to `max_len` bytes out in
  one call and returns them.
- `minnowtcp.wrapping_integers`: `Wrap32` is a 32-bit sequence number that
  wraps around. `Wrap32.wrap(n, zero_point)` turns an absolute position into
  the number that goes on the wire; `unwrap(zero_point, checkpoint)` returns
  the absolute position closest to `checkpoint` that wraps to it.
- `minnowtcp.reassembler`: `Reassembler` takes substrings that arrive out of
  order or overlap, and writes them into a `ByteStream` in order. Bytes that
  do not fit in the stream's free capacity are discarded;
  `count_bytes_pending()` says how many bytes are held back waiting for a gap
  to be filled.
- `minnowtcp.tcp_receiver`: `TCPReceiver` turns `TCPSenderMessage` segments
  into stream bytes. `send()` answers with a `TCPReceiverMessage` carrying the
  ackno, the window size (at most 65535) and the reset flag.

## Installation

```
pip install .
```

To install the test dependencies too:

```
pip install ".[test]"
```

## Example

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.reassembler import Reassembler
from minnowtcp.tcp_receiver import TCPReceiver, TCPSenderMessage
from minnowtcp.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(1000)))

isn = Wrap32(12345)
receiver.receive(TCPSenderMessage(seqno=isn, syn=True))
receiver.receive(TCPSenderMessage(seqno=isn + 1, payload=b"hello", fin=True))

reply = receiver.send()
print(reply.ackno, reply.window_size)  # Wrap32(raw_value=12352) 1000

stream = receiver.output()
print(read(stream, 100))     # b'hello'
print(stream.is_finished())  # True
```

A segment with `rst=True` puts the stream into its error state; after that
the receiver ignores further segments and `send()` reports `rst=True`.

Sequence numbers on their own:

```python
from minnowtcp.wrapping_integers import Wrap32

zero = Wrap32(0)
wire = Wrap32.wrap(3 * 2**32 + 17, zero)
assert wire.unwrap(zero, 3 * 2**32) == 3 * 2**32 + 17
```

## What it does not do

This package covers only the receiving side. It has no TCP sender, no
retransmission timer, no segment parsing or serialisation, and no sockets or
network I/O: segments are handed to `TCPReceiver.receive()` as Python objects
and replies come back from `send()` the same way.

## Running the tests

```
pytest
```