import pytest
from hypothesis import given, strategies as st

from minnowtcp.byte_stream import ByteStream, read


def test_new_stream_state():
    stream = ByteStream(15)
    assert stream.available_capacity() == 15
    assert stream.bytes_buffered() == 0
    assert stream.bytes_pushed() == 0
    assert stream.bytes_popped() == 0
    assert stream.peek() == b""
    assert not stream.is_closed()
    assert not stream.is_finished()
    assert not stream.has_error()


def test_push_then_peek():
    stream = ByteStream(15)
    data = b"hello"
    stream.push(data)
    assert stream.peek() == data
    assert stream.bytes_pushed() == len(data)
    assert stream.bytes_buffered() == len(data)
    assert stream.available_capacity() == 15 - len(data)


def test_push_truncates_to_capacity():
    stream = ByteStream(2)
    data = b"cat"
    stream.push(data)
    assert stream.peek() == data[:2]
    assert stream.bytes_pushed() == 2
    assert stream.available_capacity() == 0
    stream.push(b"more")
    assert stream.peek() == data[:2]
    assert stream.bytes_pushed() == 2


def test_pop_partial_and_overlong():
    stream = ByteStream(10)
    data = b"abcdef"
    stream.push(data)
    stream.pop(2)
    assert stream.peek() == data[2:]
    assert stream.bytes_popped() == 2
    stream.pop(100)
    assert stream.peek() == b""
    assert stream.bytes_popped() == len(data)
    assert stream.available_capacity() == 10


def test_pop_negative_raises():
    stream = ByteStream(4)
    with pytest.raises(ValueError):
        stream.pop(-1)


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        ByteStream(-1)


def test_close_and_finish():
    stream = ByteStream(8)
    stream.push(b"xy")
    stream.close()
    assert stream.is_closed()
    assert not stream.is_finished()
    stream.pop(2)
    assert stream.is_finished()


def test_closed_empty_stream_is_finished():
    stream = ByteStream(8)
    stream.close()
    assert stream.is_finished()


def test_error_flag():
    stream = ByteStream(8)
    stream.set_error()
    assert stream.has_error()


def test_read_limits_length():
    stream = ByteStream(20)
    data = b"0123456789"
    stream.push(data)
    assert read(stream, 4) == data[:4]
    assert read(stream, 100) == data[4:]
    assert read(stream, 5) == b""
    assert stream.bytes_popped() == len(data)


@given(
    capacity=st.integers(min_value=0, max_value=64),
    chunks=st.lists(st.binary(max_size=20), max_size=10),
    pops=st.lists(st.integers(min_value=0, max_value=30), max_size=10),
)
def test_counters_invariant(capacity, chunks, pops):
    stream = ByteStream(capacity)
    received = bytearray()
    for chunk, pop_len in zip(chunks, pops + [0] * len(chunks)):
        stream.push(chunk)
        received.extend(read(stream, pop_len))
        assert stream.bytes_pushed() == stream.bytes_popped() + stream.bytes_buffered()
        assert stream.bytes_buffered() + stream.available_capacity() == capacity
        assert len(received) == stream.bytes_popped()


@given(st.lists(st.binary(max_size=16), max_size=12))
def test_unbounded_round_trip(chunks):
    total = b"".join(chunks)
    stream = ByteStream(len(total))
    for chunk in chunks:
        stream.push(chunk)
    stream.close()
    assert read(stream, len(total)) == total
    assert stream.is_finished()