import io
import socket
import threading

import pytest

from devcommon.tcp import DCSTcp


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    yield left, right
    left.close()
    right.close()


def _recv_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def test_new_instance_is_running(pair):
    left, _ = pair
    assert DCSTcp(left).running is True


def test_write_bytes_then_read_bytes(pair):
    left, right = pair
    DCSTcp(left).write_bytes(b"payload")
    assert DCSTcp(right).read_bytes(7) == b"payload"


def test_write_byte_read_byte(pair):
    left, right = pair
    DCSTcp(left).write_byte(0x7F)
    assert DCSTcp(right).read_byte() == 0x7F


def test_write_empty_is_noop(pair):
    left, right = pair
    tcp = DCSTcp(left)
    assert tcp.write_bytes(b"") is tcp
    tcp.write_bytes(b"z")
    assert _recv_exact(right, 1) == b"z"


def test_read_bytes_larger_than_buffer(pair):
    left, right = pair
    payload = bytes(i % 251 for i in range(100_000))
    sender = threading.Thread(target=left.sendall, args=(payload,))
    sender.start()
    received = DCSTcp(right).read_bytes(len(payload))
    sender.join()
    assert received == payload


def test_read_to_writer(pair):
    left, right = pair
    left.sendall(b"abcdefgh")
    out = io.BytesIO()
    DCSTcp(right).read_to(out, 5)
    assert out.getvalue() == b"abcde"
    assert _recv_exact(right, 3) == b"fgh"


def test_read_to_short_writer_raises(pair):
    left, right = pair

    class ShortWriter:
        def write(self, data):
            return len(data) - 1

    left.sendall(b"abc")
    with pytest.raises(OSError):
        DCSTcp(right).read_to(ShortWriter(), 3)


def test_write_from_reader(pair):
    left, right = pair
    tcp = DCSTcp(left)
    assert tcp.write_from(io.BytesIO(b"0123456789"), 4) is tcp
    assert _recv_exact(right, 4) == b"0123"


def test_write_from_exhausted_reader_raises(pair):
    left, _ = pair
    with pytest.raises(EOFError):
        DCSTcp(left).write_from(io.BytesIO(b"ab"), 5)


def test_read_after_peer_close_raises(pair):
    left, right = pair
    left.sendall(b"xy")
    left.close()
    with pytest.raises(EOFError):
        DCSTcp(right).read_bytes(5)


def test_stopped_reads_nothing(pair):
    left, right = pair
    left.sendall(b"data")
    tcp = DCSTcp(right)
    tcp.stop()
    assert tcp.running is False
    assert tcp.read_bytes(4) == b""
    with pytest.raises(RuntimeError):
        tcp.read_byte()
    tcp.start()
    assert tcp.read_bytes(4) == b"data"