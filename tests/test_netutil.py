import socket

import pytest

from devcommon.netutil import (
    SocketInfo,
    check_port,
    get_server_listener,
    get_tcp_conn,
    get_tcp_server_listener,
    get_udp_conn,
)


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_get_udp_conn_source_port():
    conn = get_udp_conn(48081)
    try:
        assert conn.getsockname()[1] == 48081
        assert conn.type == socket.SOCK_DGRAM
    finally:
        conn.close()


def test_get_udp_conn_receives_datagram():
    conn = get_udp_conn(0)
    try:
        port = conn.getsockname()[1]
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
            sender.sendto(b"ping", ("127.0.0.1", port))
        conn.settimeout(5)
        data, _ = conn.recvfrom(16)
        assert data == b"ping"
    finally:
        conn.close()


def test_tcp_server_listener_accepts_connection():
    listener = get_tcp_server_listener(0)
    try:
        port = listener.getsockname()[1]
        with get_tcp_conn("127.0.0.1", port) as client:
            accepted, _ = listener.accept()
            with accepted:
                client.sendall(b"hi")
                assert accepted.recv(2) == b"hi"
    finally:
        listener.close()


def test_server_listener_accepts_ipv4():
    listener = get_server_listener(0)
    try:
        port = listener.getsockname()[1]
        assert check_port("127.0.0.1", port) is True
    finally:
        listener.close()


def test_check_port_closed_returns_false(capsys):
    port = _free_port()
    assert check_port("127.0.0.1", port) is False
    assert "Connecting error:" in capsys.readouterr().out


def test_get_tcp_conn_refused():
    port = _free_port()
    with pytest.raises(OSError):
        get_tcp_conn("127.0.0.1", port)


def test_socket_info_defaults():
    left, right = socket.socketpair()
    try:
        info = SocketInfo(left)
        assert info.conn is left
        assert info.is_stopped is False
        info.is_stopped = True
        assert info.is_stopped is True
    finally:
        left.close()
        right.close()