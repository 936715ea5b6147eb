"""Helpers for opening TCP and UDP sockets."""

from __future__ import annotations

import socket
from dataclasses import dataclass

_CHECK_TIMEOUT = 10.0


@dataclass
class SocketInfo:
    """A connection together with a flag telling whether it has been stopped."""

    conn: socket.socket
    is_stopped: bool = False


def get_server_listener(port: int) -> socket.socket:
    """Listen for TCP connections on ``port`` on every interface."""
    if socket.has_dualstack_ipv6():
        return socket.create_server(("", port), family=socket.AF_INET6, dualstack_ipv6=True)
    return socket.create_server(("", port))


def get_tcp_server_listener(port: int) -> socket.socket:
    """Listen for TCP connections on ``port`` on every IPv4 interface."""
    return socket.create_server(("0.0.0.0", port))


def get_udp_conn(port: int) -> socket.socket:
    """Open a UDP socket bound to ``port`` on every interface."""
    if socket.has_dualstack_ipv6():
        sock = socket.socket(socket.AF_INET6, socket.SOCK_DGRAM)
        try:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
            sock.bind(("", port))
        except OSError:
            sock.close()
            raise
        return sock
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    return sock


def get_tcp_conn(host: str, port: int) -> socket.socket:
    """Connect to ``host``:``port`` over TCP."""
    return socket.create_connection((host, port))


def check_port(host: str, port: int) -> bool:
    """Tell whether a TCP connection to ``host``:``port`` succeeds within ten seconds."""
    try:
        conn = socket.create_connection((host, port), timeout=_CHECK_TIMEOUT)
    except OSError as exc:
        print("Connecting error:", exc)
        return False
    conn.close()
    return True