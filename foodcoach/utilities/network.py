"""Network helper used by `foodcoach.main` to show the LAN address of the API."""
import socket

LOOPBACK = "127.0.0.1"


def get_local_ip() -> str:
    """Return the address the OS would use for outbound traffic, or 127.0.0.1.

    Connecting a UDP socket only selects a route; no packet is sent.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        try:
            s.connect(("8.8.8.8", 80))
            return str(s.getsockname()[0])
        except OSError:
            return LOOPBACK
