import socket
from typing import Sequence

from .mac import MAC_BYTE_COUNT
from .net import NetworkTarget
from .util import error, log

WOL_PORT = 9
MAGIC_HEADER = b"\xff" * 6


def build_magic_packet(hw: bytes) -> bytes:
    """6 x 0xFF followed by the hardware address repeated 16 times (102 bytes)."""
    if len(hw) != MAC_BYTE_COUNT:
        raise ValueError(f"hardware address must be {MAC_BYTE_COUNT} bytes, got {len(hw)}")
    return MAGIC_HEADER + bytes(hw) * 16


def send_magic_packet(sock: socket.socket, hw: bytes, target: NetworkTarget) -> None:
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
    sock.sendto(build_magic_packet(hw), (str(target.broadcast), WOL_PORT))


def wake(mac: str, hw: bytes, networks: Sequence[NetworkTarget], verbose: bool = False) -> bool:
    """Send the packet for one MAC to every network.

    Stops at the first socket error for this MAC. Returns True when every
    send went out.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.bind(("0.0.0.0", 0))
            for target in networks:
                send_magic_packet(s, hw, target)
                if verbose:
                    log(f"Sent magic packet to {mac}, and broadcasted on {target}")
    except OSError as exc:
        error(f"{exc}, original MAC address: {mac}")
        return False
    return True
