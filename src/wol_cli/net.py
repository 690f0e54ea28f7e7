import ipaddress
import re
import socket
from dataclasses import dataclass
from typing import Iterable, List

import psutil


_CIDR_RE = re.compile(r"^([0-9.]+)/([0-9]{1,2})\Z")


class InvalidNetwork(ValueError):
    pass


class InterfaceEnumerationError(RuntimeError):
    pass


@dataclass(frozen=True)
class NetworkTarget:
    """An IPv4 address with its prefix length; host bits are kept."""

    address: ipaddress.IPv4Address
    prefix_len: int

    def __post_init__(self):
        if not 0 <= self.prefix_len <= 32:
            raise InvalidNetwork(f"invalid prefix length: {self.prefix_len}")

    @classmethod
    def parse(cls, cidr: str) -> "NetworkTarget":
        match = _CIDR_RE.match(cidr)
        if not match:
            raise InvalidNetwork(f"invalid IP address syntax: {cidr}")
        try:
            address = ipaddress.IPv4Address(match.group(1))
        except ipaddress.AddressValueError as exc:
            raise InvalidNetwork(f"invalid IP address syntax: {cidr}") from exc
        return cls(address, int(match.group(2)))

    @property
    def network(self) -> ipaddress.IPv4Network:
        return ipaddress.ip_network(f"{self.address}/{self.prefix_len}", strict=False)

    @property
    def broadcast(self) -> ipaddress.IPv4Address:
        return self.network.broadcast_address

    def __str__(self) -> str:
        return f"{self.address}/{self.prefix_len}"


def prefix_from_netmask(netmask: str) -> int:
    """Count the set bits of a dotted netmask, e.g. 255.255.255.0 -> 24."""
    octets = ipaddress.IPv4Address(netmask).packed
    return sum(bin(octet).count("1") for octet in octets)


def parse_networks(cidrs: Iterable[str]) -> List[NetworkTarget]:
    return [NetworkTarget.parse(cidr) for cidr in cidrs]


def local_networks() -> List[NetworkTarget]:
    """One target per IPv4 address found on the local interfaces."""
    try:
        if_addrs = psutil.net_if_addrs()
    except (OSError, psutil.Error) as exc:
        raise InterfaceEnumerationError(f"failed to list network interfaces: {exc}") from exc

    targets: List[NetworkTarget] = []
    for addrs in if_addrs.values():
        for addr in addrs:
            if addr.family != socket.AF_INET or not addr.netmask:
                continue
            targets.append(NetworkTarget(
                ipaddress.IPv4Address(addr.address),
                prefix_from_netmask(addr.netmask),
            ))
    return targets
