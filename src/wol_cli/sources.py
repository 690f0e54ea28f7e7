import os
from typing import List, Tuple

from .mac import InvalidMacAddress, normalize_mac, parse_mac
from .util import error

COMMENT_PREFIXES = ("#", "//")


class InvalidFilePath(ValueError):
    pass


def read_mac_file(path: str) -> List[str]:
    """Read MAC addresses from a file, one per line.

    Reading stops at the first line that is not UTF-8. Blank lines,
    lines starting with ``#`` or ``//`` and lines that are not a
    valid MAC address are skipped without a message.
    """
    if not os.path.isfile(path):
        raise InvalidFilePath(f"file not exist or is not file, input file path: {path!r}")

    macs: List[str] = []
    try:
        with open(path, "rb") as f:
            for raw in f:
                try:
                    line = raw.decode("utf-8").strip()
                except UnicodeDecodeError:
                    break
                if not line or line.startswith(COMMENT_PREFIXES):
                    continue
                try:
                    parse_mac(line)
                except InvalidMacAddress:
                    continue
                macs.append(line)
    except OSError as exc:
        raise InvalidFilePath(f"cannot read {path!r}: {exc}") from exc
    return macs


def resolve_macs(args: List[str], from_file: bool = False) -> List[Tuple[str, bytes]]:
    """Parse candidates into (display form, bytes) pairs.

    Bad command line arguments are reported and skipped; file candidates were
    already filtered silently by read_mac_file.
    """
    resolved: List[Tuple[str, bytes]] = []
    for mac in args:
        try:
            hw = parse_mac(mac)
        except InvalidMacAddress as exc:
            if not from_file:
                error(f"{exc.reason}, original MAC address: {exc.mac}")
            continue
        resolved.append((normalize_mac(mac), hw))
    return resolved
