"""MAC address parsing.

Accepted form is six 2-digit hex octets joined by ``:`` or ``-``, for example
``00:11:22:33:44:55`` or ``aa-bb-cc-dd-ee-ff``. Case does not matter.
"""

MAC_TEXT_LENGTH = 17
MAC_BYTE_COUNT = 6


class InvalidMacAddress(ValueError):
    def __init__(self, reason: str, mac: str):
        super().__init__(reason)
        self.reason = reason
        self.mac = mac


def _split(mac: str) -> list[str]:
    parts = mac.split(":")
    if len(parts) != MAC_BYTE_COUNT:
        parts = mac.split("-")
        if len(parts) != MAC_BYTE_COUNT:
            raise InvalidMacAddress("invalid format: wrong part count", mac)
    return parts


def parse_mac(mac: str) -> bytes:
    """Return the 6 raw bytes of ``mac`` or raise InvalidMacAddress."""
    if len(mac) != MAC_TEXT_LENGTH:
        raise InvalidMacAddress(f"invalid MAC address length (should be {MAC_TEXT_LENGTH})", mac)
    if ":" not in mac and "-" not in mac:
        raise InvalidMacAddress("invalid MAC address format (should be separated by : or -)", mac)

    hw = bytearray()
    for part in _split(mac):
        if len(part) != 2:
            raise InvalidMacAddress("invalid format: wrong part length", mac)
        # int() would also take "+f" or " f"
        if not all(c in "0123456789abcdefABCDEF" for c in part):
            raise InvalidMacAddress("invalid format: not hexadecimal", mac)
        hw.append(int(part, 16))
    return bytes(hw)


def normalize_mac(mac: str) -> str:
    return mac.upper()


def format_mac(hw: bytes, sep: str = ":") -> str:
    return sep.join(f"{b:02X}" for b in hw)

