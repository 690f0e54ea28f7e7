import sys
from datetime import datetime, timezone


def _stamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str) -> None:
    print(f"[{_stamp()} UTC] {msg}", flush=True)


def error(msg: str) -> None:
    """Report a problem on stderr, same line format as log()."""
    print(f"[{_stamp()} UTC] Error: {msg}", file=sys.stderr, flush=True)
