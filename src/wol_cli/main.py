import argparse
import sys
from pathlib import Path
from typing import List, Optional


try:
    from . import __version__
    from .config import Config, ConfigError, DEFAULT_CONFIG_PATH, load_config
    from .net import InterfaceEnumerationError, InvalidNetwork, local_networks, parse_networks
    from .sources import InvalidFilePath, read_mac_file, resolve_macs
    from .util import error
    from .wol import wake
except ImportError:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
    from wol_cli import __version__
    from wol_cli.config import Config, ConfigError, DEFAULT_CONFIG_PATH, load_config
    from wol_cli.net import InterfaceEnumerationError, InvalidNetwork, local_networks, parse_networks
    from wol_cli.sources import InvalidFilePath, read_mac_file, resolve_macs
    from wol_cli.util import error
    from wol_cli.wol import wake


CIDR_HINT = "Correct address in CIDR notation, e.g. 192.168.1.0/24"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="wol-cli", description="Wake up devices on the network")
    p.add_argument("mac_address", metavar="MAC_ADDRESS", nargs="*",
                   help="Target MAC address, e.g. 00:11:22:33:44:55")
    p.add_argument("-f", "--file", metavar="FILE",
                   help="Reads target MAC addresses from a file, one per line. If this option is used, "
                        "MAC_ADDRESS is ignored. Lines starting with # or // are ignored.")
    p.add_argument("-n", "--net", metavar="NET", action="append",
                   help="Network to send the broadcast on, in CIDR notation, e.g. 192.168.1.0/24. "
                        "Defaults to every local IPv4 network.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enables verbose mode")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to config.json")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    args = p.parse_args(argv)
    if not args.file and not args.mac_address:
        p.error("at least one MAC_ADDRESS or --file is required")
    return args


def run(args: argparse.Namespace) -> int:
    try:
        cfg = load_config(args.config) or Config()
        if args.file:
            candidates = read_mac_file(args.file)
        else:
            candidates = args.mac_address
        cidrs = args.net or cfg.networks
        networks = parse_networks(cidrs) if cidrs else local_networks()
    except InvalidNetwork as e:
        error(f"{e}. {CIDR_HINT}")
        return 1
    except (ConfigError, InvalidFilePath, InterfaceEnumerationError) as e:
        error(str(e))
        return 1

    verbose = args.verbose or cfg.verbose
    for mac, hw in resolve_macs(candidates, from_file=bool(args.file)):
        wake(mac, hw, networks, verbose=verbose)
    return 0


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    try:
        code = run(args)
    except KeyboardInterrupt:
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
