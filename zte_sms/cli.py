"""
Command-line interface for the ZTE SMS client.

    zte-sms 192.168.0.1 secret
"""

import argparse
import sys
from pathlib import Path

from zte_sms.auth.login import detect_encoding_variant
from zte_sms.auth.password import DEFAULT_VARIANT, EncodingVariant
from zte_sms.config import DEFAULT_PASSWORD, DEFAULT_STATE_FILE
from zte_sms.logging_setup import log, setup_logging
from zte_sms.runner import run
from zte_sms.session import build_session
from zte_sms.sms.store import JsonFileStore, MemoryStore, RegistryStore

_VARIANT_CHOICES = ("1", "2", "3", "auto")


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="zte-sms",
        description="Log in to a ZTE router and list the SMS inbox, "
                    "reporting when new messages have arrived.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Password can also be provided via the ROUTER_PASSWORD env var.\n"
            "If the password is not supplied and not in the environment, "
            "you will be prompted for it."
        ),
    )
    parser.add_argument("modem_ip", help="Router IP address")
    parser.add_argument(
        "password", nargs="?", default=DEFAULT_PASSWORD,
        help="Admin password (overrides ROUTER_PASSWORD env var)",
    )
    parser.add_argument(
        "--variant", choices=_VARIANT_CHOICES, default=str(int(DEFAULT_VARIANT)),
        help="Password encoding: 1 = SHA256(Base64), 2 = double SHA256 with LD, "
             "3 = Base64, auto = read WEB_ATTR_IF_SUPPORT_SHA256 from the "
             f"router (default: {int(DEFAULT_VARIANT)})",
    )
    parser.add_argument(
        "--store", choices=("file", "registry", "memory"), default="file",
        help="Where to keep the last-seen inbox fingerprint (default: file)",
    )
    parser.add_argument(
        "--state-file", default=str(DEFAULT_STATE_FILE),
        help=f"State file for --store file (default: {DEFAULT_STATE_FILE})",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    return parser.parse_args(argv)


def build_store(kind: str, state_file: str):
    if kind == "registry":
        return RegistryStore()
    if kind == "memory":
        return MemoryStore()
    return JsonFileStore(Path(state_file))


def resolve_variant(choice: str, session, host: str) -> EncodingVariant:
    if choice != "auto":
        return EncodingVariant(int(choice))
    variant = detect_encoding_variant(session, host)
    if variant is None:
        log.warning(
            "Could not read WEB_ATTR_IF_SUPPORT_SHA256 from the router; "
            "falling back to %s", DEFAULT_VARIANT.name,
        )
        return DEFAULT_VARIANT
    return variant


def main(argv=None) -> int:
    """
    Main entry point for the CLI.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    if not args.password:
        import getpass
        args.password = getpass.getpass("Router password: ")

    try:
        store = build_store(args.store, args.state_file)
    except OSError as exc:
        log.error("%s", exc)
        return 1

    session = build_session(args.modem_ip)
    variant = resolve_variant(args.variant, session, args.modem_ip)

    return run(args.modem_ip, args.password, store, variant=variant, session=session)


if __name__ == "__main__":
    sys.exit(main())
