"""Command-line front-end for the launcher.

Reads input text from a file argument or stdin, runs one operation and
prints its output, or the error text gpg produced, to stdout.
"""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import get_settings
from .keys import KeyInfo
from .launcher import GpgLauncher
from .logging_setup import configure_logging
from .result import ExceptionError, ProcessError, Result, Success, display_text

logger = structlog.get_logger(__name__)


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _emit(result: Result[str]) -> int:
    print(display_text(result))
    return 0 if isinstance(result, Success) else 1


def _find_key(keys: List[KeyInfo], selector: str) -> Optional[KeyInfo]:
    for key in keys:
        if key.is_valid and selector in (key.name, key.email):
            return key
    return None


def _format_key(key: KeyInfo, raw: bool) -> str:
    if raw or not key.is_valid:
        return str(key)
    email = f" <{key.email}>" if key.email else ""
    return f"{key.name}{email} [{key.trust_level}]"


def cmd_keys(launcher: GpgLauncher, args: argparse.Namespace) -> int:
    result = launcher.get_keys()
    if isinstance(result, Success):
        separator = "\n\n" if args.raw else "\n"
        print(separator.join(_format_key(key, args.raw) for key in result.value))
        return 0
    if isinstance(result, (ProcessError, ExceptionError)):
        return _emit(result)
    raise TypeError(f"Unexpected result {result!r}")


def cmd_import(launcher: GpgLauncher, args: argparse.Namespace) -> int:
    return _emit(launcher.add_new_key(_read_input(args.file)))


def cmd_decrypt(launcher: GpgLauncher, args: argparse.Namespace) -> int:
    return _emit(launcher.decrypt(_read_input(args.file)))


def cmd_sign(launcher: GpgLauncher, args: argparse.Namespace) -> int:
    return _emit(launcher.sign(_read_input(args.file)))


def cmd_encrypt(launcher: GpgLauncher, args: argparse.Namespace) -> int:
    keys_result = launcher.get_keys()
    if not isinstance(keys_result, Success):
        return _emit(keys_result)

    sender = _find_key(keys_result.value, args.sender)
    recipient = _find_key(keys_result.value, args.recipient)
    for selector, key in ((args.sender, sender), (args.recipient, recipient)):
        if key is None:
            print(f"No key matching {selector!r}", file=sys.stderr)
            return 1

    return _emit(launcher.encrypt(sender, recipient, _read_input(args.file)))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gpglauncher",
        description="Encrypt, decrypt, sign and manage keys through gpg",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_keys = sub.add_parser("keys", help="List public keys")
    p_keys.add_argument("--raw", action="store_true", help="Print the raw listing lines")
    p_keys.set_defaults(func=cmd_keys)

    p_import = sub.add_parser("import", help="Import a public key")
    p_import.add_argument("file", nargs="?", help="Armored key file (default: stdin)")
    p_import.set_defaults(func=cmd_import)

    p_enc = sub.add_parser("encrypt", help="Encrypt a message")
    p_enc.add_argument("sender", help="Sender key name or email")
    p_enc.add_argument("recipient", help="Recipient key name or email")
    p_enc.add_argument("file", nargs="?", help="Plaintext file (default: stdin)")
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="Decrypt a message")
    p_dec.add_argument("file", nargs="?", help="Armored message file (default: stdin)")
    p_dec.set_defaults(func=cmd_decrypt)

    p_sign = sub.add_parser("sign", help="Clear-sign a message")
    p_sign.add_argument("file", nargs="?", help="Plaintext file (default: stdin)")
    p_sign.set_defaults(func=cmd_sign)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    logger.debug("Loaded configuration", gpg_path=settings.gpg_path, command=args.cmd)

    launcher = GpgLauncher(settings=settings)
    return args.func(launcher, args)
