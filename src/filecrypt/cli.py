"""Command-line front end for filecrypt.

Reads input files, runs one operation through a :class:`CryptoSession`,
and writes the export (``-o``) or prints the preview.

Examples::

    filecrypt keygen -o my.keypair.hex
    filecrypt encrypt report.pdf --keyfile my.keypair.hex -o report.aescbc
    filecrypt decrypt report.aescbc --keyfile my.keypair.hex -o report.pdf
    filecrypt digest report.pdf
    filecrypt hmac report.pdf --mac-key 00112233
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from filecrypt import __version__
from filecrypt.config import load_parameters
from filecrypt.engine import CryptoEngine
from filecrypt.exceptions import FileCryptError, InputError, KeyFormatError
from filecrypt.keyfile import parse_keypair
from filecrypt.models.output import Operation
from filecrypt.session import CryptoSession

_logger = logging.getLogger(__name__)

_COMMAND_OPERATIONS: dict[str, Operation] = {
    "keygen": Operation.GENERATE_KEY,
    "encrypt": Operation.ENCRYPT,
    "decrypt": Operation.DECRYPT,
    "digest": Operation.DIGEST,
    "hmac": Operation.HMAC,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filecrypt",
        description="AES-CBC encryption, SHA-256 digests and HMAC-SHA256 tags for files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="JSON config file (default: ./config.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    keygen = sub.add_parser("keygen", help="Generate a symmetric key and an HMAC key")
    keygen.add_argument("-o", "--output", type=Path, help="Write the key pair file here")

    def add_common(p: argparse.ArgumentParser, *, symmetric: bool, mac: bool) -> None:
        p.add_argument("input", type=Path, help="Input file")
        p.add_argument("-o", "--output", type=Path, help="Write the result here instead of printing a preview")
        if symmetric or mac:
            p.add_argument("--keyfile", type=Path, help="Key pair file (symmetric_key_hex:/hmac_key_hex: lines)")
        if symmetric:
            p.add_argument("-k", "--key", help="Symmetric key (hex)")
        if mac:
            p.add_argument("--mac-key", help="HMAC key (hex); falls back to the symmetric key")

    add_common(
        sub.add_parser("encrypt", help="Encrypt a file (a key is generated when none is given)"),
        symmetric=True,
        mac=False,
    )
    add_common(sub.add_parser("decrypt", help="Decrypt an IV-prefixed AES-CBC file"), symmetric=True, mac=False)
    add_common(sub.add_parser("digest", help="SHA-256 digest of a file"), symmetric=False, mac=False)
    add_common(sub.add_parser("hmac", help="HMAC-SHA256 of a file"), symmetric=True, mac=True)
    return parser


def _read_input(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InputError(f"Failed to read input file {path}: {exc.strerror or exc}") from exc


def _write_output(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise InputError(f"Failed to save output file {path}: {exc.strerror or exc}") from exc


def _load_keys(session: CryptoSession, args: argparse.Namespace) -> None:
    keyfile: Path | None = getattr(args, "keyfile", None)
    if keyfile is not None:
        try:
            text = keyfile.read_text(encoding="utf-8")
        except OSError as exc:
            raise KeyFormatError(f"Failed to read key file {keyfile}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise KeyFormatError(f"Key file {keyfile} is not valid UTF-8") from exc
        keys = parse_keypair(text)
        session.symmetric_key_hex = keys.symmetric_key_hex
        session.mac_key_hex = keys.hmac_key_hex
    if getattr(args, "key", None):
        session.symmetric_key_hex = args.key
    if getattr(args, "mac_key", None):
        session.mac_key_hex = args.mac_key


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command.  Raises :class:`FileCryptError` on failure."""
    engine = CryptoEngine(load_parameters(args.config))
    session = CryptoSession(engine)
    operation = _COMMAND_OPERATIONS[args.command]

    if operation is not Operation.GENERATE_KEY:
        _load_keys(session, args)
        session.upload(str(args.input), _read_input(args.input))

    keys_before = (session.symmetric_key_hex, session.mac_key_hex)
    session.process(operation)

    if operation is not Operation.GENERATE_KEY:
        if session.symmetric_key_hex != keys_before[0]:
            print(f"generated symmetric key: {session.symmetric_key_hex}", file=sys.stderr)
        if session.mac_key_hex != keys_before[1]:
            print(f"generated HMAC key: {session.mac_key_hex}", file=sys.stderr)

    artifact = session.export() if operation is Operation.GENERATE_KEY or args.output else None
    if args.output is not None and artifact is not None:
        _write_output(args.output, artifact.data)
        print(f"{session.status}; saved {args.output}", file=sys.stderr)
    elif artifact is not None:
        sys.stdout.write(artifact.data.decode("utf-8"))
    else:
        print(session.preview())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except FileCryptError as exc:
        _logger.debug("Operation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
