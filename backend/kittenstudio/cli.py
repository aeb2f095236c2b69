"""
Kitten Studio command line: encode, decode, validate and export presets, or serve the API.

Usage:
  kittenstudio default                      # prints the default preset JSON
  kittenstudio encode preset.json           # prints the share token
  kittenstudio decode <token>               # prints the preset JSON (exit 1 if invalid)
  kittenstudio validate preset.json         # exit 0 if valid, 1 otherwise
  kittenstudio render <token> -o kitty.svg  # exports SVG (default kitten without a token)
  kittenstudio serve --port 8000            # runs the validation boundary
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import uvicorn

from kittenstudio.config import settings
from kittenstudio.models.preset import default_preset
from kittenstudio.preset.codec import decode, encode
from kittenstudio.preset.session import PresetSession
from kittenstudio.preset.validator import validate_json_bytes

logger = logging.getLogger(__name__)


def _read_source(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _print_json(data: dict) -> None:
    print(json.dumps(data, indent=2))


def cmd_default(args: argparse.Namespace) -> int:
    _print_json(default_preset().to_wire())
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    preset = validate_json_bytes(_read_source(args.source))
    if preset is None:
        print("Invalid preset", file=sys.stderr)
        return 1
    print(encode(preset))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    preset = decode(args.token)
    if preset is None:
        print("Invalid token", file=sys.stderr)
        return 1
    _print_json(preset.to_wire())
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    preset = validate_json_bytes(_read_source(args.source))
    print("valid" if preset is not None else "invalid")
    return 0 if preset is not None else 1


def cmd_render(args: argparse.Namespace) -> int:
    session = PresetSession()
    session.load_token(args.token)
    if session.notice:
        print(session.notice, file=sys.stderr)

    svg = session.export_svg()
    if args.output is None:
        sys.stdout.write(svg)
        return 0

    out = Path(args.output)
    if out.is_dir():
        out = out / session.export_filename()
    out.write_text(svg, encoding="utf-8")
    print(f"Saved: {out}", file=sys.stderr)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    uvicorn.run(
        "kittenstudio.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.kittenstudio_log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kittenstudio", description="Kitten preset tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("default", help="Print the default preset").set_defaults(func=cmd_default)

    p = sub.add_parser("encode", help="Preset JSON -> share token")
    p.add_argument("source", help="JSON file, or - for stdin")
    p.set_defaults(func=cmd_encode)

    p = sub.add_parser("decode", help="Share token -> preset JSON")
    p.add_argument("token")
    p.set_defaults(func=cmd_decode)

    p = sub.add_parser("validate", help="Check a preset JSON document")
    p.add_argument("source", help="JSON file, or - for stdin")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("render", help="Export a kitten as standalone SVG")
    p.add_argument("token", nargs="?", default=None, help="Share token (default kitten if omitted)")
    p.add_argument("-o", "--output", help="Output file or folder (stdout if omitted)")
    p.set_defaults(func=cmd_render)

    p = sub.add_parser("serve", help="Run the HTTP validation boundary")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--reload", action="store_true", help="Reload on code changes")
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
