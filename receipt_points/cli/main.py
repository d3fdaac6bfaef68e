#!/usr/bin/env python3

import argparse
from collections.abc import Callable, Sequence

from receipt_points.runtime.settings import get_settings


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Normalize command handlers that call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="receipt-points",
        description="Receipt points service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  serve [--host] [--port]    Start the receipt points HTTP server
  score <receipt.json>       Print the points for a receipt file

Environment:
  RECEIPT_POINTS_HOST / RECEIPT_POINTS_PORT  default bind address for serve
  RECEIPT_POINTS_LOG_LEVEL                   DEBUG, INFO, WARNING or ERROR
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the receipt points HTTP server")
    serve_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )

    score_parser = subparsers.add_parser("score", help="Print the points for a receipt file")
    score_parser.add_argument("receipt", help="Path to a receipt JSON file")
    score_parser.add_argument("--breakdown", action="store_true", help="Show the points awarded by each rule")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "serve":
        from receipt_points.cli.receipt import cmd_serve

        return _run_command(cmd_serve, args)
    elif args.command == "score":
        from receipt_points.cli.receipt import cmd_score

        return _run_command(cmd_score, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
