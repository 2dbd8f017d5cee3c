"""Command-line interface for the node client."""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import sys
from pathlib import Path
from typing import Any

from .catalog import CATALOG, Param, lookup
from .client import NimiqClient
from .config import ClientConfig, load_config, validate
from .decoder import decode
from .errors import NimiqRpcError, UnknownOperationError
from .logging_setup import configure_logging
from .shapes import Choice, Record, Str


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="nimiq-rpc",
        description="Typed client for a Nimiq node's JSON-RPC interface",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in the working directory)",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Node RPC URL (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("methods", help="List supported operations")

    call_parser = sub.add_parser("call", help="Run one operation and print the result")
    call_parser.add_argument("operation", help="Operation name, e.g. block_number")
    call_parser.add_argument(
        "args",
        nargs="*",
        help="Positional arguments; parsed as JSON when possible",
    )

    return parser


def parse_argument(param: Param, text: str) -> Any:
    """Turn one command-line string into a typed call argument."""
    if isinstance(param.shape, (Str, Choice)):
        return text
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        value = text
    if isinstance(param.shape, Record):
        return decode(param.shape, value, f"${param.name}")
    return value


def to_jsonable(value: Any) -> Any:
    """Convert decoded models into JSON-serialisable structures."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, tuple):
        return [to_jsonable(item) for item in value]
    return value


def _resolve_config(args: argparse.Namespace) -> ClientConfig:
    if args.config is not None or Path("config.yaml").exists():
        config = load_config(args.config)
    else:
        config = ClientConfig()
    if args.url:
        config = dataclasses.replace(config, url=args.url)
        validate(config)
    return config


def _print_methods() -> None:
    for name, spec in CATALOG.items():
        params = ", ".join(f"{p.name}: {p.shape.describe()}" for p in spec.params)
        print(f"{name}({params}) -> {spec.result.describe()}  [{spec.wire_method}]")
        if spec.description:
            print(f"    {spec.description}")


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    if args.command == "methods":
        _print_methods()
        return 0

    try:
        spec = lookup(args.operation)
    except UnknownOperationError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        config = _resolve_config(args)
        call_args = [
            parse_argument(param, text) for param, text in zip(spec.params, args.args)
        ]
        # surplus arguments are passed through so the arity check reports them
        call_args.extend(args.args[len(spec.params):])
        result = await NimiqClient(config).call(spec.operation, *call_args)
    except (NimiqRpcError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_jsonable(result), indent=2))
    return 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    sys.exit(asyncio.run(_run(args)))
