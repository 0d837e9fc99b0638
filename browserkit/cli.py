"""Command line helpers for BrowserKit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.table import Table

from .app import BrowserKit
from .config import BrowserKitConfig
from .device import UserAgentInfo
from .diagnostics.checklist import run_checklist as checklist_run
from .exceptions import UnsupportedValidationKind
from .urls import decode_params, encode_params
from .validators import validate_value

console = Console()


def _configure_logging(config: BrowserKitConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_validate(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="BrowserKit field validator")
    parser.add_argument("kind", help="phone, email or num_en_cn")
    parser.add_argument("value", help="Value to validate")
    parser.add_argument("--required", action="store_true", help="Treat empty values as invalid")
    args = parser.parse_args(argv)

    try:
        valid = validate_value(args.kind, args.value, args.required)
    except UnsupportedValidationKind as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(2)
    if not valid:
        console.print(f"[red]Invalid {args.kind}:[/red] {args.value}")
        sys.exit(1)
    console.print(f"[green]Valid {args.kind}[/green]")


def run_url(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="BrowserKit query-string codec")
    sub = parser.add_subparsers(dest="command", required=True)
    encode = sub.add_parser("encode", help="Encode key=value pairs into a query string")
    encode.add_argument("pairs", nargs="*", help="key=value pairs")
    encode.add_argument("--prefix", default="?", help="String prepended to the query")
    decode = sub.add_parser("decode", help="Decode the query string of a URL")
    decode.add_argument("url")
    args = parser.parse_args(argv)

    if args.command == "encode":
        params = {}
        for pair in args.pairs:
            key, sep, value = pair.partition("=")
            if not sep:
                parser.error(f"expected key=value, got '{pair}'")
            params[key] = value
        console.print(encode_params(params, prefix=args.prefix), markup=False)
        return

    for key, value in decode_params(args.url).items():
        console.print(f"{key}={value}", markup=False)


def run_user_agent(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="BrowserKit user-agent sniffer")
    parser.add_argument("user_agent", help="User-Agent header value")
    args = parser.parse_args(argv)

    info = UserAgentInfo.parse(args.user_agent)
    table = Table(title="User agent")
    table.add_column("Flag")
    table.add_column("Value")
    for flag, value in info.as_dict().items():
        table.add_row(flag, "yes" if value else "no")
    console.print(table)


def run_checklist(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="BrowserKit sanity checks")
    parser.parse_args(argv)

    config = BrowserKitConfig.from_env()
    _configure_logging(config)
    kit = BrowserKit(config)

    issues = checklist_run(kit)
    if not issues:
        console.print("No issues found ✅")
        return
    for issue in issues:
        console.print(f"[{issue.severity.upper()}] {issue.message}", markup=False)
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)
