"""
cosmnonce CLI

Command-line access to the account/sequence nonce codec.

Commands:
  encode   - Pack an account number and sequence into a nonce
  decode   - Split a nonce back into account number and sequence
  inspect  - Read a saved account query and show its nonce
  info     - Show the bit layout and limits
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn, Optional, Union

import click

from .codec.nonce import (
    ACCOUNT_BITS,
    MAX_ACCOUNT_NUMBER,
    MAX_SAFE_INTEGER,
    MAX_SEQUENCE,
    SEQUENCE_BITS,
    NonceError,
    decode,
    encode,
)
from .config import CHAIN_ID_ENV, get_chain_id, load_config
from .signdoc.fields import sign_doc_fields
from .spec.models import AccountInfo
from .spec.schemas import SchemaValidationError


# ============ Constants ============

VERSION = "0.1.0"


# ============ Banner ============


def _print_banner() -> None:
    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("C O S M N O N C E", fg="bright_white", bold=True)
        + click.style(f"  v{VERSION}", dim=True)
    )
    click.echo()


def _fail(exc: Union[NonceError, SchemaValidationError]) -> NoReturn:
    click.secho(f"Error: {exc}", fg="red", err=True)
    for detail in getattr(exc, "errors", []):
        click.echo(f"  - {detail}", err=True)
    sys.exit(exc.exit_code)


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="cosmnonce")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """cosmnonce: account/sequence nonce codec."""
    load_config()
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Codec ============


@cli.command("encode")
@click.argument("account_number")
@click.argument("sequence")
def encode_cmd(account_number: str, sequence: str) -> None:
    """Pack ACCOUNT_NUMBER and SEQUENCE into a nonce."""
    try:
        nonce = encode(account_number, sequence)
    except NonceError as exc:
        _fail(exc)
    click.echo(str(nonce))


@cli.command("decode", context_settings={"ignore_unknown_options": True})
@click.argument("nonce", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print the pair as JSON")
def decode_cmd(nonce: int, as_json: bool) -> None:
    """Split NONCE into account number and sequence."""
    try:
        parts = decode(nonce)
    except NonceError as exc:
        _fail(exc)

    if as_json:
        click.echo(json.dumps(parts._asdict(), sort_keys=True))
        return
    click.echo(f"Account number: {parts.account_number}")
    click.echo(f"Sequence:       {parts.sequence}")


@cli.command()
@click.argument(
    "path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--chain-id",
    default=None,
    help=f"Chain ID for the sign doc header [env: {CHAIN_ID_ENV}]",
)
def inspect(path: Path, chain_id: Optional[str]) -> None:
    """Read an account query saved at PATH and show its nonce."""
    try:
        account = AccountInfo.from_path(path)
        nonce = account.nonce()
    except (NonceError, SchemaValidationError) as exc:
        _fail(exc)

    if account.address:
        click.echo(f"Address:        {account.address}")
    click.echo(f"Account number: {account.account_number}")
    click.echo(f"Sequence:       {account.sequence}")
    click.echo(f"Nonce:          {nonce}")

    chain_id = chain_id or get_chain_id()
    if chain_id:
        header = sign_doc_fields(nonce, chain_id)
        click.echo(f"Sign doc:       {json.dumps(header, sort_keys=True)}")


# ============ Info ============


@cli.command()
def info() -> None:
    """Show the nonce bit layout."""
    _print_banner()

    click.secho("  Layout ─────────────────────────────────", fg="cyan")
    click.echo()
    click.echo(f"  nonce = account_number << {SEQUENCE_BITS} | sequence")
    click.echo()
    click.echo(
        click.style("  Account number: ", dim=True)
        + f"{ACCOUNT_BITS} bits (< {MAX_ACCOUNT_NUMBER:,})"
    )
    click.echo(
        click.style("  Sequence:       ", dim=True)
        + f"{SEQUENCE_BITS} bits (< {MAX_SEQUENCE:,})"
    )
    click.echo(
        click.style("  Largest nonce:  ", dim=True)
        + f"{(MAX_ACCOUNT_NUMBER << SEQUENCE_BITS) - 1:,}"
        + click.style(f"  (safe limit {MAX_SAFE_INTEGER:,})", dim=True)
    )
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """cosmnonce CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: old Python or non-tty
    cli()


if __name__ == "__main__":
    main()
