"""
CLI application for splitting and combining secrets.

Commands:
    split          Split a secret into encoded shares
    combine        Reconstruct a secret from encoded shares
"""

import sys
from typing import Optional

import typer

from .core.config import (
    DEFAULT_ENCODING,
    DEFAULT_PARTS,
    DEFAULT_THRESHOLD,
    ENV_ENCODING,
    ENV_PARTS,
    ENV_THRESHOLD,
    configure_logging,
)
from .core.encoding import Encoding, ShareDecodeError, encode_share, parse_shares
from .crypto.errors import ShamirError
from .crypto.shamir import combine, split


app = typer.Typer(name="gfshamir", help="Shamir's Secret Sharing over GF(2^8)")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug information to stderr"
    ),
) -> None:
    """
    Split secrets into shares and combine shares back into secrets.
    """
    configure_logging(verbose)


@app.command("split")
def split_secret(
    secret: Optional[str] = typer.Option(
        None, "--secret", help="Secret to split (read from stdin if omitted)"
    ),
    parts: int = typer.Option(
        DEFAULT_PARTS, "--parts", "-n", envvar=ENV_PARTS, help="Total number of shares"
    ),
    threshold: int = typer.Option(
        DEFAULT_THRESHOLD,
        "--threshold",
        "-t",
        envvar=ENV_THRESHOLD,
        help="Shares needed to reconstruct the secret",
    ),
    encoding: Encoding = typer.Option(
        DEFAULT_ENCODING, "--encoding", "-e", envvar=ENV_ENCODING
    ),
) -> None:
    """
    Split a secret into shares.

    Prints one encoded share per line.

    Example:
        gfshamir split --secret hunter2 -n 5 -t 3
        echo hunter2 | gfshamir split -e hex
    """
    if secret is None:
        secret = sys.stdin.readline().strip()

    try:
        shares = split(secret.encode("utf-8"), parts, threshold)
    except ShamirError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for share in shares:
        typer.echo(encode_share(share, encoding))


@app.command("combine")
def combine_shares(
    shares: Optional[str] = typer.Option(
        None,
        "--shares",
        "-s",
        help="Comma-separated shares (read from stdin if omitted)",
    ),
    encoding: Encoding = typer.Option(
        DEFAULT_ENCODING, "--encoding", "-e", envvar=ENV_ENCODING
    ),
) -> None:
    """
    Reconstruct a secret from shares.

    At least threshold shares of the same split are required. Fewer shares
    still produce output, but it will not be the secret.

    Example:
        gfshamir combine -s <share1>,<share2>,<share3>
    """
    if shares is None:
        shares = sys.stdin.read()

    try:
        secret = combine(parse_shares(shares, encoding))
    except (ShamirError, ShareDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(secret)


if __name__ == "__main__":
    app()
