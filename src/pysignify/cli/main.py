"""Typer-based command line interface."""
from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Iterator, Optional

import structlog
import typer

from ..codec import SEED_TOKEN_SIZE
from ..config import AppConfig, load_config
from ..exceptions import AuthenticationError, FatalInvariantError, SignifyError
from ..files import read_private_key, read_public_key, read_signature, write_file
from ..keys import derive_from_seed, generate_seed_token
from ..logging import configure_logging
from ..message import Message
from ..protocol import sign as sign_message
from ..protocol import verify as verify_message

app = typer.Typer(help="Create and verify signify-compatible Ed25519 signatures")

logger = structlog.get_logger(__name__)

EXIT_FAILURE = 1
EXIT_VERIFY_FAILED = 2
EXIT_FATAL = 70


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override configured log level"),
) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    configure_logging(log_level or ctx.obj.logging.normalized_level())


@contextlib.contextmanager
def _reporting_errors() -> Iterator[None]:
    try:
        yield
    except FatalInvariantError as exc:
        logger.critical("fatal invariant violated", error=str(exc))
        typer.echo(f"fatal: {exc}", err=True)
        raise typer.Exit(code=EXIT_FATAL) from exc
    except AuthenticationError as exc:
        typer.echo(f"Verify FAILED: {exc}", err=True)
        raise typer.Exit(code=EXIT_VERIFY_FAILED) from exc
    except (SignifyError, OSError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc


@app.command()
def keygen(
    ctx: typer.Context,
    name: str = typer.Option("signify", "-n", "--name", help="Base name for <name>.sec and <name>.pub"),
    directory: Optional[Path] = typer.Option(None, "-d", "--dir", help="Output directory (default: configured key dir)"),
    seed: Optional[Path] = typer.Option(
        None, "--seed", exists=True, readable=True, help=f"File holding a {SEED_TOKEN_SIZE}-byte seed token"
    ),
    comment: Optional[str] = typer.Option(None, "-c", "--comment", help="Untrusted comment for both files"),
) -> None:
    """Derive a key pair from a seed token (random unless --seed is given)"""
    config: AppConfig = ctx.obj
    target = directory or config.keys.directory
    with _reporting_errors():
        token = seed.read_bytes() if seed else generate_seed_token()
        private_key = derive_from_seed(token)
        sec_path = target / f"{name}.sec"
        pub_path = target / f"{name}.pub"
        private_comment = comment if comment is not None else config.keys.private_comment
        public_comment = comment if comment is not None else config.keys.public_comment
        write_file(sec_path, private_key.private_key_file(private_comment), private=True)
        write_file(pub_path, private_key.public_key_file(public_comment))
    typer.echo(f"Created {pub_path} (fingerprint {private_key.fingerprint.hex()})")


@app.command()
def pubkey(
    ctx: typer.Context,
    seckey: Path = typer.Option(..., "-s", exists=True, readable=True, help="Private key file"),
    output: Optional[Path] = typer.Option(None, "-p", help="Public key output (default: stdout)"),
    comment: Optional[str] = typer.Option(None, "-c", "--comment"),
) -> None:
    """Derive the public key file from a private key file"""
    with _reporting_errors():
        private_key, _ = read_private_key(seckey)
        data = private_key.public_key_file(comment if comment is not None else ctx.obj.keys.public_comment)
        if output is None:
            typer.echo(data.decode("utf-8"), nl=False)
            return
        write_file(output, data)
    typer.echo(f"Public key -> {output}")


@app.command()
def sign(
    seckey: Path = typer.Option(..., "-s", exists=True, readable=True, help="Private key file"),
    message: Path = typer.Option(..., "-m", exists=True, readable=True, help="File to sign"),
    sig: Optional[Path] = typer.Option(None, "-x", help="Signature path (default: <message>.sig)"),
    comment: Optional[str] = typer.Option(None, "-c", "--comment", help="Untrusted comment for the signature"),
) -> None:
    """Create a detached signature file"""
    sig_path = sig or message.with_name(message.name + ".sig")
    with _reporting_errors():
        private_key, _ = read_private_key(seckey)
        untrusted = comment if comment is not None else f"verify with {seckey.with_suffix('.pub').name}"
        signed = sign_message(Message(raw=message.read_bytes(), untrusted_comment=untrusted), private_key)
        write_file(sig_path, signed.signature_file())
    typer.echo(f"Signed -> {sig_path}")


@app.command()
def verify(
    pubkey: Path = typer.Option(..., "-p", exists=True, readable=True, help="Public key file"),
    message: Path = typer.Option(..., "-m", exists=True, readable=True, help="Signed file"),
    sig: Optional[Path] = typer.Option(None, "-x", help="Signature path (default: <message>.sig)"),
) -> None:
    """Verify a detached signature file"""
    sig_path = sig or message.with_name(message.name + ".sig")
    with _reporting_errors():
        public_key, _ = read_public_key(pubkey)
        signature, _ = read_signature(sig_path)
        verify_message(Message(raw=message.read_bytes()), signature, public_key)
    typer.echo("Signature Verified")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"pysignify {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
