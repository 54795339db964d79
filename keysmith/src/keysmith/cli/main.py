"""Typer-based command line interface for keysmith."""
from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Optional

import structlog
import typer

from ..config import AppConfig, load_config
from ..crypto import keys
from ..crypto.algorithms import RSA_OAEP, RSASSA_PKCS1_V1_5
from ..crypto.signature import Signature
from ..exceptions import KeysmithError
from ..logging import configure_logging

app = typer.Typer(help="keysmith command line interface")
log = structlog.get_logger(__name__)


class Purpose(str, Enum):
    encrypt = "encrypt"
    sign = "sign"


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
) -> None:
    try:
        ctx.obj = load_config(config)
    except KeysmithError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    configure_logging(log_level or ctx.obj.logging.normalized_level())


def _hash(ctx: typer.Context, value: Optional[str]) -> str:
    config: AppConfig = ctx.obj
    return value or config.keys.hash_algorithm


def _write_private(path: Path, text: str) -> None:
    # 0600 before any key material is written, also when overwriting
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    os.fchmod(fd, 0o600)
    with os.fdopen(fd, "w", encoding="ascii") as handle:
        handle.write(text)


@app.command()
def keygen(
    ctx: typer.Context,
    purpose: Purpose = typer.Option(Purpose.sign, "--purpose", help="encrypt (RSA-OAEP) or sign (RSASSA-PKCS1-v1_5)"),
    bits: Optional[int] = typer.Option(None, "--bits", help="Modulus length (default from config)"),
    hash_algorithm: Optional[str] = typer.Option(None, "--hash", help="SHA-1|SHA-256|SHA-384|SHA-512"),
    out_dir: Path = typer.Option(..., "-o", "--out-dir", help="Directory for <name>.key and <name>.pub"),
    name: str = typer.Option("key", "--name", help="Base file name"),
) -> None:
    """Generate an RSA key pair and write it as PEM"""
    config: AppConfig = ctx.obj
    modulus_bits = bits or config.keys.modulus_bits
    if purpose is Purpose.encrypt:
        pair = keys.generate_encryption_key_pair(modulus_bits, _hash(ctx, hash_algorithm))
    else:
        pair = keys.generate_signing_key_pair(modulus_bits, _hash(ctx, hash_algorithm))
    pem = keys.to_pem(pair)

    out_dir.mkdir(parents=True, exist_ok=True)
    private_path = out_dir / f"{name}.key"
    public_path = out_dir / f"{name}.pub"
    _write_private(private_path, pem.private_key + "\n")
    public_path.write_text(pem.public_key + "\n", encoding="ascii")
    log.info("keygen.written", purpose=purpose.value, private=str(private_path), public=str(public_path))
    typer.echo(f"Private key -> {private_path}")
    typer.echo(f"Public key -> {public_path}")


@app.command()
def sign(
    ctx: typer.Context,
    key: Path = typer.Option(..., "-k", "--key", exists=True, readable=True, help="Private key PEM"),
    input: Path = typer.Option(..., "-i", exists=True, readable=True),
    sig: Optional[Path] = typer.Option(None, "-s", help="Signature path (default: <input>.sig)"),
    hash_algorithm: Optional[str] = typer.Option(None, "--hash"),
) -> None:
    """Write a detached base64 signature"""
    private_key = keys.load_private_key_pem(
        key.read_text(encoding="ascii"), RSASSA_PKCS1_V1_5, _hash(ctx, hash_algorithm)
    )
    signature = keys.sign(private_key, input.read_bytes())
    sig_path = sig or input.with_suffix(input.suffix + ".sig")
    sig_path.write_text(signature.to_text() + "\n", encoding="ascii")
    typer.echo(signature.to_text())


@app.command()
def verify(
    ctx: typer.Context,
    public: Path = typer.Option(..., "-p", "--public", exists=True, readable=True, help="Public key PEM"),
    input: Path = typer.Option(..., "-i", exists=True, readable=True),
    sig: Path = typer.Option(..., "-s", exists=True, readable=True),
    hash_algorithm: Optional[str] = typer.Option(None, "--hash"),
) -> None:
    """Verify a detached base64 signature"""
    public_key = keys.load_public_key_pem(
        public.read_text(encoding="ascii"), RSASSA_PKCS1_V1_5, _hash(ctx, hash_algorithm)
    )
    try:
        signature = Signature.from_text(sig.read_text(encoding="ascii").strip())
    except KeysmithError as exc:
        typer.echo(f"Verify FAILED: {exc}")
        raise typer.Exit(code=2)
    ok = keys.verify(public_key, signature, input.read_bytes())
    typer.echo("Verify OK" if ok else "Verify FAILED")
    raise typer.Exit(code=0 if ok else 2)


@app.command()
def encrypt(
    ctx: typer.Context,
    public: Path = typer.Option(..., "-p", "--public", exists=True, readable=True, help="Public key PEM"),
    input: Path = typer.Option(..., "-i", exists=True, readable=True),
    output: Path = typer.Option(..., "-o"),
    hash_algorithm: Optional[str] = typer.Option(None, "--hash"),
) -> None:
    """RSA-OAEP encrypt a small payload"""
    public_key = keys.load_public_key_pem(public.read_text(encoding="ascii"), RSA_OAEP, _hash(ctx, hash_algorithm))
    output.write_bytes(keys.encrypt(public_key, input.read_bytes()))
    typer.echo(f"Encrypted -> {output}")


@app.command()
def decrypt(
    ctx: typer.Context,
    key: Path = typer.Option(..., "-k", "--key", exists=True, readable=True, help="Private key PEM"),
    input: Path = typer.Option(..., "-i", exists=True, readable=True),
    output: Path = typer.Option(..., "-o"),
    hash_algorithm: Optional[str] = typer.Option(None, "--hash"),
) -> None:
    """RSA-OAEP decrypt a payload"""
    private_key = keys.load_private_key_pem(key.read_text(encoding="ascii"), RSA_OAEP, _hash(ctx, hash_algorithm))
    output.write_bytes(keys.decrypt(private_key, input.read_bytes()))
    typer.echo(f"Decrypted -> {output}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
