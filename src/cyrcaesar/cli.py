from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from cyrcaesar.classical.common import ALPHABET, ALPHABET_SIZE
from cyrcaesar.core.errors import CipherError
from cyrcaesar.core.features import analyze_text, frequency_table
from cyrcaesar.core.fileio import DEFAULT_ENCODING, read_text, require_file, write_text
from cyrcaesar.engine import (
    BRUTE_FORCE_FAILED,
    brute_force_file,
    decrypt_file,
    encrypt_file,
    rank_file,
    statistical_file,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Caesar cipher over a fixed 40-symbol Cyrillic alphabet: encrypt, decrypt, crack.")

_ENCODING = typer.Option(
    DEFAULT_ENCODING, "--encoding", envvar="CYRCAESAR_ENCODING", help="Text encoding of all files."
)
_KEY = typer.Option(..., "--key", "-k", help=f"Shift key, 0..{ALPHABET_SIZE - 1}.")


@app.callback()
def _init(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="-v for info, -vv for debug logging."),
):
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


def _run(fn, *args, **kwargs):
    """Map validation failures to usage errors and I/O failures to exit code 1."""
    try:
        return fn(*args, **kwargs)
    except CipherError as e:
        raise typer.BadParameter(str(e))
    except (OSError, UnicodeError) as e:
        typer.secho(f"File error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def encrypt(
    input_file: Path = typer.Argument(..., help="File to read."),
    output_file: Path = typer.Argument(..., help="File to write (overwritten)."),
    key: str = _KEY,
    encoding: str = _ENCODING,
):
    """Encrypt a file with a known key."""
    _run(encrypt_file, input_file, output_file, key, encoding=encoding)
    typer.echo(f"Encrypted text written to {output_file}")


@app.command()
def decrypt(
    input_file: Path = typer.Argument(..., help="File to read."),
    output_file: Path = typer.Argument(..., help="File to write (overwritten)."),
    key: str = _KEY,
    encoding: str = _ENCODING,
):
    """Decrypt a file when you already have the key."""
    _run(decrypt_file, input_file, output_file, key, encoding=encoding)
    typer.echo(f"Decrypted text written to {output_file}")


@app.command()
def brute(
    input_file: Path = typer.Argument(..., help="Ciphertext file."),
    output_file: Path = typer.Argument(..., help="File to write (overwritten)."),
    sample: Optional[Path] = typer.Option(
        None,
        "--sample",
        "-s",
        help="File holding a fragment of the expected plaintext. Matched verbatim, so a trailing newline in the file must also occur in the plaintext.",
    ),
    encoding: str = _ENCODING,
):
    """Try every key and keep the first decryption that contains the sample."""
    key = _run(brute_force_file, input_file, output_file, sample, encoding=encoding)
    if key is None:
        typer.echo(f"{BRUTE_FORCE_FAILED} Marker written to {output_file}")
        return
    typer.echo(f"key={key}  decrypted text written to {output_file}")


@app.command()
def stats(
    input_file: Path = typer.Argument(..., help="Ciphertext file."),
    output_file: Path = typer.Argument(..., help="File to write (overwritten)."),
    sample: Path = typer.Option(..., "--sample", "-s", help="Plaintext in the same language, for letter frequencies."),
    top: int = typer.Option(0, "--top", "-t", help="If >0, also list this many best keys."),
    encoding: str = _ENCODING,
):
    """Recover the key by comparing symbol frequencies with a sample text."""
    ranked = _run(rank_file, input_file, sample, encoding=encoding)
    best = ranked[0]
    _run(write_text, output_file, best.plaintext, encoding)
    logger.info("Statistical analysis chose key %d (distance %.6f)", best.key, best.distance)
    typer.echo(f"key={best.key}  decrypted text written to {output_file}")

    if top > 0:
        typer.echo("\nClosest keys:")
        for r in ranked[:top]:
            row = r.to_dict()
            typer.echo(f"  k={row['key']:2d}  distance={row['distance']:.6f}")


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="File to analyze."),
    top: int = typer.Option(10, "--top", "-t", help="Rows of the frequency table to show (0 = all)."),
    encoding: str = _ENCODING,
):
    """Show text features and alphabet symbol frequencies."""
    text = _run(lambda: read_text(require_file(input_file), encoding))
    for k, v in analyze_text(text).items():
        typer.echo(f"{k}: {v}")

    rows = frequency_table(text)
    if top > 0:
        rows = rows[:top]
    if rows:
        typer.echo("\nSymbol frequencies:")
    for ch, count, share in rows:
        typer.echo(f"  {ch!r:5} {count:6d}  {share:.4f}")


@app.command()
def alphabet():
    """Print the cipher alphabet with symbol indices."""
    for i, ch in enumerate(ALPHABET):
        typer.echo(f"{i:2d}  {ch!r}")


_MENU = """Choose a mode:
1. Encrypt
2. Decrypt with key
3. Brute force
4. Statistical analysis
0. Exit"""


@app.command()
def menu(encoding: str = _ENCODING):
    """Interactive menu: pick an operation, then enter file names and key."""
    typer.echo(_MENU)
    choice = typer.prompt("Mode", type=int)

    if choice == 0:
        typer.echo("Exiting.")
        return
    if choice not in (1, 2, 3, 4):
        typer.secho("Invalid choice. Please choose 0 to 4.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    input_file = typer.prompt("Input file")
    output_file = typer.prompt("Output file")

    try:
        if choice == 1:
            encrypt_file(input_file, output_file, typer.prompt("Shift (integer)"), encoding=encoding)
            typer.echo(f"Text encrypted and written to {output_file}")
        elif choice == 2:
            decrypt_file(input_file, output_file, typer.prompt("Shift (integer)"), encoding=encoding)
            typer.echo(f"Text decrypted and written to {output_file}")
        elif choice == 3:
            sample = typer.prompt("Sample text file (optional)", default="", show_default=False)
            key = brute_force_file(input_file, output_file, sample, encoding=encoding)
            if key is None:
                typer.echo(f"{BRUTE_FORCE_FAILED} Marker written to {output_file}")
            else:
                typer.echo(f"Text decrypted by brute force (key {key}) and written to {output_file}")
        else:
            sample = typer.prompt("Sample text file")
            key = statistical_file(input_file, output_file, sample, encoding=encoding)
            typer.echo(f"Text decrypted by statistical analysis (key {key}) and written to {output_file}")
    except CipherError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except (OSError, UnicodeError) as e:
        typer.secho(f"File error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def main():
    app()


if __name__ == "__main__":
    main()
