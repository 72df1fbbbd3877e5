"""rcli CLI application with Typer."""

import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from rcli import __version__
from rcli.app import OutputFormat
from rcli.app.ports import TextSignFormat
from rcli.bootstrap import bootstrap_application
from rcli.config import get_settings
from rcli.errors import ConfigurationError, RcliError
from rcli.utils.codec import Base64Format, decode, encode
from rcli.utils.genpass import generate_password
from rcli.utils.sources import STDIN_SENTINEL, read_source

app = typer.Typer(
    name="rcli",
    help="Command-line toolbox: CSV conversion, passwords, base64 and text signing",
    add_completion=True,
    no_args_is_help=True,
)
base64_app = typer.Typer(help="Base64 encoding and decoding", no_args_is_help=True)
app.add_typer(base64_app, name="base64")
text_app = typer.Typer(help="Sign and verify messages, generate keys", no_args_is_help=True)
app.add_typer(text_app, name="text")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"rcli version {__version__}")
        raise typer.Exit()


def verify_input(value: str) -> str:
    """Accept ``-`` (stdin) or the name of an existing file."""
    if value == STDIN_SENTINEL or Path(value).exists():
        return value
    raise typer.BadParameter("File does not exist")


def _fail(exc: Exception) -> NoReturn:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging on stderr"),
    ] = False,
) -> None:
    """rcli - command-line toolbox for everyday data chores."""
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


InputOption = Annotated[
    str,
    typer.Option(
        "--input",
        "-i",
        callback=verify_input,
        help="Input file, or - for standard input",
    ),
]
KeyOption = Annotated[
    Path,
    typer.Option(
        "--key",
        "-k",
        exists=True,
        dir_okay=False,
        help="File holding the raw key bytes",
    ),
]
FormatOption = Annotated[
    TextSignFormat | None,
    typer.Option(
        "--format",
        help="Signature algorithm (defaults to RCLI_DEFAULT_SIGN_FORMAT or blake3)",
    ),
]


# CSV subcommand
@app.command("csv")
def csv_convert(
    input_path: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            exists=True,
            dir_okay=False,
            help="CSV file to convert",
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Destination file (defaults to output.<format>)"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="Field delimiter"),
    ] = ",",
    header: Annotated[
        bool,
        typer.Option("--header/--no-header", help="Treat the first row as column names"),
    ] = True,
) -> None:
    """Convert a CSV file to JSON or YAML."""
    container = bootstrap_application()
    output_format = format or OutputFormat(container.settings.csv_output_format)
    destination = output if output is not None else Path(f"output.{output_format}")

    try:
        count = container.csv_service.convert(
            input_path,
            destination,
            format=output_format,
            delimiter=delimiter,
            header=header,
        )
    except RcliError as exc:
        _fail(exc)

    typer.secho(f"Wrote {count} records to {destination}", fg=typer.colors.GREEN)


# Password subcommand
@app.command("genpass")
def genpass(
    length: Annotated[
        int | None,
        typer.Option("--length", "-l", min=1, help="Password length (defaults to 16)"),
    ] = None,
    uppercase: Annotated[
        bool,
        typer.Option("--uppercase/--no-uppercase", help="Include uppercase letters"),
    ] = True,
    lowercase: Annotated[
        bool,
        typer.Option("--lowercase/--no-lowercase", help="Include lowercase letters"),
    ] = True,
    number: Annotated[
        bool,
        typer.Option("--number/--no-number", help="Include digits"),
    ] = True,
    symbol: Annotated[
        bool,
        typer.Option("--symbol/--no-symbol", help="Include symbols"),
    ] = True,
) -> None:
    """Generate a random password."""
    settings = get_settings()
    try:
        password = generate_password(
            length if length is not None else settings.genpass_length,
            uppercase=uppercase,
            lowercase=lowercase,
            number=number,
            symbol=symbol,
        )
    except RcliError as exc:
        _fail(exc)

    typer.echo(password)


# Base64 subcommands
@base64_app.command("encode")
def base64_encode(
    input_path: InputOption = STDIN_SENTINEL,
    format: Annotated[
        Base64Format,
        typer.Option("--format", help="Base64 alphabet"),
    ] = Base64Format.STANDARD,
) -> None:
    """Encode a file or standard input as base64."""
    try:
        data = read_source(input_path)
    except RcliError as exc:
        _fail(exc)

    typer.echo(encode(data, format))


@base64_app.command("decode")
def base64_decode(
    input_path: InputOption = STDIN_SENTINEL,
    format: Annotated[
        Base64Format,
        typer.Option("--format", help="Base64 alphabet"),
    ] = Base64Format.STANDARD,
) -> None:
    """Decode base64 from a file or standard input."""
    try:
        text = read_source(input_path).decode("ascii", errors="replace")
        data = decode(text, format)
    except RcliError as exc:
        _fail(exc)

    typer.echo(data)


# Text subcommands
@text_app.command("sign")
def text_sign(
    key: KeyOption,
    input_path: InputOption = STDIN_SENTINEL,
    format: FormatOption = None,
) -> None:
    """Sign a message with a shared key (blake3) or private key (ed25519)."""
    container = bootstrap_application()

    try:
        signature = container.text_service.sign(input_path, key, format)
    except RcliError as exc:
        _fail(exc)

    typer.echo(signature)


@text_app.command("verify")
def text_verify(
    key: KeyOption,
    sig: Annotated[
        str,
        typer.Option("--sig", "-s", help="Signature text produced by `rcli text sign`"),
    ],
    input_path: InputOption = STDIN_SENTINEL,
    format: FormatOption = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 when the signature is invalid"),
    ] = False,
) -> None:
    """Verify a signed message with a shared key (blake3) or public key (ed25519)."""
    container = bootstrap_application()

    try:
        result = container.text_service.verify(input_path, key, sig, format)
    except RcliError as exc:
        _fail(exc)

    if json_output:
        from rcli.utils.cli_output import json_response

        typer.echo(
            json_response(
                "text_verify",
                1,
                valid=result.valid,
                format=result.format.value,
                detail=result.detail,
            )
        )
    else:
        typer.echo("true" if result.valid else "false")
        if result.detail:
            typer.secho(result.detail, fg=typer.colors.YELLOW, err=True)

    if strict and not result.valid:
        raise typer.Exit(code=1)


@text_app.command("generate")
def text_generate(
    format: FormatOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            exists=True,
            file_okay=False,
            dir_okay=True,
            help="Directory that receives the key files (defaults to the configured key dir)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Generate a blake3 secret or an ed25519 keypair."""
    container = bootstrap_application()

    try:
        generated = container.text_service.generate(format, output)
    except RcliError as exc:
        _fail(exc)

    if json_output:
        from rcli.utils.cli_output import json_response

        typer.echo(
            json_response(
                "text_keys",
                1,
                format=generated.format.value,
                paths=[str(path) for path in generated.paths],
            )
        )
        return

    for path in generated.paths:
        typer.echo(str(path))


if __name__ == "__main__":
    app()
