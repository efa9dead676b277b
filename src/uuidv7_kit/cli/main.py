"""
uuidv7 CLI

Command-line interface for generating, encoding and inspecting UUIDv7s.

Usage:
    uuidv7 gen --count 5
    uuidv7 gen --timestamp 1713815702151
    uuidv7 gen --encode --alphabet 0123456789abcdef
    uuidv7 encode 018f0760-4a87-737d-9889-b832d3dcce74
    uuidv7 decode <encoded>
    uuidv7 inspect 018f0760-4a87-737d-9889-b832d3dcce74
    uuidv7 validate 018f0760-4a87-737d-9889-b832d3dcce74
"""

import json
import os
from typing import NoReturn, Optional

import typer
from typing_extensions import Annotated

from uuidv7_kit.codec.alphabet import BASE58_ALPHABET
from uuidv7_kit.codec.transcoder import Transcoder
from uuidv7_kit.codec.validator import date_of, fields_of, is_valid, timestamp_of
from uuidv7_kit.generation.fixed import FixedTimestampGenerator
from uuidv7_kit.generation.monotonic import MonotonicGenerator
from uuidv7_kit.kernel.errors import InvalidArgument, UUIDv7Error
from uuidv7_kit.kernel.logging import LogOperation, configure_logging, get_logger, is_production
from uuidv7_kit.kernel.policy import GeneratorPolicy

# Logs go to stderr, identifiers to stdout
configure_logging(
    json_output=is_production(),
    log_level=os.getenv("UUIDV7_LOG_LEVEL", "WARNING"),
)
logger = get_logger(__name__)

app = typer.Typer(
    name="uuidv7",
    help="Generate, encode and inspect monotonic UUIDv7 identifiers",
    add_completion=False,
)

AlphabetOption = Annotated[
    str,
    typer.Option("--alphabet", help="Encoding alphabet (16-64 distinct characters)"),
]


def fail(error: UUIDv7Error) -> NoReturn:
    """Print an error to stderr and exit with status 1"""
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command()
def gen(
    count: Annotated[int, typer.Option("--count", "-n", help="Number of identifiers")] = 1,
    timestamp: Annotated[
        Optional[int],
        typer.Option("--timestamp", help="Fixed timestamp in milliseconds since epoch"),
    ] = None,
    encode: Annotated[bool, typer.Option("--encode", help="Print encoded form")] = False,
    alphabet: AlphabetOption = BASE58_ALPHABET,
) -> None:
    """Generate one or more identifiers"""
    try:
        transcoder = Transcoder(alphabet) if encode else None
        with LogOperation(logger, "cli_gen", count=count, fixed=timestamp is not None):
            if timestamp is None:
                ids = MonotonicGenerator(policy=GeneratorPolicy.from_env()).generate_many(count)
            else:
                if count <= 0:
                    raise InvalidArgument(
                        "count", count, f"Generation amount must be greater than 0, got {count}"
                    )
                fixed = FixedTimestampGenerator()
                ids = [fixed.generate(timestamp) for _ in range(count)]
    except UUIDv7Error as e:
        fail(e)

    for identifier in ids:
        typer.echo(transcoder.encode(identifier) if transcoder else identifier)


@app.command()
def encode(
    identifier: Annotated[str, typer.Argument(help="Canonical UUIDv7")],
    alphabet: AlphabetOption = BASE58_ALPHABET,
) -> None:
    """Encode a UUIDv7 with a custom alphabet"""
    try:
        typer.echo(Transcoder(alphabet).encode(identifier))
    except UUIDv7Error as e:
        fail(e)


@app.command()
def decode(
    encoded: Annotated[str, typer.Argument(help="Encoded UUIDv7")],
    alphabet: AlphabetOption = BASE58_ALPHABET,
) -> None:
    """Decode an encoded UUIDv7 back to canonical form"""
    try:
        typer.echo(Transcoder(alphabet).decode_or_raise(encoded))
    except UUIDv7Error as e:
        fail(e)


@app.command()
def inspect(
    identifier: Annotated[str, typer.Argument(help="Canonical UUIDv7")],
    as_json: Annotated[bool, typer.Option("--json", help="Output JSON")] = False,
) -> None:
    """Show the fields embedded in a UUIDv7"""
    fields = fields_of(identifier)
    if fields is None:
        typer.echo(f"Error: Not a valid UUIDv7: {identifier!r}", err=True)
        raise typer.Exit(1)

    date = date_of(identifier)
    info = {
        "identifier": identifier.lower(),
        "timestamp": timestamp_of(identifier),
        "date": date.isoformat() if date else None,
        "rand_a": fields.rand_a,
        "rand_b": fields.rand_b,
    }

    if as_json:
        typer.echo(json.dumps(info, indent=2))
        return

    typer.echo(f"Identifier: {info['identifier']}")
    typer.echo(f"  Timestamp: {info['timestamp']}")
    typer.echo(f"  Date: {info['date']}")
    typer.echo(f"  rand_a: {fields.rand_a:#05x}")
    typer.echo(f"  rand_b: {fields.rand_b:#018x}")


@app.command()
def validate(
    identifier: Annotated[str, typer.Argument(help="String to check")],
) -> None:
    """Exit 0 if the string is a valid UUIDv7, 1 otherwise"""
    if is_valid(identifier):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(1)


def main() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    main()
