"""CLI: hyperchat encode, hyperchat decode"""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hyperchat.errors import DecodeError, EncodeError, ValidationError
from hyperchat.models.envelope import Envelope, MessageVariant
from hyperchat.transport.envelope import decode, encode

console = Console()


def _resolve_username(username: Optional[str]) -> str:
    from hyperchat.cli.main import _resolve_username
    return _resolve_username(username)


@click.command("encode")
@click.argument("type_tag", metavar="TYPE", type=click.Choice([v.value for v in MessageVariant]))
@click.argument("content")
@click.option("-u", "--username", default=None)
def encode_cmd(type_tag: str, content: str, username: Optional[str]):
    """Build an envelope, validate it and print its encoding."""
    envelope = Envelope.create(MessageVariant(type_tag), content, _resolve_username(username))
    try:
        envelope.validate()
        data = encode(envelope)
    except (ValidationError, EncodeError) as e:
        console.print(f"Invalid envelope: {e}", style="red", markup=False)
        raise SystemExit(1)
    click.echo(data.decode("utf-8"))


@click.command("decode")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--json-output", "--json", is_flag=True)
def decode_cmd(source, json_output: bool):
    """Decode an encoded envelope (from FILE or stdin)."""
    try:
        envelope = decode(source.read())
    except DecodeError as e:
        console.print(f"Cannot decode: {e}", style="red", markup=False)
        raise SystemExit(1)

    if json_output:
        click.echo(encode(envelope).decode("utf-8"))
        return

    table = Table(title="Envelope")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("type", envelope.variant.value)
    table.add_row("content", escape(envelope.content))
    table.add_row("author", escape(envelope.author))
    table.add_row("timestamp", str(envelope.created_at))
    console.print(table)
    try:
        envelope.validate()
        console.print("[green]valid[/green]")
    except ValidationError as e:
        console.print(f"invalid: {e}", style="yellow", markup=False)
