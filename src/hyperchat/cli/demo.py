"""CLI: hyperchat demo"""

from typing import Optional

import click
from rich.console import Console

from hyperchat.errors import ValidationError
from hyperchat.feed import Feed, MemoryLog
from hyperchat.models.envelope import MessageVariant

console = Console()

BANNER = (
    "╔════════════════════════════════════════╗\n"
    "║     HYPERCHAT (Python Implementation)  ║\n"
    "╚════════════════════════════════════════╝"
)

SAMPLE_POSTS = [
    (MessageVariant.CHAT, "Hello from Python!"),
    (MessageVariant.STATUS, "Building Hyperchat in Python 🐍"),
    (MessageVariant.MICROBLOG, "P2P is the future of communication!"),
]


def _load_config() -> dict:
    from hyperchat.cli.main import _load_config
    return _load_config()


def _resolve_username(username: Optional[str]) -> str:
    from hyperchat.cli.main import _resolve_username
    return _resolve_username(username)


@click.command("demo")
@click.option("-u", "--username", default=None, help="Display name for posted messages")
@click.option("-s", "--storage", default=None, help="Storage directory")
def demo_cmd(username: Optional[str], storage: Optional[str]):
    """Show the banner and walk through the message system."""
    from hyperchat.cli.main import DEFAULT_STORAGE

    username = _resolve_username(username)
    storage = storage or _load_config().get("storage") or DEFAULT_STORAGE

    console.print(BANNER, markup=False)
    console.print(f"\nUsername: {username}", markup=False)
    console.print(f"Storage: {storage}\n", markup=False)
    console.print("[yellow]NOTE: P2P transport and the replicated log are not implemented yet.[/yellow]")
    console.print("[yellow]Messages below go to an in-memory log only.[/yellow]\n")

    console.print("[bold]Demonstrating Hyperchat Message System:[/bold]\n")
    feed = Feed(MemoryLog(), username)
    for i, (variant, content) in enumerate(SAMPLE_POSTS, start=1):
        try:
            feed.post(variant, content)
        except ValidationError as e:
            console.print(f"Message {i} validation failed: {e}", style="red", markup=False)

    for i, restored in enumerate(feed.entries(), start=1):
        console.print(f"Message {i}:", style="bold", markup=False)
        console.print(f"   Type: {restored.variant.value}", markup=False)
        console.print(f"   Content: {restored.content}", markup=False)
        console.print(f"   Author: {restored.author}", markup=False)
        console.print(f"   Timestamp: {restored.created_at}\n", markup=False)

    console.print("[green]Message system working correctly![/green]\n")
    console.print("Still to build for full P2P functionality:")
    console.print("  1. Persistent feed storage")
    console.print("  2. Peer discovery and transport")
    console.print("  3. Feed replication")
