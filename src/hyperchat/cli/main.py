"""
Hyperchat CLI — `hyperchat` command.

Commands:
  hyperchat demo              Banner and message-system walkthrough
  hyperchat encode TYPE TEXT  Build, validate and print one envelope
  hyperchat decode [FILE]     Inspect an encoded envelope
"""

import json
import logging
from pathlib import Path

import click
from rich.console import Console

from hyperchat import __version__

console = Console()
CONFIG_FILE = Path.home() / ".hyperchat" / "config.json"
DEFAULT_USERNAME = "anonymous"
DEFAULT_STORAGE = "./storage"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _resolve_username(username=None) -> str:
    return username or _load_config().get("username") or DEFAULT_USERNAME


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Hyperchat — P2P chat message tooling."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")


# Register subcommands from separate modules
from hyperchat.cli.demo import demo_cmd
from hyperchat.cli.codec import encode_cmd, decode_cmd

main.add_command(demo_cmd)
main.add_command(encode_cmd)
main.add_command(decode_cmd)


if __name__ == "__main__":
    main()
