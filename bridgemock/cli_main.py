"""Developer CLI for bridge adapters.

Runs count, retrieve and search requests against a registered adapter
(the mock adapter by default) and prints the results.
"""

from __future__ import annotations

import importlib.metadata as _metadata
import logging
import sys

import click
from dotenv import load_dotenv

from bridgemock.adapters import available_adapters
from bridgemock.cli.commands import count, retrieve, search
from bridgemock.cli.utils import BridgeConsole
from bridgemock.config import get_settings

console = BridgeConsole()


def _get_version() -> str:
    """Return the installed version of bridgemock."""
    try:
        return _metadata.version("bridgemock")
    except _metadata.PackageNotFoundError:
        return "0.1.0-dev"


@click.group(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "max_content_width": 120
    },
    invoke_without_command=True
)
@click.version_option(_get_version(), message="bridgemock v%(version)s")
@click.option('--verbose', '-v', is_flag=True, help='Log adapter access traces')
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Bridge adapter CLI.

    \b
    Examples:
      bridgemock count -s Users -p count=7
      bridgemock retrieve -s Users -f name -f id
      bridgemock search -s Users -f name -m count=25 -m offset=20 -m pageSize=10
      bridgemock search -s Users -p records='id:$,label:Item $'
    """
    # Load environment variables from .env file, but don't override existing ones
    load_dotenv(override=False)
    get_settings.cache_clear()

    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))

    if ctx.invoked_subcommand is None:
        console.print()
        console.print(f"[primary]Available adapters:[/primary] {', '.join(available_adapters())}")
        console.print("Run [info]bridgemock --help[/info] for available commands.")
        console.print()


# Register commands
main.add_command(count)
main.add_command(retrieve)
main.add_command(search)


if __name__ == "__main__":
    sys.exit(main())
