"""Root CLI group for transcribe-turbo."""

from __future__ import annotations

import click

from transcribe_turbo import __version__


@click.group()
@click.version_option(version=__version__, prog_name="transcribe-turbo")
def cli() -> None:
    """transcribe-turbo — speech transcription with political content analysis."""


# Import and register subcommands
from transcribe_turbo.cli.init_cmd import init_cmd  # noqa: E402
from transcribe_turbo.cli.run_cmd import run_cmd  # noqa: E402
from transcribe_turbo.cli.show_cmd import show_cmd  # noqa: E402

cli.add_command(init_cmd, "init")
cli.add_command(run_cmd, "run")
cli.add_command(show_cmd, "show")
