"""transcribe-turbo init — write a run configuration file."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from transcribe_turbo.models.config import RunConfig
from transcribe_turbo.utils.io import write_yaml
from transcribe_turbo.utils.progress import log_error, log_success


@click.command()
@click.option("--input", "input_path", required=True, help="Input audio/video file")
@click.option("--output", "-o", default="transcribe.yaml", type=click.Path(),
              help="Where to write the config")
@click.option("--political-mode", is_flag=True, help="Enable political analysis")
@click.option("--format", "-f", "fmt", default="srt", help="Output format token")
@click.option("--force", is_flag=True, help="Overwrite an existing config")
def init_cmd(input_path: str, output: str, political_mode: bool, fmt: str, force: bool) -> None:
    """Write a YAML run configuration with default settings."""
    config_path = Path(output).resolve()
    if config_path.exists() and not force:
        log_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise SystemExit(1)

    try:
        config = RunConfig(input=input_path, political_mode=political_mode, format=fmt)
    except ValidationError as e:
        log_error(f"Invalid run configuration: {e}")
        raise SystemExit(1)

    write_yaml(config_path, config.model_dump(mode="json"))

    log_success(f"Config written: {config_path}")
    click.echo(f"\nNext: transcribe-turbo run {input_path} --config {output}")
