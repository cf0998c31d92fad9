#!/usr/bin/env python3
"""
kobling CLI - inspect connection setup without running a query.

Everything printed goes through the masking helpers, so the output is safe to
paste into a ticket.
"""
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
import yaml

from kobling.broker import BrokerPropertyBuilder, CertificateStager
from kobling.utility.exceptions import ConfigError, KoblingError
from kobling.utility.masking import mask_properties
from kobling.utility.types import to_column_type


def _load_config(config_file: Path) -> Dict[str, str]:
    """Read a flat YAML mapping as a string-to-string configuration map."""
    try:
        data = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_file}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a mapping")
    return {str(key): "" if value is None else str(value) for key, value in data.items()}


def _fail(error: KoblingError) -> None:
    click.echo(f"{error.code.value}: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="kobling")
def kobling():
    """
    kobling - connection setup for federated catalogs

    Builds broker consumer properties, stages certificates and maps schema
    types exactly as the connector does at runtime.
    """
    pass


@kobling.command("broker-properties")
@click.argument(
    "config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--format",
    "-f",
    "payload_format",
    default=None,
    help="Payload format (json, csv, avro, protobuf, string)",
)
@click.option("--temp-dir", default=None, help="Base directory for staged certificates")
def broker_properties(config_file: Path, payload_format: Optional[str], temp_dir: Optional[str]):
    """Print consumer properties for CONFIG_FILE with secrets masked."""
    try:
        config = _load_config(config_file)
        builder = BrokerPropertyBuilder(stager=CertificateStager(temp_dir=temp_dir))
        properties = builder.build_consumer_properties(config, payload_format)
    except KoblingError as e:
        _fail(e)
        return

    for key, value in sorted(mask_properties(properties).items()):
        click.echo(f"{key}={value}")


@kobling.command("stage-certs")
@click.argument("reference")
@click.option("--temp-dir", default=None, help="Base directory for staged certificates")
def stage_certs(reference: str, temp_dir: Optional[str]):
    """Copy certificates under REFERENCE (s3://bucket/prefix) to disk."""
    try:
        directory = CertificateStager(temp_dir=temp_dir).stage(reference)
    except KoblingError as e:
        _fail(e)
        return

    click.echo(str(directory))
    for path in sorted(directory.iterdir()):
        if path.is_file():
            click.echo(f"  {path.name}")


@kobling.command("map-type")
@click.argument("type_names", nargs=-1, required=True)
def map_type(type_names: Any):
    """Show the column type for each TYPE_NAMES entry."""
    for type_name in type_names:
        click.echo(f"{type_name} -> {to_column_type(type_name)}")


def main():
    """Main entry point for the kobling CLI."""
    kobling()


if __name__ == "__main__":
    main()
