from __future__ import annotations

import json
import sys
from dataclasses import asdict
from typing import Optional

import click

from usbdetector.backend.device import (
    StorageDeviceDetectorProtocol,
    create_storage_device_service,
    resolve_release,
)
from usbdetector.backend.system import PlatformOsVersionService
from usbdetector.util import LOG_LEVELS, setup_logging


def _create_service() -> StorageDeviceDetectorProtocol:
    try:
        return create_storage_device_service()
    except NotImplementedError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    envvar="USBDETECTOR_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Minimum level of log messages written to stderr.",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Also write log messages to this file.",
)
def cli(log_level: str, log_file: Optional[str]) -> None:
    """List USB storage devices attached to this Mac."""
    setup_logging(log_level, log_file)


@cli.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Print devices as a JSON array.")
def list_devices(as_json: bool) -> None:
    """List mounted USB storage devices"""
    service = _create_service()
    devices = service.get_storage_devices()

    if as_json:
        click.echo(json.dumps([asdict(d) for d in devices], indent=2))
        return

    if not devices:
        click.echo("No USB storage devices found.")
        return

    for d in devices:
        click.echo("\t".join([d.display_name, d.mount_point, d.device, d.uuid]))


@cli.command(name="version")
def show_version() -> None:
    """Show the detected macOS version and release"""
    version = PlatformOsVersionService().get_version()
    release = resolve_release(version)
    click.echo(f"{version} ({release.name if release else 'unsupported'})")


def main() -> None:
    cli()
