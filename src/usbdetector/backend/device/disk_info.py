from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from functools import reduce

from loguru import logger

from usbdetector.backend.process import CommandExecutorProtocol

from .protocol import DiskInfo

INFO_MOUNT_POINT = "Mount Point"
INFO_PROTOCOL = "Protocol"
INFO_USB = "USB"
INFO_VOLUME_NAME = "Volume Name"
INFO_VOLUME_UUID = "Volume UUID"


def parse_disk_info_line(disk: DiskInfo, line: str) -> DiskInfo:
    """Fold one `diskutil info` line into `disk`, returning the updated copy.

    Lines without a colon and unknown keys leave the info unchanged.
    """
    parts = line.split(":", 1)
    if len(parts) < 2:
        return disk

    key = parts[0].strip()
    value = parts[1].strip()

    if key == INFO_MOUNT_POINT:
        return replace(disk, mount_point=value)
    if key == INFO_PROTOCOL:
        return replace(disk, is_usb=value == INFO_USB)
    if key == INFO_VOLUME_NAME:
        return replace(disk, volume_name=value)
    if key == INFO_VOLUME_UUID:
        return replace(disk, volume_uuid=value)
    return disk


def parse_disk_info(device: str, lines: Iterable[str]) -> DiskInfo:
    return reduce(parse_disk_info_line, lines, DiskInfo(device))


class DiskInfoParser:
    _command_executor: CommandExecutorProtocol
    _info_command: str

    def __init__(
        self,
        command_executor: CommandExecutorProtocol,
        info_command: str = "diskutil info",
    ) -> None:
        self._command_executor = command_executor
        self._info_command = info_command

    def get_disk_info(self, device: str) -> DiskInfo:
        disk = DiskInfo(device)
        command = f"{self._info_command} {device}"

        try:
            with self._command_executor.execute(command) as output:
                for line in output:
                    disk = parse_disk_info_line(disk, line)
        except OSError as e:
            logger.opt(exception=e).error("Could not read disk info for {}: {}", device, e)

        return disk
