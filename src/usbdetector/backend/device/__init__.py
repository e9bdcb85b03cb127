from __future__ import annotations

import platform
from typing import Optional

from usbdetector.backend.process import CommandExecutorProtocol, SubprocessCommandExecutor

from .disk_info import DiskInfoParser, parse_disk_info, parse_disk_info_line
from .macos_service import MacOsStorageDeviceService
from .protocol import DetectorOptions, DiskInfo, StorageDeviceDetectorProtocol, USBStorageDevice
from .release import MacOsRelease, resolve_release


def create_storage_device_service(
    command_executor: Optional[CommandExecutorProtocol] = None,
    system: Optional[str] = None,
) -> StorageDeviceDetectorProtocol:
    system = (system or platform.system()).lower()
    command_executor = command_executor or SubprocessCommandExecutor()

    if system == "darwin":
        return MacOsStorageDeviceService(command_executor)
    raise NotImplementedError(f"USB storage detection not supported on platform: {system}")


__all__ = [
    "DetectorOptions",
    "DiskInfo",
    "DiskInfoParser",
    "MacOsRelease",
    "MacOsStorageDeviceService",
    "StorageDeviceDetectorProtocol",
    "USBStorageDevice",
    "create_storage_device_service",
    "parse_disk_info",
    "parse_disk_info_line",
    "resolve_release",
]
