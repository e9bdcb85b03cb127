from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from usbdetector.backend.process import CommandExecutorProtocol
from usbdetector.backend.system import OsVersionSourceProtocol, PlatformOsVersionService

from .disk_info import DiskInfoParser
from .protocol import DetectorOptions, StorageDeviceDetectorProtocol, USBStorageDevice
from .release import MacOsRelease, resolve_release


class MacOsStorageDeviceService(StorageDeviceDetectorProtocol):
    _MOUNT_POINT_PATTERN = re.compile(r"Mount Point: (.+)")

    _command_executor: CommandExecutorProtocol
    _options: DetectorOptions
    _disk_info_parser: DiskInfoParser
    _os_version: str
    _release: Optional[MacOsRelease]

    def __init__(
        self,
        command_executor: CommandExecutorProtocol,
        os_version_source: Optional[OsVersionSourceProtocol] = None,
        options: Optional[DetectorOptions] = None,
    ) -> None:
        self._command_executor = command_executor
        self._options = options or DetectorOptions()
        self._disk_info_parser = DiskInfoParser(
            command_executor, self._options.diskutil_info_command
        )

        os_version_source = os_version_source or PlatformOsVersionService()
        self._os_version = os_version_source.get_version()
        self._release = resolve_release(self._os_version)
        if self._release is None:
            logger.error("Unsupported macOS version: {}", self._os_version)

    @property
    def os_version(self) -> str:
        return self._os_version

    @property
    def release(self) -> Optional[MacOsRelease]:
        return self._release

    def get_storage_devices(self) -> list[USBStorageDevice]:
        if self._release is None:
            logger.warning("Skipping device detection on unsupported macOS {}", self._os_version)
            return []

        if self._release >= self._options.modern_release:
            return self._list_with_disk_info()
        return self._list_with_usb_profiler()

    def _list_with_disk_info(self) -> list[USBStorageDevice]:
        devices: list[USBStorageDevice] = []

        try:
            with self._command_executor.execute(self._options.df_command) as output:
                for line in output:
                    parts = line.split()
                    if not parts:
                        continue

                    subject = parts[0]
                    if not subject.startswith(self._options.disk_prefix):
                        continue

                    disk = self._disk_info_parser.get_disk_info(subject)
                    if not disk.is_usb:
                        continue

                    device = self._build_device(
                        disk.mount_point, disk.volume_name, disk.device, disk.volume_uuid
                    )
                    if device is not None:
                        devices.append(device)
        except OSError as e:
            logger.opt(exception=e).error("Listing mounted disks failed: {}", e)

        return devices

    def _list_with_usb_profiler(self) -> list[USBStorageDevice]:
        devices: list[USBStorageDevice] = []

        try:
            with self._command_executor.execute(self._options.usb_profiler_command) as output:
                for line in output:
                    match = self._MOUNT_POINT_PATTERN.fullmatch(line.strip())
                    if match is None:
                        continue

                    device = self._build_device(match.group(1))
                    if device is not None:
                        devices.append(device)
        except OSError as e:
            logger.opt(exception=e).error("Listing USB topology failed: {}", e)

        return devices

    def _build_device(
        self,
        mount_point: str,
        name: str = "",
        device: str = "",
        uuid: str = "",
    ) -> Optional[USBStorageDevice]:
        if not mount_point:
            logger.trace("Skipping unmounted device {}", device or "<unknown>")
            return None

        logger.debug("USB storage device found: {} at {}", device or name, mount_point)
        return USBStorageDevice(device=device, mount_point=mount_point, name=name, uuid=uuid)
