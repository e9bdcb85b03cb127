from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Protocol, runtime_checkable

from .release import MacOsRelease


@dataclass(frozen=True, slots=True, eq=False)
class USBStorageDevice:
    device: str
    mount_point: str = ""
    name: str = ""
    uuid: str = ""

    @property
    def identity(self) -> str:
        # Records found through system_profiler carry no device path.
        return self.device or self.mount_point

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, USBStorageDevice):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return PurePosixPath(self.mount_point).name


@dataclass(slots=True)
class DiskInfo:
    """Fields collected for one candidate disk while its info output is read."""

    device: str
    mount_point: str = ""
    volume_name: str = ""
    volume_uuid: str = ""
    is_usb: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        if name == "device" and hasattr(self, "device"):
            raise AttributeError("DiskInfo.device cannot be reassigned")
        object.__setattr__(self, name, value)


@dataclass(frozen=True, slots=True)
class DetectorOptions:
    df_command: str = "df -l"
    diskutil_info_command: str = "diskutil info"
    usb_profiler_command: str = "system_profiler SPUSBDataType"
    disk_prefix: str = "/dev/disk"
    modern_release: MacOsRelease = MacOsRelease.MountainLion


@runtime_checkable
class StorageDeviceDetectorProtocol(Protocol):
    def get_storage_devices(self) -> list[USBStorageDevice]: ...
