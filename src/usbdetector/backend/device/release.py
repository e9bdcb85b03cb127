from __future__ import annotations

import re
from enum import Enum
from functools import total_ordering
from typing import Optional


@total_ordering
class MacOsRelease(Enum):
    """Known macOS releases in chronological order.

    Members compare by their position in this table, never by the numeric
    value of the prefix ("11" comes after "10.15").
    """

    Tiger = "10.4"
    Leopard = "10.5"
    SnowLeopard = "10.6"
    Lion = "10.7"
    MountainLion = "10.8"
    Mavericks = "10.9"
    Yosemite = "10.10"
    ElCapitan = "10.11"
    Sierra = "10.12"
    HighSierra = "10.13"
    Mojave = "10.14"
    Catalina = "10.15"
    BigSur = "11"
    Monterey = "12"
    Ventura = "13"
    Sonoma = "14"
    Sequoia = "15"
    Tahoe = "26"

    @property
    def version_prefix(self) -> str:
        return self.value

    @property
    def position(self) -> int:
        return _RELEASE_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MacOsRelease):
            return NotImplemented
        return self.position < other.position

    def matches(self, version: str) -> bool:
        # "1" must not claim "10.4", so the prefix has to end on a component boundary.
        if not version.startswith(self.value):
            return False
        rest = version[len(self.value) :]
        return not rest or not rest[0].isdigit()


_RELEASE_ORDER: tuple[MacOsRelease, ...] = tuple(MacOsRelease)

_VERSION_PATTERN = re.compile(r"^\s*(\S+)")


def resolve_release(version: str) -> Optional[MacOsRelease]:
    match = _VERSION_PATTERN.match(version)
    if match is None:
        return None

    candidate = match.group(1)
    for release in _RELEASE_ORDER:
        if release.matches(candidate):
            return release
    return None
