from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OsVersionSourceProtocol(Protocol):
    def get_version(self) -> str: ...
