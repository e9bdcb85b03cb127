from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType
from typing import Optional, Protocol, runtime_checkable


class CommandExecutionError(OSError):
    def __init__(self, command: str, returncode: int) -> None:
        super().__init__(f"Command '{command}' exited with status {returncode}")
        self.command = command
        self.returncode = returncode


@runtime_checkable
class OutputProcessorProtocol(Protocol):
    """Releasable producer of the output lines of one executed command.

    Lines are yielded without their trailing newline. Reading may raise
    `OSError`; `close()` must be safe to call more than once.
    """

    def __iter__(self) -> Iterator[str]: ...

    def close(self) -> None: ...

    def __enter__(self) -> OutputProcessorProtocol: ...

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None: ...


@runtime_checkable
class CommandExecutorProtocol(Protocol):
    def execute(self, command: str) -> OutputProcessorProtocol: ...
