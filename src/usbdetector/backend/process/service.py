from __future__ import annotations

import shlex
import subprocess
from collections.abc import Iterator
from types import TracebackType
from typing import Optional

from loguru import logger

from .protocol import CommandExecutionError


class SubprocessOutputProcessor:
    _command: str
    _process: subprocess.Popen[str]
    _closed: bool

    def __init__(self, command: str, process: subprocess.Popen[str]) -> None:
        self._command = command
        self._process = process
        self._closed = False

    def __iter__(self) -> Iterator[str]:
        stdout = self._process.stdout
        if stdout is None:
            raise OSError(f"No output stream for command: {self._command}")

        for line in stdout:
            yield line.rstrip("\r\n")

        returncode = self._process.wait()
        if returncode != 0:
            raise CommandExecutionError(self._command, returncode)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        if self._process.poll() is None:
            self._process.kill()
        if self._process.stdout is not None:
            self._process.stdout.close()
        self._process.wait()

    def __enter__(self) -> SubprocessOutputProcessor:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class SubprocessCommandExecutor:
    def execute(self, command: str) -> SubprocessOutputProcessor:
        logger.debug("Running command: {}", command)

        process = subprocess.Popen(
            shlex.split(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
        )
        return SubprocessOutputProcessor(command, process)
