from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

import pytest
from loguru import logger


class FakeOutputProcessor:
    def __init__(self, lines: list[str], error: Optional[OSError] = None) -> None:
        self._lines = lines
        self._error = error
        self.closed = False

    def __iter__(self) -> Iterator[str]:
        yield from self._lines
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeOutputProcessor:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        self.close()


class FakeCommandExecutor:
    """Serves canned output per command string and records what was run."""

    def __init__(self) -> None:
        self._outputs: dict[str, tuple[list[str], Optional[OSError]]] = {}
        self._launch_errors: dict[str, OSError] = {}
        self.executed: list[str] = []
        self.processors: list[FakeOutputProcessor] = []
        self.open_at_execute: list[int] = []

    def add(self, command: str, output: str | list[str], error: Optional[OSError] = None) -> None:
        lines = output.splitlines() if isinstance(output, str) else list(output)
        self._outputs[command] = (lines, error)

    def fail_to_launch(self, command: str, error: OSError) -> None:
        self._launch_errors[command] = error

    def execute(self, command: str) -> FakeOutputProcessor:
        self.executed.append(command)
        self.open_at_execute.append(sum(1 for p in self.processors if not p.closed))

        if command in self._launch_errors:
            raise self._launch_errors[command]

        lines, error = self._outputs.get(command, ([], None))
        processor = FakeOutputProcessor(lines, error)
        self.processors.append(processor)
        return processor


class FakeOsVersionSource:
    def __init__(self, version: str) -> None:
        self._version = version
        self.calls = 0

    def get_version(self) -> str:
        self.calls += 1
        return self._version


@pytest.fixture
def fake_executor() -> FakeCommandExecutor:
    return FakeCommandExecutor()


@pytest.fixture
def os_version():
    return FakeOsVersionSource


@pytest.fixture
def log_messages() -> Iterator[list[tuple[str, str]]]:
    messages: list[tuple[str, str]] = []
    logger.enable("usbdetector")
    handler_id = logger.add(
        lambda m: messages.append((m.record["level"].name, m.record["message"])),
        level="TRACE",
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("usbdetector")
