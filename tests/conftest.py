"""Shared test fixtures for gitlore tests."""

import subprocess
from dataclasses import dataclass, field

import pytest

from gitlore.git import GitExecutable

FAKE_GIT = GitExecutable(path="/usr/bin/git", version="2.43.0")


@dataclass(frozen=True, slots=True)
class LogRecord:
    """A single entry captured by RecordingSink."""

    severity: str
    category: str
    parts: tuple[object, ...]
    fields: dict[str, object]


@dataclass(slots=True)
class RecordingSink:
    """LogSink that keeps every entry in memory."""

    records: list[LogRecord] = field(default_factory=list)

    def info(self, category: str, *parts: object, **fields: object) -> None:
        self.records.append(LogRecord("info", category, parts, fields))

    def warning(self, category: str, *parts: object, **fields: object) -> None:
        self.records.append(LogRecord("warning", category, parts, fields))

    def error(self, category: str, *parts: object, **fields: object) -> None:
        self.records.append(LogRecord("error", category, parts, fields))

    @property
    def severities(self) -> list[str]:
        return [record.severity for record in self.records]


class ExplodingSink:
    """LogSink whose every method raises."""

    def info(self, category: str, *parts: object, **fields: object) -> None:
        msg = "sink is broken"
        raise RuntimeError(msg)

    warning = info
    error = info


def completed(
    returncode: int = 0,
    stdout: bytes = b"",
    stderr: bytes = b"",
) -> subprocess.CompletedProcess[bytes]:
    """Build the result anyio.run_process would return."""
    return subprocess.CompletedProcess(
        args=[],
        returncode=returncode,
        stdout=stdout,
        stderr=stderr,
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
