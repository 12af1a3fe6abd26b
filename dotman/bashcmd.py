"""Running external commands and echoing their output in colour."""

from __future__ import annotations

import subprocess
import sys
from enum import Enum
from typing import TextIO

COLOR_RESET = "\x1b[0m"


class Color(str, Enum):
    """ANSI colours used to paint command output."""

    RED = "\033[31m"
    GREEN = "\033[32m"


class CommandError(Exception):
    """Raised when an external command cannot be run or fails."""


class IOWriter:
    """A sink that prints everything it receives in one colour."""

    def __init__(self, color: Color, stream: TextIO | None = None) -> None:
        self.color = color
        self._stream = stream

    def write(self, data: bytes | str) -> int:
        """Print data between the colour codes and return its length."""
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        stream = self._stream or sys.stdout
        stream.write(f"{self.color.value}{text}{COLOR_RESET}")
        stream.flush()
        return len(data)


class BashCmd:
    """Runs commands, streaming their output through an IOWriter."""

    def __init__(self, writer: IOWriter) -> None:
        self.writer = writer

    def execute(self, command: str, *args: str) -> None:
        """Run a command; its stdout and stderr go to the writer."""
        message = "[BashCmd] failed to start command"
        try:
            with subprocess.Popen(
                [command, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
            ) as process:
                for line in process.stdout:
                    self.writer.write(line)
        except OSError as exc:
            raise CommandError(f"{message}:\n{exc}") from exc
        if process.returncode != 0:
            raise CommandError(f"{message}:\nexit status {process.returncode}")

    def execute_output(self, command: str, *args: str) -> str:
        """Run a command and return its combined stdout and stderr."""
        message = "[BashCmd] failed to execute command"
        try:
            completed = subprocess.run(
                [command, *args], stdout=subprocess.PIPE, stderr=subprocess.STDOUT
            )
        except OSError as exc:
            raise CommandError(f"{message}:\n{exc}") from exc
        if completed.returncode != 0:
            raise CommandError(f"{message}:\nexit status {completed.returncode}")
        return completed.stdout.decode("utf-8", errors="replace")