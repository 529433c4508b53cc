"""User-facing message channels.

Status messages are plain text on standard output. Errors are printed in
red and the exit message on a red background, the same way the CLI colours
its own output.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import typer


@runtime_checkable
class Reporter(Protocol):
    """Protocol for anything that shows messages to the user."""

    def info(self, message: str) -> None:
        """Show a status message."""
        ...

    def success(self, message: str) -> None:
        """Show a confirmation that something worked."""
        ...

    def error(self, message: str) -> None:
        """Show a failure on the error channel."""
        ...

    def highlight(self, message: str) -> None:
        """Show a message on a contrasting background."""
        ...


class ConsoleReporter:
    """Reporter that writes to the terminal through typer.

    With ``err=True`` everything goes to standard error, which keeps
    standard output clean for commands that print data.
    """

    def __init__(self, err: bool = False):
        self.err = err

    def info(self, message: str) -> None:
        typer.echo(message, err=self.err)

    def success(self, message: str) -> None:
        typer.secho(message, fg=typer.colors.GREEN, err=self.err)

    def error(self, message: str) -> None:
        typer.secho(message, fg=typer.colors.RED, err=self.err)

    def highlight(self, message: str) -> None:
        typer.secho(message, bg=typer.colors.RED, err=self.err)


class RecordingReporter:
    """Reporter that keeps every message for later inspection in tests."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def highlight(self, message: str) -> None:
        self.messages.append(("highlight", message))

    def of_kind(self, kind: str) -> list[str]:
        """Return the messages recorded on one channel, in order."""
        return [text for channel, text in self.messages if channel == kind]

    @property
    def errors(self) -> list[str]:
        return self.of_kind("error")

    def reset_call_history(self) -> None:
        """Forget all recorded messages."""
        self.messages = []
