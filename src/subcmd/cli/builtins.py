"""Built-in ``help`` and ``version`` commands.

Both are registered by :class:`~subcmd.cli.app.Application` on
construction and can be replaced by registering another command under
the same name.
"""

from __future__ import annotations

from collections.abc import Callable

from subcmd.cli.console import ConsoleProxy
from subcmd.core.protocols import NullFlags


class HelpCommand(NullFlags):
    """Print the application usage to standard error."""

    def __init__(self, usage: Callable[[], None]) -> None:
        self._usage = usage

    def run(self) -> None:
        self._usage()

    def __str__(self) -> str:
        return "Output this usage information."


class VersionCommand(NullFlags):
    """Print ``<name> v<version>`` to standard output."""

    def __init__(self, name: str, version: str, console: ConsoleProxy) -> None:
        self._name = name
        self._version = version
        self._console = console

    def run(self) -> None:
        self._console.write(f"{self._name} v{self._version}\n")

    def __str__(self) -> str:
        return "Output the application version."
