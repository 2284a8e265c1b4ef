"""Application object, command-line resolution and error boundary.

:meth:`Application.run` is the **sole error boundary** of the framework.
It turns invocation errors (no command, unknown command, bad flags, help
requests) into usage output and exit codes.  Exceptions raised by a
command's ``run`` are *not* caught; they propagate to the interpreter.

Typical use::

    app = Application("myapp", "1.0.0")
    app.rule(AddCommand(), "add", "<key> <username> [<extra>]")
    app.run()
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import NoReturn, TextIO

from subcmd.cli import exit_codes
from subcmd.cli.builtins import HelpCommand, VersionCommand
from subcmd.cli.console import ConsoleProxy
from subcmd.cli.usage import print_usage, render_usage
from subcmd.core.binder import dispatch
from subcmd.core.models import Rule
from subcmd.core.protocols import Command
from subcmd.core.registry import RuleRegistry
from subcmd.exceptions import (
    FlagParseError,
    HelpRequested,
    MissingCommandError,
    UnknownCommandError,
)
from subcmd.infra.flagset import FlagSet

logger = logging.getLogger(__name__)


class Application:
    """A command-line application made of named sub-commands.

    Parameters
    ----------
    name:
        Program name shown in usage and by ``version``.
    version:
        Version string shown by ``version``.
    stdout, stderr:
        Optional output streams.  By default the live ``sys.stdout`` and
        ``sys.stderr`` are used at write time.
    """

    def __init__(
        self,
        name: str,
        version: str,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.name: str = name
        self.version: str = version
        self.rules: RuleRegistry = RuleRegistry()
        self.flags: FlagSet = FlagSet(name)
        """Global flags, parsed before the command name."""

        self._out = ConsoleProxy(file=stdout)
        self._err = ConsoleProxy(file=stderr, stderr=True)

        self.rule(HelpCommand(self.usage), "help")
        self.rule(VersionCommand(name, version, self._out), "version")

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def rule(self, command: Command, name: str, arguments: str = "") -> Rule:
        """Register *command* under *name*; see :meth:`RuleRegistry.register`.

        The command's ``run`` may take ``str`` parameters; if it takes more
        parameters than there are arguments the extra ones receive ``""``,
        and surplus arguments are ignored unless the last parameter is a
        ``list[str]`` (or ``*args: str``), which collects them.  If ``run``
        returns an ``int`` (or a tuple starting with one) it becomes the
        exit code; otherwise the exit code is ``0``.
        """
        return self.rules.register(command, name, arguments)

    # ------------------------------------------------------------------
    # Usage
    # ------------------------------------------------------------------

    def format_usage(self) -> str:
        return render_usage(self.name, self.rules)

    def usage(self) -> None:
        """Print the usage listing to standard error."""
        print_usage(self.name, self.rules, self._err)

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def resolve(self, argv: Sequence[str] | None = None) -> tuple[Rule, list[str]]:
        """Parse global and command flags and find the command to run.

        Returns the rule and its positional tokens.

        Raises
        ------
        MissingCommandError
            When no command token remains after the global flags.
        UnknownCommandError
            When the command token is not registered.
        FlagParseError, HelpRequested
            From either flag set.
        """
        tokens = list(sys.argv[1:] if argv is None else argv)
        args = self.flags.parse(tokens)
        if not args:
            raise MissingCommandError("no command given")

        name = args[0]
        rule = self.rules.get(name)
        if rule is None:
            raise UnknownCommandError(name)

        return rule, rule.flags.parse(args[1:])

    def main(self, argv: Sequence[str] | None = None) -> int:
        """Resolve and dispatch *argv*, returning the exit code.

        Invocation errors are raised, not printed; see :meth:`run`.
        """
        rule, positionals = self.resolve(argv)
        return dispatch(rule, positionals)

    def run(self, argv: Sequence[str] | None = None) -> NoReturn:
        """Dispatch the command line and exit the process.

        Parameters
        ----------
        argv:
            Explicit argument list.  When ``None`` (default),
            ``sys.argv[1:]`` is used.
        """
        try:
            rule, positionals = self.resolve(argv)
        except MissingCommandError:
            self.usage()
            sys.exit(exit_codes.GENERAL_ERROR)
        except UnknownCommandError as exc:
            logger.debug("unknown command %r", exc.name)
            self._err.write(f"Error: {exc}\n")
            self.usage()
            sys.exit(exit_codes.GENERAL_ERROR)
        except HelpRequested:
            self.usage()
            sys.exit(exit_codes.SUCCESS)
        except FlagParseError as exc:
            self._err.write(f"Error: {exc.flagset}: {exc}\n")
            self.usage()
            sys.exit(exit_codes.USAGE_ERROR)

        sys.exit(dispatch(rule, positionals))
