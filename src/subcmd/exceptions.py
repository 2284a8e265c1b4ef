"""Custom exception hierarchy for subcmd.

Every error the framework raises inherits from :class:`SubcmdError`.
Registration errors signal a programming mistake in a command
definition; invocation errors signal bad user input on the command line.
Neither is caught inside the core layer — the CLI error boundary in
:meth:`subcmd.cli.app.Application.run` is the only place that turns them
into console output and exit codes.

Hierarchy
---------
SubcmdError
├── RegistrationError
│   ├── MissingEntryPointError
│   ├── InvalidParameterTypeError
│   └── InvalidReturnTypeError
├── InvocationError
│   ├── MissingCommandError
│   └── UnknownCommandError
├── FlagParseError
├── HelpRequested
└── EnvironmentError
"""

from __future__ import annotations


class SubcmdError(Exception):
    """Base exception for all subcmd errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registration -----------------------------------------------------------

class RegistrationError(SubcmdError):
    """Raised when a command cannot be registered."""


class MissingEntryPointError(RegistrationError):
    """Raised when a command has no callable ``run`` method."""


class InvalidParameterTypeError(RegistrationError):
    """Raised when a ``run`` parameter is not a string or string list."""


class InvalidReturnTypeError(RegistrationError):
    """Raised when the first result of ``run`` is not an ``int``."""


# --- Invocation -------------------------------------------------------------

class InvocationError(SubcmdError):
    """Raised when the command line does not select a registered command."""


class MissingCommandError(InvocationError):
    """Raised when no command token was given."""


class UnknownCommandError(InvocationError):
    """Raised when the command token names no registered command."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid command {name}")
        self.name: str = name


# --- Flags ------------------------------------------------------------------

class FlagParseError(SubcmdError):
    """Raised when a flag set rejects its tokens."""

    def __init__(self, message: str, *, flagset: str) -> None:
        super().__init__(message)
        self.flagset: str = flagset
        """Name of the flag set that rejected the tokens."""


class HelpRequested(SubcmdError):
    """Raised when ``-h``/``-help`` is passed to a flag set that does not define it."""

    def __init__(self, *, flagset: str) -> None:
        super().__init__("help requested")
        self.flagset: str = flagset


# --- Environment ------------------------------------------------------------

class EnvironmentError(SubcmdError):
    """Raised when an optional runtime dependency is not available."""
