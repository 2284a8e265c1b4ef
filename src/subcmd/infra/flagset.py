"""Per-command flag sets built on :mod:`argparse`.

This module is the **only** place in the codebase that talks to
``argparse``.  Every parser error is caught here and re-raised as a typed
:class:`~subcmd.exceptions.FlagParseError` — nothing raw escapes the
infrastructure boundary.

Parsing rules
-------------
* Flags are spelled ``-name`` or ``--name``; values as ``-name=value``
  or ``-name value``.  Boolean flags never consume the following token,
  so they only take a value through ``-name=false``.
* Parsing stops at the first token that is not a flag (``-`` on its own
  counts as a positional).  A ``--`` terminator is consumed and every
  token after it is positional.
* ``-h``/``-help`` request help unless the command declares a flag with
  that name.

Every :class:`FlagSet` is an explicitly constructed instance.  There is
no process-wide flag registry.
"""

from __future__ import annotations

import argparse
import enum
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from subcmd.exceptions import FlagParseError, HelpRequested

logger = logging.getLogger(__name__)

_HELP_NAMES: frozenset[str] = frozenset({"h", "help"})
_TRUE_WORDS: frozenset[str] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS: frozenset[str] = frozenset({"0", "f", "F", "FALSE", "false", "False"})


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------

def parse_bool(text: str) -> bool:
    """Convert a boolean flag value, accepting the usual spellings."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def parse_int(text: str) -> int:
    """Convert an integer flag value; ``0x``/``0o``/``0b`` prefixes are honoured."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value {text!r}") from None


def parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value {text!r}") from None


class FlagKind(enum.Enum):
    """Value type of a flag."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


_CONVERTERS: dict[FlagKind, Callable[[str], Any]] = {
    FlagKind.STRING: str,
    FlagKind.INT: parse_int,
    FlagKind.FLOAT: parse_float,
    FlagKind.BOOL: parse_bool,
}


def format_value(kind: FlagKind, value: Any) -> str:
    """Render a flag value the way it is typed on the command line.

    Booleans are lower-case (``true``/``false``) and integral floats drop
    their trailing ``.0``.
    """
    if kind is FlagKind.BOOL:
        return "true" if value else "false"
    if kind is FlagKind.FLOAT:
        text = repr(float(value))
        return text[:-2] if text.endswith(".0") else text
    return str(value)


# ---------------------------------------------------------------------------
# Flag handle
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Flag:
    """A declared flag and a handle to its live value.

    Commands keep the handle returned by the ``add_*`` methods and read
    :attr:`value` inside ``run``; it holds the default until the flag set
    has parsed the command line.
    """

    name: str
    kind: FlagKind
    default: Any
    help: str
    value: Any

    @property
    def default_text(self) -> str:
        """The default value as command-line text."""
        return format_value(self.kind, self.default)

    @property
    def is_bool(self) -> bool:
        return self.kind is FlagKind.BOOL


# ---------------------------------------------------------------------------
# Flag set
# ---------------------------------------------------------------------------

class _FlagParser(argparse.ArgumentParser):
    """Parser that raises instead of printing and exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise FlagParseError(message, flagset=self.prog)


def _flag_name(token: str) -> str:
    """Strip leading dashes and any ``=value`` suffix from a flag token."""
    return token.lstrip("-").split("=", 1)[0]


class FlagSet:
    """A named set of flags owned by one command (or by the application).

    Parameters
    ----------
    name:
        Name used in error messages, normally the command name.
    """

    def __init__(self, name: str) -> None:
        self.name: str = name
        self._flags: dict[str, Flag] = {}
        self._args: list[str] = []
        self._parsed: bool = False
        self._parser = _FlagParser(prog=name, add_help=False, allow_abbrev=False)

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def add_string(self, name: str, default: str = "", help: str = "") -> Flag:
        """Declare a string flag."""
        return self._add(name, FlagKind.STRING, default, help)

    def add_int(self, name: str, default: int = 0, help: str = "") -> Flag:
        """Declare an integer flag."""
        return self._add(name, FlagKind.INT, default, help)

    def add_float(self, name: str, default: float = 0.0, help: str = "") -> Flag:
        """Declare a float flag."""
        return self._add(name, FlagKind.FLOAT, default, help)

    def add_bool(self, name: str, default: bool = False, help: str = "") -> Flag:
        """Declare a boolean flag; ``-name`` alone sets it to ``True``."""
        return self._add(name, FlagKind.BOOL, default, help)

    def _add(self, name: str, kind: FlagKind, default: Any, help: str) -> Flag:
        if not name or name.startswith("-") or "=" in name:
            raise ValueError(f"{self.name}: bad flag name {name!r}")
        if name in self._flags:
            raise ValueError(f"{self.name}: flag redefined: {name}")

        flag = Flag(name=name, kind=kind, default=default, help=help, value=default)
        options = (f"-{name}", f"--{name}")
        if kind is FlagKind.BOOL:
            self._parser.add_argument(
                *options, dest=name, nargs="?", const=True, default=default, type=parse_bool,
            )
        else:
            self._parser.add_argument(
                *options, dest=name, default=default, type=_CONVERTERS[kind],
            )
        self._flags[name] = flag
        return flag

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _split(self, tokens: list[str]) -> tuple[list[str], list[str]]:
        """Split *tokens* into flag tokens and the positional rest.

        A declared non-boolean flag followed by a separate value is joined
        into one ``-name=value`` token, so the value is never read as a
        flag, whatever it looks like.
        """
        flag_tokens: list[str] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token == "--":
                return flag_tokens, tokens[index + 1:]
            if len(token) < 2 or not token.startswith("-"):
                break
            index += 1
            flag = self._flags.get(_flag_name(token))
            if (
                flag is not None
                and not flag.is_bool
                and "=" not in token
                and index < len(tokens)
            ):
                token = f"{token}={tokens[index]}"
                index += 1
            flag_tokens.append(token)
        return flag_tokens, tokens[index:]

    def parse(self, tokens: Sequence[str]) -> list[str]:
        """Parse *tokens*, set every flag's value and return the positionals.

        Raises
        ------
        HelpRequested
            When ``-h``/``-help`` is given and not declared as a flag.
        FlagParseError
            When a flag is unknown, lacks a value or has a bad value.
        """
        flag_tokens, positionals = self._split(list(tokens))
        for token in flag_tokens:
            name = _flag_name(token)
            if name in _HELP_NAMES and name not in self._flags:
                raise HelpRequested(flagset=self.name)

        namespace = self._parser.parse_args(flag_tokens)
        for name, flag in self._flags.items():
            flag.value = getattr(namespace, name)

        self._args = positionals
        self._parsed = True
        logger.debug(
            "flag set %r parsed %d flag token(s), %d positional(s)",
            self.name, len(flag_tokens), len(positionals),
        )
        return list(positionals)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def args(self) -> list[str]:
        """Positional tokens left over by the last :meth:`parse`."""
        return list(self._args)

    @property
    def parsed(self) -> bool:
        return self._parsed

    def lookup(self, name: str) -> Flag | None:
        return self._flags.get(name)

    def visit_all(self) -> list[Flag]:
        """Return every declared flag, sorted by name."""
        return [self._flags[name] for name in sorted(self._flags)]

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __repr__(self) -> str:
        return f"FlagSet({self.name!r}, flags={sorted(self._flags)!r})"
