"""Domain models for subcmd.

All models are **frozen** dataclasses.  A :class:`Rule` is built once
at registration and never changes afterwards; its :class:`CallingShape`
is never re-derived.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from subcmd.infra.flagset import FlagSet


# ---------------------------------------------------------------------------
# Calling shape
# ---------------------------------------------------------------------------

class ParameterKind(enum.Enum):
    """How one ``run`` parameter receives its tokens."""

    STRING = "string"
    """A single token, or ``""`` when there are not enough tokens."""

    STRING_LIST = "string_list"
    """Every remaining token, passed as one ``list[str]`` argument."""

    VAR_STRINGS = "var_strings"
    """Every remaining token, spread over a ``*args: str`` parameter."""


_VARIADIC: frozenset[ParameterKind] = frozenset(
    {ParameterKind.STRING_LIST, ParameterKind.VAR_STRINGS}
)


class BindingKind(enum.Enum):
    """The two binding strategies the dispatcher knows."""

    FIXED = "fixed"
    VARIADIC_TAIL = "variadic_tail"


@dataclass(frozen=True, slots=True)
class CallingShape:
    """The validated parameter/result structure of a ``run`` method."""

    parameters: tuple[ParameterKind, ...]
    """Parameter slots in declaration order, excluding ``self``."""

    returns_code: bool
    """Whether ``run`` produces an ``int`` used as the exit code."""

    def __post_init__(self) -> None:
        for kind in self.parameters[:-1]:
            if kind is not ParameterKind.STRING:
                raise ValueError("only the final parameter may be variadic")

    @property
    def variadic(self) -> bool:
        return bool(self.parameters) and self.parameters[-1] in _VARIADIC

    @property
    def binding(self) -> BindingKind:
        return BindingKind.VARIADIC_TAIL if self.variadic else BindingKind.FIXED

    @property
    def positional_count(self) -> int:
        """Number of slots before the final one."""
        return max(len(self.parameters) - 1, 0)


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rule:
    """One registered command."""

    command: Any
    """The command object; satisfies :class:`~subcmd.core.protocols.Command`."""

    shape: CallingShape
    flags: FlagSet
    """Flag set owned exclusively by this rule."""

    name: str
    arguments: str
    """Free-form usage string such as ``"<key> <value> [<extra>]"``."""

    @property
    def has_options(self) -> bool:
        return bool(self.flags.visit_all())

    def __str__(self) -> str:
        """Render ``name [options] arguments`` for the usage listing."""
        text = self.name
        if self.has_options:
            text += " [options]"
        if self.arguments:
            text += " " + self.arguments
        return text
