"""Positional argument binding and dispatch.

Binding is a **pure** transformation from a :class:`CallingShape` and a
token list to call arguments.  It is total: a token count that does not
match the shape never raises.

Rules
-----
* Each slot before the final one takes the token at its index, or
  ``""`` when the tokens run out.
* A variadic final slot takes every token from index ``P`` onward
  (``P`` = number of slots before it), possibly none.
* A single-string final slot takes the token at index ``P`` or ``""``;
  later tokens are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from subcmd.core.models import BindingKind, CallingShape, ParameterKind, Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BoundArguments:
    """Arguments ready to be passed to ``run``."""

    leading: tuple[str, ...]
    """One value per single-string slot."""

    tail: tuple[str, ...] | None = None
    """Tokens captured by a variadic final slot, ``None`` without one."""

    spread: bool = False
    """Pass :attr:`tail` as separate arguments (``*args``) instead of a list."""

    def call_args(self) -> tuple[Any, ...]:
        if self.tail is None:
            return self.leading
        if self.spread:
            return self.leading + self.tail
        return (*self.leading, list(self.tail))


def _fill(tokens: Sequence[str], count: int) -> tuple[str, ...]:
    """Take the first *count* tokens, padding with empty strings."""
    return tuple(tokens[i] if i < len(tokens) else "" for i in range(count))


def _bind_fixed(shape: CallingShape, tokens: Sequence[str]) -> BoundArguments:
    return BoundArguments(leading=_fill(tokens, len(shape.parameters)))


def _bind_variadic_tail(shape: CallingShape, tokens: Sequence[str]) -> BoundArguments:
    count = shape.positional_count
    return BoundArguments(
        leading=_fill(tokens, count),
        tail=tuple(tokens[count:]),
        spread=shape.parameters[-1] is ParameterKind.VAR_STRINGS,
    )


_BINDERS: dict[BindingKind, Callable[[CallingShape, Sequence[str]], BoundArguments]] = {
    BindingKind.FIXED: _bind_fixed,
    BindingKind.VARIADIC_TAIL: _bind_variadic_tail,
}


def bind_arguments(shape: CallingShape, tokens: Sequence[str]) -> BoundArguments:
    """Bind *tokens* onto the slots described by *shape*."""
    return _BINDERS[shape.binding](shape, tokens)


def exit_code(shape: CallingShape, result: Any) -> int:
    """Turn the value returned by ``run`` into a process exit code.

    Only the first element of a tuple result is considered.  ``None`` and
    commands without a declared result exit with ``0``.
    """
    if not shape.returns_code or result is None:
        return 0
    if isinstance(result, tuple):
        result = result[0] if result else None
    if result is None:
        return 0
    if isinstance(result, bool) or not isinstance(result, int):
        raise TypeError(
            f"run must return int, got {type(result).__name__}",
        )
    return result


def dispatch(rule: Rule, tokens: Sequence[str]) -> int:
    """Bind *tokens* onto ``rule.command.run``, call it, return the exit code.

    Exceptions raised by ``run`` propagate unchanged.
    """
    bound = bind_arguments(rule.shape, tokens)
    logger.debug(
        "dispatching %r with %d token(s) via %s binding",
        rule.name, len(tokens), rule.shape.binding.value,
    )
    result = rule.command.run(*bound.call_args())
    code = exit_code(rule.shape, result)
    logger.debug("command %r exited with code %d", rule.name, code)
    return code
