"""Validation of a command's ``run`` entry point.

:func:`inspect_entry_point` is called exactly once per registration.  It
turns the annotations of ``run`` into a :class:`CallingShape`, or raises
the first :class:`~subcmd.exceptions.RegistrationError` it finds.

Accepted signatures
-------------------
* Every parameter but the last is a ``str`` (or unannotated).
* The last parameter is a ``str``, a ``list[str]`` / ``Sequence[str]``,
  or ``*args: str``.
* The return annotation is ``int``, ``int | None``, a ``tuple`` whose
  first element is ``int``, ``None``, or absent.  ``bool`` is not
  accepted as an ``int``.
"""

from __future__ import annotations

import collections.abc
import inspect
import logging
import types
import typing
from typing import Any

from subcmd.core.models import CallingShape, ParameterKind
from subcmd.exceptions import (
    InvalidParameterTypeError,
    InvalidReturnTypeError,
    MissingEntryPointError,
)

logger = logging.getLogger(__name__)

ENTRY_POINT: str = "run"
"""Name of the method every command must define."""

_LIST_ORIGINS: tuple[Any, ...] = (list, collections.abc.Sequence)
_NO_RESULT: tuple[Any, ...] = (None, type(None), typing.NoReturn)
_UNION_ORIGINS: tuple[Any, ...] = (typing.Union, types.UnionType)

_PARAMETER_HINT = (
    "run() parameters must be str; only the last may be list[str] or *args: str."
)
_RETURN_HINT = "run() must return int, int | None, a tuple starting with int, or None."


def _is_string(annotation: Any) -> bool:
    return annotation is inspect.Parameter.empty or annotation is str


def _is_string_list(annotation: Any) -> bool:
    return (
        typing.get_origin(annotation) in _LIST_ORIGINS
        and typing.get_args(annotation) == (str,)
    )


def _parameter_kind(
    parameter: inspect.Parameter, *, final: bool, name: str,
) -> ParameterKind:
    """Classify one parameter or raise :class:`InvalidParameterTypeError`."""
    annotation = parameter.annotation

    if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
        if _is_string(annotation):
            return ParameterKind.VAR_STRINGS
    elif parameter.kind in (
        inspect.Parameter.KEYWORD_ONLY,
        inspect.Parameter.VAR_KEYWORD,
    ):
        raise InvalidParameterTypeError(
            f"{name}: run parameter {parameter.name!r} must be positional",
            hint=_PARAMETER_HINT,
        )
    elif _is_string(annotation):
        return ParameterKind.STRING
    elif final and _is_string_list(annotation):
        return ParameterKind.STRING_LIST

    raise InvalidParameterTypeError(
        f"{name}: parameters for run must be strings, "
        f"got {parameter.name}: {annotation!r}",
        hint=_PARAMETER_HINT,
    )


def _returns_code(annotation: Any, *, name: str) -> bool:
    """Return whether the result is an exit code, or raise."""
    if annotation is inspect.Signature.empty:
        return True
    if annotation in _NO_RESULT:
        return False
    if annotation is int:
        return True
    if (
        typing.get_origin(annotation) in _UNION_ORIGINS
        and set(typing.get_args(annotation)) == {int, type(None)}
    ):
        return True

    if typing.get_origin(annotation) is tuple:
        members = typing.get_args(annotation)
        if members and members[0] is int:
            return True

    raise InvalidReturnTypeError(
        f"{name}: first return value for run must be int, got {annotation!r}",
        hint=_RETURN_HINT,
    )


def inspect_entry_point(command: object, name: str) -> CallingShape:
    """Validate ``command.run`` and derive its :class:`CallingShape`.

    Parameters
    ----------
    command:
        The command object being registered.
    name:
        The command name, used in error messages.

    Raises
    ------
    MissingEntryPointError
        When the command has no callable ``run``.
    InvalidParameterTypeError
        When a parameter is not a string, or a non-final one is variadic.
    InvalidReturnTypeError
        When the declared result does not start with ``int``.
    """
    run = getattr(command, ENTRY_POINT, None)
    if run is None or not callable(run):
        raise MissingEntryPointError(
            f"{name}: missing run method",
            hint=f"Define a run() method on {type(command).__name__}.",
        )

    try:
        signature = inspect.signature(run, eval_str=True)
    except (NameError, TypeError, ValueError) as exc:
        raise InvalidParameterTypeError(
            f"{name}: cannot inspect run: {exc}",
            hint=_PARAMETER_HINT,
        ) from exc

    parameters = list(signature.parameters.values())
    kinds = tuple(
        _parameter_kind(parameter, final=index == len(parameters) - 1, name=name)
        for index, parameter in enumerate(parameters)
    )
    shape = CallingShape(
        parameters=kinds,
        returns_code=_returns_code(signature.return_annotation, name=name),
    )
    logger.debug("command %r has calling shape %s", name, shape)
    return shape
