"""Core layer — registration, calling-shape validation and dispatch.

Rules
-----
* No ``print()`` calls and no console rendering.
* No imports from ``cli``.
* Errors are raised as :class:`~subcmd.exceptions.SubcmdError` subclasses.
"""

from subcmd.core.binder import BoundArguments, bind_arguments, dispatch, exit_code
from subcmd.core.models import BindingKind, CallingShape, ParameterKind, Rule
from subcmd.core.protocols import Command, NullFlags
from subcmd.core.registry import RuleRegistry
from subcmd.core.shape import inspect_entry_point

__all__: list[str] = [
    "BindingKind",
    "BoundArguments",
    "CallingShape",
    "Command",
    "NullFlags",
    "ParameterKind",
    "Rule",
    "RuleRegistry",
    "bind_arguments",
    "dispatch",
    "exit_code",
    "inspect_entry_point",
]
