"""Protocols (interfaces) a command must satisfy.

A command is any object with a ``flags`` method and a useful ``__str__``
(its one-line description in the usage listing).  The ``run`` entry
point is deliberately **not** part of the protocol: its signature varies
per command and is validated at registration by
:func:`subcmd.core.shape.inspect_entry_point`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from subcmd.infra.flagset import FlagSet


@runtime_checkable
class Command(Protocol):
    """Contract for registrable commands.

    Any object that implements :meth:`flags` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def flags(self, flags: FlagSet) -> None:
        """Declare this command's flags on the fresh *flags* set.

        Keep the :class:`~subcmd.infra.flagset.Flag` handles returned by
        ``flags.add_*`` and read their ``value`` inside ``run``.
        """
        ...  # pragma: no cover

    def __str__(self) -> str:
        """Return the description shown next to the command in usage."""
        ...  # pragma: no cover


class NullFlags:
    """Mixin for commands that declare no flags."""

    def flags(self, flags: FlagSet) -> None:
        """Declare nothing."""
