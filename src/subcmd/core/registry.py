"""Rule registry — validated ``name -> Rule`` storage.

The registry is filled during the construction phase of an application
and only read while dispatching.  It performs no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from subcmd.core.models import Rule
from subcmd.core.protocols import Command
from subcmd.core.shape import inspect_entry_point
from subcmd.exceptions import RegistrationError
from subcmd.infra.flagset import FlagSet

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Mapping of command names to registered :class:`Rule` objects."""

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def register(self, command: Command, name: str, arguments: str = "") -> Rule:
        """Validate *command* and store it under *name*.

        A later registration with the same *name* replaces the earlier
        one.  *arguments* is only displayed, never parsed.

        Raises
        ------
        TypeError
            When *command* has no ``flags`` method.
        RegistrationError
            When ``run`` is missing or has an unsupported signature.
        """
        if not isinstance(command, Command):
            raise TypeError(
                f"{name}: {type(command).__name__} does not define flags(flags)",
            )

        try:
            shape = inspect_entry_point(command, name)
        except RegistrationError as exc:
            logger.debug("rejected command %r: %s", name, exc)
            raise

        flags = FlagSet(name)
        command.flags(flags)

        rule = Rule(
            command=command,
            shape=shape,
            flags=flags,
            name=name,
            arguments=arguments,
        )
        if name in self._rules:
            logger.debug("command %r replaces an earlier registration", name)
        self._rules[name] = rule
        logger.debug("registered command %r", name)
        return rule

    def get(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def sorted_rules(self) -> list[Rule]:
        """Return every rule ordered by command name."""
        return [self._rules[name] for name in sorted(self._rules)]

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.sorted_rules())

    def __len__(self) -> int:
        return len(self._rules)
