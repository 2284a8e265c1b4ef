"""Usage listing for every registered command.

The layout is fixed::

    Usage: <app> <cmd> [options] [<args>]
      <name> [options] <arguments>   <description>
        -<flag>=<placeholder>        <help>

Command lines are padded to a shared column (the longest command label
plus three); flag lines are padded to the same column.  Commands are
listed alphabetically, flags alphabetically within their command.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from subcmd.cli.console import ConsoleProxy
from subcmd.core.models import Rule
from subcmd.infra.flagset import Flag

_PADDING: int = 3
_INTEGER = re.compile(r"[+-]?[0-9]+")


def placeholder(default_text: str) -> str:
    """Infer a value placeholder from a flag's default text.

    * ``""``        → ``<value>``
    * ``"false"``   → ``""`` (boolean switch, no value shown)
    * ``"42"``      → ``<n>``
    * anything else → the default, double-quoted
    """
    if default_text == "":
        return "<value>"
    if default_text == "false":
        return ""
    if _INTEGER.fullmatch(default_text):
        return "<n>"
    return f'"{default_text}"'


def format_option(flag: Flag) -> str:
    """Render ``-name`` or ``-name=<placeholder>``."""
    option = f"-{flag.name}"
    value = placeholder(flag.default_text)
    if value:
        option += f"={value}"
    return option


def _column(rules: list[Rule]) -> int:
    return max((len(str(rule)) for rule in rules), default=0) + _PADDING


def render_usage(name: str, rules: Iterable[Rule]) -> str:
    """Render the full usage text, ending with a blank line."""
    rules = list(rules)
    column = _column(rules)

    lines = [f"Usage: {name} <cmd> [options] [<args>]"]
    for rule in rules:
        label = str(rule)
        spaces = " " * (column - len(label))
        lines.append(f"  {label}{spaces}{rule.command}")

        for flag in rule.flags.visit_all():
            option = format_option(flag)
            spaces = " " * (column - len(option) - 2)
            lines.append(f"    {option}{spaces}{flag.help}")

    return "\n".join(lines) + "\n\n"


def print_usage(name: str, rules: Iterable[Rule], console: ConsoleProxy) -> None:
    console.write(render_usage(name, rules))
