"""subcmd — a micro-framework for command-line applications with sub-commands.

Commands are plain objects with a ``flags`` method, a ``__str__``
description and a ``run`` method whose ``str`` parameters receive the
positional arguments.  ``help`` and ``version`` are provided.
"""

import logging

from subcmd.cli.app import Application
from subcmd.core.protocols import Command, NullFlags
from subcmd.infra.flagset import Flag, FlagSet
from subcmd.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())


def new(name: str, version: str) -> Application:
    """Create an application with the ``help`` and ``version`` commands."""
    return Application(name, version)


__all__: list[str] = [
    "Application",
    "Command",
    "Flag",
    "FlagSet",
    "NullFlags",
    "__version__",
    "new",
]
