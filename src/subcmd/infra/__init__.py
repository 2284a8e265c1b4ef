"""Infrastructure layer — wrappers around external collaborators.

This layer wraps the standard-library flag primitive (:mod:`argparse`).
Every raw parser error must be caught here and re-raised as a
:class:`~subcmd.exceptions.SubcmdError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from subcmd.infra.flagset import Flag, FlagKind, FlagSet

__all__: list[str] = [
    "Flag",
    "FlagKind",
    "FlagSet",
]
