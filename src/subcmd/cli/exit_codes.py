"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the command returned nothing, or ``-h`` was requested."""

GENERAL_ERROR: int = 1
"""No command was given, or the command name is not registered."""

USAGE_ERROR: int = 2
"""A flag set rejected its tokens (unknown flag, bad or missing value)."""
