"""Shared pytest fixtures and configuration for the subcmd test suite.

Guidelines
----------
* Every test drives :class:`~subcmd.cli.app.Application` through
  explicit ``argv`` lists — ``sys.argv`` is only patched where the
  default is under test.
* Output is checked with ``capsys`` or injected streams.
* Command classes are defined at module level so their ``run``
  annotations resolve against module globals.
"""

from __future__ import annotations

import pytest

from subcmd import Application


@pytest.fixture
def app() -> Application:
    return Application("myapp", "0.0.1")
