"""Allow ``python -m subcmd`` invocation.

Runs a bare application named after the package, which answers the
built-in ``help`` and ``version`` commands.
"""

from __future__ import annotations

from subcmd import Application, __version__

if __name__ == "__main__":
    Application("subcmd", __version__).run()
