"""CLI layer — application object, usage output and error boundary.

This package is the outermost layer of the framework.  It may import
from ``core`` and ``infra``, but no other layer may import from ``cli``.
"""
