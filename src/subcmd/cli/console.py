"""CLI console helpers with optional Rich support.

Text is written through the stream a Rich console resolves, without any
Rich rendering, so text such as ``[options]`` or a tab is written exactly
as given.  The Rich import is deferred to the first write; when Rich is
missing the proxies fall back to plain ``print``.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from subcmd.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, file: TextIO | None = None, stderr: bool = False) -> Any:
	"""Create a plain-text Rich console targeting *file*, stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(
		file=file,
		stderr=stderr,
		markup=False,
		highlight=False,
		emoji=False,
		soft_wrap=True,
	)


class ConsoleProxy:
	"""Write-only console bound to one output stream.

	Parameters
	----------
	file:
		Explicit target stream.  When ``None`` the live ``sys.stdout`` (or
		``sys.stderr`` with *stderr*) is looked up on every write.
	stderr:
		Target standard error instead of standard output.
	"""

	def __init__(self, *, file: TextIO | None = None, stderr: bool = False) -> None:
		self._file = file
		self._stderr = stderr

	@property
	def stream(self) -> TextIO:
		if self._file is not None:
			return self._file
		return sys.stderr if self._stderr else sys.stdout

	def write(self, text: str) -> None:
		"""Write *text* verbatim; include the trailing newline yourself."""
		try:
			rich_console = get_rich_console(file=self._file, stderr=self._stderr)
		except EnvironmentError:
			print(text, end="", file=self.stream)
			return
		# Console.out would expand tabs and strip control codes.
		rich_console.file.write(text)
