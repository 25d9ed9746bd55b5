"""
Error reporting for the Lox pipeline.

The reporter is the one place diagnostics are written out. It is created by
the driver and handed to the scanner, parser and interpreter, which replaces
a process-wide "had error" flag with explicit state.

Author: xwest
"""

import sys
from typing import List, Optional, TextIO, TYPE_CHECKING

from .lexer.errors import Diagnostic

if TYPE_CHECKING:
    from .interpreter.errors import LoxRuntimeError


class ErrorReporter:
    """
    Collects and prints diagnostics.

    Static (lexical and syntax) errors print as ``[line N] Error: message``,
    runtime errors as ``message`` followed by ``[line N]``.
    """

    def __init__(self, stream: Optional[TextIO] = None, verbose: bool = False):
        """
        Args:
            stream: Where diagnostics are written (stderr when None)
            verbose: Append error codes and help text to each diagnostic
        """
        self._stream = stream
        self.verbose = verbose
        self.had_error = False
        self.had_runtime_error = False
        self.diagnostics: List[Diagnostic] = []

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stderr is honored
        return self._stream if self._stream is not None else sys.stderr

    def report(self, diagnostic: Diagnostic):
        """Print a diagnostic and update the error flags."""
        self.diagnostics.append(diagnostic)
        if diagnostic.phase == "runtime":
            self.had_runtime_error = True
        else:
            self.had_error = True
        print(diagnostic.render(self.verbose), file=self.stream)

    def error(self, line: int, message: str, where: str = ""):
        """Report a lexical or syntax error at a line."""
        self.report(Diagnostic(
            message=message,
            line=line,
            severity="error",
            phase="parser",
            where=where
        ))

    def runtime_error(self, error: "LoxRuntimeError"):
        """Report a runtime failure using the line of its operator token."""
        self.report(error.diagnostic)

    @property
    def has_errors(self) -> bool:
        return self.had_error or self.had_runtime_error

    def reset(self):
        """Clear the error flags (the REPL does this after every line)."""
        self.had_error = False
        self.had_runtime_error = False
