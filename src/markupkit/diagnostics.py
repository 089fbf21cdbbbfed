"""Diagnostic reporter shared by the tokenizers and parsers.

Every lenient recovery branch reports through a :class:`Reporter`. The
reporter records the diagnostic, logs it, and in strict mode raises
:class:`~markupkit.errors.ParseError` for ERROR-severity findings.
"""

from __future__ import annotations

import logging

from markupkit.errors import ParseError
from markupkit.model.diagnostic import Diagnostic, Severity

__all__ = ["Reporter"]


class Reporter:
    """Collects diagnostics for a single source string."""

    def __init__(
        self,
        source: str,
        logger: logging.Logger | None = None,
        strict: bool = False,
    ) -> None:
        self.source = source
        self.strict = strict
        self.diagnostics: list[Diagnostic] = []
        self._log = logger or logging.getLogger("markupkit")

    def location(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of *offset* in the source."""
        offset = max(0, min(offset, len(self.source)))
        line = self.source.count("\n", 0, offset) + 1
        column = offset - (self.source.rfind("\n", 0, offset) + 1) + 1
        return line, column

    def report(
        self,
        code: str,
        severity: Severity,
        message: str,
        offset: int | None = None,
    ) -> Diagnostic:
        line = column = None
        if offset is not None:
            line, column = self.location(offset)
        diagnostic = Diagnostic(
            code=code,
            severity=severity,
            message=message,
            offset=offset,
            line=line,
            column=column,
        )
        self.diagnostics.append(diagnostic)

        if severity is Severity.INFO:
            self._log.debug("%s", diagnostic)
        else:
            self._log.info("%s", diagnostic)

        if self.strict and diagnostic.is_error:
            raise ParseError(message, line=line, column=column)
        return diagnostic

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]
