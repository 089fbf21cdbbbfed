"""markupkit model layer -- public type re-exports."""

from markupkit.model.diagnostic import Diagnostic, Severity

__all__ = [
    "Severity",
    "Diagnostic",
]
