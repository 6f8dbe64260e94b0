"""
Exceptions raised by the printer driver.

Hierarchy:
    PrinterError (base)
    ├── PrinterConnectionError
    ├── PrinterNotInitializedError
    └── PrinterWriteError

Parameter errors (negative distances, out-of-range margins) are reported
with the built-in ValueError before anything is written.

Example:
    >>> from matrixprinter.exceptions import PrinterError
    >>> try:
    ...     printer.line_feed()
    ... except PrinterError as e:
    ...     logger.error(f"Print job failed: {e}")
    ...     print(f"Target: {e.target}")
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "PrinterError",
    "PrinterConnectionError",
    "PrinterNotInitializedError",
    "PrinterWriteError",
]


class PrinterError(Exception):
    """
    Base exception for all driver errors.

    Attributes:
        message: Human readable error message
        target: Printer target the error refers to (optional)
        context: Extra debugging context (optional)
    """

    def __init__(
        self,
        message: str,
        *,
        target: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.target = target
        self.context = context or {}

    def __str__(self) -> str:
        """
        Formatted message with target and context.

        Example:
            >>> str(PrinterWriteError("Write failed", target="/dev/lp0"))
            'PrinterWriteError: Write failed [target=/dev/lp0]'
        """
        parts = [self.__class__.__name__, ": ", self.message]

        if self.target:
            parts.append(f" [target={self.target}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"target={self.target!r}, "
            f"context={self.context!r})"
        )


class PrinterConnectionError(PrinterError):
    """The output sink could not be opened."""

    pass


class PrinterNotInitializedError(PrinterError):
    """A command was issued while the output sink is not open."""

    pass


class PrinterWriteError(PrinterError):
    """
    The output sink failed while command bytes were written.

    The original OSError is chained as __cause__.
    """

    pass
