"""
Side-channel diagnostics for grid computations.

Computations never raise for recoverable problems (incomparable units,
pixel rounding risk, unknown directions). They record a Diagnostic on the
collector passed in and carry on with a best-effort value; the caller gets
the collected records back alongside the primary result.

Every recorded diagnostic is also logged at WARNING level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class DiagnosticCode(str, Enum):
    """Stable identifiers for the recoverable problems a computation reports."""

    INCOMPATIBLE_UNITS = "incompatible-units"
    ROUNDING_RISK = "rounding-risk"
    INVALID_DIRECTION = "invalid-direction"
    MISSING_GRID_NUMBER = "missing-grid-number"
    GUTTER_OVERFLOW = "gutter-overflow"


@dataclass(frozen=True)
class Diagnostic:
    """A single non-fatal problem found during a computation."""

    code: DiagnosticCode
    message: str
    severity: str = "warning"


class Diagnostics:
    """
    Ordered collector of Diagnostic records for one computation call.

    A fresh collector is created per entry-point call; nothing is shared
    between calls.
    """

    def __init__(self) -> None:
        self._records: list[Diagnostic] = []

    def warn(self, code: DiagnosticCode, message: str) -> None:
        """Record a warning and log it."""
        self._records.append(Diagnostic(code=code, message=message))
        logger.warning("%s: %s", code.value, message)

    @property
    def records(self) -> tuple[Diagnostic, ...]:
        return tuple(self._records)

    def codes(self) -> list[DiagnosticCode]:
        return [d.code for d in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)
