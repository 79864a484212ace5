"""Collaborator protocols for the gridimport importers.

Defines the structural-subtyping interfaces importers call out to.  All
protocols are ``@runtime_checkable`` so callers can optionally verify
conformance with ``isinstance`` checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gridimport_core.models import CellValue, Operation, SheetPos


@runtime_checkable
class ProgressObserver(Protocol):
    """Sink notified synchronously after each emitted mutation command."""

    def on_progress(
        self,
        file_name: str,
        current: int,
        total: int,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> None:
        """Report *current* of *total* rows processed for the import at (x, y)."""
        ...


@runtime_checkable
class CellValueInferrer(Protocol):
    """Interface for the string-to-value collaborator used by text importers."""

    def infer(
        self, sheet_pos: SheetPos, text: str
    ) -> tuple[list[Operation], CellValue]:
        """Return the typed value for *text* plus any auxiliary commands."""
        ...


class NullProgressObserver:
    """Progress observer used when no host UI is attached."""

    def on_progress(
        self,
        file_name: str,
        current: int,
        total: int,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> None:
        return None
