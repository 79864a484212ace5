"""Shared Pydantic models for the gridimport framework.

Contains the cell value variants (``BlankValue``, ``TextValue``,
``NumberValue``, ``LogicalValue``), positions (``Pos``, ``SheetPos``), the
rectangular value block ``CellValues``, the ``Sheet`` snapshot, and the
mutation commands (``SetCellValues``, ``AddSheet``, ``SetCellFormat``)
that importers return.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator, Sequence
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    model_validator,
)


# ---------------------------------------------------------------------------
# Cell Values
# ---------------------------------------------------------------------------


class BlankValue(BaseModel):
    """An empty cell."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["blank"] = "blank"


class TextValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str


class NumberValue(BaseModel):
    """A numeric cell.

    Stored as a ``Decimal`` so the value round-trips through its text form
    without binary floating point drift.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: Decimal


class LogicalValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["logical"] = "logical"
    value: bool


CellValue = Annotated[
    Union[BlankValue, TextValue, NumberValue, LogicalValue],
    Field(discriminator="kind"),
]

BLANK = BlankValue()


def is_blank(value: CellValue) -> bool:
    return value.kind == "blank"


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


class Pos(BaseModel):
    """An (x, y) coordinate in document space.  Coordinates are signed."""

    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0


class SheetPos(BaseModel):
    """A position that also carries the owning sheet's identity."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    sheet_id: str

    @classmethod
    def from_pos(cls, pos: Pos, sheet_id: str) -> SheetPos:
        return cls(x=pos.x, y=pos.y, sheet_id=sheet_id)


def new_sheet_id() -> str:
    """Return a fresh, unique sheet identifier."""
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Rectangular Value Block
# ---------------------------------------------------------------------------


class CellValues(BaseModel):
    """A dense ``w`` x ``h`` block of cell values stored row-major.

    The block size is fixed at construction.  Writes outside the declared
    bounds raise ``IndexError``: an out-of-range write is a programming
    error, never a recoverable condition.

    A block becomes read-only once a ``SetCellValues`` carries it; later
    ``set`` / ``set_column`` calls raise ``TypeError``.
    """

    w: int = Field(ge=0)
    h: int = Field(ge=0)
    values: list[CellValue]

    _sealed: bool = PrivateAttr(default=False)

    @model_validator(mode="after")
    def _check_size(self) -> CellValues:
        if len(self.values) != self.w * self.h:
            raise ValueError(
                f"CellValues of {self.w}x{self.h} needs {self.w * self.h} "
                f"values, got {len(self.values)}"
            )
        return self

    @classmethod
    def new(cls, w: int, h: int) -> CellValues:
        """Create a block with every cell set to Blank."""
        return cls(w=w, h=h, values=[BLANK] * (w * h))

    @classmethod
    def from_flat_array(
        cls, w: int, h: int, values: Sequence[CellValue]
    ) -> CellValues:
        """Create a block from a row-major sequence of ``w * h`` values."""
        return cls(w=w, h=h, values=list(values))

    @classmethod
    def from_column(cls, values: Sequence[CellValue]) -> CellValues:
        """Create a block one column wide."""
        return cls(w=1, h=len(values), values=list(values))

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[CellValue]]) -> CellValues:
        """Create a block from a list of equally tall columns."""
        h = len(columns[0]) if columns else 0
        block = cls.new(len(columns), h)
        for x, column in enumerate(columns):
            block.set_column(x, column)
        return block

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def _check_writable(self) -> None:
        if self._sealed:
            raise TypeError("CellValues block is read-only once carried by an operation")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.w and 0 <= y < self.h):
            raise IndexError(
                f"({x}, {y}) is outside a {self.w}x{self.h} CellValues block"
            )
        return y * self.w + x

    def get(self, x: int, y: int) -> CellValue | None:
        """Return the value at (x, y), or None when out of bounds."""
        if not (0 <= x < self.w and 0 <= y < self.h):
            return None
        return self.values[y * self.w + x]

    def set(self, x: int, y: int, value: CellValue) -> None:
        self._check_writable()
        self.values[self._index(x, y)] = value

    def set_column(self, x: int, values: Sequence[CellValue]) -> None:
        """Assign one full column."""
        self._check_writable()
        if len(values) != self.h:
            raise ValueError(
                f"column of height {len(values)} does not fit a block of height {self.h}"
            )
        for y, value in enumerate(values):
            self.values[self._index(x, y)] = value

    def rows(self) -> Iterator[list[CellValue]]:
        for y in range(self.h):
            yield self.values[y * self.w : (y + 1) * self.w]

    def columns(self) -> Iterator[list[CellValue]]:
        for x in range(self.w):
            yield self.values[x :: self.w]

    def __len__(self) -> int:
        return self.w * self.h


# ---------------------------------------------------------------------------
# Sheets
# ---------------------------------------------------------------------------


class SheetCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    value: CellValue


class Sheet(BaseModel):
    """A complete snapshot of a new sheet.

    Cells are stored sparsely; Blank cells are never kept.
    """

    id: str
    name: str
    order: str
    cells: list[SheetCell] = []

    _positions: dict[tuple[int, int], int] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._reindex()

    def _reindex(self) -> None:
        self._positions = {(c.x, c.y): i for i, c in enumerate(self.cells)}

    def set_cell_value(self, pos: Pos, value: CellValue) -> None:
        key = (pos.x, pos.y)
        if key in self._positions:
            self.cells = [c for c in self.cells if (c.x, c.y) != key]
            self._reindex()
        if not is_blank(value):
            self._positions[key] = len(self.cells)
            self.cells.append(SheetCell(x=pos.x, y=pos.y, value=value))

    def cell_value(self, pos: Pos) -> CellValue:
        index = self._positions.get((pos.x, pos.y))
        if index is None:
            return BLANK
        return self.cells[index].value

    def bounds(self) -> tuple[int, int, int, int] | None:
        """Return (min_x, min_y, max_x, max_y) of stored cells, or None."""
        if not self.cells:
            return None
        xs = [c.x for c in self.cells]
        ys = [c.y for c in self.cells]
        return min(xs), min(ys), max(xs), max(ys)


# ---------------------------------------------------------------------------
# Mutation Commands
# ---------------------------------------------------------------------------


class NumericFormatKind(str, Enum):
    CURRENCY = "CURRENCY"
    PERCENTAGE = "PERCENTAGE"


class NumericFormat(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: NumericFormatKind
    symbol: str | None = None


class SetCellValues(BaseModel):
    """Bulk write: block-local (c, r) lands at (anchor.x + c, anchor.y + r)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["set_cell_values"] = "set_cell_values"
    sheet_pos: SheetPos
    values: CellValues

    @model_validator(mode="after")
    def _seal_values(self) -> SetCellValues:
        self.values.seal()
        return self


class AddSheet(BaseModel):
    """Materialize a brand-new sheet in one atomic step."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["add_sheet"] = "add_sheet"
    sheet: Sheet


class SetCellFormat(BaseModel):
    """Auxiliary formatting command emitted alongside inferred values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["set_cell_format"] = "set_cell_format"
    sheet_pos: SheetPos
    numeric_format: NumericFormat


Operation = Annotated[
    Union[SetCellValues, AddSheet, SetCellFormat],
    Field(discriminator="kind"),
]

operations_adapter: TypeAdapter[list[Operation]] = TypeAdapter(list[Operation])
