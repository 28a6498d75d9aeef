"""Karnaugh map grid model: layouts, cell values and minterm addressing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List, NamedTuple, Sequence, Tuple

import numpy as np

from .logic import validate_minterm_range

# Position of each K-map row/column in Gray order (00, 01, 11, 10)
GRAY: Sequence[int] = (0, 1, 3, 2)
VAR_NAMES: Sequence[str] = ("A", "B", "C", "D", "E")


class CellValue(IntEnum):
    FALSE = 0
    TRUE = 1
    DONT_CARE = 2


class Coord(NamedTuple):
    """One cell of the map: column ``w``, row ``h`` and level ``d``."""

    w: int
    h: int
    d: int


@dataclass(frozen=True)
class MapLayout:
    """Shape of a K-map and how its variables are split between the axes."""

    levels: int
    width: int
    height: int
    nvar_x: int
    nvar_y: int


MAP_LAYOUTS: Dict[int, MapLayout] = {
    2: MapLayout(levels=1, width=2, height=2, nvar_x=1, nvar_y=1),
    3: MapLayout(levels=1, width=4, height=2, nvar_x=2, nvar_y=1),
    4: MapLayout(levels=1, width=4, height=4, nvar_x=2, nvar_y=2),
    5: MapLayout(levels=2, width=4, height=4, nvar_x=2, nvar_y=2),
}


def map_layout(nvars: int) -> MapLayout:
    """Return the layout for a K-map of ``nvars`` variables."""
    try:
        return MAP_LAYOUTS[nvars]
    except KeyError:
        raise ValueError("K-map available for 2-5 variables.") from None


def _bin(value: int, bits: int) -> str:
    return format(value, f"0{bits}b") if bits else ""


class KMapGrid:
    """The boolean / don't-care matrix of a K-map.

    Cells live in a NumPy array indexed ``[d, w, h]``. The only mutations are
    :meth:`reset`, :meth:`set_dont_care_allowed`, :meth:`toggle_cell` and
    :meth:`set_cell`.
    """

    def __init__(self, nvars: int = 4, allow_dont_care: bool = False):
        self.allow_dont_care = allow_dont_care
        self.reset(nvars)

    @classmethod
    def from_minterms(
        cls, nvars: int, minterms: Iterable[int], dontcares: Iterable[int] = ()
    ) -> "KMapGrid":
        """Build a grid whose TRUE cells are ``minterms``."""
        mins = list(minterms)
        dcs = list(dontcares)
        validate_minterm_range(mins, nvars)
        validate_minterm_range(dcs, nvars)
        grid = cls(nvars, allow_dont_care=bool(dcs))
        for idx in dcs:
            grid.set_cell(grid.coord_of_minterm(idx), CellValue.DONT_CARE)
        for idx in mins:
            grid.set_cell(grid.coord_of_minterm(idx), CellValue.TRUE)
        return grid

    # ------------------------------------------------------------------ layout

    @property
    def width(self) -> int:
        return self.layout.width

    @property
    def height(self) -> int:
        return self.layout.height

    @property
    def levels(self) -> int:
        return self.layout.levels

    @property
    def nvar_x(self) -> int:
        return self.layout.nvar_x

    @property
    def nvar_y(self) -> int:
        return self.layout.nvar_y

    def variable_names(self) -> Tuple[str, ...]:
        return tuple(VAR_NAMES[: self.nvars])

    # --------------------------------------------------------------- mutation

    def reset(self, nvars: int) -> None:
        """Reallocate the grid for ``nvars`` variables, all cells FALSE."""
        self.layout = map_layout(nvars)
        self.nvars = nvars
        self.cells = np.zeros(
            (self.levels, self.width, self.height), dtype=np.int8
        )

    def set_dont_care_allowed(self, allowed: bool) -> None:
        self.allow_dont_care = allowed
        if not allowed:
            self.cells[self.cells == CellValue.DONT_CARE] = CellValue.FALSE

    def toggle_cell(self, coord: Coord) -> CellValue:
        """Advance a cell through FALSE -> TRUE -> DONT_CARE -> FALSE."""
        current = self.value(coord)
        if current == CellValue.FALSE:
            new = CellValue.TRUE
        elif current == CellValue.TRUE and self.allow_dont_care:
            new = CellValue.DONT_CARE
        else:
            new = CellValue.FALSE
        self.cells[coord.d, coord.w, coord.h] = new
        return new

    def set_cell(self, coord: Coord, value: CellValue) -> None:
        self._check(coord)
        value = CellValue(value)
        if value == CellValue.DONT_CARE and not self.allow_dont_care:
            raise ValueError("Don't care values are disabled for this map.")
        self.cells[coord.d, coord.w, coord.h] = value

    # ------------------------------------------------------------------ reads

    def _check(self, coord: Coord) -> None:
        if not (
            0 <= coord.d < self.levels
            and 0 <= coord.w < self.width
            and 0 <= coord.h < self.height
        ):
            raise IndexError(f"Cell {tuple(coord)} is outside the {self.nvars}-variable map.")

    def value(self, coord: Coord) -> CellValue:
        self._check(coord)
        return CellValue(int(self.cells[coord.d, coord.w, coord.h]))

    def coords(self) -> Iterator[Coord]:
        """Every cell, level by level, in raster order."""
        for d in range(self.levels):
            for h in range(self.height):
                for w in range(self.width):
                    yield Coord(w, h, d)

    def true_cells(self) -> List[Coord]:
        return [c for c in self.coords() if self.value(c) == CellValue.TRUE]

    def cell_bits(self, coord: Coord) -> str:
        """Bit string of the minterm at ``coord``, first variable first."""
        return (
            _bin(GRAY[coord.d], self.levels - 1)
            + _bin(GRAY[coord.w], self.nvar_x)
            + _bin(GRAY[coord.h], self.nvar_y)
        )

    def minterm(self, coord: Coord) -> int:
        self._check(coord)
        return int(self.cell_bits(coord), 2)

    def coord_of_minterm(self, idx: int) -> Coord:
        """Translate a minterm index to its cell."""
        y_bits = self.nvar_y
        x_bits = self.nvar_x
        h = GRAY.index(idx & ((1 << y_bits) - 1))
        w = GRAY.index((idx >> y_bits) & ((1 << x_bits) - 1))
        d = (idx >> (x_bits + y_bits)) & ((1 << (self.levels - 1)) - 1)
        return Coord(w, h, d)

    def minterms(self, value: CellValue = CellValue.TRUE) -> List[int]:
        return sorted(self.minterm(c) for c in self.coords() if self.value(c) == value)

    def copy(self) -> "KMapGrid":
        other = KMapGrid(self.nvars, self.allow_dont_care)
        other.cells = self.cells.copy()
        return other

    def __repr__(self) -> str:
        return f"KMapGrid(nvars={self.nvars}, allow_dont_care={self.allow_dont_care})"


__all__ = [
    "CellValue",
    "Coord",
    "GRAY",
    "KMapGrid",
    "MAP_LAYOUTS",
    "MapLayout",
    "VAR_NAMES",
    "map_layout",
]
