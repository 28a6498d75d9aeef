"""Karnaugh map n-cube construction and containment helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .grid import CellValue, Coord, KMapGrid

Shape = Tuple[int, int, int]
Pattern = Tuple[Optional[int], ...]


@dataclass(frozen=True)
class NCube:
    """An axis-aligned box of cells on the K-map (one product term).

    Two cubes are equal when they cover the same cells, whatever their
    anchor or shape.
    """

    anchor: Coord = field(compare=False)
    shape: Shape = field(compare=False)
    cells: Tuple[Coord, ...] = field(compare=False)
    cellset: FrozenSet[Coord] = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "cellset", frozenset(self.cells))

    def __len__(self) -> int:
        return len(self.cellset)

    def __contains__(self, coord) -> bool:
        return coord in self.cellset

    def __iter__(self):
        return iter(self.cells)


def _box(grid: KMapGrid, anchor: Coord, shape: Shape):
    # Levels, then columns, then rows; w and h wrap around the map.
    size_w, size_h, size_d = shape
    for d in range(anchor.d, anchor.d + size_d):
        for w in range(anchor.w, anchor.w + size_w):
            for h in range(anchor.h, anchor.h + size_h):
                yield Coord(w % grid.width, h % grid.height, d)


def accepts_cube(grid: KMapGrid, anchor: Coord, shape: Shape) -> bool:
    """Return True if the box holds no FALSE cell and at least one TRUE cell."""
    has_one = False
    for coord in _box(grid, anchor, shape):
        value = grid.value(coord)
        if value == CellValue.FALSE:
            return False
        has_one = has_one or value == CellValue.TRUE
    return has_one


def make_cube(grid: KMapGrid, anchor: Coord, shape: Shape) -> NCube:
    """Materialize the box as an :class:`NCube`, anchor cell first."""
    return NCube(anchor=anchor, shape=shape, cells=tuple(_box(grid, anchor, shape)))


def is_contained_in(inner: NCube, outer: NCube) -> bool:
    """Return True if every cell of ``inner`` is also in ``outer``."""
    return inner.cellset <= outer.cellset


def filter_maximal(cubes: Sequence[NCube]) -> List[NCube]:
    """Drop every cube wholly covered by another cube of the list.

    A cube is dropped when a strictly larger cube contains it, or when an
    earlier cube of the same size does. Equal cubes therefore keep their
    first occurrence. Order is preserved.
    """
    kept: List[NCube] = []
    for i, cube in enumerate(cubes):
        contained = False
        for j, other in enumerate(cubes):
            if i != j and len(cube) < len(other):
                contained = is_contained_in(cube, other)
            elif j < i and len(cube) == len(other):
                contained = is_contained_in(cube, other)
            if contained:
                break
        if not contained:
            kept.append(cube)
    return kept


def cover_of(cubes: Sequence[NCube]) -> Tuple[Coord, ...]:
    """Cells covered by ``cubes``, deduplicated in order of first appearance."""
    return tuple(dict.fromkeys(coord for cube in cubes for coord in cube.cells))


def literal_pattern(grid: KMapGrid, cube: NCube) -> Pattern:
    """Return the literal of each variable over the cube.

    Each entry is 0 or 1 when the variable keeps that value on every cell of
    the cube, and None when it changes inside the cube.
    """
    cells = iter(cube.cells)
    ref: List[Optional[int]] = [int(bit) for bit in grid.cell_bits(next(cells))]
    for coord in cells:
        for k, bit in enumerate(grid.cell_bits(coord)):
            if ref[k] != int(bit):
                ref[k] = None
    return tuple(ref)


def _runs(indices) -> List[Tuple[int, int]]:
    """Split sorted indices into (start, length) runs of consecutive values."""
    runs: List[Tuple[int, int]] = []
    for idx in sorted(set(indices)):
        if runs and runs[-1][0] + runs[-1][1] == idx:
            runs[-1] = (runs[-1][0], runs[-1][1] + 1)
        else:
            runs.append((idx, 1))
    return runs


def cube_fragments(cube: NCube) -> List[Tuple[int, int, int, int, int]]:
    """Return the drawable rectangles of a cube as (d, w0, cols, h0, rows).

    A cube that wraps around an edge of the map is split into one rectangle
    per contiguous part.
    """
    fragments = []
    for d in sorted({c.d for c in cube.cells}):
        level = [c for c in cube.cells if c.d == d]
        for w0, cols in _runs(c.w for c in level):
            for h0, rows in _runs(c.h for c in level):
                fragments.append((d, w0, cols, h0, rows))
    return fragments


__all__ = [
    "NCube",
    "Pattern",
    "Shape",
    "accepts_cube",
    "cover_of",
    "cube_fragments",
    "filter_maximal",
    "is_contained_in",
    "literal_pattern",
    "make_cube",
]
