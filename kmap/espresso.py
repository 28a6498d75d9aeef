"""Pseudo-ESPRESSO minimization of a K-map.

The cover is built in two steps:

* *expand*: every cell is used as the anchor of a fixed catalogue of box
  shapes (width-wise, height-wise and square). Accepted boxes are filtered
  per anchor, then over the whole candidate list, so that no candidate is
  contained in another.
* *irredundant cover*: candidates are removed one by one, lowest index first,
  while removing them leaves the required cells covered. Passes repeat until
  one removes nothing.

The result is irredundant, not guaranteed minimum. When several covers of the
same size exist, the one kept depends on candidate order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .grid import Coord, KMapGrid
from .kmap_engine import (
    NCube,
    Pattern,
    Shape,
    accepts_cube,
    cover_of,
    filter_maximal,
    literal_pattern,
    make_cube,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """Result of one :func:`espresso_solve` call."""

    cubes: Tuple[NCube, ...]
    cover: Tuple[Coord, ...]

    def __len__(self) -> int:
        return len(self.cubes)

    def patterns(self, grid: KMapGrid) -> List[Pattern]:
        return [literal_pattern(grid, cube) for cube in self.cubes]


def _shape_stages(
    grid: KMapGrid, anchor: Coord, depth: int
) -> List[List[Shape]]:
    """Shapes tried from ``anchor``, grouped by the filter checkpoint after them."""
    w, h = anchor.w, anchor.h
    full_width = grid.width == 4 and w == 0
    if depth == 1:
        full_height = grid.height == 4 and h == 0
    else:
        # Two-level cubes reuse the width test for the full-height shapes.
        full_height = grid.width == 4 and w == 0

    widthwise = [(1, 1, depth), (2, 1, depth)]
    if full_width:
        widthwise += [(4, 1, depth), (4, 2, depth)]

    heightwise = [(1, 2, depth)]
    if full_height:
        heightwise += [(1, 4, depth), (2, 4, depth)]

    square = [(2, 2, depth)]
    if w == 0 and h == 0 and grid.width == 4 and grid.height == 4:
        square.append((4, 4, depth))

    return [widthwise, heightwise, square]


def _expand_anchor(grid: KMapGrid, anchor: Coord, depth: int) -> List[NCube]:
    cube_set: List[NCube] = []
    for shapes in _shape_stages(grid, anchor, depth):
        for shape in shapes:
            if accepts_cube(grid, anchor, shape):
                cube_set.append(make_cube(grid, anchor, shape))
        cube_set = filter_maximal(cube_set)
    return cube_set


def _sweep(grid: KMapGrid, d: int, depth: int) -> List[NCube]:
    cubes: List[NCube] = []
    for h in range(grid.height):
        for w in range(grid.width):
            cubes.extend(_expand_anchor(grid, Coord(w, h, d), depth))
    return cubes


def espresso_expand(grid: KMapGrid) -> List[NCube]:
    """Return the maximal candidate cubes of ``grid``."""
    candidates: List[NCube] = []
    for d in range(grid.levels):
        candidates.extend(_sweep(grid, d, 1))
        if d == 0 and grid.levels == 2:
            candidates.extend(_sweep(grid, d, 2))
    log.debug("expand: %d raw candidates", len(candidates))
    candidates = filter_maximal(candidates)
    log.debug("expand: %d maximal candidates", len(candidates))
    return candidates


def irredundant_cover(
    grid: KMapGrid, cubes: Sequence[NCube]
) -> Tuple[List[NCube], Tuple[Coord, ...]]:
    """Remove redundant cubes until none can be dropped.

    A cube is redundant when the cover without it still holds every cell of
    the current cover or, with don't cares enabled, every TRUE cell. The
    index moves on after each test, so a cube that slides into the freed
    slot is only retested on the next pass.
    """
    current = list(cubes)
    cover = cover_of(current)
    ones = set(grid.true_cells())
    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        i = 0
        while i < len(current):
            trial = current[:i] + current[i + 1:]
            trial_cover = cover_of(trial)
            covered = set(trial_cover)
            if covered.issuperset(cover) or (
                grid.allow_dont_care and covered.issuperset(ones)
            ):
                current, cover = trial, trial_cover
                changed = True
            i += 1
    log.debug("irredundant cover: %d cubes after %d passes", len(current), passes)
    return current, cover


def espresso_solve(grid: KMapGrid) -> Solution:
    """Compute an irredundant cover of ``grid`` from scratch."""
    candidates = espresso_expand(grid)
    cubes, cover = irredundant_cover(grid, candidates)
    return Solution(cubes=tuple(cubes), cover=tuple(cover))


__all__ = [
    "Solution",
    "espresso_expand",
    "espresso_solve",
    "irredundant_cover",
]
