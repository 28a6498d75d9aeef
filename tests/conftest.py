"""Shared fixtures for the K-map tests."""

from __future__ import annotations

import random

import pytest

from kmap.grid import CellValue, Coord, KMapGrid


def make_grid(nvars, ones=(), dontcares=()):
    """Grid with TRUE cells at ``ones`` and DONT_CARE cells at ``dontcares``.

    Cells are given as (w, h) or (w, h, d) tuples.
    """
    grid = KMapGrid(nvars, allow_dont_care=bool(dontcares))
    for cells, value in ((dontcares, CellValue.DONT_CARE), (ones, CellValue.TRUE)):
        for cell in cells:
            w, h, *rest = cell
            grid.set_cell(Coord(w, h, rest[0] if rest else 0), value)
    return grid


def random_grid(rng: random.Random, nvars: int, allow_dont_care: bool) -> KMapGrid:
    grid = KMapGrid(nvars, allow_dont_care=allow_dont_care)
    choices = [CellValue.FALSE, CellValue.TRUE]
    if allow_dont_care:
        choices.append(CellValue.DONT_CARE)
    for coord in grid.coords():
        grid.set_cell(coord, rng.choice(choices))
    return grid


@pytest.fixture
def rng():
    return random.Random(20170412)
