"""LaTeX export of a K-map and its cover, for the ``askmaps`` package."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .espresso import Solution
from .grid import GRAY, CellValue, Coord, KMapGrid
from .kmap_engine import cube_fragments

CUBE_COLORS: Sequence[str] = (
    "red", "green", "blue", "yellow", "cyan", "magenta", "darkred", "darkgreen",
    "darkblue", "gray", "orange", "fuschia", "azur", "purple", "aqua", "lime",
)

ASKMAP_COMMANDS = {2: "ii", 3: "iii", 4: "iv", 5: "v"}

CELL_SYMBOLS = {CellValue.FALSE: "0", CellValue.TRUE: "1", CellValue.DONT_CARE: "-"}

LATEX_PREAMBLE = r"""\documentclass[a4paper,10pt]{ltxdoc}
\usepackage[a4paper]{geometry}

\usepackage[scaled=0.92]{helvet}
\usepackage{sansmath}
\usepackage{color}
\usepackage{float}
\usepackage{listings}
\usepackage{array}

\usepackage{askmaps}

\definecolor{red}{rgb}{1,0,0}
\definecolor{green}{rgb}{0,1,0}
\definecolor{blue}{rgb}{0,0,1}
\definecolor{darkred}{rgb}{0.5,0,0}
\definecolor{darkgreen}{rgb}{0,0.5,0}
\definecolor{darkblue}{rgb}{0,0,0.5}
\definecolor{yellow}{rgb}{1,1,0}
\definecolor{cyan}{rgb}{0,1,1}
\definecolor{magenta}{rgb}{1,0,1}
\definecolor{gray}{rgb}{0.5,0.5,0.5}
\definecolor{orange}{rgb}{1,0.5,0}
\definecolor{aqua}{rgb}{0,1,0.5}
\definecolor{purple}{rgb}{0.5,0,1}
\definecolor{fuschia}{rgb}{1,0,0.5}
\definecolor{lime}{rgb}{0.5,1,0}
\definecolor{azur}{rgb}{0,0.5,1}
"""


def latex_term(pattern: Sequence[Optional[int]], names: Sequence[str]) -> str:
    pieces = []
    for name, bit in zip(names, pattern):
        if bit == 0:
            pieces.append(r"\overline{" + name + "}")
        elif bit == 1:
            pieces.append(name)
    return "".join(pieces) or "1"


def latex_function(grid: KMapGrid, solution: Solution) -> str:
    """Return the cover function, e.g. ``F(A,B,C)=\\overline{A}B+C``."""
    names = grid.variable_names()
    text = f"F({','.join(names)})="
    if not solution.cubes:
        return text + "0"
    return text + "+".join(latex_term(p, names) for p in solution.patterns(grid))


def latex_cubes(grid: KMapGrid, solution: Solution) -> str:
    """Return the ``\\put`` commands drawing every cube as dashed boxes.

    Levels are drawn side by side, four columns apart. Cubes that wrap
    around an edge get one box per fragment.
    """
    lines: List[str] = []
    for i, cube in enumerate(solution.cubes):
        color = CUBE_COLORS[i % len(CUBE_COLORS)]
        for d, w0, cols, h0, rows in cube_fragments(cube):
            x = 4 * d + w0
            y = grid.height - (h0 + rows)
            lines.append(
                rf"\color{{{color}}}\put({x},{y}.1)"
                rf"{{\dashbox{{0.2}}({cols - 1}.8,{rows - 1}.8){{}}}}"
            )
    return "\n" + "".join(line + "\n" for line in lines)


def latex_cell_content(grid: KMapGrid) -> str:
    """Cell symbols in minterm order (level, column, row in binary order)."""
    symbols = []
    for d in range(grid.levels):
        for w in range(grid.width):
            for h in range(grid.height):
                coord = Coord(GRAY[w], GRAY[h], GRAY[d])
                symbols.append(CELL_SYMBOLS[grid.value(coord)])
    return "".join(symbols)


def generate_latex_code(grid: KMapGrid, solution: Solution) -> str:
    """Return the ``\\askmap`` snippet for the map, its function and cubes."""
    code = "{\\fontfamily{phv}\\selectfont\\sansmath\n"
    code += "\\askmap" + ASKMAP_COMMANDS[grid.nvars]
    code += "{$" + latex_function(grid, solution) + "$}"
    code += "{" + "".join(grid.variable_names()) + "}{}"
    code += "{" + latex_cell_content(grid) + "}"
    code += "{" + latex_cubes(grid, solution) + "}}\n\n"
    return code


def generate_latex_document(grid: KMapGrid, solution: Solution) -> str:
    """Wrap :func:`generate_latex_code` into a standalone document."""
    return (
        LATEX_PREAMBLE
        + "\n\\begin{document}\n\n"
        + generate_latex_code(grid, solution)
        + "\\end{document}\n"
    )


__all__ = [
    "ASKMAP_COMMANDS",
    "CUBE_COLORS",
    "LATEX_PREAMBLE",
    "generate_latex_code",
    "generate_latex_document",
    "latex_cell_content",
    "latex_cubes",
    "latex_function",
    "latex_term",
]
