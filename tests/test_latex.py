"""Tests for the askmaps LaTeX export."""

from __future__ import annotations

from kmap.espresso import espresso_solve
from kmap.grid import KMapGrid
from kmap.latex import (
    LATEX_PREAMBLE,
    generate_latex_code,
    generate_latex_document,
    latex_cell_content,
    latex_cubes,
    latex_function,
)
from tests.conftest import make_grid


class TestFunction:
    def test_empty(self):
        grid = KMapGrid(2)
        assert latex_function(grid, espresso_solve(grid)) == "F(A,B)=0"

    def test_single_minterm(self):
        grid = make_grid(3, ones=[(0, 0)])
        assert latex_function(grid, espresso_solve(grid)) == (
            r"F(A,B,C)=\overline{A}\overline{B}\overline{C}"
        )

    def test_two_terms(self):
        grid = make_grid(3, ones=[(0, 0), (1, 0), (1, 1), (2, 1)])
        assert latex_function(grid, espresso_solve(grid)) == (
            r"F(A,B,C)=\overline{A}\overline{C}+BC"
        )


class TestCubes:
    def test_wrapped_pair(self):
        grid = make_grid(3, ones=[(3, 0), (0, 0)])
        assert latex_cubes(grid, espresso_solve(grid)) == (
            "\n"
            r"\color{red}\put(0,1.1){\dashbox{0.2}(0.8,0.8){}}" "\n"
            r"\color{red}\put(3,1.1){\dashbox{0.2}(0.8,0.8){}}" "\n"
        )

    def test_second_level_offset(self):
        grid = make_grid(5, ones=[(1, 2, 1), (2, 2, 1)])
        assert latex_cubes(grid, espresso_solve(grid)) == (
            "\n" r"\color{red}\put(5,1.1){\dashbox{0.2}(1.8,0.8){}}" "\n"
        )

    def test_no_cubes(self):
        grid = KMapGrid(4)
        assert latex_cubes(grid, espresso_solve(grid)) == "\n"


class TestDocument:
    def test_cell_content_in_minterm_order(self):
        grid = KMapGrid.from_minterms(3, [4], dontcares=[1])
        assert latex_cell_content(grid) == "0-001000"

    def test_full_two_variable_map(self):
        grid = make_grid(2, ones=[(0, 0), (1, 0), (0, 1), (1, 1)])
        code = generate_latex_code(grid, espresso_solve(grid))
        assert code == (
            "{\\fontfamily{phv}\\selectfont\\sansmath\n"
            "\\askmapii{$F(A,B)=1$}{AB}{}{1111}"
            "{\n\\color{red}\\put(0,0.1){\\dashbox{0.2}(1.8,1.8){}}\n}}\n\n"
        )

    def test_five_variable_command(self):
        grid = KMapGrid(5)
        code = generate_latex_code(grid, espresso_solve(grid))
        assert code.startswith("{\\fontfamily{phv}\\selectfont\\sansmath\n\\askmapv{$F(A,B,C,D,E)=0$}")
        assert "{" + "0" * 32 + "}" in code

    def test_document(self):
        grid = KMapGrid(4)
        doc = generate_latex_document(grid, espresso_solve(grid))
        assert doc.startswith(LATEX_PREAMBLE)
        assert "\\askmapiv" in doc
        assert doc.rstrip().endswith("\\end{document}")
