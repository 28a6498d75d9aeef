"""Convenience exports for the K-Map pseudo-ESPRESSO minimizer."""

from .logic import (
    cover_function_text,
    get_variables,
    minterms_to_expression,
    pattern_to_term,
    prime_format,
    simplify_from_minterms,
    solution_to_expression,
    term_text,
    truth_minterms,
    validate_minterm_range,
)
from .grid import CellValue, Coord, KMapGrid, MapLayout, map_layout
from .kmap_engine import (
    NCube,
    accepts_cube,
    cover_of,
    cube_fragments,
    filter_maximal,
    is_contained_in,
    literal_pattern,
    make_cube,
)
from .espresso import Solution, espresso_expand, espresso_solve, irredundant_cover
from .latex import generate_latex_code, generate_latex_document, latex_function

__all__ = [
    "CellValue",
    "Coord",
    "KMapGrid",
    "MapLayout",
    "NCube",
    "Solution",
    "accepts_cube",
    "cover_function_text",
    "cover_of",
    "cube_fragments",
    "espresso_expand",
    "espresso_solve",
    "filter_maximal",
    "generate_latex_code",
    "generate_latex_document",
    "get_variables",
    "irredundant_cover",
    "is_contained_in",
    "latex_function",
    "literal_pattern",
    "make_cube",
    "map_layout",
    "minterms_to_expression",
    "pattern_to_term",
    "prime_format",
    "simplify_from_minterms",
    "solution_to_expression",
    "term_text",
    "truth_minterms",
    "validate_minterm_range",
]
