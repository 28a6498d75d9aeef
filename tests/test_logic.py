"""Tests for SymPy expressions and SOP text of a cover."""

from __future__ import annotations

import pytest
from sympy import And, Not, false, true

from kmap.logic import (
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


class TestTerms:
    def test_pattern_to_term(self):
        a, b, c = get_variables(3)
        assert pattern_to_term((0, None, 1), (a, b, c)) == And(Not(a), c)
        assert pattern_to_term((None, None, None), (a, b, c)) == true

    def test_empty_solution_is_false(self):
        assert solution_to_expression([], get_variables(2)) == false

    @pytest.mark.parametrize(
        "pattern, text",
        [((0, 1, None), "A'B"), ((None, None, None), "1"), ((1, 1, 1), "ABC")],
    )
    def test_term_text(self, pattern, text):
        assert term_text(pattern, ("A", "B", "C")) == text

    def test_cover_function_text(self):
        names = ("A", "B", "C")
        assert cover_function_text([], names) == "F(A,B,C) = 0"
        assert cover_function_text([(None, 0, 0), (1, 1, None)], names) == (
            "F(A,B,C) = B'C' + AB"
        )


class TestMintermHelpers:
    def test_truth_minterms(self):
        a, b, c = get_variables(3)
        assert truth_minterms(And(Not(a), c), (a, b, c)) == [1, 3]

    def test_minterms_to_expression(self):
        vars_tuple = get_variables(3)
        assert minterms_to_expression([], vars_tuple) == false
        expr = minterms_to_expression([2, 5], vars_tuple)
        assert truth_minterms(expr, vars_tuple) == [2, 5]

    def test_prime_format_constants(self):
        vars_tuple = get_variables(2)
        assert prime_format(false, vars_tuple) == "0"
        assert prime_format(true, vars_tuple) == "1"

    def test_simplify_from_minterms(self):
        vars_tuple = get_variables(3)
        _, text = simplify_from_minterms(vars_tuple, [0, 1, 2, 3])
        assert text == "A'"

    def test_validate_minterm_range(self):
        validate_minterm_range([0, 31], 5)
        with pytest.raises(ValueError, match="out of range"):
            validate_minterm_range([0, 32], 5)

    def test_get_variables(self):
        assert [str(v) for v in get_variables(4)] == ["A", "B", "C", "D"]
        with pytest.raises(ValueError):
            get_variables(0)
