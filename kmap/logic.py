"""Boolean logic utilities for the K-Map cover."""

from __future__ import annotations

import itertools
from typing import Iterable, Optional, Sequence, Tuple

from sympy import And, Not, Or, Symbol, false, simplify_logic, symbols, true
from sympy.logic.boolalg import SOPform


def get_variables(n: int):
    """Return SymPy symbols (A, B, C, ...) for the requested variable count."""
    if n < 1:
        raise ValueError("Number of variables must be positive.")
    return symbols(" ".join(chr(65 + i) for i in range(n)), seq=True)


def pattern_to_term(pattern: Sequence[Optional[int]], vars_tuple):
    """Build the product term of a literal pattern (None means don't care)."""
    literals = [
        var if bit == 1 else Not(var)
        for var, bit in zip(vars_tuple, pattern)
        if bit is not None
    ]
    return And(*literals)


def solution_to_expression(patterns: Iterable[Sequence[Optional[int]]], vars_tuple):
    """OR together the product terms of every pattern (``false`` if none)."""
    return Or(*(pattern_to_term(p, vars_tuple) for p in patterns))


def term_text(pattern: Sequence[Optional[int]], names: Sequence[str]) -> str:
    """Render a pattern in prime notation, e.g. ``A'BD``; ``1`` if nothing is fixed."""
    pieces = []
    for name, bit in zip(names, pattern):
        if bit == 0:
            pieces.append(f"{name}'")
        elif bit == 1:
            pieces.append(name)
    return "".join(pieces) or "1"


def cover_function_text(
    patterns: Sequence[Sequence[Optional[int]]], names: Sequence[str]
) -> str:
    """Return ``F(A,B,...) = term + term`` for the cover (``0`` when empty)."""
    head = f"F({','.join(names)}) = "
    if not patterns:
        return head + "0"
    return head + " + ".join(term_text(p, names) for p in patterns)


def truth_minterms(expr, vars_tuple) -> Sequence[int]:
    """Return indices whose assignments make the expression evaluate to True."""
    mins = []
    for idx, bits in enumerate(itertools.product([0, 1], repeat=len(vars_tuple))):
        subs = {var: bool(bit) for var, bit in zip(vars_tuple, bits)}
        if bool(expr.xreplace(subs)):
            mins.append(idx)
    return mins


def minterms_to_expression(minterms: Iterable[int], vars_tuple):
    """Build a SymPy expression representing the provided minterms."""
    mins = list(minterms)
    if not mins:
        return false

    n = len(vars_tuple)
    clauses = []
    for value in mins:
        literals = []
        for idx, var in enumerate(vars_tuple):
            bit = (value >> (n - 1 - idx)) & 1
            literals.append(var if bit else Not(var))
        clauses.append(And(*literals))
    return Or(*clauses)


def prime_format(expr, var_order: Tuple[Symbol, ...]) -> str:
    """Format a DNF expression into SOP text following var_order."""
    if expr in (False, false):
        return "0"
    if expr in (True, true):
        return "1"

    def lit_to_str(lit):
        if isinstance(lit, Not) and isinstance(lit.args[0], Symbol):
            return f"{lit.args[0]}'"
        return str(lit)

    terms = list(expr.args) if isinstance(expr, Or) else [expr]
    result = []
    for term in terms:
        literals = list(term.args) if isinstance(term, And) else [term]
        ordered = []
        for var in var_order:
            for lit in literals:
                if lit == var or (isinstance(lit, Not) and lit.args and lit.args[0] == var):
                    ordered.append(lit)
                    break
        result.append("".join(lit_to_str(item) for item in ordered) or "1")
    return " + ".join(result)


def validate_minterm_range(minterms: Iterable[int], n: int) -> None:
    """Ensure all minterms are within the range for the current variable count."""
    max_valid = (1 << n) - 1
    invalid = [m for m in minterms if m < 0 or m > max_valid]
    if invalid:
        raise ValueError(
            f"Minterms out of range for {n} variables (0-{max_valid}): {sorted(set(invalid))}"
        )


def simplify_from_minterms(vars_tuple, minterms, dontcares=None):
    """Return SymPy's own minimal SOP for the minterms, and its text."""
    expr = SOPform(vars_tuple, list(minterms), list(dontcares or []))
    simplified = simplify_logic(expr, form="dnf")
    return simplified, prime_format(simplified, vars_tuple)


__all__ = [
    "cover_function_text",
    "get_variables",
    "minterms_to_expression",
    "pattern_to_term",
    "prime_format",
    "simplify_from_minterms",
    "solution_to_expression",
    "term_text",
    "truth_minterms",
    "validate_minterm_range",
]
