"""Primitive command layer: SMT-LIB commands against a Z3 session."""

from .base import SolverBackend
from .result import SolverResult
from .z3_solver import Z3Solver, symbol_to_smt2, declare_fun_to_smt2

__all__ = [
    "SolverBackend",
    "SolverResult",
    "Z3Solver",
    "symbol_to_smt2",
    "declare_fun_to_smt2",
]
