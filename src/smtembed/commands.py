"""
SMT-LIB commands as Python functions.

Each function forwards to the given session, or to the ambient one, without
altering arguments or results. Names follow SMT-LIB with ``-`` replaced by
``_``; ``assert`` and ``eval`` become ``assert_`` and ``eval_``.
"""
from typing import Any, Dict, Optional, Sequence
import z3

from .context import resolve_session
from .solver import SolverBackend, SolverResult


def declare_sort(name: str, *, session: Optional[SolverBackend] = None) -> z3.SortRef:
    return resolve_session(session).declare_sort(name)


def declare_fun(name: str, arg_sorts: Sequence[Any], result_sort: Any, *,
                session: Optional[SolverBackend] = None) -> z3.FuncDeclRef:
    return resolve_session(session).declare_fun(name, arg_sorts, result_sort)


def declare_const(name: str, sort: Any, *, session: Optional[SolverBackend] = None) -> z3.ExprRef:
    """Declare a nullary function and return it as a constant term."""
    return resolve_session(session).declare_fun(name, (), sort)()


def assert_(formula: Any, *, session: Optional[SolverBackend] = None) -> None:
    resolve_session(session).assert_formula(formula)


def check_sat(*assumptions: Any, session: Optional[SolverBackend] = None) -> SolverResult:
    return resolve_session(session).check_sat(*assumptions)


def get_model(*, session: Optional[SolverBackend] = None) -> Dict[str, Any]:
    return resolve_session(session).get_model()


def eval_(term: Any, model_completion: bool = True, *,
          session: Optional[SolverBackend] = None) -> z3.ExprRef:
    return resolve_session(session).eval(term, model_completion)


def push(n: int = 1, *, session: Optional[SolverBackend] = None) -> None:
    resolve_session(session).push(n)


def pop(n: int = 1, *, session: Optional[SolverBackend] = None) -> None:
    resolve_session(session).pop(n)


def reset(*, session: Optional[SolverBackend] = None) -> None:
    resolve_session(session).reset()


def set_option(name: str, value: Any, *, session: Optional[SolverBackend] = None) -> None:
    resolve_session(session).set_option(name, value)
