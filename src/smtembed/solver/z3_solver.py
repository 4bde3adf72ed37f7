"""
Z3 session implementing the primitive command layer.
"""
from fractions import Fraction
from typing import Any, Dict, List, Optional, Sequence
import logging
import re
import time
import z3

from ..config import SessionConfig
from ..errors import (
    ModelUnavailableError,
    ScopeError,
    SortMismatchError,
    SymbolRedeclaredError,
    UnknownSortError,
)
from ..ops import to_term
from ..translator import resolve_sort, is_uninterpreted, sort_to_smt2
from .result import SolverResult

logger = logging.getLogger(__name__)

_SIMPLE_SYMBOL = re.compile(r"^[A-Za-z~!@$%^&*_+=<>.?/\-][0-9A-Za-z~!@$%^&*_+=<>.?/\-]*$")


def symbol_to_smt2(name: str) -> str:
    """Quote a symbol with |...| unless it is a simple SMT-LIB symbol."""
    if _SIMPLE_SYMBOL.match(name):
        return name
    return f"|{name}|"


def declare_fun_to_smt2(name: str, arg_sorts: Sequence[z3.SortRef], result_sort: z3.SortRef) -> str:
    args = " ".join(sort_to_smt2(s) for s in arg_sorts)
    return f"(declare-fun {symbol_to_smt2(name)} ({args}) {sort_to_smt2(result_sort)})"


class _Scope:
    __slots__ = ("sorts", "funcs")

    def __init__(self):
        self.sorts: Dict[str, z3.SortRef] = {}
        self.funcs: Dict[str, z3.FuncDeclRef] = {}


class Z3Solver:
    """Z3 solver session.

    Wraps a ``z3.Solver`` and keeps the symbol table that SMT-LIB requires
    (every symbol declared once per live scope, sorts declared before use).
    Every command issued is recorded as SMT-LIB text in ``transcript``.
    """

    solver_name = "z3"

    def __init__(self, config: Optional[SessionConfig] = None):
        """Initialize Z3 solver instance.

        Args:
            config: Session settings; defaults to ``SessionConfig()``
        """
        self.config = config or SessionConfig()
        if self.config.logic:
            self.solver = z3.SolverFor(self.config.logic)
        else:
            self.solver = z3.Solver()
        self._scopes: List[_Scope] = [_Scope()]
        self._last_result: Optional[SolverResult] = None
        self.transcript: List[str] = []
        if self.config.logic:
            self._record(f"(set-logic {self.config.logic})")
        if self.config.timeout_ms is not None:
            self.set_option("timeout", self.config.timeout_ms)
        self.set_option("smt.macro_finder", self.config.macro_finder)
        logger.info(f"Created Z3 session: {self.config}")

    def _record(self, command: str) -> None:
        self.transcript.append(command)
        logger.debug(command)

    def _invalidate(self) -> None:
        self._last_result = None

    def lookup(self, name: str) -> Optional[z3.FuncDeclRef]:
        """Get the function declared under `name` in a live scope."""
        for scope in reversed(self._scopes):
            if name in scope.funcs:
                return scope.funcs[name]
        return None

    def lookup_sort(self, name: str) -> Optional[z3.SortRef]:
        """Get the uninterpreted sort declared under `name` in a live scope."""
        for scope in reversed(self._scopes):
            if name in scope.sorts:
                return scope.sorts[name]
        return None

    def declare_sort(self, name: str) -> z3.SortRef:
        """Declare an uninterpreted sort.

        Raises:
            SymbolRedeclaredError: If the sort is already declared
        """
        if self.lookup_sort(name) is not None:
            raise SymbolRedeclaredError(name, kind="sort")
        sort = z3.DeclareSort(name)
        self._scopes[-1].sorts[name] = sort
        self._record(f"(declare-sort {symbol_to_smt2(name)} 0)")
        return sort

    def declare_fun(self, name: str, arg_sorts: Sequence[Any], result_sort: Any) -> z3.FuncDeclRef:
        """Declare a function signature.

        Args:
            name: Function symbol
            arg_sorts: Argument sort tags, possibly empty
            result_sort: Result sort tag

        Returns:
            Z3 function declaration (arity 0 for constants)

        Raises:
            SymbolRedeclaredError: If `name` is already declared
            UnknownSortError: If an uninterpreted sort was never declared
        """
        domain = [resolve_sort(s) for s in arg_sorts]
        rng = resolve_sort(result_sort)

        for sort in [*domain, rng]:
            if is_uninterpreted(sort) and self.lookup_sort(sort.name()) is None:
                raise UnknownSortError(f"Sort '{sort.name()}' is not declared")
        if self.lookup(name) is not None:
            raise SymbolRedeclaredError(name)

        func = z3.Function(name, *domain, rng)
        self._scopes[-1].funcs[name] = func
        self._record(declare_fun_to_smt2(name, domain, rng))
        self._invalidate()
        return func

    def declare_const(self, name: str, sort: Any) -> z3.ExprRef:
        """Declare a constant and return it as a term."""
        return self.declare_fun(name, (), sort)()

    def assert_formula(self, formula: Any) -> None:
        """Add a Boolean formula to the solver.

        Raises:
            SortMismatchError: If the formula is not Boolean
        """
        term = to_term(formula)
        if not z3.is_bool(term):
            raise SortMismatchError(f"assert expects a Bool formula, got sort {term.sort()}")
        self.solver.add(term)
        self._record(f"(assert {term.sexpr()})")
        self._invalidate()

    def check_sat(self, *assumptions: Any) -> SolverResult:
        """Check satisfiability of the asserted formulas.

        Args:
            assumptions: Optional Boolean literals assumed for this check only

        Returns:
            SAT, UNSAT or UNKNOWN
        """
        if assumptions:
            terms = [to_term(a) for a in assumptions]
            self._record(f"(check-sat-assuming ({' '.join(t.sexpr() for t in terms)}))")
        else:
            terms = []
            self._record("(check-sat)")

        start_time = time.time()
        result = SolverResult.from_z3(self.solver.check(*terms))
        elapsed_ms = (time.time() - start_time) * 1000

        self._last_result = result
        logger.info(f"check-sat: {result} ({elapsed_ms:.2f}ms)")
        if result == SolverResult.UNKNOWN:
            logger.info(f"reason unknown: {self.solver.reason_unknown()}")
        return result

    def _require_model(self) -> z3.ModelRef:
        if self._last_result != SolverResult.SAT:
            raise ModelUnavailableError("No model: last check-sat was not sat")
        return self.solver.model()

    def get_model(self) -> Dict[str, Any]:
        """Extract the model from the last sat check.

        Returns:
            Dictionary mapping symbol names to their values; constants are
            converted to Python values, function interpretations to strings

        Raises:
            ModelUnavailableError: If the last check was not sat
        """
        model = self._require_model()
        self._record("(get-model)")
        result = {}

        for decl in model:
            name = decl.name()
            value = model[decl]

            if decl.arity() > 0:
                result[name] = str(value)
            elif z3.is_int_value(value):
                result[name] = value.as_long()
            elif z3.is_bv_value(value):
                result[name] = value.as_long()
            elif z3.is_rational_value(value):
                result[name] = Fraction(value.numerator_as_long(), value.denominator_as_long())
            elif z3.is_true(value):
                result[name] = True
            elif z3.is_false(value):
                result[name] = False
            else:
                result[name] = str(value)

        return result

    def eval(self, term: Any, model_completion: bool = True) -> z3.ExprRef:
        """Evaluate a term in the model of the last sat check."""
        model = self._require_model()
        t = to_term(term)
        self._record(f"(eval {t.sexpr()})")
        return model.eval(t, model_completion=model_completion)

    def set_option(self, name: str, value: Any) -> None:
        """Set a solver parameter (``set-option``)."""
        self.solver.set(name, value)
        shown = str(value).lower() if isinstance(value, bool) else value
        self._record(f"(set-option :{name} {shown})")

    def push(self, n: int = 1) -> None:
        """Push `n` assertion scopes."""
        for _ in range(n):
            self.solver.push()
            self._scopes.append(_Scope())
        self._record(f"(push {n})")
        self._invalidate()

    def pop(self, n: int = 1) -> None:
        """Pop `n` assertion scopes, dropping their declarations.

        Raises:
            ScopeError: If `n` is negative or fewer than `n` scopes are open
        """
        if n < 0 or n > len(self._scopes) - 1:
            raise ScopeError(f"Cannot pop {n} scope(s), {len(self._scopes) - 1} open")
        if n:
            self.solver.pop(n)
            del self._scopes[-n:]
        self._record(f"(pop {n})")
        self._invalidate()

    @property
    def num_scopes(self) -> int:
        return len(self._scopes) - 1

    def assertions(self) -> List[z3.BoolRef]:
        return list(self.solver.assertions())

    def reset(self) -> None:
        """Reset solver state."""
        self.solver.reset()
        self._scopes = [_Scope()]
        self._invalidate()
        self._record("(reset)")

    def to_smt2(self) -> str:
        """Return the commands issued so far as an SMT-LIB script."""
        return "\n".join(self.transcript)
