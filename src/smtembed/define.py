"""
Function definitions (SMT-LIB ``define-fun``) compiled into primitive commands.

A definition is never inlined at its call sites. It is axiomatized once:

    (define-fun max ((a Int) (b Int)) Int (ite (> a b) a b))

becomes

    (declare-fun max (Int Int) Int)
    (assert (forall ((a Int) (b Int)) (= (max a b) (ite (> a b) a b))))

so formulas that use ``max`` mention it only by application, and a chain of
definitions built on one another stays linear in size. Z3's macro finder
recognizes the quantified equation and handles it as a macro. A definition
with no parameters becomes a plain equality with no quantifier.

Expansion is pure: it reads no session state, and expanding the same
definition twice yields identical commands. Malformed parameter lists raise
DefinitionSyntaxError before any session is touched. Sort errors inside the
body are left to Z3.
"""
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple, Union
import logging
import z3

from .context import resolve_session
from .errors import DefinitionSyntaxError, SortError
from .ops import to_term
from .solver import SolverBackend, declare_fun_to_smt2, symbol_to_smt2
from .translator import SortTranslator, sort_to_smt2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parameter:
    """A formal parameter: name and resolved sort."""
    name: str
    sort: z3.SortRef

    def const(self) -> z3.ExprRef:
        """The bound variable standing for this parameter."""
        return z3.Const(self.name, self.sort)

    def to_smt2(self) -> str:
        return f"({symbol_to_smt2(self.name)} {sort_to_smt2(self.sort)})"


@dataclass(frozen=True)
class EmptyParams:
    """Parameter list of a constant definition."""

    @property
    def params(self) -> Tuple[Parameter, ...]:
        return ()


@dataclass(frozen=True)
class NonEmptyParams:
    """Parameter list with at least one entry, in declared order."""
    params: Tuple[Parameter, ...]


ParamShape = Union[EmptyParams, NonEmptyParams]


@dataclass(frozen=True)
class Definition:
    """A ``define-fun`` form before expansion.

    Attributes:
        name: Function symbol
        params: Sequence of (name, sort-tag) pairs, possibly empty
        result_sort: Sort tag of the result
        body: Term, Python literal, or callable taking the bound variables
    """
    name: str
    params: Sequence[Any]
    result_sort: Any
    body: Any


@dataclass(frozen=True)
class DeclareFun:
    """A pending ``declare-fun`` command."""
    name: str
    arg_sorts: Tuple[z3.SortRef, ...]
    result_sort: z3.SortRef

    def to_smt2(self) -> str:
        return declare_fun_to_smt2(self.name, self.arg_sorts, self.result_sort)

    def apply(self, session: SolverBackend) -> z3.FuncDeclRef:
        return session.declare_fun(self.name, self.arg_sorts, self.result_sort)


@dataclass(frozen=True, eq=False)
class AssertFormula:
    """A pending ``assert`` command."""
    formula: z3.BoolRef

    def __eq__(self, other):
        if not isinstance(other, AssertFormula):
            return NotImplemented
        return self.formula.eq(other.formula)

    def __hash__(self):
        return self.formula.hash()

    def to_smt2(self) -> str:
        return f"(assert {self.formula.sexpr()})"

    def apply(self, session: SolverBackend) -> None:
        session.assert_formula(self.formula)


class Expansion(NamedTuple):
    """The two commands a definition expands to, declaration first."""
    declaration: DeclareFun
    assertion: AssertFormula

    @property
    def arity(self) -> int:
        return len(self.declaration.arg_sorts)

    def to_smt2(self) -> str:
        return "\n".join(cmd.to_smt2() for cmd in self)

    def apply(self, session: SolverBackend) -> z3.FuncDeclRef:
        """Issue both commands on `session`.

        If the declaration succeeds and the assertion fails, the declaration
        stays in the session; nothing is rolled back.
        """
        func = self.declaration.apply(session)
        self.assertion.apply(session)
        return func


def _match_param(index: int, entry: Any, translator: SortTranslator) -> Parameter:
    if isinstance(entry, Parameter):
        return entry
    if z3.is_const(entry) and entry.decl().kind() == z3.Z3_OP_UNINTERPRETED:
        return Parameter(entry.decl().name(), entry.sort())
    if isinstance(entry, (str, bytes)) or not isinstance(entry, (tuple, list)) or len(entry) != 2:
        raise DefinitionSyntaxError(
            f"Parameter {index} must be a (name, sort) pair, got {entry!r}")

    name, tag = entry
    if not isinstance(name, str) or not name:
        raise DefinitionSyntaxError(f"Parameter {index} has invalid name {name!r}")
    try:
        sort = translator.resolve(tag)
    except SortError as e:
        raise DefinitionSyntaxError(f"Parameter '{name}': {e}") from e
    return Parameter(name, sort)


def classify_params(raw: Any, translator: Optional[SortTranslator] = None) -> ParamShape:
    """Match a parameter list against the empty and non-empty shapes.

    Args:
        raw: Sequence of (name, sort-tag) pairs, Parameters or Z3 constants
        translator: Sort translator; defaults to a fresh one

    Returns:
        EmptyParams or NonEmptyParams

    Raises:
        DefinitionSyntaxError: If the list or any entry is malformed, or a
            name repeats
    """
    if not isinstance(raw, (tuple, list)):
        raise DefinitionSyntaxError(
            f"Parameter list must be a list or tuple, got {type(raw).__name__}")
    if len(raw) == 0:
        return EmptyParams()

    translator = translator or SortTranslator()
    params = []
    seen = set()
    for i, entry in enumerate(raw):
        param = _match_param(i, entry, translator)
        if param.name in seen:
            raise DefinitionSyntaxError(f"Duplicate parameter name '{param.name}'")
        seen.add(param.name)
        params.append(param)
    return NonEmptyParams(tuple(params))


def _body_term(body: Any, bound: Sequence[z3.ExprRef], result_sort: z3.SortRef) -> z3.ExprRef:
    if callable(body) and not z3.is_expr(body):
        body = body(*bound)
    return to_term(body, result_sort)


def expand_definition(definition: Definition,
                      translator: Optional[SortTranslator] = None) -> Expansion:
    """Expand a definition into its declaration and defining assertion.

    Args:
        definition: The ``define-fun`` form
        translator: Sort translator; defaults to a fresh one

    Returns:
        Expansion(declaration, assertion)

    Raises:
        DefinitionSyntaxError: If the form is malformed
    """
    name = definition.name
    if not isinstance(name, str) or not name:
        raise DefinitionSyntaxError(f"Definition name must be a non-empty string, got {name!r}")

    translator = translator or SortTranslator()
    shape = classify_params(definition.params, translator)
    try:
        result_sort = translator.resolve(definition.result_sort)
    except SortError as e:
        raise DefinitionSyntaxError(f"Result sort of '{name}': {e}") from e

    if isinstance(shape, EmptyParams):
        func = z3.Function(name, result_sort)
        body = _body_term(definition.body, (), result_sort)
        formula = func() == body
    elif isinstance(shape, NonEmptyParams):
        arg_sorts = tuple(p.sort for p in shape.params)
        func = z3.Function(name, *arg_sorts, result_sort)
        bound = [p.const() for p in shape.params]
        body = _body_term(definition.body, bound, result_sort)
        formula = z3.ForAll(bound, func(*bound) == body)
    else:  # pragma: no cover
        raise DefinitionSyntaxError(f"Unhandled parameter shape {shape!r}")

    params_text = " ".join(p.to_smt2() for p in shape.params)
    logger.debug(f"expanded define-fun {symbol_to_smt2(name)} ({params_text})")
    return Expansion(
        DeclareFun(name, tuple(p.sort for p in shape.params), result_sort),
        AssertFormula(formula),
    )


def define_fun(name: str, params: Sequence[Any], result_sort: Any, body: Any, *,
               session: Optional[SolverBackend] = None) -> Union[z3.FuncDeclRef, z3.ExprRef]:
    """Define a function on the given or ambient session.

    Example:
        >>> max_ = define_fun("max", [("a", INT), ("b", INT)], INT,
        ...                   lambda a, b: ite_s(gt_s(a, b), a, b))
        >>> assert_(eq_s(max_(3, 7), 7))

    Args:
        name: Function symbol
        params: (name, sort-tag) pairs, possibly empty
        result_sort: Sort tag of the result
        body: Term, literal, or callable taking the bound variables
        session: Target session; defaults to the ambient one

    Returns:
        The declared function for one or more parameters, the constant term
        for none

    Raises:
        DefinitionSyntaxError: Before any command is issued, if malformed
        SolverCommandError: From the session, unchanged
    """
    expansion = expand_definition(Definition(name, params, result_sort, body))
    func = expansion.apply(resolve_session(session))
    return func if expansion.arity else func()


def define_const(name: str, sort: Any, value: Any, *,
                 session: Optional[SolverBackend] = None) -> z3.ExprRef:
    """SMT-LIB ``define-const``: a definition without parameters."""
    return define_fun(name, (), sort, value, session=session)


def term_size(term: z3.ExprRef) -> int:
    """Number of nodes in `term` counted as a tree (shared subterms repeat)."""
    sizes: Dict[int, int] = {}

    def size(t: z3.ExprRef) -> int:
        key = t.get_id()
        if key not in sizes:
            sizes[key] = 1 + sum(size(c) for c in t.children())
        return sizes[key]

    return size(term)
