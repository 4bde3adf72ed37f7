"""
SMT-LIB built-in operators under distinguishing names.

Every primitive carries an ``_s`` suffix so that SMT-LIB names such as
``and``, ``not`` or ``abs`` do not collide with Python keywords and
builtins. Arguments may be Z3 terms or Python literals; literals are
coerced with :func:`to_term`.
"""
from fractions import Fraction
from typing import Any, Callable, Iterable, List, Optional, Sequence
import z3

from .errors import ArityError
from .translator import resolve_sort


def to_term(value: Any, sort: Optional[z3.SortRef] = None) -> z3.ExprRef:
    """Coerce a Python literal to a Z3 term.

    Args:
        value: Z3 expression or bool/int/float/Fraction/str literal
        sort: Optional target sort used to pick the literal's sort

    Returns:
        Z3 expression
    """
    if z3.is_expr(value):
        return value
    if isinstance(value, bool):
        return z3.BoolVal(value)
    if isinstance(value, int):
        if sort is not None and z3.is_bv_sort(sort):
            return z3.BitVecVal(value, sort.size())
        if sort is not None and sort.kind() == z3.Z3_REAL_SORT:
            return z3.RealVal(value)
        return z3.IntVal(value)
    if isinstance(value, (float, Fraction)):
        return z3.RealVal(value)
    if isinstance(value, str):
        return z3.StringVal(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to an SMT term")


def _terms(args: Iterable[Any]) -> List[z3.ExprRef]:
    return [to_term(a) for a in args]


def _require(op: str, args: Sequence[Any], minimum: int):
    if len(args) < minimum:
        raise ArityError(f"{op} expects at least {minimum} argument(s), got {len(args)}")


def _chain(op: str, cmp: Callable[[Any, Any], z3.BoolRef], args: Sequence[Any]) -> z3.BoolRef:
    _require(op, args, 2)
    terms = _terms(args)
    links = [cmp(a, b) for a, b in zip(terms, terms[1:])]
    return links[0] if len(links) == 1 else z3.And(*links)


# Boolean

def true_s() -> z3.BoolRef:
    return z3.BoolVal(True)


def false_s() -> z3.BoolRef:
    return z3.BoolVal(False)


def and_s(*args) -> z3.BoolRef:
    """SMT-LIB ``and``; with no arguments, ``true``."""
    return z3.And(*_terms(args)) if args else true_s()


def or_s(*args) -> z3.BoolRef:
    """SMT-LIB ``or``; with no arguments, ``false``."""
    return z3.Or(*_terms(args)) if args else false_s()


def not_s(arg) -> z3.BoolRef:
    return z3.Not(to_term(arg))


def implies_s(*args) -> z3.BoolRef:
    """SMT-LIB ``=>``, right-associative."""
    _require("=>", args, 2)
    terms = _terms(args)
    result = terms[-1]
    for t in reversed(terms[:-1]):
        result = z3.Implies(t, result)
    return result


def xor_s(*args) -> z3.BoolRef:
    """SMT-LIB ``xor``, left-associative."""
    _require("xor", args, 2)
    terms = _terms(args)
    result = terms[0]
    for t in terms[1:]:
        result = z3.Xor(result, t)
    return result


# Core

def eq_s(*args) -> z3.BoolRef:
    """SMT-LIB ``=``, chainable."""
    return _chain("=", lambda a, b: a == b, args)


def distinct_s(*args) -> z3.BoolRef:
    _require("distinct", args, 2)
    return z3.Distinct(*_terms(args))


def ite_s(cond, then, otherwise) -> z3.ExprRef:
    return z3.If(to_term(cond), to_term(then), to_term(otherwise))


# Arithmetic

def add_s(*args) -> z3.ArithRef:
    _require("+", args, 2)
    terms = _terms(args)
    return z3.Sum(*terms)


def sub_s(*args) -> z3.ArithRef:
    """SMT-LIB ``-``; negation when given one argument."""
    _require("-", args, 1)
    terms = _terms(args)
    if len(terms) == 1:
        return -terms[0]
    result = terms[0]
    for t in terms[1:]:
        result = result - t
    return result


def mul_s(*args) -> z3.ArithRef:
    _require("*", args, 2)
    return z3.Product(*_terms(args))


def div_s(*args) -> z3.ArithRef:
    """``div`` on Int operands, ``/`` on Real operands; left-associative."""
    _require("div", args, 2)
    terms = _terms(args)
    result = terms[0]
    for t in terms[1:]:
        result = result / t
    return result


def mod_s(a, b) -> z3.ArithRef:
    return to_term(a) % to_term(b)


def abs_s(arg) -> z3.ArithRef:
    return z3.Abs(to_term(arg))


def to_real_s(arg) -> z3.ArithRef:
    return z3.ToReal(to_term(arg))


def to_int_s(arg) -> z3.ArithRef:
    return z3.ToInt(to_term(arg))


# Comparison

def lt_s(*args) -> z3.BoolRef:
    return _chain("<", lambda a, b: a < b, args)


def le_s(*args) -> z3.BoolRef:
    return _chain("<=", lambda a, b: a <= b, args)


def gt_s(*args) -> z3.BoolRef:
    return _chain(">", lambda a, b: a > b, args)


def ge_s(*args) -> z3.BoolRef:
    return _chain(">=", lambda a, b: a >= b, args)


# Quantifiers and application

def bound_vars(bound: Iterable[Any]) -> List[z3.ExprRef]:
    """Turn (name, sort-tag) pairs into Z3 constants; constants pass through."""
    result = []
    for b in bound:
        if z3.is_const(b):
            result.append(b)
        else:
            name, tag = b
            result.append(z3.Const(name, resolve_sort(tag)))
    return result


def forall_s(bound: Sequence[Any], body) -> z3.BoolRef:
    """SMT-LIB ``forall`` over (name, sort-tag) pairs or constants."""
    _require("forall", bound, 1)
    return z3.ForAll(bound_vars(bound), to_term(body))


def exists_s(bound: Sequence[Any], body) -> z3.BoolRef:
    """SMT-LIB ``exists`` over (name, sort-tag) pairs or constants."""
    _require("exists", bound, 1)
    return z3.Exists(bound_vars(bound), to_term(body))


def app_s(func: z3.FuncDeclRef, *args) -> z3.ExprRef:
    """Apply a declared function symbol to arguments."""
    if len(args) != func.arity():
        raise ArityError(f"{func.name()} expects {func.arity()} argument(s), got {len(args)}")
    return func(*[to_term(a, func.domain(i)) for i, a in enumerate(args)])
