"""
SMT-LIB v2 commands and expressions embedded in Python over Z3.

SMT-LIB names map onto Python names mechanically: commands swap ``-`` for
``_`` (``declare-fun`` -> ``declare_fun``, ``assert`` -> ``assert_``) and
built-in operators take an ``_s`` suffix (``=`` -> ``eq_s``, ``ite`` ->
``ite_s``).
"""

__version__ = "0.1.0"

from .errors import (
    SmtEmbedError,
    ConfigError,
    DefinitionSyntaxError,
    SortError,
    ArityError,
    NoActiveSessionError,
    SolverCommandError,
    SymbolRedeclaredError,
    UnknownSortError,
    SortMismatchError,
    ScopeError,
    ModelUnavailableError,
)
from .config import SessionConfig
from .translator import SortTranslator, INT, BOOL, REAL, STRING
from .solver import SolverBackend, SolverResult, Z3Solver
from .context import new_session, with_session, current_session
from .commands import (
    declare_sort,
    declare_fun,
    declare_const,
    assert_,
    check_sat,
    get_model,
    eval_,
    push,
    pop,
    reset,
    set_option,
)
from .ops import (
    to_term,
    true_s,
    false_s,
    and_s,
    or_s,
    not_s,
    implies_s,
    xor_s,
    eq_s,
    distinct_s,
    ite_s,
    add_s,
    sub_s,
    mul_s,
    div_s,
    mod_s,
    abs_s,
    to_real_s,
    to_int_s,
    lt_s,
    le_s,
    gt_s,
    ge_s,
    forall_s,
    exists_s,
    app_s,
)
from .define import (
    Definition,
    Expansion,
    expand_definition,
    define_fun,
    define_const,
    term_size,
)

__all__ = [
    "SmtEmbedError",
    "ConfigError",
    "DefinitionSyntaxError",
    "SortError",
    "ArityError",
    "NoActiveSessionError",
    "SolverCommandError",
    "SymbolRedeclaredError",
    "UnknownSortError",
    "SortMismatchError",
    "ScopeError",
    "ModelUnavailableError",
    "SessionConfig",
    "SortTranslator",
    "INT",
    "BOOL",
    "REAL",
    "STRING",
    "SolverBackend",
    "SolverResult",
    "Z3Solver",
    "new_session",
    "with_session",
    "current_session",
    "declare_sort",
    "declare_fun",
    "declare_const",
    "assert_",
    "check_sat",
    "get_model",
    "eval_",
    "push",
    "pop",
    "reset",
    "set_option",
    "to_term",
    "true_s",
    "false_s",
    "and_s",
    "or_s",
    "not_s",
    "implies_s",
    "xor_s",
    "eq_s",
    "distinct_s",
    "ite_s",
    "add_s",
    "sub_s",
    "mul_s",
    "div_s",
    "mod_s",
    "abs_s",
    "to_real_s",
    "to_int_s",
    "lt_s",
    "le_s",
    "gt_s",
    "ge_s",
    "forall_s",
    "exists_s",
    "app_s",
    "Definition",
    "Expansion",
    "expand_definition",
    "define_fun",
    "define_const",
    "term_size",
]
