"""
Abstract interface for the primitive command layer.
"""
from typing import Protocol, Any, Dict, Sequence
import z3

from .result import SolverResult


class SolverBackend(Protocol):
    """Protocol for a solver session that accepts SMT-LIB commands.

    Declarations and assertions are appended to the session in call order;
    a function must be declared before any assertion that mentions it.
    """

    def declare_sort(self, name: str) -> z3.SortRef:
        """Declare an uninterpreted sort (``declare-sort``)."""
        ...

    def declare_fun(self, name: str, arg_sorts: Sequence[Any], result_sort: Any) -> z3.FuncDeclRef:
        """Declare a function signature (``declare-fun``).

        Args:
            name: Function symbol
            arg_sorts: Argument sort tags, possibly empty
            result_sort: Result sort tag

        Returns:
            The declared function symbol
        """
        ...

    def assert_formula(self, formula: Any) -> None:
        """Add a Boolean formula to the assertion set (``assert``)."""
        ...

    def check_sat(self, *assumptions: Any) -> SolverResult:
        """Check satisfiability of the current assertions."""
        ...

    def get_model(self) -> Dict[str, Any]:
        """Get the model found by the last sat check."""
        ...

    def eval(self, term: Any, model_completion: bool = True) -> z3.ExprRef:
        """Evaluate a term in the current model."""
        ...

    def push(self, n: int = 1) -> None:
        """Push assertion scopes."""
        ...

    def pop(self, n: int = 1) -> None:
        """Pop assertion scopes."""
        ...

    def reset(self) -> None:
        """Clear all declarations and assertions."""
        ...

    def set_option(self, name: str, value: Any) -> None:
        """Set a solver option (``set-option``)."""
        ...
