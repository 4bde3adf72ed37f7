"""
Check-sat result types.
"""
from enum import Enum
import z3


class SolverResult(Enum):
    """Result from SMT solver check."""
    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"

    @classmethod
    def from_z3(cls, result: z3.CheckSatResult) -> "SolverResult":
        """Map a Z3 check result onto the SMT-LIB response."""
        if result == z3.sat:
            return cls.SAT
        if result == z3.unsat:
            return cls.UNSAT
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value
