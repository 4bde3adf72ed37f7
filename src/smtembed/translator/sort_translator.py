"""
Sort translator from symbolic type tags to Z3 sorts.
"""
from typing import Any, Dict, Hashable
import z3

from ..errors import SortError

INT = "Int"
BOOL = "Bool"
REAL = "Real"
STRING = "String"


class SortTranslator:
    """Translates sort tags to Z3 sorts.

    Mapping:
        "Int" / "Bool" / "Real" / "String" -> built-in sorts
        ("BitVec", N) -> BitVecSort(N)
        ("Array", index, element) -> ArraySort(index, element)
        any other name -> uninterpreted sort of that name
        z3.SortRef -> itself
    """

    _BUILTIN = {
        INT: z3.IntSort,
        BOOL: z3.BoolSort,
        REAL: z3.RealSort,
        STRING: z3.StringSort,
    }

    def __init__(self):
        """Initialize sort translator."""
        self._sort_cache: Dict[Hashable, z3.SortRef] = {}

    def resolve(self, tag: Any) -> z3.SortRef:
        """Resolve a sort tag.

        Args:
            tag: Sort tag (see class docstring)

        Returns:
            Z3 sort

        Raises:
            SortError: If the tag has no recognized shape
        """
        if isinstance(tag, z3.SortRef):
            return tag

        try:
            cached = self._sort_cache.get(tag)
        except TypeError:
            raise SortError(f"Unhashable sort tag: {tag!r}") from None
        if cached is not None:
            return cached

        sort = self._translate(tag)
        self._sort_cache[tag] = sort
        return sort

    def _translate(self, tag: Any) -> z3.SortRef:
        if isinstance(tag, str):
            name = tag.strip()
            if not name:
                raise SortError("Empty sort name")
            if name in self._BUILTIN:
                return self._BUILTIN[name]()
            return z3.DeclareSort(name)

        if isinstance(tag, tuple) and tag:
            head = tag[0]
            if head == "BitVec" and len(tag) == 2:
                width = tag[1]
                if not isinstance(width, int) or isinstance(width, bool) or width <= 0:
                    raise SortError(f"Invalid bit-vector width: {width!r}")
                return z3.BitVecSort(width)
            if head == "Array" and len(tag) == 3:
                return z3.ArraySort(self.resolve(tag[1]), self.resolve(tag[2]))

        raise SortError(f"Unrecognized sort tag: {tag!r}")


_default_translator = SortTranslator()


def resolve_sort(tag: Any) -> z3.SortRef:
    """Resolve a sort tag with the shared translator."""
    return _default_translator.resolve(tag)


def is_uninterpreted(sort: z3.SortRef) -> bool:
    """Check if a sort is a user-declared uninterpreted sort."""
    return sort.kind() == z3.Z3_UNINTERPRETED_SORT


def sort_to_smt2(sort: z3.SortRef) -> str:
    """Render a sort in SMT-LIB syntax."""
    return sort.sexpr()
