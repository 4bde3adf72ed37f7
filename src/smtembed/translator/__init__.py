"""
Translation from sort tags to Z3 sorts.
"""

from .sort_translator import (
    SortTranslator,
    INT,
    BOOL,
    REAL,
    STRING,
    resolve_sort,
    is_uninterpreted,
    sort_to_smt2,
)

__all__ = [
    "SortTranslator",
    "INT",
    "BOOL",
    "REAL",
    "STRING",
    "resolve_sort",
    "is_uninterpreted",
    "sort_to_smt2",
]
