"""
Pytest configuration and fixtures for smtembed tests.
"""
import sys
from pathlib import Path

import pytest
import z3

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from smtembed import SessionConfig, Z3Solver  # noqa: E402


@pytest.fixture
def session():
    """A fresh Z3 session that ignores SMTEMBED_* environment settings."""
    return Z3Solver(SessionConfig())


class RecordingSession:
    """Session stand-in that records primitive calls instead of solving."""

    def __init__(self, fail_assert=None):
        self.calls = []
        self.fail_assert = fail_assert

    def declare_fun(self, name, arg_sorts, result_sort):
        self.calls.append(("declare-fun", name, tuple(arg_sorts), result_sort))
        return z3.Function(name, *arg_sorts, result_sort)

    def assert_formula(self, formula):
        self.calls.append(("assert", formula))
        if self.fail_assert is not None:
            raise self.fail_assert


@pytest.fixture
def recording_session():
    return RecordingSession()
