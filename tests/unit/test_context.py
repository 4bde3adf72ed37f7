"""
Tests for the ambient session and the SMT-LIB command functions.
"""
import pytest
from smtembed import (
    INT,
    SolverResult,
    Z3Solver,
    assert_,
    check_sat,
    current_session,
    declare_const,
    declare_fun,
    declare_sort,
    eval_,
    get_model,
    gt_s,
    lt_s,
    new_session,
    pop,
    push,
    reset,
    set_option,
    with_session,
)
from smtembed.errors import ConfigError, NoActiveSessionError


def test_no_ambient_session():
    with pytest.raises(NoActiveSessionError):
        current_session()
    with pytest.raises(NoActiveSessionError):
        check_sat()


def test_with_session_installs_and_restores(session):
    with with_session(session) as s:
        assert s is session
        assert current_session() is session

        with with_session() as inner:
            assert current_session() is inner
            assert inner is not session

        assert current_session() is session

    with pytest.raises(NoActiveSessionError):
        current_session()


def test_with_session_restores_on_error(session):
    with pytest.raises(RuntimeError):
        with with_session(session):
            raise RuntimeError("boom")

    with pytest.raises(NoActiveSessionError):
        current_session()


def test_commands_use_ambient_session():
    with with_session(macro_finder=True) as s:
        x = declare_const("x", INT)
        assert_(gt_s(x, 3))
        assert_(lt_s(x, 5))

        assert check_sat() == SolverResult.SAT
        assert get_model()["x"] == 4
        assert eval_(x).as_long() == 4

        push()
        assert_(lt_s(x, 0))
        assert check_sat() == SolverResult.UNSAT
        pop()

        assert check_sat() == SolverResult.SAT
        assert "(declare-fun x () Int)" in s.transcript


def test_commands_with_explicit_session(session):
    declare_sort("U", session=session)
    f = declare_fun("f", ["U"], INT, session=session)
    set_option("timeout", 100, session=session)
    reset(session=session)

    assert f.arity() == 1
    assert session.transcript[-1] == "(reset)"
    assert session.lookup("f") is None


def test_new_session_reads_env(monkeypatch):
    monkeypatch.setenv("SMTEMBED_TIMEOUT_MS", "750")

    session = new_session()
    assert isinstance(session, Z3Solver)
    assert session.config.timeout_ms == 750

    session = new_session(timeout_ms=10)
    assert session.config.timeout_ms == 10


def test_with_session_rejects_overrides_for_existing_session(session):
    with pytest.raises(ConfigError):
        with with_session(session, timeout_ms=10):
            pass

    with pytest.raises(NoActiveSessionError):
        current_session()
