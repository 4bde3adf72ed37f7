"""
Ambient solver session.

Commands that are not handed an explicit session run against the session
installed by the innermost ``with_session`` block. The ambient session is
held in a ContextVar, so threads and asyncio tasks each see their own; two
threads sharing one session object must serialize access themselves.
"""
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .config import SessionConfig
from .errors import ConfigError, NoActiveSessionError
from .solver import SolverBackend, Z3Solver

_current: ContextVar[Optional[SolverBackend]] = ContextVar("smtembed_session", default=None)


def new_session(config: Optional[SessionConfig] = None, **overrides) -> Z3Solver:
    """Create a Z3 session.

    Args:
        config: Base configuration; defaults to ``SessionConfig.from_env()``
        overrides: Individual SessionConfig fields to replace
    """
    cfg = config if config is not None else SessionConfig.from_env()
    if overrides:
        cfg = cfg.with_overrides(**overrides)
    return Z3Solver(cfg)


@contextmanager
def with_session(session: Optional[SolverBackend] = None, **overrides) -> Iterator[SolverBackend]:
    """Install `session` (or a fresh one) as the ambient session.

    Example:
        >>> with with_session() as s:
        ...     x = declare_const("x", INT)
        ...     assert_(gt_s(x, 0))
        ...     check_sat()

    Raises:
        ConfigError: If both a session and config overrides are given
    """
    if session is None:
        session = new_session(**overrides)
    elif overrides:
        raise ConfigError(f"Cannot apply overrides {sorted(overrides)} to an existing session")
    token = _current.set(session)
    try:
        yield session
    finally:
        _current.reset(token)


def current_session() -> SolverBackend:
    """Return the ambient session.

    Raises:
        NoActiveSessionError: If no session is installed
    """
    session = _current.get()
    if session is None:
        raise NoActiveSessionError("No active solver session; use with_session()")
    return session


def resolve_session(session: Optional[SolverBackend] = None) -> SolverBackend:
    """Return `session` if given, else the ambient one."""
    return session if session is not None else current_session()
