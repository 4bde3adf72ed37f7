"""
Exception hierarchy for smtembed.

Structural errors in user-written forms are raised before anything reaches a
solver session. Errors reported by a session are raised from the primitive
command layer and propagate unchanged through the helpers built on it.
"""


class SmtEmbedError(Exception):
    """Base class for all smtembed errors."""


class ConfigError(SmtEmbedError, ValueError):
    """Invalid session configuration value."""


class DefinitionSyntaxError(SmtEmbedError, ValueError):
    """A definition form does not match any accepted shape."""


class SortError(DefinitionSyntaxError):
    """A sort tag cannot be resolved to a solver sort."""


class ArityError(SmtEmbedError, TypeError):
    """An operator was applied to the wrong number of arguments."""


class NoActiveSessionError(SmtEmbedError, RuntimeError):
    """A command was issued with no ambient session installed."""


class SolverCommandError(SmtEmbedError):
    """A session rejected a primitive command."""


class SymbolRedeclaredError(SolverCommandError):
    """A sort or function symbol is already declared in a live scope."""

    def __init__(self, name: str, kind: str = "function"):
        super().__init__(f"{kind} '{name}' is already declared")
        self.name = name
        self.kind = kind


class UnknownSortError(SolverCommandError):
    """A signature mentions an uninterpreted sort that was never declared."""


class SortMismatchError(SolverCommandError):
    """A term has a sort other than the one the command requires."""


class ScopeError(SolverCommandError):
    """More scopes popped than pushed."""


class ModelUnavailableError(SolverCommandError):
    """A model was requested when the last check-sat was not sat."""
