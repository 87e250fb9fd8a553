"""
NEAT Genotype Errors

Every error is a caller-contract violation detected before the genome is
touched. Each class also derives from the matching builtin exception, so
callers may catch either.
"""

class NeatError(Exception):
    """Base class for all neatstep errors."""

class SizeMismatchError(NeatError, ValueError):
    """A vector (inputs, activation state, fitness values) has the wrong length."""

class InvalidIndexError(NeatError, IndexError):
    """A node index does not exist in the genome."""

class InvalidStateError(NeatError, RuntimeError):
    """The target of a structural mutation does not satisfy its precondition."""

class EmptyCandidateError(NeatError, LookupError):
    """No valid target exists for a random structural mutation."""
