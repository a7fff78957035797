"""Exceptions raised by splinekit.

Argument problems (zero divisors, out-of-range spline orders, lookup
indices outside the table) raise :class:`InvalidArgument`, which is also a
``ValueError`` so callers that already guard numeric code with ``except
ValueError`` keep working.  Sampling a precomputed evaluator without the
context object produced by its precompute call raises
:class:`PreconditionViolation`.
"""


class SplineError(Exception):
    """Base class for all splinekit errors."""


class InvalidArgument(SplineError, ValueError):
    """An argument violates the documented precondition of an operation."""


class PreconditionViolation(SplineError, RuntimeError):
    """An operation was called before the state it depends on was built."""
