"""
Bench Calculator Station - Solver Errors

Every solver validates its inputs and raises one of these before touching
any formula.  All of them are recoverable: callers show ``str(exc)`` next to
the form and keep the user's inputs as they were.
"""


class SolverError(ValueError):
    """Base class for input-validation failures raised by the solvers."""


class InsufficientInputs(SolverError):
    """Wrong number of known quantities for a solver that needs an exact count."""


class DivisionByZero(SolverError, ZeroDivisionError):
    """A formula's denominator evaluated to zero."""


class InvalidConfiguration(SolverError):
    """Inputs violate a physical precondition (e.g. Vs <= Vf for an LED)."""


class NegativeResult(SolverError):
    """A derived resistance came out negative: the inputs are inconsistent."""
