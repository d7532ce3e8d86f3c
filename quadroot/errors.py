"""Exceptions and warnings raised by quadroot."""


class QuadrootError(RuntimeError):
    """Base class for all errors raised by quadroot."""


class InvalidArguments(QuadrootError):
    """Fewer than three coefficients were given on the command line."""


class DomainError(QuadrootError):
    """The discriminant is negative, so there is no real root."""


class DivisionDegenerate(QuadrootError):
    """The leading coefficient is zero, so the root formula divides by zero."""


class DomainWarning(RuntimeWarning):
    """The discriminant is negative, so the root is NaN."""


class DegenerateWarning(RuntimeWarning):
    """The leading coefficient is zero, so the root is not finite."""
