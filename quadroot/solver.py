import warnings

import numpy as np
import numba

from .errors import (
    DomainError,
    DivisionDegenerate,
    DomainWarning,
    DegenerateWarning,
)


def discriminant(a, b, c):
    """
    Discriminant of the quadratic polynomial a * x**2 + b * x + c.
    """
    return b * b - 4.0 * a * c


def roots(a, b, c):
    """
    Both candidate roots of the quadratic equation
    a * x**2 + b * x + c = 0.

    Parameters
    ----------
    a : float
        Quadratic coefficient.
    b : float
        Linear coefficient.
    c : float
        Constant coefficient.

    Returns
    -------
    r1 : float
        The root (-b + sqrt(s)) / 2a, where s is the discriminant.
    r2 : float
        The root (-b - sqrt(s)) / 2a.

    Notes
    -----
    .. No checks are made. A negative discriminant gives NaN for both
       roots and `a` equal to zero gives infinite or NaN roots, as
       dictated by IEEE floating point arithmetic.
    """
    a, b, c = np.float64(a), np.float64(b), np.float64(c)

    with np.errstate(divide="ignore", invalid="ignore"):
        s = discriminant(a, b, c)
        d = 2.0 * a
        sqrt_s = np.sqrt(s)
        r1 = (-b + sqrt_s) / d
        r2 = (-b - sqrt_s) / d

    return float(r1), float(r2)


def solve(a, b, c, strict=False):
    """
    Compute a real root of a * x**2 + b * x + c = 0.

    Parameters
    ----------
    a : float
        Quadratic coefficient.
    b : float
        Linear coefficient.
    c : float
        Constant coefficient.
    strict : bool, default False
        If True, raise an exception when the equation is degenerate
        (`a` is zero) or has no real roots. Otherwise a warning is
        issued and the non-finite result is returned.

    Returns
    -------
    output : float
        The root (-b + sqrt(s)) / 2a if it is nonzero, otherwise the
        root (-b - sqrt(s)) / 2a. NaN counts as nonzero.

    Raises
    ------
    DivisionDegenerate
        If `strict` is True and `a` is zero.
    DomainError
        If `strict` is True and the discriminant is negative.
    """
    _check_coefficients(float(a), float(b), float(c), strict)

    r1, r2 = roots(a, b, c)

    return r1 if r1 != 0.0 else r2


def _check_coefficients(a, b, c, strict):
    """Raise or warn about degenerate and complex cases."""
    if a == 0.0:
        msg = "`a` is zero; the equation is not quadratic."
        if strict:
            raise DivisionDegenerate(msg)
        warnings.warn(msg + " Result is not finite.", DegenerateWarning, stacklevel=3)
    elif discriminant(a, b, c) < 0.0:
        msg = "Negative discriminant; there are no real roots."
        if strict:
            raise DomainError(msg)
        warnings.warn(msg + " Result is NaN.", DomainWarning, stacklevel=3)


def solve_many(a, b, c):
    """
    Compute a real root for each of many sets of coefficients.

    Parameters
    ----------
    a : float or array_like
        Quadratic coefficients.
    b : float or array_like
        Linear coefficients.
    c : float or array_like
        Constant coefficients.

    Returns
    -------
    output : ndarray
        Roots, one per set of coefficients, with the broadcast shape
        of `a`, `b`, and `c`.

    Notes
    -----
    .. Each entry is the value `solve()` returns for the same
       coefficients. No warnings are issued and no exceptions are
       raised for degenerate cases; they give NaN or infinite entries.
    """
    a, b, c = np.broadcast_arrays(
        np.asarray(a, dtype=float),
        np.asarray(b, dtype=float),
        np.asarray(c, dtype=float),
    )
    shape = a.shape

    output = _solve_many(
        np.ascontiguousarray(a).ravel(),
        np.ascontiguousarray(b).ravel(),
        np.ascontiguousarray(c).ravel(),
    )

    return output.reshape(shape)


@numba.jit(nopython=True, error_model="numpy")
def _solve_many(a, b, c):
    """
    Compute roots for 1D arrays of coefficients of equal length.
    """
    output = np.empty(len(a))

    for i in range(len(a)):
        s = b[i] * b[i] - 4.0 * a[i] * c[i]
        d = 2.0 * a[i]
        r1 = (-b[i] + np.sqrt(s)) / d
        if r1 != 0.0:
            output[i] = r1
        else:
            output[i] = (-b[i] - np.sqrt(s)) / d

    return output
