import struct
import warnings

import numpy as np
import pytest

import quadroot


def test_two_distinct_roots():
    assert quadroot.solve(1, -3, 2) == 2.0
    assert quadroot.roots(1, -3, 2) == (2.0, 1.0)


def test_double_root():
    assert quadroot.solve(1, 2, 1) == -1.0


def test_zero_first_root_falls_through():
    assert quadroot.roots(1, 2, 0) == (0.0, -2.0)
    assert quadroot.solve(1, 2, 0) == -2.0
    assert quadroot.solve(1, -2, 0) == 2.0


def test_discriminant():
    assert quadroot.discriminant(1, -3, 2) == 1
    assert quadroot.discriminant(1.0, 0.0, 1.0) == -4.0


def test_negative_discriminant_is_nan():
    with pytest.warns(quadroot.DomainWarning):
        result = quadroot.solve(1, 0, 1)
    assert np.isnan(result)


def test_zero_leading_coefficient_is_not_finite():
    with pytest.warns(quadroot.DegenerateWarning):
        result = quadroot.solve(0, 2, 4)
    assert not np.isfinite(result)

    with pytest.warns(quadroot.DegenerateWarning):
        result = quadroot.solve(0, -2, 4)
    assert np.isinf(result)


def test_roots_are_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        r1, r2 = quadroot.roots(1, 0, 1)
        assert np.isnan(r1) and np.isnan(r2)
        r1, r2 = quadroot.roots(0, 2, 4)
        assert not np.isfinite(r1)


def test_strict_mode():
    with pytest.raises(quadroot.DomainError):
        quadroot.solve(1, 0, 1, strict=True)
    with pytest.raises(quadroot.DivisionDegenerate):
        quadroot.solve(0, 2, 4, strict=True)
    assert quadroot.solve(1, -3, 2, strict=True) == 2.0


def test_errors_are_runtime_errors():
    assert issubclass(quadroot.DomainError, quadroot.QuadrootError)
    assert issubclass(quadroot.DivisionDegenerate, RuntimeError)
    assert issubclass(quadroot.InvalidArguments, RuntimeError)


def test_warnings_are_runtime_warnings():
    for warning in (quadroot.DomainWarning, quadroot.DegenerateWarning):
        assert issubclass(warning, RuntimeWarning)
        assert warning.__doc__


def test_repeat_calls_are_bit_identical():
    for coeffs in [(1, -3, 2), (3, 7, -11), (2.5, 1e8, 1e-3)]:
        first = quadroot.solve(*coeffs)
        second = quadroot.solve(*coeffs)
        assert struct.pack("d", first) == struct.pack("d", second)


def test_solve_many():
    a = np.array([1, 1, 1, 0, 1, 1])
    b = np.array([-3, 2, 0, 2, 2, -2])
    c = np.array([2, 1, 1, 4, 0, 0])

    result = quadroot.solve_many(a, b, c)
    np.testing.assert_array_equal(result, [2.0, -1.0, np.nan, np.nan, -2.0, 2.0])


def test_solve_many_matches_solve():
    a = [1, 2, -3, 5]
    b = [-7, 9, 4, 0]
    c = [3, -1, 8, -2]

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        expected = [quadroot.solve(*coeffs) for coeffs in zip(a, b, c)]

    np.testing.assert_array_equal(quadroot.solve_many(a, b, c), expected)


def test_solve_many_broadcasts():
    result = quadroot.solve_many(1, [-3, 2], [[2, 1], [2, 1]])
    assert result.shape == (2, 2)
    np.testing.assert_array_equal(result[0], [2.0, -1.0])

    assert quadroot.solve_many(1, -3, 2).shape == ()
    assert quadroot.solve_many(1, -3, 2) == 2.0
