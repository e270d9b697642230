import logging

import pytest

from errors import Indeterminate, IrrationalResult, NotNormalized
from polynomial import Polynomial
from rational import Rational
from solver import candidate_roots, find_rational_roots, root_multiplicity, solve


def poly(coeffs: dict) -> Polynomial:
    return Polynomial({e: c if isinstance(c, Rational) else Rational(c) for e, c in coeffs.items()})


def R(n: int, d: int = 1) -> Rational:
    return Rational(n, d)


class TestEndToEnd:
    def test_linear_zero_root(self) -> None:
        assert solve(poly({1: 5})) == [R(0)]

    def test_quadratic_two_roots(self) -> None:
        assert solve(poly({0: 6, 1: 5, 2: 1})) == [R(-3), R(-2)]

    def test_quadratic_no_real_roots(self) -> None:
        assert solve(poly({0: 5, 2: 1})) == []

    def test_cubic_with_double_root(self) -> None:
        assert solve(poly({0: -125, 1: -25, 2: 5, 3: 1})) == [R(-5), R(-5), R(5)]


class TestLowDegree:
    def test_linear_fraction(self) -> None:
        assert solve(poly({0: 3, 1: 2})) == [R(-3, 2)]

    def test_linear_rational_coefficients(self) -> None:
        assert solve(poly({0: R(1, 3), 1: R(2, 5)})) == [R(-5, 6)]

    def test_quadratic_rational_roots(self) -> None:
        assert solve(poly({0: -1, 2: 4})) == [R(-1, 2), R(1, 2)]

    def test_quadratic_double_root_returned_twice(self) -> None:
        assert solve(poly({0: 1, 1: -2, 2: 1})) == [R(1), R(1)]

    def test_quadratic_irrational_roots(self) -> None:
        with pytest.raises(IrrationalResult):
            solve(poly({0: -2, 2: 1}))

    def test_leading_zero_terms_are_ignored(self) -> None:
        assert solve(poly({0: -4, 1: 2, 2: 0})) == [R(2)]
        assert solve(poly({0: 6, 1: 5, 2: 1, 4: 0})) == [R(-3), R(-2)]

    def test_nonzero_constant_has_no_roots(self) -> None:
        assert solve(poly({0: 7})) == []

    def test_zero_polynomial_is_indeterminate(self) -> None:
        with pytest.raises(Indeterminate):
            solve(poly({0: 0}))
        with pytest.raises(Indeterminate):
            solve(poly({0: 0, 3: 0}))


class TestRationalRootSearch:
    def test_triple_root(self) -> None:
        # (x - 3)^3
        assert solve(poly({0: -27, 1: 27, 2: -9, 3: 1})) == [R(3)] * 3

    def test_quadruple_root(self) -> None:
        # (x - 4)^4
        assert solve(poly({0: 256, 1: -256, 2: 96, 3: -16, 4: 1})) == [R(4)] * 4

    def test_fractional_roots(self) -> None:
        # (x - 2)(x - 1)(2x + 1)
        assert solve(poly({0: 2, 1: 1, 2: -5, 3: 2})) == [R(-1, 2), R(1), R(2)]

    def test_zero_constant_term(self) -> None:
        # x^3 - x
        assert solve(poly({1: -1, 3: 1})) == [R(-1), R(0), R(1)]

    def test_zero_root_multiplicity(self) -> None:
        # x^4 - x^2
        assert solve(poly({2: -1, 4: 1})) == [R(-1), R(0), R(0), R(1)]

    def test_pure_power(self) -> None:
        assert solve(poly({5: 3})) == [R(0)] * 5

    def test_irrational_roots_left_unfound(self) -> None:
        assert solve(poly({0: -2, 3: 1})) == []

    def test_partial_result(self) -> None:
        # (x - 1)(x^2 - 2)
        assert solve(poly({0: 2, 1: -2, 2: -1, 3: 1})) == [R(1)]

    def test_fractional_inner_coefficients_rejected(self) -> None:
        # (x - 1/2)(x - 1)(x - 2) = x^3 - 7/2 x^2 + 7/2 x - 1
        with pytest.raises(NotNormalized):
            solve(poly({0: -1, 1: R(7, 2), 2: R(-7, 2), 3: 1}))

    def test_cleared_denominators_find_every_root(self) -> None:
        p = poly({0: -1, 1: R(7, 2), 2: R(-7, 2), 3: 1})
        assert solve(p.clear_denominators()) == [R(1, 2), R(1), R(2)]

    def test_fifth_degree(self) -> None:
        # x(x - 1)(x + 1)(x - 2)(x + 2)
        assert solve(poly({1: 4, 3: -5, 5: 1})) == [R(-2), R(-1), R(0), R(1), R(2)]

    def test_non_integer_leading_coefficient(self) -> None:
        with pytest.raises(NotNormalized):
            solve(poly({0: 1, 3: R(1, 2)}))

    def test_non_integer_constant(self) -> None:
        with pytest.raises(NotNormalized):
            solve(poly({0: R(1, 3), 3: 1}))

    def test_non_integer_lowest_term_when_constant_is_zero(self) -> None:
        with pytest.raises(NotNormalized):
            solve(poly({1: R(1, 2), 3: 1}))

    def test_logs_confirmed_roots(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="solver"):
            find_rational_roots(poly({0: -27, 1: 27, 2: -9, 3: 1}))
        assert "root 3 with multiplicity 3" in caplog.text


class TestHelpers:
    def test_candidates_deduplicated(self) -> None:
        cands = candidate_roots(poly({0: 2, 3: 2}))
        assert len(cands) == len(set(cands))
        assert set(cands) == {R(1), R(-1), R(2), R(-2), R(1, 2), R(-1, 2)}

    def test_candidates_include_zero(self) -> None:
        assert R(0) in candidate_roots(poly({2: 3, 3: 1}))

    def test_root_multiplicity(self) -> None:
        p = poly({0: -125, 1: -25, 2: 5, 3: 1})
        assert root_multiplicity(p, R(-5)) == 2
        assert root_multiplicity(p, R(5)) == 1
