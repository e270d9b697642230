"""
Exact Root Solver Module

Finds the real rational roots of a univariate polynomial with rational
coefficients. Linear and quadratic equations use closed forms; higher
degrees fall back to a rational-root-theorem search, so roots that are not
rational are left unfound.
"""
from __future__ import annotations
import logging
from typing import List
from arith import integer_factors
from errors import Indeterminate, IrrationalResult, NotNormalized
from polynomial import Polynomial
from rational import Rational

logger = logging.getLogger(__name__)

ZERO = Rational(0)


def solve(poly: Polynomial) -> List[Rational]:
    """
    Solve ``poly = 0`` over the rationals.

    Returns a multiset of roots in ascending order: a root of multiplicity m
    appears m times.

    Raises:
        Indeterminate: poly is the zero polynomial.
        IrrationalResult: a quadratic has real roots that are not rational.
        NotNormalized: degree >= 3 with a non-integer coefficient.
    """
    # zero coefficients from the collaborator must not inflate the degree
    poly = poly.trim()
    degree = poly.degree()
    logger.debug("solving %s (degree %d)", poly, degree)

    if degree == 0:
        if poly.is_zero():
            raise Indeterminate("every value is a root of the zero polynomial")
        return []
    if degree == 1:
        return solve_linear(poly)
    if degree == 2:
        return solve_quadratic(poly)
    return find_rational_roots(poly)


def solve_linear(poly: Polynomial) -> List[Rational]:
    """a*x + b = 0 -> x = -b/a"""
    a = poly.get(1)
    b = poly.get(0)
    return [-b / a]


def solve_quadratic(poly: Polynomial) -> List[Rational]:
    """
    Solve a*x^2 + b*x + c = 0 with the quadratic formula.

    A double root is returned twice. Raises IrrationalResult when the
    discriminant is positive but not a perfect rational square.
    """
    a = poly.get(2)
    b = poly.get(1)
    c = poly.get(0)

    discriminant = b * b - 4 * a * c
    two_a = 2 * a
    logger.debug("discriminant %s", discriminant)

    if discriminant > 0:
        try:
            root_d = discriminant.sqrt()
        except IrrationalResult:
            raise IrrationalResult(
                f"roots of {poly} are irrational (discriminant {discriminant})"
            ) from None
        return sorted([(-b - root_d) / two_a, (-b + root_d) / two_a])
    if discriminant == 0:
        root = -b / two_a
        return [root, root]
    return []


def candidate_roots(poly: Polynomial) -> List[Rational]:
    """
    Every rational p/q allowed by the rational root theorem, each value once.

    p runs over the signed divisors of the lowest-order nonzero coefficient
    and q over the positive divisors of the leading coefficient. When the
    constant term is zero the polynomial is x^k * r(x), so 0 is a candidate and
    the theorem is applied to r.
    """
    # the theorem only holds when every coefficient is an integer
    fractional = [c for c in poly.coefficients.values() if not c.is_int()]
    if fractional:
        raise NotNormalized(
            f"rational root search needs integer coefficients, got {fractional[0]}; "
            f"use Polynomial.clear_denominators() first"
        )
    lowest_exp = min(e for e, c in poly.coefficients.items() if not c.is_zero())
    leading = poly.get(poly.degree()).as_integer()
    lowest = poly.get(lowest_exp).as_integer()

    candidates: List[Rational] = [ZERO] if lowest_exp > 0 else []
    seen = set(candidates)
    for p in integer_factors(lowest):
        for q in integer_factors(leading):
            for cand in (Rational(p, q), Rational(-p, q)):
                if cand not in seen:
                    seen.add(cand)
                    candidates.append(cand)
    return candidates


def root_multiplicity(poly: Polynomial, root: Rational) -> int:
    """Order of vanishing at root: 1 plus the number of successive derivatives that are zero there."""
    multiplicity = 1
    derivative = poly.diff()
    while not derivative.is_zero() and derivative.eval(root).is_zero():
        multiplicity += 1
        derivative = derivative.diff()
    return multiplicity


def find_rational_roots(poly: Polynomial) -> List[Rational]:
    """
    Find rational roots using Rational Root Theorem, with multiplicity.

    The search is incomplete by nature: irrational roots are not reported.
    """
    poly = poly.trim()
    candidates = candidate_roots(poly)
    logger.debug("testing %d rational candidates", len(candidates))

    roots: List[Rational] = []
    for cand in candidates:
        if poly.eval(cand).is_zero():
            m = root_multiplicity(poly, cand)
            logger.debug("root %s with multiplicity %d", cand, m)
            roots.extend([cand] * m)
    if len(roots) < poly.degree():
        logger.debug("%d of %d roots are rational", len(roots), poly.degree())
    return sorted(roots)
