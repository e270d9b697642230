from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple
from arith import lcm
from errors import NonNegativeExponentRequired
from rational import Rational

ZERO = Rational(0)


class Polynomial:
    """Univariate polynomial as a sparse exponent -> coefficient mapping.

    The mapping always holds at least one term and ``degree()`` is its largest
    key. Instances are immutable; every transform returns a new Polynomial.
    """

    __slots__ = ("_coeffs", "_degree")

    def __init__(self, coeffs: Mapping[int, Rational | int]) -> None:
        if not coeffs:
            raise ValueError("polynomial must have at least one coefficient")
        acc: Dict[int, Rational] = {}
        for exp, c in coeffs.items():
            if isinstance(exp, bool) or not isinstance(exp, int) or exp < 0:
                raise NonNegativeExponentRequired(f"exponent must be a non-negative integer, got {exp!r}")
            acc[exp] = c if isinstance(c, Rational) else Rational(c)
        self._coeffs = MappingProxyType(acc)
        self._degree = max(acc)

    @staticmethod
    def from_terms(terms: Iterable[Tuple[int, Rational]]) -> "Polynomial":
        """Build from (exponent, coefficient) pairs, summing repeated exponents."""
        acc: Dict[int, Rational] = {}
        for exp, c in terms:
            acc[exp] = acc.get(exp, ZERO) + c
        if not acc:
            acc[0] = ZERO
        return Polynomial(acc)

    @staticmethod
    def constant(c: Rational | int) -> "Polynomial":
        return Polynomial({0: c})

    @staticmethod
    def monomial(c: Rational | int, exp: int) -> "Polynomial":
        return Polynomial({exp: c})

    @property
    def coefficients(self) -> Mapping[int, Rational]:
        return self._coeffs

    def terms(self) -> List[Tuple[int, Rational]]:
        """(exponent, coefficient) pairs, highest exponent first."""
        return sorted(self._coeffs.items(), reverse=True)

    def get(self, exp: int) -> Rational:
        return self._coeffs.get(exp, ZERO)

    def degree(self) -> int:
        return self._degree

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self._coeffs.values())

    def trim(self) -> "Polynomial":
        """Drop zero coefficients so the degree reflects the true leading term."""
        kept = {e: c for e, c in self._coeffs.items() if not c.is_zero()}
        return Polynomial(kept or {0: ZERO})

    def clear_denominators(self) -> "Polynomial":
        """Scale by the lcm of the coefficient denominators. The roots are unchanged."""
        scale = 1
        for c in self._coeffs.values():
            scale = lcm(scale, c.denominator())
        return self.scale(scale)

    def eval(self, x: Rational | int) -> Rational:
        # Horner's method over every exponent up to the degree
        result = ZERO
        for exp in range(self._degree, -1, -1):
            result = result * x + self.get(exp)
        return result

    def diff(self) -> "Polynomial":
        """Formal derivative. A constant differentiates to the zero polynomial {0: 0}."""
        out: Dict[int, Rational] = {}
        for exp, c in self._coeffs.items():
            if exp > 0:
                out[exp - 1] = c * exp
        return Polynomial(out or {0: ZERO})

    def scale(self, r: Rational | int) -> "Polynomial":
        return Polynomial({e: c * r for e, c in self._coeffs.items()})

    def pow(self, exp: int) -> "Polynomial":
        if isinstance(exp, bool) or not isinstance(exp, int) or exp < 0:
            raise NonNegativeExponentRequired(f"exponent must be a non-negative integer, got {exp!r}")
        res = Polynomial.constant(1)
        for _ in range(exp):
            res = res * self
        return res

    def __add__(self, rhs: "Polynomial") -> "Polynomial":
        return Polynomial.from_terms(list(self._coeffs.items()) + list(rhs._coeffs.items()))

    def __sub__(self, rhs: "Polynomial") -> "Polynomial":
        return self + (-rhs)

    def __neg__(self) -> "Polynomial":
        return self.scale(-1)

    def __mul__(self, rhs: "Polynomial") -> "Polynomial":
        prods: List[Tuple[int, Rational]] = []
        for ea, ca in self._coeffs.items():
            for eb, cb in rhs._coeffs.items():
                prods.append((ea + eb, ca * cb))
        return Polynomial.from_terms(prods)

    def __eq__(self, other: object) -> bool:
        # zero-coefficient entries do not change the value
        if not isinstance(other, Polynomial):
            return NotImplemented
        return dict(self.trim()._coeffs) == dict(other.trim()._coeffs)

    def __hash__(self) -> int:
        return hash(frozenset(self.trim()._coeffs.items()))

    def to_string(self, var: str = "x") -> str:
        parts: List[str] = []
        for idx, (exp, c) in enumerate(self.trim().terms()):
            if c.is_zero():
                continue
            mag = abs(c)
            body = "" if (mag == 1 and exp != 0) else mag.to_string()
            if exp == 1:
                body += var
            elif exp > 1:
                body += f"{var}^{exp}"
            if idx == 0:
                parts.append(f"-{body}" if c < 0 else body)
            else:
                parts.append(f" - {body}" if c < 0 else f" + {body}")
        return "".join(parts) if parts else "0"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        inner = ", ".join(f"{e}: {c}" for e, c in sorted(self._coeffs.items()))
        return f"Polynomial({{{inner}}})"
