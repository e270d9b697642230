from __future__ import annotations
from typing import Optional, Union
from arith import gcd, integer_sqrt, integer_cbrt
from bigint import BigInt
from errors import DivisionByZero, IrrationalResult, NegativeRadicand, NonNegativeExponentRequired

IntLike = Union[int, BigInt]


def _as_int(value: object) -> int:
	if isinstance(value, bool) or not isinstance(value, (int, BigInt)):
		raise TypeError(f"Rational needs integer parts, got {type(value).__name__}")
	return int(value)


class Rational:
	"""Exact fraction kept in canonical form: positive denominator, coprime parts."""
	__slots__ = ("_n", "_d")

	def __init__(self, num: IntLike, den: IntLike = 1) -> None:
		n, d = _as_int(num), _as_int(den)
		if d == 0:
			raise DivisionByZero("denominator cannot be zero")
		# keep the sign in the numerator
		if d < 0:
			n, d = -n, -d
		g = gcd(n, d)
		self._n = n // g
		self._d = d // g

	@staticmethod
	def _coerce(other: object) -> Rational:
		if isinstance(other, Rational):
			return other
		if isinstance(other, (int, BigInt)) and not isinstance(other, bool):
			return Rational(other)
		return NotImplemented

	@staticmethod
	def from_decimal(text: str) -> Rational:
		"""Exact value of a decimal literal such as '-12.05'."""
		sign = 1
		if text[:1] in "+-":
			sign = -1 if text[0] == "-" else 1
			text = text[1:]
		whole, _, frac = text.partition(".")
		if not (whole + frac).isdigit():
			raise ValueError(f"not a decimal literal: {text!r}")
		return Rational(sign * int(whole + frac), 10 ** len(frac))

	def reduce(self) -> Rational:
		# construction already reduces
		return Rational(self._n, self._d)

	def reciprocal(self) -> Rational:
		if self._n == 0:
			raise DivisionByZero("reciprocal of zero")
		return Rational(self._d, self._n)

	def __add__(self, other: Rational | int) -> Rational:
		other = Rational._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		return Rational(self._n * other._d + self._d * other._n, self._d * other._d)

	def __sub__(self, other: Rational | int) -> Rational:
		other = Rational._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		return Rational(self._n * other._d - self._d * other._n, self._d * other._d)

	def __mul__(self, other: Rational | int) -> Rational:
		other = Rational._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		return Rational(self._n * other._n, self._d * other._d)

	def __truediv__(self, other: Rational | int) -> Rational:
		other = Rational._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		if other.is_zero():
			raise DivisionByZero("division by zero")
		return self * other.reciprocal()

	def __radd__(self, other: int) -> Rational:
		return self + other

	def __rsub__(self, other: int) -> Rational:
		return Rational(other) - self

	def __rmul__(self, other: int) -> Rational:
		return self * other

	def __rtruediv__(self, other: int) -> Rational:
		return Rational(other) / self

	def __neg__(self) -> Rational:
		return Rational(-self._n, self._d)

	def __abs__(self) -> Rational:
		return Rational(abs(self._n), self._d)

	def __pow__(self, exp: int) -> Rational:
		if isinstance(exp, bool) or not isinstance(exp, int) or exp < 0:
			raise NonNegativeExponentRequired(f"exponent must be a non-negative integer, got {exp!r}")
		return Rational(self._n ** exp, self._d ** exp)

	def pow(self, exp: int) -> Rational:
		return self ** exp

	def sqrt(self) -> Rational:
		if self._n < 0:
			raise NegativeRadicand(f"square root of negative value {self}")
		n, d = integer_sqrt(self._n), integer_sqrt(self._d)
		if n is None or d is None:
			raise IrrationalResult(f"square root of {self} is irrational")
		return Rational(n, d)

	def cbrt(self) -> Rational:
		n, d = integer_cbrt(self._n), integer_cbrt(self._d)
		if n is None or d is None:
			raise IrrationalResult(f"cube root of {self} is irrational")
		return Rational(n, d)

	def compare(self, other: Rational) -> int:
		# both denominators are positive, so cross multiplication keeps the order
		lhs = self._n * other._d
		rhs = self._d * other._n
		return (lhs > rhs) - (lhs < rhs)

	def _order(self, other: object) -> int:
		coerced = Rational._coerce(other)
		if coerced is NotImplemented:
			raise TypeError(f"cannot order Rational against {type(other).__name__}")
		return self.compare(coerced)

	def __eq__(self, other: object) -> bool:
		other = Rational._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		return self._n == other._n and self._d == other._d
	def __lt__(self, other: Rational | int) -> bool:
		return self._order(other) < 0
	def __le__(self, other: Rational | int) -> bool:
		return self._order(other) <= 0
	def __gt__(self, other: Rational | int) -> bool:
		return self._order(other) > 0
	def __ge__(self, other: Rational | int) -> bool:
		return self._order(other) >= 0
	def __hash__(self) -> int:
		# integers must hash like the int they equal
		if self._d == 1:
			return hash(self._n)
		return hash((self._n, self._d))

	def is_zero(self) -> bool:
		return self._n == 0
	def is_int(self) -> bool:
		return self._d == 1
	def as_integer(self) -> Optional[int]:
		if self._d == 1:
			return self._n
		return None
	def numerator(self) -> int:
		return self._n
	def denominator(self) -> int:
		return self._d
	def to_string(self) -> str:
		if self._d == 1:
			return str(self._n)
		return f"{self._n}/{self._d}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self._n}, {self._d})"
