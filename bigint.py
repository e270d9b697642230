from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Tuple

LIMB_BITS = 64
LIMB_MASK = (1 << LIMB_BITS) - 1


class Sign(Enum):
	POSITIVE = "+"
	NEGATIVE = "-"

	def flip(self) -> Sign:
		return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE


# Magnitude helpers work on little-endian limb lists with no high zero limbs.

def _strip(digits: List[int]) -> List[int]:
	while len(digits) > 1 and digits[-1] == 0:
		digits.pop()
	return digits


def _compare_magnitudes(a: List[int], b: List[int]) -> int:
	if len(a) != len(b):
		return -1 if len(a) < len(b) else 1
	for x, y in zip(reversed(a), reversed(b)):
		if x != y:
			return -1 if x < y else 1
	return 0


def _add_magnitudes(a: List[int], b: List[int]) -> List[int]:
	if len(a) < len(b):
		a, b = b, a
	result: List[int] = []
	carry = 0
	for i, x in enumerate(a):
		total = x + (b[i] if i < len(b) else 0) + carry
		result.append(total & LIMB_MASK)
		carry = total >> LIMB_BITS
	if carry:
		result.append(carry)
	return result


def _sub_magnitudes(a: List[int], b: List[int]) -> Tuple[Sign, List[int]]:
	"""|a| - |b|, always subtracting the smaller magnitude from the larger."""
	if _compare_magnitudes(a, b) >= 0:
		sign, left, right = Sign.POSITIVE, a, b
	else:
		sign, left, right = Sign.NEGATIVE, b, a
	result: List[int] = []
	borrow = 0
	for i, x in enumerate(left):
		diff = x - (right[i] if i < len(right) else 0) - borrow
		if diff < 0:
			diff += 1 << LIMB_BITS
			borrow = 1
		else:
			borrow = 0
		result.append(diff)
	return sign, _strip(result)


def _shift_magnitude(a: List[int], k: int) -> List[int]:
	return [0] * k + list(a)


def _mul_magnitudes(a: List[int], b: List[int]) -> List[int]:
	result = [0]
	for i, x in enumerate(a):
		carry = 0
		for j, y in enumerate(b):
			# x * y needs up to 128 bits: low limb goes in now, high limb rides along
			product = x * y
			partial = _add_magnitudes([product & LIMB_MASK], [carry])
			result = _add_magnitudes(result, _shift_magnitude(partial, i + j))
			carry = product >> LIMB_BITS
		if carry:
			result = _add_magnitudes(result, _shift_magnitude([carry], i + len(b)))
	return _strip(result)


class BigInt:
	"""Signed integer of unbounded magnitude stored as base 2**64 limbs.

	Limbs are least significant first. Values are immutable; every operation
	returns a new instance. Zero may carry either sign and compares equal to
	itself regardless.
	"""
	__slots__ = ("sign", "digits")

	def __init__(self, sign: Sign = Sign.POSITIVE, digits: Iterable[int] = (0,)) -> None:
		limbs = list(digits)
		if not limbs:
			raise ValueError("BigInt needs at least one limb")
		for d in limbs:
			if not isinstance(d, int) or d < 0 or d > LIMB_MASK:
				raise ValueError(f"limb out of range: {d!r}")
		self.sign = sign
		self.digits: Tuple[int, ...] = tuple(_strip(limbs))

	@staticmethod
	def from_int(n: int) -> BigInt:
		sign = Sign.NEGATIVE if n < 0 else Sign.POSITIVE
		n = abs(n)
		limbs: List[int] = []
		while True:
			limbs.append(n & LIMB_MASK)
			n >>= LIMB_BITS
			if n == 0:
				break
		return BigInt(sign, limbs)

	@staticmethod
	def _coerce(other: object) -> BigInt:
		if isinstance(other, BigInt):
			return other
		if isinstance(other, int) and not isinstance(other, bool):
			return BigInt.from_int(other)
		return NotImplemented

	def is_zero(self) -> bool:
		return self.digits == (0,)

	def is_negative(self) -> bool:
		return self.sign is Sign.NEGATIVE and not self.is_zero()

	def shift_limbs(self, k: int) -> BigInt:
		"""Insert k zero limbs at the least significant end, i.e. multiply by 2**(64*k)."""
		if k < 0:
			raise ValueError("shift_limbs: k must be non-negative")
		return BigInt(self.sign, _shift_magnitude(list(self.digits), k))

	def compare(self, other: BigInt) -> int:
		if self.is_zero() and other.is_zero():
			return 0
		if self.sign is not other.sign:
			return 1 if self.sign is Sign.POSITIVE else -1
		ord_ = _compare_magnitudes(list(self.digits), list(other.digits))
		return ord_ if self.sign is Sign.POSITIVE else -ord_

	def __add__(self, other: BigInt | int) -> BigInt:
		other = BigInt._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		a, b = list(self.digits), list(other.digits)
		pair = (self.sign, other.sign)
		if pair == (Sign.POSITIVE, Sign.POSITIVE):
			return BigInt(Sign.POSITIVE, _add_magnitudes(a, b))
		elif pair == (Sign.POSITIVE, Sign.NEGATIVE):
			return BigInt(*_sub_magnitudes(a, b))
		elif pair == (Sign.NEGATIVE, Sign.POSITIVE):
			return BigInt(*_sub_magnitudes(b, a))
		else:
			return BigInt(Sign.NEGATIVE, _add_magnitudes(a, b))

	def __sub__(self, other: BigInt | int) -> BigInt:
		other = BigInt._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		a, b = list(self.digits), list(other.digits)
		pair = (self.sign, other.sign)
		if pair == (Sign.POSITIVE, Sign.POSITIVE):
			return BigInt(*_sub_magnitudes(a, b))
		elif pair == (Sign.POSITIVE, Sign.NEGATIVE):
			return BigInt(Sign.POSITIVE, _add_magnitudes(a, b))
		elif pair == (Sign.NEGATIVE, Sign.POSITIVE):
			return BigInt(Sign.NEGATIVE, _add_magnitudes(a, b))
		else:
			return BigInt(*_sub_magnitudes(b, a))

	def __mul__(self, other: BigInt | int) -> BigInt:
		other = BigInt._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		sign = Sign.POSITIVE if self.sign is other.sign else Sign.NEGATIVE
		return BigInt(sign, _mul_magnitudes(list(self.digits), list(other.digits)))

	def __radd__(self, other: int) -> BigInt:
		return self + other

	def __rsub__(self, other: int) -> BigInt:
		return BigInt.from_int(other) - self

	def __rmul__(self, other: int) -> BigInt:
		return self * other

	def __neg__(self) -> BigInt:
		return BigInt(self.sign.flip(), self.digits)

	def __abs__(self) -> BigInt:
		return BigInt(Sign.POSITIVE, self.digits)

	def __eq__(self, other: object) -> bool:
		other = BigInt._coerce(other)
		if other is NotImplemented:
			return NotImplemented
		return self.compare(other) == 0

	def _order(self, other: object) -> int:
		coerced = BigInt._coerce(other)
		if coerced is NotImplemented:
			raise TypeError(f"cannot order BigInt against {type(other).__name__}")
		return self.compare(coerced)

	def __lt__(self, other: BigInt | int) -> bool:
		return self._order(other) < 0

	def __le__(self, other: BigInt | int) -> bool:
		return self._order(other) <= 0

	def __gt__(self, other: BigInt | int) -> bool:
		return self._order(other) > 0

	def __ge__(self, other: BigInt | int) -> bool:
		return self._order(other) >= 0

	def __hash__(self) -> int:
		return hash(int(self))

	def __int__(self) -> int:
		value = 0
		for d in reversed(self.digits):
			value = (value << LIMB_BITS) | d
		return -value if self.sign is Sign.NEGATIVE else value

	def __index__(self) -> int:
		return int(self)

	def __repr__(self) -> str:
		return f"BigInt({self.sign.name}, {list(self.digits)})"

	def __str__(self) -> str:
		return str(int(self))
