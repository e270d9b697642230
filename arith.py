from __future__ import annotations
from typing import List, Optional


def gcd(a: int, b: int) -> int:
	"""Greatest common divisor using Euclidean algorithm. Always non-negative."""
	a, b = abs(a), abs(b)
	while b:
		a, b = b, a % b
	return a


def lcm(a: int, b: int) -> int:
	"""Least common multiple, non-negative."""
	if a == 0 or b == 0:
		return 0
	return abs(a * b) // gcd(a, b)


def _integer_root(value: int, k: int) -> int:
	# largest r with r**k <= value, binary search over [0, value + 1)
	low, high = 0, value + 1
	while low != high - 1:
		mid = (low + high) // 2
		if mid ** k <= value:
			low = mid
		else:
			high = mid
	return low


def integer_sqrt(value: int) -> Optional[int]:
	"""Exact square root of a non-negative integer, or None if it is irrational."""
	if value < 0:
		raise ValueError("integer_sqrt: negative value")
	root = _integer_root(value, 2)
	if root * root == value:
		return root
	return None


def integer_cbrt(value: int) -> Optional[int]:
	"""Exact cube root, or None if it is irrational.

	Cube root is odd, so cbrt(-a) is computed as -cbrt(a).
	"""
	root = _integer_root(abs(value), 3)
	if root ** 3 != abs(value):
		return None
	return -root if value < 0 else root


def integer_factors(n: int) -> List[int]:
	"""Positive divisors of n in ascending order. Zero has none."""
	n = abs(n)
	small: List[int] = []
	large: List[int] = []
	i = 1
	while i * i <= n:
		if n % i == 0:
			small.append(i)
			if i != n // i:
				large.append(n // i)
		i += 1
	return small + large[::-1]
