"""Error kinds raised by the exact arithmetic and root-finding layers."""


class SolverError(Exception):
	"""Base class for every failure surfaced to callers."""

	kind = "error"


class DivisionByZero(SolverError, ZeroDivisionError):
	kind = "division-by-zero"


class IrrationalResult(SolverError, ValueError):
	kind = "irrational-result"


class NegativeRadicand(SolverError, ValueError):
	kind = "negative-radicand"


class NotNormalized(SolverError, ValueError):
	kind = "not-normalized"


class UnsupportedDegree(SolverError, ValueError):
	"""Reserved for degrees without a solving path; every degree currently has one."""
	kind = "unsupported-degree"


class Indeterminate(SolverError, ValueError):
	kind = "indeterminate"


class NonNegativeExponentRequired(SolverError, ValueError):
	kind = "negative-exponent"


class ParseError(SolverError, ValueError):
	kind = "parse-error"
