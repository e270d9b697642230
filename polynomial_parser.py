from __future__ import annotations
import logging
from typing import List, Optional, Tuple
from errors import DivisionByZero, NonNegativeExponentRequired, ParseError
from polynomial import Polynomial
from rational import Rational

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE = "x"

# Simple lexer + shunting-yard for univariate polynomial equations
class Tok:
	def __init__(self, kind: str, lex: str = "", num: Rational | None = None):
		self.kind, self.lex, self.num = kind, lex, num
	def __repr__(self) -> str:
		return f"Tok({self.kind!r}, {self.lex!r})"

OPERAND_END = ('ID', 'NUM', ')')
OPERATORS = ('+', '-', '*', '/', '^', '(', '=', 'NEG')

def tokenize(expr: str) -> List[Tok]:
	s = expr
	i, n = 0, len(s)
	toks: List[Tok] = []
	prev: Optional[Tok] = None
	while i < n:
		c = s[i]
		if c.isspace():
			i += 1; continue
		if c in "+-*/^()=":
			k = c
			i += 1
			unary = prev is None or prev.kind in OPERATORS
			# unary plus is a no-op
			if k == '+' and unary:
				continue
			if k == '-' and unary:
				k = 'NEG'
			# implicit multiplication, e.g. "2(x+1)" or ")("
			if k == '(' and prev and prev.kind in OPERAND_END:
				toks.append(Tok('*', '*'))
			t = Tok(k, c)
			toks.append(t)
			prev = t; continue
		# number (integer or exact decimal)
		if c.isdigit() or (c == '.' and i + 1 < n and s[i+1].isdigit()):
			j = i
			has_dot = False
			while j < n and (s[j].isdigit() or (s[j] == '.' and not has_dot)):
				has_dot = has_dot or s[j] == '.'
				j += 1
			if j < n and s[j] == '.':
				raise ParseError(f"Malformed number {s[i:j+1]!r} at position {i}")
			num_str = s[i:j]
			if prev and prev.kind in OPERAND_END:
				toks.append(Tok('*', '*'))
			toks.append(Tok('NUM', num_str, Rational.from_decimal(num_str)))
			i = j; prev = toks[-1]; continue
		# identifier: each letter is a variable, "xx" means x*x
		if c.isalpha():
			if prev and prev.kind in OPERAND_END:
				toks.append(Tok('*', '*'))
			toks.append(Tok('ID', c))
			i += 1; prev = toks[-1]; continue
		raise ParseError(f"Unexpected char {c!r} at position {i}")
	return toks

prec = {'^': 4, 'NEG': 3, '*': 2, '/': 2, '+': 1, '-': 1}
right_assoc = {'NEG', '^'}

def to_rpn(toks: List[Tok]) -> List[Tok]:
	out: List[Tok] = []
	op: List[Tok] = []
	for t in toks:
		if t.kind in ('NUM', 'ID'):
			out.append(t)
		elif t.kind == 'NEG':
			# prefix operator: nothing to its left to reduce
			op.append(t)
		elif t.kind in prec:
			while op and op[-1].kind != '(' and ((t.kind in right_assoc and prec[t.kind] < prec[op[-1].kind]) or (t.kind not in right_assoc and prec[t.kind] <= prec[op[-1].kind])):
				out.append(op.pop())
			op.append(t)
		elif t.kind == '(':
			op.append(t)
		elif t.kind == ')':
			while op and op[-1].kind != '(':
				out.append(op.pop())
			if not op: raise ParseError("Mismatched parens")
			op.pop()
		else:
			raise ParseError(f"Unexpected token {t.lex!r}")
	while op:
		if op[-1].kind == '(': raise ParseError("Mismatched parens")
		out.append(op.pop())
	return out

def _constant_value(p: Polynomial, what: str) -> Rational:
	p = p.trim()
	if p.degree() != 0:
		raise ParseError(f"{what} must be constant, got {p}")
	return p.get(0)

def eval_rpn(rpn: List[Tok]) -> Polynomial:
	stack: List[Polynomial] = []
	for t in rpn:
		if t.kind == 'NUM':
			stack.append(Polynomial.constant(t.num))
		elif t.kind == 'ID':
			stack.append(Polynomial.monomial(1, 1))
		elif t.kind == 'NEG':
			if not stack: raise ParseError("neg missing operand")
			stack.append(-stack.pop())
		elif t.kind in ('+', '-', '*', '/', '^'):
			if len(stack) < 2: raise ParseError(f"operator {t.lex!r} missing operands")
			b = stack.pop(); a = stack.pop()
			if t.kind == '+': stack.append(a + b)
			elif t.kind == '-': stack.append(a - b)
			elif t.kind == '*': stack.append(a * b)
			elif t.kind == '/':
				# only allow division by constant
				den = _constant_value(b, "divisor")
				if den.is_zero(): raise DivisionByZero(f"division by zero in {a} / 0")
				stack.append(a.scale(den.reciprocal()))
			elif t.kind == '^':
				exp = _constant_value(b, "exponent")
				if not exp.is_int() or exp < 0:
					raise NonNegativeExponentRequired(f"exponent must be a non-negative integer, got {exp}")
				stack.append(a.pow(exp.as_integer()))
		else:
			raise ParseError(f"Unknown RPN token {t.lex!r}")
	if len(stack) != 1: raise ParseError("Invalid expression")
	return stack[-1]

def _side(toks: List[Tok], name: str) -> Polynomial:
	if not toks:
		raise ParseError(f"{name} side of the equation is empty")
	return eval_rpn(to_rpn(toks))

def parse_equation(expr: str) -> Tuple[Polynomial, str]:
	"""Parse ``lhs = rhs`` (or a bare expression meaning ``expr = 0``).

	Returns the polynomial ``lhs - rhs`` with zero terms dropped, and the name
	of its variable (DEFAULT_VARIABLE when the equation has none).
	"""
	toks = tokenize(expr)
	logger.debug("tokens for %r: %s", expr, toks)
	names = {t.lex for t in toks if t.kind == 'ID'}
	if len(names) > 1:
		raise ParseError(f"only univariate equations are supported, found {', '.join(sorted(names))}")
	var = names.pop() if names else DEFAULT_VARIABLE

	eq_at = [idx for idx, t in enumerate(toks) if t.kind == '=']
	if len(eq_at) > 1:
		raise ParseError("more than one '=' in equation")
	if eq_at:
		k = eq_at[0]
		poly = _side(toks[:k], "left") - _side(toks[k+1:], "right")
	else:
		poly = _side(toks, "left")
	return poly.trim(), var

def parse_polynomial(expr: str) -> Polynomial:
	return parse_equation(expr)[0]
