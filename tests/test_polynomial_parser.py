import pytest

from errors import DivisionByZero, NonNegativeExponentRequired, ParseError
from polynomial import Polynomial
from polynomial_parser import parse_equation, parse_polynomial, to_rpn, tokenize
from rational import Rational


def poly(coeffs: dict) -> Polynomial:
    return Polynomial({e: c if isinstance(c, Rational) else Rational(c) for e, c in coeffs.items()})


class TestTokenize:
    def test_implicit_multiplication(self) -> None:
        kinds = [t.kind for t in tokenize("5x(x+1)")]
        assert kinds == ['NUM', '*', 'ID', '*', '(', 'ID', '+', 'NUM', ')']

    def test_unary_minus(self) -> None:
        kinds = [t.kind for t in tokenize("-x = -3")]
        assert kinds == ['NEG', 'ID', '=', 'NEG', 'NUM']

    def test_decimal_is_exact(self) -> None:
        assert tokenize("0.125")[0].num == Rational(1, 8)

    def test_second_decimal_point_rejected(self) -> None:
        with pytest.raises(ParseError):
            tokenize("1.2.3")
        with pytest.raises(ParseError):
            tokenize("x^2 + 3.5.1x = 0")

    def test_unknown_character(self) -> None:
        with pytest.raises(ParseError):
            tokenize("x $ 2")

    def test_mismatched_parens(self) -> None:
        with pytest.raises(ParseError):
            to_rpn(tokenize("(x + 1"))
        with pytest.raises(ParseError):
            to_rpn(tokenize("x + 1)"))


class TestParseEquation:
    def test_quadratic(self) -> None:
        assert parse_polynomial("x^2 + 5x + 6 = 0") == poly({0: 6, 1: 5, 2: 1})

    def test_without_equals(self) -> None:
        assert parse_polynomial("x^4 - 16 x^3 + 96 x^2 - 256 x + 256") == poly({0: 256, 1: -256, 2: 96, 3: -16, 4: 1})

    def test_right_side_moves_left(self) -> None:
        p = parse_polynomial("x^2 - 3x - 5x = x^2 + 2x + 3")
        assert p == poly({0: -3, 1: -10})
        assert p.degree() == 1

    def test_like_terms_collected(self) -> None:
        assert parse_polynomial("-27 + 27 x - 9 x^2 + x^3 = 0") == poly({0: -27, 1: 27, 2: -9, 3: 1})

    def test_negation_binds_looser_than_power(self) -> None:
        assert parse_polynomial("-x^2") == poly({2: -1})
        assert parse_polynomial("(-x)^2") == poly({2: 1})

    def test_parentheses_and_products(self) -> None:
        assert parse_polynomial("(x + 5)^2 (x - 5)") == poly({0: -125, 1: -25, 2: 5, 3: 1})
        assert parse_polynomial("2(x+1)") == poly({0: 2, 1: 2})

    def test_division_by_constant(self) -> None:
        assert parse_polynomial("x/2 = 3") == poly({0: -3, 1: Rational(1, 2)})
        assert parse_polynomial("x^2/2") == poly({2: Rational(1, 2)})

    def test_repeated_letter_is_product(self) -> None:
        assert parse_polynomial("xx") == poly({2: 1})

    def test_variable_name_reported(self) -> None:
        p, var = parse_equation("t^2 - 1 = 0")
        assert var == "t"
        assert p == poly({0: -1, 2: 1})

    def test_constant_equation(self) -> None:
        p, var = parse_equation("3 = 3")
        assert var == "x"
        assert p.is_zero()
        assert p.degree() == 0

    def test_unary_plus(self) -> None:
        assert parse_polynomial("+x = +2") == poly({0: -2, 1: 1})


class TestParseErrors:
    @pytest.mark.parametrize("text", ["x^-1", "x^(1/2)", "x^(0 - 2)"])
    def test_bad_exponent(self, text: str) -> None:
        with pytest.raises(NonNegativeExponentRequired):
            parse_polynomial(text)

    def test_non_constant_exponent(self) -> None:
        with pytest.raises(ParseError):
            parse_polynomial("2^x")

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            parse_polynomial("x/0 = 1")

    def test_division_by_variable(self) -> None:
        with pytest.raises(ParseError):
            parse_polynomial("1/x")

    def test_multivariate(self) -> None:
        with pytest.raises(ParseError):
            parse_polynomial("x + y = 0")

    def test_two_equals(self) -> None:
        with pytest.raises(ParseError):
            parse_polynomial("x = 1 = 2")

    def test_empty_side(self) -> None:
        with pytest.raises(ParseError):
            parse_polynomial("= 3")
        with pytest.raises(ParseError):
            parse_polynomial("x =")

    def test_dangling_operator(self) -> None:
        with pytest.raises(ParseError):
            parse_polynomial("x +")
