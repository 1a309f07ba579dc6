import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core import (
    RPNEvaluator, Token, TokenType, TOKEN_DEFINITIONS, AngleMode,
    EvaluationError, ErrorKind, apply_operator, Operators, OPERATOR_TABLE
)


def _num(value):
    return Token.number(value)


class TestRPNEvaluator(unittest.TestCase):
    def test_postfix_sequence(self):
        postfix = [_num(12), _num(3), _num(4), TOKEN_DEFINITIONS['*'], TOKEN_DEFINITIONS['+']]
        self.assertEqual(RPNEvaluator.evaluate(postfix), 24.0)

    def test_operand_order(self):
        postfix = [_num(10), _num(4), TOKEN_DEFINITIONS['-']]
        self.assertEqual(RPNEvaluator.evaluate(postfix), 6.0)
        postfix = [_num(2), _num(10), TOKEN_DEFINITIONS['^']]
        self.assertEqual(RPNEvaluator.evaluate(postfix), 1024.0)

    def test_function_consumes_one_operand(self):
        postfix = [_num(3), _num(16), TOKEN_DEFINITIONS['sqrt'], TOKEN_DEFINITIONS['+']]
        self.assertEqual(RPNEvaluator.evaluate(postfix), 7.0)

    def test_stack_underflow(self):
        for postfix in ([TOKEN_DEFINITIONS['+']],
                        [_num(1), TOKEN_DEFINITIONS['+']],
                        [TOKEN_DEFINITIONS['sin']]):
            with self.assertRaises(EvaluationError) as ctx:
                RPNEvaluator.evaluate(postfix)
            self.assertEqual(ctx.exception.kind, ErrorKind.STACK_UNDERFLOW)

    def test_unknown_operator(self):
        bogus = Token(TokenType.OPERATOR, '%', arity=2, precedence=2)
        with self.assertRaises(EvaluationError) as ctx:
            RPNEvaluator.evaluate([_num(1), _num(2), bogus])
        self.assertEqual(ctx.exception.kind, ErrorKind.UNKNOWN_OPERATOR)

    def test_empty_postfix(self):
        with self.assertRaises(EvaluationError) as ctx:
            RPNEvaluator.evaluate([])
        self.assertEqual(ctx.exception.kind, ErrorKind.MALFORMED_EXPRESSION)

    def test_leftover_operands(self):
        postfix = [_num(2), _num(3)]
        with self.assertRaises(EvaluationError) as ctx:
            RPNEvaluator.evaluate(postfix)
        self.assertEqual(ctx.exception.kind, ErrorKind.MALFORMED_EXPRESSION)
        self.assertEqual(RPNEvaluator.evaluate(postfix, allow_partial=True), 2.0)

    def test_angle_mode_string(self):
        postfix = [_num(90), TOKEN_DEFINITIONS['sin']]
        self.assertAlmostEqual(RPNEvaluator.evaluate(postfix, 'degree'), 1.0)
        with self.assertRaises(ValueError):
            RPNEvaluator.evaluate(postfix, 'gradian')


class TestOperators(unittest.TestCase):
    def test_division_by_zero_is_not_an_error(self):
        self.assertEqual(apply_operator('/', 5.0, 0.0), math.inf)
        self.assertEqual(apply_operator('/', -5.0, 0.0), -math.inf)
        self.assertTrue(math.isnan(apply_operator('/', 0.0, 0.0)))

    def test_power_edge_cases(self):
        self.assertTrue(math.isnan(apply_operator('^', -8.0, 1.0 / 3.0)))
        self.assertEqual(apply_operator('^', -2.0, 3.0), -8.0)

    def test_inverse_trig_degree_output(self):
        self.assertAlmostEqual(apply_operator('asin', 1.0, 1.0, AngleMode.DEGREE), 90.0)
        self.assertAlmostEqual(apply_operator('acos', 0.0, 0.0, AngleMode.DEGREE), 90.0)
        self.assertAlmostEqual(apply_operator('atan', 1.0, 1.0, AngleMode.DEGREE), 45.0)
        self.assertAlmostEqual(apply_operator('atan', 1.0, 1.0, AngleMode.RADIAN), math.pi / 4)

    def test_out_of_domain_gives_nan(self):
        self.assertTrue(math.isnan(apply_operator('sqrt', -1.0, -1.0)))
        self.assertTrue(math.isnan(apply_operator('asin', 2.0, 2.0)))
        self.assertEqual(apply_operator('ln', 0.0, 0.0), -math.inf)

    def test_logarithms(self):
        self.assertAlmostEqual(apply_operator('log', 1000.0, 1000.0), 3.0)
        self.assertAlmostEqual(apply_operator('ln', math.e, math.e), 1.0)

    def test_factorial(self):
        self.assertEqual(Operators.fact(5.0), 120.0)
        self.assertEqual(Operators.fact(0.0), 1.0)
        self.assertEqual(Operators.fact(1.0), 1.0)
        self.assertEqual(Operators.fact(200.0), math.inf)

    def test_dispatch_table(self):
        self.assertEqual(OPERATOR_TABLE['neg'], (Operators.neg, 1))
        self.assertEqual(OPERATOR_TABLE['^'], (Operators.pow, 2))
        self.assertEqual(apply_operator('neg', 2.5, 2.5), -2.5)

    def test_factorial_invalid(self):
        for value in (-1.0, 2.5, math.nan, math.inf):
            with self.assertRaises(EvaluationError) as ctx:
                Operators.fact(value)
            self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_ARGUMENT)


if __name__ == "__main__":
    unittest.main()
