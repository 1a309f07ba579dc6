import math
import struct
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core import evaluate_expression, AngleMode, EvaluationError, ErrorKind


class TestEvaluateExpression(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(evaluate_expression("12+3*4"), 24.0)
        self.assertEqual(evaluate_expression("2+3*4"), 14.0)
        self.assertEqual(evaluate_expression("(2+3)*4"), 20.0)

    def test_exponent_groups_left(self):
        self.assertEqual(evaluate_expression("2^3^2"), 64.0)

    def test_functions(self):
        self.assertEqual(evaluate_expression("sqrt(16)"), 4.0)
        self.assertEqual(evaluate_expression("log(100)"), 2.0)
        self.assertAlmostEqual(evaluate_expression("ln(e)"), 1.0)

    def test_sin_in_both_modes(self):
        self.assertEqual(evaluate_expression("sin(0)", AngleMode.RADIAN), 0.0)
        self.assertEqual(evaluate_expression("sin(0)", AngleMode.DEGREE), 0.0)
        self.assertAlmostEqual(evaluate_expression("sin(90)", AngleMode.DEGREE), 1.0)
        self.assertAlmostEqual(evaluate_expression("cos(π)", "radian"), -1.0)
        self.assertAlmostEqual(evaluate_expression("tan(45)", "degree"), 1.0)

    def test_constants(self):
        self.assertAlmostEqual(evaluate_expression("π"), math.pi)
        self.assertAlmostEqual(evaluate_expression("e"), math.e)

    def test_imaginary_unit_is_nan(self):
        self.assertTrue(math.isnan(evaluate_expression("i")))
        self.assertTrue(math.isnan(evaluate_expression("2*i+1")))

    def test_factorial(self):
        self.assertEqual(evaluate_expression("fact(5)"), 120.0)
        self.assertEqual(evaluate_expression("fact(0)"), 1.0)
        for expr in ("fact(-1)", "fact(2.5)", "fact(0-1)"):
            with self.assertRaises(EvaluationError) as ctx:
                evaluate_expression(expr)
            self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_ARGUMENT)

    def test_unary_minus(self):
        self.assertEqual(evaluate_expression("-1"), -1.0)
        self.assertEqual(evaluate_expression("2*-3"), -6.0)
        self.assertEqual(evaluate_expression("--4"), 4.0)
        self.assertEqual(evaluate_expression("(-2+5)*-1"), -3.0)
        self.assertEqual(evaluate_expression("sqrt(-(-16))"), 4.0)
        # 负号优先级高于 ^
        self.assertEqual(evaluate_expression("-2^2"), 4.0)
        # 右括号之后的 '-' 仍是减法
        self.assertEqual(evaluate_expression("(3)-1"), 2.0)

    def test_lone_minus_is_underflow(self):
        for expr in ("-", "1+"):
            with self.assertRaises(EvaluationError) as ctx:
                evaluate_expression(expr)
            self.assertEqual(ctx.exception.kind, ErrorKind.STACK_UNDERFLOW)

    def test_division_by_zero(self):
        self.assertEqual(evaluate_expression("5/0"), math.inf)
        self.assertTrue(math.isnan(evaluate_expression("0/0")))

    def test_idempotent(self):
        for expr in ("sin(1)/3+sqrt(2)", "e^π", "atan(7)*asin(0.3)"):
            for mode in AngleMode:
                first = evaluate_expression(expr, mode)
                second = evaluate_expression(expr, mode)
                self.assertEqual(struct.pack('<d', first), struct.pack('<d', second))

    def test_malformed(self):
        for expr in ("", "(1+2", "1+2)", "2 3"):
            with self.assertRaises(EvaluationError) as ctx:
                evaluate_expression(expr)
            self.assertEqual(ctx.exception.kind, ErrorKind.MALFORMED_EXPRESSION)

    def test_missing_operand(self):
        with self.assertRaises(EvaluationError) as ctx:
            evaluate_expression("1+")
        self.assertEqual(ctx.exception.kind, ErrorKind.STACK_UNDERFLOW)

    def test_allow_partial(self):
        self.assertEqual(evaluate_expression("2sin(0)", allow_partial=True), 2.0)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            evaluate_expression("fact(0.5)")


if __name__ == "__main__":
    unittest.main()
