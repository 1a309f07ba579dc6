"""core/operators.py"""
import numpy as np
import logging

from core.token_system import AngleMode
from core.errors import EvaluationError, ErrorKind

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合；参数和返回值都是 np.float64，遵循 IEEE 语义"""

    @staticmethod
    def _angle(value, angle_mode):
        """三角函数输入：角度模式下先转为弧度"""
        return value * DEG_TO_RAD if angle_mode == AngleMode.DEGREE else value

    @staticmethod
    def _inv_angle(value, angle_mode):
        """反三角函数输出：角度模式下转回角度"""
        return value * RAD_TO_DEG if angle_mode == AngleMode.DEGREE else value

    # 二元操作符========================================
    # 除零得到 inf / NaN，不报错

    @staticmethod
    def add(a, b, angle_mode=None):
        return np.add(a, b)

    @staticmethod
    def sub(a, b, angle_mode=None):
        return np.subtract(a, b)

    @staticmethod
    def mul(a, b, angle_mode=None):
        return np.multiply(a, b)

    @staticmethod
    def div(a, b, angle_mode=None):
        return np.divide(a, b)

    @staticmethod
    def pow(a, b, angle_mode=None):
        """负底数配小数指数得到 NaN"""
        return np.power(a, b)

    @staticmethod
    def neg(a, angle_mode=None):
        """一元负号"""
        return np.negative(a)

    # 一元函数====================

    @staticmethod
    def sin(a, angle_mode=AngleMode.RADIAN):
        return np.sin(Operators._angle(a, angle_mode))

    @staticmethod
    def cos(a, angle_mode=AngleMode.RADIAN):
        return np.cos(Operators._angle(a, angle_mode))

    @staticmethod
    def tan(a, angle_mode=AngleMode.RADIAN):
        return np.tan(Operators._angle(a, angle_mode))

    @staticmethod
    def asin(a, angle_mode=AngleMode.RADIAN):
        return Operators._inv_angle(np.arcsin(a), angle_mode)

    @staticmethod
    def acos(a, angle_mode=AngleMode.RADIAN):
        return Operators._inv_angle(np.arccos(a), angle_mode)

    @staticmethod
    def atan(a, angle_mode=AngleMode.RADIAN):
        return Operators._inv_angle(np.arctan(a), angle_mode)

    @staticmethod
    def log(a, angle_mode=None):
        """以10为底"""
        return np.log10(a)

    @staticmethod
    def ln(a, angle_mode=None):
        return np.log(a)

    @staticmethod
    def sqrt(a, angle_mode=None):
        """负数返回 NaN"""
        return np.sqrt(a)

    @staticmethod
    def fact(a, angle_mode=None):
        """
        阶乘：2..a 连乘
        Raises:
            EvaluationError(INVALID_ARGUMENT): a 为负数或不是整数（含 NaN/inf）
        """
        n = float(a)
        if n < 0 or not n.is_integer():
            raise EvaluationError(f"Invalid factorial argument: {n:g}", ErrorKind.INVALID_ARGUMENT)

        result = np.float64(1.0)
        i = 2
        while i <= n:
            result *= i
            if np.isinf(result):
                # 已溢出，后续乘法不会改变结果
                break
            i += 1
        return result


# 静态分派表：构建一次，求值时直接查表
BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
}

UNARY_FUNCTIONS = {
    'neg': Operators.neg,
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
    'asin': Operators.asin,
    'acos': Operators.acos,
    'atan': Operators.atan,
    'log': Operators.log,
    'ln': Operators.ln,
    'sqrt': Operators.sqrt,
    'fact': Operators.fact,
}

# 名称 -> (实现, 元数)
OPERATOR_TABLE = {
    **{name: (func, 2) for name, func in BINARY_OPERATORS.items()},
    **{name: (func, 1) for name, func in UNARY_FUNCTIONS.items()},
}


def apply_operator(name, a, b, angle_mode=AngleMode.RADIAN):
    """
    一元函数作用于 a（调用方保证 a == b），二元操作符计算 a op b
    """
    if name not in OPERATOR_TABLE:
        logger.error(f"Unknown operator: {name}")
        raise EvaluationError(f"Invalid operator: {name}", ErrorKind.UNKNOWN_OPERATOR)

    func, arity = OPERATOR_TABLE[name]
    with np.errstate(all='ignore'):
        if arity == 1:
            return np.float64(func(np.float64(a), angle_mode))
        return np.float64(func(np.float64(a), np.float64(b), angle_mode))
