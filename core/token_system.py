"""core/token_system.py"""
import math
from enum import Enum


class AngleMode(Enum):
    RADIAN = "radian"
    DEGREE = "degree"

    @classmethod
    def coerce(cls, value):
        """接受 AngleMode 或字符串 'radian'/'degree'（大小写不敏感）"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown angle mode: {value!r}")


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    CONSTANT = "constant"  # π / e / i，转换阶段解析为数字
    OPERATOR = "operator"  # 二元操作符和一元负号
    FUNCTION = "function"  # 一元函数
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token:
    def __init__(self, token_type, name, value=None, arity=0, precedence=None):
        self.type = token_type
        self.name = name
        self.value = value
        self.arity = arity
        self.precedence = precedence

    @classmethod
    def number(cls, value, name=None):
        value = float(value)
        return cls(TokenType.NUMBER, name if name is not None else repr(value), value=value)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        if self.type != other.type:
            return False
        if self.type == TokenType.NUMBER:
            # 数字只比较数值；NaN 占位符也视为相等
            return self.value == other.value or (math.isnan(self.value) and math.isnan(other.value))
        return self.name == other.name

    def __hash__(self):
        if self.type == TokenType.NUMBER:
            return hash((self.type, None if math.isnan(self.value) else self.value))
        return hash((self.type, self.name))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token({self.value!r})"
        return f"Token({self.name!r})"


# Token定义字典（进程级，只读）
TOKEN_DEFINITIONS = {
    # 括号
    '(': Token(TokenType.LEFT_PAREN, '('),
    ')': Token(TokenType.RIGHT_PAREN, ')'),

    # 二元操作符 - 全部左结合（>= 比较）
    '+': Token(TokenType.OPERATOR, '+', arity=2, precedence=1),
    '-': Token(TokenType.OPERATOR, '-', arity=2, precedence=1),
    '*': Token(TokenType.OPERATOR, '*', arity=2, precedence=2),
    '/': Token(TokenType.OPERATOR, '/', arity=2, precedence=2),
    '^': Token(TokenType.OPERATOR, '^', arity=2, precedence=3),

    # 一元负号：没有左操作数的 '-'，由转换阶段识别，优先级高于 ^
    'neg': Token(TokenType.OPERATOR, 'neg', arity=1, precedence=4),

    # 一元函数
    'sin': Token(TokenType.FUNCTION, 'sin', arity=1),
    'cos': Token(TokenType.FUNCTION, 'cos', arity=1),
    'tan': Token(TokenType.FUNCTION, 'tan', arity=1),
    'asin': Token(TokenType.FUNCTION, 'asin', arity=1),
    'acos': Token(TokenType.FUNCTION, 'acos', arity=1),
    'atan': Token(TokenType.FUNCTION, 'atan', arity=1),
    'log': Token(TokenType.FUNCTION, 'log', arity=1),
    'ln': Token(TokenType.FUNCTION, 'ln', arity=1),
    'sqrt': Token(TokenType.FUNCTION, 'sqrt', arity=1),
    'fact': Token(TokenType.FUNCTION, 'fact', arity=1),

    # 常数 - i 只在词法上识别，没有复数运算，解析为 NaN
    'π': Token(TokenType.CONSTANT, 'π', value=math.pi),
    'e': Token(TokenType.CONSTANT, 'e', value=math.e),
    'i': Token(TokenType.CONSTANT, 'i', value=math.nan),
}

OPERATOR_NAMES = [name for name, tk in TOKEN_DEFINITIONS.items() if tk.type == TokenType.OPERATOR]
FUNCTION_NAMES = [name for name, tk in TOKEN_DEFINITIONS.items() if tk.type == TokenType.FUNCTION]
CONSTANT_NAMES = [name for name, tk in TOKEN_DEFINITIONS.items() if tk.type == TokenType.CONSTANT]


class RPNValidator:
    """后缀序列的栈深度检查（不计算数值）"""

    @staticmethod
    def calculate_stack_size(postfix):
        """
        模拟求值栈的深度变化。
        Returns:
            最终栈大小；出现下溢时返回 -1
        """
        stack_size = 0
        for token in postfix:
            if token.type == TokenType.NUMBER:
                stack_size += 1
            elif token.type in (TokenType.OPERATOR, TokenType.FUNCTION):
                if stack_size < token.arity:
                    return -1
                stack_size = stack_size - token.arity + 1
            else:
                # 括号/未解析常数不应出现在后缀序列中
                return -1
        return stack_size

    @staticmethod
    def can_terminate(postfix):
        """完整表达式必须正好留下1个结果"""
        return RPNValidator.calculate_stack_size(postfix) == 1
