"""求值错误类型"""
from enum import Enum


class ErrorKind(Enum):
    STACK_UNDERFLOW = "stack_underflow"  # 缺少操作数
    UNKNOWN_OPERATOR = "unknown_operator"  # 不在操作符/函数表中
    INVALID_ARGUMENT = "invalid_argument"  # 例如负数或非整数阶乘
    MALFORMED_EXPRESSION = "malformed_expression"  # 括号不匹配、剩余多个操作数


class EvaluationError(ValueError):

    def __init__(self, message, kind):
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self):
        return f"EvaluationError({self.message!r}, {self.kind})"
