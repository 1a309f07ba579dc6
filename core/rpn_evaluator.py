"""RPN表达式求值器 - 调用统一的操作符表"""
import logging

import numpy as np

from core.token_system import TokenType, AngleMode
from core.operators import apply_operator
from core.errors import EvaluationError, ErrorKind

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(postfix, angle_mode=AngleMode.RADIAN, allow_partial=False):
        """
        Args:
            postfix: to_postfix() 产生的 Token 序列
            angle_mode: 三角函数的角度模式
            allow_partial: 栈中剩余多个元素时是否返回栈底元素
        Returns:
            float 结果（可能是 inf/NaN）
        Raises:
            EvaluationError: 操作数不足、未知操作符、非法参数、表达式不完整
        """
        angle_mode = AngleMode.coerce(angle_mode)
        stack = []

        for token in postfix:
            if token.type == TokenType.NUMBER:
                stack.append(np.float64(token.value))
                continue

            if not stack:
                raise EvaluationError(f"Insufficient operands for {token.name}",
                                      ErrorKind.STACK_UNDERFLOW)
            b = stack.pop()

            if token.arity == 1:
                a = b
            else:
                if not stack:
                    raise EvaluationError(f"Insufficient operands for {token.name}",
                                          ErrorKind.STACK_UNDERFLOW)
                a = stack.pop()

            stack.append(apply_operator(token.name, a, b, angle_mode))

        # 返回结果处理
        if len(stack) == 0:
            logger.debug("Empty stack after evaluation")
            raise EvaluationError("Empty expression", ErrorKind.MALFORMED_EXPRESSION)
        elif len(stack) > 1:
            if not allow_partial:
                raise EvaluationError(
                    f"Stack has {len(stack)} elements after evaluation, expected 1",
                    ErrorKind.MALFORMED_EXPRESSION)
            logger.debug(f"Partial expression with {len(stack)} stack elements")

        return float(stack[0])
