"""表达式求值入口：Tokenizer -> Shunting-Yard -> RPNEvaluator"""
import logging

from core.token_system import AngleMode, RPNValidator
from core.errors import EvaluationError
from core.tokenizer import tokenize
from core.shunting_yard import to_postfix
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


def evaluate_expression(text, angle_mode=AngleMode.RADIAN, allow_partial=False):
    """
    计算一个表达式字符串的值。

    Args:
        text: 表达式，例如 "2+3*4"、"sin(90)"
        angle_mode: AngleMode 或 'radian'/'degree'
        allow_partial: 见 RPNEvaluator.evaluate
    Returns:
        float 结果
    Raises:
        EvaluationError
    """
    angle_mode = AngleMode.coerce(angle_mode)
    postfix = to_postfix(tokenize(text))
    result = RPNEvaluator.evaluate(postfix, angle_mode, allow_partial=allow_partial)
    logger.debug(f"{text!r} = {result!r} ({angle_mode.value})")
    return result


def is_complete_expression(text):
    """
    只检查结构（括号匹配、操作数个数），不计算数值。
    """
    try:
        postfix = to_postfix(tokenize(text))
    except EvaluationError:
        return False
    return RPNValidator.can_terminate(postfix)
