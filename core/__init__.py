"""核心模块 - Token系统、词法分析、调度场转换和RPN评估器"""
from .token_system import (
    AngleMode, TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_NAMES,
    FUNCTION_NAMES, CONSTANT_NAMES, RPNValidator
)
from .errors import ErrorKind, EvaluationError
from .tokenizer import tokenize
from .shunting_yard import to_postfix
from .operators import Operators, OPERATOR_TABLE, apply_operator
from .rpn_evaluator import RPNEvaluator
from .expression import evaluate_expression, is_complete_expression

__all__ = [
    'AngleMode', 'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_NAMES',
    'FUNCTION_NAMES', 'CONSTANT_NAMES', 'RPNValidator',
    'ErrorKind', 'EvaluationError',
    'tokenize', 'to_postfix', 'Operators', 'OPERATOR_TABLE', 'apply_operator',
    'RPNEvaluator', 'evaluate_expression', 'is_complete_expression'
]
