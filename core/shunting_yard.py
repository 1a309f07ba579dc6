"""core/shunting_yard.py - 中缀转后缀（调度场算法）"""
import logging

from core.token_system import Token, TokenType, TOKEN_DEFINITIONS
from core.errors import EvaluationError, ErrorKind

logger = logging.getLogger(__name__)


def _expects_operand(previous):
    """前一个 token 之后是否应当出现操作数（此时 '-' 为负号）"""
    return previous is None or previous.type in (
        TokenType.LEFT_PAREN, TokenType.OPERATOR, TokenType.FUNCTION)


def to_postfix(tokens):
    """
    Args:
        tokens: tokenize() 产生的 Token 序列
    Returns:
        后缀顺序的 Token 列表（不含括号，常数已解析为数字）
    Raises:
        EvaluationError(MALFORMED_EXPRESSION): 括号不匹配
    """
    output_queue = []
    operator_stack = []
    previous = None

    for token in tokens:
        if token.name == '-' and _expects_operand(previous):
            token = TOKEN_DEFINITIONS['neg']
        previous = token

        if token.type == TokenType.NUMBER:
            output_queue.append(token)

        elif token.type == TokenType.CONSTANT:
            output_queue.append(Token.number(token.value, name=token.name))

        elif token.type in (TokenType.FUNCTION, TokenType.LEFT_PAREN):
            operator_stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while operator_stack and operator_stack[-1].type != TokenType.LEFT_PAREN:
                output_queue.append(operator_stack.pop())
            if not operator_stack:
                raise EvaluationError("Mismatched parentheses: unexpected ')'",
                                      ErrorKind.MALFORMED_EXPRESSION)
            operator_stack.pop()  # 丢弃 '('
            # 函数调用的右括号把函数作用到参数上
            if operator_stack and operator_stack[-1].type == TokenType.FUNCTION:
                output_queue.append(operator_stack.pop())

        elif token.type == TokenType.OPERATOR and token.arity == 1:
            # 前缀一元操作符不会弹出栈中任何操作符
            operator_stack.append(token)

        elif token.type == TokenType.OPERATOR:
            # >= 使得所有操作符（包括 ^）都左结合；函数和 '(' 不会被操作符弹出
            while (operator_stack
                   and operator_stack[-1].type == TokenType.OPERATOR
                   and operator_stack[-1].precedence >= token.precedence):
                output_queue.append(operator_stack.pop())
            operator_stack.append(token)

        else:
            raise EvaluationError(f"Unknown token: {token.name}", ErrorKind.UNKNOWN_OPERATOR)

    while operator_stack:
        token = operator_stack.pop()
        if token.type == TokenType.LEFT_PAREN:
            raise EvaluationError("Mismatched parentheses: unclosed '('",
                                  ErrorKind.MALFORMED_EXPRESSION)
        output_queue.append(token)

    logger.debug(f"Postfix: {' '.join(t.name for t in output_queue)}")
    return output_queue
