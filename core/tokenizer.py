"""core/tokenizer.py - 词法分析"""
import re
import logging

from core.token_system import Token, TOKEN_DEFINITIONS, FUNCTION_NAMES, CONSTANT_NAMES

logger = logging.getLogger(__name__)

# 顺序即优先级：数字 | 单字符操作符/括号 | 函数名 | 常数；\d 只匹配 ASCII 数字
TOKEN_PATTERN = re.compile(
    r"(\d+\.?\d*|[+\-*/^()]|" + "|".join(FUNCTION_NAMES) + "|" + "|".join(CONSTANT_NAMES) + ")",
    re.ASCII
)


def tokenize(expr):
    """
    提取所有不重叠的匹配，无法识别的字符直接跳过。
    Args:
        expr: 表达式字符串（None 视为空串）
    Returns:
        Token 列表，可能为空
    """
    tokens = []
    for match in TOKEN_PATTERN.finditer(expr or ""):
        text = match.group(0)
        if text in TOKEN_DEFINITIONS:
            tokens.append(TOKEN_DEFINITIONS[text])
        else:
            tokens.append(Token.number(text, name=text))

    logger.debug(f"Tokenized {expr!r} into {len(tokens)} tokens")
    return tokens
