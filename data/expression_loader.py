"""表达式批量加载、求值和保存"""
import logging

import numpy as np
import pandas as pd

from core import AngleMode, EvaluationError, is_complete_expression
from session import CalculatorSession

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column='expression'):
    """
    加载表达式列表。

    Parameters:
    - file_path: CSV 文件（需要包含表达式列）或纯文本文件（每行一个表达式）
    - expression_column: CSV 中的表达式列名, 默认为 'expression'

    Returns:
    - expressions: str 类型的 Series
    """
    logger.info(f"Loading expressions from {file_path}")

    if file_path.endswith('.csv'):
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        # 确保表达式列存在
        if expression_column not in frame.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in {file_path}.")
        expressions = frame[expression_column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = pd.Series([line.rstrip('\n') for line in f], dtype=str)

    # 去掉空行
    blank = expressions.str.strip() == ''
    if blank.any():
        logger.warning(f"Skipping {int(blank.sum())} blank expressions")
    expressions = expressions[~blank].str.strip().reset_index(drop=True)
    expressions.name = 'expression'

    # 结构不完整的表达式仍然保留，求值时会记录错误
    incomplete = ~expressions.map(is_complete_expression).astype(bool)
    if incomplete.any():
        logger.warning(f"Found {int(incomplete.sum())} incomplete expressions, "
                       f"first: {expressions[incomplete].iloc[0][:50]}")

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, angle_mode=AngleMode.RADIAN, session=None):
    """
    逐个求值，失败的表达式结果为 NaN 并记录错误信息。

    Returns:
    - DataFrame: expression, result, error 三列
    """
    if session is None:
        session = CalculatorSession(angle_mode=angle_mode)

    rows = []
    for expression in expressions:
        try:
            result = session.evaluate(expression)
            error = None
        except EvaluationError as e:
            logger.warning(f"Failed to evaluate expression: {expression[:50]} ({e.message})")
            result = np.nan
            error = e.message
        rows.append({'expression': expression, 'result': result, 'error': error})

    frame = pd.DataFrame(rows, columns=['expression', 'result', 'error'])
    failed = frame['error'].notna().sum()
    logger.info(f"Evaluated {len(frame)} expressions, {failed} failed")
    return frame


def save_results(frame, output_path):
    logger.info(f"Saving results to {output_path}")
    frame.to_csv(output_path, index=False)
