"""session/history.py - 表达式历史（内存中，最新在前）"""
import logging

import pandas as pd

logger = logging.getLogger(__name__)


class ExpressionHistory:

    def __init__(self, max_size=50):
        if max_size <= 0:
            raise ValueError(f"History size must be positive, got {max_size}")
        self.max_size = max_size
        self.entries = []  # [{'expression': str, 'result': float}, ...]

    def add(self, expression, result):
        """插入到最前面，超出上限时丢弃最旧的一条"""
        self.entries.insert(0, {'expression': expression, 'result': result})
        if len(self.entries) > self.max_size:
            dropped = self.entries.pop()
            logger.debug(f"History full, dropped: {dropped['expression'][:50]}")

    def clear(self):
        self.entries = []
        logger.info("History cleared")

    def recall(self, index):
        """返回第 index 条（0 为最新）的表达式，供重新编辑"""
        if not 0 <= index < len(self.entries):
            raise IndexError(f"No history entry at position {index}")
        return self.entries[index]['expression']

    def to_frame(self):
        """历史记录转换为 DataFrame（expression, result 两列）"""
        return pd.DataFrame(self.entries, columns=['expression', 'result'])

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(list(self.entries))
