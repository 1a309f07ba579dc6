"""session/memory.py - 存储器 m+ / m- / mc / mr"""
import re
import math
import logging

logger = logging.getLogger(__name__)

# 显示内容的数字前缀，例如 "12.5abc" -> 12.5，"inf"/"Infinity" -> inf
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(Infinity|inf|(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)")

MEMORY_KEYS = ('m+', 'm-', 'mc', 'mr')


def parse_display_value(display):
    """
    解析显示内容：取开头的数字，无法解析（或为0）时返回 0.0
    """
    if isinstance(display, (int, float)):
        return 0.0 if math.isnan(display) else float(display)
    match = _NUMERIC_PREFIX.match(display or "")
    if not match:
        return 0.0
    return float(match.group(0)) or 0.0


class MemoryRegister:

    def __init__(self):
        self.value = 0.0

    def add(self, value):
        self.value += float(value)
        return self.value

    def subtract(self, value):
        self.value -= float(value)
        return self.value

    def clear(self):
        self.value = 0.0
        return self.value

    def recall(self):
        return self.value

    def apply(self, key, display=""):
        """
        按存储器按键操作。
        Args:
            key: 'm+', 'm-', 'mc', 'mr'
            display: 当前显示内容（m+/m- 使用）
        Returns:
            mr 返回存储值，其他返回 None（显示内容不变）
        """
        if key not in MEMORY_KEYS:
            raise ValueError(f"Unknown memory key: {key}")

        current = parse_display_value(display)
        if key == 'm+':
            self.add(current)
        elif key == 'm-':
            self.subtract(current)
        elif key == 'mc':
            self.clear()
        else:
            return self.recall()

        logger.debug(f"Memory {key}: {self.value}")
        return None
