import logging
from collections import OrderedDict, namedtuple

from core import AngleMode, EvaluationError, evaluate_expression
from session.history import ExpressionHistory
from session.memory import MemoryRegister

logger = logging.getLogger(__name__)

SubmitResult = namedtuple('SubmitResult', ['expression', 'value', 'error'])


class CalculatorSession:

    def __init__(self, angle_mode=AngleMode.RADIAN, history_size=50, cache_size=1000,
                 allow_partial=False):
        self._angle_mode = AngleMode.coerce(angle_mode)
        self.allow_partial = allow_partial
        self.history = ExpressionHistory(max_size=history_size)
        self.memory = MemoryRegister()
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def angle_mode(self):
        return self._angle_mode

    @angle_mode.setter
    def angle_mode(self, value):
        self._angle_mode = AngleMode.coerce(value)
        logger.info(f"Angle mode set to {self._angle_mode.value}")

    def toggle_angle_mode(self):
        """弧度/角度切换"""
        if self._angle_mode == AngleMode.RADIAN:
            self.angle_mode = AngleMode.DEGREE
        else:
            self.angle_mode = AngleMode.RADIAN
        return self._angle_mode

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_stats(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses,
                'size': len(self._result_cache)}

    def evaluate(self, expression):
        """
        Args:
            expression: 表达式字符串
        Returns:
            float 结果
        Raises:
            EvaluationError
        """
        expression = expression or ""
        cache_key = (expression, self._angle_mode, self.allow_partial)

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        # 求值失败时直接抛出，不写入缓存
        result = evaluate_expression(expression, self._angle_mode, allow_partial=self.allow_partial)
        self._result_cache[cache_key] = result
        self._manage_cache()
        return result

    def submit(self, expression):
        """
        "=" 键：成功时记录历史；失败时返回错误信息作为显示内容，不记录历史
        """
        expression = expression or ""
        try:
            value = self.evaluate(expression)
        except EvaluationError as e:
            logger.error(f"Error evaluating expression '{expression[:50]}': {e.message} ({e.kind.value})")
            return SubmitResult(expression, None, e.message)

        self.history.add(expression, value)
        return SubmitResult(expression, value, None)

    def memory_key(self, key, display=""):
        """m+ / m- / mc / mr，mr 返回存储值"""
        return self.memory.apply(key, display)

    def recall_history(self, index):
        return self.history.recall(index)
