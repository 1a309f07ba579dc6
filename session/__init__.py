"""会话模块 - 结果缓存、历史记录和存储器"""
from .calculator import CalculatorSession, SubmitResult
from .history import ExpressionHistory
from .memory import MemoryRegister, MEMORY_KEYS, parse_display_value

__all__ = ['CalculatorSession', 'SubmitResult', 'ExpressionHistory',
           'MemoryRegister', 'MEMORY_KEYS', 'parse_display_value']
