"""工具模块"""
from .stack import Stack
from .formatting import NumberFormatter

__all__ = ['Stack', 'NumberFormatter']
