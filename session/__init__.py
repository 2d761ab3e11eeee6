"""会话模块 - 按键驱动的计算器"""
from .calculator import CalculatorSession

__all__ = ['CalculatorSession']
