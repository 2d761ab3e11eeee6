"""核心模块 - Token系统、中缀求值器和操作符"""
from .errors import CalculationError, DivisionByZero, MalformedHistory
from .operators import Operation
from .token_system import TokenType, Token, EvaluationHistory, build_history
from .infix_evaluator import InfixEvaluator, evaluate

__all__ = [
    'CalculationError', 'DivisionByZero', 'MalformedHistory',
    'Operation', 'TokenType', 'Token', 'EvaluationHistory', 'build_history',
    'InfixEvaluator', 'evaluate'
]
