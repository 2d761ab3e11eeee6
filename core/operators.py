"""core/operators.py"""
from enum import Enum
from types import MappingProxyType
import logging

import numpy as np

from config.config import OPERATION_CONFIG
from core.errors import DivisionByZero

logger = logging.getLogger(__name__)

# 导入时固定的优先级层级，之后修改配置不影响
PRECEDENCE = MappingProxyType(dict(OPERATION_CONFIG["precedence"]))


class Operation(Enum):
    """四种二元运算，值为键盘上的符号"""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"

    @property
    def precedence(self):
        """优先级层级：数值越小越先计算（乘除=1，加减=2）"""
        return PRECEDENCE[self.value]

    @classmethod
    def from_symbol(cls, symbol):
        """按符号（含别名）构造操作"""
        symbol = OPERATION_CONFIG["aliases"].get(symbol, symbol)
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown operation symbol: {symbol!r}") from None

    def apply(self, left, right):
        """
        计算 left <op> right
        Args:
            left: 左操作数
            right: 右操作数
        Returns:
            float 结果（IEEE-754 双精度，溢出得到 inf）
        Raises:
            DivisionByZero: 除法且 right == 0
        """
        left = np.float64(left)
        right = np.float64(right)

        with np.errstate(all='ignore'):  # 溢出/inf-inf 不告警，直接按IEEE结果返回
            if self is Operation.ADD:
                result = left + right
            elif self is Operation.SUBTRACT:
                result = left - right
            elif self is Operation.MULTIPLY:
                result = left * right
            else:
                if right == 0:
                    logger.warning(f"Division by zero: {left} / {right}")
                    raise DivisionByZero(float(left))
                result = left / right

        return float(result)

    def __str__(self):
        return self.value
