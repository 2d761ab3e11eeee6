"""core/errors.py"""


class CalculationError(Exception):
    """求值失败的基类"""


class DivisionByZero(CalculationError):
    """除数为0"""

    def __init__(self, left):
        self.left = left
        super().__init__(f"Division by zero: {left} / 0")


class MalformedHistory(CalculationError):
    """历史序列没有按 数字/操作/数字 交替排列"""

    def __init__(self, message, position=None):
        self.position = position
        if position is not None:
            message = f"{message} (at token {position})"
        super().__init__(message)
