"""core/token_system.py"""
from enum import Enum
import numbers

from core.operators import Operation


class TokenType(Enum):
    NUMBER = "number"        # 操作数
    OPERATION = "operation"  # 操作符


class Token:
    """历史中的一个元素：数字或操作"""

    __slots__ = ('type', 'value', 'operation')

    def __init__(self, token_type, value=None, operation=None):
        self.type = token_type
        self.value = value
        self.operation = operation

    @classmethod
    def number(cls, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"Number token needs a real number, got {value!r}")
        try:
            value = float(value)
        except OverflowError:
            # 超出双精度范围的整数（如 10**400）
            raise TypeError(f"Number token needs a value in float range, got {type(value).__name__} out of range") from None
        return cls(TokenType.NUMBER, value=value)

    @classmethod
    def operation_of(cls, operation):
        if not isinstance(operation, Operation):
            operation = Operation.from_symbol(operation)
        return cls(TokenType.OPERATION, operation=operation)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_operation(self):
        return self.type == TokenType.OPERATION

    @property
    def has_payload(self):
        """直接构造的Token可能缺少数值或操作"""
        if self.is_number:
            return isinstance(self.value, numbers.Real) and not isinstance(self.value, bool)
        if self.is_operation:
            return isinstance(self.operation, Operation)
        return False

    def _key(self):
        return (self.type, self.value, self.operation)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        if self.is_number:
            return f"Token.number({self.value!r})"
        if self.is_operation and isinstance(self.operation, Operation):
            return f"Token.operation_of({self.operation.value!r})"
        return f"Token({self.type}, value={self.value!r}, operation={self.operation!r})"


def build_history(*items):
    """
    把原始元素转换成Token元组
    支持：Token、Operation、操作符号字符串、实数
    """
    tokens = []
    for item in items:
        if isinstance(item, Token):
            tokens.append(item)
        elif isinstance(item, (Operation, str)):
            tokens.append(Token.operation_of(item))
        else:
            tokens.append(Token.number(item))
    return tuple(tokens)


class EvaluationHistory:
    """一次计算会话中累积的Token序列，由调用方持有"""

    def __init__(self, tokens=()):
        self._tokens = list(build_history(*tokens))

    def append_number(self, value):
        self._tokens.append(Token.number(value))

    def append_operation(self, operation):
        self._tokens.append(Token.operation_of(operation))

    def clear(self):
        self._tokens.clear()

    def snapshot(self):
        """只读副本，交给求值器"""
        return tuple(self._tokens)

    @property
    def is_empty(self):
        return not self._tokens

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self.snapshot())

    def __repr__(self):
        return f"EvaluationHistory({list(self._tokens)!r})"
