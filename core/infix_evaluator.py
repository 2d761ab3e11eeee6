"""中缀表达式求值器 - 双栈（操作数栈 + 操作符栈）按优先级计算"""
import logging

from core.errors import MalformedHistory
from core.token_system import Token
from utils.stack import Stack

logger = logging.getLogger(__name__)


class InfixEvaluator:
    """对 数字/操作/数字/... 交替的Token序列求值"""

    @staticmethod
    def evaluate(history):
        """
        Args:
            history: Token序列（EvaluationHistory 或任意可迭代对象），不会被修改
        Returns:
            float 结果；空序列返回 0.0
        Raises:
            DivisionByZero: 任一步除以0，整个计算中止
            MalformedHistory: 序列不是交替排列（空栈弹出、多余操作数等）
        """
        numbers = Stack()
        operators = Stack()

        position = -1
        for position, token in enumerate(history):
            if not isinstance(token, Token):
                logger.error(f"Unexpected item in history: {token!r}")
                raise MalformedHistory(f"Not a token: {token!r}", position)

            if not token.has_payload:
                logger.error(f"Token without payload in history: {token!r}")
                raise MalformedHistory(f"Token without payload: {token.type}", position)

            if token.is_number:
                numbers.push(token.value)
                continue

            operation = token.operation
            # 栈顶优先级不低于当前操作（层级数值<=）时先计算，保证同级从左到右
            while not operators.is_empty and operation.precedence >= operators.peek().precedence:
                InfixEvaluator._apply_top(numbers, operators, position)
            operators.push(operation)

        while not operators.is_empty:
            InfixEvaluator._apply_top(numbers, operators, None)

        if numbers.is_empty:
            return 0.0

        if len(numbers) > 1:
            logger.error(f"{len(numbers)} operands left after evaluation, expected 1")
            raise MalformedHistory(f"{len(numbers)} operands left without an operation")

        result = numbers.pop()
        logger.debug(f"Evaluated {position + 1} tokens -> {result}")
        return result

    @staticmethod
    def _apply_top(numbers, operators, position):
        """弹出栈顶操作和两个操作数，结果压回操作数栈"""
        last_operation = operators.pop()
        right = numbers.pop()
        left = numbers.pop()
        if left is None or right is None:
            logger.error(f"Insufficient operands for {last_operation.name}")
            raise MalformedHistory(f"Missing operand for '{last_operation.value}'", position)

        result = last_operation.apply(left, right)
        logger.debug(f"{left} {last_operation.value} {right} = {result}")
        numbers.push(result)


def evaluate(history):
    return InfixEvaluator.evaluate(history)
