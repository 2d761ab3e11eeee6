"""计算器会话 - 按键输入、历史累积、显示文本"""
import logging
import math

from config.config import CALCULATOR_CONFIG
from core.errors import DivisionByZero, MalformedHistory
from core.infix_evaluator import InfixEvaluator
from core.operators import Operation
from core.token_system import EvaluationHistory
from utils.formatting import NumberFormatter

logger = logging.getLogger(__name__)


class CalculatorSession:
    """
    无界面的计算器：维护一个显示文本和一份EvaluationHistory。
    按下操作键时把当前显示的数字和操作追加到历史，按 = 时整体求值。
    """

    def __init__(self, formatter=None, evaluator=None):
        self.formatter = formatter or NumberFormatter()
        self.evaluator = evaluator or InfixEvaluator
        self._history = EvaluationHistory()
        self._display = CALCULATOR_CONFIG['initial_display']
        self._showing_error = False
        self.last_error = None

    @property
    def display(self):
        return self._display

    @property
    def history(self):
        return self._history.snapshot()

    def press_digit(self, key):
        """数字键或小数点键"""
        decimal_key = CALCULATOR_CONFIG['decimal_key']
        if len(key) != 1 or (key not in CALCULATOR_CONFIG['digit_keys'] and key != decimal_key):
            raise ValueError(f"Not a digit key: {key!r}")

        if self._showing_error:
            self._reset_display()

        if key == decimal_key and decimal_key in self._display:
            return self._display

        if self._display == CALCULATOR_CONFIG['initial_display'] and key != decimal_key:
            self._display = key
        else:
            self._display += key
        return self._display

    def press_operation(self, symbol):
        """操作键：当前数字和操作进入历史，显示归零"""
        try:
            operation = Operation.from_symbol(symbol)
        except ValueError:
            logger.debug(f"Ignoring unknown operation key {symbol!r}")
            return self._display

        number = self.formatter.parse(self._display)
        if number is None:
            logger.debug(f"Display {self._display!r} is not a number, operation ignored")
            return self._display

        self._history.append_number(number)
        self._history.append_operation(operation)
        self._reset_display()
        return self._display

    def clear(self):
        self._history.clear()
        self.last_error = None
        self._reset_display()
        return self._display

    def calculate(self):
        """按 = ：求值并显示结果或错误信息，历史总是清空"""
        number = self.formatter.parse(self._display)
        if number is None:
            return self._display

        self._history.append_number(number)
        try:
            result = self.evaluator.evaluate(self._history.snapshot())
            self._display = self.formatter.format(result)
            # ∞/NaN 不能继续追加数字，和错误信息一样由下一个数字键替换
            self._showing_error = not math.isfinite(result)
            self.last_error = None
        except DivisionByZero as e:
            logger.warning(f"Calculation failed: {e}")
            self._show_error(e, CALCULATOR_CONFIG['division_by_zero_message'])
        except MalformedHistory as e:
            logger.warning(f"Calculation failed: {e}")
            self._show_error(e, CALCULATOR_CONFIG['malformed_message'])
        finally:
            self._history.clear()

        return self._display

    def press(self, key):
        """按键分发：数字/小数点、操作、=、C"""
        if key in CALCULATOR_CONFIG['equals_keys']:
            return self.calculate()
        if key in CALCULATOR_CONFIG['clear_keys']:
            return self.clear()
        digit_chars = CALCULATOR_CONFIG['digit_keys'] + CALCULATOR_CONFIG['decimal_key']
        if key and all(ch in digit_chars for ch in key):
            # "12,5" 等多位数字逐位输入
            for ch in key:
                self.press_digit(ch)
            return self._display
        try:
            Operation.from_symbol(key)
        except ValueError:
            raise ValueError(f"Unknown key: {key!r}") from None
        return self.press_operation(key)

    def press_keys(self, keys):
        """依次按下多个键，返回最终显示"""
        for key in keys:
            self.press(key)
        return self._display

    def _show_error(self, error, message):
        self._display = message
        self._showing_error = True
        self.last_error = error

    def _reset_display(self):
        self._display = CALCULATOR_CONFIG['initial_display']
        self._showing_error = False
