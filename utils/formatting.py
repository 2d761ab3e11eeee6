"""utils/formatting.py - 显示用数字格式（逗号小数点、无分组）"""
import decimal
import math
import re

from config.config import FORMAT_CONFIG

GROUPING_SEPARATOR = '\u00a0'  # ru_RU 分组用不换行空格


class NumberFormatter:

    def __init__(self, decimal_separator=None, max_fraction_digits=None, use_grouping=None):
        self.decimal_separator = decimal_separator or FORMAT_CONFIG['decimal_separator']
        self.max_fraction_digits = (FORMAT_CONFIG['max_fraction_digits']
                                    if max_fraction_digits is None else max_fraction_digits)
        self.use_grouping = FORMAT_CONFIG['use_grouping'] if use_grouping is None else use_grouping
        self.rounding = getattr(decimal, FORMAT_CONFIG['rounding'])

        sep = re.escape(self.decimal_separator)
        self._number_pattern = re.compile(rf'^-?(\d+({sep}\d*)?|{sep}\d+)$')

    def format(self, value):
        """数字 -> 显示文本，四舍六入五成双到 max_fraction_digits 位，去掉末尾0"""
        value = float(value)
        if math.isnan(value):
            return FORMAT_CONFIG['nan']
        if math.isinf(value):
            return FORMAT_CONFIG['infinity'] if value > 0 else '-' + FORMAT_CONFIG['infinity']

        number = decimal.Decimal(repr(value))
        quantum = decimal.Decimal(1).scaleb(-self.max_fraction_digits)
        with decimal.localcontext() as ctx:
            # 大数需要足够的精度，否则 quantize 会抛 InvalidOperation
            ctx.prec = max(number.adjusted(), 0) + self.max_fraction_digits + 2
            number = number.quantize(quantum, rounding=self.rounding)

        text = format(number, 'f')
        if '.' in text:
            text = text.rstrip('0').rstrip('.')
        if text in ('-0', ''):
            text = '0'

        integer, _, fraction = text.partition('.')
        if self.use_grouping:
            integer = self._group(integer)
        return integer + (self.decimal_separator + fraction if fraction else '')

    def parse(self, text):
        """显示文本 -> float，无法解析返回 None"""
        if text is None:
            return None
        text = text.strip()
        if self.use_grouping:
            text = text.replace(GROUPING_SEPARATOR, '').replace(' ', '')

        if text == FORMAT_CONFIG['infinity']:
            return math.inf
        if text == '-' + FORMAT_CONFIG['infinity']:
            return -math.inf
        if not self._number_pattern.match(text):
            return None
        return float(text.replace(self.decimal_separator, '.'))

    @staticmethod
    def _group(integer):
        sign = '-' if integer.startswith('-') else ''
        digits = integer.lstrip('-')
        groups = []
        while len(digits) > 3:
            groups.insert(0, digits[-3:])
            digits = digits[:-3]
        groups.insert(0, digits)
        return sign + GROUPING_SEPARATOR.join(groups)
