"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 计算器会话参数
CALCULATOR_CONFIG = {
    "initial_display": "0",
    "division_by_zero_message": "Division by zero",
    "malformed_message": "Error",  # 正常按键输入不会产生
    "decimal_key": ",",
    "digit_keys": "0123456789",
    "equals_keys": ("=",),
    "clear_keys": ("C", "AC"),
}

# 操作符参数
OPERATION_CONFIG = {
    # 层级越小越先计算
    "precedence": {
        "x": 1,
        "/": 1,
        "+": 2,
        "-": 2,
    },
    "aliases": {
        "*": "x",
        "×": "x",
        "÷": "/",
        ":": "/",
    },
}

# 数字显示格式（ru_RU 十进制风格：逗号小数点，无分组）
FORMAT_CONFIG = {
    "decimal_separator": ",",
    "use_grouping": False,
    "max_fraction_digits": 3,
    "rounding": "ROUND_HALF_EVEN",
    "infinity": "∞",
    "nan": "NaN",
}

# 批量按键序列
BATCH_CONFIG = {
    "key_column": "keys",
    "output_columns": ["display", "status", "value"],
    "output_path": "calculator_results.csv",
}

LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    tiers = OPERATION_CONFIG["precedence"]
    assert set(tiers) == {"+", "-", "x", "/"}, "每个操作必须有且仅有一个优先级"
    assert tiers["x"] == tiers["/"] < tiers["+"] == tiers["-"], "乘除必须先于加减"
    for alias, target in OPERATION_CONFIG["aliases"].items():
        assert target in tiers, f"别名 {alias} 指向未知操作 {target}"
        assert alias not in CALCULATOR_CONFIG["digit_keys"], f"别名 {alias} 与数字键冲突"
    assert CALCULATOR_CONFIG["decimal_key"] == FORMAT_CONFIG["decimal_separator"], "小数点键与显示格式不一致"
    assert FORMAT_CONFIG["max_fraction_digits"] >= 0
    logger.info("Configuration validated successfully!")
