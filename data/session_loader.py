"""按键序列批量加载和回放模块"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core.errors import DivisionByZero, MalformedHistory
from session.calculator import CalculatorSession

logger = logging.getLogger(__name__)


def load_key_sequences(file_path, key_column=None):
    """
    加载按键序列CSV，每行一个计算。

    Parameters:
    - file_path: CSV文件路径
    - key_column: 按键列名（键之间用空白分隔），默认 BATCH_CONFIG['key_column']

    Returns:
    - DataFrame，已去掉按键为空的行
    """
    key_column = key_column or BATCH_CONFIG['key_column']
    logger.info(f"Loading key sequences from {file_path}")

    sequences = pd.read_csv(file_path, keep_default_na=False)

    if key_column not in sequences.columns:
        raise ValueError(f"Key column '{key_column}' not found in {file_path}.")

    sequences[key_column] = sequences[key_column].astype(str).str.strip()
    empty = sequences[key_column] == ''
    if empty.any():
        logger.warning(f"Dropping {empty.sum()} rows with no keys")
        sequences = sequences[~empty].reset_index(drop=True)

    logger.info(f"Loaded {len(sequences)} key sequences")
    return sequences


def replay_keys(keys):
    """
    在新会话中依次按下 keys，未以 = 结尾时补一个 =。

    Returns:
    - (display, status, value)
    """
    session = CalculatorSession()
    if isinstance(keys, str):
        keys = keys.split()
    keys = list(keys)
    if not keys or keys[-1] != '=':
        keys.append('=')

    try:
        display = session.press_keys(keys)
    except ValueError as e:
        logger.warning(f"Invalid key sequence {' '.join(keys)!r}: {e}")
        return session.display, 'invalid_key', np.nan

    if isinstance(session.last_error, DivisionByZero):
        return display, 'division_by_zero', np.nan
    if isinstance(session.last_error, MalformedHistory):
        return display, 'malformed', np.nan

    value = session.formatter.parse(display)
    return display, 'ok', np.nan if value is None else value


def run_key_sequences(sequences, key_column=None):
    """
    回放每一行按键，返回附加了 display/status/value 列的副本。

    Parameters:
    - sequences: load_key_sequences 返回的 DataFrame
    - key_column: 按键列名
    """
    key_column = key_column or BATCH_CONFIG['key_column']
    if key_column not in sequences.columns:
        raise ValueError(f"Key column '{key_column}' not found.")

    results = sequences.copy()
    rows = [replay_keys(keys) for keys in results[key_column]]
    display_col, status_col, value_col = BATCH_CONFIG['output_columns']

    results[display_col] = [row[0] for row in rows]
    results[status_col] = [row[1] for row in rows]
    results[value_col] = pd.Series([row[2] for row in rows], index=results.index, dtype=float)

    logger.info(f"Replayed {len(results)} key sequences")
    return results


def summarize_results(results):
    """按状态统计条数"""
    status_col = BATCH_CONFIG['output_columns'][1]
    counts = results[status_col].value_counts()
    summary = {status: int(count) for status, count in counts.items()}
    summary['total'] = int(len(results))
    return summary
