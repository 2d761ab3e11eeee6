import math

import pandas as pd
import pytest

from data.session_loader import load_key_sequences, replay_keys, run_key_sequences, summarize_results


@pytest.fixture
def keys_csv(tmp_path):
    path = tmp_path / "keys.csv"
    pd.DataFrame({
        "name": ["precedence", "zero", "bad", "blank", "implicit"],
        "keys": ["2 + 3 x 4 =", "5 / 0 =", "2 ? 3", "", "10 / 4"],
    }).to_csv(path, index=False)
    return path


def test_load_drops_blank_rows(keys_csv):
    sequences = load_key_sequences(keys_csv)
    assert list(sequences["name"]) == ["precedence", "zero", "bad", "implicit"]


def test_load_missing_column(keys_csv):
    with pytest.raises(ValueError):
        load_key_sequences(keys_csv, key_column="buttons")


def test_replay_keys():
    assert replay_keys("3,5 + 1") == ("4,5", "ok", 4.5)
    display, status, value = replay_keys(["1", "/", "0"])
    assert (display, status) == ("Division by zero", "division_by_zero")
    assert math.isnan(value)


def test_run_and_summarize(keys_csv):
    results = run_key_sequences(load_key_sequences(keys_csv))

    assert list(results["display"]) == ["14", "Division by zero", "2", "2,5"]
    assert list(results["status"]) == ["ok", "division_by_zero", "invalid_key", "ok"]
    assert results["value"].iloc[0] == 14.0
    assert results["value"].iloc[3] == 2.5
    assert results["value"].iloc[1:3].isna().all()

    assert summarize_results(results) == {
        "ok": 2, "division_by_zero": 1, "invalid_key": 1, "total": 4
    }


def test_run_does_not_modify_input(keys_csv):
    sequences = load_key_sequences(keys_csv)
    run_key_sequences(sequences)
    assert "status" not in sequences.columns
