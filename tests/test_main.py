import pandas as pd

from config.config import validate_config
from main import build_parser, main


def test_config_is_consistent():
    validate_config()


def test_single_sequence(capsys):
    args = build_parser().parse_args(["2", "+", "3", "x", "4"])
    assert main(args) == 0
    assert capsys.readouterr().out.strip() == "14"


def test_single_sequence_division_by_zero(capsys):
    args = build_parser().parse_args(["1", "/", "0", "="])
    assert main(args) == 1
    assert capsys.readouterr().out.strip() == "Division by zero"


def test_no_keys():
    assert main(build_parser().parse_args([])) == 2


def test_batch_file(tmp_path):
    keys_file = tmp_path / "keys.csv"
    output_path = tmp_path / "out.csv"
    pd.DataFrame({"keys": ["8 - 3 + 2 =", "9 x 9"]}).to_csv(keys_file, index=False)

    args = build_parser().parse_args([
        "--keys_file", str(keys_file), "--output_path", str(output_path)
    ])
    assert main(args) == 0

    saved = pd.read_csv(output_path)
    assert list(saved["status"]) == ["ok", "ok"]
    assert list(saved["value"]) == [7.0, 81.0]
