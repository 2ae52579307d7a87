from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from conftest import write_json

from coinfmt import UINT128_MAX, coin
from coinfmt.cli.main import app
from coinfmt.io import read_coins_csv, write_coins_json


def _wallet_json(tmp_path: Path) -> Path:
    p = tmp_path / "wallet.json"
    write_coins_json(p, [coin(12345, "ETH"), coin(555, "BTC")])
    return p


def test_cli_version():
    from coinfmt import __version__

    result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_cli_parse_prints_amount_and_denom():
    result = CliRunner().invoke(app, ["parse", "123ucosm", "00123ucosm", "0ucosm"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["123\tucosm", "123\tucosm", "0\tucosm"]


def test_cli_parse_reports_errors_and_exits_nonzero():
    result = CliRunner().invoke(app, ["parse", "123", "ucosm", "7atom"])
    assert result.exit_code == 1
    assert "Missing denominator" in result.output
    assert "Missing amount or non-digit characters in amount" in result.output
    assert "7\tatom" in result.output


def test_cli_format():
    result = CliRunner().invoke(app, ["format", "0042", "ucosm"])
    assert result.exit_code == 0
    assert result.output.strip() == "42ucosm"


def test_cli_format_rejects_bad_amounts():
    runner = CliRunner()
    assert runner.invoke(app, ["format", "abc", "ucosm"]).exit_code != 0
    assert runner.invoke(app, ["format", str(UINT128_MAX + 1), "ucosm"]).exit_code != 0


def test_cli_has(tmp_path: Path):
    runner = CliRunner()
    wallet = str(_wallet_json(tmp_path))

    ok = runner.invoke(app, ["has", "777ETH", "--wallet", wallet])
    assert ok.exit_code == 0
    assert ok.output.strip() == "true"

    too_much = runner.invoke(app, ["has", "999999ETH", "--wallet", wallet])
    assert too_much.exit_code == 1
    assert too_much.output.strip() == "false"

    absent = runner.invoke(app, ["has", "1XRP", "--wallet", wallet])
    assert absent.exit_code == 1
    assert absent.output.strip() == "false"


def test_cli_has_rejects_malformed_required(tmp_path: Path):
    result = CliRunner().invoke(app, ["has", "ETH", "--wallet", str(_wallet_json(tmp_path))])
    assert result.exit_code == 2


def test_cli_convert_json_to_csv(tmp_path: Path):
    src = _wallet_json(tmp_path)
    dst = tmp_path / "out" / "wallet.csv"

    result = CliRunner().invoke(app, ["convert", str(src), str(dst)])

    assert result.exit_code == 0, result.output
    assert read_coins_csv(dst) == [coin(12345, "ETH"), coin(555, "BTC")]


def test_cli_convert_rejects_unknown_suffix(tmp_path: Path):
    src = _wallet_json(tmp_path)
    result = CliRunner().invoke(app, ["convert", str(src), str(tmp_path / "wallet.txt")])
    assert result.exit_code == 2


def test_cli_config_and_log_level_options(tmp_path: Path):
    cfg = tmp_path / "cfg.json"
    write_json(cfg, {"logLevel": "DEBUG"})
    runner = CliRunner()

    result = runner.invoke(app, ["--config", str(cfg), "parse", "1ucosm"])
    assert result.exit_code == 0

    bad = runner.invoke(app, ["--log-level", "chatty", "parse", "1ucosm"])
    assert bad.exit_code == 2

    missing = runner.invoke(app, ["--config", str(tmp_path / "nope.json"), "parse", "1ucosm"])
    assert missing.exit_code == 2
    assert json.loads(cfg.read_text(encoding="utf-8")) == {"logLevel": "DEBUG"}


def test_cli_parse_long_digit_runs():
    runner = CliRunner()

    padded = runner.invoke(app, ["parse", "0" * 5000 + "1ucosm"])
    assert padded.exit_code == 0, padded.output
    assert padded.output.splitlines() == ["1\tucosm"]

    huge = runner.invoke(app, ["parse", "9" * 5000 + "ucosm"])
    assert huge.exit_code == 1
    assert "Invalid amount: number too large to fit in target type" in huge.output


def test_cli_format_long_amounts():
    runner = CliRunner()

    padded = runner.invoke(app, ["format", "0" * 5000 + "42", "ucosm"])
    assert padded.exit_code == 0
    assert padded.output.strip() == "42ucosm"

    assert runner.invoke(app, ["format", "9" * 5000, "ucosm"]).exit_code == 2


def test_cli_missing_files_are_bad_parameters(tmp_path: Path):
    runner = CliRunner()

    has = runner.invoke(app, ["has", "1ETH", "--wallet", str(tmp_path / "nope.json")])
    assert has.exit_code == 2

    conv = runner.invoke(app, ["convert", str(tmp_path / "nope.csv"), str(tmp_path / "out.json")])
    assert conv.exit_code == 2
