"""
Tests for CLI interface.
"""
import logging
from pathlib import Path

import yaml

from typer.testing import CliRunner

from cli import app

# Default CliRunner mixes stderr and stdout into the .output attribute,
# which is what we want for testing console output.
runner = CliRunner()


def create_temp_config(tmp_path: Path) -> Path:
    """Creates a temporary, valid YAML config file for testing."""
    config_path = tmp_path / "test_config.yaml"
    config_dict = {
        "benchmark": {
            "size": 1200, "min_size": 1000, "max_price": 1000, "seed": 1,
            "dataset_path": str(tmp_path / "large_dataset.txt"), "preview": 5,
        },
        "reporting": {"time_precision": 2},
    }
    config_path.write_text(yaml.dump(config_dict))
    return config_path


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "analyze" in result.output
    assert "benchmark" in result.output


def test_analyze_positional_prices() -> None:
    result = runner.invoke(app, ["analyze", "7", "1", "5", "3", "6", "4"])
    assert result.exit_code == 0, result.output
    assert "Running O(n²) method:" in result.output
    assert "Running O(n) method:" in result.output
    assert "Buy at price 1 (index 1)" in result.output
    assert "Profit: 5" in result.output


def test_analyze_prices_option_linear_only() -> None:
    result = runner.invoke(app, ["analyze", "--prices", "20,18,15,8,3,6,10,4,12", "--method", "linear"])
    assert result.exit_code == 0, result.output
    assert "Running O(n²) method:" not in result.output
    assert "Sell at price 12 (index 8)" in result.output


def test_analyze_no_prices_is_no_trade() -> None:
    result = runner.invoke(app, ["analyze"])
    assert result.exit_code == 0, result.output
    assert "Profit: 0" in result.output


def test_analyze_rejects_non_numeric() -> None:
    result = runner.invoke(app, ["analyze", "7", "abc"])
    assert result.exit_code == 1
    assert "Input Error" in result.output


def test_analyze_rejects_unknown_method() -> None:
    result = runner.invoke(app, ["analyze", "1", "2", "--method", "cubic"])
    assert result.exit_code == 1
    assert "Unknown method" in result.output


def test_benchmark_with_config(tmp_path: Path) -> None:
    config_path = create_temp_config(tmp_path)
    result = runner.invoke(app, ["benchmark", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "Generated dataset of 1200 elements" in result.output
    assert "faster" in result.output
    dataset = (tmp_path / "large_dataset.txt").read_text()
    assert len(dataset.split(",")) == 1200


def test_benchmark_size_clamped_and_output_override(tmp_path: Path) -> None:
    config_path = create_temp_config(tmp_path)
    output = tmp_path / "custom" / "prices.txt"
    result = runner.invoke(
        app, ["benchmark", "--config", str(config_path), "--size", "10", "--output", str(output)]
    )
    assert result.exit_code == 0, result.output
    assert "Generated dataset of 1000 elements" in result.output
    assert len(output.read_text().split(",")) == 1000


def test_benchmark_negative_size(tmp_path: Path) -> None:
    config_path = create_temp_config(tmp_path)
    result = runner.invoke(app, ["benchmark", "--config", str(config_path), "--size", "-5"])
    assert result.exit_code == 1
    assert "must not be negative" in result.output


def test_benchmark_write_failure(mocker, tmp_path: Path) -> None:
    mocker.patch("cli.run_the_benchmark", side_effect=OSError("disk full"))
    config_path = create_temp_config(tmp_path)
    result = runner.invoke(app, ["benchmark", "--config", str(config_path)])
    assert result.exit_code == 1
    assert "Could not write dataset" in result.output


def test_invalid_config_exits(tmp_path: Path) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("benchmark: { size: 10")
    result = runner.invoke(app, ["benchmark", "--config", str(config_path)])
    assert result.exit_code == 1
    assert "Configuration Error" in result.output


def test_missing_config_file() -> None:
    """Test that commands exit if the config file does not exist."""
    result = runner.invoke(app, ["benchmark", "--config", "nonexistent.yaml"])
    assert result.exit_code == 2


def test_check_command_passes() -> None:
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0, result.output
    assert "All 8 scenarios passed." in result.output


def test_check_command_fails_on_mismatch(mocker) -> None:
    from tradefinder.scenarios import Scenario, check_scenarios

    outcomes = check_scenarios([Scenario((1, 2), (0, 0), "Wrong on purpose")])
    mocker.patch("cli.check_scenarios", return_value=outcomes)
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 1


def test_interactive_uses_console_provider(mocker) -> None:
    m_run = mocker.patch("cli.run_interactive")
    result = runner.invoke(app, ["interactive"])
    assert result.exit_code == 0, result.output
    m_run.assert_called_once()


def test_interactive_interrupted(mocker) -> None:
    mocker.patch("cli.run_interactive", side_effect=KeyboardInterrupt)
    result = runner.invoke(app, ["interactive"])
    assert result.exit_code == 130
    assert "Interrupted." in result.output


def test_verbose_flag() -> None:
    result = runner.invoke(app, ["-v", "analyze", "1", "2"])
    assert result.exit_code == 0, result.output
    assert logging.getLogger().level == logging.DEBUG

    result = runner.invoke(app, ["analyze", "1", "2"])
    assert result.exit_code == 0, result.output
    assert logging.getLogger().level == logging.WARNING


def test_analyze_negative_prices_after_double_dash() -> None:
    result = runner.invoke(app, ["analyze", "--", "-5", "3"])
    assert result.exit_code == 0, result.output
    assert "Buy at price -5 (index 0)" in result.output
    assert "Profit: 8" in result.output


def test_analyze_help_mentions_negative_prices() -> None:
    result = runner.invoke(app, ["analyze", "--help"])
    assert result.exit_code == 0
    assert "negative" in result.output


def test_interactive_unexpected_error_exits_cleanly(mocker) -> None:
    mocker.patch("cli.run_interactive", side_effect=RuntimeError("boom"))
    result = runner.invoke(app, ["interactive"])
    assert result.exit_code == 1
    assert "unexpected error" in result.output
