import pytest
from loguru import logger
from typer.testing import CliRunner

from canonhuff.cli import app

runner = CliRunner()

WEIGHTS = ["A=1", "B=1", "C=2", "D=2", "E=2", "F=5", "G=1", "H=1"]
LENGTHS = ["A=3", "B=3", "C=3", "D=3", "E=3", "F=2", "G=4", "H=4"]


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
    logger.disable("canonhuff")


class TestCli:
    def test_canonical(self) -> None:
        result = runner.invoke(app, ["canonical", *LENGTHS])
        assert result.exit_code == 0
        for code in ["00", "010", "011", "100", "101", "110", "1110", "1111"]:
            assert code in result.output

    def test_build(self) -> None:
        result = runner.invoke(app, ["build", *WEIGHTS])
        assert result.exit_code == 0
        assert "1010" in result.output
        assert "1110" in result.output

    def test_build_tree(self) -> None:
        result = runner.invoke(app, ["build", "--tree", "a=2", "b=1"])
        assert result.exit_code == 0
        assert "-> [a]" in result.output
        assert "-> (3)" in result.output

    def test_logging(self) -> None:
        result = runner.invoke(app, ["canonical", "-l", *LENGTHS])
        assert result.exit_code == 0
        assert "Bit length counts" in result.output

    def test_no_logging(self) -> None:
        result = runner.invoke(app, ["canonical", *LENGTHS])
        assert "Bit length counts" not in result.output

    def test_kraft_violation(self) -> None:
        result = runner.invoke(app, ["canonical", "a=1", "b=1", "c=1"])
        assert result.exit_code == 1
        assert "Kraft" in result.output

    def test_malformed_pair(self) -> None:
        result = runner.invoke(app, ["build", "A"])
        assert result.exit_code == 1
        assert "Expected SYMBOL=VALUE" in result.output

    def test_invalid_weight(self) -> None:
        result = runner.invoke(app, ["build", "A=heavy"])
        assert result.exit_code == 1
        assert "Invalid value" in result.output

    def test_negative_weight(self) -> None:
        result = runner.invoke(app, ["build", "A=-1", "B=2"])
        assert result.exit_code == 1
        assert "Invalid weight" in result.output

    def test_duplicate_symbol(self) -> None:
        result = runner.invoke(app, ["canonical", "A=1", "A=2"])
        assert result.exit_code == 1
        assert "more than once" in result.output
