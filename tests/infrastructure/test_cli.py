"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from orderbot.infrastructure.cli.main import cli

MESSAGE = """/confirmation
Name: Rahim Uddin
Phone: 01700000000
Product code: TS01-M, TS01-L
Paid in advance: 100
COD: 600
"""


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("ORDERBOT_DATA_DIR", str(tmp_path))
    runner = CliRunner()

    def _run(*args, input=None):
        return runner.invoke(cli, list(args), input=input)

    return _run


@pytest.fixture
def stocked(run):
    result = run(
        "product", "add", "--id", "TS01", "--name", "Cotton Tee",
        "--buying-price", "150", "--selling-price", "300",
        "--size", "M=2", "--size", "L=1",
    )
    assert result.exit_code == 0, result.output
    return run


class TestProductCommands:

    def test_add_and_list(self, stocked):
        result = stocked("product", "list")
        assert result.exit_code == 0
        assert "TS01" in result.output
        assert "Cotton Tee" in result.output
        assert "150.00" in result.output

    def test_bad_size_format(self, run):
        result = run(
            "product", "add", "--id", "X", "--name", "X",
            "--buying-price", "1", "--selling-price", "2", "--size", "M",
        )
        assert result.exit_code != 0
        assert "Expected 'Size=Quantity'" in result.output

    def test_duplicate(self, stocked):
        result = stocked(
            "product", "add", "--id", "TS01", "--name", "Again",
            "--buying-price", "1", "--selling-price", "2",
        )
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestInventoryCommands:

    def test_set_and_show(self, stocked):
        result = stocked("inventory", "set", "--product", "TS01", "--size", "xl", "--quantity", "4")
        assert result.exit_code == 0
        assert "size XL set to 4 (7 in stock)" in result.output

        result = stocked("inventory", "show")
        assert "L:1, M:2, XL:4" in result.output

    def test_empty(self, run):
        assert "No inventory records found." in run("inventory", "show").output

    def test_unknown_product(self, run):
        result = run("inventory", "set", "--product", "NOPE", "--size", "M", "--quantity", "1")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestOrderCommands:

    def test_confirm_from_stdin_then_show(self, stocked):
        result = stocked("order", "confirm", "--user", "page-1", input=MESSAGE)
        assert result.exit_code == 0, result.output
        assert "confirmed" in result.output
        order_id = result.output.split("#", 1)[1].split()[0]

        shown = stocked("order", "show", "--id", order_id)
        assert shown.exit_code == 0
        assert "Rahim Uddin" in shown.output
        assert "status=confirmed" in shown.output
        # 600 - (300 - 100)
        assert "400.00" in shown.output

        inventory = stocked("inventory", "show")
        assert "L:0, M:1" in inventory.output

    def test_confirm_from_file(self, stocked, tmp_path):
        message = tmp_path / "message.txt"
        message.write_text(MESSAGE, encoding="utf-8")
        result = stocked("order", "confirm", "--user", "u", "--file", str(message))
        assert result.exit_code == 0, result.output

    def test_rejected_confirmation(self, stocked):
        result = stocked("order", "confirm", "--user", "u", input="Product code: TS01-S")
        assert result.exit_code == 1
        assert "[OutOfStock]" in result.output

    def test_require_trigger(self, stocked):
        result = stocked(
            "order", "confirm", "--user", "u", "--require-trigger",
            input="Product code: TS01-M",
        )
        assert result.exit_code == 1
        assert "not a /confirmation command" in result.output
        assert "M:2" in stocked("inventory", "show").output

    def test_show_missing(self, run):
        result = run("order", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output
