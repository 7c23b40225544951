import argparse
from decimal import Decimal

import pytest

from finance_calc.cli import main, parse_extra
from finance_calc.models.loan import ExtraPayment


class TestParseExtra:
    def test_single_month(self):
        assert parse_extra("250@3") == ExtraPayment(Decimal("250"), 3, fill=False)

    def test_fill(self):
        assert parse_extra("100.50@6+") == ExtraPayment(Decimal("100.50"), 6, fill=True)

    @pytest.mark.parametrize("value", ["100", "abc@3", "100@x", "@"])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_extra(value)


class TestMain:
    def test_payment(self, capsys):
        assert main(["payment", "100000", "6", "360"]) == 0
        out = capsys.readouterr().out
        assert "$599.55" in out
        assert "$99,900.45" in out

    def test_table_with_extra(self, capsys):
        assert main(["table", "1000", "0.12", "12", "--extra", "5000@1"]) == 0
        out = capsys.readouterr().out
        assert "Amortization Table (1 months)" in out
        assert "921.15" in out

    def test_loan_savings(self, capsys):
        assert main(["loan", "12000", "12", "12", "--extra", "2000@1"]) == 0
        out = capsys.readouterr().out
        assert "Months:           10" in out
        assert "Interest saved:" in out

    def test_simple_loan(self, capsys):
        assert main(["simple-loan", "1000", "12", "12"]) == 0
        out = capsys.readouterr().out
        assert "$93.33" in out
        assert "Months saved" not in out

    def test_apy(self, capsys):
        assert main(["apy", "5", "--compound", "monthly"]) == 0
        assert "5.12%" in capsys.readouterr().out

    def test_non_amortizing_exits_nonzero(self, capsys):
        assert main(["table", "100000", "0.06", "360", "--payment", "400"]) == 1
        assert "error:" in capsys.readouterr().err
