import pytest

from algokit.calculator import calculate
from algokit.cli import main


def test_hypotenuse_example(capsys):
    assert main(["hypotenuse", "3", "4"]) == 0
    assert capsys.readouterr().out == "The hypotenuse is: 5.000000\n"


def test_hypotenuse_not_enough_arguments(capsys):
    assert main(["hypotenuse", "3"]) == 0
    assert capsys.readouterr().out.strip() == "Not enough arguments!"


@pytest.mark.parametrize(
    "n, expected",
    [("10", "2 3 5 7"), ("20", "2 3 5 7 11 13 17 19")],
)
def test_sieve_examples(capsys, n, expected):
    assert main(["sieve", n]) == 0
    assert capsys.readouterr().out.strip() == expected


def test_calc_addition(capsys):
    assert main(["calc", "+", "2.5", "4"]) == 0
    out = capsys.readouterr().out
    assert "you opted for addition" in out
    assert f"result: {calculate('+', 2.5, 4):.2f}" in out


def test_calc_division_by_zero(capsys):
    assert main(["calc", "/", "1", "0"]) == 1
    assert "ERROR:you opted division with denominator zero" in capsys.readouterr().out


def test_calc_unknown_operator(capsys):
    assert main(["calc", "%", "1", "2"]) == 1
    assert capsys.readouterr().out.strip() == "Cannot recognise the operator"


def test_missing_command_exits():
    with pytest.raises(SystemExit):
        main([])