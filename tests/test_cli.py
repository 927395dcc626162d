from philosim.cli import main


def test_wrong_number_of_arguments(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out == "Error: wrong number of arguments\n"


def test_invalid_input(capsys):
    assert main(["4", "abc", "1", "1"]) == 1
    assert capsys.readouterr().out == "Error: invalid input\n"


def test_zero_is_invalid(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert capsys.readouterr().out == "Error: invalid input\n"


def test_single_philosopher_exits_with_failure(capsys):
    assert main(["1", "60", "10", "10"]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")


def test_meal_limit_ends_cleanly(capsys):
    assert main(["3", "1000", "20", "20", "1"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    assert out.count("is eating") >= 3